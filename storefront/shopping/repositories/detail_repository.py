"""Repositorio de detalles.

Detail Repository — Line items of a purchase.
"""

from typing import Sequence

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.repositories.base import BaseRepository
from storefront.shopping.models import Detail


class DetailRepository(BaseRepository[Detail]):
    """Consultas sobre la tabla details."""

    def __init__(self) -> None:
        super().__init__(Detail)

    async def list_by_buy(self, db: AsyncSession, buy_id: int) -> Sequence[Detail]:
        return await self.get_all(db, filters={"buy_id": buy_id})

    async def list_by_product(self, db: AsyncSession, product_id: int) -> Sequence[Detail]:
        return await self.get_all(db, filters={"product_id": product_id})

    async def delete_by_buy(self, db: AsyncSession, buy_id: int) -> int:
        """Elimina todas las líneas de una compra.

        Delete every detail of a buy in one statement.

        Returns:
            int: Filas eliminadas (Deleted row count)
        """
        result = await db.execute(delete(Detail).where(Detail.buy_id == buy_id))
        await db.flush()
        return result.rowcount


# Singleton
detail_repository: DetailRepository = DetailRepository()
