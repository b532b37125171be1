"""Repositorio de compras.

Buy Repository — Buys are always listed newest first.
"""

from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from storefront.repositories.base import BaseRepository
from storefront.shopping.models import Buy


class BuyRepository(BaseRepository[Buy]):
    """Consultas sobre la tabla buys.

    Repository handling database queries for the buys table.
    """

    def __init__(self) -> None:
        super().__init__(Buy)

    async def list_newest_first(
        self,
        db: AsyncSession,
        user_id: int | None = None,
        status_id: int | None = None,
    ) -> Sequence[Buy]:
        """Lista compras de la más reciente a la más antigua.

        List buys ordered by ``buy_date`` descending, optionally filtered by
        user or status.
        """
        return await self.get_all(
            db,
            filters={"user_id": user_id, "status_id": status_id},
            order_by=Buy.buy_date.desc(),
        )

    async def get_by_order_number(self, db: AsyncSession, order_number: str) -> Buy | None:
        """Busca una compra por número de orden (Find a buy by order number)."""
        return await self.find_one_by(db, order_number=order_number)


# Singleton
buy_repository: BuyRepository = BuyRepository()
