"""Repositorio de direcciones.

Address Repository — Addresses are read joined with comuna and region.
"""

from typing import Sequence

from sqlalchemy import Row, Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.geography.models import Address, Comuna, Region
from storefront.repositories.base import BaseRepository


class AddressRepository(BaseRepository[Address]):
    """Consultas sobre la tabla addresses.

    Repository handling database queries for the addresses table.
    """

    def __init__(self) -> None:
        super().__init__(Address)

    def _joined(self) -> Select:
        return (
            select(Address, Comuna, Region)
            .join(Comuna, Address.comuna_id == Comuna.id)
            .join(Region, Comuna.region_id == Region.id)
        )

    async def list_with_location(
        self,
        db: AsyncSession,
        user_id: int | None = None,
    ) -> Sequence[Row]:
        """Lista direcciones con comuna y región.

        List addresses joined with comuna and region, optionally for one user.

        Args:
            db: Sesión asíncrona (Async database session)
            user_id: Filtro por usuario remoto (Optional remote user filter)

        Returns:
            Sequence[Row]: Filas (dirección, comuna, región)
        """
        query: Select = self._joined()
        if user_id is not None:
            query = query.where(Address.user_id == user_id)
        result = await db.execute(query.order_by(Address.id))
        return result.all()

    async def get_with_location(
        self,
        db: AsyncSession,
        address_id: int,
    ) -> Row | None:
        """Obtiene una dirección con comuna y región (Fetch one address with its location)."""
        result = await db.execute(self._joined().where(Address.id == address_id))
        return result.first()


# Singleton
address_repository: AddressRepository = AddressRepository()
