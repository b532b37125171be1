"""Repositorio de regiones.

Region Repository — CRUD plus name lookup for regions.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from storefront.geography.models import Region
from storefront.repositories.base import BaseRepository


class RegionRepository(BaseRepository[Region]):
    """Consultas sobre la tabla regions.

    Repository handling database queries for the regions table.
    """

    def __init__(self) -> None:
        super().__init__(Region)

    async def get_by_name(self, db: AsyncSession, name: str) -> Region | None:
        """Busca una región por nombre exacto (Find a region by exact name)."""
        return await self.find_one_by(db, name=name)


# Singleton
region_repository: RegionRepository = RegionRepository()
