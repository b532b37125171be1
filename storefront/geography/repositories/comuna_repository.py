"""Repositorio de comunas.

Comuna Repository — Comunas are always read joined with their region, so
responses never depend on lazy relationship loading.
"""

from typing import Sequence

from sqlalchemy import Row, Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.geography.models import Comuna, Region
from storefront.repositories.base import BaseRepository


class ComunaRepository(BaseRepository[Comuna]):
    """Consultas sobre la tabla comunas.

    Repository handling database queries for the comunas table.
    """

    def __init__(self) -> None:
        super().__init__(Comuna)

    def _joined(self) -> Select:
        # comuna + región en una sola consulta
        return select(Comuna, Region).join(Region, Comuna.region_id == Region.id)

    async def list_with_region(
        self,
        db: AsyncSession,
        region_id: int | None = None,
    ) -> Sequence[Row]:
        """Lista comunas junto a su región.

        List comunas joined with their region, optionally for a single region.

        Args:
            db: Sesión asíncrona (Async database session)
            region_id: Filtro por región (Optional region filter)

        Returns:
            Sequence[Row]: Filas (comuna, región) (Rows of (comuna, region))
        """
        query: Select = self._joined()
        if region_id is not None:
            query = query.where(Comuna.region_id == region_id)
        result = await db.execute(query.order_by(Comuna.id))
        return result.all()

    async def get_with_region(
        self,
        db: AsyncSession,
        comuna_id: int,
    ) -> Row | None:
        """Obtiene una comuna con su región (Fetch one comuna joined with its region)."""
        result = await db.execute(self._joined().where(Comuna.id == comuna_id))
        return result.first()

    async def get_by_name_in_region(
        self,
        db: AsyncSession,
        name: str,
        region_id: int,
    ) -> Comuna | None:
        """Busca una comuna por nombre dentro de una región.

        Find a comuna by exact name within a region.
        """
        return await self.find_one_by(db, name=name, region_id=region_id)


# Singleton
comuna_repository: ComunaRepository = ComunaRepository()
