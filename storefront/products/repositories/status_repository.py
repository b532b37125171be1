"""Repositorio de estados.

Status Repository — The status catalogue is read-only over the API; rows
are inserted by the seed step only.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from storefront.products.models import Status
from storefront.repositories.base import BaseRepository


class StatusRepository(BaseRepository[Status]):
    """Consultas sobre la tabla statuses."""

    def __init__(self) -> None:
        super().__init__(Status)

    async def get_by_name(self, db: AsyncSession, name: str) -> Status | None:
        return await self.find_one_by(db, name=name)


# Singleton
status_repository: StatusRepository = StatusRepository()
