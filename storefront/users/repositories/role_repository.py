"""Repositorio de roles.

Role Repository — Roles are read-only over the API.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from storefront.repositories.base import BaseRepository
from storefront.users.models import Role


class RoleRepository(BaseRepository[Role]):
    """Consultas sobre la tabla roles."""

    def __init__(self) -> None:
        super().__init__(Role)

    async def get_by_name(self, db: AsyncSession, name: str) -> Role | None:
        return await self.find_one_by(db, name=name)


# Singleton
role_repository: RoleRepository = RoleRepository()
