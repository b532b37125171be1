"""Repositorio de usuarios.

User Repository — Users are read joined with their role.
"""

from typing import Sequence

from sqlalchemy import Row, Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.repositories.base import BaseRepository
from storefront.users.models import Role, User


class UserRepository(BaseRepository[User]):
    """Consultas sobre la tabla users.

    Repository handling database queries for the users table.
    """

    def __init__(self) -> None:
        super().__init__(User)

    def _joined(self) -> Select:
        return select(User, Role).join(Role, User.role_id == Role.id)

    async def list_with_role(self, db: AsyncSession) -> Sequence[Row]:
        """Lista usuarios con su rol (List users joined with their role)."""
        result = await db.execute(self._joined().order_by(User.id))
        return result.all()

    async def get_with_role(self, db: AsyncSession, user_id: int) -> Row | None:
        """Obtiene un usuario con su rol (Fetch one user joined with its role)."""
        result = await db.execute(self._joined().where(User.id == user_id))
        return result.first()

    async def get_by_email(self, db: AsyncSession, email: str) -> User | None:
        """Busca un usuario por correo (Find a user by email)."""
        return await self.find_one_by(db, email=email)

    async def get_by_rut(self, db: AsyncSession, rut: str) -> User | None:
        return await self.find_one_by(db, rut=rut)


# Singleton
user_repository: UserRepository = UserRepository()
