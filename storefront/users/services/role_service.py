"""Servicio de roles (solo lectura).

Role Service — Read access to the roles.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from storefront.users.models import Role
from storefront.users.repositories.role_repository import role_repository
from storefront.users.schemas import RoleResponse
from storefront.utils.exceptions import NotFoundError


class RoleService:
    """Consultas de roles (Role queries)."""

    @staticmethod
    def to_response(role: Role) -> RoleResponse:
        return RoleResponse(role_id=role.id, name=role.name)

    async def list_roles(self, db: AsyncSession) -> list[RoleResponse]:
        roles = await role_repository.get_all(db)
        return [self.to_response(r) for r in roles]

    async def get_role(self, db: AsyncSession, role_id: int) -> RoleResponse:
        """Obtiene un rol por id.

        Raises:
            NotFoundError: El rol no existe (Role not found)
        """
        role: Role | None = await role_repository.get_by_id(db, role_id)
        if role is None:
            raise NotFoundError("Rol no encontrado")
        return self.to_response(role)


# Singleton
role_service: RoleService = RoleService()
