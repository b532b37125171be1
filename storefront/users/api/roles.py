"""Router de roles — solo lectura.

Role Router — read-only access to the roles.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.database import get_db
from storefront.schemas.common import ApiResponse, no_content
from storefront.users.schemas import RoleResponse
from storefront.users.services.role_service import role_service

router: APIRouter = APIRouter()


@router.get("", response_model=ApiResponse[list[RoleResponse]])
async def list_roles(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[list[RoleResponse]] | Response:
    roles = await role_service.list_roles(db)
    if not roles:
        return no_content()
    return ApiResponse.listing(roles, "Roles obtenidos exitosamente")


@router.get("/{role_id}", response_model=ApiResponse[RoleResponse])
async def get_role(
    role_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[RoleResponse]:
    role = await role_service.get_role(db, role_id)
    return ApiResponse.ok(role, "Rol encontrado")
