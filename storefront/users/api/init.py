"""Router de inicialización — carga de datos iniciales.

Init Router — one-shot fixture loading for the users service.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.database import get_db
from storefront.schemas.common import ApiResponse
from storefront.users.seed import seed_users

router: APIRouter = APIRouter()


@router.post("/seed", response_model=ApiResponse[None])
async def seed(db: Annotated[AsyncSession, Depends(get_db)]) -> ApiResponse[None]:
    """Crea los roles y el usuario administrador (Seed roles and the admin user)."""
    message: str = await seed_users(db)
    return ApiResponse.ok(None, message)
