"""Router de inicialización — carga de datos iniciales.

Init Router — one-shot fixture loading for the shopping service.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.database import get_db
from storefront.schemas.common import ApiResponse
from storefront.shopping.seed import seed_shopping

router: APIRouter = APIRouter()


@router.post("/seed", response_model=ApiResponse[None])
async def seed(db: Annotated[AsyncSession, Depends(get_db)]) -> ApiResponse[None]:
    """Inserta compras y detalles de ejemplo (Seed example buys and details)."""
    message: str = await seed_shopping(db)
    return ApiResponse.ok(None, message)
