"""Router de inicialización — carga de datos iniciales.

Init Router — one-shot fixture loading for the products service.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.database import get_db
from storefront.products.seed import seed_products
from storefront.schemas.common import ApiResponse

router: APIRouter = APIRouter()


@router.post("/seed", response_model=ApiResponse[None])
async def seed(db: Annotated[AsyncSession, Depends(get_db)]) -> ApiResponse[None]:
    """Inserta estados, categorías y productos de ejemplo (Seed the catalogue)."""
    message: str = await seed_products(db)
    return ApiResponse.ok(None, message)
