"""Router de inicialización — carga de datos iniciales.

Init Router — one-shot fixture loading for the geography service.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.database import get_db
from storefront.geography.seed import seed_geography
from storefront.schemas.common import ApiResponse

router: APIRouter = APIRouter()


@router.post("/seed", response_model=ApiResponse[None])
async def seed(db: Annotated[AsyncSession, Depends(get_db)]) -> ApiResponse[None]:
    """Inserta regiones y comunas de Chile (Seed Chilean regions and comunas)."""
    message: str = await seed_geography(db)
    return ApiResponse.ok(None, message)
