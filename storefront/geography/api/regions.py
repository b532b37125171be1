"""Router de regiones — endpoints CRUD.

Region Router — CRUD endpoints for regions.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.database import get_db
from storefront.geography.schemas import RegionRequest, RegionResponse
from storefront.geography.services.region_service import region_service
from storefront.schemas.common import ApiResponse, no_content

router: APIRouter = APIRouter()


@router.get("", response_model=ApiResponse[list[RegionResponse]])
async def list_regions(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[list[RegionResponse]] | Response:
    """Lista todas las regiones; 204 si no hay ninguna.

    List all regions, or 204 when there are none.
    """
    regions = await region_service.list_regions(db)
    if not regions:
        return no_content()
    return ApiResponse.listing(regions, "Regiones obtenidas exitosamente")


@router.get("/{region_id}", response_model=ApiResponse[RegionResponse])
async def get_region(
    region_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[RegionResponse]:
    """Obtiene una región por id (Get a region by id)."""
    region = await region_service.get_region(db, region_id)
    return ApiResponse.ok(region, "Región encontrada")


@router.post("", response_model=ApiResponse[RegionResponse], status_code=201)
async def create_region(
    data: RegionRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[RegionResponse]:
    """Crea una región (Create a region)."""
    region = await region_service.create_region(db, data)
    await db.commit()
    return ApiResponse.ok(region, "Región creada exitosamente", status_code=201)


@router.put("/{region_id}", response_model=ApiResponse[RegionResponse])
async def update_region(
    region_id: int,
    data: RegionRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[RegionResponse]:
    """Actualiza una región (Update a region)."""
    region = await region_service.update_region(db, region_id, data)
    await db.commit()
    return ApiResponse.ok(region, "Región actualizada exitosamente")


@router.delete("/{region_id}", response_model=ApiResponse[None])
async def delete_region(
    region_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[None]:
    """Elimina una región sin comunas (Delete a region without comunas)."""
    await region_service.delete_region(db, region_id)
    await db.commit()
    return ApiResponse.ok(None, "Región eliminada exitosamente")
