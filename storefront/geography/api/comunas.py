"""Router de comunas — endpoints CRUD y filtro por región.

Comuna Router — CRUD endpoints for comunas plus listing by region.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.database import get_db
from storefront.geography.schemas import ComunaRequest, ComunaResponse
from storefront.geography.services.comuna_service import comuna_service
from storefront.schemas.common import ApiResponse, no_content

router: APIRouter = APIRouter()


@router.get("", response_model=ApiResponse[list[ComunaResponse]])
async def list_comunas(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[list[ComunaResponse]] | Response:
    """Lista todas las comunas; 204 si no hay ninguna.

    List all comunas with their region, or 204 when there are none.
    """
    comunas = await comuna_service.list_comunas(db)
    if not comunas:
        return no_content()
    return ApiResponse.listing(comunas, "Comunas obtenidas exitosamente")


@router.get("/region/{region_id}", response_model=ApiResponse[list[ComunaResponse]])
async def list_comunas_by_region(
    region_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[list[ComunaResponse]] | Response:
    """Lista las comunas de una región (List the comunas of a region)."""
    comunas = await comuna_service.list_comunas(db, region_id=region_id)
    if not comunas:
        return no_content()
    return ApiResponse.listing(comunas, "Comunas de la región obtenidas exitosamente")


@router.get("/{comuna_id}", response_model=ApiResponse[ComunaResponse])
async def get_comuna(
    comuna_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[ComunaResponse]:
    """Obtiene una comuna por id (Get a comuna by id)."""
    comuna = await comuna_service.get_comuna(db, comuna_id)
    return ApiResponse.ok(comuna, "Comuna encontrada")


@router.post("", response_model=ApiResponse[ComunaResponse], status_code=201)
async def create_comuna(
    data: ComunaRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[ComunaResponse]:
    """Crea una comuna (Create a comuna)."""
    comuna = await comuna_service.create_comuna(db, data)
    await db.commit()
    return ApiResponse.ok(comuna, "Comuna creada exitosamente", status_code=201)


@router.put("/{comuna_id}", response_model=ApiResponse[ComunaResponse])
async def update_comuna(
    comuna_id: int,
    data: ComunaRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[ComunaResponse]:
    """Actualiza una comuna (Update a comuna)."""
    comuna = await comuna_service.update_comuna(db, comuna_id, data)
    await db.commit()
    return ApiResponse.ok(comuna, "Comuna actualizada exitosamente")


@router.delete("/{comuna_id}", response_model=ApiResponse[None])
async def delete_comuna(
    comuna_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[None]:
    """Elimina una comuna (Delete a comuna)."""
    await comuna_service.delete_comuna(db, comuna_id)
    await db.commit()
    return ApiResponse.ok(None, "Comuna eliminada exitosamente")
