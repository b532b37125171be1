"""Router de detalles de compra.

Detail Router — CRUD endpoints for purchase line items plus listing by buy
and by product.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.database import get_db
from storefront.schemas.common import ApiResponse, no_content
from storefront.shopping.schemas import DetailRequest, DetailResponse
from storefront.shopping.services.detail_service import detail_service

router: APIRouter = APIRouter()


@router.get("", response_model=ApiResponse[list[DetailResponse]])
async def list_details(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[list[DetailResponse]] | Response:
    details = await detail_service.list_details(db)
    if not details:
        return no_content()
    return ApiResponse.listing(details, "Detalles obtenidos exitosamente")


@router.get("/buy/{buy_id}", response_model=ApiResponse[list[DetailResponse]])
async def list_details_by_buy(
    buy_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[list[DetailResponse]] | Response:
    """Lista las líneas de una compra; 404 si la compra no existe."""
    details = await detail_service.list_by_buy(db, buy_id)
    if not details:
        return no_content()
    return ApiResponse.listing(details, "Detalles de la compra obtenidos exitosamente")


@router.get("/product/{product_id}", response_model=ApiResponse[list[DetailResponse]])
async def list_details_by_product(
    product_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[list[DetailResponse]] | Response:
    """Historial de ventas de un producto; 404 si el producto no existe."""
    details = await detail_service.list_by_product(db, product_id)
    if not details:
        return no_content()
    return ApiResponse.listing(details, "Detalles del producto obtenidos exitosamente")


@router.get("/{detail_id}", response_model=ApiResponse[DetailResponse])
async def get_detail(
    detail_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[DetailResponse]:
    detail = await detail_service.get_detail(db, detail_id)
    return ApiResponse.ok(detail, "Detalle encontrado exitosamente")


@router.post("", response_model=ApiResponse[DetailResponse], status_code=201)
async def create_detail(
    data: DetailRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[DetailResponse]:
    """Crea una línea de compra (Create a line item)."""
    detail = await detail_service.create_detail(db, data)
    await db.commit()
    return ApiResponse.ok(detail, "Detalle creado exitosamente", status_code=201)


@router.put("/{detail_id}", response_model=ApiResponse[DetailResponse])
async def update_detail(
    detail_id: int,
    data: DetailRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[DetailResponse]:
    """Actualiza una línea de compra (Update a line item)."""
    detail = await detail_service.update_detail(db, detail_id, data)
    await db.commit()
    return ApiResponse.ok(detail, "Detalle actualizado exitosamente")


@router.delete("/{detail_id}", response_model=ApiResponse[None])
async def delete_detail(
    detail_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[None]:
    await detail_service.delete_detail(db, detail_id)
    await db.commit()
    return ApiResponse.ok(None, "Detalle eliminado exitosamente")
