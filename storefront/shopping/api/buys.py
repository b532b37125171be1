"""Router de compras — CRUD, búsqueda por número de orden y filtros.

Buy Router — CRUD endpoints for purchases plus lookup by order number and
listing by user or status.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.database import get_db
from storefront.schemas.common import ApiResponse, no_content
from storefront.shopping.schemas import BuyRequest, BuyResponse
from storefront.shopping.services.buy_service import buy_service

router: APIRouter = APIRouter()


@router.get("", response_model=ApiResponse[list[BuyResponse]])
async def list_buys(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[list[BuyResponse]] | Response:
    """Lista todas las compras, la más reciente primero; 204 si no hay ninguna."""
    buys = await buy_service.list_buys(db)
    if not buys:
        return no_content()
    return ApiResponse.listing(buys, "Compras obtenidas exitosamente")


@router.get("/order/{order_number}", response_model=ApiResponse[BuyResponse])
async def get_buy_by_order_number(
    order_number: str,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[BuyResponse]:
    """Obtiene una compra por número de orden (Get a buy by order number)."""
    buy = await buy_service.get_by_order_number(db, order_number)
    return ApiResponse.ok(buy, "Compra encontrada exitosamente mediante número de orden")


@router.get("/user/{user_id}", response_model=ApiResponse[list[BuyResponse]])
async def list_buys_by_user(
    user_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[list[BuyResponse]] | Response:
    """Lista las compras de un usuario.

    The user is confirmed against the users service first; an unknown user
    answers 404.
    """
    buys = await buy_service.list_by_user(db, user_id)
    if not buys:
        return no_content()
    return ApiResponse.listing(buys, "Compras del usuario obtenidas exitosamente")


@router.get("/status/{status_id}", response_model=ApiResponse[list[BuyResponse]])
async def list_buys_by_status(
    status_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[list[BuyResponse]] | Response:
    """Lista las compras con un estado (List buys with a status)."""
    buys = await buy_service.list_by_status(db, status_id)
    if not buys:
        return no_content()
    return ApiResponse.listing(buys, "Compras por estado obtenidas exitosamente")


@router.get("/{buy_id}", response_model=ApiResponse[BuyResponse])
async def get_buy(
    buy_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[BuyResponse]:
    """Obtiene una compra por id (Get a buy by id)."""
    buy = await buy_service.get_buy(db, buy_id)
    return ApiResponse.ok(buy, "Compra encontrada exitosamente")


@router.post("", response_model=ApiResponse[BuyResponse], status_code=201)
async def create_buy(
    data: BuyRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[BuyResponse]:
    """Crea una compra (Create a buy)."""
    buy = await buy_service.create_buy(db, data)
    await db.commit()
    return ApiResponse.ok(buy, "Compra creada exitosamente", status_code=201)


@router.put("/{buy_id}", response_model=ApiResponse[BuyResponse])
async def update_buy(
    buy_id: int,
    data: BuyRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[BuyResponse]:
    """Actualiza estado y/o método de pago (Update status and/or payment method)."""
    buy = await buy_service.update_buy(db, buy_id, data)
    await db.commit()
    return ApiResponse.ok(buy, "Compra actualizada exitosamente")


@router.delete("/{buy_id}", response_model=ApiResponse[None])
async def delete_buy(
    buy_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[None]:
    """Elimina una compra y sus detalles (Delete a buy and its details)."""
    await buy_service.delete_buy(db, buy_id)
    await db.commit()
    return ApiResponse.ok(None, "Compra eliminada exitosamente")
