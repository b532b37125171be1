"""Router de direcciones — endpoints CRUD y filtro por usuario.

Address Router — CRUD endpoints for shipping addresses plus listing by user.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.database import get_db
from storefront.geography.schemas import AddressRequest, AddressResponse
from storefront.geography.services.address_service import address_service
from storefront.schemas.common import ApiResponse, no_content

router: APIRouter = APIRouter()


@router.get("", response_model=ApiResponse[list[AddressResponse]])
async def list_addresses(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[list[AddressResponse]] | Response:
    """Lista todas las direcciones; 204 si no hay ninguna.

    List all addresses, or 204 when there are none.
    """
    addresses = await address_service.list_addresses(db)
    if not addresses:
        return no_content()
    return ApiResponse.listing(addresses, "Direcciones obtenidas exitosamente")


@router.get("/user/{user_id}", response_model=ApiResponse[list[AddressResponse]])
async def list_addresses_by_user(
    user_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[list[AddressResponse]] | Response:
    """Lista las direcciones de un usuario.

    The user is confirmed against the users service first; an unknown user
    answers 404.
    """
    addresses = await address_service.list_by_user(db, user_id)
    if not addresses:
        return no_content()
    return ApiResponse.listing(addresses, "Direcciones del usuario obtenidas exitosamente")


@router.get("/{address_id}", response_model=ApiResponse[AddressResponse])
async def get_address(
    address_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[AddressResponse]:
    """Obtiene una dirección por id (Get an address by id)."""
    address = await address_service.get_address(db, address_id)
    return ApiResponse.ok(address, "Dirección encontrada")


@router.post("", response_model=ApiResponse[AddressResponse], status_code=201)
async def create_address(
    data: AddressRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[AddressResponse]:
    """Crea una dirección (Create an address)."""
    address = await address_service.create_address(db, data)
    await db.commit()
    return ApiResponse.ok(address, "Dirección creada exitosamente", status_code=201)


@router.put("/{address_id}", response_model=ApiResponse[AddressResponse])
async def update_address(
    address_id: int,
    data: AddressRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[AddressResponse]:
    """Actualiza una dirección (Update an address)."""
    address = await address_service.update_address(db, address_id, data)
    await db.commit()
    return ApiResponse.ok(address, "Dirección actualizada exitosamente")


@router.delete("/{address_id}", response_model=ApiResponse[None])
async def delete_address(
    address_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[None]:
    """Elimina una dirección (Delete an address)."""
    await address_service.delete_address(db, address_id)
    await db.commit()
    return ApiResponse.ok(None, "Dirección eliminada exitosamente")
