"""Router de estados — solo lectura.

Status Router — read-only access to the status catalogue.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.database import get_db
from storefront.products.schemas import StatusResponse
from storefront.products.services.status_service import status_service
from storefront.schemas.common import ApiResponse, no_content

router: APIRouter = APIRouter()


@router.get("", response_model=ApiResponse[list[StatusResponse]])
async def list_statuses(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[list[StatusResponse]] | Response:
    statuses = await status_service.list_statuses(db)
    if not statuses:
        return no_content()
    return ApiResponse.listing(statuses, "Estados obtenidos exitosamente")


@router.get("/{status_id}", response_model=ApiResponse[StatusResponse])
async def get_status(
    status_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[StatusResponse]:
    status = await status_service.get_status(db, status_id)
    return ApiResponse.ok(status, "Estado encontrado exitosamente")
