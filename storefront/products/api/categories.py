"""Router de categorías — endpoints CRUD.

Category Router — CRUD endpoints for product categories.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.database import get_db
from storefront.products.schemas import CategoryRequest, CategoryResponse
from storefront.products.services.category_service import category_service
from storefront.schemas.common import ApiResponse, no_content

router: APIRouter = APIRouter()


@router.get("", response_model=ApiResponse[list[CategoryResponse]])
async def list_categories(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[list[CategoryResponse]] | Response:
    """Lista todas las categorías; 204 si no hay ninguna."""
    categories = await category_service.list_categories(db)
    if not categories:
        return no_content()
    return ApiResponse.listing(categories, "Categorías obtenidas exitosamente")


@router.get("/{category_id}", response_model=ApiResponse[CategoryResponse])
async def get_category(
    category_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[CategoryResponse]:
    """Obtiene una categoría por id (Get a category by id)."""
    category = await category_service.get_category(db, category_id)
    return ApiResponse.ok(category, "Categoría encontrada exitosamente")


@router.post("", response_model=ApiResponse[CategoryResponse], status_code=201)
async def create_category(
    data: CategoryRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[CategoryResponse]:
    """Crea una categoría (Create a category)."""
    category = await category_service.create_category(db, data)
    await db.commit()
    return ApiResponse.ok(category, "Categoría creada exitosamente", status_code=201)


@router.put("/{category_id}", response_model=ApiResponse[CategoryResponse])
async def update_category(
    category_id: int,
    data: CategoryRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[CategoryResponse]:
    """Renombra una categoría (Rename a category)."""
    category = await category_service.update_category(db, category_id, data)
    await db.commit()
    return ApiResponse.ok(category, "Categoría actualizada exitosamente")


@router.delete("/{category_id}", response_model=ApiResponse[None])
async def delete_category(
    category_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[None]:
    """Elimina una categoría sin productos (Delete a category without products)."""
    await category_service.delete_category(db, category_id)
    await db.commit()
    return ApiResponse.ok(None, "Categoría eliminada exitosamente")
