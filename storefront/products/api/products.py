"""Router de productos — CRUD, filtros y búsqueda.

Product Router — CRUD endpoints for products plus listing by category, by
status and a name search.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.database import get_db
from storefront.products.schemas import ProductRequest, ProductResponse
from storefront.products.services.product_service import product_service
from storefront.schemas.common import ApiResponse, no_content

router: APIRouter = APIRouter()


def _listing(products: list[ProductResponse], message: str) -> ApiResponse[list[ProductResponse]] | Response:
    if not products:
        return no_content()
    return ApiResponse.listing(products, message)


@router.get("", response_model=ApiResponse[list[ProductResponse]])
async def list_products(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[list[ProductResponse]] | Response:
    """Lista todos los productos; 204 si no hay ninguno.

    List all products with category and status, or 204 when there are none.
    """
    products = await product_service.list_products(db)
    return _listing(products, "Productos obtenidos exitosamente")


@router.get("/search", response_model=ApiResponse[list[ProductResponse]])
async def search_products(
    db: Annotated[AsyncSession, Depends(get_db)],
    query: Annotated[str, Query(description="Texto a buscar en el nombre")],
) -> ApiResponse[list[ProductResponse]] | Response:
    """Busca productos por nombre, sin distinguir mayúsculas.

    Case-insensitive substring search; 204 when nothing matches.
    """
    products = await product_service.search_products(db, query)
    return _listing(products, "Búsqueda completada exitosamente")


@router.get("/category/{category_id}", response_model=ApiResponse[list[ProductResponse]])
async def list_products_by_category(
    category_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[list[ProductResponse]] | Response:
    """Lista los productos de una categoría (List products of a category)."""
    products = await product_service.list_products(db, category_id=category_id)
    return _listing(products, "Productos de la categoría obtenidos exitosamente")


@router.get("/status/{status_id}", response_model=ApiResponse[list[ProductResponse]])
async def list_products_by_status(
    status_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[list[ProductResponse]] | Response:
    """Lista los productos con un estado (List products with a status)."""
    products = await product_service.list_products(db, status_id=status_id)
    return _listing(products, "Productos por estado obtenidos exitosamente")


@router.get("/{product_id}", response_model=ApiResponse[ProductResponse])
async def get_product(
    product_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[ProductResponse]:
    """Obtiene un producto por id (Get a product by id)."""
    product = await product_service.get_product(db, product_id)
    return ApiResponse.ok(product, "Producto encontrado exitosamente")


@router.post("", response_model=ApiResponse[ProductResponse], status_code=201)
async def create_product(
    data: ProductRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[ProductResponse]:
    """Crea un producto (Create a product)."""
    product = await product_service.create_product(db, data)
    await db.commit()
    return ApiResponse.ok(product, "Producto creado exitosamente", status_code=201)


@router.put("/{product_id}", response_model=ApiResponse[ProductResponse])
async def update_product(
    product_id: int,
    data: ProductRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[ProductResponse]:
    """Actualiza parcialmente un producto (Partially update a product)."""
    product = await product_service.update_product(db, product_id, data)
    await db.commit()
    return ApiResponse.ok(product, "Producto actualizado exitosamente")


@router.delete("/{product_id}", response_model=ApiResponse[None])
async def delete_product(
    product_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[None]:
    """Elimina un producto (Delete a product)."""
    await product_service.delete_product(db, product_id)
    await db.commit()
    return ApiResponse.ok(None, "Producto eliminado exitosamente")
