"""Routers del servicio de productos.

Products API Router package — Aggregates the products endpoints into a
single router mounted under ``/api``.

Included routers:
    - categories: categorías (/api/categories)
    - statuses: estados, solo lectura (/api/statuses)
    - products: productos (/api/products)
    - init: datos iniciales (/api/init/seed)
"""

from fastapi import APIRouter

from storefront.products.api.categories import router as categories_router
from storefront.products.api.init import router as init_router
from storefront.products.api.products import router as products_router
from storefront.products.api.statuses import router as statuses_router

router: APIRouter = APIRouter()

router.include_router(categories_router, prefix="/categories", tags=["Categorías"])
router.include_router(statuses_router, prefix="/statuses", tags=["Estados"])
router.include_router(products_router, prefix="/products", tags=["Productos"])
router.include_router(init_router, prefix="/init", tags=["Inicialización"])
