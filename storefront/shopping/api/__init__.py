"""Routers del servicio de compras.

Shopping API Router package — Aggregates the shopping endpoints into a
single router mounted under ``/api``.

Included routers:
    - buys: compras (/api/buys)
    - details: detalles de compra (/api/details)
    - init: datos iniciales (/api/init/seed)
"""

from fastapi import APIRouter

from storefront.shopping.api.buys import router as buys_router
from storefront.shopping.api.details import router as details_router
from storefront.shopping.api.init import router as init_router

router: APIRouter = APIRouter()

router.include_router(buys_router, prefix="/buys", tags=["Compras"])
router.include_router(details_router, prefix="/details", tags=["Detalles"])
router.include_router(init_router, prefix="/init", tags=["Inicialización"])
