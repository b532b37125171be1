"""Routers del servicio de geografía.

Geography API Router package — Aggregates the geography endpoints into a
single router mounted under ``/api``.

Included routers:
    - regions: regiones (/api/regions)
    - comunas: comunas (/api/comunas)
    - addresses: direcciones (/api/addresses)
    - init: datos iniciales (/api/init/seed)
"""

from fastapi import APIRouter

from storefront.geography.api.addresses import router as addresses_router
from storefront.geography.api.comunas import router as comunas_router
from storefront.geography.api.init import router as init_router
from storefront.geography.api.regions import router as regions_router

router: APIRouter = APIRouter()

router.include_router(regions_router, prefix="/regions", tags=["Regiones"])
router.include_router(comunas_router, prefix="/comunas", tags=["Comunas"])
router.include_router(addresses_router, prefix="/addresses", tags=["Direcciones"])
router.include_router(init_router, prefix="/init", tags=["Inicialización"])
