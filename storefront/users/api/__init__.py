"""Routers del servicio de usuarios.

Users API Router package — Aggregates the users endpoints into a single
router mounted under ``/api``.

Included routers:
    - roles: roles, solo lectura (/api/roles)
    - users: usuarios (/api/users)
    - init: datos iniciales (/api/init/seed)
"""

from fastapi import APIRouter

from storefront.users.api.init import router as init_router
from storefront.users.api.roles import router as roles_router
from storefront.users.api.users import router as users_router

router: APIRouter = APIRouter()

router.include_router(roles_router, prefix="/roles", tags=["Roles"])
router.include_router(users_router, prefix="/users", tags=["Usuarios"])
router.include_router(init_router, prefix="/init", tags=["Inicialización"])
