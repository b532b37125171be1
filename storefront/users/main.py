"""Punto de entrada del servicio de usuarios.

Users service ASGI entry point::

    uvicorn storefront.users.main:app --port 8081
"""

from fastapi import FastAPI

from storefront.main import create_app
from storefront.users.api import router
from storefront.users.models import TABLES
from storefront.users.seed import seed_users

app: FastAPI = create_app("users", router, TABLES, seed_users)
