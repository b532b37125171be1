"""Punto de entrada del servicio de compras.

Shopping service ASGI entry point::

    uvicorn storefront.shopping.main:app --port 8084
"""

from fastapi import FastAPI

from storefront.main import create_app
from storefront.shopping.api import router
from storefront.shopping.models import TABLES
from storefront.shopping.seed import seed_shopping

app: FastAPI = create_app("shopping", router, TABLES, seed_shopping)
