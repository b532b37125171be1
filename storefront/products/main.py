"""Punto de entrada del servicio de productos.

Products service ASGI entry point::

    uvicorn storefront.products.main:app --port 8083
"""

from fastapi import FastAPI

from storefront.main import create_app
from storefront.products.api import router
from storefront.products.models import TABLES
from storefront.products.seed import seed_products

app: FastAPI = create_app("products", router, TABLES, seed_products)
