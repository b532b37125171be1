"""Punto de entrada del servicio de geografía.

Geography service ASGI entry point::

    uvicorn storefront.geography.main:app --port 8082
"""

from fastapi import FastAPI

from storefront.geography.api import router
from storefront.geography.models import TABLES
from storefront.geography.seed import seed_geography
from storefront.main import create_app

app: FastAPI = create_app("geography", router, TABLES, seed_geography)
