"""Clientes remotos del servicio de compras.

Remote existence clients used by the shopping service.
"""

from storefront.clients.existence import ExistenceClient
from storefront.config import settings

user_client: ExistenceClient = ExistenceClient(
    settings.USERS_SERVICE_URL, "/api/users/{id}", "usuarios"
)
address_client: ExistenceClient = ExistenceClient(
    settings.GEOGRAPHY_SERVICE_URL, "/api/addresses/{id}", "geografía"
)
status_client: ExistenceClient = ExistenceClient(
    settings.PRODUCTS_SERVICE_URL, "/api/statuses/{id}", "productos"
)
product_client: ExistenceClient = ExistenceClient(
    settings.PRODUCTS_SERVICE_URL, "/api/products/{id}", "productos"
)
