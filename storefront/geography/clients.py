"""Clientes remotos del servicio de geografía.

Remote existence clients used by the geography service.
"""

from storefront.clients.existence import ExistenceClient
from storefront.config import settings

user_client: ExistenceClient = ExistenceClient(
    settings.USERS_SERVICE_URL, "/api/users/{id}", "usuarios"
)
