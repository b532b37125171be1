"""Script de datos iniciales por servicio.

Seed script — Creates a service's tables if needed and inserts its fixture
data. Same effect as ``POST /api/init/seed`` on the running service.

Usage:
    python -m storefront.seed geography
    python -m storefront.seed products
    python -m storefront.seed shopping
    python -m storefront.seed users
"""

import argparse
import asyncio

from storefront.database import async_session, create_tables, engine
from storefront.geography import models as geography_models
from storefront.geography.seed import seed_geography
from storefront.products import models as products_models
from storefront.products.seed import seed_products
from storefront.shopping import models as shopping_models
from storefront.shopping.seed import seed_shopping
from storefront.users import models as users_models
from storefront.users.seed import seed_users

# Servicio → (tablas, seeder)
SERVICES = {
    "geography": (geography_models.TABLES, seed_geography),
    "products": (products_models.TABLES, seed_products),
    "shopping": (shopping_models.TABLES, seed_shopping),
    "users": (users_models.TABLES, seed_users),
}


async def seed(service: str) -> str:
    """Crea las tablas del servicio y carga sus datos iniciales.

    Create the service's tables if they don't exist, then run its seeder.

    Returns:
        str: Resumen del seeder (Seeder summary message)
    """
    tables, seeder = SERVICES[service]
    await create_tables(tables)
    async with async_session() as db:
        message: str = await seeder(db)
    await engine.dispose()
    return message


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Carga los datos iniciales de un servicio.")
    parser.add_argument("service", choices=sorted(SERVICES))
    args = parser.parse_args()
    print(asyncio.run(seed(args.service)))
