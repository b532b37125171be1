"""Entorno de Alembic para los cuatro servicios.

Async Alembic environment. ``-x service=<name>`` limits autogenerate to the
tables owned by that service, so a revision never touches a sibling's
schema::

    alembic -x service=products revision --autogenerate -m "..." --head products@head
"""

import asyncio
from logging.config import fileConfig

from alembic import context
from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import create_async_engine

from storefront.config import settings
from storefront.database import Base
from storefront.geography import models as geography_models
from storefront.products import models as products_models
from storefront.shopping import models as shopping_models
from storefront.users import models as users_models

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

SERVICE_TABLES = {
    "geography": geography_models.TABLES,
    "products": products_models.TABLES,
    "shopping": shopping_models.TABLES,
    "users": users_models.TABLES,
}

target_metadata = Base.metadata
service: str | None = context.get_x_argument(as_dictionary=True).get("service")
if service is not None and service not in SERVICE_TABLES:
    raise SystemExit(f"Servicio desconocido: {service} (expected one of {', '.join(SERVICE_TABLES)})")


def include_object(obj, name, type_, reflected, compare_to) -> bool:
    # Solo las tablas del servicio elegido
    if service is None or type_ != "table":
        return True
    return name in {table.name for table in SERVICE_TABLES[service]}


def run_migrations_offline() -> None:
    context.configure(
        url=settings.DATABASE_URL,
        target_metadata=target_metadata,
        include_object=include_object,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection: Connection) -> None:
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        include_object=include_object,
    )
    with context.begin_transaction():
        context.run_migrations()


async def run_migrations_online() -> None:
    connectable = create_async_engine(settings.DATABASE_URL, poolclass=pool.NullPool)
    async with connectable.connect() as connection:
        await connection.run_sync(do_run_migrations)
    await connectable.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_migrations_online())
