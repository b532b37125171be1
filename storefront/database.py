"""Motor y sesiones de base de datos.

Database engine and session configuration module.
Sets up the async SQLAlchemy engine, session factory, and the ORM base class
shared by the models of all four services. Each service process points
``DATABASE_URL`` at its own database and only creates its own tables.
"""

from collections.abc import AsyncGenerator, Sequence
from typing import Any

from sqlalchemy import Table
from sqlalchemy.ext.asyncio import AsyncSession, AsyncEngine, create_async_engine, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase

from storefront.config import settings


def _engine_options(url: str) -> dict[str, Any]:
    """Opciones del motor según el driver.

    Pool sizing and asyncpg-only options do not apply to SQLite.
    """
    options: dict[str, Any] = {"echo": settings.DEBUG, "pool_pre_ping": True}
    if url.startswith("postgresql+asyncpg"):
        options.update(
            pool_size=5,
            max_overflow=10,
            # Sin caché de prepared statements — needed behind transaction-mode poolers
            connect_args={"statement_cache_size": 0},
        )
    return options


engine: AsyncEngine = create_async_engine(
    settings.DATABASE_URL, **_engine_options(settings.DATABASE_URL)
)

# expire_on_commit=False: los objetos siguen legibles tras el commit
async_session: async_sessionmaker[AsyncSession] = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """Clase base declarativa de SQLAlchemy.

    Declarative base class for all ORM models of every service.
    """

    pass


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Entrega una sesión async y la cierra al terminar la petición.

    FastAPI dependency that yields an async database session.
    The session is closed after the request completes.

    Yields:
        AsyncSession: Sesión asíncrona (Async session instance)
    """
    async with async_session() as session:
        try:
            yield session
        finally:
            await session.close()


async def create_tables(tables: Sequence[Table], bind: AsyncEngine | None = None) -> None:
    """Crea las tablas indicadas si no existen.

    Create only the given tables, so a service never creates the tables of
    its siblings in its own database.

    Args:
        tables: Tablas del servicio (Tables owned by the service)
        bind: Motor a usar, por defecto el global (Engine, defaults to the global one)
    """
    target: AsyncEngine = bind or engine
    async with target.begin() as conn:
        await conn.run_sync(Base.metadata.create_all, tables=list(tables))
