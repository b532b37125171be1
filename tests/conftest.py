"""Infraestructura de tests — SQLite en memoria, sesión y clientes httpx.

Test infrastructure — In-memory SQLite database, session, one httpx client
per service, and the remote existence checks replaced with AsyncMocks.
Every test gets a fresh database; no sibling service is ever contacted.
"""

from collections.abc import AsyncGenerator
from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from storefront.database import Base, get_db
from storefront.geography import clients as geography_clients
from storefront.geography.main import app as geography_app
from storefront.products.main import app as products_app
from storefront.products.models import Category, Product, Status
from storefront.shopping import clients as shopping_clients
from storefront.shopping.main import app as shopping_app
from storefront.users.main import app as users_app
from storefront.users.models import Role, User
from storefront.utils.password import hash_password

TEST_DATABASE_URL = "sqlite+aiosqlite://"


# ---------------------------------------------------------------------------
# Motor, sesión y clientes
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Motor SQLite en memoria con el esquema de los cuatro servicios."""
    # StaticPool: una sola conexión, así la base en memoria sobrevive entre sesiones
    eng = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def db(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Sesión compartida por el test y las rutas."""
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session


async def _client_for(app: FastAPI, db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def geography_client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    async for ac in _client_for(geography_app, db):
        yield ac


@pytest_asyncio.fixture
async def products_client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    async for ac in _client_for(products_app, db):
        yield ac


@pytest_asyncio.fixture
async def shopping_client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    async for ac in _client_for(shopping_app, db):
        yield ac


@pytest_asyncio.fixture
async def users_client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    async for ac in _client_for(users_app, db):
        yield ac


# ---------------------------------------------------------------------------
# Servicios remotos simulados
# ---------------------------------------------------------------------------
@pytest.fixture
def remote_user(monkeypatch: pytest.MonkeyPatch) -> AsyncMock:
    """Existencia de usuario vista desde geografía; por defecto existe."""
    mock = AsyncMock(return_value=True)
    monkeypatch.setattr(geography_clients.user_client, "exists", mock)
    return mock


@pytest.fixture
def remote(monkeypatch: pytest.MonkeyPatch) -> SimpleNamespace:
    """Existencias remotas vistas desde compras; por defecto todo existe."""
    mocks = SimpleNamespace(
        user=AsyncMock(return_value=True),
        address=AsyncMock(return_value=True),
        status=AsyncMock(return_value=True),
        product=AsyncMock(return_value=True),
    )
    monkeypatch.setattr(shopping_clients.user_client, "exists", mocks.user)
    monkeypatch.setattr(shopping_clients.address_client, "exists", mocks.address)
    monkeypatch.setattr(shopping_clients.status_client, "exists", mocks.status)
    monkeypatch.setattr(shopping_clients.product_client, "exists", mocks.product)
    return mocks


# ---------------------------------------------------------------------------
# Datos de prueba
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def catalog(db: AsyncSession) -> SimpleNamespace:
    """Una categoría, un estado y un producto."""
    category = Category(name="Ram")
    status = Status(name="Activo")
    db.add_all([category, status])
    await db.flush()

    product = Product(
        name="Ram DDR5 Corsair Vengeance",
        description="Corsair Vengeance DDR5 32GB",
        price=129990,
        stock=30,
        category_id=category.id,
        status_id=status.id,
    )
    db.add(product)
    await db.commit()
    return SimpleNamespace(category=category, status=status, product=product)


@pytest_asyncio.fixture
async def roles(db: AsyncSession) -> dict[str, Role]:
    """Roles ADMIN y CLIENT."""
    result = {}
    for name in ("ADMIN", "CLIENT"):
        role = Role(name=name)
        db.add(role)
        await db.flush()
        result[name] = role
    await db.commit()
    return result


@pytest_asyncio.fixture
async def client_user(db: AsyncSession, roles: dict[str, Role]) -> User:
    """Usuario CLIENT con contraseña conocida (Secure123!)."""
    user = User(
        rut="19876543-2",
        name="María",
        lastname="González",
        phone="987654321",
        email="maria@example.com",
        password=hash_password("Secure123!"),
        role_id=roles["CLIENT"].id,
        status_id=1,
    )
    db.add(user)
    await db.commit()
    return user
