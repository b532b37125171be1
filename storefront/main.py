"""Fábrica de aplicaciones FastAPI — middleware, handlers y routers.

FastAPI application factory shared by the four services.
Configures logging and CORS middleware, the health check, the exception
handlers that render every error into the response envelope, and the
startup step that creates the service's tables and optionally seeds them.
"""

from collections.abc import AsyncIterator, Awaitable, Callable, Sequence
from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import Table
from sqlalchemy.exc import DataError, IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.exceptions import HTTPException as StarletteHTTPException

from storefront.config import settings
from storefront.database import async_session, create_tables
from storefront.middleware.axiom_logging import AxiomLoggingMiddleware
from storefront.schemas.common import ApiResponse

Seeder = Callable[[AsyncSession], Awaitable[str]]


def _envelope(status_code: int, message: str) -> JSONResponse:
    body: dict = ApiResponse.failure(status_code, message).model_dump(by_alias=True)
    return JSONResponse(status_code=status_code, content=body)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """HTTPException → sobre de error (HTTPException rendered as an envelope)."""
    return _envelope(exc.status_code, str(exc.detail))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Errores de tipo en el cuerpo → 400 ``campo: motivo, ...``.

    Body/path type errors become a 400 listing ``field: reason`` pairs.
    """
    parts: list[str] = []
    for error in exc.errors():
        location = [str(p) for p in error.get("loc", ()) if p not in ("body", "path", "query")]
        field: str = ".".join(location) or "body"
        parts.append(f"{field}: {error.get('msg', 'valor inválido')}")
    return _envelope(status.HTTP_400_BAD_REQUEST, ", ".join(parts))


async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    """Restricción de base de datos violada → 400.

    Catches the writes that slip past the read-then-write checks (e.g. two
    concurrent inserts of the same unique name).
    """
    return _envelope(
        status.HTTP_400_BAD_REQUEST,
        "La operación viola una restricción de integridad de datos",
    )


async def data_error_handler(request: Request, exc: DataError) -> JSONResponse:
    """Valor fuera del rango o largo de la columna → 400.

    The database rejected a value that does not fit its column, such as an
    integer beyond the column's range.
    """
    return _envelope(
        status.HTTP_400_BAD_REQUEST,
        "Un valor excede el tamaño o rango permitido por la base de datos",
    )


def create_app(
    service_name: str,
    router: APIRouter,
    tables: Sequence[Table],
    seeder: Seeder | None = None,
) -> FastAPI:
    """Construye la aplicación de un servicio.

    Build the FastAPI application of one service.

    Args:
        service_name: Nombre del servicio (Service name, e.g. "geography")
        router: Router agregado del servicio, montado en /api (Service router, mounted at /api)
        tables: Tablas propias del servicio (Tables owned by the service)
        seeder: Carga de datos iniciales (Optional fixture loader)

    Returns:
        FastAPI: Aplicación lista para servir (Configured application)
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if settings.CREATE_TABLES_ON_STARTUP:
            await create_tables(tables)
        if settings.SEED_ON_STARTUP and seeder is not None:
            async with async_session() as db:
                await seeder(db)
        yield

    app: FastAPI = FastAPI(
        title=f"{settings.APP_NAME} {service_name.capitalize()} API",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    app.add_middleware(AxiomLoggingMiddleware, service_name=service_name)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(IntegrityError, integrity_error_handler)
    app.add_exception_handler(DataError, data_error_handler)

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Estado del servicio (Health check for load balancers)."""
        return {"status": "ok", "service": service_name}

    app.include_router(router, prefix="/api")
    return app
