"""Tests del middleware de registro en Axiom.

Axiom logging middleware tests — masking, error message extraction and
one ingested event per request through a stub Axiom client.
"""

from fastapi import APIRouter, FastAPI
from httpx import ASGITransport, AsyncClient
from starlette.exceptions import HTTPException as StarletteHTTPException

from storefront.main import http_exception_handler
from storefront.middleware.axiom_logging import AxiomLoggingMiddleware, error_message, mask_sensitive
from storefront.utils.exceptions import NotFoundError


class _RecordingAxiom:
    def __init__(self) -> None:
        self.events: list[dict] = []

    def ingest_events(self, dataset: str, events: list[dict]) -> None:
        self.events.extend(events)


def _app(axiom: _RecordingAxiom) -> FastAPI:
    router = APIRouter()

    @router.post("/users/login")
    async def login(payload: dict) -> dict:
        return {"ok": True}

    @router.get("/missing")
    async def missing() -> dict:
        raise NotFoundError("Usuario no encontrado")

    app = FastAPI()
    app.add_middleware(AxiomLoggingMiddleware, service_name="users", client=axiom, dataset="test")
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.include_router(router)
    return app


class TestMasking:
    """Enmascarado de campos sensibles."""

    def test_masks_password_keys(self):
        data = {"email": "a@b.cl", "currentPassword": "x", "nested": {"newPassword": "y"}}
        assert mask_sensitive(data) == {
            "email": "a@b.cl",
            "currentPassword": "***",
            "nested": {"newPassword": "***"},
        }

    def test_error_message_from_envelope(self):
        assert error_message(b'{"success": false, "message": "Rol no encontrado"}') == "Rol no encontrado"

    def test_error_message_from_plain_text(self):
        assert error_message(b"Internal Server Error") == "Internal Server Error"


class TestMiddleware:
    """Un evento por petición."""

    async def test_request_event(self):
        axiom = _RecordingAxiom()
        async with AsyncClient(transport=ASGITransport(app=_app(axiom)), base_url="http://test") as ac:
            res = await ac.post("/users/login", json={"email": "a@b.cl", "password": "Secreta123"})
        assert res.status_code == 200

        [event] = axiom.events
        assert event["service"] == "users"
        assert event["method"] == "POST"
        assert event["status_code"] == 200
        assert event["request_body"] == {"email": "a@b.cl", "password": "***"}

    async def test_error_event_keeps_response(self):
        axiom = _RecordingAxiom()
        async with AsyncClient(transport=ASGITransport(app=_app(axiom)), base_url="http://test") as ac:
            res = await ac.get("/missing")
        assert res.status_code == 404
        assert res.json()["message"] == "Usuario no encontrado"

        [event] = axiom.events
        assert event["status_code"] == 404
        assert event["error"] == "Usuario no encontrado"
