"""Middleware de registro de peticiones en Axiom.

Axiom API logging middleware.
Captures request/response data and sends one structured event per request
to Axiom: service, endpoint, method, body/params, status code, duration and,
for error responses, the envelope message. Password and token fields are
masked before anything leaves the process.
"""

import json
import re
import time
from typing import Any

from axiom_py import Client as AxiomClient
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from storefront.config import settings

# Campos sensibles — covers password, currentPassword, newPassword, confirmPassword
_SENSITIVE_KEYS = re.compile(
    r"(password|passwd|secret|token|authorization|api_key|apikey|credential)",
    re.IGNORECASE,
)

# Rutas excluidas — Paths excluded from logging
_SKIP_PATHS = {"/health", "/docs", "/redoc", "/openapi.json"}


def mask_sensitive(data: Any, depth: int = 0) -> Any:
    """Enmascara recursivamente los campos sensibles.

    Recursively mask sensitive keys in dicts/lists; deep or long structures
    are cut short.
    """
    if depth > 5:
        return "..."
    if isinstance(data, dict):
        return {
            k: "***" if _SENSITIVE_KEYS.search(k) else mask_sensitive(v, depth + 1)
            for k, v in data.items()
        }
    if isinstance(data, list):
        return [mask_sensitive(item, depth + 1) for item in data[:20]]
    return data


def error_message(body: bytes) -> str:
    """Extrae el mensaje de un sobre de error.

    Pull the ``message`` out of an error envelope, falling back to the raw
    body text. Capped at 500 characters.
    """
    try:
        payload = json.loads(body)
        message = payload.get("message", str(payload)) if isinstance(payload, dict) else str(payload)
    except (json.JSONDecodeError, UnicodeDecodeError):
        message = body.decode("utf-8", errors="replace")
    message = str(message)
    return message[:500] + "..." if len(message) > 500 else message


class AxiomLoggingMiddleware(BaseHTTPMiddleware):
    """Registra cada petición/respuesta del servicio en Axiom.

    Middleware that logs API requests and responses to Axiom. A pass-through
    when no Axiom token/dataset is configured.
    """

    def __init__(
        self,
        app: ASGIApp,
        service_name: str,
        client: AxiomClient | None = None,
        dataset: str | None = None,
    ) -> None:
        super().__init__(app)
        self._service: str = service_name
        self._dataset: str = dataset or settings.AXIOM_DATASET
        self._client: AxiomClient | None = client

        if self._client is None and settings.AXIOM_API_TOKEN and settings.AXIOM_DATASET:
            self._client = AxiomClient(token=settings.AXIOM_API_TOKEN)

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if request.url.path in _SKIP_PATHS or self._client is None:
            return await call_next(request)

        start_time: float = time.time()
        event: dict[str, Any] = {
            "service": self._service,
            "method": request.method,
            "path": request.url.path,
        }
        if request.query_params:
            event["query_params"] = mask_sensitive(dict(request.query_params))

        if request.method in ("POST", "PUT", "PATCH"):
            body_bytes: bytes = await request.body()
            if body_bytes:
                try:
                    event["request_body"] = mask_sensitive(json.loads(body_bytes))
                except (json.JSONDecodeError, UnicodeDecodeError):
                    event["request_body"] = "(non-json body)"

        status_code: int = 500
        try:
            response: Response = await call_next(request)
            status_code = response.status_code

            # Respuesta de error: leer el sobre y reconstruir la respuesta
            if status_code >= 400:
                resp_body = b""
                async for chunk in response.body_iterator:
                    resp_body += chunk if isinstance(chunk, bytes) else chunk.encode("utf-8")
                event["error"] = error_message(resp_body)
                response = Response(
                    content=resp_body,
                    status_code=status_code,
                    headers=dict(response.headers),
                    media_type=response.media_type,
                )
        except Exception as exc:
            event["error"] = f"{type(exc).__name__}: {str(exc)[:300]}"
            raise
        finally:
            event["status_code"] = status_code
            event["duration_ms"] = round((time.time() - start_time) * 1000, 2)
            try:
                self._client.ingest_events(self._dataset, [event])
            except Exception:
                pass  # un fallo de registro nunca rompe la petición

        return response
