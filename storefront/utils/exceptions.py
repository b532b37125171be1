"""Excepciones HTTP personalizadas.

Custom HTTP exception classes module.
Services raise these instead of returning error flags; the application's
exception handlers render them into the standard response envelope.

Usage:
    from storefront.utils.exceptions import BadRequestError, NotFoundError
    raise NotFoundError("Región no encontrada")
    raise BadRequestError("Ya existe una región con ese nombre")
"""

from fastapi import HTTPException, status


class NotFoundError(HTTPException):
    """404 Not Found — el recurso solicitado no existe.

    Raised when a record addressed by id (or by a remote reference used as a
    filter) does not exist.

    Args:
        detail: Mensaje de error (Error message)
    """

    def __init__(self, detail: str = "Recurso no encontrado") -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class BadRequestError(HTTPException):
    """400 Bad Request — validación de negocio fallida.

    Raised for field validation failures, missing local or remote
    references, uniqueness conflicts and blocked deletions.

    Args:
        detail: Mensaje de error (Error message)
    """

    def __init__(self, detail: str = "Solicitud inválida") -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class UnauthorizedError(HTTPException):
    """401 Unauthorized — credenciales inválidas.

    Raised by the login check when the email/password pair does not match.

    Args:
        detail: Mensaje de error (Error message)
    """

    def __init__(self, detail: str = "Credenciales inválidas") -> None:
        super().__init__(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)


class UpstreamServiceError(HTTPException):
    """503 Service Unavailable — no se pudo confirmar una referencia remota.

    Raised when a sibling service could not be reached or answered with
    something other than 2xx/404. Distinct from a confirmed absence, which
    is a 400 raised by the calling service.

    Args:
        detail: Mensaje de error (Error message)
    """

    def __init__(self, detail: str = "Servicio externo no disponible") -> None:
        super().__init__(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=detail)
