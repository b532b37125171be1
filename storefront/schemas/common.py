"""Esquemas comunes: modelo camelCase y sobre de respuesta.

Common Pydantic schemas shared by every service.
``CamelModel`` maps snake_case attributes to the camelCase keys used on the
wire; ``ApiResponse`` is the uniform envelope
``{success, statusCode, message, data, count}`` wrapping every JSON reply.
"""

from typing import Generic, TypeVar

from fastapi import Response, status
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """Modelo base con alias camelCase.

    Base model whose fields are read and written as camelCase JSON keys
    while still accepting the snake_case attribute names in Python.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ApiResponse(CamelModel, Generic[T]):
    """Sobre de respuesta uniforme.

    Uniform response envelope used by all services.

    Attributes:
        success: Resultado de la operación (Whether the operation succeeded)
        status_code: Código HTTP replicado en el cuerpo (HTTP status echoed in the body)
        message: Mensaje descriptivo en español (Human readable message)
        data: Carga útil o null (Payload or null)
        count: Largo de la lista, solo en listados (List length, list responses only)
    """

    success: bool
    status_code: int
    message: str
    data: T | None = None
    count: int | None = None

    @classmethod
    def ok(
        cls,
        data: T | None,
        message: str,
        status_code: int = status.HTTP_200_OK,
    ) -> "ApiResponse[T]":
        """Sobre exitoso para un único recurso.

        Build a success envelope around a single payload.
        """
        return cls(success=True, status_code=status_code, message=message, data=data)

    @classmethod
    def listing(cls, items: list, message: str) -> "ApiResponse[T]":
        """Sobre exitoso para un listado, con ``count``.

        Build a success envelope around a non-empty list.
        """
        return cls(
            success=True,
            status_code=status.HTTP_200_OK,
            message=message,
            data=items,
            count=len(items),
        )

    @classmethod
    def failure(cls, status_code: int, message: str) -> "ApiResponse[T]":
        """Sobre de error, sin datos.

        Build an error envelope; used by the exception handlers.
        """
        return cls(success=False, status_code=status_code, message=message)


def no_content() -> Response:
    """Respuesta 204 para listados vacíos.

    Empty collections answer 204 with no body instead of 200 with ``[]``.
    """
    return Response(status_code=status.HTTP_204_NO_CONTENT)
