"""Reglas de validación de campos.

Field validation helpers used by the domain services.
Each helper raises ``BadRequestError`` with the caller's message on the
first failing rule, so a service's rule list short-circuits in order.
"""

from storefront.utils.exceptions import BadRequestError


def is_blank(value: str | None) -> bool:
    """True si el texto es None o solo espacios (None or whitespace only)."""
    return value is None or not value.strip()


def require_text(value: str | None, message: str) -> str:
    """Exige texto no vacío (Require a non-blank string)."""
    if is_blank(value):
        raise BadRequestError(message)
    return value


def require_present(value: int | None, message: str) -> int:
    """Exige un valor no nulo (Require a non-null value)."""
    if value is None:
        raise BadRequestError(message)
    return value


def require_min(value: int | None, minimum: int, message: str) -> int:
    """Exige un número no nulo mayor o igual a ``minimum``.

    Require a non-null number greater than or equal to ``minimum``.
    """
    if value is None or value < minimum:
        raise BadRequestError(message)
    return value


def require_max_length(value: str, maximum: int, message: str) -> str:
    """Exige texto de a lo sumo ``maximum`` caracteres.

    Require a string no longer than ``maximum`` characters; the column
    width the value is stored in.
    """
    if len(value) > maximum:
        raise BadRequestError(message)
    return value
