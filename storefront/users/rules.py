"""Reglas de formato de los datos de usuario.

User field rules. Each check returns the message of the first rule the
value breaks, or None when the value is acceptable; the service joins the
failures of several fields into one ``field: message, ...`` error.
"""

import re

from storefront.utils.password import MAX_PASSWORD_BYTES, fits_bcrypt
from storefront.utils.validation import is_blank

RUT_PATTERN = re.compile(r"^\d{7,8}-[\dKk]$")
LETTERS_PATTERN = re.compile(r"^[a-zA-ZáéíóúÁÉÍÓÚñÑ\s]+$")
PHONE_PATTERN = re.compile(r"^9\d{8}$")
EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

MIN_PASSWORD_LENGTH = 8


def check_rut(value: str | None) -> str | None:
    if is_blank(value):
        return "El RUT es obligatorio"
    if not 9 <= len(value) <= 12:
        return "El RUT debe tener entre 9 y 12 caracteres"
    if not RUT_PATTERN.match(value):
        return "El RUT debe tener formato válido (ej: 12345678-9)"
    return None


def _check_letters(value: str | None, noun: str) -> str | None:
    if is_blank(value):
        return f"El {noun} es obligatorio"
    if not 2 <= len(value) <= 100:
        return f"El {noun} debe tener entre 2 y 100 caracteres"
    if not LETTERS_PATTERN.match(value):
        return f"El {noun} solo puede contener letras"
    return None


def check_name(value: str | None) -> str | None:
    return _check_letters(value, "nombre")


def check_last_name(value: str | None) -> str | None:
    return _check_letters(value, "apellido")


def check_phone(value: str | None) -> str | None:
    if is_blank(value):
        return "El teléfono es obligatorio"
    if not PHONE_PATTERN.match(value):
        return "El teléfono debe comenzar con 9 y tener 9 dígitos"
    return None


def check_email(value: str | None) -> str | None:
    if is_blank(value):
        return "El email es obligatorio"
    if not EMAIL_PATTERN.match(value):
        return "El email debe tener un formato válido"
    if len(value) > 100:
        return "El email no puede exceder 100 caracteres"
    return None


def check_password(value: str | None) -> str | None:
    if is_blank(value):
        return "La contraseña es obligatoria"
    if len(value) < MIN_PASSWORD_LENGTH:
        return "La contraseña debe tener al menos 8 caracteres"
    if not fits_bcrypt(value):
        return f"La contraseña no puede exceder {MAX_PASSWORD_BYTES} bytes"
    return None


def check_profile_photo(value: str | None) -> str | None:
    if value is not None and len(value) > 500:
        return "La URL de la foto no puede exceder 500 caracteres"
    return None


def check_role_id(value: int | None) -> str | None:
    return "El rol es obligatorio" if value is None else None


def check_status_id(value: int | None) -> str | None:
    if value is None:
        return "El estado es obligatorio"
    if value <= 0:
        return "El ID del estado debe ser positivo"
    return None


def collect_errors(checks: list[tuple[str, str | None]]) -> str | None:
    """Une los errores de varios campos.

    Join ``(field, message)`` pairs with a message into
    ``"field: message, field: message"``; None when every field passed.
    """
    errors: list[str] = [f"{field}: {message}" for field, message in checks if message]
    return ", ".join(errors) if errors else None
