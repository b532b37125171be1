"""Esquemas Pydantic del servicio de usuarios.

Users request/response schemas. The password hash never appears in a
response model.
"""

from storefront.schemas.common import CamelModel


class RoleResponse(CamelModel):
    """Rol (Role response)."""

    role_id: int
    name: str


class RegisterRequest(CamelModel):
    """Registro de usuario.

    Attributes:
        rut: RUT, formato 12345678-9 (Chilean id)
        name: Nombre (First name)
        last_name: Apellido (Last name)
        phone: Teléfono, 9XXXXXXXX (Mobile phone)
        email: Correo (Email)
        password: Contraseña en texto plano, >= 8 caracteres (Plain password)
        profile_photo: URL de la foto (Photo URL)
        role_id: Rol (Role id)
        status_id: Estado (Status id)
    """

    rut: str | None = None
    name: str | None = None
    last_name: str | None = None
    phone: str | None = None
    email: str | None = None
    password: str | None = None
    profile_photo: str | None = None
    role_id: int | None = None
    status_id: int | None = None


class LoginRequest(CamelModel):
    """Credenciales de login (Login credentials)."""

    email: str | None = None
    password: str | None = None


class PersonalDataRequest(CamelModel):
    """Actualización parcial de datos personales (Partial personal data update)."""

    rut: str | None = None
    name: str | None = None
    last_name: str | None = None
    phone: str | None = None


class ProfilePhotoRequest(CamelModel):
    """Nueva foto de perfil; null la elimina (New photo URL, null clears it)."""

    photo_uri: str | None = None


class PasswordChangeRequest(CamelModel):
    """Cambio de contraseña (Password change)."""

    current_password: str | None = None
    new_password: str | None = None


class EmailChangeRequest(CamelModel):
    """Cambio de correo, confirmado con la contraseña (Email change)."""

    new_email: str | None = None
    confirm_password: str | None = None


class UserResponse(CamelModel):
    """Usuario con el nombre de su rol (User with its role name)."""

    user_id: int
    rut: str
    name: str
    last_name: str
    phone: str
    email: str
    profile_photo: str | None = None
    role_id: int
    role_name: str
    status_id: int
