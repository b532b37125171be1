"""Modelos ORM del servicio de usuarios.

Users SQLAlchemy ORM model definitions.

Tables:
    - roles: roles de acceso (Access roles, e.g. ADMIN / CLIENT)
    - users: usuarios registrados (Registered users)

``users.status_id`` is stored as given; it is not checked against the
products service's status catalogue.
"""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from storefront.database import Base


class Role(Base):
    """Rol de usuario.

    Attributes:
        id: Identificador (Primary key)
        name: Nombre único (Unique role name)
    """

    __tablename__ = "roles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)


class User(Base):
    """Usuario registrado.

    Attributes:
        id: Identificador (Primary key)
        rut: RUT chileno único (Unique Chilean national id)
        name: Nombre (First name)
        lastname: Apellido (Last name)
        phone: Teléfono móvil (Mobile phone)
        email: Correo único (Unique email)
        password: Hash bcrypt (bcrypt hash, never plain text)
        profile_photo: URL de la foto, opcional (Optional photo URL)
        role_id: Rol (Role reference)
        status_id: Estado (Status id, stored as given)
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    rut: Mapped[str] = mapped_column(String(12), unique=True, nullable=False)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    lastname: Mapped[str] = mapped_column(String(100), nullable=False)
    phone: Mapped[str] = mapped_column(String(20), nullable=False)
    email: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    profile_photo: Mapped[str | None] = mapped_column(String(500), nullable=True)
    role_id: Mapped[int] = mapped_column(Integer, ForeignKey("roles.id"), nullable=False)
    status_id: Mapped[int] = mapped_column(Integer, nullable=False)


# Tablas propias del servicio — created by this service only
TABLES = [Role.__table__, User.__table__]
