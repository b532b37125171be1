"""Modelos ORM del servicio de geografía.

Geography SQLAlchemy ORM model definitions.

Tables:
    - regions: regiones del país (Country regions)
    - comunas: comunas de una región (Municipalities inside a region)
    - addresses: direcciones de envío de un usuario (Shipping addresses owned by a user)

``addresses.user_id`` references the users service and therefore has no
database-level foreign key; it is validated over HTTP at write time only.
"""

from sqlalchemy import ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from storefront.database import Base


class Region(Base):
    """Región geográfica.

    Attributes:
        id: Identificador (Primary key)
        name: Nombre único de la región (Unique region name)
    """

    __tablename__ = "regions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)


class Comuna(Base):
    """Comuna, perteneciente a una región.

    Attributes:
        id: Identificador (Primary key)
        name: Nombre, único dentro de la región (Name, unique within its region)
        region_id: Región dueña (Owning region)
    """

    __tablename__ = "comunas"
    __table_args__ = (UniqueConstraint("region_id", "name", name="uq_comunas_region_name"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    region_id: Mapped[int] = mapped_column(Integer, ForeignKey("regions.id"), nullable=False, index=True)


class Address(Base):
    """Dirección de envío de un usuario.

    Attributes:
        id: Identificador (Primary key)
        street: Calle (Street name)
        number: Número (Street number, free text)
        comuna_id: Comuna local (Local comuna reference)
        user_id: Usuario del servicio de usuarios (Remote user reference)
    """

    __tablename__ = "addresses"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    street: Mapped[str] = mapped_column(String(200), nullable=False)
    number: Mapped[str] = mapped_column(String(20), nullable=False)
    comuna_id: Mapped[int] = mapped_column(Integer, ForeignKey("comunas.id"), nullable=False, index=True)
    # Referencia remota — no FK, lives in the users service
    user_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)


# Tablas propias del servicio — created by this service only
TABLES = [Region.__table__, Comuna.__table__, Address.__table__]
