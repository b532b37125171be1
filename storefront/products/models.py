"""Modelos ORM del servicio de productos.

Products SQLAlchemy ORM model definitions.

Tables:
    - categories: categorías de productos (Product categories)
    - statuses: catálogo de estados compartido (Shared status catalogue)
    - products: productos a la venta (Products for sale)

Prices are whole pesos, stored as integers.
"""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from storefront.database import Base


class Category(Base):
    """Categoría de productos.

    Attributes:
        id: Identificador (Primary key)
        name: Nombre único (Unique category name)
    """

    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)


class Status(Base):
    """Estado (Activo, Cancelado, En envío, ...).

    Used by products and, remotely, by purchases in the shopping service.
    """

    __tablename__ = "statuses"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)


class Product(Base):
    """Producto del catálogo.

    Attributes:
        id: Identificador (Primary key)
        name: Nombre (Product name)
        description: Descripción (Description)
        price: Precio en pesos, >= 0 (Price, non-negative)
        stock: Unidades disponibles, >= 0 (Units in stock, non-negative)
        product_photo: URL de la imagen, opcional (Optional image URL)
        category_id: Categoría (Category reference)
        status_id: Estado (Status reference)
    """

    __tablename__ = "products"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(String(1000), nullable=False)
    price: Mapped[int] = mapped_column(Integer, nullable=False)
    stock: Mapped[int] = mapped_column(Integer, nullable=False)
    product_photo: Mapped[str | None] = mapped_column(String(500), nullable=True)
    category_id: Mapped[int] = mapped_column(Integer, ForeignKey("categories.id"), nullable=False, index=True)
    status_id: Mapped[int] = mapped_column(Integer, ForeignKey("statuses.id"), nullable=False, index=True)


# Tablas propias del servicio — created by this service only
TABLES = [Category.__table__, Status.__table__, Product.__table__]
