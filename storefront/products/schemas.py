"""Esquemas Pydantic del servicio de productos.

Products request/response schemas. As in every service, request fields are
optional here and required-field rules run in the service layer.
"""

from storefront.schemas.common import CamelModel


class CategoryRequest(CamelModel):
    """Creación o actualización de categoría (Category create / update)."""

    name: str | None = None


class CategoryResponse(CamelModel):
    """Categoría (Category response)."""

    category_id: int
    name: str


class StatusResponse(CamelModel):
    """Estado (Status response)."""

    status_id: int
    name: str


class ProductRequest(CamelModel):
    """Creación o actualización parcial de producto.

    Attributes:
        name: Nombre (Product name)
        description: Descripción (Description)
        price: Precio, >= 0 (Price)
        stock: Stock, >= 0 (Stock)
        product_photo: URL de la imagen (Image URL)
        category_id: Categoría (Category id)
        status_id: Estado (Status id)
    """

    name: str | None = None
    description: str | None = None
    price: int | None = None
    stock: int | None = None
    product_photo: str | None = None
    category_id: int | None = None
    status_id: int | None = None


class ProductResponse(CamelModel):
    """Producto con su categoría y estado (Product with category and status)."""

    product_id: int
    name: str
    description: str
    price: int
    stock: int
    product_photo: str | None = None
    category_id: int
    status_id: int
    category: CategoryResponse
    status: StatusResponse
