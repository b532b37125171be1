"""Servicio de productos.

Product Service — Business logic for the product catalogue: ordered field
rules, local category/status checks, partial updates and the filters.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from storefront.products.models import Category, Product, Status
from storefront.products.repositories.category_repository import category_repository
from storefront.products.repositories.product_repository import product_repository
from storefront.products.repositories.status_repository import status_repository
from storefront.products.schemas import (
    CategoryResponse,
    ProductRequest,
    ProductResponse,
    StatusResponse,
)
from storefront.utils.exceptions import BadRequestError, NotFoundError
from storefront.utils.validation import require_max_length, require_min, require_present, require_text

EMPTY_NAME = "El nombre del producto no puede estar vacío"
EMPTY_DESCRIPTION = "La descripción del producto no puede estar vacía"
LONG_NAME = "El nombre del producto debe tener entre 1 y 200 caracteres"
LONG_DESCRIPTION = "La descripción debe tener entre 1 y 1000 caracteres"
LONG_PHOTO = "La URL de la foto no puede exceder los 500 caracteres"


def _name(value: str | None) -> str:
    return require_max_length(require_text(value, EMPTY_NAME), 200, LONG_NAME)


def _description(value: str | None) -> str:
    return require_max_length(require_text(value, EMPTY_DESCRIPTION), 1000, LONG_DESCRIPTION)


def _photo(value: str | None) -> str | None:
    return value if value is None else require_max_length(value, 500, LONG_PHOTO)


def _not_found(product_id: int) -> NotFoundError:
    return NotFoundError(f"Producto con ID {product_id} no encontrado")


class ProductService:
    """Lógica de negocio de productos.

    Service handling product business logic.
    """

    @staticmethod
    def to_response(product: Product, category: Category, status: Status) -> ProductResponse:
        return ProductResponse(
            product_id=product.id,
            name=product.name,
            description=product.description,
            price=product.price,
            stock=product.stock,
            product_photo=product.product_photo,
            category_id=product.category_id,
            status_id=product.status_id,
            category=CategoryResponse(category_id=category.id, name=category.name),
            status=StatusResponse(status_id=status.id, name=status.name),
        )

    async def _load(self, db: AsyncSession, product_id: int) -> ProductResponse:
        row = await product_repository.get_with_relations(db, product_id)
        if row is None:
            raise _not_found(product_id)
        return self.to_response(*row)

    async def _require_category(self, db: AsyncSession, category_id: int) -> None:
        if not await category_repository.exists(db, {"id": category_id}):
            raise BadRequestError(f"La categoría con ID {category_id} no existe")

    async def _require_status(self, db: AsyncSession, status_id: int) -> None:
        if not await status_repository.exists(db, {"id": status_id}):
            raise BadRequestError(f"El estado con ID {status_id} no existe")

    async def list_products(
        self,
        db: AsyncSession,
        category_id: int | None = None,
        status_id: int | None = None,
    ) -> list[ProductResponse]:
        """Lista productos, opcionalmente por categoría o estado.

        An unknown category or status simply yields an empty list.
        """
        rows = await product_repository.list_with_relations(db, category_id, status_id)
        return [self.to_response(*row) for row in rows]

    async def search_products(self, db: AsyncSession, query: str) -> list[ProductResponse]:
        """Busca productos por nombre (Case-insensitive name search)."""
        rows = await product_repository.search_by_name(db, query)
        return [self.to_response(*row) for row in rows]

    async def get_product(self, db: AsyncSession, product_id: int) -> ProductResponse:
        """Obtiene un producto por id (Get a product by id)."""
        return await self._load(db, product_id)

    async def create_product(self, db: AsyncSession, data: ProductRequest) -> ProductResponse:
        """Crea un producto.

        Validation order: name (<= 200), description (<= 1000), price >= 0,
        stock >= 0, photo URL (<= 500), category id present, status id
        present, category exists, status exists. Nothing is written when
        any rule fails.

        Raises:
            BadRequestError: Regla incumplida o referencia inexistente
                             (Failed rule or missing reference)
        """
        name: str = _name(data.name)
        description: str = _description(data.description)
        price: int = require_min(data.price, 0, "El precio debe ser mayor o igual a 0")
        stock: int = require_min(data.stock, 0, "El stock debe ser mayor o igual a 0")
        product_photo: str | None = _photo(data.product_photo)
        category_id: int = require_present(data.category_id, "El producto debe tener una categoría")
        status_id: int = require_present(data.status_id, "El producto debe tener un estado")

        await self._require_category(db, category_id)
        await self._require_status(db, status_id)

        product: Product = await product_repository.create(
            db,
            {
                "name": name,
                "description": description,
                "price": price,
                "stock": stock,
                "product_photo": product_photo,
                "category_id": category_id,
                "status_id": status_id,
            },
        )
        return await self._load(db, product.id)

    async def update_product(
        self,
        db: AsyncSession,
        product_id: int,
        data: ProductRequest,
    ) -> ProductResponse:
        """Actualiza los campos presentes de un producto.

        Every rule is checked before the row is touched, so a rejected
        update leaves the product unchanged.

        Raises:
            NotFoundError: El producto no existe (Product not found)
            BadRequestError: Valor negativo, texto vacío o referencia inexistente
        """
        product: Product | None = await product_repository.get_by_id(db, product_id)
        if product is None:
            raise _not_found(product_id)

        update_data: dict = {}
        if data.name is not None:
            update_data["name"] = _name(data.name)
        if data.description is not None:
            update_data["description"] = _description(data.description)
        if data.price is not None:
            update_data["price"] = require_min(data.price, 0, "El precio no puede ser negativo")
        if data.stock is not None:
            update_data["stock"] = require_min(data.stock, 0, "El stock no puede ser negativo")
        if data.product_photo is not None:
            update_data["product_photo"] = _photo(data.product_photo)
        if data.category_id is not None:
            await self._require_category(db, data.category_id)
            update_data["category_id"] = data.category_id
        if data.status_id is not None:
            await self._require_status(db, data.status_id)
            update_data["status_id"] = data.status_id

        await product_repository.update(db, product, update_data)
        return await self._load(db, product_id)

    async def delete_product(self, db: AsyncSession, product_id: int) -> None:
        """Elimina un producto (Delete a product).

        Raises:
            NotFoundError: El producto no existe (Product not found)
        """
        if not await product_repository.delete(db, product_id):
            raise _not_found(product_id)


# Singleton
product_service: ProductService = ProductService()
