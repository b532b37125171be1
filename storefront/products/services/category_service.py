"""Servicio de categorías.

Category Service — CRUD for product categories, refusing to delete a
category that still has products.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from storefront.products.models import Category
from storefront.products.repositories.category_repository import category_repository
from storefront.products.repositories.product_repository import product_repository
from storefront.products.schemas import CategoryRequest, CategoryResponse
from storefront.utils.exceptions import BadRequestError, NotFoundError
from storefront.utils.validation import require_max_length, require_text

EMPTY_NAME = "El nombre de la categoría no puede estar vacío"
LONG_NAME = "El nombre de la categoría no puede exceder los 100 caracteres"


def _not_found(category_id: int) -> NotFoundError:
    return NotFoundError(f"Categoría con ID {category_id} no encontrada")


class CategoryService:
    """Lógica de negocio de categorías.

    Service handling category business logic.
    """

    @staticmethod
    def to_response(category: Category) -> CategoryResponse:
        return CategoryResponse(category_id=category.id, name=category.name)

    async def list_categories(self, db: AsyncSession) -> list[CategoryResponse]:
        """Lista todas las categorías (List all categories)."""
        categories = await category_repository.get_all(db)
        return [self.to_response(c) for c in categories]

    async def get_category(self, db: AsyncSession, category_id: int) -> CategoryResponse:
        """Obtiene una categoría por id.

        Raises:
            NotFoundError: La categoría no existe (Category not found)
        """
        category: Category | None = await category_repository.get_by_id(db, category_id)
        if category is None:
            raise _not_found(category_id)
        return self.to_response(category)

    async def create_category(self, db: AsyncSession, data: CategoryRequest) -> CategoryResponse:
        """Crea una categoría con nombre único.

        Raises:
            BadRequestError: Nombre vacío o duplicado (Blank or duplicate name)
        """
        name: str = require_max_length(require_text(data.name, EMPTY_NAME), 100, LONG_NAME)
        if await category_repository.get_by_name(db, name) is not None:
            raise BadRequestError("Ya existe una categoría con ese nombre")

        category: Category = await category_repository.create(db, {"name": name})
        return self.to_response(category)

    async def update_category(
        self,
        db: AsyncSession,
        category_id: int,
        data: CategoryRequest,
    ) -> CategoryResponse:
        """Renombra una categoría.

        Raises:
            NotFoundError: La categoría no existe (Category not found)
            BadRequestError: Nombre vacío o usado por otra categoría
        """
        category: Category | None = await category_repository.get_by_id(db, category_id)
        if category is None:
            raise _not_found(category_id)

        update_data: dict = {}
        if data.name is not None:
            name: str = require_max_length(require_text(data.name, EMPTY_NAME), 100, LONG_NAME)
            same_name: Category | None = await category_repository.get_by_name(db, name)
            if same_name is not None and same_name.id != category_id:
                raise BadRequestError("Ya existe otra categoría con ese nombre")
            update_data["name"] = name

        category = await category_repository.update(db, category, update_data)
        return self.to_response(category)

    async def delete_category(self, db: AsyncSession, category_id: int) -> None:
        """Elimina una categoría sin productos.

        Raises:
            NotFoundError: La categoría no existe (Category not found)
            BadRequestError: Tiene productos asociados, con la cantidad
                             (Category still has products; message carries the count)
        """
        if not await category_repository.exists(db, {"id": category_id}):
            raise _not_found(category_id)

        products: int = await product_repository.count(db, {"category_id": category_id})
        if products > 0:
            raise BadRequestError(
                f"No se puede eliminar la categoría porque tiene {products} producto(s) asociado(s). "
                "Elimina los productos primero."
            )

        await category_repository.delete(db, category_id)


# Singleton
category_service: CategoryService = CategoryService()
