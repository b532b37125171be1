"""Repositorio de categorías.

Category Repository — Database queries for product categories.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from storefront.products.models import Category
from storefront.repositories.base import BaseRepository


class CategoryRepository(BaseRepository[Category]):
    """Consultas sobre la tabla categories.

    Repository handling database queries for the categories table.
    """

    def __init__(self) -> None:
        super().__init__(Category)

    async def get_by_name(self, db: AsyncSession, name: str) -> Category | None:
        """Busca una categoría por nombre exacto (Find a category by exact name)."""
        return await self.find_one_by(db, name=name)


# Singleton
category_repository: CategoryRepository = CategoryRepository()
