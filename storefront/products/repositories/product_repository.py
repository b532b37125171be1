"""Repositorio de productos.

Product Repository — Products are read joined with their category and
status; includes the filters by category, by status and the name search.
"""

from typing import Sequence

from sqlalchemy import Row, Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.products.models import Category, Product, Status
from storefront.repositories.base import BaseRepository


class ProductRepository(BaseRepository[Product]):
    """Consultas sobre la tabla products.

    Repository handling database queries for the products table.
    """

    def __init__(self) -> None:
        super().__init__(Product)

    def _joined(self) -> Select:
        return (
            select(Product, Category, Status)
            .join(Category, Product.category_id == Category.id)
            .join(Status, Product.status_id == Status.id)
        )

    async def list_with_relations(
        self,
        db: AsyncSession,
        category_id: int | None = None,
        status_id: int | None = None,
    ) -> Sequence[Row]:
        """Lista productos con categoría y estado.

        List products joined with category and status, optionally filtered.

        Args:
            db: Sesión asíncrona (Async database session)
            category_id: Filtro por categoría (Optional category filter)
            status_id: Filtro por estado (Optional status filter)

        Returns:
            Sequence[Row]: Filas (producto, categoría, estado)
        """
        query: Select = self._joined()
        if category_id is not None:
            query = query.where(Product.category_id == category_id)
        if status_id is not None:
            query = query.where(Product.status_id == status_id)
        result = await db.execute(query.order_by(Product.id))
        return result.all()

    async def search_by_name(self, db: AsyncSession, text: str) -> Sequence[Row]:
        """Busca productos cuyo nombre contenga el texto, sin distinguir mayúsculas.

        Case-insensitive substring search on the product name.
        """
        # LIKE sobre lower(): portable across PostgreSQL and SQLite
        pattern: str = f"%{text.lower()}%"
        query: Select = self._joined().where(func.lower(Product.name).like(pattern))
        result = await db.execute(query.order_by(Product.id))
        return result.all()

    async def get_with_relations(self, db: AsyncSession, product_id: int) -> Row | None:
        """Obtiene un producto con categoría y estado (Fetch one product with its relations)."""
        result = await db.execute(self._joined().where(Product.id == product_id))
        return result.first()


# Singleton
product_repository: ProductRepository = ProductRepository()
