"""Datos iniciales del servicio de productos.

Products fixture data — the status catalogue, three categories and six
products. Statuses and categories are each guarded by an emptiness check;
products are only inserted together with freshly created categories.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from storefront.products.repositories.category_repository import category_repository
from storefront.products.repositories.product_repository import product_repository
from storefront.products.repositories.status_repository import status_repository

STATUSES: list[str] = ["Activo", "Inactivo", "Pendiente", "Completado", "Cancelado", "En envío"]

CATEGORIES: list[str] = ["Tarjetas de Graficas", "Ram", "Procesadores"]

# (nombre, descripción, precio, stock, categoría)
PRODUCTS: list[tuple[str, str, int, int, str]] = [
    ("ASUS ROG Strix RTX 4090", "Tarjeta gráfica de alto rendimiento con 24GB GDDR6X", 1899990, 15, "Tarjetas de Graficas"),
    ("Ram DDR5 Corsair Vengeance", "Corsair Vengeance DDR5 32GB (2x16GB) 5600MHz", 129990, 30, "Ram"),
    ("AMD Ryzen 9 7950X", "Procesador de 16 núcleos y 32 hilos a 5.7GHz", 599990, 20, "Procesadores"),
    ("NVIDIA GeForce RTX 4080", "Tarjeta gráfica gaming con 16GB GDDR6X", 1299990, 25, "Tarjetas de Graficas"),
    ("G.Skill Trident Z5 RGB", "G.Skill Trident Z5 RGB DDR5 64GB (2x32GB) 6000MHz", 249990, 40, "Ram"),
    ("Intel Core i9-14900K", "Procesador Intel de 14va generación, 24 núcleos", 699990, 18, "Procesadores"),
]


async def seed_products(db: AsyncSession) -> str:
    """Inserta el catálogo de ejemplo en tablas vacías.

    Seed statuses, categories and products into empty tables.

    Returns:
        str: Resumen de lo realizado (Summary message)
    """
    message: str = ""

    if await status_repository.count(db) == 0:
        for name in STATUSES:
            await status_repository.create(db, {"name": name})
        message += "Estados creados. "

    if await category_repository.count(db) == 0:
        category_ids: dict[str, int] = {}
        for name in CATEGORIES:
            category = await category_repository.create(db, {"name": name})
            category_ids[name] = category.id
        message += "Categorías creadas. "

        active = await status_repository.get_by_name(db, "Activo")
        for name, description, price, stock, category_name in PRODUCTS:
            await product_repository.create(
                db,
                {
                    "name": name,
                    "description": description,
                    "price": price,
                    "stock": stock,
                    "category_id": category_ids[category_name],
                    "status_id": active.id,
                },
            )
        message += "Productos creados."
    else:
        message += "Los datos ya existen."

    await db.commit()
    return message
