"""Datos iniciales del servicio de geografía.

Geography fixture data — two Chilean regions and four comunas.
Idempotent through a single emptiness check on regions; concurrent first
runs are not guarded against.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from storefront.geography.repositories.comuna_repository import comuna_repository
from storefront.geography.repositories.region_repository import region_repository

# Región → comunas
REGIONS: dict[str, list[str]] = {
    "Región Metropolitana": ["Santiago", "Providencia"],
    "Región de Valparaíso": ["Viña del Mar", "Valparaíso"],
}


async def seed_geography(db: AsyncSession) -> str:
    """Inserta regiones y comunas si la tabla de regiones está vacía.

    Seed regions and comunas when the regions table is empty.

    Returns:
        str: Resumen de lo realizado (Summary message)
    """
    if await region_repository.count(db) > 0:
        return "Los datos ya existen."

    for region_name, comunas in REGIONS.items():
        region = await region_repository.create(db, {"name": region_name})
        for comuna_name in comunas:
            await comuna_repository.create(db, {"name": comuna_name, "region_id": region.id})

    await db.commit()
    return "Regiones creadas. Comunas creadas."
