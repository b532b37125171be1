"""Servicio de regiones.

Region Service — Business logic for region CRUD operations, including the
guard that refuses to delete a region that still has comunas.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from storefront.geography.models import Region
from storefront.geography.repositories.comuna_repository import comuna_repository
from storefront.geography.repositories.region_repository import region_repository
from storefront.geography.schemas import RegionRequest, RegionResponse
from storefront.utils.exceptions import BadRequestError, NotFoundError
from storefront.utils.validation import require_max_length, require_text

REGION_NOT_FOUND = "Región no encontrada"
EMPTY_NAME = "El nombre de la región no puede estar vacío"
LONG_NAME = "El nombre de la región no puede exceder 100 caracteres"


class RegionService:
    """Lógica de negocio de regiones.

    Service handling region business logic.
    """

    @staticmethod
    def to_response(region: Region) -> RegionResponse:
        return RegionResponse(region_id=region.id, name=region.name)

    async def list_regions(self, db: AsyncSession) -> list[RegionResponse]:
        """Lista todas las regiones (List all regions)."""
        regions = await region_repository.get_all(db)
        return [self.to_response(r) for r in regions]

    async def get_region(self, db: AsyncSession, region_id: int) -> RegionResponse:
        """Obtiene una región por id.

        Raises:
            NotFoundError: La región no existe (Region not found)
        """
        region: Region | None = await region_repository.get_by_id(db, region_id)
        if region is None:
            raise NotFoundError(REGION_NOT_FOUND)
        return self.to_response(region)

    async def create_region(self, db: AsyncSession, data: RegionRequest) -> RegionResponse:
        """Crea una región con nombre único.

        Create a region after checking the name is present and unused.

        Args:
            db: Sesión asíncrona (Async database session)
            data: Datos de la región (Region data)

        Returns:
            RegionResponse: Región creada (Created region)

        Raises:
            BadRequestError: Nombre vacío o duplicado (Blank or duplicate name)
        """
        name: str = require_max_length(require_text(data.name, EMPTY_NAME), 100, LONG_NAME)

        # Verificar duplicados antes de guardar — check-then-insert
        if await region_repository.get_by_name(db, name) is not None:
            raise BadRequestError("Ya existe una región con ese nombre")

        region: Region = await region_repository.create(db, {"name": name})
        return self.to_response(region)

    async def update_region(
        self,
        db: AsyncSession,
        region_id: int,
        data: RegionRequest,
    ) -> RegionResponse:
        """Actualiza el nombre de una región.

        Raises:
            NotFoundError: La región no existe (Region not found)
            BadRequestError: Nombre vacío o usado por otra región
                             (Blank name or name taken by another region)
        """
        region: Region | None = await region_repository.get_by_id(db, region_id)
        if region is None:
            raise NotFoundError(REGION_NOT_FOUND)

        update_data: dict = {}
        if data.name is not None:
            name: str = require_max_length(require_text(data.name, EMPTY_NAME), 100, LONG_NAME)
            same_name: Region | None = await region_repository.get_by_name(db, name)
            if same_name is not None and same_name.id != region_id:
                raise BadRequestError("Ya existe otra región con ese nombre")
            update_data["name"] = name

        region = await region_repository.update(db, region, update_data)
        return self.to_response(region)

    async def delete_region(self, db: AsyncSession, region_id: int) -> None:
        """Elimina una región sin comunas.

        Delete a region only when no comuna references it.

        Raises:
            NotFoundError: La región no existe (Region not found)
            BadRequestError: Tiene comunas asociadas, con la cantidad
                             (Region still has comunas; message carries the count)
        """
        if not await region_repository.exists(db, {"id": region_id}):
            raise NotFoundError(REGION_NOT_FOUND)

        comunas: int = await comuna_repository.count(db, {"region_id": region_id})
        if comunas > 0:
            raise BadRequestError(
                f"No se puede eliminar la región porque tiene {comunas} comuna(s) asociada(s). "
                "Elimina las comunas primero."
            )

        await region_repository.delete(db, region_id)


# Singleton
region_service: RegionService = RegionService()
