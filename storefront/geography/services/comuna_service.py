"""Servicio de comunas.

Comuna Service — Business logic for comunas. A comuna's name is unique
within its region and its region must exist locally.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from storefront.geography.models import Comuna, Region
from storefront.geography.repositories.comuna_repository import comuna_repository
from storefront.geography.repositories.region_repository import region_repository
from storefront.geography.schemas import ComunaRequest, ComunaResponse, RegionResponse
from storefront.utils.exceptions import BadRequestError, NotFoundError
from storefront.utils.validation import require_max_length, require_present, require_text

COMUNA_NOT_FOUND = "Comuna no encontrada"
EMPTY_NAME = "El nombre de la comuna no puede estar vacío"
LONG_NAME = "El nombre de la comuna no puede exceder 100 caracteres"


class ComunaService:
    """Lógica de negocio de comunas.

    Service handling comuna business logic.
    """

    @staticmethod
    def to_response(comuna: Comuna, region: Region) -> ComunaResponse:
        return ComunaResponse(
            comuna_id=comuna.id,
            name=comuna.name,
            region=RegionResponse(region_id=region.id, name=region.name),
        )

    async def _load(self, db: AsyncSession, comuna_id: int) -> ComunaResponse:
        row = await comuna_repository.get_with_region(db, comuna_id)
        if row is None:
            raise NotFoundError(COMUNA_NOT_FOUND)
        return self.to_response(*row)

    async def _require_region(self, db: AsyncSession, region_id: int) -> Region:
        region: Region | None = await region_repository.get_by_id(db, region_id)
        if region is None:
            raise BadRequestError(f"La región con ID {region_id} no existe")
        return region

    async def list_comunas(
        self,
        db: AsyncSession,
        region_id: int | None = None,
    ) -> list[ComunaResponse]:
        """Lista comunas, opcionalmente de una región.

        List comunas with their region; an unknown region simply yields an
        empty list.
        """
        rows = await comuna_repository.list_with_region(db, region_id)
        return [self.to_response(comuna, region) for comuna, region in rows]

    async def get_comuna(self, db: AsyncSession, comuna_id: int) -> ComunaResponse:
        """Obtiene una comuna por id (Get a comuna by id)."""
        return await self._load(db, comuna_id)

    async def create_comuna(self, db: AsyncSession, data: ComunaRequest) -> ComunaResponse:
        """Crea una comuna dentro de una región existente.

        Validation order: name present, region id present, region exists,
        name unused within the region.

        Raises:
            BadRequestError: Cualquier regla incumplida (Any failed rule)
        """
        name: str = require_max_length(require_text(data.name, EMPTY_NAME), 100, LONG_NAME)
        region_id: int = require_present(data.region_id, "La comuna debe pertenecer a una región")
        await self._require_region(db, region_id)

        if await comuna_repository.get_by_name_in_region(db, name, region_id) is not None:
            raise BadRequestError("Ya existe una comuna con ese nombre en esta región")

        comuna: Comuna = await comuna_repository.create(db, {"name": name, "region_id": region_id})
        return await self._load(db, comuna.id)

    async def update_comuna(
        self,
        db: AsyncSession,
        comuna_id: int,
        data: ComunaRequest,
    ) -> ComunaResponse:
        """Actualiza nombre y/o región de una comuna.

        The name uniqueness check runs against the region the comuna will
        belong to after the update.

        Raises:
            NotFoundError: La comuna no existe (Comuna not found)
            BadRequestError: Región inexistente o nombre repetido
                             (Unknown region or duplicated name)
        """
        comuna: Comuna | None = await comuna_repository.get_by_id(db, comuna_id)
        if comuna is None:
            raise NotFoundError(COMUNA_NOT_FOUND)

        update_data: dict = {}
        target_region_id: int = comuna.region_id
        if data.region_id is not None:
            await self._require_region(db, data.region_id)
            target_region_id = data.region_id
            update_data["region_id"] = data.region_id

        target_name: str = comuna.name
        if data.name is not None:
            target_name = require_max_length(require_text(data.name, EMPTY_NAME), 100, LONG_NAME)
            update_data["name"] = target_name

        if update_data:
            same_name: Comuna | None = await comuna_repository.get_by_name_in_region(
                db, target_name, target_region_id
            )
            if same_name is not None and same_name.id != comuna_id:
                raise BadRequestError("Ya existe otra comuna con ese nombre en esta región")

        await comuna_repository.update(db, comuna, update_data)
        return await self._load(db, comuna_id)

    async def delete_comuna(self, db: AsyncSession, comuna_id: int) -> None:
        """Elimina una comuna (Delete a comuna).

        Raises:
            NotFoundError: La comuna no existe (Comuna not found)
        """
        if not await comuna_repository.delete(db, comuna_id):
            raise NotFoundError(COMUNA_NOT_FOUND)


# Singleton
comuna_service: ComunaService = ComunaService()
