"""Servicio de estados (solo lectura).

Status Service — Read access to the status catalogue.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from storefront.products.models import Status
from storefront.products.repositories.status_repository import status_repository
from storefront.products.schemas import StatusResponse
from storefront.utils.exceptions import NotFoundError


class StatusService:
    """Consultas del catálogo de estados (Status catalogue queries)."""

    @staticmethod
    def to_response(status: Status) -> StatusResponse:
        return StatusResponse(status_id=status.id, name=status.name)

    async def list_statuses(self, db: AsyncSession) -> list[StatusResponse]:
        statuses = await status_repository.get_all(db)
        return [self.to_response(s) for s in statuses]

    async def get_status(self, db: AsyncSession, status_id: int) -> StatusResponse:
        """Obtiene un estado por id.

        This is the endpoint the shopping service calls to confirm a status
        exists, so a missing id must answer 404.

        Raises:
            NotFoundError: El estado no existe (Status not found)
        """
        status: Status | None = await status_repository.get_by_id(db, status_id)
        if status is None:
            raise NotFoundError(f"Estado con ID {status_id} no encontrado")
        return self.to_response(status)


# Singleton
status_service: StatusService = StatusService()
