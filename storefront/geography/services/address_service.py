"""Servicio de direcciones.

Address Service — Business logic for shipping addresses.
Each address references a local comuna and a remote user; the user is
confirmed against the users service before any write.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from storefront.geography.clients import user_client
from storefront.geography.models import Address, Comuna, Region
from storefront.geography.repositories.address_repository import address_repository
from storefront.geography.repositories.comuna_repository import comuna_repository
from storefront.geography.schemas import (
    AddressRequest,
    AddressResponse,
    ComunaResponse,
    RegionResponse,
)
from storefront.utils.exceptions import BadRequestError, NotFoundError
from storefront.utils.validation import require_max_length, require_present, require_text

ADDRESS_NOT_FOUND = "Dirección no encontrada"
EMPTY_STREET = "La calle no puede estar vacía"
EMPTY_NUMBER = "El número no puede estar vacío"
LONG_STREET = "La calle no puede exceder 200 caracteres"
LONG_NUMBER = "El número no puede exceder 20 caracteres"


def _user_missing(user_id: int) -> str:
    return f"El usuario con ID {user_id} no existe"


def _street(value: str | None) -> str:
    return require_max_length(require_text(value, EMPTY_STREET), 200, LONG_STREET)


def _number(value: str | None) -> str:
    return require_max_length(require_text(value, EMPTY_NUMBER), 20, LONG_NUMBER)


class AddressService:
    """Lógica de negocio de direcciones.

    Service handling address business logic.
    """

    @staticmethod
    def to_response(address: Address, comuna: Comuna, region: Region) -> AddressResponse:
        return AddressResponse(
            address_id=address.id,
            street=address.street,
            number=address.number,
            user_id=address.user_id,
            comuna=ComunaResponse(
                comuna_id=comuna.id,
                name=comuna.name,
                region=RegionResponse(region_id=region.id, name=region.name),
            ),
        )

    async def _load(self, db: AsyncSession, address_id: int) -> AddressResponse:
        row = await address_repository.get_with_location(db, address_id)
        if row is None:
            raise NotFoundError(ADDRESS_NOT_FOUND)
        return self.to_response(*row)

    async def _require_comuna(self, db: AsyncSession, comuna_id: int) -> None:
        if not await comuna_repository.exists(db, {"id": comuna_id}):
            raise BadRequestError(f"La comuna con ID {comuna_id} no existe")

    async def _require_user(self, user_id: int) -> None:
        if not await user_client.exists(user_id):
            raise BadRequestError(_user_missing(user_id))

    async def list_addresses(self, db: AsyncSession) -> list[AddressResponse]:
        """Lista todas las direcciones (List all addresses)."""
        rows = await address_repository.list_with_location(db)
        return [self.to_response(*row) for row in rows]

    async def list_by_user(self, db: AsyncSession, user_id: int) -> list[AddressResponse]:
        """Lista las direcciones de un usuario remoto.

        Raises:
            NotFoundError: El usuario no existe en el servicio de usuarios
                           (User confirmed absent by the users service)
            UpstreamServiceError: No se pudo consultar el servicio (Users service unreachable)
        """
        if not await user_client.exists(user_id):
            raise NotFoundError(_user_missing(user_id))
        rows = await address_repository.list_with_location(db, user_id=user_id)
        return [self.to_response(*row) for row in rows]

    async def get_address(self, db: AsyncSession, address_id: int) -> AddressResponse:
        """Obtiene una dirección por id (Get an address by id)."""
        return await self._load(db, address_id)

    async def create_address(self, db: AsyncSession, data: AddressRequest) -> AddressResponse:
        """Crea una dirección.

        Validation order: street, number, user id present, comuna id present,
        comuna exists locally, user exists remotely. Nothing is written when
        any rule fails.

        Raises:
            BadRequestError: Regla incumplida o referencia inexistente
                             (Failed rule or missing reference)
            UpstreamServiceError: El servicio de usuarios no respondió
                                  (Users service could not confirm)
        """
        street: str = _street(data.street)
        number: str = _number(data.number)
        user_id: int = require_present(data.user_id, "La dirección debe estar asociada a un usuario")
        comuna_id: int = require_present(data.comuna_id, "La dirección debe tener una comuna válida")

        await self._require_comuna(db, comuna_id)
        await self._require_user(user_id)

        address: Address = await address_repository.create(
            db,
            {"street": street, "number": number, "user_id": user_id, "comuna_id": comuna_id},
        )
        return await self._load(db, address.id)

    async def update_address(
        self,
        db: AsyncSession,
        address_id: int,
        data: AddressRequest,
    ) -> AddressResponse:
        """Actualiza los campos presentes de una dirección.

        References are re-validated only when their id is present.

        Raises:
            NotFoundError: La dirección no existe (Address not found)
            BadRequestError: Regla incumplida o referencia inexistente
        """
        address: Address | None = await address_repository.get_by_id(db, address_id)
        if address is None:
            raise NotFoundError(ADDRESS_NOT_FOUND)

        update_data: dict = {}
        if data.street is not None:
            update_data["street"] = _street(data.street)
        if data.number is not None:
            update_data["number"] = _number(data.number)
        if data.comuna_id is not None:
            await self._require_comuna(db, data.comuna_id)
            update_data["comuna_id"] = data.comuna_id
        if data.user_id is not None:
            await self._require_user(data.user_id)
            update_data["user_id"] = data.user_id

        await address_repository.update(db, address, update_data)
        return await self._load(db, address_id)

    async def delete_address(self, db: AsyncSession, address_id: int) -> None:
        """Elimina una dirección (Delete an address).

        Raises:
            NotFoundError: La dirección no existe (Address not found)
        """
        if not await address_repository.delete(db, address_id):
            raise NotFoundError(ADDRESS_NOT_FOUND)


# Singleton
address_service: AddressService = AddressService()
