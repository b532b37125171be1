"""Esquemas Pydantic del servicio de geografía.

Geography request/response schemas.
Request fields are all optional at the schema level: required-field rules
live in the services so they run in a fixed order with Spanish messages.
"""

from storefront.schemas.common import CamelModel


class RegionRequest(CamelModel):
    """Creación o actualización parcial de región (Region create / partial update)."""

    name: str | None = None


class RegionResponse(CamelModel):
    """Región (Region response)."""

    region_id: int
    name: str


class ComunaRequest(CamelModel):
    """Creación o actualización parcial de comuna.

    Attributes:
        name: Nombre de la comuna (Comuna name)
        region_id: Región dueña (Owning region id)
    """

    name: str | None = None
    region_id: int | None = None


class ComunaResponse(CamelModel):
    """Comuna con su región (Comuna with its region)."""

    comuna_id: int
    name: str
    region: RegionResponse


class AddressRequest(CamelModel):
    """Creación o actualización parcial de dirección.

    Attributes:
        street: Calle (Street)
        number: Número (Number)
        user_id: Usuario remoto (Remote user id)
        comuna_id: Comuna (Comuna id)
    """

    street: str | None = None
    number: str | None = None
    user_id: int | None = None
    comuna_id: int | None = None


class AddressResponse(CamelModel):
    """Dirección con comuna y región (Address with comuna and region)."""

    address_id: int
    street: str
    number: str
    user_id: int
    comuna: ComunaResponse
