"""Cliente de existencia remota.

Remote existence client — answers "does entity N exist in a sibling
service?" with a single ``GET {base_url}{path}``.

Outcomes:
    - 2xx: la entidad existe (exists, returns True)
    - 404: la entidad no existe (confirmed absent, returns False)
    - cualquier otro caso: no se pudo confirmar (could not confirm,
      raises UpstreamServiceError -> 503)

There are no retries; each check blocks the calling coroutine for one round
trip, bounded by ``REMOTE_TIMEOUT_SECONDS``.
"""

import httpx

from storefront.config import settings
from storefront.utils.exceptions import UpstreamServiceError


class ExistenceClient:
    """Verifica ids contra un microservicio hermano.

    Checks ids against one resource of a sibling microservice.

    Attributes:
        base_url: URL base del servicio (Sibling service base URL)
        path: Plantilla de ruta con ``{id}`` (Path template containing ``{id}``)
        service_label: Nombre legible del servicio para mensajes (Service name for messages)
    """

    def __init__(
        self,
        base_url: str,
        path: str,
        service_label: str,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url: str = base_url
        self.path: str = path
        self.service_label: str = service_label
        self.timeout: float = timeout if timeout is not None else settings.REMOTE_TIMEOUT_SECONDS
        # Transporte inyectable — tests pass an httpx.MockTransport
        self.transport: httpx.AsyncBaseTransport | None = transport

    def _error(self, reason: str) -> UpstreamServiceError:
        return UpstreamServiceError(
            f"Error al comunicarse con el microservicio de {self.service_label}: {reason}"
        )

    async def exists(self, record_id: int) -> bool:
        """Consulta si el id existe en el servicio remoto.

        Issue one GET for the id and translate the status code.

        Args:
            record_id: Id de la entidad remota (Remote entity id)

        Returns:
            bool: True con 2xx, False con 404 (True on 2xx, False on 404)

        Raises:
            UpstreamServiceError: Timeout, conexión rechazada u otro estado
                                  (Timeout, refused connection or any other status)
        """
        url: str = self.path.format(id=record_id)
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url, timeout=self.timeout, transport=self.transport
            ) as client:
                response: httpx.Response = await client.get(url)
        except httpx.HTTPError as exc:
            raise self._error(f"{type(exc).__name__}: {exc}") from exc

        if response.status_code == httpx.codes.NOT_FOUND:
            return False
        if response.is_success:
            return True
        raise self._error(f"respuesta inesperada {response.status_code}")
