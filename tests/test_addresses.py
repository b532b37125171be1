"""Tests de la API de direcciones.

Address API tests — local comuna checks, the remote user existence check
(mocked) and the 503 path when the users service cannot confirm.
"""

import pytest_asyncio
from httpx import AsyncClient

from storefront.utils.exceptions import UpstreamServiceError

URL = "/api/addresses"


@pytest_asyncio.fixture
async def comuna(geography_client: AsyncClient) -> dict:
    region = (await geography_client.post("/api/regions", json={"name": "Región Metropolitana"})).json()["data"]
    res = await geography_client.post("/api/comunas", json={"name": "Santiago", "regionId": region["regionId"]})
    return res.json()["data"]


def _payload(comuna: dict, **overrides) -> dict:
    payload = {"street": "Av. Libertador", "number": "1234", "userId": 1, "comunaId": comuna["comunaId"]}
    payload.update(overrides)
    return payload


class TestAddressCreate:
    """Creación de direcciones."""

    async def test_create_address(self, geography_client: AsyncClient, comuna, remote_user):
        """Dirección válida → 201 con comuna y región anidadas."""
        res = await geography_client.post(URL, json=_payload(comuna))
        assert res.status_code == 201
        data = res.json()["data"]
        assert data["street"] == "Av. Libertador"
        assert data["userId"] == 1
        assert data["comuna"]["name"] == "Santiago"
        assert data["comuna"]["region"]["name"] == "Región Metropolitana"
        remote_user.assert_awaited_once_with(1)

    async def test_unknown_user(self, geography_client: AsyncClient, comuna, remote_user):
        """Usuario confirmado inexistente → 400 y nada se guarda."""
        remote_user.return_value = False
        res = await geography_client.post(URL, json=_payload(comuna, userId=999))
        assert res.status_code == 400
        assert res.json()["message"] == "El usuario con ID 999 no existe"

        assert (await geography_client.get(URL)).status_code == 204

    async def test_users_service_down(self, geography_client: AsyncClient, comuna, remote_user):
        """Servicio de usuarios sin respuesta → 503, distinto de inexistente."""
        remote_user.side_effect = UpstreamServiceError(
            "Error al comunicarse con el microservicio de usuarios: ConnectError"
        )
        res = await geography_client.post(URL, json=_payload(comuna))
        assert res.status_code == 503
        body = res.json()
        assert body["success"] is False
        assert body["statusCode"] == 503
        assert "usuarios" in body["message"]

        assert (await geography_client.get(URL)).status_code == 204

    async def test_blank_street(self, geography_client: AsyncClient, comuna, remote_user):
        res = await geography_client.post(URL, json=_payload(comuna, street=""))
        assert res.status_code == 400
        assert res.json()["message"] == "La calle no puede estar vacía"
        remote_user.assert_not_awaited()

    async def test_missing_user_id(self, geography_client: AsyncClient, comuna, remote_user):
        payload = _payload(comuna)
        del payload["userId"]
        res = await geography_client.post(URL, json=payload)
        assert res.status_code == 400
        assert res.json()["message"] == "La dirección debe estar asociada a un usuario"

    async def test_unknown_comuna(self, geography_client: AsyncClient, comuna, remote_user):
        """La comuna local se valida antes que el usuario remoto."""
        res = await geography_client.post(URL, json=_payload(comuna, comunaId=999))
        assert res.status_code == 400
        assert res.json()["message"] == "La comuna con ID 999 no existe"
        remote_user.assert_not_awaited()


class TestAddressRead:
    """Lectura de direcciones."""

    async def test_list_by_user(self, geography_client: AsyncClient, comuna, remote_user):
        await geography_client.post(URL, json=_payload(comuna, userId=1))
        await geography_client.post(URL, json=_payload(comuna, userId=2, number="99"))

        res = await geography_client.get(f"{URL}/user/2")
        assert res.status_code == 200
        body = res.json()
        assert body["count"] == 1
        assert body["data"][0]["number"] == "99"

    async def test_list_by_user_without_addresses(self, geography_client: AsyncClient, remote_user):
        """Usuario existente sin direcciones → 204."""
        res = await geography_client.get(f"{URL}/user/5")
        assert res.status_code == 204

    async def test_list_by_unknown_user(self, geography_client: AsyncClient, remote_user):
        """Usuario inexistente → 404."""
        remote_user.return_value = False
        res = await geography_client.get(f"{URL}/user/999")
        assert res.status_code == 404
        assert res.json()["message"] == "El usuario con ID 999 no existe"

    async def test_get_missing(self, geography_client: AsyncClient):
        res = await geography_client.get(f"{URL}/999")
        assert res.status_code == 404
        assert res.json()["message"] == "Dirección no encontrada"


class TestAddressUpdate:
    """Actualización de direcciones."""

    async def test_update_street(self, geography_client: AsyncClient, comuna, remote_user):
        address = (await geography_client.post(URL, json=_payload(comuna))).json()["data"]
        remote_user.reset_mock()

        res = await geography_client.put(f"{URL}/{address['addressId']}", json={"street": "Los Leones"})
        assert res.status_code == 200
        assert res.json()["data"]["street"] == "Los Leones"
        assert res.json()["data"]["number"] == "1234"
        # sin userId no hay verificación remota
        remote_user.assert_not_awaited()

    async def test_update_blank_number(self, geography_client: AsyncClient, comuna, remote_user):
        """Campo presente pero vacío → 400 y la fila no cambia."""
        address = (await geography_client.post(URL, json=_payload(comuna))).json()["data"]
        res = await geography_client.put(
            f"{URL}/{address['addressId']}", json={"street": "Otra", "number": " "}
        )
        assert res.status_code == 400
        assert res.json()["message"] == "El número no puede estar vacío"

        current = (await geography_client.get(f"{URL}/{address['addressId']}")).json()["data"]
        assert current["street"] == "Av. Libertador"

    async def test_update_to_unknown_user(self, geography_client: AsyncClient, comuna, remote_user):
        address = (await geography_client.post(URL, json=_payload(comuna))).json()["data"]
        remote_user.return_value = False
        res = await geography_client.put(f"{URL}/{address['addressId']}", json={"userId": 42})
        assert res.status_code == 400
        assert res.json()["message"] == "El usuario con ID 42 no existe"


class TestAddressDelete:
    async def test_delete(self, geography_client: AsyncClient, comuna, remote_user):
        address = (await geography_client.post(URL, json=_payload(comuna))).json()["data"]
        res = await geography_client.delete(f"{URL}/{address['addressId']}")
        assert res.status_code == 200
        assert res.json()["message"] == "Dirección eliminada exitosamente"

    async def test_delete_missing(self, geography_client: AsyncClient):
        res = await geography_client.delete(f"{URL}/999")
        assert res.status_code == 404


class TestAddressLengthLimits:
    """Largo máximo de calle y número."""

    async def test_street_too_long(self, geography_client: AsyncClient, comuna, remote_user):
        res = await geography_client.post(URL, json=_payload(comuna, street="s" * 201))
        assert res.status_code == 400
        assert res.json()["message"] == "La calle no puede exceder 200 caracteres"
        remote_user.assert_not_awaited()

    async def test_number_too_long(self, geography_client: AsyncClient, comuna, remote_user):
        res = await geography_client.post(URL, json=_payload(comuna, number="1" * 21))
        assert res.status_code == 400
        assert res.json()["message"] == "El número no puede exceder 20 caracteres"

    async def test_update_number_too_long(self, geography_client: AsyncClient, comuna, remote_user):
        address = (await geography_client.post(URL, json=_payload(comuna))).json()["data"]
        res = await geography_client.put(f"{URL}/{address['addressId']}", json={"number": "1" * 21})
        assert res.status_code == 400
        assert (await geography_client.get(f"{URL}/{address['addressId']}")).json()["data"]["number"] == "1234"
