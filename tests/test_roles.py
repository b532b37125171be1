"""Tests de la API de roles (solo lectura)."""

from httpx import AsyncClient

URL = "/api/roles"


class TestRoles:
    """Lectura de roles."""

    async def test_empty_list(self, users_client: AsyncClient):
        res = await users_client.get(URL)
        assert res.status_code == 204

    async def test_list_roles(self, users_client: AsyncClient, roles):
        res = await users_client.get(URL)
        assert res.status_code == 200
        body = res.json()
        assert body["count"] == 2
        assert [r["name"] for r in body["data"]] == ["ADMIN", "CLIENT"]

    async def test_get_role(self, users_client: AsyncClient, roles):
        res = await users_client.get(f"{URL}/{roles['ADMIN'].id}")
        assert res.status_code == 200
        assert res.json()["data"] == {"roleId": roles["ADMIN"].id, "name": "ADMIN"}

    async def test_get_missing(self, users_client: AsyncClient):
        res = await users_client.get(f"{URL}/9")
        assert res.status_code == 404
        assert res.json()["message"] == "Rol no encontrado"
