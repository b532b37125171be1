"""Tests de la API de comunas.

Comuna API tests — region checks, per-region name uniqueness and the
nested region in responses.
"""

import pytest_asyncio
from httpx import AsyncClient

URL = "/api/comunas"


@pytest_asyncio.fixture
async def region(geography_client: AsyncClient) -> dict:
    res = await geography_client.post("/api/regions", json={"name": "Región Metropolitana"})
    return res.json()["data"]


class TestComunaCreate:
    """Creación de comunas."""

    async def test_create_comuna(self, geography_client: AsyncClient, region):
        """La respuesta incluye la región anidada."""
        res = await geography_client.post(URL, json={"name": "Santiago", "regionId": region["regionId"]})
        assert res.status_code == 201
        data = res.json()["data"]
        assert data["name"] == "Santiago"
        assert data["region"] == region

    async def test_missing_region_id(self, geography_client: AsyncClient):
        res = await geography_client.post(URL, json={"name": "Santiago"})
        assert res.status_code == 400
        assert res.json()["message"] == "La comuna debe pertenecer a una región"

    async def test_name_checked_before_region(self, geography_client: AsyncClient):
        """La primera regla incumplida es la que se informa."""
        res = await geography_client.post(URL, json={"name": ""})
        assert res.status_code == 400
        assert res.json()["message"] == "El nombre de la comuna no puede estar vacío"

    async def test_unknown_region(self, geography_client: AsyncClient):
        res = await geography_client.post(URL, json={"name": "Santiago", "regionId": 999})
        assert res.status_code == 400
        assert res.json()["message"] == "La región con ID 999 no existe"

    async def test_duplicate_in_region(self, geography_client: AsyncClient, region):
        payload = {"name": "Santiago", "regionId": region["regionId"]}
        await geography_client.post(URL, json=payload)
        res = await geography_client.post(URL, json=payload)
        assert res.status_code == 400
        assert res.json()["message"] == "Ya existe una comuna con ese nombre en esta región"

    async def test_same_name_other_region(self, geography_client: AsyncClient, region):
        """El mismo nombre en otra región está permitido."""
        other = (await geography_client.post("/api/regions", json={"name": "Región del Maule"})).json()["data"]
        await geography_client.post(URL, json={"name": "San Pedro", "regionId": region["regionId"]})
        res = await geography_client.post(URL, json={"name": "San Pedro", "regionId": other["regionId"]})
        assert res.status_code == 201


class TestComunaRead:
    """Lectura de comunas."""

    async def test_list_by_region(self, geography_client: AsyncClient, region):
        other = (await geography_client.post("/api/regions", json={"name": "Región de Valparaíso"})).json()["data"]
        await geography_client.post(URL, json={"name": "Santiago", "regionId": region["regionId"]})
        await geography_client.post(URL, json={"name": "Viña del Mar", "regionId": other["regionId"]})

        res = await geography_client.get(f"{URL}/region/{region['regionId']}")
        assert res.status_code == 200
        assert res.json()["count"] == 1
        assert res.json()["data"][0]["name"] == "Santiago"

    async def test_list_by_region_empty(self, geography_client: AsyncClient, region):
        res = await geography_client.get(f"{URL}/region/{region['regionId']}")
        assert res.status_code == 204

    async def test_get_missing(self, geography_client: AsyncClient):
        res = await geography_client.get(f"{URL}/999")
        assert res.status_code == 404
        assert res.json()["message"] == "Comuna no encontrada"


class TestComunaUpdate:
    """Actualización de comunas."""

    async def test_move_to_other_region(self, geography_client: AsyncClient, region):
        other = (await geography_client.post("/api/regions", json={"name": "Región de Valparaíso"})).json()["data"]
        comuna = (await geography_client.post(URL, json={"name": "Quilpué", "regionId": region["regionId"]})).json()["data"]

        res = await geography_client.put(f"{URL}/{comuna['comunaId']}", json={"regionId": other["regionId"]})
        assert res.status_code == 200
        assert res.json()["data"]["region"]["name"] == "Región de Valparaíso"

    async def test_move_to_unknown_region(self, geography_client: AsyncClient, region):
        comuna = (await geography_client.post(URL, json={"name": "Quilpué", "regionId": region["regionId"]})).json()["data"]
        res = await geography_client.put(f"{URL}/{comuna['comunaId']}", json={"regionId": 999})
        assert res.status_code == 400
        assert res.json()["message"] == "La región con ID 999 no existe"

    async def test_rename_to_sibling_name(self, geography_client: AsyncClient, region):
        await geography_client.post(URL, json={"name": "Santiago", "regionId": region["regionId"]})
        comuna = (await geography_client.post(URL, json={"name": "Providencia", "regionId": region["regionId"]})).json()["data"]

        res = await geography_client.put(f"{URL}/{comuna['comunaId']}", json={"name": "Santiago"})
        assert res.status_code == 400
        assert res.json()["message"] == "Ya existe otra comuna con ese nombre en esta región"


class TestComunaDelete:
    async def test_delete(self, geography_client: AsyncClient, region):
        comuna = (await geography_client.post(URL, json={"name": "Santiago", "regionId": region["regionId"]})).json()["data"]
        res = await geography_client.delete(f"{URL}/{comuna['comunaId']}")
        assert res.status_code == 200
        assert (await geography_client.get(f"{URL}/{comuna['comunaId']}")).status_code == 404


class TestComunaLengthLimits:
    async def test_create_name_too_long(self, geography_client: AsyncClient, region):
        res = await geography_client.post(URL, json={"name": "C" * 101, "regionId": region["regionId"]})
        assert res.status_code == 400
        assert res.json()["message"] == "El nombre de la comuna no puede exceder 100 caracteres"

    async def test_rename_too_long(self, geography_client: AsyncClient, region):
        comuna = (await geography_client.post(URL, json={"name": "Santiago", "regionId": region["regionId"]})).json()["data"]
        res = await geography_client.put(f"{URL}/{comuna['comunaId']}", json={"name": "C" * 101})
        assert res.status_code == 400
