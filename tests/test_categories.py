"""Tests de la API de categorías.

Category API tests — uniqueness and the delete guard on linked products.
"""

from httpx import AsyncClient

URL = "/api/categories"


class TestCategoryCreate:
    """Creación de categorías."""

    async def test_create_category(self, products_client: AsyncClient):
        res = await products_client.post(URL, json={"name": "Fuentes de poder"})
        assert res.status_code == 201
        data = res.json()["data"]
        assert data["name"] == "Fuentes de poder"
        assert "categoryId" in data

    async def test_create_duplicate(self, products_client: AsyncClient, catalog):
        """Nombre existente → 400."""
        res = await products_client.post(URL, json={"name": "Ram"})
        assert res.status_code == 400
        assert res.json()["message"] == "Ya existe una categoría con ese nombre"

    async def test_create_blank(self, products_client: AsyncClient):
        res = await products_client.post(URL, json={"name": ""})
        assert res.status_code == 400
        assert res.json()["message"] == "El nombre de la categoría no puede estar vacío"


class TestCategoryRead:
    """Lectura de categorías."""

    async def test_empty_list(self, products_client: AsyncClient):
        res = await products_client.get(URL)
        assert res.status_code == 204

    async def test_list(self, products_client: AsyncClient, catalog):
        res = await products_client.get(URL)
        assert res.status_code == 200
        assert res.json()["count"] == 1

    async def test_get_missing(self, products_client: AsyncClient):
        res = await products_client.get(f"{URL}/77")
        assert res.status_code == 404
        assert res.json()["message"] == "Categoría con ID 77 no encontrada"


class TestCategoryUpdate:
    """Actualización de categorías."""

    async def test_rename(self, products_client: AsyncClient, catalog):
        res = await products_client.put(f"{URL}/{catalog.category.id}", json={"name": "Memorias RAM"})
        assert res.status_code == 200
        assert res.json()["data"]["name"] == "Memorias RAM"

    async def test_rename_to_existing(self, products_client: AsyncClient, catalog):
        other = (await products_client.post(URL, json={"name": "Procesadores"})).json()["data"]
        res = await products_client.put(f"{URL}/{other['categoryId']}", json={"name": "Ram"})
        assert res.status_code == 400
        assert res.json()["message"] == "Ya existe otra categoría con ese nombre"


class TestCategoryDelete:
    """Eliminación de categorías."""

    async def test_delete_with_products(self, products_client: AsyncClient, catalog):
        """Categoría con productos → 400 con la cantidad."""
        res = await products_client.delete(f"{URL}/{catalog.category.id}")
        assert res.status_code == 400
        assert res.json()["message"] == (
            "No se puede eliminar la categoría porque tiene 1 producto(s) asociado(s). "
            "Elimina los productos primero."
        )

    async def test_delete_empty_category(self, products_client: AsyncClient):
        category = (await products_client.post(URL, json={"name": "Gabinetes"})).json()["data"]
        res = await products_client.delete(f"{URL}/{category['categoryId']}")
        assert res.status_code == 200
        assert res.json()["message"] == "Categoría eliminada exitosamente"

    async def test_delete_missing(self, products_client: AsyncClient):
        res = await products_client.delete(f"{URL}/77")
        assert res.status_code == 404


class TestCategoryLengthLimits:
    async def test_create_name_too_long(self, products_client: AsyncClient):
        res = await products_client.post(URL, json={"name": "c" * 101})
        assert res.status_code == 400
        assert res.json()["message"] == "El nombre de la categoría no puede exceder los 100 caracteres"

    async def test_rename_too_long(self, products_client: AsyncClient, catalog):
        res = await products_client.put(f"{URL}/{catalog.category.id}", json={"name": "c" * 101})
        assert res.status_code == 400
