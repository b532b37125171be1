"""Tests de la API de productos.

Product API tests — ordered create rules, partial updates that leave the
row untouched on failure, the filters and the name search.
"""

from httpx import AsyncClient

URL = "/api/products"


def _payload(catalog, **overrides) -> dict:
    payload = {
        "name": "AMD Ryzen 9 7950X",
        "description": "Procesador de 16 núcleos",
        "price": 599990,
        "stock": 20,
        "productPhoto": "https://example.com/ryzen.png",
        "categoryId": catalog.category.id,
        "statusId": catalog.status.id,
    }
    payload.update(overrides)
    return payload


class TestProductCreate:
    """Creación de productos."""

    async def test_create_product(self, products_client: AsyncClient, catalog):
        """Producto válido → 201 con categoría y estado anidados."""
        res = await products_client.post(URL, json=_payload(catalog))
        assert res.status_code == 201
        data = res.json()["data"]
        assert data["price"] == 599990
        assert data["productPhoto"] == "https://example.com/ryzen.png"
        assert data["category"] == {"categoryId": catalog.category.id, "name": "Ram"}
        assert data["status"]["name"] == "Activo"

    async def test_photo_is_optional(self, products_client: AsyncClient, catalog):
        payload = _payload(catalog)
        del payload["productPhoto"]
        res = await products_client.post(URL, json=payload)
        assert res.status_code == 201
        assert res.json()["data"]["productPhoto"] is None

    async def test_zero_price_and_stock(self, products_client: AsyncClient, catalog):
        res = await products_client.post(URL, json=_payload(catalog, price=0, stock=0))
        assert res.status_code == 201

    async def test_first_failing_rule_wins(self, products_client: AsyncClient, catalog):
        """Nombre vacío y precio negativo → se informa el nombre."""
        res = await products_client.post(URL, json=_payload(catalog, name="", price=-1))
        assert res.status_code == 400
        assert res.json()["message"] == "El nombre del producto no puede estar vacío"

    async def test_negative_price(self, products_client: AsyncClient, catalog):
        res = await products_client.post(URL, json=_payload(catalog, price=-1, stock=-1))
        assert res.status_code == 400
        assert res.json()["message"] == "El precio debe ser mayor o igual a 0"

    async def test_missing_stock(self, products_client: AsyncClient, catalog):
        payload = _payload(catalog)
        del payload["stock"]
        res = await products_client.post(URL, json=payload)
        assert res.status_code == 400
        assert res.json()["message"] == "El stock debe ser mayor o igual a 0"

    async def test_missing_category(self, products_client: AsyncClient, catalog):
        payload = _payload(catalog)
        del payload["categoryId"]
        res = await products_client.post(URL, json=payload)
        assert res.status_code == 400
        assert res.json()["message"] == "El producto debe tener una categoría"

    async def test_unknown_category(self, products_client: AsyncClient, catalog):
        res = await products_client.post(URL, json=_payload(catalog, categoryId=99, statusId=99))
        assert res.status_code == 400
        assert res.json()["message"] == "La categoría con ID 99 no existe"

    async def test_unknown_status(self, products_client: AsyncClient, catalog):
        res = await products_client.post(URL, json=_payload(catalog, statusId=99))
        assert res.status_code == 400
        assert res.json()["message"] == "El estado con ID 99 no existe"

    async def test_price_wrong_type(self, products_client: AsyncClient, catalog):
        """Precio no numérico → 400 en el sobre, no 422."""
        res = await products_client.post(URL, json=_payload(catalog, price="caro"))
        assert res.status_code == 400
        body = res.json()
        assert body["success"] is False
        assert body["message"].startswith("price:")


class TestProductRead:
    """Lectura, filtros y búsqueda."""

    async def test_get_product(self, products_client: AsyncClient, catalog):
        res = await products_client.get(f"{URL}/{catalog.product.id}")
        assert res.status_code == 200
        assert res.json()["data"]["name"] == "Ram DDR5 Corsair Vengeance"

    async def test_get_missing(self, products_client: AsyncClient):
        res = await products_client.get(f"{URL}/500")
        assert res.status_code == 404
        assert res.json()["message"] == "Producto con ID 500 no encontrado"

    async def test_search_is_case_insensitive(self, products_client: AsyncClient, catalog):
        res = await products_client.get(f"{URL}/search", params={"query": "corsair"})
        assert res.status_code == 200
        assert res.json()["count"] == 1

        res = await products_client.get(f"{URL}/search", params={"query": "DDR5"})
        assert res.json()["data"][0]["productId"] == catalog.product.id

    async def test_search_without_matches(self, products_client: AsyncClient, catalog):
        res = await products_client.get(f"{URL}/search", params={"query": "nvidia"})
        assert res.status_code == 204

    async def test_by_category(self, products_client: AsyncClient, catalog):
        res = await products_client.get(f"{URL}/category/{catalog.category.id}")
        assert res.status_code == 200
        assert res.json()["count"] == 1

    async def test_by_unknown_category(self, products_client: AsyncClient, catalog):
        """Categoría inexistente → listado vacío (204)."""
        res = await products_client.get(f"{URL}/category/99")
        assert res.status_code == 204

    async def test_by_status(self, products_client: AsyncClient, catalog):
        res = await products_client.get(f"{URL}/status/{catalog.status.id}")
        assert res.status_code == 200
        assert res.json()["data"][0]["statusId"] == catalog.status.id


class TestProductUpdate:
    """Actualización parcial de productos."""

    async def test_update_price(self, products_client: AsyncClient, catalog):
        res = await products_client.put(f"{URL}/{catalog.product.id}", json={"price": 119990})
        assert res.status_code == 200
        data = res.json()["data"]
        assert data["price"] == 119990
        assert data["stock"] == 30

    async def test_negative_stock_leaves_row(self, products_client: AsyncClient, catalog):
        """Stock negativo → 400 y el producto no cambia."""
        res = await products_client.put(f"{URL}/{catalog.product.id}", json={"stock": -5})
        assert res.status_code == 400
        assert res.json()["message"] == "El stock no puede ser negativo"

        res = await products_client.get(f"{URL}/{catalog.product.id}")
        assert res.json()["data"]["stock"] == 30

    async def test_negative_price(self, products_client: AsyncClient, catalog):
        res = await products_client.put(f"{URL}/{catalog.product.id}", json={"price": -10})
        assert res.status_code == 400
        assert res.json()["message"] == "El precio no puede ser negativo"

    async def test_blank_name(self, products_client: AsyncClient, catalog):
        res = await products_client.put(f"{URL}/{catalog.product.id}", json={"name": "  "})
        assert res.status_code == 400

    async def test_unknown_category(self, products_client: AsyncClient, catalog):
        res = await products_client.put(
            f"{URL}/{catalog.product.id}", json={"price": 1, "categoryId": 99}
        )
        assert res.status_code == 400
        assert res.json()["message"] == "La categoría con ID 99 no existe"

        res = await products_client.get(f"{URL}/{catalog.product.id}")
        assert res.json()["data"]["price"] == 129990

    async def test_update_missing(self, products_client: AsyncClient):
        res = await products_client.put(f"{URL}/500", json={"price": 1})
        assert res.status_code == 404


class TestProductDelete:
    async def test_delete(self, products_client: AsyncClient, catalog):
        res = await products_client.delete(f"{URL}/{catalog.product.id}")
        assert res.status_code == 200
        assert res.json()["message"] == "Producto eliminado exitosamente"
        assert (await products_client.get(URL)).status_code == 204

    async def test_delete_missing(self, products_client: AsyncClient):
        res = await products_client.delete(f"{URL}/500")
        assert res.status_code == 404


class TestProductLengthLimits:
    """Largo máximo de los textos del producto."""

    async def test_name_too_long(self, products_client: AsyncClient, catalog):
        res = await products_client.post(URL, json=_payload(catalog, name="x" * 201))
        assert res.status_code == 400
        assert res.json()["message"] == "El nombre del producto debe tener entre 1 y 200 caracteres"
        assert (await products_client.get(URL)).json()["count"] == 1

    async def test_name_at_limit(self, products_client: AsyncClient, catalog):
        res = await products_client.post(URL, json=_payload(catalog, name="x" * 200))
        assert res.status_code == 201

    async def test_description_too_long(self, products_client: AsyncClient, catalog):
        res = await products_client.post(URL, json=_payload(catalog, description="d" * 1001))
        assert res.status_code == 400
        assert res.json()["message"] == "La descripción debe tener entre 1 y 1000 caracteres"

    async def test_photo_too_long(self, products_client: AsyncClient, catalog):
        res = await products_client.post(
            URL, json=_payload(catalog, productPhoto="https://cdn.cl/" + "p" * 500)
        )
        assert res.status_code == 400
        assert res.json()["message"] == "La URL de la foto no puede exceder los 500 caracteres"

    async def test_update_name_too_long(self, products_client: AsyncClient, catalog):
        """Nombre largo en PUT → 400 y el producto no cambia."""
        res = await products_client.put(f"{URL}/{catalog.product.id}", json={"name": "x" * 201})
        assert res.status_code == 400

        res = await products_client.get(f"{URL}/{catalog.product.id}")
        assert res.json()["data"]["name"] == "Ram DDR5 Corsair Vengeance"
