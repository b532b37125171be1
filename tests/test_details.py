"""Tests de la API de detalles de compra.

Detail API tests — the local buy check, the remote product check (mocked),
quantity and amount rules, and the per-buy / per-product listings.
"""

import pytest_asyncio
from httpx import AsyncClient

URL = "/api/details"


@pytest_asyncio.fixture
async def buy(shopping_client: AsyncClient, remote) -> dict:
    res = await shopping_client.post(
        "/api/buys",
        json={
            "orderNumber": "ORD-2025-200",
            "subtotal": 259980,
            "iva": 49396,
            "shipping": 5990,
            "total": 315366,
            "paymentMethod": "Tarjeta de Crédito",
            "statusId": 1,
            "addressId": 1,
            "userId": 1,
        },
    )
    return res.json()["data"]


def _payload(buy: dict, **overrides) -> dict:
    payload = {"buyId": buy["buyId"], "productId": 2, "quantity": 2, "unitPrice": 129990, "subtotal": 259980}
    payload.update(overrides)
    return payload


class TestDetailCreate:
    """Creación de detalles."""

    async def test_create_detail(self, shopping_client: AsyncClient, buy, remote):
        res = await shopping_client.post(URL, json=_payload(buy))
        assert res.status_code == 201
        data = res.json()["data"]
        assert data["buyId"] == buy["buyId"]
        assert data["quantity"] == 2
        assert data["unitPrice"] == 129990
        remote.product.assert_awaited_once_with(2)

    async def test_zero_quantity(self, shopping_client: AsyncClient, buy, remote):
        res = await shopping_client.post(URL, json=_payload(buy, quantity=0))
        assert res.status_code == 400
        assert res.json()["message"] == "La cantidad debe ser al menos 1"

    async def test_negative_unit_price(self, shopping_client: AsyncClient, buy, remote):
        res = await shopping_client.post(URL, json=_payload(buy, unitPrice=-1))
        assert res.status_code == 400
        assert res.json()["message"] == "El precio unitario debe ser mayor o igual a 0"

    async def test_unknown_buy(self, shopping_client: AsyncClient, remote):
        """Compra local inexistente → 400 sin consultar productos."""
        res = await shopping_client.post(
            URL, json={"buyId": 404, "productId": 2, "quantity": 1, "unitPrice": 10, "subtotal": 10}
        )
        assert res.status_code == 400
        assert res.json()["message"] == "La compra con ID 404 no existe"
        remote.product.assert_not_awaited()

    async def test_unknown_product(self, shopping_client: AsyncClient, buy, remote):
        remote.product.return_value = False
        res = await shopping_client.post(URL, json=_payload(buy, productId=77))
        assert res.status_code == 400
        assert res.json()["message"] == "El producto con ID 77 no existe"
        assert (await shopping_client.get(URL)).status_code == 204


class TestDetailRead:
    """Lectura de detalles."""

    async def test_by_buy(self, shopping_client: AsyncClient, buy, remote):
        await shopping_client.post(URL, json=_payload(buy))
        await shopping_client.post(URL, json=_payload(buy, productId=6, quantity=1, unitPrice=699990, subtotal=699990))

        res = await shopping_client.get(f"{URL}/buy/{buy['buyId']}")
        assert res.status_code == 200
        assert res.json()["count"] == 2

    async def test_by_buy_without_details(self, shopping_client: AsyncClient, buy):
        res = await shopping_client.get(f"{URL}/buy/{buy['buyId']}")
        assert res.status_code == 204

    async def test_by_unknown_buy(self, shopping_client: AsyncClient):
        res = await shopping_client.get(f"{URL}/buy/404")
        assert res.status_code == 404
        assert res.json()["message"] == "La compra con ID 404 no existe"

    async def test_by_product(self, shopping_client: AsyncClient, buy, remote):
        await shopping_client.post(URL, json=_payload(buy, productId=2))
        await shopping_client.post(URL, json=_payload(buy, productId=6))

        res = await shopping_client.get(f"{URL}/product/6")
        assert res.status_code == 200
        assert [d["productId"] for d in res.json()["data"]] == [6]

    async def test_by_unknown_product(self, shopping_client: AsyncClient, remote):
        remote.product.return_value = False
        res = await shopping_client.get(f"{URL}/product/77")
        assert res.status_code == 404
        assert res.json()["message"] == "El producto con ID 77 no existe"

    async def test_get_missing(self, shopping_client: AsyncClient):
        res = await shopping_client.get(f"{URL}/9")
        assert res.status_code == 404
        assert res.json()["message"] == "Detalle con ID 9 no encontrado"


class TestDetailUpdate:
    """Actualización de detalles."""

    async def test_update_quantity(self, shopping_client: AsyncClient, buy, remote):
        detail = (await shopping_client.post(URL, json=_payload(buy))).json()["data"]
        res = await shopping_client.put(f"{URL}/{detail['detailId']}", json={"quantity": 3, "subtotal": 389970})
        assert res.status_code == 200
        assert res.json()["data"]["quantity"] == 3
        assert res.json()["data"]["subtotal"] == 389970

    async def test_update_zero_quantity(self, shopping_client: AsyncClient, buy, remote):
        detail = (await shopping_client.post(URL, json=_payload(buy))).json()["data"]
        res = await shopping_client.put(f"{URL}/{detail['detailId']}", json={"quantity": 0})
        assert res.status_code == 400
        assert res.json()["message"] == "La cantidad debe ser al menos 1"

    async def test_update_negative_subtotal(self, shopping_client: AsyncClient, buy, remote):
        detail = (await shopping_client.post(URL, json=_payload(buy))).json()["data"]
        res = await shopping_client.put(f"{URL}/{detail['detailId']}", json={"subtotal": -1})
        assert res.status_code == 400
        assert res.json()["message"] == "El subtotal no puede ser negativo"


class TestDetailDelete:
    async def test_delete(self, shopping_client: AsyncClient, buy, remote):
        detail = (await shopping_client.post(URL, json=_payload(buy))).json()["data"]
        res = await shopping_client.delete(f"{URL}/{detail['detailId']}")
        assert res.status_code == 200
        assert res.json()["message"] == "Detalle eliminado exitosamente"

    async def test_delete_missing(self, shopping_client: AsyncClient):
        res = await shopping_client.delete(f"{URL}/9")
        assert res.status_code == 404
