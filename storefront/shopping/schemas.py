"""Esquemas Pydantic del servicio de compras.

Shopping request/response schemas. Required-field rules run in the
services; these models only fix the JSON types.
"""

from storefront.schemas.common import CamelModel


class BuyRequest(CamelModel):
    """Creación o actualización de compra.

    On update only ``status_id`` and ``payment_method`` are applied.

    Attributes:
        order_number: Número de orden (Order number)
        buy_date: Fecha epoch ms, por defecto ahora (Epoch ms, defaults to now)
        subtotal: Subtotal
        iva: IVA
        shipping: Envío (Shipping)
        total: Total
        payment_method: Método de pago (Payment method)
        status_id: Estado (Status id)
        address_id: Dirección (Address id)
        user_id: Usuario (User id)
    """

    order_number: str | None = None
    buy_date: int | None = None
    subtotal: int | None = None
    iva: int | None = None
    shipping: int | None = None
    total: int | None = None
    payment_method: str | None = None
    status_id: int | None = None
    address_id: int | None = None
    user_id: int | None = None


class BuyResponse(CamelModel):
    """Compra (Buy response)."""

    buy_id: int
    order_number: str
    buy_date: int
    subtotal: int
    iva: int
    shipping: int
    total: int
    payment_method: str
    status_id: int
    address_id: int
    user_id: int


class DetailRequest(CamelModel):
    """Creación o actualización parcial de detalle.

    ``buy_id`` is fixed at creation and ignored on update.
    """

    buy_id: int | None = None
    product_id: int | None = None
    quantity: int | None = None
    unit_price: int | None = None
    subtotal: int | None = None


class DetailResponse(CamelModel):
    """Detalle (Detail response)."""

    detail_id: int
    buy_id: int
    product_id: int
    quantity: int
    unit_price: int
    subtotal: int
