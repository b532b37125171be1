"""Modelos ORM del servicio de compras.

Shopping SQLAlchemy ORM model definitions.

Tables:
    - buys: compras (Purchase orders)
    - details: líneas de una compra (Line items of a purchase)

``user_id``, ``address_id``, ``status_id`` and ``product_id`` reference
sibling services and carry no database-level foreign key. Amounts are whole
pesos; ``buy_date`` is epoch milliseconds.
"""

from sqlalchemy import BigInteger, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from storefront.database import Base


class Buy(Base):
    """Compra.

    Attributes:
        id: Identificador (Primary key)
        order_number: Número de orden único (Unique order number)
        buy_date: Fecha en milisegundos epoch (Purchase time, epoch ms)
        subtotal: Subtotal (Subtotal)
        iva: Impuesto (VAT)
        shipping: Costo de envío (Shipping cost)
        total: Total (Total)
        payment_method: Método de pago (Payment method)
        status_id: Estado remoto (Remote status)
        address_id: Dirección remota (Remote address)
        user_id: Usuario remoto (Remote user)
    """

    __tablename__ = "buys"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    order_number: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    buy_date: Mapped[int] = mapped_column(BigInteger, nullable=False, index=True)
    subtotal: Mapped[int] = mapped_column(Integer, nullable=False)
    iva: Mapped[int] = mapped_column(Integer, nullable=False)
    shipping: Mapped[int] = mapped_column(Integer, nullable=False)
    total: Mapped[int] = mapped_column(Integer, nullable=False)
    payment_method: Mapped[str] = mapped_column(String(50), nullable=False)
    # Referencias remotas
    status_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    address_id: Mapped[int] = mapped_column(Integer, nullable=False)
    user_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)


class Detail(Base):
    """Línea de una compra.

    Attributes:
        id: Identificador (Primary key)
        buy_id: Compra dueña (Owning buy)
        product_id: Producto remoto (Remote product)
        quantity: Cantidad, >= 1 (Quantity)
        unit_price: Precio unitario, >= 0 (Unit price)
        subtotal: Subtotal de la línea, >= 0 (Line subtotal)
    """

    __tablename__ = "details"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    buy_id: Mapped[int] = mapped_column(Integer, ForeignKey("buys.id"), nullable=False, index=True)
    product_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    unit_price: Mapped[int] = mapped_column(Integer, nullable=False)
    subtotal: Mapped[int] = mapped_column(Integer, nullable=False)


# Tablas propias del servicio — created by this service only
TABLES = [Buy.__table__, Detail.__table__]
