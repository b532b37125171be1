"""Datos iniciales del servicio de compras.

Shopping fixture data — three buys and four details. The referenced users,
addresses, statuses and products are the ids produced by the other
services' seeds; they are not checked remotely here.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from storefront.shopping.repositories.buy_repository import buy_repository
from storefront.shopping.repositories.detail_repository import detail_repository
from storefront.shopping.services.buy_service import now_millis

DAY_MS: int = 86_400_000

# (número de orden, días atrás, subtotal, iva, envío, total, pago, estado, dirección, usuario)
BUYS: list[tuple[str, int, int, int, int, int, str, int, int, int]] = [
    ("ORD-2025-001", 1, 1899990, 361098, 5990, 2267078, "Tarjeta de Débito", 4, 1, 1),
    ("ORD-2025-002", 2, 729980, 138696, 5990, 874666, "Tarjeta de Crédito", 2, 2, 2),
    ("ORD-2025-003", 0, 1299990, 246998, 5990, 1552978, "Transferencia", 1, 1, 1),
]

# (número de orden, producto, cantidad, precio unitario, subtotal)
DETAILS: list[tuple[str, int, int, int, int]] = [
    ("ORD-2025-001", 1, 1, 1899990, 1899990),
    ("ORD-2025-002", 2, 2, 129990, 259980),
    ("ORD-2025-002", 6, 1, 699990, 699990),
    ("ORD-2025-003", 4, 1, 1299990, 1299990),
]


async def seed_shopping(db: AsyncSession) -> str:
    """Inserta compras y detalles si no hay compras.

    Seed buys and their details when the buys table is empty.

    Returns:
        str: Resumen de lo realizado (Summary message)
    """
    if await buy_repository.count(db) > 0:
        return "Los datos ya existen."

    now: int = now_millis()
    buy_ids: dict[str, int] = {}
    for order, days_ago, subtotal, iva, shipping, total, payment, status_id, address_id, user_id in BUYS:
        buy = await buy_repository.create(
            db,
            {
                "order_number": order,
                "buy_date": now - days_ago * DAY_MS,
                "subtotal": subtotal,
                "iva": iva,
                "shipping": shipping,
                "total": total,
                "payment_method": payment,
                "status_id": status_id,
                "address_id": address_id,
                "user_id": user_id,
            },
        )
        buy_ids[order] = buy.id

    for order, product_id, quantity, unit_price, subtotal in DETAILS:
        await detail_repository.create(
            db,
            {
                "buy_id": buy_ids[order],
                "product_id": product_id,
                "quantity": quantity,
                "unit_price": unit_price,
                "subtotal": subtotal,
            },
        )

    await db.commit()
    return "Compras creadas. Detalles creados."
