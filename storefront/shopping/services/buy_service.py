"""Servicio de compras.

Buy Service — Business logic for purchases. A new buy references a user, an
address and a status held by three sibling services; the three lookups are
issued together and their outcomes read back in a fixed order.
"""

import asyncio
import time

from sqlalchemy.ext.asyncio import AsyncSession

from storefront.shopping.clients import address_client, status_client, user_client
from storefront.shopping.models import Buy
from storefront.shopping.repositories.buy_repository import buy_repository
from storefront.shopping.repositories.detail_repository import detail_repository
from storefront.shopping.schemas import BuyRequest, BuyResponse
from storefront.utils.exceptions import BadRequestError, NotFoundError
from storefront.utils.validation import require_max_length, require_min, require_present, require_text

EMPTY_PAYMENT_METHOD = "El método de pago no puede estar vacío"
LONG_ORDER_NUMBER = "El número de orden debe tener entre 1 y 50 caracteres"
LONG_PAYMENT_METHOD = "El método de pago debe tener entre 1 y 50 caracteres"


def _payment_method(value: str | None) -> str:
    return require_max_length(require_text(value, EMPTY_PAYMENT_METHOD), 50, LONG_PAYMENT_METHOD)


def _not_found(buy_id: int) -> NotFoundError:
    return NotFoundError(f"Compra con ID {buy_id} no encontrada")


def now_millis() -> int:
    """Instante actual en milisegundos epoch (Current time, epoch ms)."""
    return int(time.time() * 1000)


class BuyService:
    """Lógica de negocio de compras.

    Service handling purchase business logic.
    """

    @staticmethod
    def to_response(buy: Buy) -> BuyResponse:
        return BuyResponse(
            buy_id=buy.id,
            order_number=buy.order_number,
            buy_date=buy.buy_date,
            subtotal=buy.subtotal,
            iva=buy.iva,
            shipping=buy.shipping,
            total=buy.total,
            payment_method=buy.payment_method,
            status_id=buy.status_id,
            address_id=buy.address_id,
            user_id=buy.user_id,
        )

    async def _require_references(self, user_id: int, address_id: int, status_id: int) -> None:
        """Confirma usuario, dirección y estado en sus servicios.

        The three checks run concurrently, one request each. Outcomes are
        read in the order user, address, status, so the error reported is
        always the first of those that failed, whatever finished first.

        Raises:
            BadRequestError: Alguna referencia no existe (A reference is absent)
            UpstreamServiceError: Algún servicio no pudo confirmar (A service could not confirm)
        """
        results = await asyncio.gather(
            user_client.exists(user_id),
            address_client.exists(address_id),
            status_client.exists(status_id),
            return_exceptions=True,
        )
        messages: list[str] = [
            f"El usuario con ID {user_id} no existe",
            f"La dirección con ID {address_id} no existe",
            f"El estado con ID {status_id} no existe",
        ]
        for outcome, message in zip(results, messages):
            if isinstance(outcome, BaseException):
                raise outcome
            if not outcome:
                raise BadRequestError(message)

    async def list_buys(self, db: AsyncSession) -> list[BuyResponse]:
        """Lista todas las compras, la más reciente primero (List buys, newest first)."""
        buys = await buy_repository.list_newest_first(db)
        return [self.to_response(b) for b in buys]

    async def list_by_user(self, db: AsyncSession, user_id: int) -> list[BuyResponse]:
        """Lista las compras de un usuario remoto.

        Raises:
            NotFoundError: El usuario no existe (User confirmed absent)
        """
        if not await user_client.exists(user_id):
            raise NotFoundError(f"El usuario con ID {user_id} no existe")
        buys = await buy_repository.list_newest_first(db, user_id=user_id)
        return [self.to_response(b) for b in buys]

    async def list_by_status(self, db: AsyncSession, status_id: int) -> list[BuyResponse]:
        """Lista las compras con un estado remoto.

        Raises:
            NotFoundError: El estado no existe (Status confirmed absent)
        """
        if not await status_client.exists(status_id):
            raise NotFoundError(f"El estado con ID {status_id} no existe")
        buys = await buy_repository.list_newest_first(db, status_id=status_id)
        return [self.to_response(b) for b in buys]

    async def get_buy(self, db: AsyncSession, buy_id: int) -> BuyResponse:
        """Obtiene una compra por id (Get a buy by id)."""
        buy: Buy | None = await buy_repository.get_by_id(db, buy_id)
        if buy is None:
            raise _not_found(buy_id)
        return self.to_response(buy)

    async def get_by_order_number(self, db: AsyncSession, order_number: str) -> BuyResponse:
        """Obtiene una compra por número de orden (Get a buy by order number)."""
        buy: Buy | None = await buy_repository.get_by_order_number(db, order_number)
        if buy is None:
            raise NotFoundError(f"Compra con número de orden {order_number} no encontrada")
        return self.to_response(buy)

    async def create_buy(self, db: AsyncSession, data: BuyRequest) -> BuyResponse:
        """Crea una compra.

        Validation order: order number (<= 50), payment method (<= 50), the
        four amounts (>= 0), user id, address id, status id, order number
        unused, then the remote user/address/status checks. Nothing is
        written when any rule fails.

        Args:
            db: Sesión asíncrona (Async database session)
            data: Datos de la compra (Buy data)

        Returns:
            BuyResponse: Compra creada (Created buy)

        Raises:
            BadRequestError: Regla incumplida, número repetido o referencia inexistente
            UpstreamServiceError: Un servicio hermano no pudo confirmar una referencia
        """
        order_number: str = require_max_length(
            require_text(data.order_number, "El número de orden no puede estar vacío"), 50, LONG_ORDER_NUMBER
        )
        payment_method: str = _payment_method(data.payment_method)
        subtotal: int = require_min(data.subtotal, 0, "El subtotal debe ser mayor o igual a 0")
        iva: int = require_min(data.iva, 0, "El IVA debe ser mayor o igual a 0")
        shipping: int = require_min(data.shipping, 0, "El costo de envío debe ser mayor o igual a 0")
        total: int = require_min(data.total, 0, "El total debe ser mayor o igual a 0")
        user_id: int = require_present(data.user_id, "La compra debe estar asociada a un usuario")
        address_id: int = require_present(data.address_id, "La compra debe tener una dirección de envío")
        status_id: int = require_present(data.status_id, "La compra debe tener un estado")

        if await buy_repository.get_by_order_number(db, order_number) is not None:
            raise BadRequestError(f"Ya existe una compra con el número de orden {order_number}")

        await self._require_references(user_id, address_id, status_id)

        buy: Buy = await buy_repository.create(
            db,
            {
                "order_number": order_number,
                "buy_date": data.buy_date if data.buy_date is not None else now_millis(),
                "subtotal": subtotal,
                "iva": iva,
                "shipping": shipping,
                "total": total,
                "payment_method": payment_method,
                "status_id": status_id,
                "address_id": address_id,
                "user_id": user_id,
            },
        )
        return self.to_response(buy)

    async def update_buy(self, db: AsyncSession, buy_id: int, data: BuyRequest) -> BuyResponse:
        """Actualiza el estado y/o el método de pago de una compra.

        Amounts, references other than the status and the order number are
        fixed once the buy exists.

        Raises:
            NotFoundError: La compra no existe (Buy not found)
            BadRequestError: Estado inexistente o método de pago vacío
        """
        buy: Buy | None = await buy_repository.get_by_id(db, buy_id)
        if buy is None:
            raise _not_found(buy_id)

        update_data: dict = {}
        if data.status_id is not None:
            if not await status_client.exists(data.status_id):
                raise BadRequestError(f"El estado con ID {data.status_id} no existe")
            update_data["status_id"] = data.status_id
        if data.payment_method is not None:
            update_data["payment_method"] = _payment_method(data.payment_method)

        buy = await buy_repository.update(db, buy, update_data)
        return self.to_response(buy)

    async def delete_buy(self, db: AsyncSession, buy_id: int) -> None:
        """Elimina una compra junto con sus detalles.

        Raises:
            NotFoundError: La compra no existe (Buy not found)
        """
        if not await buy_repository.exists(db, {"id": buy_id}):
            raise _not_found(buy_id)

        await detail_repository.delete_by_buy(db, buy_id)
        await buy_repository.delete(db, buy_id)


# Singleton
buy_service: BuyService = BuyService()
