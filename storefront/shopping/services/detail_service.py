"""Servicio de detalles de compra.

Detail Service — Line items of a purchase. The buy is checked locally, the
product against the products service.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from storefront.shopping.clients import product_client
from storefront.shopping.models import Detail
from storefront.shopping.repositories.buy_repository import buy_repository
from storefront.shopping.repositories.detail_repository import detail_repository
from storefront.shopping.schemas import DetailRequest, DetailResponse
from storefront.utils.exceptions import BadRequestError, NotFoundError
from storefront.utils.validation import require_min, require_present

QUANTITY_RULE = "La cantidad debe ser al menos 1"


def _not_found(detail_id: int) -> NotFoundError:
    return NotFoundError(f"Detalle con ID {detail_id} no encontrado")


class DetailService:
    """Lógica de negocio de detalles.

    Service handling purchase line item business logic.
    """

    @staticmethod
    def to_response(detail: Detail) -> DetailResponse:
        return DetailResponse(
            detail_id=detail.id,
            buy_id=detail.buy_id,
            product_id=detail.product_id,
            quantity=detail.quantity,
            unit_price=detail.unit_price,
            subtotal=detail.subtotal,
        )

    async def _require_product(self, product_id: int) -> None:
        if not await product_client.exists(product_id):
            raise BadRequestError(f"El producto con ID {product_id} no existe")

    async def list_details(self, db: AsyncSession) -> list[DetailResponse]:
        """Lista todos los detalles (List all details)."""
        details = await detail_repository.get_all(db)
        return [self.to_response(d) for d in details]

    async def list_by_buy(self, db: AsyncSession, buy_id: int) -> list[DetailResponse]:
        """Lista los detalles de una compra.

        Raises:
            NotFoundError: La compra no existe (Buy not found)
        """
        if not await buy_repository.exists(db, {"id": buy_id}):
            raise NotFoundError(f"La compra con ID {buy_id} no existe")
        details = await detail_repository.list_by_buy(db, buy_id)
        return [self.to_response(d) for d in details]

    async def list_by_product(self, db: AsyncSession, product_id: int) -> list[DetailResponse]:
        """Historial de ventas de un producto remoto.

        Raises:
            NotFoundError: El producto no existe (Product confirmed absent)
        """
        if not await product_client.exists(product_id):
            raise NotFoundError(f"El producto con ID {product_id} no existe")
        details = await detail_repository.list_by_product(db, product_id)
        return [self.to_response(d) for d in details]

    async def get_detail(self, db: AsyncSession, detail_id: int) -> DetailResponse:
        detail: Detail | None = await detail_repository.get_by_id(db, detail_id)
        if detail is None:
            raise _not_found(detail_id)
        return self.to_response(detail)

    async def create_detail(self, db: AsyncSession, data: DetailRequest) -> DetailResponse:
        """Crea una línea de compra.

        Validation order: buy id, product id, quantity >= 1, unit price >= 0,
        subtotal >= 0, buy exists locally, product exists remotely.

        Raises:
            BadRequestError: Regla incumplida o referencia inexistente
            UpstreamServiceError: El servicio de productos no pudo confirmar
        """
        buy_id: int = require_present(data.buy_id, "El detalle debe estar asociado a una compra")
        product_id: int = require_present(data.product_id, "El detalle debe tener un producto")
        quantity: int = require_min(data.quantity, 1, QUANTITY_RULE)
        unit_price: int = require_min(data.unit_price, 0, "El precio unitario debe ser mayor o igual a 0")
        subtotal: int = require_min(data.subtotal, 0, "El subtotal debe ser mayor o igual a 0")

        if not await buy_repository.exists(db, {"id": buy_id}):
            raise BadRequestError(f"La compra con ID {buy_id} no existe")
        await self._require_product(product_id)

        detail: Detail = await detail_repository.create(
            db,
            {
                "buy_id": buy_id,
                "product_id": product_id,
                "quantity": quantity,
                "unit_price": unit_price,
                "subtotal": subtotal,
            },
        )
        return self.to_response(detail)

    async def update_detail(
        self,
        db: AsyncSession,
        detail_id: int,
        data: DetailRequest,
    ) -> DetailResponse:
        """Actualiza los campos presentes de un detalle.

        The buy totals are not recomputed.

        Raises:
            NotFoundError: El detalle no existe (Detail not found)
            BadRequestError: Valor fuera de rango o producto inexistente
        """
        detail: Detail | None = await detail_repository.get_by_id(db, detail_id)
        if detail is None:
            raise _not_found(detail_id)

        update_data: dict = {}
        if data.quantity is not None:
            update_data["quantity"] = require_min(data.quantity, 1, QUANTITY_RULE)
        if data.unit_price is not None:
            update_data["unit_price"] = require_min(
                data.unit_price, 0, "El precio unitario no puede ser negativo"
            )
        if data.subtotal is not None:
            update_data["subtotal"] = require_min(data.subtotal, 0, "El subtotal no puede ser negativo")
        if data.product_id is not None:
            await self._require_product(data.product_id)
            update_data["product_id"] = data.product_id

        detail = await detail_repository.update(db, detail, update_data)
        return self.to_response(detail)

    async def delete_detail(self, db: AsyncSession, detail_id: int) -> None:
        if not await detail_repository.delete(db, detail_id):
            raise _not_found(detail_id)


# Singleton
detail_service: DetailService = DetailService()
