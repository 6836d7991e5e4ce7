"""Application service: Adjust Stock use case (restock or write-off)."""

from __future__ import annotations

from pos.application.cancellation import CancellationToken, raise_if_cancelled
from pos.application.dto import AdjustStockCommand
from pos.application.event_publisher import EventPublisher
from pos.application.unit_of_work import AbstractUnitOfWork
from pos.domain.errors import ProductErrors
from pos.domain.result import Result


class AdjustStockHandler:

    def __init__(self, uow: AbstractUnitOfWork, publisher: EventPublisher | None = None) -> None:
        self._uow = uow
        self._publisher = publisher

    def handle(
        self,
        command: AdjustStockCommand,
        cancellation: CancellationToken | None = None,
    ) -> Result[int]:
        """Apply the delta and return the new stock level."""
        raise_if_cancelled(cancellation)

        product = self._uow.products.get_by_id(command.product_id)
        if product is None:
            return Result.failure(ProductErrors.NOT_FOUND)

        adjusted = product.adjust_stock(command.delta)
        if adjusted.is_failure:
            return Result.failure(adjusted.error)

        self._uow.products.update(product)
        self._uow.commit(self._publisher, cancellation)
        return Result.success(product.stock_quantity)
