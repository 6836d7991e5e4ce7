"""Application service: Complete Sale use case.

Consumes stock for every line and completes the sale in the same unit
of work, so the stock changes and the status change commit together.
"""

from __future__ import annotations

from pos.application.cancellation import CancellationToken, raise_if_cancelled
from pos.application.dto import SaleCommand
from pos.application.event_publisher import EventPublisher
from pos.application.unit_of_work import AbstractUnitOfWork
from pos.domain.errors import ProductErrors, SaleErrors
from pos.domain.result import Result


class CompleteSaleHandler:

    def __init__(self, uow: AbstractUnitOfWork, publisher: EventPublisher | None = None) -> None:
        self._uow = uow
        self._publisher = publisher

    def handle(
        self,
        command: SaleCommand,
        cancellation: CancellationToken | None = None,
    ) -> Result[None]:
        raise_if_cancelled(cancellation)

        sale = self._uow.sales.get_by_id(command.sale_id)
        if sale is None:
            return Result.failure(SaleErrors.NOT_FOUND)

        # Terminal sales must not consume stock again
        if not sale.is_pending:
            return Result.failure(SaleErrors.CANNOT_COMPLETE)

        for item in sale.items:
            product = self._uow.products.get_by_id(item.product_id)
            if product is None:
                return Result.failure(ProductErrors.NOT_FOUND)
            consumed = product.adjust_stock(-item.quantity)
            if consumed.is_failure:
                return consumed

        completed = sale.complete()
        if completed.is_failure:
            return completed

        self._uow.sales.update(sale)
        self._uow.commit(self._publisher, cancellation)
        return Result.success()
