"""Application service: Cancel Sale use case.

Only pending sales can be cancelled, and pending sales have not
consumed any stock yet, so nothing has to be given back.
"""

from __future__ import annotations

from pos.application.cancellation import CancellationToken, raise_if_cancelled
from pos.application.dto import SaleCommand
from pos.application.event_publisher import EventPublisher
from pos.application.unit_of_work import AbstractUnitOfWork
from pos.domain.errors import SaleErrors
from pos.domain.result import Result


class CancelSaleHandler:

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

        cancelled = sale.cancel()
        if cancelled.is_failure:
            return cancelled

        self._uow.sales.update(sale)
        self._uow.commit(self._publisher, cancellation)
        return Result.success()
