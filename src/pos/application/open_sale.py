"""Application service: Open Sale use case.

Starts an empty pending sale that is then edited line by line and
completed or cancelled later.
"""

from __future__ import annotations

from uuid import UUID

from pos.application.cancellation import CancellationToken, raise_if_cancelled
from pos.application.dto import OpenSaleCommand
from pos.application.event_publisher import EventPublisher
from pos.application.unit_of_work import AbstractUnitOfWork
from pos.domain.errors import CustomerErrors
from pos.domain.model.sale import Sale
from pos.domain.result import Result


class OpenSaleHandler:

    def __init__(self, uow: AbstractUnitOfWork, publisher: EventPublisher | None = None) -> None:
        self._uow = uow
        self._publisher = publisher

    def handle(
        self,
        command: OpenSaleCommand,
        cancellation: CancellationToken | None = None,
    ) -> Result[UUID]:
        raise_if_cancelled(cancellation)

        if command.customer_id is not None:
            if self._uow.customers.get_by_id(command.customer_id) is None:
                return Result.failure(CustomerErrors.NOT_FOUND)

        sale = Sale.create(command.customer_id, command.payment_method)
        self._uow.sales.add(sale)
        self._uow.commit(self._publisher, cancellation)
        return Result.success(sale.id)
