"""Application service: Create Sale use case (one-step checkout).

Builds a sale from the requested lines, consumes stock for each of
them, completes the sale and commits the sale together with every
product it touched.  Any failure returns before the commit, so either
all of it is persisted or none of it is.
"""

from __future__ import annotations

from uuid import UUID

from pos.application.cancellation import CancellationToken, raise_if_cancelled
from pos.application.dto import CreateSaleCommand
from pos.application.event_publisher import EventPublisher
from pos.application.unit_of_work import AbstractUnitOfWork
from pos.domain.errors import CustomerErrors, ProductErrors
from pos.domain.model.sale import Sale
from pos.domain.result import Result


class CreateSaleHandler:

    def __init__(self, uow: AbstractUnitOfWork, publisher: EventPublisher | None = None) -> None:
        self._uow = uow
        self._publisher = publisher

    def handle(
        self,
        command: CreateSaleCommand,
        cancellation: CancellationToken | None = None,
    ) -> Result[UUID]:
        """Check out a sale.

        Steps:
        1. Resolve the customer, if any.
        2. For each line: resolve the product, consume its stock, add the
           line with the *current* name and price (snapshot).
        3. Complete the sale (raises ``SaleCompleted``).
        4. Commit; the confirmation goes out after the commit.
        """
        raise_if_cancelled(cancellation)

        if command.customer_id is not None:
            if self._uow.customers.get_by_id(command.customer_id) is None:
                return Result.failure(CustomerErrors.NOT_FOUND)

        sale = Sale.create(command.customer_id, command.payment_method)

        for spec in command.items:
            product = self._uow.products.get_by_id(spec.product_id)
            if product is None:
                return Result.failure(ProductErrors.NOT_FOUND)

            consumed = product.adjust_stock(-spec.quantity)
            if consumed.is_failure:
                return Result.failure(consumed.error)

            added = sale.add_item(product.id, product.name, product.price, spec.quantity)
            if added.is_failure:
                return Result.failure(added.error)

        completed = sale.complete()
        if completed.is_failure:
            return Result.failure(completed.error)

        self._uow.sales.add(sale)
        self._uow.commit(self._publisher, cancellation)
        return Result.success(sale.id)
