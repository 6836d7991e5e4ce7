"""Application services: edit the lines and discount of a pending sale.

Stock is not touched here; it is consumed when the sale completes.
"""

from __future__ import annotations

from pos.application.cancellation import CancellationToken, raise_if_cancelled
from pos.application.dto import (
    AddSaleItemCommand,
    ApplyDiscountCommand,
    RemoveSaleItemCommand,
)
from pos.application.event_publisher import EventPublisher
from pos.application.unit_of_work import AbstractUnitOfWork
from pos.domain.errors import ProductErrors, SaleErrors
from pos.domain.result import Result


class AddSaleItemHandler:

    def __init__(self, uow: AbstractUnitOfWork, publisher: EventPublisher | None = None) -> None:
        self._uow = uow
        self._publisher = publisher

    def handle(
        self,
        command: AddSaleItemCommand,
        cancellation: CancellationToken | None = None,
    ) -> Result[None]:
        raise_if_cancelled(cancellation)

        sale = self._uow.sales.get_by_id(command.sale_id)
        if sale is None:
            return Result.failure(SaleErrors.NOT_FOUND)

        product = self._uow.products.get_by_id(command.product_id)
        if product is None:
            return Result.failure(ProductErrors.NOT_FOUND)

        added = sale.add_item(product.id, product.name, product.price, command.quantity)
        if added.is_failure:
            return added

        self._uow.sales.update(sale)
        self._uow.commit(self._publisher, cancellation)
        return Result.success()


class RemoveSaleItemHandler:

    def __init__(self, uow: AbstractUnitOfWork, publisher: EventPublisher | None = None) -> None:
        self._uow = uow
        self._publisher = publisher

    def handle(
        self,
        command: RemoveSaleItemCommand,
        cancellation: CancellationToken | None = None,
    ) -> Result[None]:
        raise_if_cancelled(cancellation)

        sale = self._uow.sales.get_by_id(command.sale_id)
        if sale is None:
            return Result.failure(SaleErrors.NOT_FOUND)

        removed = sale.remove_item(command.product_id)
        if removed.is_failure:
            return removed

        self._uow.sales.update(sale)
        self._uow.commit(self._publisher, cancellation)
        return Result.success()


class ApplyDiscountHandler:

    def __init__(self, uow: AbstractUnitOfWork, publisher: EventPublisher | None = None) -> None:
        self._uow = uow
        self._publisher = publisher

    def handle(
        self,
        command: ApplyDiscountCommand,
        cancellation: CancellationToken | None = None,
    ) -> Result[None]:
        raise_if_cancelled(cancellation)

        sale = self._uow.sales.get_by_id(command.sale_id)
        if sale is None:
            return Result.failure(SaleErrors.NOT_FOUND)

        applied = sale.apply_discount(command.amount)
        if applied.is_failure:
            return applied

        self._uow.sales.update(sale)
        self._uow.commit(self._publisher, cancellation)
        return Result.success()
