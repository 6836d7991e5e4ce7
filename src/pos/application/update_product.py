"""Application service: Update Product and toggle its availability.

Catalog edits never affect existing sales: sale lines captured a
name and price snapshot when they were added.
"""

from __future__ import annotations

from pos.application.cancellation import CancellationToken, raise_if_cancelled
from pos.application.dto import SetProductActiveCommand, UpdateProductCommand
from pos.application.event_publisher import EventPublisher
from pos.application.unit_of_work import AbstractUnitOfWork
from pos.domain.errors import CategoryErrors, ProductErrors
from pos.domain.result import Result


class UpdateProductHandler:

    def __init__(self, uow: AbstractUnitOfWork, publisher: EventPublisher | None = None) -> None:
        self._uow = uow
        self._publisher = publisher

    def handle(
        self,
        command: UpdateProductCommand,
        cancellation: CancellationToken | None = None,
    ) -> Result[None]:
        raise_if_cancelled(cancellation)

        product = self._uow.products.get_by_id(command.product_id)
        if product is None:
            return Result.failure(ProductErrors.NOT_FOUND)

        if self._uow.categories.get_by_id(command.category_id) is None:
            return Result.failure(CategoryErrors.NOT_FOUND)

        product.update(
            name=command.name,
            description=command.description,
            price=command.price,
            cost=command.cost,
            category_id=command.category_id,
        )
        self._uow.products.update(product)
        self._uow.commit(self._publisher, cancellation)
        return Result.success()


class SetProductActiveHandler:

    def __init__(self, uow: AbstractUnitOfWork, publisher: EventPublisher | None = None) -> None:
        self._uow = uow
        self._publisher = publisher

    def handle(
        self,
        command: SetProductActiveCommand,
        cancellation: CancellationToken | None = None,
    ) -> Result[None]:
        raise_if_cancelled(cancellation)

        product = self._uow.products.get_by_id(command.product_id)
        if product is None:
            return Result.failure(ProductErrors.NOT_FOUND)

        if command.active:
            product.activate()
        else:
            product.deactivate()
        self._uow.products.update(product)
        self._uow.commit(self._publisher, cancellation)
        return Result.success()
