"""Application service: Create Product use case.

The SKU-uniqueness and category-existence checks live here, not in the
Product aggregate, because they need the store.
"""

from __future__ import annotations

from uuid import UUID

from pos.application.cancellation import CancellationToken, raise_if_cancelled
from pos.application.dto import CreateProductCommand
from pos.application.event_publisher import EventPublisher
from pos.application.unit_of_work import AbstractUnitOfWork
from pos.domain.errors import CategoryErrors, ProductErrors
from pos.domain.model.product import Product
from pos.domain.result import Result


class CreateProductHandler:

    def __init__(self, uow: AbstractUnitOfWork, publisher: EventPublisher | None = None) -> None:
        self._uow = uow
        self._publisher = publisher

    def handle(
        self,
        command: CreateProductCommand,
        cancellation: CancellationToken | None = None,
    ) -> Result[UUID]:
        raise_if_cancelled(cancellation)

        if self._uow.products.get_by_sku(command.sku) is not None:
            return Result.failure(ProductErrors.DUPLICATE_SKU)

        if self._uow.categories.get_by_id(command.category_id) is None:
            return Result.failure(CategoryErrors.NOT_FOUND)

        product = Product.create(
            name=command.name,
            sku=command.sku,
            description=command.description,
            price=command.price,
            cost=command.cost,
            stock_quantity=command.stock_quantity,
            category_id=command.category_id,
        )
        self._uow.products.add(product)
        self._uow.commit(self._publisher, cancellation)
        return Result.success(product.id)
