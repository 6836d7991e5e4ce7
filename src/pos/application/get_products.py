"""Application service: product queries."""

from __future__ import annotations

from pos.application.cancellation import CancellationToken, raise_if_cancelled
from pos.application.dto import ByIdQuery, ListQuery, ProductResponse
from pos.application.mapping import to_product_response
from pos.application.unit_of_work import AbstractUnitOfWork
from pos.domain.errors import ProductErrors
from pos.domain.result import Result


class GetProductsHandler:
    """Lists the active catalog, ordered by name."""

    def __init__(self, uow: AbstractUnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        query: ListQuery,
        cancellation: CancellationToken | None = None,
    ) -> Result[list[ProductResponse]]:
        raise_if_cancelled(cancellation)
        products = self._uow.products.get_all_active()
        return Result.success([to_product_response(p) for p in products])


class GetProductByIdHandler:

    def __init__(self, uow: AbstractUnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        query: ByIdQuery,
        cancellation: CancellationToken | None = None,
    ) -> Result[ProductResponse]:
        raise_if_cancelled(cancellation)
        product = self._uow.products.get_by_id(query.id)
        if product is None:
            return Result.failure(ProductErrors.NOT_FOUND)
        return Result.success(to_product_response(product))
