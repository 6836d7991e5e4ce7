"""Application service: sale queries."""

from __future__ import annotations

from pos.application.cancellation import CancellationToken, raise_if_cancelled
from pos.application.dto import ByIdQuery, SaleResponse
from pos.application.mapping import to_sale_response
from pos.application.unit_of_work import AbstractUnitOfWork
from pos.domain.errors import CustomerErrors, SaleErrors
from pos.domain.result import Result


class GetSaleByIdHandler:

    def __init__(self, uow: AbstractUnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        query: ByIdQuery,
        cancellation: CancellationToken | None = None,
    ) -> Result[SaleResponse]:
        raise_if_cancelled(cancellation)
        sale = self._uow.sales.get_by_id(query.id)
        if sale is None:
            return Result.failure(SaleErrors.NOT_FOUND)
        return Result.success(to_sale_response(sale))


class GetCustomerSalesHandler:
    """Lists a customer's sales, oldest first.  ``query.id`` is the customer id."""

    def __init__(self, uow: AbstractUnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        query: ByIdQuery,
        cancellation: CancellationToken | None = None,
    ) -> Result[list[SaleResponse]]:
        raise_if_cancelled(cancellation)
        if self._uow.customers.get_by_id(query.id) is None:
            return Result.failure(CustomerErrors.NOT_FOUND)
        sales = self._uow.sales.get_by_customer_id(query.id)
        return Result.success([to_sale_response(s) for s in sales])
