"""Application service: customer queries."""

from __future__ import annotations

from pos.application.cancellation import CancellationToken, raise_if_cancelled
from pos.application.dto import ByIdQuery, CustomerResponse, ListQuery
from pos.application.mapping import to_customer_response
from pos.application.unit_of_work import AbstractUnitOfWork
from pos.domain.errors import CustomerErrors
from pos.domain.result import Result


class GetCustomersHandler:

    def __init__(self, uow: AbstractUnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        query: ListQuery,
        cancellation: CancellationToken | None = None,
    ) -> Result[list[CustomerResponse]]:
        raise_if_cancelled(cancellation)
        customers = self._uow.customers.get_all_active()
        return Result.success([to_customer_response(c) for c in customers])


class GetCustomerByIdHandler:

    def __init__(self, uow: AbstractUnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        query: ByIdQuery,
        cancellation: CancellationToken | None = None,
    ) -> Result[CustomerResponse]:
        raise_if_cancelled(cancellation)
        customer = self._uow.customers.get_by_id(query.id)
        if customer is None:
            return Result.failure(CustomerErrors.NOT_FOUND)
        return Result.success(to_customer_response(customer))
