"""Application service: Update Customer use case."""

from __future__ import annotations

from pos.application.cancellation import CancellationToken, raise_if_cancelled
from pos.application.dto import UpdateCustomerCommand
from pos.application.event_publisher import EventPublisher
from pos.application.unit_of_work import AbstractUnitOfWork
from pos.domain.errors import CustomerErrors
from pos.domain.result import Result


class UpdateCustomerHandler:

    def __init__(self, uow: AbstractUnitOfWork, publisher: EventPublisher | None = None) -> None:
        self._uow = uow
        self._publisher = publisher

    def handle(
        self,
        command: UpdateCustomerCommand,
        cancellation: CancellationToken | None = None,
    ) -> Result[None]:
        raise_if_cancelled(cancellation)

        customer = self._uow.customers.get_by_id(command.customer_id)
        if customer is None:
            return Result.failure(CustomerErrors.NOT_FOUND)

        if command.email and command.email != customer.email:
            other = self._uow.customers.get_by_email(command.email)
            if other is not None and other.id != customer.id:
                return Result.failure(CustomerErrors.DUPLICATE_EMAIL)

        customer.update(
            name=command.name,
            email=command.email,
            phone=command.phone,
            address=command.address,
        )
        self._uow.customers.update(customer)
        self._uow.commit(self._publisher, cancellation)
        return Result.success()
