"""Application service: Create Customer use case."""

from __future__ import annotations

from uuid import UUID

from pos.application.cancellation import CancellationToken, raise_if_cancelled
from pos.application.dto import CreateCustomerCommand
from pos.application.event_publisher import EventPublisher
from pos.application.unit_of_work import AbstractUnitOfWork
from pos.domain.errors import CustomerErrors
from pos.domain.model.customer import Customer
from pos.domain.result import Result


class CreateCustomerHandler:

    def __init__(self, uow: AbstractUnitOfWork, publisher: EventPublisher | None = None) -> None:
        self._uow = uow
        self._publisher = publisher

    def handle(
        self,
        command: CreateCustomerCommand,
        cancellation: CancellationToken | None = None,
    ) -> Result[UUID]:
        raise_if_cancelled(cancellation)

        # Email is optional; uniqueness only applies when one is given
        if command.email and self._uow.customers.get_by_email(command.email) is not None:
            return Result.failure(CustomerErrors.DUPLICATE_EMAIL)

        customer = Customer.create(
            name=command.name,
            email=command.email,
            phone=command.phone,
            address=command.address,
        )
        self._uow.customers.add(customer)
        self._uow.commit(self._publisher, cancellation)
        return Result.success(customer.id)
