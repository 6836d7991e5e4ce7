"""Application service: Create Category use case."""

from __future__ import annotations

from uuid import UUID

from pos.application.cancellation import CancellationToken, raise_if_cancelled
from pos.application.dto import CreateCategoryCommand
from pos.application.event_publisher import EventPublisher
from pos.application.unit_of_work import AbstractUnitOfWork
from pos.domain.errors import CategoryErrors
from pos.domain.model.category import Category
from pos.domain.result import Result


class CreateCategoryHandler:

    def __init__(self, uow: AbstractUnitOfWork, publisher: EventPublisher | None = None) -> None:
        self._uow = uow
        self._publisher = publisher

    def handle(
        self,
        command: CreateCategoryCommand,
        cancellation: CancellationToken | None = None,
    ) -> Result[UUID]:
        raise_if_cancelled(cancellation)

        if self._uow.categories.get_by_name(command.name) is not None:
            return Result.failure(CategoryErrors.DUPLICATE_NAME)

        category = Category.create(command.name, command.description)
        self._uow.categories.add(category)
        self._uow.commit(self._publisher, cancellation)
        return Result.success(category.id)
