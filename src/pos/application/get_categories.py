"""Application service: category queries."""

from __future__ import annotations

from pos.application.cancellation import CancellationToken, raise_if_cancelled
from pos.application.dto import ByIdQuery, CategoryResponse, ListQuery
from pos.application.mapping import to_category_response
from pos.application.unit_of_work import AbstractUnitOfWork
from pos.domain.errors import CategoryErrors
from pos.domain.result import Result


class GetCategoriesHandler:
    """Lists active categories."""

    def __init__(self, uow: AbstractUnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        query: ListQuery,
        cancellation: CancellationToken | None = None,
    ) -> Result[list[CategoryResponse]]:
        raise_if_cancelled(cancellation)
        categories = self._uow.categories.get_all_active()
        return Result.success([to_category_response(c) for c in categories])


class GetCategoryByIdHandler:

    def __init__(self, uow: AbstractUnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        query: ByIdQuery,
        cancellation: CancellationToken | None = None,
    ) -> Result[CategoryResponse]:
        raise_if_cancelled(cancellation)
        category = self._uow.categories.get_by_id(query.id)
        if category is None:
            return Result.failure(CategoryErrors.NOT_FOUND)
        return Result.success(to_category_response(category))
