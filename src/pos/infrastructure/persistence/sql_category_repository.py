"""SQL-backed implementation of CategoryRepository."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from uuid import UUID

from sqlalchemy import Connection, select

from pos.domain.model.category import Category
from pos.domain.repository.category_repository import CategoryRepository
from pos.infrastructure.persistence.sql_repository import SqlRepository
from pos.infrastructure.persistence.tables import categories


class SqlCategoryRepository(SqlRepository[Category], CategoryRepository):

    table = categories
    aggregate_type = Category

    def get_by_id(self, category_id: UUID) -> Category | None:
        return self._fetch_one(select(categories).where(categories.c.id == category_id))

    def get_by_name(self, name: str) -> Category | None:
        return self._fetch_one(select(categories).where(categories.c.name == name))

    def get_all(self) -> list[Category]:
        return self._fetch_all(select(categories).order_by(categories.c.name))

    def get_all_active(self) -> list[Category]:
        return self._fetch_all(
            select(categories).where(categories.c.is_active.is_(True)).order_by(categories.c.name)
        )

    def _to_row(self, category: Category) -> dict[str, Any]:
        return {
            "id": category.id,
            "name": category.name,
            "description": category.description,
            "is_active": category.is_active,
            "created_at": category.created_at,
        }

    def _to_domain(self, conn: Connection, row: Mapping[str, Any]) -> Category:
        return Category(
            id=row["id"],
            name=row["name"],
            description=row["description"],
            is_active=row["is_active"],
            created_at=row["created_at"],
        )
