"""SQL-backed implementation of CustomerRepository."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from uuid import UUID

from sqlalchemy import Connection, select

from pos.domain.model.customer import Customer
from pos.domain.repository.customer_repository import CustomerRepository
from pos.infrastructure.persistence.sql_repository import SqlRepository
from pos.infrastructure.persistence.tables import customers


class SqlCustomerRepository(SqlRepository[Customer], CustomerRepository):

    table = customers
    aggregate_type = Customer

    def get_by_id(self, customer_id: UUID) -> Customer | None:
        return self._fetch_one(select(customers).where(customers.c.id == customer_id))

    def get_by_email(self, email: str) -> Customer | None:
        return self._fetch_one(select(customers).where(customers.c.email == email))

    def get_all_active(self) -> list[Customer]:
        return self._fetch_all(
            select(customers).where(customers.c.is_active.is_(True)).order_by(customers.c.name)
        )

    def _to_row(self, customer: Customer) -> dict[str, Any]:
        return {
            "id": customer.id,
            "name": customer.name,
            "email": customer.email,
            "phone": customer.phone,
            "address": customer.address,
            "is_active": customer.is_active,
            "created_at": customer.created_at,
            "updated_at": customer.updated_at,
        }

    def _to_domain(self, conn: Connection, row: Mapping[str, Any]) -> Customer:
        return Customer(
            id=row["id"],
            name=row["name"],
            email=row["email"],
            phone=row["phone"],
            address=row["address"],
            is_active=row["is_active"],
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )
