"""SQL-backed implementation of ProductRepository."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from uuid import UUID

from sqlalchemy import Connection, select

from pos.domain.model.product import Product
from pos.domain.repository.product_repository import ProductRepository
from pos.infrastructure.persistence.sql_repository import SqlRepository
from pos.infrastructure.persistence.tables import products


class SqlProductRepository(SqlRepository[Product], ProductRepository):

    table = products
    aggregate_type = Product

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: UUID) -> Product | None:
        return self._fetch_one(select(products).where(products.c.id == product_id))

    def get_by_sku(self, sku: str) -> Product | None:
        return self._fetch_one(select(products).where(products.c.sku == sku))

    def get_by_category_id(self, category_id: UUID) -> list[Product]:
        return self._fetch_all(
            select(products).where(products.c.category_id == category_id).order_by(products.c.name)
        )

    def get_all_active(self) -> list[Product]:
        return self._fetch_all(
            select(products).where(products.c.is_active.is_(True)).order_by(products.c.name)
        )

    # --- Serialization --------------------------------------------------------

    def _to_row(self, product: Product) -> dict[str, Any]:
        return {
            "id": product.id,
            "name": product.name,
            "sku": product.sku,
            "description": product.description,
            "price": product.price,
            "cost": product.cost,
            "stock_quantity": product.stock_quantity,
            "category_id": product.category_id,
            "is_active": product.is_active,
            "created_at": product.created_at,
            "updated_at": product.updated_at,
        }

    def _to_domain(self, conn: Connection, row: Mapping[str, Any]) -> Product:
        return Product(
            id=row["id"],
            name=row["name"],
            sku=row["sku"],
            description=row["description"],
            price=row["price"],
            cost=row["cost"],
            stock_quantity=row["stock_quantity"],
            category_id=row["category_id"],
            is_active=row["is_active"],
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )
