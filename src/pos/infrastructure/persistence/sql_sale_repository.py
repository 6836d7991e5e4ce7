"""SQL-backed implementation of SaleRepository.

A sale owns its items: whenever the sale row is written, its
``sale_items`` rows are replaced wholesale, in line order.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Any
from uuid import UUID

from sqlalchemy import Connection, delete, select

from pos.domain.model.sale import Sale, SaleItem, SaleStatus
from pos.domain.repository.sale_repository import SaleRepository
from pos.infrastructure.persistence.sql_repository import SqlRepository
from pos.infrastructure.persistence.tables import sale_items, sales


class SqlSaleRepository(SqlRepository[Sale], SaleRepository):

    table = sales
    aggregate_type = Sale

    # --- SaleRepository interface ---------------------------------------------

    def get_by_id(self, sale_id: UUID) -> Sale | None:
        return self._fetch_one(select(sales).where(sales.c.id == sale_id))

    def get_by_customer_id(self, customer_id: UUID) -> list[Sale]:
        return self._fetch_all(
            select(sales).where(sales.c.customer_id == customer_id).order_by(sales.c.created_at)
        )

    def get_by_date_range(self, start: datetime, end: datetime) -> list[Sale]:
        return self._fetch_all(
            select(sales)
            .where(sales.c.created_at >= start, sales.c.created_at <= end)
            .order_by(sales.c.created_at)
        )

    # --- Serialization --------------------------------------------------------

    def _snapshot(self, sale: Sale) -> Any:
        return self._to_row(sale), self._item_rows(sale)

    def _to_row(self, sale: Sale) -> dict[str, Any]:
        return {
            "id": sale.id,
            "customer_id": sale.customer_id,
            "payment_method": sale.payment_method,
            "subtotal": sale.subtotal,
            "tax_amount": sale.tax_amount,
            "discount_amount": sale.discount_amount,
            "total_amount": sale.total_amount,
            "status": sale.status.value,
            "created_at": sale.created_at,
            "completed_at": sale.completed_at,
        }

    @staticmethod
    def _item_rows(sale: Sale) -> list[dict[str, Any]]:
        return [
            {
                "id": item.id,
                "sale_id": sale.id,
                "position": position,
                "product_id": item.product_id,
                "product_name": item.product_name,
                "unit_price": item.unit_price,
                "quantity": item.quantity,
            }
            for position, item in enumerate(sale.items)
        ]

    def _write_children(self, conn: Connection, sale: Sale) -> None:
        conn.execute(delete(sale_items).where(sale_items.c.sale_id == sale.id))
        rows = self._item_rows(sale)
        if rows:
            conn.execute(sale_items.insert(), rows)

    def _to_domain(self, conn: Connection, row: Mapping[str, Any]) -> Sale:
        item_rows = conn.execute(
            select(sale_items)
            .where(sale_items.c.sale_id == row["id"])
            .order_by(sale_items.c.position)
        ).mappings()
        items = [
            SaleItem(
                id=i["id"],
                sale_id=i["sale_id"],
                product_id=i["product_id"],
                product_name=i["product_name"],
                unit_price=i["unit_price"],
                quantity=i["quantity"],
            )
            for i in item_rows
        ]
        return Sale(
            id=row["id"],
            customer_id=row["customer_id"],
            payment_method=row["payment_method"],
            items=items,
            discount_amount=row["discount_amount"],
            status=SaleStatus(row["status"]),
            created_at=row["created_at"],
            completed_at=row["completed_at"],
        )
