"""Data Transfer Objects: plain containers that cross layer boundaries.

Commands carry caller input into a handler; responses carry read models
back out without exposing the aggregates themselves.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from uuid import UUID

# --- Commands ------------------------------------------------------------------


@dataclass(frozen=True)
class CreateCategoryCommand:
    name: str
    description: str | None = None


@dataclass(frozen=True)
class CreateProductCommand:
    name: str
    sku: str
    description: str | None
    price: Decimal
    cost: Decimal
    stock_quantity: int
    category_id: UUID


@dataclass(frozen=True)
class UpdateProductCommand:
    product_id: UUID
    name: str
    description: str | None
    price: Decimal
    cost: Decimal
    category_id: UUID


@dataclass(frozen=True)
class AdjustStockCommand:
    """Positive delta restocks, negative delta consumes."""

    product_id: UUID
    delta: int


@dataclass(frozen=True)
class SetProductActiveCommand:
    product_id: UUID
    active: bool


@dataclass(frozen=True)
class CreateCustomerCommand:
    name: str
    email: str | None = None
    phone: str | None = None
    address: str | None = None


@dataclass(frozen=True)
class UpdateCustomerCommand:
    customer_id: UUID
    name: str
    email: str | None = None
    phone: str | None = None
    address: str | None = None


@dataclass(frozen=True)
class SaleItemSpec:
    """Input: which product and how many units."""

    product_id: UUID
    quantity: int


@dataclass(frozen=True)
class CreateSaleCommand:
    """Checkout in one step: build, complete and persist a sale."""

    customer_id: UUID | None
    payment_method: str
    items: list[SaleItemSpec] = field(default_factory=list)


@dataclass(frozen=True)
class OpenSaleCommand:
    customer_id: UUID | None
    payment_method: str


@dataclass(frozen=True)
class AddSaleItemCommand:
    sale_id: UUID
    product_id: UUID
    quantity: int


@dataclass(frozen=True)
class RemoveSaleItemCommand:
    sale_id: UUID
    product_id: UUID


@dataclass(frozen=True)
class ApplyDiscountCommand:
    sale_id: UUID
    amount: Decimal


@dataclass(frozen=True)
class SaleCommand:
    """Input for transitions that only need the sale (complete, cancel)."""

    sale_id: UUID


@dataclass(frozen=True)
class ByIdQuery:
    id: UUID


@dataclass(frozen=True)
class ListQuery:
    """Input for list queries that take no parameters."""


# --- Responses -----------------------------------------------------------------


@dataclass(frozen=True)
class CategoryResponse:
    id: UUID
    name: str
    description: str | None
    is_active: bool
    created_at: datetime


@dataclass(frozen=True)
class ProductResponse:
    id: UUID
    name: str
    sku: str
    description: str | None
    price: Decimal
    cost: Decimal
    stock_quantity: int
    category_id: UUID
    is_active: bool
    created_at: datetime


@dataclass(frozen=True)
class CustomerResponse:
    id: UUID
    name: str
    email: str | None
    phone: str | None
    address: str | None
    is_active: bool
    created_at: datetime


@dataclass(frozen=True)
class SaleItemResponse:
    id: UUID
    product_id: UUID
    product_name: str
    unit_price: Decimal
    quantity: int
    total_price: Decimal


@dataclass(frozen=True)
class SaleResponse:
    id: UUID
    customer_id: UUID | None
    payment_method: str
    subtotal: Decimal
    tax_amount: Decimal
    discount_amount: Decimal
    total_amount: Decimal
    status: str
    created_at: datetime
    completed_at: datetime | None
    items: list[SaleItemResponse]
