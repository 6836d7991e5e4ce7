"""Input validators run before a handler touches any aggregate.

Each validator returns the list of violations for a command; an empty
list means the command is well-formed.  Business rules that need the
store (uniqueness, existence) are not checked here.
"""

from __future__ import annotations

import re
from decimal import Decimal
from typing import Protocol, TypeVar

from pos.application.dto import (
    AddSaleItemCommand,
    ApplyDiscountCommand,
    CreateCategoryCommand,
    CreateCustomerCommand,
    CreateProductCommand,
    CreateSaleCommand,
    OpenSaleCommand,
    UpdateCustomerCommand,
    UpdateProductCommand,
)

C = TypeVar("C", contravariant=True)

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class Validator(Protocol[C]):

    def validate(self, command: C) -> list[str]: ...


# --- Rule helpers -----------------------------------------------------------------


def _required(value: str | None, label: str, max_length: int, errors: list[str]) -> None:
    if value is None or not value.strip():
        errors.append(f"{label} is required")
    elif len(value) > max_length:
        errors.append(f"{label} must be at most {max_length} characters")


def _optional(value: str | None, label: str, max_length: int, errors: list[str]) -> None:
    if value is not None and len(value) > max_length:
        errors.append(f"{label} must be at most {max_length} characters")


def _email(value: str | None, errors: list[str]) -> None:
    if value is None:
        return
    if len(value) > 200:
        errors.append("Email must be at most 200 characters")
    elif not _EMAIL_RE.match(value):
        errors.append("Email is not a valid address")


def _product_details(
    name: str,
    description: str | None,
    price: Decimal,
    cost: Decimal,
    errors: list[str],
) -> None:
    _required(name, "Name", 200, errors)
    _optional(description, "Description", 1000, errors)
    if price <= Decimal("0"):
        errors.append("Price must be greater than zero")
    if cost < Decimal("0"):
        errors.append("Cost must be zero or greater")


# --- Validators -------------------------------------------------------------------


class CreateCategoryValidator:

    def validate(self, command: CreateCategoryCommand) -> list[str]:
        errors: list[str] = []
        _required(command.name, "Name", 100, errors)
        _optional(command.description, "Description", 500, errors)
        return errors


class CreateProductValidator:

    def validate(self, command: CreateProductCommand) -> list[str]:
        errors: list[str] = []
        _product_details(command.name, command.description, command.price, command.cost, errors)
        _required(command.sku, "SKU", 50, errors)
        if command.stock_quantity < 0:
            errors.append("Stock quantity cannot be negative")
        return errors


class UpdateProductValidator:

    def validate(self, command: UpdateProductCommand) -> list[str]:
        errors: list[str] = []
        _product_details(command.name, command.description, command.price, command.cost, errors)
        return errors


class CustomerValidator:
    """Shared by the create and update customer commands."""

    def validate(self, command: CreateCustomerCommand | UpdateCustomerCommand) -> list[str]:
        errors: list[str] = []
        _required(command.name, "Name", 200, errors)
        _email(command.email, errors)
        _optional(command.phone, "Phone", 50, errors)
        _optional(command.address, "Address", 500, errors)
        return errors


class OpenSaleValidator:

    def validate(self, command: OpenSaleCommand | CreateSaleCommand) -> list[str]:
        errors: list[str] = []
        _required(command.payment_method, "Payment method", 50, errors)
        return errors


class CreateSaleValidator:

    def validate(self, command: CreateSaleCommand) -> list[str]:
        errors = OpenSaleValidator().validate(command)
        if not command.items:
            errors.append("Sale must have at least one item")
        for index, item in enumerate(command.items):
            if item.quantity <= 0:
                errors.append(f"Item {index + 1}: quantity must be greater than zero")
        return errors


class AddSaleItemValidator:

    def validate(self, command: AddSaleItemCommand) -> list[str]:
        if command.quantity <= 0:
            return ["Quantity must be greater than zero"]
        return []


class ApplyDiscountValidator:

    def validate(self, command: ApplyDiscountCommand) -> list[str]:
        if command.amount < Decimal("0"):
            return ["Discount cannot be negative"]
        return []
