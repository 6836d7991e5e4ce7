"""Catalogue of expected business failures, grouped per aggregate."""

from __future__ import annotations

from pos.domain.result import Error


class ProductErrors:
    NOT_FOUND = Error(
        "Product.NotFound",
        "The product with the specified identifier was not found",
    )
    DUPLICATE_SKU = Error(
        "Product.DuplicateSku",
        "A product with this SKU already exists",
    )
    INSUFFICIENT_STOCK = Error(
        "Product.InsufficientStock",
        "The product does not have sufficient stock for this operation",
    )


class CategoryErrors:
    NOT_FOUND = Error(
        "Category.NotFound",
        "The category with the specified identifier was not found",
    )
    DUPLICATE_NAME = Error(
        "Category.DuplicateName",
        "A category with this name already exists",
    )


class CustomerErrors:
    NOT_FOUND = Error(
        "Customer.NotFound",
        "The customer with the specified identifier was not found",
    )
    DUPLICATE_EMAIL = Error(
        "Customer.DuplicateEmail",
        "A customer with this email already exists",
    )


class SaleErrors:
    NOT_FOUND = Error(
        "Sale.NotFound",
        "The sale with the specified identifier was not found",
    )
    ITEM_NOT_FOUND = Error("Sale.ItemNotFound", "The sale item was not found")
    NO_ITEMS = Error("Sale.NoItems", "Cannot complete a sale with no items")
    CANNOT_COMPLETE = Error("Sale.CannotComplete", "Only pending sales can be completed")
    CANNOT_CANCEL = Error("Sale.CannotCancel", "Only pending sales can be cancelled")
    NOT_PENDING = Error("Sale.NotPending", "Only pending sales can be modified")
    INVALID_QUANTITY = Error("Sale.InvalidQuantity", "Item quantity must be greater than zero")
    INVALID_DISCOUNT = Error(
        "Sale.InvalidDiscount",
        "Discount must be zero or greater and cannot exceed the subtotal",
    )


def validation_failed(violations: list[str]) -> Error:
    """Collapse validator violations into a single ``Validation.Failed`` error."""
    return Error("Validation.Failed", "; ".join(violations))
