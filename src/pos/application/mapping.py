"""Aggregate -> response DTO mapping shared by the query handlers."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from pos.application.dto import (
    CategoryResponse,
    CustomerResponse,
    ProductResponse,
    SaleItemResponse,
    SaleResponse,
)
from pos.domain.model.category import Category
from pos.domain.model.customer import Customer
from pos.domain.model.product import Product
from pos.domain.model.sale import Sale

CENT = Decimal("0.01")


def money(amount: Decimal) -> Decimal:
    """Round a computed amount to cents for presentation."""
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def to_category_response(category: Category) -> CategoryResponse:
    return CategoryResponse(
        id=category.id,
        name=category.name,
        description=category.description,
        is_active=category.is_active,
        created_at=category.created_at,
    )


def to_product_response(product: Product) -> ProductResponse:
    return ProductResponse(
        id=product.id,
        name=product.name,
        sku=product.sku,
        description=product.description,
        price=product.price,
        cost=product.cost,
        stock_quantity=product.stock_quantity,
        category_id=product.category_id,
        is_active=product.is_active,
        created_at=product.created_at,
    )


def to_customer_response(customer: Customer) -> CustomerResponse:
    return CustomerResponse(
        id=customer.id,
        name=customer.name,
        email=customer.email,
        phone=customer.phone,
        address=customer.address,
        is_active=customer.is_active,
        created_at=customer.created_at,
    )


def to_sale_response(sale: Sale) -> SaleResponse:
    return SaleResponse(
        id=sale.id,
        customer_id=sale.customer_id,
        payment_method=sale.payment_method,
        subtotal=money(sale.subtotal),
        tax_amount=money(sale.tax_amount),
        discount_amount=money(sale.discount_amount),
        total_amount=money(sale.total_amount),
        status=sale.status.value,
        created_at=sale.created_at,
        completed_at=sale.completed_at,
        items=[
            SaleItemResponse(
                id=item.id,
                product_id=item.product_id,
                product_name=item.product_name,
                unit_price=item.unit_price,
                quantity=item.quantity,
                total_price=money(item.total_price),
            )
            for item in sale.items
        ],
    )
