"""Composition root: wires concrete implementations to application interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.

Handlers are built per request: each factory below hands out a fresh
unit of work wrapped in the standard pipeline behaviors.
"""

from __future__ import annotations

from functools import lru_cache

from sqlalchemy import Engine, create_engine
from sqlalchemy.pool import StaticPool

from pos.application.adjust_stock import AdjustStockHandler
from pos.application.behaviors import LoggingBehavior, pipeline
from pos.application.cancel_sale import CancelSaleHandler
from pos.application.complete_sale import CompleteSaleHandler
from pos.application.create_category import CreateCategoryHandler
from pos.application.create_customer import CreateCustomerHandler
from pos.application.create_product import CreateProductHandler
from pos.application.create_sale import CreateSaleHandler
from pos.application.edit_sale import AddSaleItemHandler, ApplyDiscountHandler, RemoveSaleItemHandler
from pos.application.event_publisher import EventPublisher
from pos.application.get_categories import GetCategoriesHandler, GetCategoryByIdHandler
from pos.application.get_customers import GetCustomerByIdHandler, GetCustomersHandler
from pos.application.get_products import GetProductByIdHandler, GetProductsHandler
from pos.application.get_sale import GetCustomerSalesHandler, GetSaleByIdHandler
from pos.application.open_sale import OpenSaleHandler
from pos.application.sale_completed import SaleCompletedSubscriber
from pos.application.update_customer import UpdateCustomerHandler
from pos.application.update_product import SetProductActiveHandler, UpdateProductHandler
from pos.application.validation import (
    AddSaleItemValidator,
    ApplyDiscountValidator,
    CreateCategoryValidator,
    CreateProductValidator,
    CreateSaleValidator,
    CustomerValidator,
    OpenSaleValidator,
    UpdateProductValidator,
)
from pos.domain.events import SaleCompleted
from pos.infrastructure.config import get_settings
from pos.infrastructure.notifications import LoggingNotificationSender
from pos.infrastructure.persistence.sql_unit_of_work import (
    SqlUnitOfWork,
    check_database,
    create_schema,
)


@lru_cache()
def engine() -> Engine:
    """One engine per process, with the schema in place."""
    settings = get_settings()
    if settings.is_in_memory_database:
        # Every connection must see the same in-memory database
        db = create_engine(
            settings.database_url,
            echo=settings.database_echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        db = create_engine(settings.database_url, echo=settings.database_echo)
    create_schema(db)
    return db


def unit_of_work() -> SqlUnitOfWork:
    return SqlUnitOfWork(engine())


@lru_cache()
def publisher() -> EventPublisher:
    events = EventPublisher()
    events.subscribe(
        SaleCompleted,
        SaleCompletedSubscriber(uow_factory=unit_of_work, sender=LoggingNotificationSender()),
    )
    return events


def reset() -> None:
    """Forget the cached engine, publisher and settings (used after config changes)."""
    if engine.cache_info().currsize:
        engine().dispose()
    engine.cache_clear()
    publisher.cache_clear()
    get_settings.cache_clear()


# --- Catalog -------------------------------------------------------------------


def create_category_handler() -> LoggingBehavior:
    return pipeline(CreateCategoryHandler(unit_of_work(), publisher()), CreateCategoryValidator())


def get_categories_handler() -> LoggingBehavior:
    return pipeline(GetCategoriesHandler(unit_of_work()))


def get_category_by_id_handler() -> LoggingBehavior:
    return pipeline(GetCategoryByIdHandler(unit_of_work()))


def create_product_handler() -> LoggingBehavior:
    return pipeline(CreateProductHandler(unit_of_work(), publisher()), CreateProductValidator())


def update_product_handler() -> LoggingBehavior:
    return pipeline(UpdateProductHandler(unit_of_work(), publisher()), UpdateProductValidator())


def set_product_active_handler() -> LoggingBehavior:
    return pipeline(SetProductActiveHandler(unit_of_work(), publisher()))


def adjust_stock_handler() -> LoggingBehavior:
    return pipeline(AdjustStockHandler(unit_of_work(), publisher()))


def get_products_handler() -> LoggingBehavior:
    return pipeline(GetProductsHandler(unit_of_work()))


def get_product_by_id_handler() -> LoggingBehavior:
    return pipeline(GetProductByIdHandler(unit_of_work()))


# --- Customers -----------------------------------------------------------------


def create_customer_handler() -> LoggingBehavior:
    return pipeline(CreateCustomerHandler(unit_of_work(), publisher()), CustomerValidator())


def update_customer_handler() -> LoggingBehavior:
    return pipeline(UpdateCustomerHandler(unit_of_work(), publisher()), CustomerValidator())


def get_customers_handler() -> LoggingBehavior:
    return pipeline(GetCustomersHandler(unit_of_work()))


def get_customer_by_id_handler() -> LoggingBehavior:
    return pipeline(GetCustomerByIdHandler(unit_of_work()))


def get_customer_sales_handler() -> LoggingBehavior:
    return pipeline(GetCustomerSalesHandler(unit_of_work()))


# --- Sales ---------------------------------------------------------------------


def create_sale_handler() -> LoggingBehavior:
    return pipeline(CreateSaleHandler(unit_of_work(), publisher()), CreateSaleValidator())


def open_sale_handler() -> LoggingBehavior:
    return pipeline(OpenSaleHandler(unit_of_work(), publisher()), OpenSaleValidator())


def add_sale_item_handler() -> LoggingBehavior:
    return pipeline(AddSaleItemHandler(unit_of_work(), publisher()), AddSaleItemValidator())


def remove_sale_item_handler() -> LoggingBehavior:
    return pipeline(RemoveSaleItemHandler(unit_of_work(), publisher()))


def apply_discount_handler() -> LoggingBehavior:
    return pipeline(ApplyDiscountHandler(unit_of_work(), publisher()), ApplyDiscountValidator())


def complete_sale_handler() -> LoggingBehavior:
    return pipeline(CompleteSaleHandler(unit_of_work(), publisher()))


def cancel_sale_handler() -> LoggingBehavior:
    return pipeline(CancelSaleHandler(unit_of_work(), publisher()))


def get_sale_handler() -> LoggingBehavior:
    return pipeline(GetSaleByIdHandler(unit_of_work()))


def check_health() -> None:
    """Raise PersistenceError unless the database answers."""
    check_database(engine())
