"""
Pytest fixtures and configuration for Storefront Backend tests

Shared fixtures used across test modules. No test needs a database:
repositories are exercised against mocked psycopg2 connections and
services against mocked repositories.

Author: Storefront Team
Date: 2026-10-19
"""
import pytest
from datetime import datetime
from decimal import Decimal
from unittest.mock import MagicMock, Mock

from storefront.domain.customer import Customer
from storefront.domain.order import Order, OrderProduct
from storefront.domain.product import Product

CUSTOMER_ID = "0b0f4b52-8d36-4a3e-9c1b-2f4f8c1d7a10"
PRODUCT_ID = "5c3f0e8a-1d2b-4c6e-8f7a-9b0c1d2e3f40"


@pytest.fixture
def customer():
    """A registered customer"""
    return Customer(
        id=CUSTOMER_ID,
        name="Ada Lovelace",
        email="ada@analytical.dev",
        created_at=datetime(2026, 10, 1, 12, 0, 0),
    )


@pytest.fixture
def make_product():
    """Factory for Product domain models"""
    def _make(id=PRODUCT_ID, name="Mechanical Keyboard", price="100.00", quantity=10):
        return Product(
            id=id,
            name=name,
            price=Decimal(price),
            quantity=quantity,
            created_at=datetime(2026, 10, 1, 12, 0, 0),
        )
    return _make


@pytest.fixture
def fake_orders_repository():
    """
    Orders repository double that echoes the line items back as persisted

    Each call produces a new order id, like the real table does.
    """
    repo = Mock()
    counter = {"n": 0}

    def _create(customer, products):
        counter["n"] += 1
        order_id = f"order-{counter['n']}"
        return Order(
            id=order_id,
            customer=customer,
            order_products=[
                OrderProduct(
                    id=f"{order_id}-line-{i}",
                    order_id=order_id,
                    product_id=item.product_id,
                    price=item.price,
                    quantity=item.quantity,
                )
                for i, item in enumerate(products, start=1)
            ],
        )

    repo.create.side_effect = _create
    return repo


@pytest.fixture
def mock_db():
    """
    Patchable psycopg2 connection and cursor pair

    Returns (conn, cursor); conn.cursor() returns cursor.
    """
    conn = MagicMock()
    cursor = MagicMock()
    conn.cursor.return_value = cursor
    return conn, cursor
