"""
Unit tests for ProductRepository

These tests validate repository logic without requiring a database connection.

Author: Storefront Team
Date: 2026-10-19
"""
import pytest
from psycopg2 import errors as pg_errors
from unittest.mock import patch
from datetime import datetime
from decimal import Decimal

from storefront.core.errors import AppError, ErrorKind
from storefront.repositories.product_repository import ProductRepository
from storefront.domain.product import Product, ProductQuantityUpdate

P1 = "5c3f0e8a-1d2b-4c6e-8f7a-9b0c1d2e3f40"
P2 = "7e9a2c4b-6d8f-4a1c-b3e5-0f2a4c6e8b10"


def product_row(id=P1, name="Mechanical Keyboard", price="100.00", quantity=10):
    return {
        'id': id,
        'name': name,
        'price': Decimal(price),
        'quantity': quantity,
        'created_at': datetime.now(),
        'updated_at': None,
    }


class TestProductRepository:
    """Test ProductRepository methods"""

    @patch('storefront.repositories.product_repository.get_db_connection_dict')
    def test_find_all_by_id_returns_products(self, mock_get_conn, mock_db):
        # Arrange
        conn, cursor = mock_db
        mock_get_conn.return_value = conn
        cursor.fetchall.return_value = [product_row(), product_row(id=P2, name="Mouse")]

        # Act
        products = ProductRepository().find_all_by_id([P1, P2, P1])

        # Assert
        assert len(products) == 2
        assert all(isinstance(p, Product) for p in products)
        assert products[0].price == Decimal("100.00")

        # Duplicates collapsed before querying
        params = cursor.execute.call_args[0][1]
        assert params == ([P1, P2],)
        cursor.close.assert_called_once()
        conn.close.assert_called_once()

    @patch('storefront.repositories.product_repository.get_db_connection_dict')
    def test_find_all_by_id_skips_query_for_non_uuid_ids(self, mock_get_conn):
        products = ProductRepository().find_all_by_id(["not-a-uuid", ""])

        assert products == []
        mock_get_conn.assert_not_called()

    @patch('storefront.repositories.product_repository.get_db_connection_dict')
    def test_find_by_name_returns_none_when_not_found(self, mock_get_conn, mock_db):
        conn, cursor = mock_db
        mock_get_conn.return_value = conn
        cursor.fetchone.return_value = None

        assert ProductRepository().find_by_name("Nope") is None

    @patch('storefront.repositories.product_repository.get_db_connection_dict')
    def test_create_commits_and_returns_product(self, mock_get_conn, mock_db):
        conn, cursor = mock_db
        mock_get_conn.return_value = conn
        cursor.fetchone.return_value = product_row(price="19.99", quantity=5)

        product = ProductRepository().create(name="Mechanical Keyboard", price=Decimal("19.99"), quantity=5)

        assert product.id == P1
        assert product.quantity == 5
        conn.commit.assert_called_once()
        conn.close.assert_called_once()

    @patch('storefront.repositories.product_repository.execute_values')
    @patch('storefront.repositories.product_repository.get_db_connection_dict')
    def test_update_quantity_writes_last_value_per_id(self, mock_get_conn, mock_execute_values, mock_db):
        conn, cursor = mock_db
        mock_get_conn.return_value = conn

        ProductRepository().update_quantity([
            ProductQuantityUpdate(id=P1, quantity=7),
            ProductQuantityUpdate(id=P2, quantity=0),
            ProductQuantityUpdate(id=P1, quantity=4),
        ])

        args, kwargs = mock_execute_values.call_args
        assert args[0] is cursor
        assert "UPDATE products" in args[1]
        assert args[2] == [(P1, 4), (P2, 0)]
        conn.commit.assert_called_once()

    @patch('storefront.repositories.product_repository.get_db_connection_dict')
    def test_update_quantity_with_nothing_to_update(self, mock_get_conn):
        ProductRepository().update_quantity([])

        mock_get_conn.assert_not_called()

    @patch('storefront.repositories.product_repository.execute_values')
    @patch('storefront.repositories.product_repository.get_db_connection_dict')
    def test_update_quantity_rolls_back_on_error(self, mock_get_conn, mock_execute_values, mock_db):
        conn, cursor = mock_db
        mock_get_conn.return_value = conn
        mock_execute_values.side_effect = RuntimeError("boom")

        with pytest.raises(RuntimeError):
            ProductRepository().update_quantity([ProductQuantityUpdate(id=P1, quantity=1)])

        conn.rollback.assert_called_once()
        conn.commit.assert_not_called()
        conn.close.assert_called_once()

    @patch('storefront.repositories.product_repository.get_db_connection_dict')
    def test_create_with_taken_name_raises_product_exists(self, mock_get_conn, mock_db):
        conn, cursor = mock_db
        mock_get_conn.return_value = conn
        cursor.execute.side_effect = pg_errors.UniqueViolation("duplicate key value violates unique constraint")

        with pytest.raises(AppError) as exc_info:
            ProductRepository().create(name="Mechanical Keyboard", price=Decimal("19.99"), quantity=5)

        assert exc_info.value.kind == ErrorKind.PRODUCT_ALREADY_EXISTS
        conn.rollback.assert_called_once()
        conn.close.assert_called_once()
