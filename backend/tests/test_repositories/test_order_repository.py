"""
Unit tests for OrderRepository
"""
import pytest
from unittest.mock import patch
from datetime import datetime
from decimal import Decimal

from storefront.domain.order import Order, OrderLineItem
from storefront.repositories.order_repository import OrderRepository

ORDER_ID = "d4c3b2a1-0f9e-4d8c-a7b6-5e4d3c2b1a00"
P1 = "5c3f0e8a-1d2b-4c6e-8f7a-9b0c1d2e3f40"
P2 = "7e9a2c4b-6d8f-4a1c-b3e5-0f2a4c6e8b10"
NOW = datetime(2026, 10, 19, 9, 30, 0)


def line_row(line_id, product_id, price, quantity):
    return {
        'id': line_id,
        'order_id': ORDER_ID,
        'product_id': product_id,
        'price': Decimal(price),
        'quantity': quantity,
        'created_at': NOW,
        'updated_at': NOW,
    }


class TestOrderRepositoryCreate:

    @patch('storefront.repositories.order_repository.get_db_connection_dict')
    def test_create_inserts_order_and_lines_in_one_transaction(self, mock_get_conn, mock_db, customer):
        conn, cursor = mock_db
        mock_get_conn.return_value = conn
        cursor.fetchone.side_effect = [
            {'id': ORDER_ID, 'created_at': NOW, 'updated_at': NOW},
            line_row("line-1", P1, "100.00", 3),
            line_row("line-2", P2, "25.50", 1),
        ]

        order = OrderRepository().create(
            customer=customer,
            products=[
                OrderLineItem(product_id=P1, quantity=3, price=Decimal("100.00")),
                OrderLineItem(product_id=P2, quantity=1, price=Decimal("25.50")),
            ],
        )

        assert isinstance(order, Order)
        assert order.id == ORDER_ID
        assert order.customer == customer
        assert [item.product_id for item in order.order_products] == [P1, P2]
        assert order.order_products[0].order_id == ORDER_ID
        assert cursor.execute.call_count == 3
        conn.commit.assert_called_once()
        conn.close.assert_called_once()

    @patch('storefront.repositories.order_repository.get_db_connection_dict')
    def test_create_rolls_back_when_a_line_fails(self, mock_get_conn, mock_db, customer):
        conn, cursor = mock_db
        mock_get_conn.return_value = conn
        cursor.fetchone.return_value = {'id': ORDER_ID, 'created_at': NOW, 'updated_at': NOW}
        cursor.execute.side_effect = [None, RuntimeError("fk violation")]

        with pytest.raises(RuntimeError):
            OrderRepository().create(
                customer=customer,
                products=[OrderLineItem(product_id=P1, quantity=1, price=Decimal("1"))],
            )

        conn.rollback.assert_called_once()
        conn.commit.assert_not_called()


class TestOrderRepositoryFind:

    @patch('storefront.repositories.order_repository.get_db_connection_dict')
    def test_find_by_id_returns_order_with_customer_and_lines(self, mock_get_conn, mock_db, customer):
        conn, cursor = mock_db
        mock_get_conn.return_value = conn
        cursor.fetchone.return_value = {
            'id': ORDER_ID,
            'created_at': NOW,
            'updated_at': NOW,
            'customer_id': customer.id,
            'customer_name': customer.name,
            'customer_email': customer.email,
            'customer_created_at': customer.created_at,
            'customer_updated_at': None,
        }
        cursor.fetchall.return_value = [line_row("line-1", P1, "100.00", 3)]

        order = OrderRepository().find_by_id(ORDER_ID)

        assert order.id == ORDER_ID
        assert order.customer.email == customer.email
        assert order.total == Decimal("300.00")

    @patch('storefront.repositories.order_repository.get_db_connection_dict')
    def test_find_by_id_returns_none_when_not_found(self, mock_get_conn, mock_db):
        conn, cursor = mock_db
        mock_get_conn.return_value = conn
        cursor.fetchone.return_value = None

        assert OrderRepository().find_by_id(ORDER_ID) is None

    @patch('storefront.repositories.order_repository.get_db_connection_dict')
    def test_find_by_id_with_malformed_id(self, mock_get_conn):
        assert OrderRepository().find_by_id("42") is None
        mock_get_conn.assert_not_called()
