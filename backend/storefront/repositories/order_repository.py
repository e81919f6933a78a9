"""
Order Repository - Data Access Layer for Orders

Handles all database queries for orders and returns Order domain models.

Author: Storefront Team
Date: 2026-10-19
"""
from typing import List, Optional
from storefront.domain.customer import Customer
from storefront.domain.order import Order, OrderLineItem, OrderProduct
from storefront.core.database import get_db_connection_dict
from storefront.repositories.ids import is_uuid

ORDER_PRODUCT_COLUMNS = "id, order_id, product_id, price, quantity, created_at, updated_at"


class OrderRepository:
    """
    Repository for Order data access

    Returns Order domain models with their customer and line items.
    """

    def create(self, customer: Customer, products: List[OrderLineItem]) -> Order:
        """
        Persist an order and its line items

        The order row and every orders_products row are written in a single
        transaction; nothing is stored if any insert fails.

        Args:
            customer: Customer placing the order
            products: Priced line items, in request order

        Returns:
            Order with generated ids, line items in the given order
        """
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute("""
                INSERT INTO orders (customer_id)
                VALUES (%s::uuid)
                RETURNING id, created_at, updated_at
            """, (customer.id,))
            order_row = cursor.fetchone()

            order_products = []
            for item in products:
                cursor.execute(f"""
                    INSERT INTO orders_products (order_id, product_id, price, quantity)
                    VALUES (%s::uuid, %s::uuid, %s, %s)
                    RETURNING {ORDER_PRODUCT_COLUMNS}
                """, (order_row['id'], item.product_id, item.price, item.quantity))
                order_products.append(OrderProduct(**cursor.fetchone()))

            conn.commit()

            return Order(
                id=order_row['id'],
                customer=customer,
                order_products=order_products,
                created_at=order_row['created_at'],
                updated_at=order_row['updated_at'],
            )

        except Exception:
            conn.rollback()
            raise

        finally:
            cursor.close()
            conn.close()

    def find_by_id(self, order_id: str) -> Optional[Order]:
        """
        Find order by ID with its customer and line items

        Args:
            order_id: Order UUID

        Returns:
            Order with all related data or None if not found
        """
        if not is_uuid(order_id):
            return None

        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute("""
                SELECT
                    o.id, o.created_at, o.updated_at,
                    c.id as customer_id,
                    c.name as customer_name,
                    c.email as customer_email,
                    c.created_at as customer_created_at,
                    c.updated_at as customer_updated_at
                FROM orders o
                LEFT JOIN customers c ON o.customer_id = c.id
                WHERE o.id = %s::uuid
            """, (order_id,))

            row = cursor.fetchone()
            if not row:
                return None

            cursor.execute(f"""
                SELECT {ORDER_PRODUCT_COLUMNS}
                FROM orders_products
                WHERE order_id = %s::uuid
                ORDER BY created_at, id
            """, (order_id,))
            items = cursor.fetchall()

            customer = None
            if row['customer_id']:
                customer = Customer(
                    id=row['customer_id'],
                    name=row['customer_name'],
                    email=row['customer_email'],
                    created_at=row['customer_created_at'],
                    updated_at=row['customer_updated_at'],
                )

            return Order(
                id=row['id'],
                customer=customer,
                order_products=[OrderProduct(**item) for item in items],
                created_at=row['created_at'],
                updated_at=row['updated_at'],
            )

        finally:
            cursor.close()
            conn.close()
