"""
Product Repository - Data Access Layer for Products

Handles all database queries for products and returns Product domain models.

Author: Storefront Team
Date: 2026-10-19
"""
from decimal import Decimal
from typing import List, Optional
from psycopg2 import errors as pg_errors
from psycopg2.extras import execute_values

from storefront.domain.product import Product, ProductQuantityUpdate
from storefront.core.database import get_db_connection_dict
from storefront.core.errors import AppError, ErrorKind
from storefront.repositories.ids import valid_uuids

PRODUCT_COLUMNS = "id, name, price, quantity, created_at, updated_at"


class ProductRepository:
    """
    Repository for Product data access

    All SQL queries for products are centralized here.
    Returns Product domain models, not raw dictionaries.
    """

    def find_all_by_id(self, product_ids: List[str]) -> List[Product]:
        """
        Batch lookup of products by id

        Ids with no matching product are silently omitted from the result.

        Args:
            product_ids: Product UUIDs (duplicates allowed)

        Returns:
            List of matching products, at most one per distinct id
        """
        ids = list(dict.fromkeys(valid_uuids(product_ids)))
        if not ids:
            return []

        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute(f"""
                SELECT {PRODUCT_COLUMNS}
                FROM products
                WHERE id = ANY(%s::uuid[])
            """, (ids,))

            return [Product(**row) for row in cursor.fetchall()]

        finally:
            cursor.close()
            conn.close()

    def find_by_name(self, name: str) -> Optional[Product]:
        """
        Find product by its (unique) name

        Returns:
            Product or None if not found
        """
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute(f"""
                SELECT {PRODUCT_COLUMNS}
                FROM products
                WHERE name = %s
            """, (name,))

            row = cursor.fetchone()
            if not row:
                return None

            return Product(**row)

        finally:
            cursor.close()
            conn.close()

    def create(self, name: str, price: Decimal, quantity: int) -> Product:
        """Insert a new product and return it with its generated id"""
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute(f"""
                INSERT INTO products (name, price, quantity)
                VALUES (%s, %s, %s)
                RETURNING {PRODUCT_COLUMNS}
            """, (name, price, quantity))

            row = cursor.fetchone()
            conn.commit()
            return Product(**row)

        except pg_errors.UniqueViolation:
            conn.rollback()
            raise AppError(
                'There is already a product with this name',
                kind=ErrorKind.PRODUCT_ALREADY_EXISTS,
            )

        except Exception:
            conn.rollback()
            raise

        finally:
            cursor.close()
            conn.close()

    def update_quantity(self, updates: List[ProductQuantityUpdate]) -> None:
        """
        Overwrite the stock of several products in one statement

        The new quantity is written as given (not decremented in SQL).
        When the same id is listed more than once the last entry wins.

        Args:
            updates: New stock figure per product id
        """
        latest = {}
        for update in updates:
            latest[update.id] = update.quantity

        if not latest:
            return

        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            execute_values(
                cursor,
                """
                UPDATE products AS p
                SET quantity = v.quantity, updated_at = NOW()
                FROM (VALUES %s) AS v(id, quantity)
                WHERE p.id = v.id::uuid
                """,
                list(latest.items()),
                template="(%s, %s)",
            )
            conn.commit()

        except Exception:
            conn.rollback()
            raise

        finally:
            cursor.close()
            conn.close()
