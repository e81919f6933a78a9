"""
Customer Repository - Data Access Layer for Customers

Author: Storefront Team
Date: 2026-10-19
"""
from typing import Optional
from psycopg2 import errors as pg_errors

from storefront.domain.customer import Customer
from storefront.core.database import get_db_connection_dict
from storefront.core.errors import AppError, ErrorKind
from storefront.repositories.ids import is_uuid


class CustomerRepository:
    """
    Repository for Customer data access

    Returns Customer domain models, not raw dictionaries.
    """

    def find_by_id(self, customer_id: str) -> Optional[Customer]:
        """
        Find customer by ID

        Args:
            customer_id: Customer UUID

        Returns:
            Customer or None if not found
        """
        if not is_uuid(customer_id):
            return None

        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute("""
                SELECT id, name, email, created_at, updated_at
                FROM customers
                WHERE id = %s::uuid
            """, (customer_id,))

            row = cursor.fetchone()
            if not row:
                return None

            return Customer(**row)

        finally:
            cursor.close()
            conn.close()

    def find_by_email(self, email: str) -> Optional[Customer]:
        """Find customer by email (case-insensitive)"""
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute("""
                SELECT id, name, email, created_at, updated_at
                FROM customers
                WHERE LOWER(email) = LOWER(%s)
            """, (email,))

            row = cursor.fetchone()
            if not row:
                return None

            return Customer(**row)

        finally:
            cursor.close()
            conn.close()

    def create(self, name: str, email: str) -> Customer:
        """
        Insert a new customer

        Returns:
            The created Customer with its generated id and timestamps
        """
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute("""
                INSERT INTO customers (name, email)
                VALUES (%s, %s)
                RETURNING id, name, email, created_at, updated_at
            """, (name, email))

            row = cursor.fetchone()
            conn.commit()
            return Customer(**row)

        except pg_errors.UniqueViolation:
            # Lost a race with another registration of the same email
            conn.rollback()
            raise AppError('This email is already in use', kind=ErrorKind.EMAIL_ALREADY_IN_USE)

        except Exception:
            conn.rollback()
            raise

        finally:
            cursor.close()
            conn.close()
