"""
Repository Layer - Data Access

This layer handles all database queries and returns domain models.
Repositories abstract away SQL details from business logic.

Author: Storefront Team
Date: 2026-10-19
"""
from storefront.repositories.customer_repository import CustomerRepository
from storefront.repositories.product_repository import ProductRepository
from storefront.repositories.order_repository import OrderRepository

__all__ = [
    'CustomerRepository',
    'ProductRepository',
    'OrderRepository',
]
