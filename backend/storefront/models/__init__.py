"""
Database models (table definitions)
"""
from .customer import Customer
from .product import Product
from .order import Order, OrderProduct

__all__ = [
    "Customer",
    "Product",
    "Order",
    "OrderProduct",
]
