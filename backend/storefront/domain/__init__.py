"""
Domain Layer - Business Entities

Pydantic models representing the storefront's business entities.
These models enforce type safety and validation across the application.

Author: Storefront Team
Date: 2026-10-19
"""
from storefront.domain.customer import Customer, CustomerCreate
from storefront.domain.product import Product, ProductCreate, ProductQuantityUpdate
from storefront.domain.order import (
    Order,
    OrderCreate,
    OrderLineItem,
    OrderLineRequest,
    OrderProduct,
)

__all__ = [
    'Customer',
    'CustomerCreate',
    'Product',
    'ProductCreate',
    'ProductQuantityUpdate',
    'Order',
    'OrderCreate',
    'OrderLineItem',
    'OrderLineRequest',
    'OrderProduct',
]
