"""
Repository interfaces used by the services

Services depend on these protocols rather than on the psycopg2
repositories, so tests and alternative stores can be passed in.
"""
from decimal import Decimal
from typing import List, Optional, Protocol

from storefront.domain.customer import Customer
from storefront.domain.order import Order, OrderLineItem
from storefront.domain.product import Product, ProductQuantityUpdate


class CustomersRepositoryInterface(Protocol):
    """Customer lookup and registration"""

    def find_by_id(self, customer_id: str) -> Optional[Customer]:
        ...

    def find_by_email(self, email: str) -> Optional[Customer]:
        ...

    def create(self, name: str, email: str) -> Customer:
        ...


class ProductsRepositoryInterface(Protocol):
    """Product lookup, registration and stock updates"""

    def find_all_by_id(self, product_ids: List[str]) -> List[Product]:
        """Return the products matching the given ids; unknown ids are omitted."""
        ...

    def find_by_name(self, name: str) -> Optional[Product]:
        ...

    def create(self, name: str, price: Decimal, quantity: int) -> Product:
        ...

    def update_quantity(self, updates: List[ProductQuantityUpdate]) -> None:
        """Overwrite the stock of every listed product."""
        ...


class OrdersRepositoryInterface(Protocol):
    """Order persistence"""

    def create(self, customer: Customer, products: List[OrderLineItem]) -> Order:
        """Persist the order and its line items; returns them with assigned ids."""
        ...

    def find_by_id(self, order_id: str) -> Optional[Order]:
        ...
