"""
Find Order Service

Author: Storefront Team
Date: 2026-10-19
"""
from typing import Optional

from storefront.core.errors import AppError, ErrorKind
from storefront.domain.order import Order
from storefront.repositories import OrderRepository
from storefront.repositories.interfaces import OrdersRepositoryInterface


class FindOrderService:
    """Loads an order with its customer and line items"""

    def __init__(self, orders_repository: Optional[OrdersRepositoryInterface] = None):
        self.orders_repository = orders_repository or OrderRepository()

    def execute(self, order_id: str) -> Order:
        order = self.orders_repository.find_by_id(order_id)

        if not order:
            raise AppError(
                f'Order {order_id} not found',
                kind=ErrorKind.ORDER_NOT_FOUND,
                status_code=404,
            )

        return order
