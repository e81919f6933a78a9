"""
Create Order Service
Validates a purchase request, persists the order and decrements stock

Author: Storefront Team
Date: 2026-10-19
"""
import json
import logging
from typing import Dict, List, Optional

from storefront.core.errors import AppError, ErrorKind
from storefront.domain.order import Order, OrderLineItem, OrderLineRequest
from storefront.domain.product import Product, ProductQuantityUpdate
from storefront.repositories import CustomerRepository, OrderRepository, ProductRepository
from storefront.repositories.interfaces import (
    CustomersRepositoryInterface,
    OrdersRepositoryInterface,
    ProductsRepositoryInterface,
)

logger = logging.getLogger(__name__)


class CreateOrderService:
    """
    Service for creating customer orders

    Steps (each failure aborts with an AppError before anything is written):
    1. Customer must exist
    2. At least one requested product must exist
    3. Every requested product must exist
    4. Every line must fit in the product's stock
    5. Price each line from the product's current price
    6. Persist the order
    7. Write back stock = snapshot quantity - ordered quantity

    Stock is read once and written back as an absolute value, so two
    concurrent orders for the same product are not coordinated. Lines that
    repeat a product id are each checked against the full stock.
    """

    def __init__(
        self,
        orders_repository: Optional[OrdersRepositoryInterface] = None,
        products_repository: Optional[ProductsRepositoryInterface] = None,
        customers_repository: Optional[CustomersRepositoryInterface] = None,
    ):
        self.orders_repository = orders_repository or OrderRepository()
        self.products_repository = products_repository or ProductRepository()
        self.customers_repository = customers_repository or CustomerRepository()

    def execute(self, customer_id: str, products: List[OrderLineRequest]) -> Order:
        """
        Create an order for a customer

        Args:
            customer_id: Customer placing the order
            products: Requested (product id, quantity) lines

        Returns:
            The persisted Order with its line items

        Raises:
            AppError: CUSTOMER_NOT_FOUND, NO_PRODUCTS_FOUND,
                PRODUCTS_NOT_FOUND or INSUFFICIENT_STOCK
        """
        customer = self.customers_repository.find_by_id(customer_id)

        if not customer:
            logger.warning(f"Order rejected: customer {customer_id} not found")
            raise AppError(
                'Could not find any customer with the given id',
                kind=ErrorKind.CUSTOMER_NOT_FOUND,
            )

        requested_ids = list(dict.fromkeys(line.id for line in products))
        existent_products = self.products_repository.find_all_by_id(requested_ids)

        if not existent_products:
            logger.warning(f"Order rejected: none of {len(requested_ids)} products found")
            raise AppError(
                'Could not find any products with the given ids',
                kind=ErrorKind.NO_PRODUCTS_FOUND,
            )

        # Snapshot of the products as they were when the order was validated
        products_by_id: Dict[str, Product] = {product.id: product for product in existent_products}

        inexistent_ids = [line.id for line in products if line.id not in products_by_id]

        if inexistent_ids:
            logger.warning(f"Order rejected: products not found {inexistent_ids}")
            raise AppError(
                f'Could not find products with ids: {json.dumps(inexistent_ids)}',
                kind=ErrorKind.PRODUCTS_NOT_FOUND,
                details={'ids': inexistent_ids},
            )

        unavailable = [
            line for line in products
            if products_by_id[line.id].quantity < line.quantity
        ]

        if unavailable:
            unavailable_data = [line.model_dump() for line in unavailable]
            logger.warning(f"Order rejected: insufficient stock for {unavailable_data}")
            raise AppError(
                f'Products with quantity not available: {json.dumps(unavailable_data)}',
                kind=ErrorKind.INSUFFICIENT_STOCK,
                details={'products': unavailable_data},
            )

        line_items = [
            OrderLineItem(
                product_id=line.id,
                quantity=line.quantity,
                price=products_by_id[line.id].price,
            )
            for line in products
        ]

        order = self.orders_repository.create(customer=customer, products=line_items)

        stock_updates = [
            ProductQuantityUpdate(
                id=item.product_id,
                quantity=products_by_id[item.product_id].quantity - item.quantity,
            )
            for item in order.order_products
        ]

        try:
            self.products_repository.update_quantity(stock_updates)
        except Exception:
            # The order is already stored; stock stays as it was
            logger.error(f"Order {order.id} persisted but stock update failed", exc_info=True)
            raise

        logger.info(
            f"Order {order.id} created for customer {customer.id} "
            f"with {len(order.order_products)} line(s)"
        )
        return order
