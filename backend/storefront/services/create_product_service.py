"""
Create Product Service

Author: Storefront Team
Date: 2026-10-19
"""
import logging
from decimal import Decimal
from typing import Optional

from storefront.core.errors import AppError, ErrorKind
from storefront.domain.product import Product
from storefront.repositories import ProductRepository
from storefront.repositories.interfaces import ProductsRepositoryInterface

logger = logging.getLogger(__name__)


class CreateProductService:
    """Adds products to the catalog; product names are unique"""

    def __init__(self, products_repository: Optional[ProductsRepositoryInterface] = None):
        self.products_repository = products_repository or ProductRepository()

    def execute(self, name: str, price: Decimal, quantity: int) -> Product:
        """
        Create a product with its initial price and stock

        Raises:
            AppError: PRODUCT_ALREADY_EXISTS if the name is taken
        """
        if self.products_repository.find_by_name(name):
            logger.warning(f"Product rejected: name '{name}' already exists")
            raise AppError(
                'There is already a product with this name',
                kind=ErrorKind.PRODUCT_ALREADY_EXISTS,
            )

        product = self.products_repository.create(name=name, price=price, quantity=quantity)
        logger.info(f"Product {product.id} created with stock {product.quantity}")
        return product
