"""
FastAPI dependencies that build the services

Tests replace these through app.dependency_overrides.
"""
from storefront.services.create_customer_service import CreateCustomerService
from storefront.services.create_order_service import CreateOrderService
from storefront.services.create_product_service import CreateProductService
from storefront.services.find_order_service import FindOrderService


def get_create_order_service() -> CreateOrderService:
    return CreateOrderService()


def get_find_order_service() -> FindOrderService:
    return FindOrderService()


def get_create_customer_service() -> CreateCustomerService:
    return CreateCustomerService()


def get_create_product_service() -> CreateProductService:
    return CreateProductService()
