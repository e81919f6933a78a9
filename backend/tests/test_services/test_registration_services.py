"""
Unit tests for CreateCustomerService, CreateProductService and FindOrderService
"""
import pytest
from decimal import Decimal
from unittest.mock import Mock

from storefront.core.errors import AppError, ErrorKind
from storefront.domain.order import Order
from storefront.services.create_customer_service import CreateCustomerService
from storefront.services.create_product_service import CreateProductService
from storefront.services.find_order_service import FindOrderService


class TestCreateCustomerService:

    def test_creates_customer(self, customer):
        repo = Mock()
        repo.find_by_email.return_value = None
        repo.create.return_value = customer

        result = CreateCustomerService(customers_repository=repo).execute(
            name="Ada Lovelace", email="ada@analytical.dev"
        )

        assert result == customer
        repo.create.assert_called_once_with(name="Ada Lovelace", email="ada@analytical.dev")

    def test_rejects_email_in_use(self, customer):
        repo = Mock()
        repo.find_by_email.return_value = customer

        with pytest.raises(AppError) as exc_info:
            CreateCustomerService(customers_repository=repo).execute(
                name="Someone Else", email="ada@analytical.dev"
            )

        assert exc_info.value.kind == ErrorKind.EMAIL_ALREADY_IN_USE
        assert exc_info.value.message == 'This email is already in use'
        repo.create.assert_not_called()


class TestCreateProductService:

    def test_creates_product(self, make_product):
        product = make_product(price="49.90", quantity=3)
        repo = Mock()
        repo.find_by_name.return_value = None
        repo.create.return_value = product

        result = CreateProductService(products_repository=repo).execute(
            name=product.name, price=Decimal("49.90"), quantity=3
        )

        assert result == product
        repo.create.assert_called_once_with(name=product.name, price=Decimal("49.90"), quantity=3)

    def test_rejects_duplicate_name(self, make_product):
        repo = Mock()
        repo.find_by_name.return_value = make_product()

        with pytest.raises(AppError) as exc_info:
            CreateProductService(products_repository=repo).execute(
                name="Mechanical Keyboard", price=Decimal("1"), quantity=1
            )

        assert exc_info.value.kind == ErrorKind.PRODUCT_ALREADY_EXISTS
        repo.create.assert_not_called()


class TestFindOrderService:

    def test_returns_order(self, customer):
        order = Order(id="order-1", customer=customer)
        repo = Mock()
        repo.find_by_id.return_value = order

        assert FindOrderService(orders_repository=repo).execute("order-1") is order

    def test_missing_order_is_404(self):
        repo = Mock()
        repo.find_by_id.return_value = None

        with pytest.raises(AppError) as exc_info:
            FindOrderService(orders_repository=repo).execute("order-404")

        assert exc_info.value.kind == ErrorKind.ORDER_NOT_FOUND
        assert exc_info.value.status_code == 404
