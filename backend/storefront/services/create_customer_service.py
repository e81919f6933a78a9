"""
Create Customer Service

Author: Storefront Team
Date: 2026-10-19
"""
import logging
from typing import Optional

from storefront.core.errors import AppError, ErrorKind
from storefront.domain.customer import Customer
from storefront.repositories import CustomerRepository
from storefront.repositories.interfaces import CustomersRepositoryInterface

logger = logging.getLogger(__name__)


class CreateCustomerService:
    """Registers customers; an email can belong to one customer only"""

    def __init__(self, customers_repository: Optional[CustomersRepositoryInterface] = None):
        self.customers_repository = customers_repository or CustomerRepository()

    def execute(self, name: str, email: str) -> Customer:
        if self.customers_repository.find_by_email(email):
            logger.warning(f"Customer rejected: email {email} already in use")
            raise AppError('This email is already in use', kind=ErrorKind.EMAIL_ALREADY_IN_USE)

        customer = self.customers_repository.create(name=name, email=email)
        logger.info(f"Customer {customer.id} created")
        return customer
