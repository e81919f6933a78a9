"""
Application errors

Every business-rule violation is raised as an AppError tagged with an
ErrorKind. Routers translate it into an HTTP response using status_code.
Infrastructure failures (psycopg2 errors) are never wrapped in AppError,
except unique-index violations, which repositories report as the same
rule the services check up front.
"""
from enum import Enum
from typing import Any, Optional


class ErrorKind(str, Enum):
    """Tags for expected business-rule failures"""
    CUSTOMER_NOT_FOUND = "customer_not_found"
    NO_PRODUCTS_FOUND = "no_products_found"
    PRODUCTS_NOT_FOUND = "products_not_found"
    INSUFFICIENT_STOCK = "insufficient_stock"
    EMAIL_ALREADY_IN_USE = "email_already_in_use"
    PRODUCT_ALREADY_EXISTS = "product_already_exists"
    ORDER_NOT_FOUND = "order_not_found"


class AppError(Exception):
    """
    Domain error with a human-readable message

    Args:
        message: Message shown to the API caller
        kind: Which rule was violated
        status_code: HTTP status the API layer responds with
        details: Optional structured payload (missing ids, offending lines)
    """

    def __init__(
        self,
        message: str,
        kind: ErrorKind,
        status_code: int = 400,
        details: Optional[Any] = None,
    ):
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.status_code = status_code
        self.details = details

    def to_dict(self) -> dict:
        data = {"status": "error", "kind": self.kind.value, "message": self.message}
        if self.details is not None:
            data["details"] = self.details
        return data
