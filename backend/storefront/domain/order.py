"""
Order Domain Models

Author: Storefront Team
Date: 2026-10-19
"""
from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import Optional, List
from datetime import datetime
from decimal import Decimal
from uuid import UUID

from storefront.domain.customer import Customer


class OrderLineRequest(BaseModel):
    """
    One requested line of a new order

    `id` is the product id, matching the shape clients post to /orders.
    """
    id: str = Field(..., description="Product ID")
    quantity: int = Field(..., description="Quantity requested", gt=0)

    @field_validator("id")
    def normalize_id(cls, v):
        """Write UUIDs in canonical lowercase form so they match database ids"""
        v = v.strip()
        try:
            return str(UUID(v))
        except ValueError:
            return v


class OrderCreate(BaseModel):
    """Request body for creating an order"""
    customer_id: str = Field(..., description="Customer ID")
    products: List[OrderLineRequest] = Field(..., min_length=1)


class OrderLineItem(BaseModel):
    """
    Priced line handed to the order repository

    `price` is copied from the product when the order is created and does
    not follow later price changes.
    """
    product_id: str
    quantity: int
    price: Decimal


class OrderProduct(BaseModel):
    """Persisted line item of an order (row of orders_products)"""

    id: str = Field(..., description="Line item ID")
    order_id: Optional[str] = Field(None, description="Parent order ID")
    product_id: Optional[str] = Field(None, description="Product ID")
    price: Decimal = Field(..., description="Unit price at order time", ge=0)
    quantity: int = Field(..., description="Quantity ordered", ge=1)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

    def to_dict(self) -> dict:
        data = self.model_dump(mode="json")
        data['price'] = float(self.price)
        return data


class Order(BaseModel):
    """
    Order aggregate: a customer and its persisted line items

    Line items keep the order in which they were requested.
    """

    id: str = Field(..., description="Order ID (UUID)")
    customer: Optional[Customer] = Field(None, description="Customer who placed the order")
    order_products: List[OrderProduct] = Field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

    @property
    def total(self) -> Decimal:
        """Sum of price * quantity over all line items"""
        return sum(
            (item.price * item.quantity for item in self.order_products),
            Decimal('0'),
        )

    def to_dict(self) -> dict:
        data = self.model_dump(mode="json", exclude={'order_products'})
        data['order_products'] = [item.to_dict() for item in self.order_products]
        return data
