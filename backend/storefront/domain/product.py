"""
Product Domain Model

Represents a product in the storefront catalog.
`quantity` is the available stock and is decremented by order creation.

Author: Storefront Team
Date: 2026-10-19
"""
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional
from datetime import datetime
from decimal import Decimal


class Product(BaseModel):
    """
    Product domain model

    Fields:
        id: Product ID (UUID)
        name: Product name (unique)
        price: Current unit price
        quantity: Available stock
        created_at: When product was created
        updated_at: When product was last updated
    """

    id: str = Field(..., description="Product ID (UUID)")
    name: str = Field(..., description="Product name")
    price: Decimal = Field(..., description="Unit price", ge=0)
    quantity: int = Field(..., description="Available stock", ge=0)
    created_at: Optional[datetime] = Field(None, description="Creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")

    model_config = ConfigDict(from_attributes=True)

    @property
    def is_out_of_stock(self) -> bool:
        return self.quantity <= 0

    def to_dict(self) -> dict:
        """Convert to dictionary with Decimal price as float"""
        data = self.model_dump(mode="json")
        data['price'] = float(self.price)
        data['is_out_of_stock'] = self.is_out_of_stock
        return data


class ProductCreate(BaseModel):
    """Schema for registering a new product"""
    name: str = Field(..., min_length=1, max_length=255)
    price: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2)
    quantity: int = Field(..., ge=0)


class ProductQuantityUpdate(BaseModel):
    """New stock figure for one product, submitted in a batch update"""
    id: str
    quantity: int
