"""
Customer Domain Model

Author: Storefront Team
Date: 2026-10-19
"""
from pydantic import BaseModel, Field, ConfigDict, EmailStr
from typing import Optional
from datetime import datetime


class Customer(BaseModel):
    """
    Customer domain model

    Order creation only checks that a customer exists; the remaining fields
    are carried so the order response can embed the customer.
    """

    id: str = Field(..., description="Customer ID (UUID)")
    name: str = Field(..., description="Customer name")
    email: str = Field(..., description="Customer email (unique)")
    created_at: Optional[datetime] = Field(None, description="Creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")

    model_config = ConfigDict(from_attributes=True)

    def to_dict(self) -> dict:
        return self.model_dump(mode="json")


class CustomerCreate(BaseModel):
    """Schema for registering a new customer"""
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
