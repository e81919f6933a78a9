"""
Customers API Endpoints

Author: Storefront Team
Date: 2026-10-19
"""
import logging

from fastapi import APIRouter, Depends, HTTPException

from storefront.api.dependencies import get_create_customer_service
from storefront.core.errors import AppError
from storefront.domain.customer import CustomerCreate
from storefront.services.create_customer_service import CreateCustomerService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/", status_code=201)
async def create_customer(
    payload: CustomerCreate,
    service: CreateCustomerService = Depends(get_create_customer_service),
):
    """Register a customer (email must be unused)"""
    try:
        customer = service.execute(name=payload.name, email=payload.email)

        return {
            "status": "success",
            "data": customer.to_dict()
        }

    except AppError as e:
        raise HTTPException(status_code=e.status_code, detail=e.to_dict())
    except Exception as e:
        logger.error(f"Error creating customer: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Error creating customer: {str(e)}")
