"""
Orders API Endpoints
Order creation and lookup

Author: Storefront Team
Date: 2026-10-19
"""
import logging

from fastapi import APIRouter, Depends, HTTPException

from storefront.api.dependencies import get_create_order_service, get_find_order_service
from storefront.core.errors import AppError
from storefront.domain.order import OrderCreate
from storefront.services.create_order_service import CreateOrderService
from storefront.services.find_order_service import FindOrderService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/", status_code=201)
async def create_order(
    payload: OrderCreate,
    service: CreateOrderService = Depends(get_create_order_service),
):
    """
    Create an order for a customer

    Validates the customer, product existence and stock, stores the order
    with prices taken from the catalog and decrements stock.
    """
    try:
        order = service.execute(customer_id=payload.customer_id, products=payload.products)

        return {
            "status": "success",
            "data": order.to_dict()
        }

    except AppError as e:
        raise HTTPException(status_code=e.status_code, detail=e.to_dict())
    except Exception as e:
        logger.error(f"Error creating order: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Error creating order: {str(e)}")


@router.get("/{order_id}")
async def get_order(
    order_id: str,
    service: FindOrderService = Depends(get_find_order_service),
):
    """Get one order with its customer and line items"""
    try:
        order = service.execute(order_id)

        return {
            "status": "success",
            "data": order.to_dict()
        }

    except AppError as e:
        raise HTTPException(status_code=e.status_code, detail=e.to_dict())
    except Exception as e:
        logger.error(f"Error fetching order {order_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Error fetching order: {str(e)}")
