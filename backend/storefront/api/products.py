"""
Products API Endpoints

Author: Storefront Team
Date: 2026-10-19
"""
import logging

from fastapi import APIRouter, Depends, HTTPException

from storefront.api.dependencies import get_create_product_service
from storefront.core.errors import AppError
from storefront.domain.product import ProductCreate
from storefront.services.create_product_service import CreateProductService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/", status_code=201)
async def create_product(
    payload: ProductCreate,
    service: CreateProductService = Depends(get_create_product_service),
):
    """Add a product to the catalog with its initial stock"""
    try:
        product = service.execute(
            name=payload.name,
            price=payload.price,
            quantity=payload.quantity
        )

        return {
            "status": "success",
            "data": product.to_dict()
        }

    except AppError as e:
        raise HTTPException(status_code=e.status_code, detail=e.to_dict())
    except Exception as e:
        logger.error(f"Error creating product: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Error creating product: {str(e)}")
