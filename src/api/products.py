"""
Catalog endpoints.
"""

from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, Query

from api.dependencies import get_product_service
from features.product import ProductService
from utils.response import standard_response

router = APIRouter(prefix="/products", tags=["products"])


@router.post("")
def add_product(product: Dict[str, Any] = Body(...), service: ProductService = Depends(get_product_service)):
    product_id = service.add_product(product)
    return standard_response(True, message="Product added successfully", insertedId=product_id)


@router.get("")
def list_products(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1),
    service: ProductService = Depends(get_product_service),
):
    result = service.list_products(page=page, limit=limit)
    return standard_response(
        True,
        data=result["data"],
        total=result["total"],
        page=result["page"],
        limit=result["limit"],
    )


@router.get("/{product_id}")
def get_product(product_id: str, service: ProductService = Depends(get_product_service)):
    return standard_response(True, data=service.get_product(product_id))
