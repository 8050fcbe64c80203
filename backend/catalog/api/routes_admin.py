from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from catalog.api.deps import get_product_service
from catalog.domain.exceptions import ProductNotFoundError, UnknownCategoryError
from catalog.schemas.product_schema import ProductIn, ProductOut
from catalog.services.product_service import ProductManagementService

router = APIRouter(prefix="/api/admin/products", tags=["admin"])


@router.post("", response_model=ProductOut, status_code=status.HTTP_201_CREATED, summary="Create a product")
def create_product(payload: ProductIn, svc: ProductManagementService = Depends(get_product_service)):
    try:
        created = svc.create_product(payload.to_domain())
    except UnknownCategoryError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return ProductOut.model_validate(created)


@router.put("/{product_id}", response_model=ProductOut, summary="Replace a product")
def update_product(
    product_id: int,
    payload: ProductIn,
    svc: ProductManagementService = Depends(get_product_service),
):
    try:
        updated = svc.update_product(product_id, payload.to_domain())
    except ProductNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except UnknownCategoryError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return ProductOut.model_validate(updated)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a product")
def delete_product(product_id: int, svc: ProductManagementService = Depends(get_product_service)):
    svc.delete_product(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("", response_model=List[ProductOut], summary="List every product, any status")
def list_products(svc: ProductManagementService = Depends(get_product_service)):
    return [ProductOut.model_validate(p) for p in svc.get_all_products()]


@router.get("/{product_id}", response_model=ProductOut, summary="Get product by id")
def get_product(product_id: int, svc: ProductManagementService = Depends(get_product_service)):
    p = svc.get_product_by_id(product_id)
    if not p:
        raise HTTPException(status_code=404, detail="Product not found")
    return ProductOut.model_validate(p)


@router.patch("/{product_id}/stock", response_model=ProductOut, summary="Set stock quantity")
def update_stock(
    product_id: int,
    quantity: int = Query(..., ge=0),
    svc: ProductManagementService = Depends(get_product_service),
):
    try:
        updated = svc.update_stock(product_id, quantity)
    except ProductNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return ProductOut.model_validate(updated)
