from decimal import Decimal
from typing import Iterable, List, Optional

from fastapi import APIRouter, Depends, Query

from catalog.api.deps import get_catalog_service
from catalog.domain.product import Product
from catalog.schemas.product_schema import ProductOut
from catalog.services.catalog_service import CatalogBrowsingService

router = APIRouter(tags=["catalog"])


def _out(products: Iterable[Product]) -> List[ProductOut]:
    return [ProductOut.model_validate(p) for p in products]


@router.get("", response_model=List[ProductOut], summary="List active products")
def list_active(svc: CatalogBrowsingService = Depends(get_catalog_service)):
    return _out(svc.get_all_active_products())


@router.get("/category/{category_id}", response_model=List[ProductOut], summary="Active products in a category")
def by_category(category_id: int, svc: CatalogBrowsingService = Depends(get_catalog_service)):
    return _out(svc.get_products_by_category(category_id))


@router.get("/search", response_model=List[ProductOut], summary="Keyword search on name or description")
def search(
    keyword: str = Query(..., description="search term"),
    svc: CatalogBrowsingService = Depends(get_catalog_service),
):
    return _out(svc.search_products(keyword))


@router.get("/sort/price-asc", response_model=List[ProductOut], summary="Active products, cheapest first")
def sort_price_asc(svc: CatalogBrowsingService = Depends(get_catalog_service)):
    return _out(svc.sort_products_by_price_asc(svc.get_all_active_products()))


@router.get("/sort/price-desc", response_model=List[ProductOut], summary="Active products, most expensive first")
def sort_price_desc(svc: CatalogBrowsingService = Depends(get_catalog_service)):
    return _out(svc.sort_products_by_price_desc(svc.get_all_active_products()))


@router.get("/filter/price", response_model=List[ProductOut], summary="Active products within a price range")
def filter_price(
    min_price: Optional[Decimal] = Query(None, ge=0),
    max_price: Optional[Decimal] = Query(None, ge=0),
    svc: CatalogBrowsingService = Depends(get_catalog_service),
):
    return _out(svc.filter_by_price_range(svc.get_all_active_products(), min_price, max_price))


@router.get("/browse", response_model=List[ProductOut], summary="Combined category, keyword, price and sort query")
def browse(
    keyword: Optional[str] = Query(None),
    category_id: Optional[int] = Query(None),
    min_price: Optional[Decimal] = Query(None, ge=0),
    max_price: Optional[Decimal] = Query(None, ge=0),
    sort_by: str = Query("default", description="price_asc, price_desc or anything else for no reordering"),
    svc: CatalogBrowsingService = Depends(get_catalog_service),
):
    return _out(
        svc.browse(
            keyword=keyword,
            category_id=category_id,
            min_price=min_price,
            max_price=max_price,
            sort_by=sort_by,
        )
    )
