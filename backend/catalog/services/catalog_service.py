from decimal import Decimal
from operator import attrgetter
from typing import Iterable, List, Optional

from catalog.domain.product import Product
from catalog.repositories.base import ProductRepository
from catalog.utils.logs import get_logger

log = get_logger("catalog")

SORT_PRICE_ASC = "price_asc"
SORT_PRICE_DESC = "price_desc"

_by_price = attrgetter("current_price")


def _active(products: Iterable[Product]) -> List[Product]:
    return [p for p in products if p.is_active]


class CatalogBrowsingService:
    """Read-only storefront view: only ACTIVE products are ever returned."""

    def __init__(self, product_repo: ProductRepository):
        self.product_repo = product_repo

    def get_all_active_products(self) -> List[Product]:
        return _active(self.product_repo.find_all())

    def get_products_by_category(self, category_id: int) -> List[Product]:
        return _active(self.product_repo.find_by_category_id(category_id))

    def search_products(self, keyword: Optional[str]) -> List[Product]:
        return _active(self.product_repo.find_by_name_or_description_containing(keyword))

    def search_products_by_name(self, name: Optional[str]) -> List[Product]:
        return _active(self.product_repo.find_by_name_containing(name))

    def search_products_by_description(self, description: Optional[str]) -> List[Product]:
        return _active(self.product_repo.find_by_description_containing(description))

    # sorted() is stable in both directions, so equal prices keep input order
    def sort_products_by_price_asc(self, products: Iterable[Product]) -> List[Product]:
        return sorted(products, key=_by_price)

    def sort_products_by_price_desc(self, products: Iterable[Product]) -> List[Product]:
        return sorted(products, key=_by_price, reverse=True)

    def filter_by_price_range(
        self,
        products: Iterable[Product],
        min_price: Optional[Decimal] = None,
        max_price: Optional[Decimal] = None,
    ) -> List[Product]:
        return [
            p
            for p in products
            if (min_price is None or p.current_price >= min_price)
            and (max_price is None or p.current_price <= max_price)
        ]

    def browse(
        self,
        keyword: Optional[str] = None,
        category_id: Optional[int] = None,
        min_price: Optional[Decimal] = None,
        max_price: Optional[Decimal] = None,
        sort_by: str = "default",
    ) -> List[Product]:
        """
        Combined storefront query. Steps always run in this order:
        select (category or all active), keyword filter, price filter, sort.
        Unknown ``sort_by`` values leave the order untouched.
        """
        if category_id is not None:
            products = self.get_products_by_category(category_id)
        else:
            products = self.get_all_active_products()

        if keyword:
            products = [p for p in products if p.matches_keyword(keyword)]

        products = self.filter_by_price_range(products, min_price, max_price)

        if sort_by == SORT_PRICE_ASC:
            products = self.sort_products_by_price_asc(products)
        elif sort_by == SORT_PRICE_DESC:
            products = self.sort_products_by_price_desc(products)

        log.debug(
            "browse keyword=%r category_id=%s min=%s max=%s sort=%s -> %s results",
            keyword, category_id, min_price, max_price, sort_by, len(products),
        )
        return products
