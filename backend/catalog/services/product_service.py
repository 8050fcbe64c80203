from dataclasses import replace
from typing import List, Optional

from catalog.domain.exceptions import ProductNotFoundError
from catalog.domain.product import Product
from catalog.repositories.base import ProductRepository
from catalog.utils.logs import get_logger

log = get_logger("products")


class ProductManagementService:
    def __init__(self, product_repo: ProductRepository):
        self.product_repo = product_repo

    def create_product(self, product: Product) -> Product:
        created = self.product_repo.save(product)
        log.info("created product id=%s name=%r", created.id, created.name)
        return created

    def update_product(self, product_id: int, product: Product) -> Product:
        """
        Full replace of an existing product. Raises ProductNotFoundError
        without touching the repository when ``product_id`` is unknown.
        """
        if self.product_repo.find_by_id(product_id) is None:
            log.warning("update of unknown product id=%s", product_id)
            raise ProductNotFoundError(product_id)
        updated = self.product_repo.save(replace(product, id=product_id))
        log.info("updated product id=%s", product_id)
        return updated

    def update_stock(self, product_id: int, quantity: int) -> Product:
        """Fetch, change stock_quantity only, then save through update_product."""
        product = self.product_repo.find_by_id(product_id)
        if product is None:
            log.warning("stock update of unknown product id=%s", product_id)
            raise ProductNotFoundError(product_id)
        return self.update_product(product_id, replace(product, stock_quantity=quantity))

    def delete_product(self, product_id: int) -> None:
        self.product_repo.delete_by_id(product_id)
        log.info("deleted product id=%s", product_id)

    def get_all_products(self) -> List[Product]:
        return self.product_repo.find_all()

    def get_product_by_id(self, product_id: int) -> Optional[Product]:
        return self.product_repo.find_by_id(product_id)

    def get_products_by_category(self, category_id: int) -> List[Product]:
        return self.product_repo.find_by_category_id(category_id)

    def search_products(self, name: Optional[str]) -> List[Product]:
        return self.product_repo.find_by_name_containing(name)
