from functools import lru_cache

from fastapi import Depends
from sqlalchemy.orm import Session

from catalog.config import settings
from catalog.db import get_db
from catalog.repositories.base import ProductRepository
from catalog.repositories.memory_repo import InMemoryProductRepository
from catalog.repositories.product_repo import SqlProductRepository
from catalog.services.catalog_service import CatalogBrowsingService
from catalog.services.product_service import ProductManagementService


@lru_cache(maxsize=1)
def get_memory_repository() -> InMemoryProductRepository:
    # one process-wide store; this module owns it
    return InMemoryProductRepository.with_demo_data()


def get_product_repository(db: Session = Depends(get_db)) -> ProductRepository:
    if settings.REPOSITORY_BACKEND == "memory":
        return get_memory_repository()
    return SqlProductRepository(db)


def get_catalog_service(repo: ProductRepository = Depends(get_product_repository)) -> CatalogBrowsingService:
    return CatalogBrowsingService(repo)


def get_product_service(repo: ProductRepository = Depends(get_product_repository)) -> ProductManagementService:
    return ProductManagementService(repo)
