from datetime import datetime, timezone
from typing import Dict, List, Optional

from sqlalchemy import or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from catalog.domain.exceptions import UnknownCategoryError
from catalog.domain.product import Category, Product
from catalog.models.category import CategoryModel
from catalog.models.product import ProductModel
from catalog.repositories.base import ProductRepository
from catalog.repositories.mapper import copy_to_row, product_to_domain, products_to_domain
from catalog.utils.logs import get_logger

log = get_logger("repository.sql")


def _contains(column, keyword: str):
    # LIKE wildcards in the keyword are matched literally
    escaped = keyword.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return column.ilike(f"%{escaped}%", escape="\\")


class SqlProductRepository(ProductRepository):
    """ProductRepository backed by a SQLAlchemy session. Each write commits."""

    def __init__(self, db: Session):
        self.db = db

    def _now(self) -> datetime:
        return datetime.now(timezone.utc)

    def _commit(self):
        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise

    def _find_category(self, category: Category) -> Optional[CategoryModel]:
        if category.id is not None:
            return self.db.get(CategoryModel, category.id)
        # no id: reuse the first stored category with the same name
        return (
            self.db.query(CategoryModel)
            .filter(CategoryModel.name == category.name)
            .order_by(CategoryModel.id)
            .first()
        )

    def _resolve_category(self, category: Category, cache: Dict[tuple, CategoryModel], unknown: List[int]) -> Optional[CategoryModel]:
        """
        Return the stored row for ``category``, creating it (and its parent
        chain) when it is not in the database yet. Bare id references that
        match nothing are collected in ``unknown`` instead.
        """
        key = ("id", category.id) if category.id is not None else ("name", category.name)
        if key in cache:
            return cache[key]
        row = self._find_category(category)
        if row is not None:
            cache[key] = row
            return row
        if category.is_reference:
            unknown.append(category.id)
            return None
        row = CategoryModel(id=category.id, name=category.name, description=category.description)
        self.db.add(row)
        # cached before the parent is resolved so looping parent chains terminate
        cache[key] = row
        if category.parent is not None:
            row.parent = self._resolve_category(category.parent, cache, unknown)
        return row

    def _resolve_categories(self, categories: List[Category]) -> List[CategoryModel]:
        cache: Dict[tuple, CategoryModel] = {}
        unknown: List[int] = []
        rows = []
        try:
            for c in categories or []:
                row = self._resolve_category(c, cache, unknown)
                if row is not None and row not in rows:
                    rows.append(row)
            if unknown:
                raise UnknownCategoryError(unknown)
        except UnknownCategoryError:
            self.db.rollback()
            raise
        return rows

    def save(self, product: Product) -> Product:
        now = self._now()
        categories = self._resolve_categories(product.categories)
        row = self.db.get(ProductModel, product.id) if product.id is not None else None
        if row is None:
            created_at = now if product.id is None else (product.created_at or now)
            row = ProductModel(id=product.id, created_at=created_at)
            self.db.add(row)
        copy_to_row(product, row, categories)
        row.updated_at = now
        self.db.flush()
        product_id = row.id
        self._commit()
        log.debug("saved product id=%s", product_id)
        return product_to_domain(self.db.get(ProductModel, product_id))

    def find_by_id(self, product_id: int) -> Optional[Product]:
        return product_to_domain(self.db.get(ProductModel, product_id))

    def find_all(self) -> List[Product]:
        rows = self.db.query(ProductModel).order_by(ProductModel.id).all()
        return products_to_domain(rows)

    def delete_by_id(self, product_id: int) -> None:
        row = self.db.get(ProductModel, product_id)
        if row is None:
            return
        self.db.delete(row)
        self._commit()
        log.debug("deleted product id=%s", product_id)

    def find_by_category_id(self, category_id: int) -> List[Product]:
        rows = (
            self.db.query(ProductModel)
            .join(ProductModel.categories)
            .filter(CategoryModel.id == category_id)
            .order_by(ProductModel.id)
            .all()
        )
        return products_to_domain(rows)

    def find_by_name_containing(self, name: Optional[str]) -> List[Product]:
        if not name:
            return []
        rows = (
            self.db.query(ProductModel)
            .filter(_contains(ProductModel.name, name))
            .order_by(ProductModel.id)
            .all()
        )
        return products_to_domain(rows)

    def find_by_description_containing(self, description: Optional[str]) -> List[Product]:
        if not description:
            return []
        rows = (
            self.db.query(ProductModel)
            .filter(_contains(ProductModel.description, description))
            .order_by(ProductModel.id)
            .all()
        )
        return products_to_domain(rows)

    def find_by_name_or_description_containing(self, keyword: Optional[str]) -> List[Product]:
        if not keyword:
            return []
        rows = (
            self.db.query(ProductModel)
            .filter(
                or_(
                    _contains(ProductModel.name, keyword),
                    _contains(ProductModel.description, keyword),
                )
            )
            .order_by(ProductModel.id)
            .all()
        )
        return products_to_domain(rows)
