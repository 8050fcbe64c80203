from dataclasses import replace
from datetime import datetime, timezone
from typing import Dict, Iterable, List, Optional

from catalog.domain.exceptions import UnknownCategoryError
from catalog.domain.product import Category, Product, apply_update
from catalog.fixtures import demo_catalog
from catalog.repositories.base import ProductRepository


class InMemoryProductRepository(ProductRepository):
    """
    Dict-backed ProductRepository for demos and tests.

    - Stores products in insertion order
    - Reads return the stored objects themselves, not copies
    - save() is a plain read-modify-write with no locking; two concurrent
      saves of the same id can lose one of them
    """

    def __init__(self, products: Optional[Iterable[Product]] = None, categories: Optional[Iterable[Category]] = None):
        self._products: Dict[int, Product] = {}
        self._categories: Dict[int, Category] = {}
        self._next_id = 1
        for c in categories or []:
            self.add_category(c)
        for p in products or []:
            self.save(p)

    @classmethod
    def with_demo_data(cls) -> "InMemoryProductRepository":
        categories, products = demo_catalog()
        return cls(products=products, categories=categories)

    def _now(self) -> datetime:
        return datetime.now(timezone.utc)

    def add_category(self, category: Category) -> Category:
        """Return the stored match for ``category``, or store and return a copy of it."""
        return self._store_category(category, {}, [])

    def _find_category(self, category: Category) -> Optional[Category]:
        if category.id is not None:
            return self._categories.get(category.id)
        # no id: reuse the first stored category with the same name
        return next((c for c in self._categories.values() if c.name == category.name), None)

    def _store_category(self, category: Category, cache: Dict[tuple, Category], unknown: List[int]) -> Optional[Category]:
        key = ("id", category.id) if category.id is not None else ("name", category.name)
        if key in cache:
            return cache[key]
        known = self._find_category(category)
        if known is not None:
            cache[key] = known
            return known
        if category.is_reference:
            unknown.append(category.id)
            return None
        category_id = category.id if category.id is not None else max(self._categories, default=0) + 1
        stored = replace(category, id=category_id, parent=None, products=[])
        self._categories[category_id] = stored
        cache[key] = stored
        if category.parent is not None:
            stored.parent = self._store_category(category.parent, cache, unknown)
        return stored

    def _resolve_categories(self, categories: List[Category]) -> List[Category]:
        unknown: List[int] = []
        for c in categories or []:
            if c.is_reference and c.id not in self._categories:
                unknown.append(c.id)
        if unknown:
            raise UnknownCategoryError(unknown)
        cache: Dict[tuple, Category] = {}
        resolved: List[Category] = []
        for c in categories or []:
            known = self._store_category(c, cache, unknown)
            if known is not None and all(r.id != known.id for r in resolved):
                resolved.append(known)
        if unknown:
            raise UnknownCategoryError(unknown)
        return resolved

    def save(self, product: Product) -> Product:
        now = self._now()
        categories = self._resolve_categories(product.categories)
        existing = self._products.get(product.id) if product.id is not None else None
        if existing is not None:
            stored = apply_update(existing, product, now)
            stored.categories = categories
        else:
            if product.id is None:
                product_id = self._next_id
                created_at = now
            else:
                product_id = product.id
                created_at = product.created_at or now
            stored = Product(
                id=product_id,
                name=product.name,
                description=product.description,
                base_price=product.base_price,
                current_price=product.current_price,
                categories=categories,
                image_url=product.image_url,
                stock_quantity=product.stock_quantity,
                status=product.status,
                weight=product.weight,
                dimensions=product.dimensions,
                created_at=created_at,
                updated_at=now,
            )
            self._next_id = max(self._next_id, product_id + 1)
        self._products[stored.id] = stored
        return stored

    def find_by_id(self, product_id: int) -> Optional[Product]:
        return self._products.get(product_id)

    def find_all(self) -> List[Product]:
        return list(self._products.values())

    def delete_by_id(self, product_id: int) -> None:
        self._products.pop(product_id, None)

    def find_by_category_id(self, category_id: int) -> List[Product]:
        if category_id not in self._categories:
            return []
        return [p for p in self._products.values() if p.in_category(category_id)]

    def find_by_name_containing(self, name: Optional[str]) -> List[Product]:
        if not name:
            return []
        needle = name.lower()
        return [p for p in self._products.values() if needle in (p.name or "").lower()]

    def find_by_description_containing(self, description: Optional[str]) -> List[Product]:
        if not description:
            return []
        needle = description.lower()
        return [
            p
            for p in self._products.values()
            if p.description is not None and needle in p.description.lower()
        ]

    def find_by_name_or_description_containing(self, keyword: Optional[str]) -> List[Product]:
        if not keyword:
            return []
        return [p for p in self._products.values() if p.matches_keyword(keyword)]
