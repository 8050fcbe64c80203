"""Translation between domain records and SQLAlchemy rows."""

from datetime import datetime, timezone
from typing import List, Optional

from catalog.domain.product import Category, Product
from catalog.models.category import CategoryModel
from catalog.models.product import ProductModel


def _utc(value: Optional[datetime]) -> Optional[datetime]:
    # SQLite hands back naive datetimes; they were written as UTC
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def category_to_domain(row: Optional[CategoryModel], _seen=None) -> Optional[Category]:
    if row is None:
        return None
    # parent links are not guaranteed acyclic; stop at the first repeat
    seen = _seen if _seen is not None else set()
    if row.id in seen:
        return None
    seen.add(row.id)
    return Category(
        id=row.id,
        name=row.name,
        description=row.description,
        parent=category_to_domain(row.parent, seen),
    )


def product_to_domain(row: Optional[ProductModel]) -> Optional[Product]:
    if row is None:
        return None
    return Product(
        id=row.id,
        name=row.name,
        description=row.description,
        base_price=row.base_price,
        current_price=row.current_price,
        categories=[category_to_domain(c) for c in row.categories],
        image_url=row.image_url,
        stock_quantity=row.stock_quantity,
        status=row.status,
        weight=row.weight,
        dimensions=row.dimensions,
        created_at=_utc(row.created_at),
        updated_at=_utc(row.updated_at),
    )


def products_to_domain(rows) -> List[Product]:
    return [product_to_domain(r) for r in rows]


def copy_to_row(product: Product, row: ProductModel, categories: List[CategoryModel]) -> ProductModel:
    """Overwrite the mutable columns of ``row``. Id and timestamps are left to the caller."""
    row.name = product.name
    row.description = product.description
    row.base_price = product.base_price
    row.current_price = product.current_price
    row.stock_quantity = product.stock_quantity
    row.status = product.status
    row.image_url = product.image_url
    row.weight = product.weight
    row.dimensions = product.dimensions
    row.categories = categories
    return row
