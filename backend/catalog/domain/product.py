"""Catalog aggregate: products and the categories they are filed under.

These are plain records. Persistence adapters translate them to and from
their own storage shape; nothing here knows about SQLAlchemy or HTTP.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import List, Optional


class ProductStatus(str, Enum):
    ACTIVE = "ACTIVE"
    DISCONTINUED = "DISCONTINUED"
    OUT_OF_STOCK = "OUT_OF_STOCK"


@dataclass(eq=False)
class Category:
    id: Optional[int] = None
    name: str = ""
    description: Optional[str] = None
    # parent chains may loop, so repr and equality only look at parent_id
    parent: Optional["Category"] = field(default=None, repr=False)
    # back-references; adapters do not populate these
    products: List["Product"] = field(default_factory=list, repr=False)

    @property
    def parent_id(self) -> Optional[int]:
        return self.parent.id if self.parent is not None else None

    @property
    def is_reference(self) -> bool:
        """True for a bare id pointer that carries no category data."""
        return self.id is not None and not self.name

    def __eq__(self, other):
        if not isinstance(other, Category):
            return NotImplemented
        return (self.id, self.name, self.description, self.parent_id) == (
            other.id,
            other.name,
            other.description,
            other.parent_id,
        )

    __hash__ = None


@dataclass
class Product:
    """A sellable item.

    ``current_price`` may sit below ``base_price`` to represent a discount.
    Both are independently non-negative; no ordering between them is
    enforced.
    """

    id: Optional[int] = None
    name: str = ""
    description: Optional[str] = None
    base_price: Decimal = Decimal("0")
    current_price: Decimal = Decimal("0")
    categories: List[Category] = field(default_factory=list)
    image_url: Optional[str] = None
    stock_quantity: int = 0
    status: ProductStatus = ProductStatus.ACTIVE
    weight: Optional[Decimal] = None
    dimensions: Optional[Decimal] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def is_active(self) -> bool:
        return self.status == ProductStatus.ACTIVE

    def in_category(self, category_id: int) -> bool:
        return any(c.id == category_id for c in self.categories or [])

    def matches_keyword(self, keyword: str) -> bool:
        """Case-insensitive substring match on name or description."""
        kw = keyword.lower()
        if kw in (self.name or "").lower():
            return True
        return self.description is not None and kw in self.description.lower()


def apply_update(existing: Product, incoming: Product, now: datetime) -> Product:
    """
    Full replace of ``existing`` by ``incoming``. Identity and creation time
    come from ``existing``; every other field comes from ``incoming``.
    Neither argument is modified.
    """
    return replace(
        incoming,
        id=existing.id,
        created_at=existing.created_at,
        updated_at=now,
        categories=list(incoming.categories or []),
    )
