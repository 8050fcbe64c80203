"""Abstract repository for the Product aggregate.

The services depend only on this interface. Concrete implementations
(SQLAlchemy, in-memory) live next to it and are picked at startup from
``settings.REPOSITORY_BACKEND``.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from catalog.domain.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def save(self, product: Product) -> Product:
        """
        Persist ``product`` and return the stored version.

        Without an id a new one is assigned and both timestamps are set.
        With an id the stored row is fully replaced, keeping its id and
        ``created_at`` and refreshing ``updated_at``.
        """

    @abstractmethod
    def find_by_id(self, product_id: int) -> Optional[Product]:
        """Return the product, or None if not found."""

    @abstractmethod
    def find_all(self) -> List[Product]:
        """Return every product in storage order."""

    @abstractmethod
    def delete_by_id(self, product_id: int) -> None:
        """Remove the product. Missing ids are ignored."""

    @abstractmethod
    def find_by_category_id(self, category_id: int) -> List[Product]:
        """Return products filed under the given category."""

    @abstractmethod
    def find_by_name_containing(self, name: Optional[str]) -> List[Product]:
        """Case-insensitive substring search on name; empty keyword -> []."""

    @abstractmethod
    def find_by_description_containing(self, description: Optional[str]) -> List[Product]:
        """Case-insensitive substring search on description; empty keyword -> []."""

    @abstractmethod
    def find_by_name_or_description_containing(self, keyword: Optional[str]) -> List[Product]:
        """Case-insensitive substring search on name or description; empty keyword -> []."""
