"""Domain-level exceptions.

Services raise these; the API layer translates them into HTTP responses.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ProductNotFoundError(DomainException):
    """No product exists with the requested id."""

    def __init__(self, product_id: int):
        self.product_id = product_id
        super().__init__(f"Product not found with id: {product_id}")


class UnknownCategoryError(DomainException):
    """A product references category ids that are not stored."""

    def __init__(self, category_ids):
        self.category_ids = list(category_ids)
        super().__init__(f"Unknown category ids: {self.category_ids}")
