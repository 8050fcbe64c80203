"""Demo catalog used by the in-memory repository and by ``init_db(seed=True)``."""

from decimal import Decimal
from typing import List, Tuple

from catalog.domain.product import Category, Product, ProductStatus

CATEGORIES = [
    # (id, name, description)
    (1, "Electronics", "Electronic devices and gadgets"),
    (2, "Clothing", "Apparel and fashion items"),
    (3, "Books", "Books and publications"),
    (4, "Home Decor", "Items for home decoration"),
]

PRODUCTS = [
    # (name, description, base_price, current_price, category_id, stock, status)
    ("Smartphone X", "Latest smartphone with advanced features", "699.99", "649.99", 1, 50, ProductStatus.ACTIVE),
    ("Laptop Pro", "High-performance laptop for professionals", "1299.99", "1199.99", 1, 25, ProductStatus.ACTIVE),
    ("Wireless Headphones", "Noise-cancelling wireless headphones", "199.99", "179.99", 1, 100, ProductStatus.ACTIVE),
    ("Classic T-Shirt", "Comfortable cotton t-shirt", "29.99", "24.99", 2, 200, ProductStatus.ACTIVE),
    ("Designer Jeans", "Premium denim jeans", "89.99", "79.99", 2, 75, ProductStatus.ACTIVE),
    ("Programming Guide", "Comprehensive programming reference", "49.99", "39.99", 3, 30, ProductStatus.ACTIVE),
    ("Novel Collection", "Bestselling novels collection", "59.99", "49.99", 3, 20, ProductStatus.ACTIVE),
    ("Decorative Vase", "Elegant ceramic vase", "39.99", "34.99", 4, 40, ProductStatus.ACTIVE),
    ("Wall Art", "Modern wall painting", "149.99", "129.99", 4, 15, ProductStatus.ACTIVE),
    ("Smart Watch", "Fitness tracking smartwatch", "249.99", "229.99", 1, 0, ProductStatus.OUT_OF_STOCK),
]


def demo_catalog() -> Tuple[List[Category], List[Product]]:
    """
    Build fresh Category and Product objects for the demo catalog. Products
    have no id yet; the repository that stores them assigns one.
    """
    categories = {cid: Category(id=cid, name=name, description=desc) for cid, name, desc in CATEGORIES}
    products = [
        Product(
            name=name,
            description=desc,
            base_price=Decimal(base),
            current_price=Decimal(current),
            categories=[categories[cid]],
            stock_quantity=stock,
            status=status,
        )
        for name, desc, base, current, cid, stock, status in PRODUCTS
    ]
    return list(categories.values()), products
