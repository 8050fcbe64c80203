"""
Seed products from a JSON file into the configured database.

The file may be a list of product entries or an object with an ``items``
list. A few field spellings are accepted so exports from other tools load
without editing.

Usage:
    python -m catalog.seed --file catalogue.json
    python -m catalog.seed --demo
"""
import argparse
import json
import os
import sys
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List, Optional

from catalog.db import SessionLocal, init_db, seed_demo_catalog
from catalog.domain.exceptions import UnknownCategoryError
from catalog.domain.product import Category, Product, ProductStatus
from catalog.repositories.base import ProductRepository
from catalog.repositories.product_repo import SqlProductRepository
from catalog.utils.logs import configure_logging, get_logger

log = get_logger("seed")


def _decimal(raw: Any, default: Optional[Decimal] = None) -> Optional[Decimal]:
    if raw is None or raw == "":
        return default
    try:
        return Decimal(str(raw))
    except InvalidOperation:
        return default


def _status(raw: Any) -> ProductStatus:
    try:
        return ProductStatus(str(raw).upper())
    except ValueError:
        return ProductStatus.ACTIVE


def normalize_entry(entry: Dict[str, Any]) -> Product:
    """Build a Product from one loosely-shaped JSON entry."""
    name = entry.get("name") or entry.get("title") or ""
    base_price = _decimal(entry.get("base_price", entry.get("price")), Decimal("0"))
    # no explicit sale price means the product sells at its base price
    current_price = _decimal(
        entry.get("current_price", entry.get("sale_price")), base_price
    )

    try:
        stock = int(entry.get("stock_quantity", entry.get("stock", 0)) or 0)
    except (TypeError, ValueError):
        stock = 0

    image = entry.get("image_url") or entry.get("image")
    if not image:
        imgs = entry.get("images") or []
        image = imgs[0] if isinstance(imgs, (list, tuple)) and imgs else None

    category_ids = entry.get("category_ids") or []
    if "category_id" in entry and entry["category_id"] is not None:
        category_ids = [entry["category_id"]]

    return Product(
        name=name,
        description=entry.get("description") or None,
        base_price=base_price,
        current_price=current_price,
        categories=[Category(id=int(cid)) for cid in category_ids],
        image_url=image,
        stock_quantity=max(0, stock),
        status=_status(entry.get("status", ProductStatus.ACTIVE.value)),
        weight=_decimal(entry.get("weight")),
        dimensions=_decimal(entry.get("dimensions")),
    )


def load_entries(path: str) -> List[Dict[str, Any]]:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if isinstance(data, dict):
        if isinstance(data.get("items"), list):
            return data["items"]
        return list(data.values())
    if isinstance(data, list):
        return data
    return []


def seed_from_file(path: str, repo: ProductRepository) -> int:
    """Save every named entry in ``path`` through ``repo``. Returns the count saved."""
    if not os.path.exists(path):
        raise FileNotFoundError(path)

    created = 0
    for entry in load_entries(path):
        product = normalize_entry(entry)
        if not product.name:
            log.warning("skipping entry without a name: %r", entry)
            continue
        try:
            repo.save(product)
        except UnknownCategoryError as e:
            log.warning("skipping %r: %s", product.name, e)
            continue
        created += 1
    log.info("Seeded products: %s", created)
    return created


def main(argv=None):
    parser = argparse.ArgumentParser(description="Load products into the catalog database")
    parser.add_argument("--file", "-f", help="Path to a JSON product list")
    parser.add_argument("--demo", action="store_true", help="Load the built-in demo catalog into an empty database")
    parser.add_argument("--reset", action="store_true", help="Drop and recreate tables first")
    args = parser.parse_args(argv)

    configure_logging()
    if not args.file and not args.demo:
        parser.error("one of --file or --demo is required")
    if args.file and not os.path.exists(args.file):
        log.error("File not found: %s", args.file)
        return 1

    init_db(reset=args.reset)
    db = SessionLocal()
    try:
        if args.demo:
            seed_demo_catalog(db)
        if args.file:
            seed_from_file(args.file, SqlProductRepository(db))
    finally:
        db.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
