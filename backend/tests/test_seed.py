import json
from decimal import Decimal

import pytest

from catalog.domain.product import ProductStatus
from catalog.repositories.memory_repo import InMemoryProductRepository
from catalog.repositories.product_repo import SqlProductRepository
from catalog.seed import normalize_entry, seed_from_file
from catalog.db import seed_demo_catalog


def test_normalize_entry_accepts_alternate_field_names():
    p = normalize_entry(
        {
            "title": "Tea 100g",
            "price": "3.00",
            "sale_price": 2.5,
            "stock": "5",
            "images": ["tea.png", "tea2.png"],
            "category_id": 3,
            "status": "out_of_stock",
        }
    )
    assert p.name == "Tea 100g"
    assert p.base_price == Decimal("3.00")
    assert p.current_price == Decimal("2.5")
    assert p.stock_quantity == 5
    assert p.image_url == "tea.png"
    assert [c.id for c in p.categories] == [3]
    assert p.status == ProductStatus.OUT_OF_STOCK


def test_normalize_entry_defaults():
    p = normalize_entry({"name": "Coffee", "price": "oops", "stock": -4, "status": "weird"})
    assert p.base_price == Decimal("0")
    assert p.current_price == Decimal("0")
    assert p.stock_quantity == 0
    assert p.status == ProductStatus.ACTIVE
    assert p.categories == []


def test_seed_from_file(tmp_path):
    path = tmp_path / "catalogue.json"
    path.write_text(
        json.dumps({"items": [{"name": "Tea", "price": 3}, {"name": "Coffee", "price": 6}, {"price": 1}]}),
        encoding="utf-8",
    )
    repo = InMemoryProductRepository()

    assert seed_from_file(str(path), repo) == 2
    assert [p.name for p in repo.find_all()] == ["Tea", "Coffee"]
    assert repo.find_all()[0].current_price == Decimal("3")


def test_seed_from_missing_file():
    with pytest.raises(FileNotFoundError):
        seed_from_file("/nonexistent/catalogue.json", InMemoryProductRepository())


def test_seed_demo_catalog_only_fills_empty_db(sql_session):
    assert seed_demo_catalog(sql_session) == 10
    assert seed_demo_catalog(sql_session) == 0
    repo = SqlProductRepository(sql_session)
    assert len(repo.find_all()) == 10
    assert [p.name for p in repo.find_by_category_id(4)] == ["Decorative Vase", "Wall Art"]


def test_seed_skips_entries_with_unknown_categories(tmp_path, sql_session):
    path = tmp_path / "catalogue.json"
    path.write_text(
        json.dumps([{"name": "Tea", "price": 3, "category_id": 99}, {"name": "Coffee", "price": 6}]),
        encoding="utf-8",
    )
    repo = SqlProductRepository(sql_session)

    assert seed_from_file(str(path), repo) == 1
    assert [p.name for p in repo.find_all()] == ["Coffee"]
