from decimal import Decimal

import pytest

from catalog.domain.product import Category, Product, ProductStatus
from catalog.repositories.memory_repo import InMemoryProductRepository
from catalog.services.catalog_service import CatalogBrowsingService

ELECTRONICS = Category(id=1, name="Electronics")
BOOKS = Category(id=2, name="Books")


def _p(name, price, status=ProductStatus.ACTIVE, category=ELECTRONICS, description=None):
    return Product(
        name=name,
        description=description,
        base_price=Decimal(price),
        current_price=Decimal(price),
        categories=[category],
        status=status,
    )


@pytest.fixture
def svc():
    repo = InMemoryProductRepository(
        products=[
            _p("Budget Phone", "279.99", description="Affordable smartphone"),
            _p("Gaming Laptop", "1399.99", description="High-performance gaming laptop"),
            _p("Programming Book", "39.99", category=BOOKS, description="Learn Java programming"),
            _p("Old Phone", "99.99", status=ProductStatus.DISCONTINUED, description="Discontinued model"),
        ],
        categories=[ELECTRONICS, BOOKS],
    )
    return CatalogBrowsingService(repo)


def _names(products):
    return [p.name for p in products]


def test_worked_example():
    a = _p("A", "39.99")
    b = _p("B", "649.99")
    c = _p("C", "199.99", status=ProductStatus.DISCONTINUED)
    svc = CatalogBrowsingService(InMemoryProductRepository(products=[a, b, c]))

    active = svc.get_all_active_products()
    assert _names(active) == ["A", "B"]
    assert _names(svc.sort_products_by_price_asc(active)) == ["A", "B"]
    assert _names(svc.filter_by_price_range(active, Decimal("40"), Decimal("700"))) == ["B"]


def test_active_products_keep_order(svc):
    assert _names(svc.get_all_active_products()) == ["Budget Phone", "Gaming Laptop", "Programming Book"]


def test_products_by_category_are_active_only(svc):
    assert _names(svc.get_products_by_category(1)) == ["Budget Phone", "Gaming Laptop"]
    assert _names(svc.get_products_by_category(2)) == ["Programming Book"]
    assert svc.get_products_by_category(3) == []


def test_search_products(svc):
    assert _names(svc.search_products("phone")) == ["Budget Phone"]
    assert _names(svc.search_products("PROGRAMMING")) == ["Programming Book"]
    assert svc.search_products("tablet") == []
    assert svc.search_products("") == []


def test_single_field_searches(svc):
    assert _names(svc.search_products_by_name("laptop")) == ["Gaming Laptop"]
    assert _names(svc.search_products_by_description("smartphone")) == ["Budget Phone"]
    assert svc.search_products_by_description("discontinued") == []


def test_sorts_are_reverses_and_idempotent(svc):
    products = svc.get_all_active_products()
    asc = svc.sort_products_by_price_asc(products)
    desc = svc.sort_products_by_price_desc(products)
    assert _names(asc) == ["Programming Book", "Budget Phone", "Gaming Laptop"]
    assert desc == list(reversed(asc))
    assert svc.sort_products_by_price_asc(asc) == asc
    assert svc.sort_products_by_price_desc(desc) == desc


def test_sorts_are_stable_on_ties():
    svc = CatalogBrowsingService(InMemoryProductRepository())
    first, second, cheap = _p("first", "10"), _p("second", "10"), _p("cheap", "5")
    assert _names(svc.sort_products_by_price_asc([first, second, cheap])) == ["cheap", "first", "second"]
    assert _names(svc.sort_products_by_price_desc([first, cheap, second])) == ["first", "second", "cheap"]


def test_filter_by_price_range_bounds(svc):
    products = svc.get_all_active_products()
    assert svc.filter_by_price_range(products, None, None) == products
    assert _names(svc.filter_by_price_range(products, None, Decimal("279.99"))) == ["Budget Phone", "Programming Book"]
    assert _names(svc.filter_by_price_range(products, Decimal("279.99"), None)) == ["Budget Phone", "Gaming Laptop"]
    assert svc.filter_by_price_range(products, Decimal("2000"), None) == []


def test_browse_pipeline(svc):
    result = svc.browse(category_id=1, min_price=Decimal("100"), sort_by="price_desc")
    assert _names(result) == ["Gaming Laptop", "Budget Phone"]

    result = svc.browse(keyword="GAMING")
    assert _names(result) == ["Gaming Laptop"]

    result = svc.browse(keyword="phone", category_id=2)
    assert result == []


def test_browse_unknown_sort_keeps_order(svc):
    assert _names(svc.browse(sort_by="name")) == _names(svc.get_all_active_products())
    assert _names(svc.browse(sort_by="price_asc")) == ["Programming Book", "Budget Phone", "Gaming Laptop"]
