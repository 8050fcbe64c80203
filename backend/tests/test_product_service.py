from decimal import Decimal

import pytest

from catalog.domain.exceptions import ProductNotFoundError
from catalog.domain.product import Category, Product, ProductStatus
from catalog.repositories.memory_repo import InMemoryProductRepository
from catalog.services.product_service import ProductManagementService

ELECTRONICS = Category(id=1, name="Electronics")


def _p(name, price="10.00", **kw):
    return Product(name=name, base_price=Decimal(price), current_price=Decimal(price), categories=[ELECTRONICS], **kw)


@pytest.fixture
def repo():
    return InMemoryProductRepository(categories=[ELECTRONICS])


@pytest.fixture
def svc(repo):
    return ProductManagementService(repo)


def test_create_product_assigns_id(svc, repo):
    created = svc.create_product(_p("Smartphone", "649.99"))
    assert created.id == 1
    assert repo.find_by_id(1).name == "Smartphone"


def test_update_product_full_replace(svc):
    created = svc.create_product(_p("Smartphone", "649.99", description="old", stock_quantity=3))
    replacement = _p("Smartphone 2", "599.99", status=ProductStatus.DISCONTINUED)

    updated = svc.update_product(created.id, replacement)

    assert updated.id == created.id
    assert updated.created_at == created.created_at
    assert updated.name == "Smartphone 2"
    assert updated.description is None
    assert updated.stock_quantity == 0
    assert updated.status == ProductStatus.DISCONTINUED


def test_update_unknown_product_raises_and_changes_nothing(svc, repo):
    svc.create_product(_p("Smartphone"))
    before = [(p.id, p.name, p.updated_at) for p in repo.find_all()]

    with pytest.raises(ProductNotFoundError) as exc:
        svc.update_product(99, _p("Ghost"))

    assert exc.value.product_id == 99
    assert "99" in str(exc.value)
    assert [(p.id, p.name, p.updated_at) for p in repo.find_all()] == before
    assert repo.find_by_id(99) is None


def test_update_stock_only_touches_stock(svc):
    created = svc.create_product(_p("Laptop", "1199.99", stock_quantity=25))
    updated = svc.update_stock(created.id, 7)
    assert updated.stock_quantity == 7
    assert updated.name == "Laptop"
    assert updated.current_price == Decimal("1199.99")


def test_update_stock_unknown_product(svc):
    with pytest.raises(ProductNotFoundError):
        svc.update_stock(5, 1)


def test_delete_and_passthroughs(svc):
    a = svc.create_product(_p("Phone"))
    b = svc.create_product(_p("Old Phone", status=ProductStatus.DISCONTINUED))

    # admin views include every status
    assert [p.name for p in svc.get_all_products()] == ["Phone", "Old Phone"]
    assert [p.name for p in svc.get_products_by_category(1)] == ["Phone", "Old Phone"]
    assert [p.name for p in svc.search_products("old")] == ["Old Phone"]
    assert svc.get_product_by_id(b.id).name == "Old Phone"

    svc.delete_product(a.id)
    svc.delete_product(a.id)
    assert svc.get_product_by_id(a.id) is None
    assert [p.name for p in svc.get_all_products()] == ["Old Phone"]
