import dataclasses

import pytest

from services.product_service.service import ProductService


def test_catalog_is_fixed_five_products_in_order():
    products = ProductService.list_products()
    assert [p.id for p in products] == [1, 2, 3, 4, 5]
    assert [p.name for p in products] == ["Laptop", "Mouse", "Keyboard", "Monitor", "Desk Chair"]
    assert products[-1].category == "Furniture"


def test_catalog_ids_unique_and_prices_non_negative():
    products = ProductService.list_products()
    assert len({p.id for p in products}) == len(products)
    assert all(p.price >= 0 for p in products)


def test_catalog_is_deterministic():
    assert ProductService.list_products() == ProductService.list_products()


def test_products_are_immutable():
    product = ProductService.list_products()[0]
    with pytest.raises(dataclasses.FrozenInstanceError):
        product.price = 1


def test_get_product_by_id():
    assert ProductService.get_product_by_id(4).name == "Monitor"
    assert ProductService.get_product_by_id(99) is None


def test_list_products_endpoint(client):
    resp = client.get("/products/")
    assert resp.status_code == 200
    body = resp.json()
    assert len(body) == 5
    assert body[0] == {"id": 1, "name": "Laptop", "price": 999, "category": "Electronics"}


def test_get_product_endpoint(client):
    assert client.get("/products/5").json()["name"] == "Desk Chair"

    resp = client.get("/products/99")
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Product not found"


def test_product_health(client):
    assert client.get("/products/health").json() == {"service": "product", "status": "running"}
