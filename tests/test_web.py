"""Tests for page and fragment endpoints"""
from unittest.mock import AsyncMock, Mock

import pytest
from fastapi.testclient import TestClient

from storefront.services.catalog import Product, ProductPage
from storefront.web.main import app, get_catalog


@pytest.fixture
def catalog():
    """Catalog stub with one product"""
    product = Product(
        id=7,
        title="Tom & Jerry <DVD>",
        description="Classic",
        price=12.5,
        brand="Acme",
        category="video",
        thumbnail="https://cdn.test/7.png",
        images=["https://cdn.test/7a.png"],
    )
    mock = Mock()
    mock.list_products = AsyncMock(return_value=ProductPage(products=[product], total=1, limit=30))
    mock.get_product = AsyncMock(return_value=product)
    return mock


@pytest.fixture
def client(catalog):
    app.dependency_overrides[get_catalog] = lambda: catalog
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health_check(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_products_fragment(client):
    response = client.get("/api/products")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "<html" not in response.text
    assert "Tom &amp; Jerry &lt;DVD&gt;" in response.text
    assert 'data-id="7"' in response.text
    assert 'data-price="12.5"' in response.text
    assert 'hx-get="/api/product/7"' in response.text
    assert "window.cart.addFromElement(this)" in response.text
    assert "€12.50" in response.text


def test_products_fragment_upstream_failure(client, catalog):
    catalog.list_products.return_value = None

    response = client.get("/api/products")

    assert response.status_code == 200
    assert response.text == "<p>Error loading products</p>"


def test_product_fragment(client, catalog):
    response = client.get("/api/product/7")

    assert response.status_code == 200
    catalog.get_product.assert_awaited_once_with(7)
    assert "Classic" in response.text
    assert "https://cdn.test/7a.png" in response.text


def test_product_not_found(client, catalog):
    catalog.get_product.return_value = None

    response = client.get("/api/product/999")

    assert response.text == "<p>Product not found</p>"


def test_product_id_must_be_integer(client):
    assert client.get("/api/product/abc").status_code == 422


def test_cart_fragment(client):
    response = client.get("/api/cart")

    assert response.status_code == 200
    assert 'id="cart-root"' in response.text
    assert "window.cart.checkout()" in response.text
    assert "window.cart.clear()" in response.text


def test_index_page_embeds_product_list(client):
    response = client.get("/")

    assert response.status_code == 200
    assert "<!DOCTYPE html>" in response.text
    assert 'id="content"' in response.text
    assert 'id="cart-count"' in response.text
    assert 'data-id="7"' in response.text


def test_cart_page(client):
    response = client.get("/cart")

    assert 'id="cart-root"' in response.text
    assert 'id="cart-count"' in response.text


def test_product_page_not_found(client, catalog):
    catalog.get_product.return_value = None

    response = client.get("/product/5")

    assert "<p>Product not found</p>" in response.text


def test_layout_references_no_missing_cart_script(client):
    response = client.get("/cart")

    assert "/static/cart.js" not in response.text
