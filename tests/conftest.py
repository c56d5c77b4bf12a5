"""Pytest configuration and fixtures"""
import os

import pytest

# Set test environment variables
os.environ.setdefault("CATALOG_URL", "https://catalog.test")
os.environ.setdefault("CURRENCY", "€")
os.environ.setdefault("DECIMALS", "2")

from storefront.cart.host import Document, Element, Window  # noqa: E402
from storefront.cart.models import LineItem  # noqa: E402
from storefront.cart.storage import DurableStore, MemoryBackend  # noqa: E402


@pytest.fixture
def backend():
    """Empty in-memory key-value backend"""
    return MemoryBackend()


@pytest.fixture
def store(backend):
    return DurableStore(backend)


@pytest.fixture
def page():
    """Document with the cart panel, the header badge and the content region"""
    return Document(Element("content"), Element("cart-root"), Element("cart-count"))


@pytest.fixture
def window(page, backend):
    return Window(page, storage=backend)


@pytest.fixture
def shirt():
    return {"id": 1, "title": "Shirt", "price": 10, "thumbnail": "x.png"}


@pytest.fixture
def sample_items():
    return [
        LineItem(id=1, title="Shirt", price=10.0, thumbnail="x.png", quantity=2),
        LineItem(id=2, title="Hat", price=15.5, thumbnail="", quantity=1),
    ]
