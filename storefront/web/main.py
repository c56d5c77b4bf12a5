from __future__ import annotations

from pathlib import Path
from typing import Any

from fastapi import Depends, FastAPI, Request
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from storefront.constants import (
    CART_COUNT_ID,
    CART_ROOT_ID,
    CONTENT_ID,
    PRODUCT_NOT_FOUND_HTML,
    PRODUCTS_ERROR_HTML,
)
from storefront.services.catalog import CatalogClient
from storefront.utils.formatters import money


BASE_DIR = Path(__file__).resolve().parents[1]
TEMPLATES_DIR = BASE_DIR / "templates"
STATIC_DIR = BASE_DIR / "static"

app = FastAPI(title="HTMX Storefront")

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.filters["money"] = money

if STATIC_DIR.exists():
    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")


def get_catalog() -> CatalogClient:
    return CatalogClient()


def _fragment(name: str, ctx: dict[str, Any]) -> str:
    return templates.get_template(name).render(**ctx)


def _page(request: Request, title: str, content: str) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "layout.html",
        {
            "title": title,
            "content": content,
            "cart_root_id": CART_ROOT_ID,
            "cart_count_id": CART_COUNT_ID,
            "content_id": CONTENT_ID,
        },
    )


async def _products_html(catalog: CatalogClient) -> str:
    page = await catalog.list_products()
    if page is None:
        return PRODUCTS_ERROR_HTML
    return _fragment("catalog/_list.html", {"products": page.products, "content_id": CONTENT_ID})


async def _product_html(catalog: CatalogClient, product_id: int) -> str:
    product = await catalog.get_product(product_id)
    if product is None:
        return PRODUCT_NOT_FOUND_HTML
    return _fragment("catalog/_detail.html", {"product": product, "content_id": CONTENT_ID})


def _cart_html() -> str:
    return _fragment("cart/_shell.html", {"cart_root_id": CART_ROOT_ID})


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


# ---------------- fragments (hx-get) ----------------

@app.get("/api/products", response_class=HTMLResponse)
async def products_fragment(catalog: CatalogClient = Depends(get_catalog)):
    return HTMLResponse(await _products_html(catalog))


@app.get("/api/product/{product_id}", response_class=HTMLResponse)
async def product_fragment(product_id: int, catalog: CatalogClient = Depends(get_catalog)):
    return HTMLResponse(await _product_html(catalog, product_id))


@app.get("/api/cart", response_class=HTMLResponse)
def cart_fragment():
    return HTMLResponse(_cart_html())


# ---------------- full pages ----------------

@app.get("/", response_class=HTMLResponse)
async def index(request: Request, catalog: CatalogClient = Depends(get_catalog)):
    return _page(request, "Products", await _products_html(catalog))


@app.get("/product/{product_id}", response_class=HTMLResponse)
async def product_page(request: Request, product_id: int, catalog: CatalogClient = Depends(get_catalog)):
    return _page(request, "Product", await _product_html(catalog, product_id))


@app.get("/cart", response_class=HTMLResponse)
def cart_page(request: Request):
    return _page(request, "Cart", _cart_html())
