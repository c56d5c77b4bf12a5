from __future__ import annotations

from pathlib import Path
from typing import Any, Sequence

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from storefront.cart.models import LineItem
from storefront.constants import EMPTY_CART_MESSAGE
from storefront.utils.formatters import money, to_number

TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"

_HTML_ESCAPES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#39;",
}
_ESCAPE_TABLE = str.maketrans(_HTML_ESCAPES)


def escape_html(text: Any) -> str:
    if not text:
        return ""
    return str(text).translate(_ESCAPE_TABLE)


# markup is assembled from pre-escaped pieces, so no autoescape here
_env = Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR)),
    autoescape=False,
    undefined=StrictUndefined,
    trim_blocks=True,
    lstrip_blocks=True,
)
_env.filters["escape_html"] = escape_html
_env.filters["money"] = money


def calculate_total(items: Sequence[LineItem]) -> float:
    return sum((to_number(i.price) * to_number(i.quantity) for i in items), 0.0)


def total_quantity(items: Sequence[LineItem]) -> int:
    return int(sum((to_number(i.quantity) for i in items), 0.0))


def render_cart_item(item: LineItem) -> str:
    return _env.get_template("cart/_item.html").render(item=item)


def render_cart(items: Sequence[LineItem]) -> str:
    if not items:
        return f"<p>{EMPTY_CART_MESSAGE}</p>"
    return _env.get_template("cart/_panel.html").render(
        items_html="".join(render_cart_item(i) for i in items),
        total=calculate_total(items),
    )


def render_count(items: Sequence[LineItem]) -> str:
    return str(total_quantity(items))
