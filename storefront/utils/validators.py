from __future__ import annotations

import json
from typing import Any, Mapping, Optional

from storefront.cart.models import Product, ProductInput, Rejected
from storefront.utils.formatters import parse_id, to_number


def _text(v: Any) -> str:
    return "" if v is None else str(v)


def decode_product(payload: Any) -> ProductInput:
    """Decode a product given as a mapping or as its JSON text."""
    if isinstance(payload, (str, bytes)):
        try:
            payload = json.loads(payload)
        except (ValueError, RecursionError):
            return Rejected("malformed product json")
    if not isinstance(payload, Mapping):
        return Rejected("product is not an object")

    pid = parse_id(payload.get("id"))
    if pid is None:
        return Rejected("missing or non-numeric id")

    return Product(
        id=pid,
        title=_text(payload.get("title")),
        price=to_number(payload.get("price")),
        thumbnail=_text(payload.get("thumbnail")),
    )


def product_from_dataset(dataset: Optional[Mapping[str, Any]]) -> ProductInput:
    """Read the ``data-*`` attributes of an add-to-cart element."""
    if dataset is None:
        return Rejected("element has no dataset")
    pid = parse_id(dataset.get("id"))
    if pid is None:
        return Rejected("missing or non-numeric id")
    return Product(
        id=pid,
        title=_text(dataset.get("title")),
        price=to_number(dataset.get("price")),
        thumbnail=_text(dataset.get("thumbnail")),
    )
