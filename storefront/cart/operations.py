"""Cart transformations.

Each function takes the current line items and returns a new list; the input
is never modified. Storage and rendering are handled by the caller.
"""
from __future__ import annotations

from typing import Any, List, Sequence

from storefront.cart.models import LineItem, Product, Rejected
from storefront.utils.formatters import parse_id
from storefront.utils.validators import decode_product, product_from_dataset


def _as_product(product: Any):
    if isinstance(product, (Product, Rejected)):
        return product
    return decode_product(product)


def add_item(items: Sequence[LineItem], product: Any, refresh: bool = False) -> List[LineItem]:
    """Add one unit of ``product``.

    ``product`` may be a :class:`Product`, a mapping, or JSON text. An existing
    line keeps the title, price and thumbnail it was added with unless
    ``refresh`` is set.
    """
    parsed = _as_product(product)
    if isinstance(parsed, Rejected):
        return list(items)

    out = list(items)
    for idx, item in enumerate(out):
        if item.id == parsed.id:
            if refresh:
                out[idx] = LineItem.from_product(parsed, quantity=item.quantity + 1)
            else:
                out[idx] = item.with_quantity(item.quantity + 1)
            return out

    out.append(LineItem.from_product(parsed))
    return out


def add_from_element(items: Sequence[LineItem], dataset: Any, refresh: bool = False) -> List[LineItem]:
    return add_item(items, product_from_dataset(dataset), refresh=refresh)


def increment_item(items: Sequence[LineItem], item_id: Any) -> List[LineItem]:
    pid = parse_id(item_id)
    return [i.with_quantity(i.quantity + 1) if i.id == pid else i for i in items]


def decrement_item(items: Sequence[LineItem], item_id: Any) -> List[LineItem]:
    pid = parse_id(item_id)
    out: List[LineItem] = []
    for i in items:
        if i.id == pid:
            if i.quantity - 1 <= 0:
                continue
            i = i.with_quantity(i.quantity - 1)
        out.append(i)
    return out


def remove_item(items: Sequence[LineItem], item_id: Any) -> List[LineItem]:
    pid = parse_id(item_id)
    return [i for i in items if i.id != pid]


def clear_cart(items: Sequence[LineItem]) -> List[LineItem]:
    return []
