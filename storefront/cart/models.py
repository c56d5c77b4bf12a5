from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from typing import Any, Dict, Optional, Union

from storefront.utils.formatters import parse_id, to_number


@dataclass(frozen=True)
class Product:
    """A product as captured at add-to-cart time."""
    id: int
    title: str
    price: float
    thumbnail: str = ""


@dataclass(frozen=True)
class Rejected:
    reason: str


ProductInput = Union[Product, Rejected]


@dataclass(frozen=True)
class LineItem:
    id: int
    title: str
    price: float
    thumbnail: str
    quantity: int

    @property
    def line_total(self) -> float:
        return to_number(self.price) * to_number(self.quantity)

    def with_quantity(self, quantity: int) -> "LineItem":
        return replace(self, quantity=quantity)

    @classmethod
    def from_product(cls, product: Product, quantity: int = 1) -> "LineItem":
        return cls(
            id=product.id,
            title=product.title,
            price=product.price,
            thumbnail=product.thumbnail,
            quantity=quantity,
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Any) -> Optional["LineItem"]:
        """Build from a persisted record; ``None`` if the record is unusable."""
        if not isinstance(data, dict):
            return None
        pid = parse_id(data.get("id"))
        if pid is None:
            return None
        quantity = int(to_number(data.get("quantity")))
        if quantity < 1:
            return None
        title = data.get("title")
        thumbnail = data.get("thumbnail")
        return cls(
            id=pid,
            title="" if title is None else str(title),
            price=to_number(data.get("price")),
            thumbnail="" if thumbnail is None else str(thumbnail),
            quantity=quantity,
        )
