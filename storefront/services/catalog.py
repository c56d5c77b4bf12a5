"""Client for the upstream product catalog (DummyJSON products API)."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional

import httpx

from storefront.config import settings
from storefront.utils.formatters import to_number

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Product:
    id: int
    title: str = ""
    description: str = ""
    price: float = 0.0
    discount_percentage: float = 0.0
    rating: float = 0.0
    stock: int = 0
    brand: str = ""
    category: str = ""
    thumbnail: str = ""
    images: List[str] = field(default_factory=list)

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> "Product":
        images = data.get("images") or []
        return cls(
            id=int(data["id"]),
            title=str(data.get("title") or ""),
            description=str(data.get("description") or ""),
            price=to_number(data.get("price")),
            discount_percentage=to_number(data.get("discountPercentage")),
            rating=to_number(data.get("rating")),
            stock=int(to_number(data.get("stock"))),
            brand=str(data.get("brand") or ""),
            category=str(data.get("category") or ""),
            thumbnail=str(data.get("thumbnail") or ""),
            images=[str(i) for i in images if i],
        )

    def to_cart_payload(self) -> dict:
        return {"id": self.id, "title": self.title, "price": self.price, "thumbnail": self.thumbnail}


@dataclass(frozen=True)
class ProductPage:
    products: List[Product]
    total: int = 0
    skip: int = 0
    limit: int = 0


class CatalogClient:
    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = (base_url or settings.catalog_url).rstrip("/")
        self.timeout = timeout or settings.catalog_timeout
        self._transport = transport

    async def _get_json(self, path: str) -> Optional[Any]:
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url, timeout=self.timeout, transport=self._transport
            ) as client:
                response = await client.get(path)
                response.raise_for_status()
                return response.json()
        except httpx.HTTPError as e:
            logger.warning("catalog request %s failed: %s", path, e)
        except ValueError as e:
            logger.warning("catalog returned invalid JSON for %s: %s", path, e)
        return None

    async def list_products(self) -> Optional[ProductPage]:
        data = await self._get_json("/products")
        if not isinstance(data, dict) or not isinstance(data.get("products"), list):
            return None
        try:
            products = [Product.from_api(p) for p in data["products"]]
        except (KeyError, TypeError, ValueError) as e:
            logger.warning("unexpected product list shape: %s", e)
            return None
        return ProductPage(
            products=products,
            total=int(to_number(data.get("total"))),
            skip=int(to_number(data.get("skip"))),
            limit=int(to_number(data.get("limit"))),
        )

    async def get_product(self, product_id: int) -> Optional[Product]:
        data = await self._get_json(f"/products/{product_id}")
        if not isinstance(data, dict):
            return None
        try:
            return Product.from_api(data)
        except (KeyError, TypeError, ValueError) as e:
            logger.warning("unexpected product shape for %s: %s", product_id, e)
            return None
