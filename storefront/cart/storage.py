"""Persistence mirror of the cart, kept under a single key."""
from __future__ import annotations

import json
import logging
from typing import Dict, List, Optional, Protocol, Sequence

from storefront.cart.models import LineItem
from storefront.constants import STORAGE_KEY

logger = logging.getLogger(__name__)


class KeyValueBackend(Protocol):
    def get_item(self, key: str) -> Optional[str]: ...

    def set_item(self, key: str, value: str) -> None: ...

    def remove_item(self, key: str) -> None: ...


class QuotaExceededError(Exception):
    pass


class MemoryBackend:
    """Process-local string store, optionally capped at ``quota`` characters."""

    def __init__(self, quota: Optional[int] = None) -> None:
        self.quota = quota
        self._data: Dict[str, str] = {}

    def get_item(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set_item(self, key: str, value: str) -> None:
        if self.quota is not None:
            used = sum(len(v) for k, v in self._data.items() if k != key)
            if used + len(value) > self.quota:
                raise QuotaExceededError(f"quota of {self.quota} exceeded")
        self._data[key] = str(value)

    def remove_item(self, key: str) -> None:
        self._data.pop(key, None)


class DurableStore:
    def __init__(self, backend: KeyValueBackend, key: str = STORAGE_KEY) -> None:
        self.backend = backend
        self.key = key

    def read(self) -> List[LineItem]:
        try:
            raw = self.backend.get_item(self.key)
            if not raw:
                return []
            data = json.loads(raw)
        except Exception:
            logger.debug("cart storage unreadable, starting empty", exc_info=True)
            return []
        if not isinstance(data, list):
            return []

        items: List[LineItem] = []
        seen = set()
        for record in data:
            try:
                item = LineItem.from_dict(record)
            except Exception:
                logger.debug("skipping unreadable cart record", exc_info=True)
                continue
            if item is None or item.id in seen:
                continue
            seen.add(item.id)
            items.append(item)
        return items

    def write(self, items: Sequence[LineItem]) -> None:
        try:
            self.backend.set_item(self.key, json.dumps([i.to_dict() for i in items]))
        except Exception:
            logger.exception("Storage write failed")

    def clear(self) -> None:
        try:
            self.backend.remove_item(self.key)
        except Exception:
            logger.exception("Storage clear failed")
