"""Page host the cart runs against.

Mirrors the three things the cart needs from a browser page: a key-value
store, elements found by id whose content can be replaced, and an event hook
fired after part of the page was swapped.
"""
from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from storefront.cart.storage import KeyValueBackend, MemoryBackend

logger = logging.getLogger(__name__)


@dataclass
class Element:
    id: str
    inner_html: str = ""
    text_content: str = ""
    dataset: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class SwapDetail:
    target: Optional[Element] = None


@dataclass(frozen=True)
class SwapEvent:
    detail: Optional[SwapDetail] = None


class Document:
    def __init__(self, *elements: Element) -> None:
        self._elements: Dict[str, Element] = {}
        for el in elements:
            self.append(el)

    def get_element_by_id(self, element_id: str) -> Optional[Element]:
        return self._elements.get(element_id)

    def append(self, element: Element) -> Element:
        self._elements[element.id] = element
        return element

    def remove(self, element_id: str) -> None:
        self._elements.pop(element_id, None)


class Window:
    def __init__(
        self,
        document: Optional[Document] = None,
        storage: Optional[KeyValueBackend] = None,
        alert: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.document = document if document is not None else Document()
        self.storage = storage if storage is not None else MemoryBackend()
        self.cart: Any = None
        self.alerts: List[str] = []
        self._alert = alert
        self._listeners: Dict[str, List[Callable[[Any], None]]] = defaultdict(list)

    def add_event_listener(self, name: str, fn: Callable[[Any], None]) -> None:
        self._listeners[name].append(fn)

    def dispatch_event(self, name: str, event: Any = None) -> None:
        for fn in list(self._listeners.get(name, ())):
            fn(event)

    def alert(self, message: str) -> None:
        self.alerts.append(message)
        if self._alert is not None:
            self._alert(message)
        else:
            logger.info("alert: %s", message)
