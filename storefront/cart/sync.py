from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, List, Optional

from storefront.cart.host import Document
from storefront.cart.models import LineItem
from storefront.cart.renderer import render_cart, render_count
from storefront.cart.state import Signal, Unsubscribe
from storefront.cart.storage import DurableStore
from storefront.constants import CART_COUNT_ID, CART_ROOT_ID, CONTENT_ID

logger = logging.getLogger(__name__)

Scheduler = Callable[[Callable[[], None]], None]


def next_tick(fn: Callable[[], None]) -> None:
    """Run ``fn`` on the next loop iteration, or right away when no loop is running.

    Calls are neither cancelled nor coalesced.
    """
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        fn()
        return
    loop.call_soon(fn)


class SyncController:
    def __init__(
        self,
        state: Signal[List[LineItem]],
        store: DurableStore,
        document: Document,
        schedule: Scheduler = next_tick,
    ) -> None:
        self.state = state
        self.store = store
        self.document = document
        self.schedule = schedule
        self._unsubscribe: List[Unsubscribe] = []

    def start(self) -> None:
        if self._unsubscribe:
            return
        self._unsubscribe.append(self.state.subscribe(self.store.write))
        self._unsubscribe.append(self.state.subscribe(lambda _items: self.render()))

    def stop(self) -> None:
        for unsubscribe in self._unsubscribe:
            unsubscribe()
        self._unsubscribe = []

    def render(self) -> None:
        items = self.state.get()
        self._update_html(CART_ROOT_ID, render_cart(items))
        self._update_text(CART_COUNT_ID, render_count(items))

    def on_after_swap(self, event: Any = None) -> None:
        detail = getattr(event, "detail", None)
        target = getattr(detail, "target", None)
        target_id: Optional[str] = getattr(target, "id", None)

        if target_id == CONTENT_ID or self.document.get_element_by_id(CART_ROOT_ID) is not None:
            logger.debug("page swap on %r, re-rendering cart", target_id)
            self.schedule(self.render)

    def _update_html(self, element_id: str, html: str) -> None:
        el = self.document.get_element_by_id(element_id)
        if el is not None:
            el.inner_html = html

    def _update_text(self, element_id: str, text: str) -> None:
        el = self.document.get_element_by_id(element_id)
        if el is not None:
            el.text_content = text
