"""Entry points page markup is allowed to call (``window.cart.*``)."""
from __future__ import annotations

import logging
from typing import Any, List, Optional

from storefront.cart import operations
from storefront.cart.host import Window
from storefront.cart.models import LineItem
from storefront.cart.state import Signal
from storefront.cart.storage import DurableStore
from storefront.cart.sync import Scheduler, SyncController, next_tick
from storefront.config import Settings, settings as default_settings
from storefront.constants import AFTER_SWAP_EVENT, CHECKOUT_MESSAGE

logger = logging.getLogger(__name__)


class CartCommands:
    def __init__(
        self,
        window: Window,
        state: Signal[List[LineItem]],
        store: DurableStore,
        refresh_on_readd: bool = False,
        sync: Optional[SyncController] = None,
    ) -> None:
        self.window = window
        self.state = state
        self.store = store
        self.sync = sync
        self.refresh_on_readd = refresh_on_readd

    @property
    def items(self) -> List[LineItem]:
        return list(self.state.get())

    def add(self, product: Any) -> None:
        self.state.update(lambda items: operations.add_item(items, product, refresh=self.refresh_on_readd))

    def add_from_element(self, element: Any) -> None:
        dataset = getattr(element, "dataset", None)
        if dataset is None:
            return
        self.state.update(
            lambda items: operations.add_from_element(items, dataset, refresh=self.refresh_on_readd)
        )

    def increment(self, item_id: Any) -> None:
        self.state.update(lambda items: operations.increment_item(items, item_id))

    def decrement(self, item_id: Any) -> None:
        self.state.update(lambda items: operations.decrement_item(items, item_id))

    def remove(self, item_id: Any) -> None:
        self.state.update(lambda items: operations.remove_item(items, item_id))

    def clear(self) -> None:
        self.state.update(operations.clear_cart)
        self.store.clear()

    def checkout(self) -> None:
        self.window.alert(CHECKOUT_MESSAGE)


def install_cart(
    window: Window,
    config: Optional[Settings] = None,
    schedule: Scheduler = next_tick,
) -> CartCommands:
    """Bootstrap the cart on ``window``; a second call returns the installed surface."""
    if window.cart is not None:
        return window.cart

    config = config or default_settings
    store = DurableStore(window.storage)
    state: Signal[List[LineItem]] = Signal(store.read())

    sync = SyncController(state, store, window.document, schedule=schedule)
    sync.start()
    window.add_event_listener(AFTER_SWAP_EVENT, sync.on_after_swap)

    commands = CartCommands(window, state, store, refresh_on_readd=config.refresh_on_readd, sync=sync)
    window.cart = commands

    sync.render()
    logger.debug("cart installed with %d line items", len(state.get()))
    return commands
