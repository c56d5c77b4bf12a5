"""Observable value holding the current cart.

Subscribers are called synchronously, in subscription order, every time the
value is replaced. Delivery iterates over a snapshot of the subscriber list
taken when ``set`` is called: a listener added during a notification first
runs on the next ``set``, and a listener removed during a notification still
receives the value currently being delivered.
"""
from __future__ import annotations

from typing import Callable, Generic, List, Tuple, TypeVar

T = TypeVar("T")

Listener = Callable[[T], None]
Unsubscribe = Callable[[], None]


class Signal(Generic[T]):
    def __init__(self, initial: T) -> None:
        self._value = initial
        self._subscribers: List[Tuple[object, Listener]] = []

    def get(self) -> T:
        return self._value

    def set(self, value: T) -> None:
        self._value = value
        for _, fn in list(self._subscribers):
            fn(value)

    def update(self, fn: Callable[[T], T]) -> None:
        self.set(fn(self._value))

    def subscribe(self, fn: Listener) -> Unsubscribe:
        token = object()
        self._subscribers.append((token, fn))

        def unsubscribe() -> None:
            self._subscribers = [s for s in self._subscribers if s[0] is not token]

        return unsubscribe

    def __len__(self) -> int:
        return len(self._subscribers)
