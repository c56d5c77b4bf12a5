"""Tests for the observable cart state"""
from storefront.cart.state import Signal


class TestSignal:
    def test_get_returns_initial_value(self):
        assert Signal([1]).get() == [1]

    def test_set_notifies_in_subscription_order(self):
        s = Signal(0)
        calls = []
        s.subscribe(lambda v: calls.append(("a", v)))
        s.subscribe(lambda v: calls.append(("b", v)))

        s.set(5)

        assert s.get() == 5
        assert calls == [("a", 5), ("b", 5)]

    def test_update_applies_function_to_current_value(self):
        s = Signal(2)
        seen = []
        s.subscribe(seen.append)

        s.update(lambda v: v * 3)

        assert s.get() == 6
        assert seen == [6]

    def test_unsubscribe_stops_delivery(self):
        s = Signal(0)
        seen = []
        unsubscribe = s.subscribe(seen.append)
        s.set(1)
        unsubscribe()
        s.set(2)

        assert seen == [1]

    def test_unsubscribe_twice_is_harmless(self):
        s = Signal(0)
        fn = lambda v: None  # noqa: E731
        first = s.subscribe(fn)
        s.subscribe(fn)

        first()
        first()

        assert len(s) == 1

    def test_subscribe_during_notify_waits_for_next_set(self):
        """Listeners added while notifying are not called for the current value"""
        s = Signal(0)
        late = []

        def add_late(v):
            if v == 1:
                s.subscribe(late.append)

        s.subscribe(add_late)
        s.set(1)
        assert late == []

        s.set(2)
        assert late == [2]

    def test_unsubscribe_during_notify_does_not_skip_others(self):
        s = Signal(0)
        seen = []
        handles = {}

        def first(v):
            seen.append(("first", v))
            handles["second"]()

        s.subscribe(first)
        handles["second"] = s.subscribe(lambda v: seen.append(("second", v)))
        s.subscribe(lambda v: seen.append(("third", v)))

        s.set(1)
        assert seen == [("first", 1), ("second", 1), ("third", 1)]

        seen.clear()
        s.set(2)
        assert seen == [("first", 2), ("third", 2)]
