"""
Tests for storefront.utils.ui: cn(), debounce() and throttle().

debounce runs on real timer threads with short waits; throttle uses a
patched monotonic clock.
"""

import threading
import time

import pytest

from storefront.utils import ui
from storefront.utils.ui import cn, debounce, throttle


# ============================================================================
# TESTS - cn()
# ============================================================================


def test_cn_joins_strings_and_truthy_mapping_keys():
    assert cn("btn", None, False, "", {"active": True, "disabled": False}) == "btn active"


def test_cn_single_spaces_and_trim():
    assert cn("  card  ", {"hidden": False}, "shadow") == "card shadow"


def test_cn_empty():
    assert cn() == ""
    assert cn(None, False, {}) == ""


def test_cn_mapping_truthiness():
    assert cn({"x": 1, "y": 0, "z": "yes"}) == "x z"


# ============================================================================
# TESTS - debounce()
# ============================================================================


class Recorder:
    def __init__(self):
        self.calls = []
        self.fired = threading.Event()

    def __call__(self, *args, **kwargs):
        self.calls.append((args, kwargs))
        self.fired.set()


def test_debounce_only_last_call_fires():
    rec = Recorder()
    search = debounce(rec, 100)

    for i in range(5):
        search(i, query=f"q{i}")

    assert rec.calls == []
    assert rec.fired.wait(2.0)
    time.sleep(0.2)
    assert rec.calls == [((4,), {"query": "q4"})]


def test_debounce_waits_from_last_call():
    rec = Recorder()
    fn = debounce(rec, 150)

    started = time.monotonic()
    fn("a")
    time.sleep(0.1)
    fn("b")
    assert rec.fired.wait(2.0)
    elapsed = time.monotonic() - started

    assert rec.calls == [(("b",), {})]
    assert elapsed >= 0.1 + 0.15 - 0.02


def test_debounce_separate_bursts_fire_separately():
    rec = Recorder()
    fn = debounce(rec, 50)

    fn(1)
    assert rec.fired.wait(2.0)
    rec.fired.clear()
    fn(2)
    assert rec.fired.wait(2.0)

    assert [c[0] for c in rec.calls] == [(1,), (2,)]


def test_debounce_keeps_function_metadata():
    def refresh_cart():
        """Reload cart totals."""

    wrapped = debounce(refresh_cart, 10)
    assert wrapped.__name__ == "refresh_cart"
    assert wrapped.__doc__ == "Reload cart totals."


# ============================================================================
# TESTS - throttle()
# ============================================================================


@pytest.fixture
def clock(monkeypatch):
    now = [1000.0]
    monkeypatch.setattr(ui, "monotonic", lambda: now[0])
    return now


def test_throttle_first_call_immediate_rest_dropped(clock):
    calls = []
    fn = throttle(calls.append, 100)

    fn("first")
    clock[0] += 0.03
    fn("second")
    clock[0] += 0.03
    fn("third")

    assert calls == ["first"]


def test_throttle_allows_call_after_window(clock):
    calls = []
    fn = throttle(calls.append, 100)

    fn("a")
    clock[0] += 0.05
    fn("b")
    clock[0] += 0.06
    fn("c")
    fn("d")

    assert calls == ["a", "c"]


def test_throttle_window_restarts_from_accepted_call(clock):
    calls = []
    fn = throttle(calls.append, 100)

    fn(1)
    clock[0] += 0.1
    fn(2)
    clock[0] += 0.09
    fn(3)
    clock[0] += 0.02
    fn(4)

    assert calls == [1, 2, 4]
