from __future__ import annotations

import functools
import logging
import threading
from collections.abc import Callable, Mapping
from time import monotonic
from typing import Any

logger = logging.getLogger(__name__)

ClassPart = str | Mapping[str, Any] | None | bool


def cn(*parts: ClassPart) -> str:
    """Join CSS class names, classnames-style.

    cn("btn", None, {"active": True, "disabled": False}) -> "btn active"
    """
    names: list[str] = []
    for part in parts:
        if not part:
            continue
        if isinstance(part, str):
            names.append(part.strip())
        elif isinstance(part, Mapping):
            names.extend(k for k, on in part.items() if on)
    return " ".join(n for n in names if n).strip()


def debounce(fn: Callable[..., Any], wait_ms: float) -> Callable[..., None]:
    """Run `fn` only once calls have stopped for `wait_ms` milliseconds.

    Each call cancels the pending timer, so the last call's arguments win.
    The call happens on a timer thread.
    """
    lock = threading.Lock()
    timer: threading.Timer | None = None

    @functools.wraps(fn)
    def debounced(*args, **kwargs) -> None:
        nonlocal timer
        with lock:
            if timer is not None and timer.is_alive():
                timer.cancel()
                logger.debug("debounce: superseded pending call to %s", getattr(fn, "__name__", fn))
            timer = threading.Timer(wait_ms / 1000.0, fn, args=args, kwargs=kwargs)
            timer.daemon = True
            timer.start()

    return debounced


def throttle(fn: Callable[..., Any], limit_ms: float) -> Callable[..., None]:
    """Run `fn` at most once per `limit_ms`; calls inside the window are dropped."""
    lock = threading.Lock()
    window_ends: float | None = None

    @functools.wraps(fn)
    def throttled(*args, **kwargs) -> None:
        nonlocal window_ends
        now = monotonic()
        with lock:
            if window_ends is not None and now < window_ends:
                logger.debug("throttle: dropped call to %s", getattr(fn, "__name__", fn))
                return
            window_ends = now + limit_ms / 1000.0
        fn(*args, **kwargs)

    return throttled
