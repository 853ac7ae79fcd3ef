"""Millisecond wall clock and an interruptible sleep."""

from __future__ import annotations

import time
from collections.abc import Callable

_POLL_SECONDS = 50e-6


def now_ms() -> int:
    """Return the wall-clock time in whole milliseconds since the epoch."""
    return time.time_ns() // 1_000_000


def sleep_ms(duration: int, keep_going: Callable[[], bool] | None = None) -> bool:
    """Sleep for ``duration`` milliseconds in short steps.

    ``keep_going`` is consulted before every step; as soon as it returns a
    false value the sleep ends early.  Returns True when the full duration
    elapsed and False when the sleep was cut short.
    """
    start = now_ms()
    while keep_going is None or keep_going():
        if now_ms() - start >= duration:
            return True
        time.sleep(_POLL_SECONDS)
    return False