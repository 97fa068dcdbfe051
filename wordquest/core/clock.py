"""Millisecond clock used for cooldown timestamps."""

from __future__ import annotations

import time
from collections.abc import Callable

HOUR_MS = 60 * 60 * 1000
DAY_MS = 24 * HOUR_MS

# Injected wherever "now" matters so tests can freeze time
Clock = Callable[[], int]


def current_millis() -> int:
    """Current wall-clock time as epoch milliseconds."""
    return int(time.time() * 1000)
