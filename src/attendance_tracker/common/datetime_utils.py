from __future__ import annotations

import time


def now_epoch_millis() -> int:
    """Current Unix time in milliseconds.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return time.time_ns() // 1_000_000
