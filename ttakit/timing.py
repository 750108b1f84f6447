"""Monotonic millisecond tick counter."""

import time


def get_tick_count() -> int:
    """Current monotonic time in milliseconds."""
    return time.monotonic_ns() // 1_000_000