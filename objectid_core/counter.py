"""
objectid_core/counter.py — 24-bit identifier counter.

The counter occupies the last three bytes of every raw identifier. It is
seeded once (randomly, by the generator) and advanced on each construction.
"""

from __future__ import annotations

import threading

from ._log import get_logger

COUNTER_MASK = 0xFFFFFF

logger = get_logger("counter")


class Counter:
    """Atomic fetch-and-increment counter, modulo 2^24.

    Args:
        seed: Starting value. Masked to 24 bits.
    """

    def __init__(self, seed: int = 0):
        self._value = seed & COUNTER_MASK
        self._lock = threading.Lock()

    @property
    def value(self) -> int:
        """The most recently issued value (or the seed before first use)."""
        return self._value

    def next(self) -> int:
        """Advance by one and return the post-increment value."""
        with self._lock:
            self._value = (self._value + 1) & COUNTER_MASK
            value = self._value
        if value == 0:
            logger.debug("counter wrapped around to 0")
        return value

    def __repr__(self) -> str:
        return f"Counter(value=0x{self._value:06x})"
