"""
objectid_core/errors.py — Exceptions raised by the identifier codec.

Everything else is reported with built-in ValueError / TypeError.
"""

from __future__ import annotations


class InvalidAlphabet(ValueError):
    """Slim-encoding alphabet does not have exactly 64 characters."""

    def __init__(self, length: int):
        self.length = length
        super().__init__(
            f"Slim alphabet must be 64 characters long, got {length}"
        )
