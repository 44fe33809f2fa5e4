"""
objectid_core/generator.py — Raw identifier construction.

A generator owns the two pieces of long-lived state behind every
identifier: the machine fingerprint (drawn once) and the counter (seeded
once, advanced per call). The random source and clock are injected so
tests can substitute deterministic ones.

The module keeps one default generator, created at import, which backs
the module-level construct() / hex_id() / slim_id() functions. Every
identifier produced through them shares the same machine fingerprint and
counter for the lifetime of the process.
"""

from __future__ import annotations

import os
import time
from typing import Any, Callable, Dict, Optional, Union

from ._log import get_logger
from .counter import Counter
from .encoding import DEFAULT_ALPHABET, RAW_LENGTH, RawId, _as_bytes, to_hex, to_slim
from .model import (
    MACHINE_ID_MASK,
    PROCESS_ID_MASK,
    TIMESTAMP_MASK,
    ObjectIdFields,
    ObjectIdOptions,
)

RandomSource = Callable[[int], bytes]
Clock = Callable[[], float]
Options = Union[ObjectIdOptions, Dict[str, Any], None]

logger = get_logger("generator")


def _random_uint(random_source: RandomSource, size: int) -> int:
    """Draw size random bytes and read them as a big-endian unsigned int."""
    return int.from_bytes(random_source(size)[:size], byteorder="big")


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------

class ObjectIdGenerator:
    """Builds 12-byte raw identifiers.

    Args:
        random_source: Callable returning n random bytes. Defaults to
                       os.urandom.
        clock:         Callable returning the current Unix time in
                       seconds. Defaults to time.time.
    """

    def __init__(
        self,
        random_source: Optional[RandomSource] = None,
        clock: Optional[Clock] = None,
    ):
        self._random = random_source or os.urandom
        self._clock = clock or time.time
        self.machine_id = _random_uint(self._random, 3)
        self.counter = Counter(_random_uint(self._random, 3))
        logger.debug(
            "generator created: machine_id=%06x counter_seed=%06x",
            self.machine_id,
            self.counter.value,
        )

    def construct(self, options: Options = None) -> bytes:
        """Build one raw identifier.

        Fields are packed big-endian and masked to their widths, so
        out-of-range timestamps wrap silently instead of failing.
        Advances the counter exactly once.
        """
        if options is None:
            options = ObjectIdOptions()
        elif isinstance(options, dict):
            options = ObjectIdOptions.model_validate(options)

        if options.timestamp is None:
            timestamp = int(self._clock())
        else:
            timestamp = options.timestamp

        # Stands in for an OS process id; drawn fresh on every call.
        process_id = _random_uint(self._random, 2)
        count = self.counter.next()

        return b"".join((
            (timestamp & TIMESTAMP_MASK).to_bytes(4, byteorder="big"),
            (self.machine_id & MACHINE_ID_MASK).to_bytes(3, byteorder="big"),
            (process_id & PROCESS_ID_MASK).to_bytes(2, byteorder="big"),
            count.to_bytes(3, byteorder="big"),
        ))

    def hex(self, timestamp: Optional[float] = None) -> str:
        """Generate an identifier as 24 lowercase hex characters."""
        return to_hex(self.construct(ObjectIdOptions(timestamp=timestamp)))

    def slim(
        self,
        timestamp: Optional[float] = None,
        alphabet: str = DEFAULT_ALPHABET,
    ) -> str:
        """Generate an identifier in slim encoding."""
        return to_slim(self.construct(ObjectIdOptions(timestamp=timestamp)), alphabet)


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------

def decode(raw: RawId) -> ObjectIdFields:
    """Split a raw identifier into its four layout fields."""
    data = _as_bytes(raw)
    if len(data) != RAW_LENGTH:
        raise ValueError(
            f"Raw identifier must be {RAW_LENGTH} bytes, got {len(data)}"
        )
    return ObjectIdFields(
        timestamp=int.from_bytes(data[0:4], byteorder="big"),
        machine_id=int.from_bytes(data[4:7], byteorder="big"),
        process_id=int.from_bytes(data[7:9], byteorder="big"),
        counter=int.from_bytes(data[9:12], byteorder="big"),
    )


# ---------------------------------------------------------------------------
# Process-wide default generator
# ---------------------------------------------------------------------------

_default_generator = ObjectIdGenerator()


def get_default_generator() -> ObjectIdGenerator:
    """Return the generator shared by the module-level functions."""
    return _default_generator


def construct(options: Options = None) -> bytes:
    """Build one raw identifier with the default generator."""
    return _default_generator.construct(options)


def hex_id(timestamp: Optional[float] = None) -> str:
    """Generate a 24-character hex identifier with the default generator."""
    return _default_generator.hex(timestamp)


def slim_id(
    timestamp: Optional[float] = None,
    alphabet: str = DEFAULT_ALPHABET,
) -> str:
    """Generate a slim identifier with the default generator."""
    return _default_generator.slim(timestamp, alphabet)
