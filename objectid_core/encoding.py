"""
objectid_core/encoding.py — String encodings for raw 12-byte identifiers.

- Hex:  24 lowercase hex digits, two per byte, in byte order
- Slim: 6 bits per symbol over a 64-character alphabet

All functions are deterministic and have no side effects.
"""

from __future__ import annotations

from typing import Iterable, Union

from .errors import InvalidAlphabet


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

RAW_LENGTH = 12
HEX_LENGTH = RAW_LENGTH * 2

# Default 64-character alphabet for slim encoding. Ordered so that symbol
# order follows ASCII order.
DEFAULT_ALPHABET = (
    "-0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ_abcdefghijklmnopqrstuvwxyz"
)

RawId = Union[bytes, bytearray, memoryview, Iterable[int]]

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def _as_bytes(raw: RawId) -> bytes:
    """Normalize any bytes-like object or int sequence to bytes.

    Raises:
        ValueError: If an element is outside 0..255.
        TypeError: If raw is not bytes-like or iterable of ints.
    """
    if isinstance(raw, bytes):
        return raw
    return bytes(raw)


# ---------------------------------------------------------------------------
# Hex
# ---------------------------------------------------------------------------

def to_hex(raw: RawId) -> str:
    """Render a raw identifier as 24 lowercase hex characters.

    Raises:
        ValueError: If raw is not exactly 12 bytes long.
    """
    data = _as_bytes(raw)
    if len(data) != RAW_LENGTH:
        raise ValueError(
            f"Raw identifier must be {RAW_LENGTH} bytes, got {len(data)}"
        )
    return data.hex()


def from_hex(text: str) -> bytes:
    """Parse a 24-character hex string (any case) back to raw bytes."""
    if len(text) != HEX_LENGTH:
        raise ValueError(
            f"Hex identifier must be {HEX_LENGTH} characters, got {len(text)}"
        )
    # bytes.fromhex tolerates whitespace; identifiers must not contain any.
    if not _HEX_DIGITS.issuperset(text):
        raise ValueError(f"Not a hex identifier: {text!r}")
    return bytes.fromhex(text)


# ---------------------------------------------------------------------------
# Slim
# ---------------------------------------------------------------------------

def to_slim(raw: RawId, alphabet: str = DEFAULT_ALPHABET) -> str:
    """Render raw bytes over a 64-symbol alphabet, 6 bits per symbol.

    The bytes are read as one big-endian unsigned integer and scanned from
    the last byte toward the first. Bits are buffered low-to-high; each
    step emits the low 6 bits of the buffer as a symbol, prepended to the
    output, pulling in the next byte first whenever fewer than 6 bits are
    buffered. Scanning stops once no bytes and no buffered bits remain,
    so a 12-byte identifier always yields 16 symbols.

    Raises:
        InvalidAlphabet: If alphabet is not exactly 64 characters long.
    """
    if len(alphabet) != 64:
        raise InvalidAlphabet(len(alphabet))

    data = _as_bytes(raw)
    symbols = []
    bits = 0
    value = 0
    index = len(data) - 1

    while index >= 0 or bits > 0:
        if bits < 6 and index >= 0:
            value |= data[index] << bits
            bits += 8
            index -= 1
        symbols.append(alphabet[value & 0x3F])
        value >>= 6
        bits -= 6

    return "".join(reversed(symbols))
