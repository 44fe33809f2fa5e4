"""
objectid_core/model.py — Identifier options and decoded field view.

Raw identifier layout (12 bytes, big-endian):

    bytes 0..3   timestamp     Unix seconds, 32-bit
    bytes 4..6   machine_id    fixed per generator, 24-bit
    bytes 7..8   process_id    re-drawn per construction, 16-bit
    bytes 9..11  counter       wraps modulo 2^24
"""

import math
from datetime import datetime, timezone
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ---------------------------------------------------------------------------
# Field widths
# ---------------------------------------------------------------------------

TIMESTAMP_MASK = 0xFFFFFFFF
MACHINE_ID_MASK = 0xFFFFFF
PROCESS_ID_MASK = 0xFFFF


# ---------------------------------------------------------------------------
# Options
# ---------------------------------------------------------------------------

class ObjectIdOptions(BaseModel):
    """Options for constructing one raw identifier."""

    model_config = ConfigDict(frozen=True)

    timestamp: Optional[Union[int, float]] = Field(
        default=None,
        description=(
            "Unix timestamp in seconds. Fractional part is truncated "
            "toward zero. Defaults to the generator's clock."
        ),
    )

    @field_validator("timestamp")
    @classmethod
    def truncate_timestamp(cls, v: Optional[Union[int, float]]) -> Optional[int]:
        """Truncate to whole seconds. NaN and Infinity pack as 0."""
        if v is None or isinstance(v, int):
            return v
        if math.isnan(v) or math.isinf(v):
            return 0
        return int(v)


# ---------------------------------------------------------------------------
# Decoded view
# ---------------------------------------------------------------------------

class ObjectIdFields(BaseModel):
    """The four layout fields of a raw identifier."""

    model_config = ConfigDict(frozen=True)

    timestamp: int = Field(..., ge=0, le=TIMESTAMP_MASK)
    machine_id: int = Field(..., ge=0, le=MACHINE_ID_MASK)
    process_id: int = Field(..., ge=0, le=PROCESS_ID_MASK)
    counter: int = Field(..., ge=0, le=0xFFFFFF)

    @property
    def generated_at(self) -> datetime:
        return datetime.fromtimestamp(self.timestamp, tz=timezone.utc)
