"""
objectid — 12-byte document identifiers (ObjectId layout) without a server.

Layout: 4-byte timestamp | 3-byte machine fingerprint | 2-byte process
fingerprint | 3-byte counter, rendered as 24 hex characters or as a
compact 64-symbol "slim" string.

objectid() is the default entry point and returns a hex identifier.
"""

__version__ = "0.1.0"

from ._log import get_logger, setup_logging
from .errors import InvalidAlphabet
from .counter import Counter
from .model import ObjectIdFields, ObjectIdOptions
from .encoding import (
    DEFAULT_ALPHABET,
    from_hex,
    to_hex,
    to_slim,
)
from .generator import (
    ObjectIdGenerator,
    construct,
    decode,
    get_default_generator,
    hex_id,
    slim_id,
)

objectid = hex_id
