"""Fixed-capacity byte ring buffer with overwrite-on-full and reject-on-full policies."""

from bytering.buffer import OverflowPolicy, RingBuffer
from bytering.errors import BackendInitializationError, ConfigurationError, ErrorKind, RingBufferError

OVERWRITE_ON_FULL = OverflowPolicy.OVERWRITE_ON_FULL
REJECT_ON_FULL = OverflowPolicy.REJECT_ON_FULL

__all__ = [
    "RingBuffer",
    "OverflowPolicy",
    "OVERWRITE_ON_FULL",
    "REJECT_ON_FULL",
    "ErrorKind",
    "RingBufferError",
    "ConfigurationError",
    "BackendInitializationError",
]
