# FILE: bytering/errors/kinds.py
# ------------------------------------------------------------------------------
from enum import Enum


class ErrorKind(str, Enum):
    """Outcome of the last failing buffer operation.

    Operational failures are reported through this value and a False return,
    never by raising.
    """

    NO_ERROR = "no_error"
    OUT_OF_MEMORY = "out_of_memory"
    BUFFER_FULL = "buffer_full"
    BUFFER_OVERRUN = "buffer_overrun"
    BUFFER_EMPTY = "buffer_empty"
