# FILE: bytering/buffer/ring.py
# ------------------------------------------------------------------------------
import logging
from typing import Callable, Optional, Tuple

from bytering.buffer.layout import split_span
from bytering.buffer.policy import OverflowPolicy
from bytering.errors.fatal import BackendInitializationError, ConfigurationError
from bytering.errors.kinds import ErrorKind
from bytering.metrics.counters import BufferCounters
from bytering.metrics.exporter import RingMetricsExporter

logger = logging.getLogger("bytering.ring")


def _as_view(data) -> memoryview:
    if isinstance(data, int):
        raise TypeError("write() expects a bytes-like object or an iterable of ints; use write_byte() for one byte")
    try:
        view = memoryview(data)
    except TypeError:
        view = memoryview(bytes(data))
    if view.ndim != 1 or view.itemsize != 1:
        view = view.cast("B")
    return view


class RingBuffer:
    """Fixed-capacity FIFO of bytes with wraparound cursors.

    ``head`` indexes the oldest unread byte and ``tail`` the next write slot.
    When they coincide the buffer is either empty or full, so both states are
    tracked as explicit flags and updated together with every cursor move.

    Failures never raise: operations return False (or ``(None, False)`` /
    ``(b"", False)`` for reads) and record the reason in ``last_error``, which
    stays set until another failure overwrites it or ``clear_error()`` is
    called.

    The buffer does no locking. A producer and a consumer living in different
    threads must serialize access themselves.

    ``allocator`` is called once with the capacity and must return a fresh
    region of exactly that many bytes (or None when memory is short). The
    buffer takes exclusive ownership of it: the caller must not keep or hand
    out another reference to the region.
    """

    def __init__(
        self,
        capacity: int,
        policy=OverflowPolicy.REJECT_ON_FULL,
        *,
        name: str = "default",
        allocator: Callable[[int], bytearray] = bytearray,
        exporter: Optional[RingMetricsExporter] = None,
    ):
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 0:
            raise ConfigurationError("Capacity must be a non-negative integer", context={"capacity": capacity})
        self.policy = OverflowPolicy.parse(policy)
        self.name = name
        self._counters = BufferCounters()
        self._exporter = exporter
        self._head = 0
        self._tail = 0
        self._empty = True
        self._error = ErrorKind.NO_ERROR

        storage = None
        if capacity > 0:
            try:
                storage = allocator(capacity)
            except MemoryError:
                logger.error("Failed to allocate ring storage: buffer=%s capacity=%s", name, capacity)
        if storage is None:
            # No storage: permanently full and empty, never writable.
            self._storage = bytearray()
            self._capacity = 0
            self._full = True
            self._error = ErrorKind.OUT_OF_MEMORY
            logger.warning("Ring buffer %s created without storage (requested capacity=%s)", name, capacity)
            return
        if len(storage) != capacity:
            raise BackendInitializationError(
                "Allocator returned a region of the wrong size",
                context={"expected": capacity, "actual": len(storage)},
            )
        self._storage = storage
        self._capacity = capacity
        self._full = False
        logger.info("Ring buffer %s ready: capacity=%s policy=%s", name, capacity, self.policy.value)

    # -- accessors -------------------------------------------------------------

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def last_error(self) -> ErrorKind:
        return self._error

    def get_error(self) -> ErrorKind:
        return self._error

    def clear_error(self) -> None:
        self._error = ErrorKind.NO_ERROR

    def is_empty(self) -> bool:
        return self._empty

    def is_full(self) -> bool:
        return self._full

    def available(self) -> int:
        """Number of unread bytes."""
        if self._empty:
            return 0
        if self._full:
            return self._capacity
        return (self._tail - self._head) % self._capacity

    def free(self) -> int:
        """Number of bytes that can be written without rejection or overrun."""
        return self._capacity - self.available()

    def stats(self) -> dict:
        stats = self._counters.snapshot()
        stats["name"] = self.name
        stats["capacity"] = self._capacity
        stats["available"] = self.available()
        stats["policy"] = self.policy.value
        stats["last_error"] = self._error.value
        return stats

    # -- writes ----------------------------------------------------------------

    def write_byte(self, value: int) -> bool:
        if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 0xFF:
            raise ValueError(f"Invalid byte value: {value!r} (expected 0..255)")
        if self._capacity == 0:
            return self._reject_write("write_byte", 1)

        overrun = False
        if self._full:
            if self.policy is OverflowPolicy.REJECT_ON_FULL:
                return self._reject_write("write_byte", 1)
            # drop the oldest byte to make room
            self._head = (self._head + 1) % self._capacity
            overrun = True

        self._storage[self._tail] = value
        self._tail = (self._tail + 1) % self._capacity
        self._full = self._tail == self._head
        self._empty = False
        self._record_write("write_byte", 1, 1 if overrun else 0, overrun)
        return not overrun

    def write(self, data) -> bool:
        """Append ``data`` (bytes-like or an iterable of ints).

        With REJECT_ON_FULL the write lands only if it fits entirely. With
        OVERWRITE_ON_FULL it always lands: input longer than the capacity keeps
        only its newest ``capacity`` bytes, and unread bytes in the way are
        dropped from the head. The call then returns False with
        ``BUFFER_OVERRUN`` even though the data was stored.
        """
        view = _as_view(data)
        size = view.nbytes
        if size == 0:
            return True
        if self._capacity == 0:
            return self._reject_write("write", size)

        free = self.free()
        if self.policy is OverflowPolicy.REJECT_ON_FULL:
            if size > free:
                return self._reject_write("write", size)
            self._copy_in(view)
            self._record_write("write", size, 0, False)
            return True

        overrun = False
        if size > self._capacity:
            view = view[size - self._capacity:]
            size = self._capacity
            overrun = True
        discarded = 0
        if size > free:
            discarded = size - free
            self._head = (self._tail + size) % self._capacity
            overrun = True
        self._copy_in(view)
        self._record_write("write", size, discarded, overrun)
        return not overrun

    def _copy_in(self, view: memoryview) -> None:
        span = split_span(self._tail, view.nbytes, self._capacity)
        self._storage[span.start : span.start + span.first] = view[: span.first]
        if span.wraps:
            self._storage[: span.second] = view[span.first :]
        self._tail = (self._tail + span.length) % self._capacity
        self._full = self._tail == self._head
        self._empty = False

    # -- reads -----------------------------------------------------------------

    def read_byte(self) -> Tuple[Optional[int], bool]:
        if self._empty:
            self._reject_read("read_byte", 1)
            return None, False
        value = self._storage[self._head]
        self._head = (self._head + 1) % self._capacity
        self._empty = self._head == self._tail
        self._full = False
        self._record_read(1)
        return value, True

    def read(self, size: int) -> Tuple[bytes, bool]:
        """Remove and return exactly ``size`` bytes.

        Partial reads never happen: if fewer than ``size`` bytes are unread
        the call fails with ``BUFFER_EMPTY`` and the buffer is left untouched.
        """
        if isinstance(size, bool) or not isinstance(size, int) or size < 0:
            raise ValueError(f"Invalid read size: {size!r}")
        if size == 0:
            return b"", True
        if self._empty or size > self.available():
            self._reject_read("read", size)
            return b"", False

        span = split_span(self._head, size, self._capacity)
        data = bytes(self._storage[span.start : span.start + span.first])
        if span.wraps:
            data += bytes(self._storage[: span.second])
        self._head = (self._head + span.length) % self._capacity
        self._empty = self._head == self._tail
        self._full = False
        self._record_read(size)
        return data, True

    # -- lifecycle -------------------------------------------------------------

    def close(self) -> None:
        """Release the storage. The buffer stays usable as a zero-capacity buffer."""
        if self._capacity == 0 and not self._storage:
            return
        self._storage = bytearray()
        self._capacity = 0
        self._head = self._tail = 0
        self._full = True
        self._empty = True
        if self._exporter is not None:
            self._exporter.record_write(0, 0, 0)
        logger.info("Ring buffer %s closed", self.name)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def __len__(self) -> int:
        return self.available()

    def __repr__(self) -> str:
        return (
            f"RingBuffer(name={self.name!r}, capacity={self._capacity}, "
            f"available={self.available()}, policy={self.policy.value})"
        )

    # -- bookkeeping -----------------------------------------------------------

    def _fail(self, op: str, kind: ErrorKind, requested: int) -> None:
        self._error = kind
        if self._exporter is not None:
            self._exporter.record_error(kind)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Ring %s failed: buffer=%s kind=%s requested=%s",
                op,
                self.name,
                kind.value,
                requested,
                extra={"buffer": self.name, "op": op, "error_kind": kind.value, "available": self.available()},
            )

    def _reject_write(self, op: str, requested: int) -> bool:
        self._counters.inc_write_fail()
        self._fail(op, ErrorKind.BUFFER_FULL, requested)
        return False

    def _reject_read(self, op: str, requested: int) -> None:
        self._counters.inc_read_empty()
        self._fail(op, ErrorKind.BUFFER_EMPTY, requested)

    def _record_write(self, op: str, written: int, discarded: int, overrun: bool) -> None:
        if overrun:
            self._counters.inc_overrun(written, discarded)
            self._fail(op, ErrorKind.BUFFER_OVERRUN, written)
        else:
            self._counters.inc_write_ok(written)
        if self._exporter is not None:
            self._exporter.record_write(written, discarded, self.available())

    def _record_read(self, count: int) -> None:
        self._counters.inc_read_ok(count)
        if self._exporter is not None:
            self._exporter.record_read(count, self.available())
