# FILE: tests/buffer/test_ring_reject.py
# ------------------------------------------------------------------------------
import pytest

from bytering import ErrorKind, OverflowPolicy, RingBuffer


def make_ring(capacity: int) -> RingBuffer:
    return RingBuffer(capacity, OverflowPolicy.REJECT_ON_FULL, name="reject-test")


def test_bytes_come_out_in_write_order():
    ring = make_ring(8)
    for value in b"abc":
        assert ring.write_byte(value)
    assert ring.available() == 3
    assert ring.read(3) == (b"abc", True)
    assert ring.is_empty()
    assert ring.available() == 0


def test_write_byte_on_full_buffer_is_rejected():
    ring = make_ring(4)
    for value in (1, 2, 3, 4):
        assert ring.write_byte(value)
    assert ring.is_full()

    assert ring.write_byte(5) is False
    assert ring.get_error() is ErrorKind.BUFFER_FULL
    assert ring.available() == 4
    assert ring.read(4) == (bytes([1, 2, 3, 4]), True)


def test_read_byte_on_empty_buffer_fails():
    ring = make_ring(4)
    assert ring.read_byte() == (None, False)
    assert ring.get_error() is ErrorKind.BUFFER_EMPTY


def test_bulk_read_never_returns_partial_data():
    ring = make_ring(8)
    assert ring.write(b"abc")
    assert ring.read(5) == (b"", False)
    assert ring.get_error() is ErrorKind.BUFFER_EMPTY
    assert ring.available() == 3
    assert ring.read(3) == (b"abc", True)


def test_bulk_write_that_does_not_fit_writes_nothing():
    ring = make_ring(4)
    assert ring.write(b"ab")
    assert ring.write(b"cde") is False
    assert ring.get_error() is ErrorKind.BUFFER_FULL
    assert ring.available() == 2
    assert ring.read(2) == (b"ab", True)


def test_bulk_write_exactly_filling_free_space_sets_full():
    ring = make_ring(4)
    assert ring.write(b"a")
    assert ring.write(b"bcd")
    assert ring.is_full()
    assert not ring.is_empty()
    assert ring.free() == 0


def test_wraparound_split_copy_preserves_order():
    ring = make_ring(4)
    assert ring.write(bytes([1, 2, 3]))
    assert ring.read(2) == (bytes([1, 2]), True)
    assert ring.write(bytes([4, 5, 6]))
    assert ring.is_full()
    assert ring.read(4) == (bytes([3, 4, 5, 6]), True)
    assert ring.is_empty()


def test_single_byte_reads_follow_wrapped_cursor():
    ring = make_ring(3)
    ring.write(b"xy")
    ring.read(2)
    ring.write(b"abc")
    assert [ring.read_byte() for _ in range(3)] == [(97, True), (98, True), (99, True)]
    assert ring.read_byte() == (None, False)


def test_fifo_across_many_wraps():
    ring = make_ring(5)
    payload = bytes(range(99))
    out = bytearray()
    for start in range(0, len(payload), 3):
        assert ring.write(payload[start : start + 3])
        data, ok = ring.read(3)
        assert ok
        out += data
    assert bytes(out) == payload
    assert ring.is_empty()


def test_available_tracks_writes_minus_reads():
    ring = make_ring(6)
    ring.write(b"abcd")
    ring.read(1)
    ring.write_byte(0x41)
    assert ring.available() == 4
    assert len(ring) == 4
    assert ring.free() == 2


def test_zero_length_operations_are_noops():
    ring = make_ring(2)
    ring.write(b"ab")
    assert ring.write(b"") is True
    assert ring.get_error() is ErrorKind.NO_ERROR
    assert ring.available() == 2

    empty = make_ring(2)
    assert empty.read(0) == (b"", True)
    assert empty.get_error() is ErrorKind.NO_ERROR


def test_last_error_is_sticky_until_cleared():
    ring = make_ring(4)
    ring.read_byte()
    assert ring.write(b"ok")
    assert ring.read(1) == (b"o", True)
    assert ring.last_error is ErrorKind.BUFFER_EMPTY
    ring.clear_error()
    assert ring.get_error() is ErrorKind.NO_ERROR


def test_accessors_do_not_mutate_state():
    ring = make_ring(4)
    ring.write(b"abcd")
    ring.write_byte(1)
    first = (ring.is_empty(), ring.is_full(), ring.available(), ring.get_error())
    for _ in range(3):
        assert (ring.is_empty(), ring.is_full(), ring.available(), ring.get_error()) == first
    assert ring.read(4) == (b"abcd", True)


def test_write_accepts_bytes_like_and_int_iterables():
    ring = make_ring(16)
    assert ring.write(bytearray(b"ab"))
    assert ring.write(memoryview(b"cd"))
    assert ring.write([0x65, 0x66])
    assert ring.write(iter([0x67]))
    assert ring.read(7) == (b"abcdefg", True)


def test_byte_value_255_is_ordinary_payload():
    ring = make_ring(2)
    ring.write_byte(0xFF)
    assert ring.read_byte() == (0xFF, True)


@pytest.mark.parametrize("bad_value", [-1, 256, True, "a", 1.0])
def test_write_byte_rejects_non_byte_values(bad_value):
    ring = make_ring(2)
    with pytest.raises(ValueError):
        ring.write_byte(bad_value)
    assert ring.is_empty()


def test_write_rejects_plain_int():
    ring = make_ring(2)
    with pytest.raises(TypeError):
        ring.write(3)


@pytest.mark.parametrize("bad_size", [-1, 1.5, None])
def test_read_rejects_invalid_sizes(bad_size):
    ring = make_ring(2)
    with pytest.raises(ValueError):
        ring.read(bad_size)


def test_stats_reports_counters_and_state():
    ring = make_ring(4)
    ring.write(b"abc")
    ring.write(b"de")
    ring.read(2)
    ring.read(5)
    stats = ring.stats()
    assert stats["writes_ok"] == 1
    assert stats["writes_failed"] == 1
    assert stats["reads_ok"] == 1
    assert stats["reads_empty"] == 1
    assert stats["bytes_written"] == 3
    assert stats["bytes_read"] == 2
    assert stats["available"] == 1
    assert stats["policy"] == "reject_on_full"
    assert stats["last_error"] == "buffer_empty"
