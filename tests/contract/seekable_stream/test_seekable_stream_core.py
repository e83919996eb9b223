"""Contract tests for reading and seeking through a SeekableStream.

This module exercises backend-agnostic behavior of `SeekableStream`:
- length snapshot and the initial `NOT_OPEN` state
- bounded reads and the partial-read rule (`AT_END` on short reads)
- absolute seeks from the start of the stream, including past the end
- caller errors (oversized buffers, unsupported seek origins) raising

Every test runs once per backend (see `conftest.py`).
"""

from __future__ import annotations

from array import array

import pytest

from seekstream.interfaces.seekable_stream import (
    SeekableStream,
    SeekOrigin,
    StreamStatus,
    UnsupportedSeekError,
)

# ===========================================================================
#                               Tests
# ===========================================================================


def test_length_matches_payload(stream: SeekableStream, sample_bytes: bytes):
    """`length` is the payload size, before and after opening."""
    assert stream.length == len(sample_bytes)
    with stream:
        assert stream.length == len(sample_bytes)


def test_fresh_stream_is_not_open(stream: SeekableStream):
    """A new stream is `NOT_OPEN`, has no error and reports offset 0."""
    assert stream.status is StreamStatus.NOT_OPEN
    assert stream.error is None
    assert stream.offset == 0


def test_open_sets_open_at_offset_zero(stream: SeekableStream):
    """`open()` moves to `OPEN` with the position at the start."""
    stream.open()
    try:
        assert stream.status is StreamStatus.OPEN
        assert stream.error is None
        assert stream.offset == 0
        assert stream.has_bytes_available
    finally:
        stream.close()


def test_read_within_bounds_keeps_open(stream: SeekableStream):
    """Reading fewer bytes than remain returns exactly that many and stays `OPEN`."""
    buffer = bytearray(4)
    with stream:
        assert stream.read(buffer, 4) == 4
        assert bytes(buffer) == b"0123"
        assert stream.offset == 4
        assert stream.status is StreamStatus.OPEN


def test_read_exactly_remaining_keeps_open(stream: SeekableStream):
    """A full read that lands on the end does not yet report `AT_END`."""
    buffer = bytearray(10)
    with stream:
        assert stream.read(buffer, 10) == 10
        assert stream.status is StreamStatus.OPEN
        assert not stream.has_bytes_available


def test_read_at_end_returns_zero_and_marks_at_end(stream: SeekableStream):
    """At `offset == length` a read returns 0 and moves to `AT_END`."""
    buffer = bytearray(10)
    with stream:
        stream.seek(stream.length)
        assert stream.offset == stream.length
        assert stream.read(buffer, 1) == 0
        assert stream.status is StreamStatus.AT_END
        assert stream.error is None


def test_read_past_end_returns_remaining(stream: SeekableStream):
    """Asking for more than remains returns the remainder and moves to `AT_END`."""
    buffer = bytearray(8)
    with stream:
        stream.seek(7)
        assert stream.read(buffer, 8) == 3
        assert bytes(buffer[:3]) == b"789"
        assert stream.status is StreamStatus.AT_END


def test_read_only_touches_counted_bytes(stream: SeekableStream):
    """Bytes in the buffer past the returned count are left untouched."""
    buffer = bytearray(b"xxxxxxxx")
    with stream:
        stream.seek(8)
        assert stream.read(buffer, 8) == 2
    assert bytes(buffer) == b"89xxxxxx"


def test_zero_length_read_is_a_noop(stream: SeekableStream):
    """`read(buffer, 0)` returns 0 without moving to `AT_END`."""
    buffer = bytearray(4)
    with stream:
        assert stream.read(buffer, 0) == 0
        assert stream.status is StreamStatus.OPEN
        assert stream.offset == 0


def test_read_into_memoryview(stream: SeekableStream):
    """Any writable buffer works, including a slice of a larger memoryview."""
    backing = bytearray(16)
    view = memoryview(backing)[4:8]
    with stream:
        assert stream.read(view, 4) == 4
    assert bytes(backing[4:8]) == b"0123"


def test_max_length_counts_bytes_not_items(stream: SeekableStream):
    """A buffer of 2-byte items is filled by byte count, never by item count."""
    words = array("H", [0] * 4)
    with stream:
        assert stream.read(memoryview(words), 4) == 4
        assert stream.offset == 4
        assert stream.status is StreamStatus.OPEN
    assert words.tobytes() == b"0123" + bytes(4)


def test_max_length_may_use_every_byte_of_a_wide_buffer(stream: SeekableStream):
    """`max_length` is bounded by the buffer's size in bytes."""
    words = array("H", [0] * 4)
    with stream:
        assert stream.read(words, 8) == 8
        with pytest.raises(ValueError, match="exceeds buffer size 8"):
            stream.read(words, 9)
    assert words.tobytes() == b"01234567"


@pytest.mark.parametrize("k", range(0, 11))
def test_seek_then_read_starts_at_offset(
    stream: SeekableStream, sample_bytes: bytes, k: int
):
    """`seek(k)` followed by a read yields the bytes starting at absolute offset k."""
    with stream:
        stream.seek(k, SeekOrigin.START_OF_STREAM)
        assert stream.offset == k
        assert stream.read_bytes(3) == sample_bytes[k : k + 3]


def test_seek_backwards_after_end(stream: SeekableStream):
    """Seeking back after reaching the end reads again; status is not reset."""
    with stream:
        assert stream.read_bytes(20) == b"0123456789"
        assert stream.status is StreamStatus.AT_END
        stream.seek(2)
        assert stream.status is StreamStatus.AT_END
        assert stream.has_bytes_available
        assert stream.read_bytes(3) == b"234"


def test_seek_does_not_change_status(stream: SeekableStream):
    """A successful seek leaves `OPEN` as `OPEN`."""
    with stream:
        stream.seek(5)
        assert stream.status is StreamStatus.OPEN
        assert stream.error is None


def test_seek_past_end_then_read_zero(stream: SeekableStream):
    """Seeking past `length` is allowed; the next read returns 0 and `AT_END`."""
    buffer = bytearray(4)
    with stream:
        stream.seek(stream.length + 100)
        assert stream.status is StreamStatus.OPEN
        assert not stream.has_bytes_available
        assert stream.read(buffer, 4) == 0
        assert stream.status is StreamStatus.AT_END


@pytest.mark.parametrize(
    "offset, whence",
    [
        pytest.param(0, SeekOrigin.CURRENT, id="current"),
        pytest.param(0, SeekOrigin.END_OF_STREAM, id="end"),
        pytest.param(-1, SeekOrigin.START_OF_STREAM, id="negative"),
    ],
)
def test_unsupported_seek_raises(
    stream: SeekableStream, offset: int, whence: SeekOrigin
):
    """Anything but a non-negative seek from the start fails fast."""
    with stream:
        stream.seek(3)
        with pytest.raises(UnsupportedSeekError):
            stream.seek(offset, whence)
        assert stream.offset == 3
        assert stream.status is StreamStatus.OPEN


def test_unsupported_seek_is_a_value_error(stream: SeekableStream):
    """`UnsupportedSeekError` can be caught as a plain `ValueError`."""
    with stream, pytest.raises(ValueError):
        stream.seek(-5)


@pytest.mark.parametrize("max_length", [-1, 5])
def test_read_rejects_bad_max_length(stream: SeekableStream, max_length: int):
    """A negative `max_length`, or one larger than the buffer, raises `ValueError`."""
    buffer = bytearray(4)
    with stream, pytest.raises(ValueError):
        stream.read(buffer, max_length)


def test_has_bytes_available_tracks_offset(stream: SeekableStream):
    """`has_bytes_available` is exactly `offset < length`."""
    with stream:
        for k in (0, 5, 9, 10, 11):
            stream.seek(k)
            assert stream.has_bytes_available is (k < stream.length)


def test_empty_payload(make_stream):
    """A zero-byte resource opens, reads 0 and reports `AT_END`."""
    empty = make_stream(b"")
    assert empty.length == 0
    with empty:
        assert not empty.has_bytes_available
        assert empty.read_bytes(1) == b""
        assert empty.status is StreamStatus.AT_END


def test_end_to_end_scenario(stream: SeekableStream):
    """Open, read 4, read 10 (short), seek back to 2, read 3."""
    buffer = bytearray(10)
    stream.open()

    assert stream.read(buffer, 4) == 4
    assert bytes(buffer[:4]) == b"0123"
    assert stream.status is StreamStatus.OPEN

    assert stream.read(buffer, 10) == 6
    assert bytes(buffer[:6]) == b"456789"
    assert stream.status is StreamStatus.AT_END

    stream.seek(2, SeekOrigin.START_OF_STREAM)
    assert stream.read(buffer, 3) == 3
    assert bytes(buffer[:3]) == b"234"

    stream.close()
    assert stream.status is StreamStatus.CLOSED
