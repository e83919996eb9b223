"""In-memory seekable input stream.

A dependency-free `SeekableStream` over a `bytes` snapshot, meant for tests of
stream consumers (container/archive readers) and for running the stream
contract suite against a second backend. It follows the same state machine as
`FileInputStream`, with a cursor standing in for the OS handle.

- `open()` cannot fail; it places the cursor at 0.
- Reads always return everything available up to ``max_length``, so a short
  read always means end of stream.
- `get_buffer()` exposes the remaining bytes as a read-only `memoryview`.
"""

from __future__ import annotations

import logging

from seekstream.interfaces.seekable_stream import (
    READ_ERROR,
    SeekableStream,
    SeekOrigin,
    StreamError,
    StreamStatus,
)

from .state import StreamState, check_read_request, check_seek_request

__all__ = ["MemoryInputStream"]

logger = logging.getLogger(__name__)


class MemoryInputStream(SeekableStream):
    """Seekable stream over an immutable in-memory byte string.

    Example
    -------
        stream = MemoryInputStream(b"0123456789")
        with stream:
            stream.seek(2)
            assert stream.read_bytes(3) == b"234"
    """

    def __init__(self, data: bytes | bytearray | memoryview) -> None:
        self._data = bytes(data)
        self._cursor: int | None = None
        self._state = StreamState()

    # ---- SeekableStream ----

    @property
    def length(self) -> int:
        return len(self._data)

    @property
    def offset(self) -> int:
        return self._cursor or 0

    @property
    def status(self) -> StreamStatus:
        return self._state.status

    @property
    def error(self) -> StreamError | None:
        return self._state.error

    def open(self) -> None:
        if self._cursor is not None:
            return
        if not self._state.mark_open():
            logger.warning(
                "Not reopening %s in-memory stream", self._state.status.name
            )
            return
        self._cursor = 0

    def close(self) -> None:
        if self._cursor is None:
            return
        self._cursor = None
        self._state.mark_closed()

    def read(self, buffer: bytearray | memoryview, max_length: int) -> int:
        view = check_read_request(buffer, max_length)
        if self._cursor is None:
            self._state.fail(StreamError.HANDLE_UNSET)
            return READ_ERROR

        chunk = self._data[self._cursor : self._cursor + max_length]
        count = len(chunk)
        view[:count] = chunk
        self._cursor += count

        if count < max_length:
            self._state.mark_at_end()
        return count

    def seek(
        self, offset: int, whence: SeekOrigin = SeekOrigin.START_OF_STREAM
    ) -> None:
        check_seek_request(offset, whence)

        logger.debug("MemoryInputStream offset %d", offset)
        if self._cursor is None:
            self._state.fail(StreamError.HANDLE_UNSET)
            return
        self._cursor = offset

    def get_buffer(self) -> memoryview | None:
        if self._cursor is None:
            return None
        return memoryview(self._data)[self._cursor :]

    def __repr__(self) -> str:
        return (
            f"MemoryInputStream(length={len(self._data)}, "
            f"status={self._state.status.name})"
        )
