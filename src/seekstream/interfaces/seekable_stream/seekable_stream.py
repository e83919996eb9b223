"""Seekable input stream interface.

This module defines the backend-agnostic contract for reading a finite,
byte-addressable resource through a uniform seekable stream: an open/close
lifecycle, random-access positioning, bounded reads, and explicit status and
error reporting.

Key concepts:
    - **Snapshot length**: `length` is captured once when the stream is built
      and never re-queried, even if the resource changes underneath.
    - **Observable state**: `read` and `seek` never raise for I/O conditions;
      they move `status`/`error`, which callers poll after each call.
    - **Partial reads**: a read returning fewer bytes than requested marks the
      stream `AT_END`. A zero-byte read at end of stream is not an error.
    - **Start-only seeks**: only `SeekOrigin.START_OF_STREAM` with a
      non-negative offset is supported; anything else raises
      `UnsupportedSeekError`.

State machine:
    ```text
    NOT_OPEN --open()--> OPEN --read() hits end--> AT_END --close()--> CLOSED
    read()/seek() without a handle --> ERROR
    ERROR and CLOSED never return to OPEN.
    ```

Typical usage:
    ```py
    buffer = bytearray(4096)
    with stream:
        stream.seek(header_offset)
        n = stream.read(buffer, 512)
        if stream.status is StreamStatus.ERROR:
            ...
    ```
"""

import abc
from enum import Enum
from types import TracebackType

from .errors import StreamError

READ_ERROR = -1
"""Returned by `read()` when no read could be performed."""


class StreamStatus(Enum):
    """Lifecycle state of a stream instance."""

    NOT_OPEN = "not_open"
    OPEN = "open"
    AT_END = "at_end"
    CLOSED = "closed"
    ERROR = "error"


class SeekOrigin(Enum):
    """Reference point for a seek offset."""

    START_OF_STREAM = 0
    CURRENT = 1
    END_OF_STREAM = 2


class SeekableStream(abc.ABC):
    """Randomly positionable, bounded, readable byte source."""

    @property
    @abc.abstractmethod
    def length(self) -> int:
        """Total size in bytes of the underlying resource, fixed at construction."""

    @property
    @abc.abstractmethod
    def offset(self) -> int:
        """Current read position. ``0`` while no handle is held."""

    @property
    @abc.abstractmethod
    def status(self) -> StreamStatus:
        """Current lifecycle state."""

    @property
    @abc.abstractmethod
    def error(self) -> StreamError | None:
        """The `StreamError` behind `StreamStatus.ERROR`, otherwise ``None``."""

    @abc.abstractmethod
    def open(self) -> None:
        """Acquire the underlying resource.

        Moves a `NOT_OPEN` stream to `OPEN`. Failures are reported through
        `status`/`error`, not raised. Streams in `ERROR` or `CLOSED` stay
        where they are; build a new instance to read again.
        """

    @abc.abstractmethod
    def close(self) -> None:
        """Release the underlying resource and move to `CLOSED`.

        Safe to call multiple times; a no-op when nothing is held.
        """

    @abc.abstractmethod
    def read(self, buffer: bytearray | memoryview, max_length: int) -> int:
        """Read up to ``max_length`` bytes into ``buffer``.

        Args:
            buffer: Writable contiguous buffer receiving the bytes from its
                first byte on. Items wider than a byte are filled byte-wise.
            max_length: Maximum number of bytes to read. Must not exceed
                the buffer's size in bytes (``memoryview(buffer).nbytes``).

        Returns:
            int: The number of bytes read, or `READ_ERROR` if the read could
            not be performed (see `status`/`error`).

        Raises:
            ValueError: If ``max_length`` is negative or larger than the buffer.

        Notes:
            Fewer bytes than ``max_length`` (including zero) moves the stream
            to `AT_END`.
        """

    @abc.abstractmethod
    def seek(
        self, offset: int, whence: SeekOrigin = SeekOrigin.START_OF_STREAM
    ) -> None:
        """Move the read position to the absolute byte ``offset``.

        Seeking past `length` is allowed; the next read returns 0 bytes.

        Args:
            offset: Absolute, non-negative byte offset.
            whence: Must be `SeekOrigin.START_OF_STREAM`.

        Raises:
            UnsupportedSeekError: For any other origin or a negative offset.
        """

    # --- Convenience methods (non-abstract) ---

    @property
    def has_bytes_available(self) -> bool:
        """``True`` while the current offset is before the end of the stream."""
        return self.offset < self.length

    def get_buffer(self) -> memoryview | None:
        """Return direct access to the backend's remaining bytes, if it has any.

        Backends without an internal buffer return ``None``.
        """
        return None

    def read_bytes(self, max_length: int) -> bytes | None:
        """Read up to ``max_length`` bytes and return them.

        Args:
            max_length: Maximum number of bytes to read.

        Returns:
            The bytes read (possibly empty), or ``None`` when `read` returned
            `READ_ERROR`.
        """
        buffer = bytearray(max_length)
        count = self.read(buffer, max_length)
        if count == READ_ERROR:
            return None
        return bytes(buffer[:count])

    def __enter__(self) -> "SeekableStream":
        self.open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
