"""Status/error state and argument checks shared by the stream adapters.

Every adapter owns one `StreamState` and changes its status only through the
transitions below. `fail()` is the single way into `ERROR` and always records
the reason, so `ERROR` never appears with a missing error.
"""

from __future__ import annotations

from seekstream.interfaces.seekable_stream import (
    SeekOrigin,
    StreamError,
    StreamStatus,
    UnsupportedSeekError,
)

_ABSORBING = frozenset({StreamStatus.ERROR, StreamStatus.CLOSED})


class StreamState:
    """Mutable lifecycle state of one stream instance."""

    __slots__ = ("_status", "_error")

    def __init__(self) -> None:
        self._status = StreamStatus.NOT_OPEN
        self._error: StreamError | None = None

    @property
    def status(self) -> StreamStatus:
        return self._status

    @property
    def error(self) -> StreamError | None:
        return self._error

    @property
    def can_open(self) -> bool:
        """False once the stream has failed or been closed."""
        return self._status not in _ABSORBING

    def mark_open(self) -> bool:
        """Move to `OPEN`. Returns False (and changes nothing) from `ERROR`/`CLOSED`."""
        if not self.can_open:
            return False
        self._status = StreamStatus.OPEN
        return True

    def mark_at_end(self) -> None:
        """Move `OPEN` to `AT_END`; any other status is kept."""
        if self._status is StreamStatus.OPEN:
            self._status = StreamStatus.AT_END

    def mark_closed(self) -> None:
        self._status = StreamStatus.CLOSED

    def fail(self, error: StreamError) -> None:
        """Move to `ERROR`. The first recorded reason is kept."""
        if self._status is not StreamStatus.ERROR:
            self._error = error
        self._status = StreamStatus.ERROR

    def __repr__(self) -> str:
        return f"StreamState(status={self._status.name}, error={self._error})"


def check_read_request(
    buffer: bytearray | memoryview, max_length: int
) -> memoryview:
    """Return the first ``max_length`` bytes of ``buffer`` as a byte view.

    Sizes are in bytes whatever the buffer's item format, so a `memoryview`
    of 2-byte items holds ``2 * len(view)`` bytes.

    Raises:
        ValueError: If ``max_length`` is negative or exceeds the buffer size.
    """
    view = memoryview(buffer).cast("B")
    if max_length < 0:
        raise ValueError(f"max_length must be >= 0 (got {max_length})")
    if max_length > view.nbytes:
        raise ValueError(
            f"max_length {max_length} exceeds buffer size {view.nbytes}"
        )
    return view[:max_length]


def check_seek_request(offset: int, whence: SeekOrigin) -> None:
    """Raise UnsupportedSeekError unless this is a non-negative seek from the start."""
    if whence is not SeekOrigin.START_OF_STREAM or offset < 0:
        raise UnsupportedSeekError(offset, whence)
