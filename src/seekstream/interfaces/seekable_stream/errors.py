"""Error values and exceptions for seekable stream operations.

Runtime I/O conditions are never raised: they are recorded on the stream as a
`StreamError` next to `StreamStatus.ERROR`. Exceptions are reserved for caller
programming errors, such as asking for an unsupported seek.
"""

from enum import Enum


class StreamError(Enum):
    """Reason a stream entered `StreamStatus.ERROR`."""

    READ_FAILED = "read_failed"
    """The OS-level read (or reposition) of the underlying resource failed."""

    HANDLE_INIT_FAILED = "handle_init_failed"
    """The underlying handle could not be acquired by `open()`."""

    HANDLE_UNSET = "handle_unset"
    """An operation needing an open handle ran without one (never opened, or closed)."""


class UnsupportedSeekError(ValueError):
    """A seek was requested with an origin or offset the stream does not support.

    Attributes:
        offset (int): The requested offset.
        whence (object): The requested seek origin.
    """

    def __init__(self, offset: int, whence: object):
        super().__init__(
            f"Only non-negative seeks from the start of the stream are supported "
            f"(got offset={offset}, whence={whence})."
        )
        self.offset = offset
        self.whence = whence
