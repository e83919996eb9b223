"""SEEKSTREAM Seekable Stream Interface Package"""

from .errors import StreamError, UnsupportedSeekError
from .seekable_stream import (
    READ_ERROR,
    SeekableStream,
    SeekOrigin,
    StreamStatus,
)

__all__ = [
    "READ_ERROR",
    "SeekableStream",
    "SeekOrigin",
    "StreamError",
    "StreamStatus",
    "UnsupportedSeekError",
]
