"""File-backed seekable input stream.

`FileInputStream` reads a single named file through an unbuffered OS handle
(`io.FileIO`). The file's size is captured once, from filesystem metadata, when
the stream is built; the stream is a snapshot view and never re-queries it.

Key behaviors
-------------
- **Fallible construction**: `FileInputStream.from_path()` returns ``None``
  (and logs a warning) when the path is missing, is not a regular file, its
  metadata cannot be read, or a SEEKSTREAM_* policy variable is malformed.
  No handle is opened at construction.
- **open()**: acquires the handle. With `StreamSettings.strict_open` (the
  default) a failed acquisition moves the stream to ``ERROR`` with
  ``HANDLE_INIT_FAILED``. Without it, the stream reports ``OPEN`` anyway and
  the first read/seek reports ``HANDLE_UNSET``.
- **read()**: one OS read per call (or a loop until full/EOF with
  `StreamSettings.fill_reads`). A short read moves the stream to ``AT_END``.
- **seek()**: absolute, start-of-stream only. Seeking past the end is allowed.
- **Teardown**: the handle is released by `close()`, by leaving a ``with``
  block, or when the instance is finalized.

Typical usage
-------------
    stream = FileInputStream.from_path("archive.zip")
    if stream is None:
        ...  # missing or unreadable, already logged
    buffer = bytearray(22)
    with stream:
        stream.seek(stream.length - 22)
        stream.read(buffer, 22)
"""

from __future__ import annotations

import io
import logging
import os
import stat

from seekstream.config import InvalidSettingError, StreamSettings, load_settings
from seekstream.interfaces.seekable_stream import (
    READ_ERROR,
    SeekableStream,
    SeekOrigin,
    StreamError,
    StreamStatus,
)

from .state import StreamState, check_read_request, check_seek_request

__all__ = ["FileInputStream"]

logger = logging.getLogger(__name__)


class FileInputStream(SeekableStream):
    """Seekable stream over one file on the local filesystem.

    Build instances with `from_path()`; the constructor trusts its arguments.

    Thread-safety
    -------------
    None. The handle and state belong to this instance alone; open a second
    instance over the same path for an independent offset.
    """

    def __init__(
        self,
        path: str | os.PathLike[str],
        length: int,
        *,
        settings: StreamSettings | None = None,
    ) -> None:
        self._path = os.fspath(path)
        self._length = length
        self._settings = settings if settings is not None else StreamSettings()
        self._handle: io.FileIO | None = None
        self._state = StreamState()

    @classmethod
    def from_path(
        cls,
        path: str | os.PathLike[str],
        settings: StreamSettings | None = None,
    ) -> FileInputStream | None:
        """Validate ``path`` and capture its size.

        Args:
            path: Path to a regular file.
            settings: Stream policy. Defaults to `load_settings()`.

        Returns:
            A ``NOT_OPEN`` stream, or ``None`` if the file does not exist, is
            not a regular file, its size cannot be determined, or ``settings``
            is omitted and the environment holds an invalid SEEKSTREAM_* value.
        """
        file_path = os.fspath(path)

        if not os.path.exists(file_path):
            logger.warning("File not found: %s", file_path)
            return None

        try:
            attributes = os.stat(file_path)
        except OSError as e:
            logger.warning("Cannot retrieve attributes of %s (%s)", file_path, e)
            return None

        if not stat.S_ISREG(attributes.st_mode):
            logger.warning("Not a regular file: %s", file_path)
            return None

        size = attributes.st_size
        if not isinstance(size, int) or size < 0:
            logger.warning("Unusable size attribute %r for %s", size, file_path)
            return None

        if settings is None:
            try:
                settings = load_settings()
            except InvalidSettingError as e:
                logger.warning("Cannot build a stream for %s: %s", file_path, e)
                return None
        return cls(file_path, size, settings=settings)

    # ---- SeekableStream ----

    @property
    def path(self) -> str:
        """Filesystem path the stream reads, as given to `from_path()`."""
        return self._path

    @property
    def length(self) -> int:
        return self._length

    @property
    def offset(self) -> int:
        if self._handle is None:
            return 0
        return self._handle.tell()

    @property
    def status(self) -> StreamStatus:
        return self._state.status

    @property
    def error(self) -> StreamError | None:
        return self._state.error

    def open(self) -> None:
        if self._handle is not None:
            return
        if not self._state.can_open:
            logger.warning(
                "Not reopening %s stream for %s", self._state.status.name, self._path
            )
            return

        try:
            self._handle = io.FileIO(self._path, "r")
        except OSError as e:
            logger.warning("Cannot open %s for reading (%s)", self._path, e)
            if self._settings.strict_open:
                self._state.fail(StreamError.HANDLE_INIT_FAILED)
                return
            # deferred: reads and seeks will report HANDLE_UNSET

        self._state.mark_open()

    def close(self) -> None:
        if self._handle is None:
            return
        handle, self._handle = self._handle, None
        handle.close()
        self._state.mark_closed()

    def read(self, buffer: bytearray | memoryview, max_length: int) -> int:
        view = check_read_request(buffer, max_length)
        if self._handle is None:
            self._state.fail(StreamError.HANDLE_UNSET)
            return READ_ERROR

        try:
            if self._settings.fill_reads:
                count = self._read_fully(self._handle, view)
            else:
                count = self._handle.readinto(view) or 0
        except OSError as e:
            logger.error(
                "Read of %d bytes from %s failed (%s)", max_length, self._path, e
            )
            self._state.fail(StreamError.READ_FAILED)
            return READ_ERROR

        if count < max_length:
            self._state.mark_at_end()
        return count

    def seek(
        self, offset: int, whence: SeekOrigin = SeekOrigin.START_OF_STREAM
    ) -> None:
        check_seek_request(offset, whence)

        logger.debug("FileInputStream %s offset %d", self._path, offset)
        if self._handle is None:
            self._state.fail(StreamError.HANDLE_UNSET)
            return
        try:
            self._handle.seek(offset, os.SEEK_SET)
        except OSError as e:
            logger.error("Seek to %d in %s failed (%s)", offset, self._path, e)
            self._state.fail(StreamError.READ_FAILED)

    # ---- Internal helpers ----

    @staticmethod
    def _read_fully(handle: io.FileIO, view: memoryview) -> int:
        """Fill ``view`` from ``handle`` until it is full or the file ends."""
        total = 0
        while total < len(view):
            count = handle.readinto(view[total:])
            if not count:
                break
            total += count
        return total

    def __del__(self) -> None:
        handle = getattr(self, "_handle", None)
        if handle is not None:
            handle.close()

    def __repr__(self) -> str:
        return (
            f"FileInputStream(path={self._path!r}, length={self._length}, "
            f"status={self._state.status.name})"
        )
