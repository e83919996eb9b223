"""Pytest fixtures for SeekableStream contract tests.

Provided fixtures
-----------------
- **make_stream**: Parametrized backend factory. Calling it with a payload
  returns a **fresh**, unopened `SeekableStream` over those bytes. Supports
  `"file"` (`FileInputStream` over a temp file) and `"memory"`
  (`MemoryInputStream`). To exercise another backend, add its key to the
  `params` list and branch in the fixture body.

- **stream**: A fresh stream over `sample_bytes` (``b"0123456789"``) from the
  same factory.
"""

from __future__ import annotations

import itertools
from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from seekstream.adapters.stream import FileInputStream, MemoryInputStream
from seekstream.config import StreamSettings

if TYPE_CHECKING:
    from seekstream.interfaces.seekable_stream import SeekableStream

# pylint: disable=redefined-outer-name

StreamFactory = Callable[[bytes], "SeekableStream"]


@pytest.fixture(params=["file", "memory"])
def make_stream(request: pytest.FixtureRequest, tmp_path: Path) -> StreamFactory:
    """Return a factory building unopened streams for the requested backend.

    Current params:
      - `"file"` → `FileInputStream` over a new file under `tmp_path`, with
        default `StreamSettings` (environment ignored).
      - `"memory"` → `MemoryInputStream`
    """
    counter = itertools.count()

    def _file(data: bytes) -> SeekableStream:
        path = tmp_path / f"payload-{next(counter)}.bin"
        path.write_bytes(data)
        stream = FileInputStream.from_path(path, settings=StreamSettings())
        assert stream is not None
        return stream

    match request.param:
        case "file":
            return _file
        case "memory":
            return MemoryInputStream
        case _:
            raise ValueError(f"unknown stream type: {request.param}")


@pytest.fixture
def stream(make_stream: StreamFactory, sample_bytes: bytes) -> SeekableStream:
    """Fresh, unopened stream over ``b"0123456789"``."""
    return make_stream(sample_bytes)
