"""SEEKSTREAM stream commands.

Thin wrappers over `FileInputStream` for inspecting files from a shell.

Behavior
- ``stat`` builds a stream (no handle is opened) and prints its length.
- ``dump`` opens the stream, seeks to ``--offset`` and reads up to ``--count``
  bytes in ``--chunk-size`` reads, writing raw bytes (or a hex dump with
  ``--hex``) to **stdout**. Notices go to **stderr**.
- ``check`` reads the file end to end under the active policy and prints a
  short report (length, bytes read, final status). Exits 1 on ``ERROR``.

Failure modes
- Missing path, non-regular file, or unreadable metadata → ``ClickException``
  (``check`` prints an error line and exits 1).
- Stream enters ``ERROR`` on open/seek/read → ``ClickException`` naming the
  `StreamError`.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from seekstream.adapters.stream import FileInputStream
from seekstream.interfaces.seekable_stream import READ_ERROR, StreamStatus

from .helpers import error, hexdump_lines, success, warn

if TYPE_CHECKING:
    from seekstream.config import StreamSettings
    from seekstream.interfaces.seekable_stream import SeekableStream

DEFAULT_CHUNK_SIZE = 64 * 1024

CANNOT_OPEN_MSG = (
    "Cannot open {path}: it does not exist, is not a regular file, "
    "or its size cannot be read."
)
STREAM_FAILED_MSG = "Cannot read {path}: stream entered ERROR ({error})."


def _build_stream(path: Path, settings: StreamSettings) -> FileInputStream:
    stream = FileInputStream.from_path(path, settings=settings)
    if stream is None:
        raise click.ClickException(CANNOT_OPEN_MSG.format(path=path))
    return stream


def _failure(stream: SeekableStream, path: Path) -> click.ClickException:
    reason = stream.error.value if stream.error is not None else "unknown"
    return click.ClickException(STREAM_FAILED_MSG.format(path=path, error=reason))


@click.command()
@click.argument("path", type=click.Path(path_type=Path))
@click.pass_obj
def stat(settings: StreamSettings, path: Path) -> None:
    """Print the size in bytes of PATH, as captured by a stream."""
    stream = _build_stream(path, settings)
    click.echo(stream.length)


@click.command()
@click.argument("path", type=click.Path(path_type=Path))
@click.option(
    "--offset",
    type=click.IntRange(min=0),
    default=0,
    show_default=True,
    help="Absolute byte offset to seek to before reading.",
)
@click.option(
    "--count",
    type=click.IntRange(min=0),
    default=None,
    help="Number of bytes to read. Defaults to everything after --offset.",
)
@click.option(
    "--hex",
    "as_hex",
    is_flag=True,
    help="Write a hex dump instead of raw bytes.",
)
@click.option(
    "--chunk-size",
    type=click.IntRange(min=1),
    default=DEFAULT_CHUNK_SIZE,
    show_default=True,
    hidden=True,
    help="Bytes requested per read call.",
)
@click.pass_obj
def dump(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    settings: StreamSettings,
    path: Path,
    offset: int,
    count: int | None,
    as_hex: bool,
    chunk_size: int,
) -> None:
    """Dump a byte range of PATH to stdout."""
    stream = _build_stream(path, settings)
    if offset > stream.length:
        warn(f"Offset {offset} is past the end of {path} ({stream.length} bytes).")

    remaining = count if count is not None else max(stream.length - offset, 0)
    out = click.get_binary_stream("stdout")
    buffer = bytearray(min(chunk_size, remaining) or 1)
    position = offset

    with stream:
        if stream.status is StreamStatus.ERROR:
            raise _failure(stream, path)
        stream.seek(offset)
        if stream.status is StreamStatus.ERROR:
            raise _failure(stream, path)

        while remaining > 0:
            read = stream.read(buffer, min(len(buffer), remaining))
            if read == READ_ERROR:
                raise _failure(stream, path)
            chunk = bytes(buffer[:read])
            if as_hex:
                for line in hexdump_lines(chunk, start=position):
                    click.echo(line)
            else:
                out.write(chunk)
            position += read
            remaining -= read
            if stream.status is StreamStatus.AT_END:
                break

    if remaining > 0 and count is not None:
        warn(f"Reached end of {path} after {position - offset} of {count} bytes.")


@click.command()
@click.argument("path", type=click.Path(path_type=Path))
@click.option(
    "--chunk-size",
    type=click.IntRange(min=1),
    default=DEFAULT_CHUNK_SIZE,
    show_default=True,
    hidden=True,
    help="Bytes requested per read call.",
)
@click.pass_context
def check(ctx: click.Context, path: Path, chunk_size: int) -> None:
    """Read PATH from start to end and report how the stream behaved."""
    settings: StreamSettings = ctx.obj
    stream = FileInputStream.from_path(path, settings=settings)
    if stream is None:
        error(CANNOT_OPEN_MSG.format(path=path))
        ctx.exit(1)

    buffer = bytearray(chunk_size)
    total = 0
    with stream:
        while stream.status is StreamStatus.OPEN:
            read = stream.read(buffer, chunk_size)
            if read == READ_ERROR:
                break
            total += read
        final_status = stream.status
        final_error = stream.error

    if final_error is None and total == stream.length:
        success("Stream readable")
    elif final_error is None:
        warn(f"Read {total} bytes, expected {stream.length}")
    else:
        error(f"Stream entered ERROR ({final_error.value})")
    click.echo(f"Path   : {path}")
    click.echo(f"Length : {stream.length}")
    click.echo(f"Read   : {total}")
    click.echo(f"Status : {final_status.name}")
    click.echo(
        f"Policy : strict_open={settings.strict_open}, fill_reads={settings.fill_reads}"
    )
    if final_error is not None:
        ctx.exit(1)
