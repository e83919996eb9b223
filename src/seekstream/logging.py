"""Logging setup for SEEKSTREAM.

Library modules only create module loggers (``logging.getLogger(__name__)``)
and never attach handlers. The CLI wires two handlers onto the root logger:

- a Rich console handler on stderr, filtered by the ``-v``/``-q`` level;
- a `FlightRecorder`, which keeps the most recent records at DEBUG in memory
  and writes them to a log file when something goes wrong (a WARNING or
  worse), or on exit when asked to.

Stdout is left alone so ``seekstream dump`` can write raw bytes to it.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from seekstream.config import StreamSettings

PROJECT_PREFIX = "seekstream"

CONSOLE_FORMAT = "%(prefix)s %(message)s"
DEBUG_CONSOLE_FORMAT = "%(asctime)s %(name)s: %(message)s"
RECORDER_FORMAT = (
    "[%(asctime)s] [%(process)d:%(threadName)s] "
    "%(levelname)s %(name)s:%(lineno)d: %(message)s"
)


class ThirdPartyPrefixFilter(logging.Filter):  # pylint: disable=too-few-public-methods
    """Tag records from other packages with ``[package]``.

    Sets ``record.prefix`` for `CONSOLE_FORMAT`: empty for SEEKSTREAM loggers,
    the top-level package name in brackets otherwise (``click_extra.x`` gives
    ``[click_extra]``). Never drops a record.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith(PROJECT_PREFIX):
            record.prefix = ""
        else:
            record.prefix = "[" + record.name.partition(".")[0] + "]"
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Build the stderr console handler.

    Args:
        level: Threshold for console output. Forced to DEBUG in debug mode.
        debug_mode: Show timestamps, logger names and source locations.
        color: Let Rich pick a colour system; ``False`` disables colour.

    Returns:
        RichHandler: Ready to attach to the root logger.
    """
    console = Console(stderr=True, color_system="auto" if color else None)
    handler = RichHandler(
        level=logging.DEBUG if debug_mode else level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    if debug_mode:
        handler.setFormatter(logging.Formatter(DEBUG_CONSOLE_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        handler.addFilter(ThirdPartyPrefixFilter())
    return handler


class FlightRecorder(MemoryHandler):
    """In-memory ring of recent records, dumped to ``path`` on trouble.

    Records are buffered until one at ``flush_level`` or above arrives, or the
    buffer holds ``capacity`` records; the buffer is then written to ``path``.
    With ``flush_on_close`` the remainder is also written when logging shuts
    down. The file is truncated once per run and only created on first write.
    """

    def __init__(
        self,
        path: str | os.PathLike[str],
        capacity: int = 2000,
        flush_level: int = logging.WARNING,
        flush_on_close: bool = False,
    ) -> None:
        self.path = Path(path)
        target = logging.FileHandler(self.path, mode="w", encoding="utf-8", delay=True)
        target.setLevel(logging.DEBUG)
        target.setFormatter(logging.Formatter(RECORDER_FORMAT))
        super().__init__(
            capacity,
            flushLevel=flush_level,
            target=target,
            flushOnClose=flush_on_close,
        )

    def __repr__(self) -> str:
        return (
            f"<FlightRecorder {self.path} capacity={self.capacity} "
            f"flush_on_close={self.flushOnClose}>"
        )


def _diagnostics(
    handlers: Iterable[logging.Handler],
    logger_levels: dict[str, int],
    settings: StreamSettings,
) -> Iterator[tuple[str, object]]:
    yield "Python", sys.version.split()[0]
    yield "Platform", f"{platform.system()} {platform.release()}"
    yield "PID", os.getpid()
    yield "CWD", Path.cwd()
    yield (
        "Stream policy",
        f"strict_open={settings.strict_open}, fill_reads={settings.fill_reads}",
    )
    handlers = list(handlers)
    yield "Handlers", [type(h).__name__ for h in handlers]
    for handler in handlers:
        if isinstance(handler, FlightRecorder):
            yield (
                "Flight recorder",
                f"path={handler.path}, capacity={handler.capacity}, "
                f"flush_on_close={handler.flushOnClose}",
            )
    overrides = {name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()}
    yield "Per-logger overrides", overrides or "<none>"


def log_startup(
    logger: logging.Logger,
    *,
    app_version: str,
    level: int,
    handlers: list[logging.Handler],
    logger_levels: dict[str, int],
    settings: StreamSettings,
) -> None:
    """Log a one-line INFO banner followed by DEBUG diagnostics.

    The banner names the version, the console level and whether a flight
    recorder is attached. The DEBUG lines cover the interpreter, platform,
    process, stream policy, handlers, recorder settings and per-logger
    overrides, so a flushed flight-recorder file is self-describing.
    """
    recording = any(isinstance(h, FlightRecorder) for h in handlers)
    logger.info(
        "SEEKSTREAM %s: console=%s, flight-recorder=%s",
        app_version,
        logging.getLevelName(level),
        "ON" if recording else "OFF",
    )
    for label, value in _diagnostics(handlers, logger_levels, settings):
        logger.debug("%s: %s", label, value)
