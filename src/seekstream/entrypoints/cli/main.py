"""The ``seekstream`` command group.

Global options control logging (console verbosity, the flight recorder,
per-logger levels) and the stream policy handed to every subcommand. The
resolved `StreamSettings` travels to subcommands as ``ctx.obj``.

Subcommands live in `seekstream.entrypoints.cli.stream`:

- ``seekstream stat PATH``: size captured when a stream is built.
- ``seekstream dump PATH``: seek and dump a byte range (raw or ``--hex``).
- ``seekstream check PATH``: read a file end to end and report the outcome.

``--version`` is provided by Click-Extra from `seekstream.__version__`.
"""

import dataclasses
import logging
from pathlib import Path

import click
import click_extra as clickx
from platformdirs import user_log_dir

from seekstream import __version__
from seekstream.config import InvalidSettingError, StreamSettings, load_settings
from seekstream.logging import FlightRecorder, config_console_handler, log_startup

from .helpers.log_level_parser import parse_log_level
from .stream import check as check_command
from .stream import dump as dump_command
from .stream import stat as stat_command

logger = logging.getLogger(__name__)

DEFAULT_LOG_PATH = (
    Path(user_log_dir("seekstream", appauthor=False, ensure_exists=True)) / "latest.log"
)

HELP = """Inspect files through SEEKSTREAM's seekable input streams.

    Every subcommand opens, seeks and reads exactly the way a container or
    archive reader would, so what you see here is what such a reader gets.
    """

EPILOG = "\b\n" + "\n".join(
    [
        click.style("Examples:", fg="blue", bold=True, underline=True),
        "  seekstream stat archive.zip",
        "  seekstream dump archive.zip --offset 30 --count 64 --hex",
        "  seekstream --deferred-open check archive.zip",
        "  seekstream -vv -L seekstream.adapters=DEBUG dump archive.zip > copy.zip",
    ]
)


def console_level(verbose_count: int, quiet_count: int) -> int:
    """WARNING shifted one level per ``-q`` (up) or ``-v`` (down), clamped."""
    level = logging.WARNING + 10 * (quiet_count - verbose_count)
    return min(max(level, logging.DEBUG), logging.CRITICAL)


def resolve_settings(**flags: bool | None) -> StreamSettings:
    """Environment policy with explicitly given flags applied on top.

    Raises:
        click.ClickException: If a SEEKSTREAM_* variable is malformed.
    """
    try:
        settings = load_settings()
    except InvalidSettingError as e:
        raise click.ClickException(str(e)) from e
    given = {name: value for name, value in flags.items() if value is not None}
    return dataclasses.replace(settings, **given)


@clickx.extra_group(
    version=__version__,
    help=HELP,
    epilog=EPILOG,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "-v",
    "--verbose",
    "verbose_count",
    count=True,
    default=0,
    help="Show more on the console: INFO with -v, DEBUG with -vv.",
)
@click.option(
    "-q",
    "--quiet",
    "quiet_count",
    count=True,
    default=0,
    help="Show less on the console: ERROR with -q, CRITICAL with -qq.",
)
@click.option(
    "--debug/--no-debug",
    default=False,
    help="Log everything to the console with timestamps and source locations.",
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_LOG_PATH,
    envvar="SEEKSTREAM_LOG_PATH",
    show_default=True,
    show_envvar=True,
    help="File the flight recorder writes to.",
)
@click.option(
    "--flight-recorder-capacity",
    type=click.IntRange(min=1),
    default=2000,
    hidden=True,
    envvar="SEEKSTREAM_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Number of records the flight recorder keeps in memory.",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    default=True,
    show_envvar=True,
    help=(
        "Keep recent records at DEBUG in memory, whatever -v/-q say, and write "
        "them to --log-path as soon as a WARNING or worse is logged."
    ),
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    default=False,
    show_default=True,
    show_envvar=True,
    help="Also write the flight recorder buffer to --log-path on a clean exit.",
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    envvar="SEEKSTREAM_LOGGER_LEVELS",
    show_envvar=True,
    help=(
        "NAME=LEVEL: minimum level for one logger, applied to the console and "
        "the flight recorder alike. Repeat the option, or list several pairs "
        "separated by commas or spaces in SEEKSTREAM_LOGGER_LEVELS."
    ),
)
@click.option(
    "--strict-open/--deferred-open",
    "strict_open",
    default=None,
    allow_from_autoenv=False,
    help=(
        "Whether a file that cannot be opened fails at open (strict) or at the "
        "first read or seek (deferred). Falls back to SEEKSTREAM_STRICT_OPEN, "
        "then strict."
    ),
)
@click.option(
    "--fill-reads/--single-reads",
    "fill_reads",
    default=None,
    allow_from_autoenv=False,
    help=(
        "Whether each read loops until it has the requested bytes or hits end "
        "of file, or issues one OS read. Falls back to SEEKSTREAM_FILL_READS, "
        "then single reads."
    ),
)
@clickx.pass_context
def seekstream(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
    strict_open: bool | None,
    fill_reads: bool | None,
) -> None:
    """Set up logging and the stream policy, then run the subcommand."""
    level = console_level(verbose_count, quiet_count)

    handlers: list[logging.Handler] = [
        config_console_handler(level=level, debug_mode=debug, color=ctx.color is not False)
    ]
    if flight_recorder:
        handlers.append(
            FlightRecorder(
                log_path,
                capacity=flight_recorder_capacity,
                flush_on_close=force_flush_flight_recorder,
            )
        )

    # root takes everything; each handler applies its own threshold
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)
    ctx.call_on_close(logging.shutdown)

    ctx.obj = resolve_settings(strict_open=strict_open, fill_reads=fill_reads)
    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        logger_levels=logger_levels,
        settings=ctx.obj,
    )


seekstream.add_command(stat_command)
seekstream.add_command(dump_command)
seekstream.add_command(check_command)
