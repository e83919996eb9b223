"""The `-L/--logger-level` callback.

Turns `NAME=LEVEL` items, given as repeated options or as one comma or space
separated `SEEKSTREAM_LOGGER_LEVELS` value, into a logger-name to level map.
"""

import logging
import re

import click

# Rich pulls in markdown-it, which logs at DEBUG while rendering help text.
DEFAULT_LIB_LEVELS = {"markdown_it": logging.WARNING}


def _normalize_items(value: str | list[str] | tuple[str, ...] | None) -> list[str]:
    """Flatten a string or sequence of strings on commas and whitespace.

    Repeatable Click options arrive as tuples; environment variables arrive as
    one plain string that may hold several comma/space-separated items.
    """
    if not value:
        return []
    chunks = [value] if isinstance(value, str) else list(value)
    return [item for chunk in chunks for item in re.split(r"[,\s]+", chunk) if item]


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...] | None,
) -> dict[str, int]:
    """Merge the given `NAME=LEVEL` overrides into `DEFAULT_LIB_LEVELS`.

    LEVEL is a stdlib level name in any case; when a name repeats, the last
    item wins.

    Raises:
        click.BadParameter: On an item without `=` or a name, or an unknown level.
    """
    levels = dict(DEFAULT_LIB_LEVELS)
    for item in _normalize_items(value):
        name, sep, level_str = item.partition("=")
        if not sep or not name.strip():
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}")
        lvl = logging.getLevelNamesMapping().get(level_str.strip().upper())
        if lvl is None:
            raise click.BadParameter(f"Invalid log level: {level_str}")
        levels[name.strip()] = lvl
    return levels
