"""Configuration utilities for SEEKSTREAM.

This module centralizes the stream policy switches and the environment
variables that control them.

Environment variables:
    - ``SEEKSTREAM_STRICT_OPEN``: report a failed handle acquisition from
      ``open()`` immediately (default on). When off, ``open()`` marks the
      stream open and the failure surfaces on the next read/seek.
    - ``SEEKSTREAM_FILL_READS``: loop inside ``read()`` until the requested
      length or end of file is reached (default off).
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass

STRICT_OPEN_ENV = "SEEKSTREAM_STRICT_OPEN"  # pragma: no mutate
FILL_READS_ENV = "SEEKSTREAM_FILL_READS"  # pragma: no mutate

_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"0", "false", "no", "off"})


class InvalidSettingError(Exception):
    """Raised when a SEEKSTREAM_* environment variable holds an unusable value."""

    def __init__(self, name: str, value: str):
        super().__init__(
            f"{name}={value!r} is not a boolean (use one of "
            f"{', '.join(sorted(_TRUTHY | _FALSY))})."
        )
        self.name = name
        self.value = value


@dataclass(frozen=True)
class StreamSettings:
    """Policy switches shared by the stream adapters.

    Attributes:
        strict_open: If True, a failed handle acquisition in ``open()`` sets
            ``ERROR``/``HANDLE_INIT_FAILED``. If False, ``open()`` always
            reports ``OPEN`` and later calls see ``HANDLE_UNSET``.
        fill_reads: If True, ``read()`` keeps reading until ``max_length``
            bytes arrive or the end of file is hit, so a short read always
            means end of file. If False, ``read()`` issues a single OS read.
    """

    strict_open: bool = True
    fill_reads: bool = False


def _parse_bool(name: str, value: str | None, default: bool) -> bool:
    if value is None or not value.strip():
        return default
    normalized = value.strip().lower()
    if normalized in _TRUTHY:
        return True
    if normalized in _FALSY:
        return False
    raise InvalidSettingError(name, value)


def load_settings(environ: Mapping[str, str] | None = None) -> StreamSettings:
    """Build `StreamSettings` from the environment.

    Args:
        environ: Mapping to read variables from. Defaults to `os.environ`;
            override in tests.

    Returns:
        The settings, with defaults for unset or empty variables.

    Raises:
        InvalidSettingError: If a variable is set to a non-boolean value.
    """
    environ = os.environ if environ is None else environ
    return StreamSettings(
        strict_open=_parse_bool(
            STRICT_OPEN_ENV, environ.get(STRICT_OPEN_ENV), StreamSettings.strict_open
        ),
        fill_reads=_parse_bool(
            FILL_READS_ENV, environ.get(FILL_READS_ENV), StreamSettings.fill_reads
        ),
    )
