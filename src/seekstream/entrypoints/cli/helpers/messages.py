"""Terminal message helpers for the SEEKSTREAM CLI.

Small helpers for rendering user-visible lines with emoji→ASCII fallbacks.
Messages write to stderr so stdout stays free for dumped bytes.
"""

import click

CAUTION = ("⚠️", "[!]")  # pragma: no mutate
SUCCESS = ("✅", "[OK]")  # pragma: no mutate
ERROR = ("❌", "[X]")  # pragma: no mutate


def _supports_character(character: str) -> bool:
    """Return True if *character* can be encoded on stderr.

    Terminals without UTF-8 would otherwise raise `UnicodeEncodeError`.
    """
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def glyph(choice: tuple[str, str]) -> str:
    """Pick the emoji of an ``(emoji, fallback)`` pair when stderr can encode it.

    Args:
        choice: One of `CAUTION`, `SUCCESS`, `ERROR`.

    Returns:
        str: The emoji, or its ASCII fallback (e.g. "[X]").
    """
    emoji, fallback = choice
    return emoji if _supports_character(emoji) else fallback


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to **stderr**.

    Example:
        ``⚠️  Requested range runs past the end of the file.``
    """
    click.secho(f"{glyph(CAUTION)}  {msg}", fg="yellow", bold=True, err=True)


def success(msg: str) -> None:
    """Emit a green, bold success line to **stderr**."""
    click.secho(f"{glyph(SUCCESS)}  {msg}", fg="green", bold=True, err=True)


def error(msg: str) -> None:
    """Emit a red, bold error line to **stderr**.

    Example:
        ``❌  Cannot read archive.zip: handle_unset``
    """
    click.secho(f"{glyph(ERROR)}  {msg}", fg="red", bold=True, err=True)
