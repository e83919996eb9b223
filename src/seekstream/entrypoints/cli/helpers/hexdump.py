"""Hex-dump formatting for the ``dump --hex`` command."""

from collections.abc import Iterator

BYTES_PER_LINE = 16
HEX_WIDTH = BYTES_PER_LINE * 3 - 1


def _printable(byte: int) -> str:
    return chr(byte) if 0x20 <= byte < 0x7F else "."


def hexdump_lines(data: bytes, start: int = 0) -> Iterator[str]:
    """Yield ``hexdump -C`` style lines for ``data``.

    Args:
        data: Bytes to format.
        start: Absolute offset of ``data[0]``, printed in the address column.

    Yields:
        Address, hex column padded to a full line, then the printable
        characters between bars. No trailing newline.
    """
    for index in range(0, len(data), BYTES_PER_LINE):
        line = data[index : index + BYTES_PER_LINE]
        hex_part = " ".join(f"{b:02x}" for b in line)
        text_part = "".join(_printable(b) for b in line)
        yield f"{start + index:08x}  {hex_part:<{HEX_WIDTH}}  |{text_part}|"
