"""CLI helpers for SEEKSTREAM.

Utilities used by the command-line interface: message emitters that write to
stderr with emoji→ASCII fallbacks, a hex-dump formatter, and the NAME=LEVEL
logger option parser.
"""

from .hexdump import hexdump_lines
from .messages import error, success, warn

__all__ = ["error", "hexdump_lines", "success", "warn"]
