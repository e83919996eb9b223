"""Seekable stream backends."""

from .file import FileInputStream
from .memory import MemoryInputStream

__all__ = ["FileInputStream", "MemoryInputStream"]
