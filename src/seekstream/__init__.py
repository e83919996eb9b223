"""SEEKSTREAM

Seekable, bounded byte streams over finite resources. A small capability
interface (`SeekableStream`) with file- and memory-backed implementations,
meant to sit underneath archive and container readers that need random-access
reads into fixed-size buffers.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
