"""Adapters (infrastructure) for SEEKSTREAM.

Provide concrete implementations of the interfaces in `seekstream.interfaces`
(e.g., file-backed and memory-backed seekable streams).

Dependency rule: may import `seekstream.interfaces` and `seekstream.config`;
the interfaces must not import this package.
"""
