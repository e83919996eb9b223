"""Unit tests.

Each module targets one piece of ``seekstream`` on its own: the stream state
machine, the in-memory backend, settings parsing, logging helpers and the CLI
helpers. Nothing here touches the real filesystem except through ``tmp_path``.
"""
