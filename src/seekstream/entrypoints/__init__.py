"""Entrypoints (inbound adapters) for SEEKSTREAM.

Expose the streams to the outside world as CLI commands. Parse and validate
inputs, construct streams through the adapters, and present results.
"""
