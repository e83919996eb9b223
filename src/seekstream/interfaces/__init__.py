"""Interfaces (application boundary) for SEEKSTREAM.

Defines framework-free contracts: ABCs, enums and small exceptions shared by
the adapters and by consumers of the streams. No I/O lives here.

Dependency rule: this package is independent; do not import from any
`seekstream.*` modules. It may be imported by `seekstream.adapters` and
`seekstream.entrypoints`.
"""
