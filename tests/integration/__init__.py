"""Integration tests.

`FileInputStream` against real files under ``tmp_path``: metadata capture,
open policies, partial and filled reads, seeking and handle release. OS
failures that cannot be provoked on demand are simulated by swapping the
handle or patching ``os.stat``.
"""
