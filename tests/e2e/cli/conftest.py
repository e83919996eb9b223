"""Fixtures for end-to-end CLI tests.

`log-demo` is a test-only subcommand that logs a short, fixed story at every
level on ``seekstream.demo`` and on a foreign ``vendor.lib`` logger, so the
global logging options can be checked against known records.
"""

import logging

import click
import pytest
from click.testing import CliRunner

from seekstream.entrypoints.cli.main import seekstream

# pylint: disable=redefined-outer-name

DEMO_RECORDS = {
    "first_debug": "demo opened payload.bin",
    "info": "demo read 10 bytes",
    "warning": "demo short read at offset 7",
    "error": "demo read failed",
    "critical": "demo handle lost",
    "vendor_debug": "vendor chatter",
    "vendor_info": "vendor notice",
    "vendor_warning": "vendor complaint",
    "last_debug": "demo closed payload.bin",
}


@click.command()
def log_demo():
    """Log `DEMO_RECORDS` in order; the last DEBUG record follows every WARNING+."""
    demo = logging.getLogger("seekstream.demo")
    vendor = logging.getLogger("vendor.lib")
    demo.debug(DEMO_RECORDS["first_debug"])
    demo.info(DEMO_RECORDS["info"])
    demo.warning(DEMO_RECORDS["warning"])
    demo.error(DEMO_RECORDS["error"])
    demo.critical(DEMO_RECORDS["critical"])
    vendor.debug(DEMO_RECORDS["vendor_debug"])
    vendor.info(DEMO_RECORDS["vendor_info"])
    vendor.warning(DEMO_RECORDS["vendor_warning"])
    demo.debug(DEMO_RECORDS["last_debug"])


@pytest.fixture
def registered_log_demo():
    """Attach `log-demo` to `seekstream` for one test."""
    seekstream.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        seekstream.commands.pop("log-demo", None)
        # Click-Extra also files commands under help sections
        for section in [getattr(seekstream, "_default_section", None)] + list(
            getattr(seekstream, "_sections", [])
        ):
            if section is not None:
                getattr(section, "commands", {}).pop("log-demo", None)


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Run the test inside `runner.isolated_filesystem()`."""
    with runner.isolated_filesystem():
        yield
