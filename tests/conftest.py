"""Global pytest fixtures and layer marks for SEEKSTREAM."""

from __future__ import annotations

from pathlib import Path

import pytest

# pylint: disable=unused-argument

TESTS_ROOT = Path(__file__).parent.resolve()
LAYER_MARKERS = ("unit", "contract", "integration", "e2e")

SAMPLE_BYTES = b"0123456789"


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Mark each item with the layer it lives in (`tests/<layer>/...`)."""
    for item in items:
        try:
            relative = item.path.resolve().relative_to(TESTS_ROOT)
        except ValueError:
            continue
        layer = relative.parts[0]
        if layer not in LAYER_MARKERS:
            continue
        if not any(marker.name == layer for marker in item.iter_markers()):
            item.add_marker(getattr(pytest.mark, layer))


@pytest.fixture
def sample_bytes() -> bytes:
    """Ten-byte payload used by the end-to-end stream scenarios."""
    return SAMPLE_BYTES


@pytest.fixture
def sample_file(tmp_path: Path, sample_bytes: bytes) -> Path:
    """A regular file holding `sample_bytes`."""
    path = tmp_path / "sample.bin"
    path.write_bytes(sample_bytes)
    return path
