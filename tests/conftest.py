"""
Global pytest configuration and fixtures for terrain-path tests.
"""

from pathlib import Path

import numpy as np
import pytest

from terrain_path.config import HGT_DTYPE, SAMPLES_PER_SIDE

SIDE = SAMPLES_PER_SIDE


def write_tile(path: Path, samples: dict = None, fill: int = 0) -> Path:
    """Write a full-size SRTM-3 tile with ``samples`` {(row, col): value} set.

    ``row`` is the 0-based storage row (0 = northern edge).
    """
    grid = np.full((SIDE, SIDE), fill, dtype=HGT_DTYPE)
    for (row, col), value in (samples or {}).items():
        grid[row, col] = value
    grid.tofile(path)
    return path


def write_gradient_tile(path: Path, base: int = 0) -> Path:
    """Write a tile whose samples vary with position: base + row * 3 + col."""
    rows, cols = np.indices((SIDE, SIDE))
    grid = (base + rows * 3 + cols).astype(HGT_DTYPE)
    grid.tofile(path)
    return path


@pytest.fixture
def tile_dir(tmp_path) -> Path:
    """Empty directory to hold synthetic tiles."""
    d = tmp_path / "srtm"
    d.mkdir()
    return d


@pytest.fixture
def make_tile(tile_dir):
    """Factory writing a synthetic tile into ``tile_dir``."""

    def _make(name: str, samples: dict = None, fill: int = 0) -> Path:
        return write_tile(tile_dir / name, samples, fill)

    return _make


@pytest.fixture
def make_gradient_tile(tile_dir):
    """Factory writing a gradient tile into ``tile_dir``."""

    def _make(name: str, base: int = 0) -> Path:
        return write_gradient_tile(tile_dir / name, base)

    return _make


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch):
    """Keep a developer's HGT_DATA_DIR from leaking into tests."""
    monkeypatch.delenv("HGT_DATA_DIR", raising=False)


# Markers for different test types
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: fast unit tests (< 1s each)")
    config.addinivalue_line(
        "markers", "integration: tests that read synthetic tile files end to end"
    )


def pytest_collection_modifyitems(config, items):
    """Auto-mark tests based on location."""
    for item in items:
        path = Path(str(item.fspath)).as_posix()
        if "/unit/" in path:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path:
            item.add_marker(pytest.mark.integration)
