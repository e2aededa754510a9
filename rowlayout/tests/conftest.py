"""
Shared pytest fixtures for RowLayout tests

Supports both development mode (pytest from the repo root) and installed
mode (pip install -e .)
"""
import pytest
import json
import sys
from pathlib import Path

# Repository root on sys.path for development mode (not needed once installed)
#   repo root/rowlayout/tests/conftest.py
REPO_ROOT = Path(__file__).parent.parent.parent
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from rowlayout import LayoutConfig, LayoutSpec, RowLayoutEngine  # noqa: E402


@pytest.fixture
def config() -> LayoutConfig:
    """Default policy: 20 px item gap, 20 px row gap, 30 px items"""
    return LayoutConfig()


@pytest.fixture
def engine(config) -> RowLayoutEngine:
    return RowLayoutEngine(config)


@pytest.fixture
def scenario_spec() -> LayoutSpec:
    """Single right-aligned row [small, normal, normal]"""
    return LayoutSpec.from_rows('right', [['small', 'normal', 'normal']])


@pytest.fixture
def demo_spec() -> LayoutSpec:
    """Same rows as the bundled demo spec file"""
    return LayoutSpec.from_rows('right', [
        ['small', 'normal', 'normal'],
        ['small', 'small', 'small', 'small'],
        ['small', 'normal', 'small'],
        ['normal'],
    ])


@pytest.fixture
def write_spec(tmp_path):
    """Write a spec dict as JSON and return its path"""
    def _write(data, name="spec.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path
    return _write


# Pytest configuration
def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests for individual functions"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests running the command-line subcommands"
    )
