"""
Pytest configuration and shared fixtures for all diagnostics tests.
"""

import sys
import pytest
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
from ante.shared.cache import ModuleCache
from ante.shared.styling import Styling


# =============================================================================
# Session-scoped fixtures (shared across all tests)
# =============================================================================

@pytest.fixture(scope="session")
def no_color():
    """Styling values are immutable, so one instance serves every test."""
    return Styling.no_color()


@pytest.fixture(scope="session")
def colored():
    return Styling.colored()


# =============================================================================
# Function-scoped fixtures
# =============================================================================

@pytest.fixture
def cache():
    """Fresh module cache - type bindings are mutable state."""
    return ModuleCache()


@pytest.fixture
def write_source(tmp_path):
    """
    Factory writing a source file under tmp_path and returning its path.
    """
    def _write_source(text: str, name: str = "main.an") -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write_source


def pytest_configure(config):
    """Register custom markers for test organization."""
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
