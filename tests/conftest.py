"""
Pytest configuration and shared fixtures for merkletree tests.

This conftest.py:
1. Adds project root to sys.path for imports
2. Provides commonly-used fixtures via pytest's autodiscovery
3. Configures pytest markers and settings
"""

import sys
from pathlib import Path

import pytest

# =============================================================================
# Path Setup - Must happen before any local imports
# =============================================================================

_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_TESTS_ROOT = Path(__file__).resolve().parent

for _path in [str(_PROJECT_ROOT), str(_TESTS_ROOT)]:
    if _path not in sys.path:
        sys.path.insert(0, _path)

import importlib

_common = importlib.import_module("fixtures.common")

make_items = _common.make_items
make_abc_items = _common.make_abc_items
make_tree = _common.make_tree


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture
def abc_items():
    """Provide the three items A, B, C."""
    return make_abc_items()


@pytest.fixture
def abc_tree(abc_items):
    """Provide a default-config tree over A, B, C."""
    from merkletree.merkle import build_tree
    return build_tree(abc_items)


@pytest.fixture
def reset_default_config():
    """Reset the global default settings around a test."""
    from merkletree.config import set_default_config
    set_default_config(None)
    yield
    set_default_config(None)


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
