"""
Pytest configuration and shared fixtures for merkle_core tests.

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

# =============================================================================
# Imports (after path setup)
# =============================================================================

import importlib

_common = importlib.import_module("fixtures.common")

CountingHash = _common.CountingHash

from merkle_core.config.runtime import set_default_config
from merkle_core.crypto.hashing import sha256
from merkle_core.merkle.merkle_tree import MerkleTree


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture
def hello_world_leaves():
    """sha256("hello"), sha256("world")."""
    return [sha256(b"hello"), sha256(b"world")]


@pytest.fixture
def hello_world_tree(hello_world_leaves):
    """Two-leaf tree over the hello/world vectors."""
    return MerkleTree(hello_world_leaves, sha256)


@pytest.fixture
def uneven_leaves():
    """sha256("hello"), sha256("world"), sha256("foo")."""
    return [sha256(b"hello"), sha256(b"world"), sha256(b"foo")]


@pytest.fixture
def uneven_tree(uneven_leaves):
    """Three-leaf tree; the third leaf is carried up at layer 0."""
    return MerkleTree(uneven_leaves, sha256)


@pytest.fixture
def counting_hash():
    """A sha256 spy recording every call."""
    return CountingHash(sha256)


@pytest.fixture(autouse=True)
def reset_default_config():
    """Keep the process-wide default config from leaking between tests."""
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
