"""Pytest configuration and shared fixtures for ascent tests.

This module provides:
- A deterministic numpy RNG fixture and global numpy/torch seeding
- A fixture restoring debug mode after tests that toggle it
"""

import os

import numpy as np
import pytest
import torch

from ascent.diagnostics import is_debug_enabled, set_debug_enabled


def _seed() -> int:
    return int(os.environ.get("TEST_RNG_SEED", "0"))


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    """
    return np.random.default_rng(_seed())


@pytest.fixture(scope="function", autouse=True)
def set_random_seeds() -> None:
    """Set global random seeds for reproducibility before every test."""
    np.random.seed(_seed())
    torch.manual_seed(_seed())


@pytest.fixture
def debug_mode():
    """Enable debug mode for one test and restore the previous setting."""
    original = is_debug_enabled()
    set_debug_enabled(True)
    try:
        yield
    finally:
        set_debug_enabled(original)
