from __future__ import annotations

import random

import pytest
from hypothesis import settings

from jaro_winkler.utils.settings import clear_settings_cache as _clear_settings_cache

# ---- Deterministic Testing Configuration ---------------------

DETERMINISTIC_SEED = 42


@pytest.fixture(autouse=True)
def set_deterministic_seed():
    """Set deterministic seed for all tests"""
    random.seed(DETERMINISTIC_SEED)
    yield
    random.seed()


@pytest.fixture
def clear_settings_cache():
    """Drop cached settings before and after a test."""
    _clear_settings_cache()
    yield
    _clear_settings_cache()


# Hypothesis settings for all property-based tests
settings.register_profile(
    "deterministic",
    deadline=None,
    max_examples=200,
    derandomize=False,
    database=None,
)
settings.load_profile("deterministic")
