"""
Shared fixtures for Soulscape tests
"""

import pytest

from soulscape.config.settings import reset_config
from soulscape.config.tables import default_tables


class FixedPolarity:
    """Polarity source returning a fixed value and recording calls"""

    def __init__(self, value: int = 0):
        self.value = value
        self.calls = []

    def __call__(self, text: str) -> int:
        self.calls.append(text)
        return self.value


@pytest.fixture
def neutral_polarity():
    """Polarity source that always returns 0"""
    return FixedPolarity(0)


@pytest.fixture
def polarity_factory():
    """Build a polarity source for a given value"""
    return FixedPolarity


@pytest.fixture
def tables():
    """Built-in emotion tables"""
    return default_tables()


@pytest.fixture(autouse=True)
def clean_config():
    """Drop cached configuration between tests"""
    reset_config()
    yield
    reset_config()
