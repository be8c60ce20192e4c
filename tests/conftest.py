"""Test configuration and fixtures."""
import pytest
import os
import sys
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from core.patterns import PatternDictionary, default_patterns


class FakeClock:
    """Manually advanced stand-in for time.monotonic."""

    def __init__(self, start: float = 100.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds


@pytest.fixture
def patterns():
    """The pattern table shipped with the application."""
    return default_patterns()


@pytest.fixture
def small_patterns():
    """A hand-written table with an ambiguous digraph and single kana."""
    return PatternDictionary({
        "しゃ": ["sya", "sha"],
        "し": ["si", "shi"],
        "ん": ["n", "nn"],
        "か": ["ka"],
    })


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "data" / "test.db")
