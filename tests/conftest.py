"""
Pytest Configuration and Fixtures.

This file configures pytest and provides shared fixtures for all tests.
"""
import random
import sys
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from wordquest.core.clock import HOUR_MS
from wordquest.core.models import Difficulty, UserProgress, Word, WordHistory
from wordquest.delivery.word_catalog import WordCatalog

# 2023-11-14T22:13:20Z
NOW_MS = 1_700_000_000_000


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests (scheduler + JSON files)")
    config.addinivalue_line("markers", "smoke: Smoke tests for CLI commands")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        # Mark based on test file location
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
        elif "smoke" in str(item.fspath):
            item.add_marker(pytest.mark.smoke)


class FrozenClock:
    """Epoch-millisecond clock that only moves when told to."""

    def __init__(self, start: int = NOW_MS):
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance_hours(self, hours: float) -> None:
        self.now += round(hours * HOUR_MS)


# id, text, category, difficulty
SMALL_CATALOG = [
    (1, "cat", "animals", Difficulty.EASY),
    (2, "dog", "animals", Difficulty.EASY),
    (3, "fish", "animals", Difficulty.EASY),
    (4, "zebra", "animals", Difficulty.MEDIUM),
    (5, "giraffe", "animals", Difficulty.MEDIUM),
    (6, "octopus", "animals", Difficulty.MEDIUM),
    (7, "apple", "food", Difficulty.EASY),
    (8, "bread", "food", Difficulty.MEDIUM),
    (9, "avocado", "food", Difficulty.HARD),
    (10, "quinoa", "food", Difficulty.HARD),
    (11, "comet", "space", Difficulty.HARD),
    (12, "nebula", "space", Difficulty.HARD),
]


@pytest.fixture(scope="session")
def project_root():
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def catalog():
    """Twelve words: animals (6), food (4), space (2)."""
    return WordCatalog.from_words(
        Word(id=i, text=text, category=category, difficulty=difficulty)
        for i, text, category, difficulty in SMALL_CATALOG
    )


@pytest.fixture
def clock():
    """Frozen clock starting at NOW_MS."""
    return FrozenClock()


@pytest.fixture
def rng():
    """Seeded random source."""
    return random.Random(42)


@pytest.fixture
def progress():
    """Empty learning sets."""
    return UserProgress()


@pytest.fixture
def make_history():
    """Factory for WordHistory records relative to NOW_MS."""

    def _make(
        word: Word,
        seen_hours_ago: float = 24.0,
        eligible_in_hours: float = -1.0,
        times_shown: int = 1,
        consecutive_correct: int = 0,
        average_accuracy: float = 0.0,
    ) -> WordHistory:
        return WordHistory(
            word_id=word.id,
            last_seen=NOW_MS - round(seen_hours_ago * HOUR_MS),
            times_shown=times_shown,
            consecutive_correct=consecutive_correct,
            average_accuracy=average_accuracy,
            next_eligible_time=NOW_MS + round(eligible_in_hours * HOUR_MS),
            category=word.category,
            difficulty=word.difficulty,
        )

    return _make
