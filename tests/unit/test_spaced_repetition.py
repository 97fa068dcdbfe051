"""
Unit tests for day-granularity spaced repetition.
"""

from datetime import datetime, timedelta

import pytest

from wordquest.core.models import Difficulty, Word
from wordquest.study.spaced_repetition import EnhancedSpacedRepetition

NOW = datetime(2024, 3, 1, 9, 0)


class TestIntervals:
    @pytest.mark.parametrize(
        "difficulty,accuracy,expected",
        [
            (Difficulty.EASY, 95.0, 7.5),
            (Difficulty.MEDIUM, 75.0, 4.0),
            (Difficulty.HARD, 50.0, 1.5),
        ],
    )
    def test_correct_answers(self, difficulty, accuracy, expected):
        days = EnhancedSpacedRepetition.interval_days(difficulty, True, 0, accuracy)
        assert days == pytest.approx(expected)

    def test_incorrect_clamped_to_one_day(self):
        assert EnhancedSpacedRepetition.interval_days(Difficulty.HARD, False) == pytest.approx(1.0)
        assert EnhancedSpacedRepetition.interval_days(Difficulty.EASY, False) == pytest.approx(1.5)

    def test_attempts_shorten_interval(self):
        assert EnhancedSpacedRepetition.interval_days(Difficulty.EASY, True, 3, 95.0) == pytest.approx(5.25)

    def test_attempt_multiplier_floor(self):
        assert EnhancedSpacedRepetition.interval_days(Difficulty.EASY, True, 10, 95.0) == pytest.approx(3.75)


class TestNextReviewDate:
    def test_adds_fractional_days(self):
        word = Word(id=1, text="cat", category="animals", difficulty=Difficulty.EASY)

        review_at = EnhancedSpacedRepetition.next_review_date(word, True, 0, 95.0, now=NOW)

        assert review_at == NOW + timedelta(days=7, hours=12)


class TestShouldReviewToday:
    def test_due(self):
        assert EnhancedSpacedRepetition.should_review_today(
            NOW - timedelta(days=3), NOW - timedelta(minutes=1), 90.0, now=NOW
        )

    def test_low_accuracy_reviewed_early(self):
        assert EnhancedSpacedRepetition.should_review_today(
            NOW - timedelta(days=2), NOW + timedelta(days=3), 50.0, now=NOW
        )

    def test_low_accuracy_waits_a_day(self):
        assert not EnhancedSpacedRepetition.should_review_today(
            NOW - timedelta(hours=12), NOW + timedelta(days=3), 50.0, now=NOW
        )

    def test_not_due(self):
        assert not EnhancedSpacedRepetition.should_review_today(
            NOW - timedelta(days=3), NOW + timedelta(days=1), 80.0, now=NOW
        )
