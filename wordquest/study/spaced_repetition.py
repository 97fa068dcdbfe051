"""
Enhanced Spaced Repetition (day granularity).

Longer-horizon alternative to the hour-based cooldown:

    base days:   easy 3, medium 2, hard 1
    multiplier:  correct -> 2.5 (accuracy >= 90), 2.0 (>= 70), 1.5 (otherwise)
                 incorrect -> 0.5
    attempts:    max(0.5, 1 - attempts * 0.1)
    interval:    clamp(base * multiplier * attempts, 1, 30) days

Low-accuracy words (< 60%) may be reviewed early, once a full day has
passed since the last review.
"""

from __future__ import annotations

from datetime import datetime, timedelta

from wordquest.core.models import Difficulty, Word

BASE_INTERVAL_DAYS = {
    Difficulty.EASY: 3.0,
    Difficulty.MEDIUM: 2.0,
    Difficulty.HARD: 1.0,
}

MIN_INTERVAL_DAYS = 1.0
MAX_INTERVAL_DAYS = 30.0
EARLY_REVIEW_ACCURACY = 60.0


class EnhancedSpacedRepetition:
    """Next-review-date calculator with day-granularity intervals."""

    @staticmethod
    def interval_days(
        difficulty: Difficulty,
        was_correct: bool,
        previous_attempts: int = 0,
        previous_accuracy: float = 0.0,
    ) -> float:
        """Review interval in days, clamped to [1, 30]."""
        base = BASE_INTERVAL_DAYS[difficulty]

        if was_correct:
            if previous_accuracy >= 90:
                multiplier = 2.5  # Strong memory
            elif previous_accuracy >= 70:
                multiplier = 2.0
            else:
                multiplier = 1.5
        else:
            multiplier = 0.5

        attempt_multiplier = max(0.5, 1 - previous_attempts * 0.1)

        interval = base * multiplier * attempt_multiplier
        return max(MIN_INTERVAL_DAYS, min(MAX_INTERVAL_DAYS, interval))

    @classmethod
    def next_review_date(
        cls,
        word: Word,
        was_correct: bool,
        previous_attempts: int = 0,
        previous_accuracy: float = 0.0,
        now: datetime | None = None,
    ) -> datetime:
        """
        Calculate the next review date for a word.

        Args:
            word: The answered word
            was_correct: Whether the answer was correct
            previous_attempts: Earlier attempts on this word
            previous_accuracy: Accuracy over earlier attempts (0-100)
            now: Reference time (defaults to the current time)

        Returns:
            now + interval days
        """
        now = now or datetime.now()
        days = cls.interval_days(word.difficulty, was_correct, previous_attempts, previous_accuracy)
        return now + timedelta(days=days)

    @staticmethod
    def should_review_today(
        last_review: datetime,
        next_review: datetime,
        accuracy: float,
        now: datetime | None = None,
    ) -> bool:
        """
        Decide whether a word is due.

        Due when the next review date has passed, or early when accuracy is
        below 60% and at least one whole day has elapsed since the last review.
        """
        now = now or datetime.now()

        if now >= next_review:
            return True

        days_since_review = (now - last_review).days
        return accuracy < EARLY_REVIEW_ACCURACY and days_since_review >= 1
