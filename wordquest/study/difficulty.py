"""
Session Difficulty.

- classify_session_difficulty: overall label for a finished word list
- DynamicDifficultyAdjuster: target difficulty and pacing from learner
  performance, used to post-process smart selections
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from wordquest.core.models import Difficulty, PerformanceStats, Word

HARD_SESSION_RATIO = 0.4
MEDIUM_SESSION_RATIO = 0.5
MEDIUM_SESSION_HARD_RATIO = 0.2


def classify_session_difficulty(words: Sequence[Word]) -> Difficulty:
    """
    Classify a session by its difficulty mix.

    hard if more than 40% hard words; medium if more than half are medium
    or more than 20% are hard; otherwise easy. An empty session is easy.
    """
    if not words:
        return Difficulty.EASY

    total = len(words)
    hard_ratio = sum(1 for w in words if w.difficulty is Difficulty.HARD) / total
    medium_ratio = sum(1 for w in words if w.difficulty is Difficulty.MEDIUM) / total

    if hard_ratio > HARD_SESSION_RATIO:
        return Difficulty.HARD
    if medium_ratio > MEDIUM_SESSION_RATIO or hard_ratio > MEDIUM_SESSION_HARD_RATIO:
        return Difficulty.MEDIUM
    return Difficulty.EASY


@dataclass(frozen=True)
class SessionPacing:
    """Pacing knobs for the presentation layer."""

    words_per_session: int
    allowed_mistakes: int
    seconds_per_word: int
    encouragement_frequency: int  # encourage every N words


DEFAULT_PACING = SessionPacing(10, 3, 30, 2)
ADVANCED_PACING = SessionPacing(15, 2, 25, 3)
INTERMEDIATE_PACING = SessionPacing(12, 3, 30, 2)
BEGINNER_PACING = SessionPacing(8, 4, 45, 1)


class DynamicDifficultyAdjuster:
    """
    Adjusts difficulty to recent performance.

    New learners (fewer than 5 sessions) always start easy. Above that,
    accuracy tiers unlock medium (>=75%) and hard (>=90% after 20+ sessions).
    """

    MIN_SESSIONS_FOR_PROGRESSION = 5
    HARD_AFTER_SESSIONS = 20
    KEEP_RATIO = 0.8

    @classmethod
    def optimal_difficulty(
        cls,
        stats: PerformanceStats | None,
        recent_accuracy: float | None = None,
    ) -> Difficulty:
        if stats is None and not recent_accuracy:
            return Difficulty.EASY

        accuracy = recent_accuracy or (stats.average_accuracy if stats else 0.0)
        sessions = stats.total_review_sessions if stats else 0

        if sessions < cls.MIN_SESSIONS_FOR_PROGRESSION:
            return Difficulty.EASY

        if accuracy >= 90:
            return Difficulty.HARD if sessions > cls.HARD_AFTER_SESSIONS else Difficulty.MEDIUM
        if accuracy >= 75:
            return Difficulty.MEDIUM
        return Difficulty.EASY

    @classmethod
    def adjust_selection(
        cls,
        words: Sequence[Word],
        stats: PerformanceStats | None,
    ) -> list[Word]:
        """
        Filter and order words toward the optimal difficulty.

        Keeps only easy words for an easy target, easy and medium for a
        medium target, and everything for a hard target. Falls back to the
        full list when the filter would drop more than 20% of it. Ordered
        easy-first, or hard-first for a hard target.
        """
        if stats is None:
            return list(words)

        target = cls.optimal_difficulty(stats)
        adjusted = [w for w in words if w.difficulty.rank <= target.rank]

        if len(adjusted) < math.ceil(len(words) * cls.KEEP_RATIO):
            adjusted = list(words)

        return sorted(
            adjusted,
            key=lambda w: w.difficulty.rank,
            reverse=target is Difficulty.HARD,
        )

    @staticmethod
    def session_pacing(stats: PerformanceStats | None) -> SessionPacing:
        if stats is None:
            return DEFAULT_PACING

        accuracy = stats.average_accuracy
        if accuracy >= 85 and stats.total_review_sessions > 15:
            return ADVANCED_PACING
        if accuracy >= 70:
            return INTERMEDIATE_PACING
        return BEGINNER_PACING
