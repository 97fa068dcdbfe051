"""
Word Cooldown Calculation.

Decides how long a word rests before it may reappear in a session.
Hour-granularity counterpart to the day-granularity scheduler in
spaced_repetition.py.

Formula:
    base = MIN_COOLDOWN * difficulty multiplier (easy 1, medium 1.5, hard 2)
    correct:   base *= 1 + streak * 0.5 + accuracy / 100
    incorrect: base *= 0.5
    shown more than 5 times: base *= 1.5
    clamped to [MIN_COOLDOWN, MAX_COOLDOWN]
"""

from __future__ import annotations

from wordquest.core.models import Word
from wordquest.core.scheduler_config import SchedulerConfig

STREAK_WEIGHT = 0.5
INCORRECT_FACTOR = 0.5
OVEREXPOSED_AFTER = 5
OVEREXPOSED_FACTOR = 1.5


def cooldown_hours(
    word: Word,
    was_correct: bool,
    consecutive_correct: int,
    average_accuracy: float,
    times_shown: int,
    config: SchedulerConfig | None = None,
) -> float:
    """
    Calculate the cooldown period for a word based on performance.

    Args:
        word: The answered word
        was_correct: Whether the latest answer was correct
        consecutive_correct: Streak including the latest answer
        average_accuracy: Running accuracy (0-100) including the latest answer
        times_shown: Exposures including the latest answer
        config: Cooldown bounds and difficulty multipliers

    Returns:
        Hours in [min_cooldown_hours, max_cooldown_hours]
    """
    config = config or SchedulerConfig()

    hours = config.min_cooldown_hours * config.difficulty_multipliers[word.difficulty]

    if was_correct:
        # Learned words rest longer
        hours *= 1 + consecutive_correct * STREAK_WEIGHT + average_accuracy / 100
    else:
        hours *= INCORRECT_FACTOR

    if times_shown > OVEREXPOSED_AFTER:
        hours *= OVEREXPOSED_FACTOR

    return max(config.min_cooldown_hours, min(config.max_cooldown_hours, hours))


class CooldownCalculator:
    """Cooldown policy bound to a SchedulerConfig."""

    def __init__(self, config: SchedulerConfig | None = None):
        self.config = config or SchedulerConfig()

    def hours_for(
        self,
        word: Word,
        was_correct: bool,
        consecutive_correct: int,
        average_accuracy: float,
        times_shown: int,
    ) -> float:
        return cooldown_hours(
            word,
            was_correct,
            consecutive_correct,
            average_accuracy,
            times_shown,
            config=self.config,
        )
