"""
Word History Store.

Applies one answered word to a caller-owned history map:
- Streak: +1 on a correct answer, reset to 0 on any incorrect answer
- Accuracy: running mean where correct = 100 and incorrect = 0
- Cooldown: hours from study.cooldown, stored as nextEligibleTime

The map is the only state the scheduler mutates, and only for the
answered word's key. Callers serialize access per user.
"""

from __future__ import annotations

from dataclasses import replace

from loguru import logger

from wordquest.core.clock import HOUR_MS, Clock, current_millis
from wordquest.core.models import WordHistory
from wordquest.core.scheduler_config import SchedulerConfig
from wordquest.delivery.word_catalog import WordCatalog
from wordquest.study.cooldown import CooldownCalculator

HistoryMap = dict[int, WordHistory]


def running_accuracy(previous: float, times_shown: int, was_correct: bool) -> float:
    """
    Fold one answer into a running accuracy mean.

    Args:
        previous: Accuracy over the first ``times_shown`` answers (0-100)
        times_shown: Answers already folded into ``previous``
        was_correct: The new answer

    Returns:
        Mean over ``times_shown + 1`` answers, clamped to [0, 100]
    """
    total = previous * times_shown + (100.0 if was_correct else 0.0)
    mean = total / (times_shown + 1)
    return max(0.0, min(100.0, mean))


class WordHistoryStore:
    """
    Updates per-word scheduling state after each answer.

    Holds no history itself; every call receives the user's history map.
    """

    def __init__(
        self,
        catalog: WordCatalog,
        config: SchedulerConfig | None = None,
        clock: Clock = current_millis,
    ):
        """
        Initialize the store.

        Args:
            catalog: Catalog used to validate word ids
            config: Cooldown configuration
            clock: Epoch-millisecond clock
        """
        self.catalog = catalog
        self.config = config or SchedulerConfig()
        self.cooldowns = CooldownCalculator(self.config)
        self.clock = clock

    def update(self, word_id: int, was_correct: bool, history: HistoryMap) -> WordHistory:
        """
        Record an answer and reschedule the word.

        Args:
            word_id: The answered word
            was_correct: Whether the answer was correct
            history: The user's history map, updated in place

        Returns:
            The new WordHistory (also stored under ``word_id``)

        Raises:
            NotFoundError: if ``word_id`` is not in the catalog
        """
        word = self.catalog.get(word_id)
        now = self.clock()

        existing = history.get(word_id) or WordHistory.empty(word)

        consecutive_correct = existing.consecutive_correct + 1 if was_correct else 0
        average_accuracy = running_accuracy(
            existing.average_accuracy, existing.times_shown, was_correct
        )
        times_shown = existing.times_shown + 1

        hours = self.cooldowns.hours_for(
            word,
            was_correct,
            consecutive_correct,
            average_accuracy,
            times_shown,
        )

        updated = replace(
            existing,
            last_seen=now,
            times_shown=times_shown,
            consecutive_correct=consecutive_correct,
            average_accuracy=average_accuracy,
            next_eligible_time=now + round(hours * HOUR_MS),
        )
        history[word_id] = updated

        logger.debug(
            f"Word {word.text}: correct={was_correct}, streak={consecutive_correct}, "
            f"accuracy={average_accuracy:.1f}, cooldown={hours:.1f}h"
        )

        return updated
