"""
Word Pool Selectors.

Five independent selection algorithms, each reading the catalog, the
user's history and progress, and returning an ordered list of words:

- FreshWordSelector: never-seen words, easiest first
- ForgottenWordSelector: forgotten words off cooldown, longest-unseen first
- RememberedWordSelector: remembered words off cooldown, least mastered first
- CrossCategorySelector: even share of fresh words across a category list
- AdaptiveDifficultySelector: difficulty mix sliced by accuracy tier

Excluded words are never returned by any selector.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from loguru import logger

from wordquest.core.models import (
    ALL_CATEGORIES,
    Difficulty,
    PerformanceStats,
    UserProgress,
    Word,
    WordHistory,
)
from wordquest.core.scheduler_config import SchedulerConfig
from wordquest.delivery.word_catalog import WordCatalog
from wordquest.study.distribution import share


@dataclass(frozen=True)
class PoolContext:
    """Everything a selector reads for one session request."""

    catalog: WordCatalog
    history: Mapping[int, WordHistory]
    progress: UserProgress
    now: int  # epoch ms
    stats: PerformanceStats | None = None

    def is_excluded(self, word_id: int) -> bool:
        return word_id in self.progress.excluded_word_ids

    def is_eligible(self, word_id: int) -> bool:
        """True if the word was never shown or its cooldown has expired."""
        entry = self.history.get(word_id)
        return entry is None or entry.is_eligible(self.now)

    def eligible_words(self, category: str) -> list[Word]:
        """Category words off cooldown and not excluded ("all" = whole catalog)."""
        return [
            w for w in self.catalog.by_category(category)
            if self.is_eligible(w.id) and not self.is_excluded(w.id)
        ]


class FreshWordSelector:
    """Never-seen words sorted easy -> medium -> hard."""

    def select(self, context: PoolContext, candidates: Sequence[Word], count: int) -> list[Word]:
        progress = context.progress
        fresh = [
            w for w in candidates
            if w.id not in context.history
            and not progress.is_known(w.id)
            and not context.is_excluded(w.id)
        ]
        fresh.sort(key=lambda w: w.difficulty.rank)
        return fresh[:count]


class ForgottenWordSelector:
    """
    Forgotten words whose cooldown has passed.

    Longest-unseen words come first. When the learner's weakest categories
    are known, words from those categories (in that order) lead the list.
    """

    def select(
        self,
        context: PoolContext,
        candidates: Sequence[Word],
        count: int | None = None,
    ) -> list[Word]:
        forgotten = [
            w for w in candidates
            if w.id in context.progress.forgotten_words
            and w.id in context.history
            and context.is_eligible(w.id)
            and not context.is_excluded(w.id)
        ]
        forgotten.sort(key=lambda w: context.history[w.id].last_seen)

        stats = context.stats
        if stats and stats.weakest_categories:
            weakest = list(stats.weakest_categories)
            forgotten.sort(
                key=lambda w: weakest.index(w.category) if w.category in weakest else len(weakest)
            )

        return forgotten if count is None else forgotten[:count]


class RememberedWordSelector:
    """
    Remembered words whose cooldown has passed.

    Ordered by mastery score (streak x accuracy), lowest first, so fragile
    words are reinforced before deeply mastered ones.
    """

    def select(
        self,
        context: PoolContext,
        candidates: Sequence[Word],
        count: int | None = None,
    ) -> list[Word]:
        remembered = [
            w for w in candidates
            if w.id in context.progress.remembered_words
            and w.id in context.history
            and context.is_eligible(w.id)
            and not context.is_excluded(w.id)
        ]
        remembered.sort(key=lambda w: context.history[w.id].mastery_score)
        return remembered if count is None else remembered[:count]


class CrossCategorySelector:
    """
    Fresh words spread evenly over a fixed category list.

    Each category contributes up to ``count // len(categories)`` fresh
    words; any shortfall is backfilled from eligible words anywhere in the
    catalog.
    """

    def __init__(self, config: SchedulerConfig | None = None, fresh: FreshWordSelector | None = None):
        self.config = config or SchedulerConfig()
        self.fresh = fresh or FreshWordSelector()

    def select(self, context: PoolContext, count: int) -> list[Word]:
        categories = self.config.cross_categories
        per_category = count // len(categories) if categories else 0

        selected: list[Word] = []
        for category in categories:
            selected.extend(
                self.fresh.select(context, context.eligible_words(category), per_category)
            )

        if len(selected) < count:
            chosen = {w.id for w in selected}
            backfill = [
                w for w in context.eligible_words(ALL_CATEGORIES)
                if w.id not in chosen and not context.is_excluded(w.id)
            ]
            selected.extend(backfill[: count - len(selected)])
            logger.debug(f"Cross-category backfilled {len(selected) - len(chosen)} words")

        return selected[:count]


# Target difficulty mix by accuracy tier
EXPERT_MIX = {Difficulty.EASY: 0.3, Difficulty.MEDIUM: 0.4, Difficulty.HARD: 0.3}
PROFICIENT_MIX = {Difficulty.EASY: 0.4, Difficulty.MEDIUM: 0.4, Difficulty.HARD: 0.2}
DEVELOPING_MIX = {Difficulty.EASY: 0.6, Difficulty.MEDIUM: 0.3, Difficulty.HARD: 0.1}


class AdaptiveDifficultySelector:
    """Slices each difficulty bucket to a mix chosen from accuracy."""

    @staticmethod
    def difficulty_mix(stats: PerformanceStats | None) -> dict[Difficulty, float]:
        accuracy = stats.average_accuracy if stats else 0.0
        if accuracy >= 90:
            return EXPERT_MIX
        if accuracy >= 75:
            return PROFICIENT_MIX
        return DEVELOPING_MIX

    def select(self, context: PoolContext, candidates: Sequence[Word], count: int) -> list[Word]:
        mix = self.difficulty_mix(context.stats)
        available = [w for w in candidates if not context.is_excluded(w.id)]

        selected: list[Word] = []
        for difficulty, ratio in mix.items():
            bucket = [w for w in available if w.difficulty is difficulty]
            selected.extend(bucket[: share(count, ratio)])

        return selected
