"""
Smart Word Selector.

Distribution-driven alternative to the strategy-based session assembler.
It ignores cooldowns and works only from the remembered / forgotten sets:

1. Split the category pool into forgotten, new and remembered words
2. Size each bucket with DistributionCalculator
3. Fill the buckets (weak categories first for forgotten and new words,
   strong categories for review)
4. Top up adaptively from a difficulty mix
5. Order easy -> medium -> hard, each group shuffled
"""

from __future__ import annotations

import math
import random
from collections.abc import Sequence
from dataclasses import dataclass, field

from loguru import logger

from wordquest.core.models import ALL_CATEGORIES, Difficulty, PerformanceStats, Word
from wordquest.delivery.word_catalog import WordCatalog
from wordquest.study.difficulty import DynamicDifficultyAdjuster, classify_session_difficulty
from wordquest.study.distribution import DistributionCalculator, share

WEAK_CATEGORY_SHARE = 0.6

# Fill mixes by accuracy tier
NO_STATS_FILL_MIX = {Difficulty.EASY: 0.6, Difficulty.MEDIUM: 0.3, Difficulty.HARD: 0.1}
STRUGGLING_FILL_MIX = {Difficulty.EASY: 0.8, Difficulty.MEDIUM: 0.2, Difficulty.HARD: 0.0}
STEADY_FILL_MIX = {Difficulty.EASY: 0.6, Difficulty.MEDIUM: 0.3, Difficulty.HARD: 0.1}
STRONG_FILL_MIX = {Difficulty.EASY: 0.4, Difficulty.MEDIUM: 0.4, Difficulty.HARD: 0.2}


@dataclass
class SmartSelectionOptions:
    """Request for a distribution-driven selection."""

    count: int
    category: str = ALL_CATEGORIES
    remembered_words: frozenset[int] = field(default_factory=frozenset)
    forgotten_words: frozenset[int] = field(default_factory=frozenset)
    excluded_word_ids: frozenset[int] = field(default_factory=frozenset)
    stats: PerformanceStats | None = None
    prioritize_weak_categories: bool = True
    include_review_words: bool = True


@dataclass
class SelectionReason:
    """How many words each step contributed."""

    forgotten: int = 0
    new: int = 0
    review: int = 0
    adaptive: int = 0


@dataclass
class SmartSelection:
    words: list[Word]
    reason: SelectionReason
    difficulty: Difficulty
    categories: list[str]

    @property
    def word_ids(self) -> list[int]:
        return [w.id for w in self.words]


class SmartWordSelector:
    """
    Selects words by forgotten / new / review distribution.

    Example:
        selector = SmartWordSelector(catalog, rng=random.Random(7))
        selection = selector.select_words(SmartSelectionOptions(count=10))
    """

    def __init__(
        self,
        catalog: WordCatalog,
        rng: random.Random | None = None,
        distribution: DistributionCalculator | None = None,
    ):
        self.catalog = catalog
        self.rng = rng or random.Random()
        self.distribution = distribution or DistributionCalculator()

    # =========================================================================
    # Public API
    # =========================================================================

    def select_words(self, options: SmartSelectionOptions) -> SmartSelection:
        """
        Select up to ``options.count`` unique words.

        Args:
            options: Category, count, learning sets and performance signal

        Returns:
            SmartSelection with per-step counts and the session difficulty
        """
        count = options.count
        stats = options.stats

        pool = [
            w for w in self.catalog.by_category(options.category)
            if w.id not in options.excluded_word_ids
        ]
        forgotten = [w for w in pool if w.id in options.forgotten_words]
        remembered = [
            w for w in pool
            if w.id in options.remembered_words and w.id not in options.forgotten_words
        ]
        new = [
            w for w in pool
            if w.id not in options.forgotten_words and w.id not in options.remembered_words
        ]

        buckets = self.distribution.calculate(
            count, len(forgotten), len(new), len(remembered), stats
        )
        reason = SelectionReason()
        selected: list[Word] = []

        if buckets.forgotten > 0:
            picked = self._select_forgotten(forgotten, buckets.forgotten, stats)
            selected.extend(picked)
            reason.forgotten = len(picked)

        if buckets.new > 0:
            picked = self._select_new(new, buckets.new, stats, options.prioritize_weak_categories)
            selected.extend(picked)
            reason.new = len(picked)

        if buckets.review > 0 and options.include_review_words:
            picked = self._select_review(remembered, buckets.review, stats)
            selected.extend(picked)
            reason.review = len(picked)

        remaining = count - len(selected)
        if remaining > 0:
            chosen = {w.id for w in selected}
            picked = self._select_adaptive(
                [w for w in pool if w.id not in chosen], remaining, stats
            )
            selected.extend(picked)
            reason.adaptive = len(picked)

        words = self._order_by_difficulty(selected)[:count]

        logger.info(
            f"Smart selection: {len(words)} words "
            f"(forgotten={reason.forgotten}, new={reason.new}, "
            f"review={reason.review}, adaptive={reason.adaptive})"
        )

        return SmartSelection(
            words=words,
            reason=reason,
            difficulty=classify_session_difficulty(words),
            categories=list(dict.fromkeys(w.category for w in words)),
        )

    def select_adjusted(self, options: SmartSelectionOptions) -> SmartSelection:
        """Smart selection post-processed toward the learner's optimal difficulty."""
        selection = self.select_words(options)
        words = DynamicDifficultyAdjuster.adjust_selection(selection.words, options.stats)

        return SmartSelection(
            words=words,
            reason=selection.reason,
            difficulty=classify_session_difficulty(words),
            categories=list(dict.fromkeys(w.category for w in words)),
        )

    def practice_words(
        self,
        forgotten_words: frozenset[int] | set[int],
        stats: PerformanceStats | None = None,
        max_count: int = 10,
    ) -> list[Word]:
        """Forgotten-only word list for practice mode."""
        forgotten = [w for w in self.catalog if w.id in forgotten_words]
        if not forgotten:
            return []
        return self._select_forgotten(forgotten, max_count, stats)

    # =========================================================================
    # Bucket selection
    # =========================================================================

    @staticmethod
    def _select_forgotten(
        words: Sequence[Word],
        count: int,
        stats: PerformanceStats | None,
    ) -> list[Word]:
        if stats and stats.weakest_categories:
            selected: list[Word] = []
            for category in stats.weakest_categories:
                if len(selected) >= count:
                    break
                in_category = [w for w in words if w.category == category]
                selected.extend(in_category[: count - len(selected)])

            chosen = {w.id for w in selected}
            rest = [w for w in words if w.id not in chosen]
            selected.extend(rest[: count - len(selected)])
            return selected

        # Easier words first to build confidence
        return sorted(words, key=lambda w: w.difficulty.rank)[:count]

    def _select_new(
        self,
        words: Sequence[Word],
        count: int,
        stats: PerformanceStats | None,
        prioritize_weak: bool,
    ) -> list[Word]:
        target = self._new_word_target(stats)

        candidates = [w for w in words if w.difficulty is target]
        if len(candidates) < count:
            candidates = [
                w for w in words
                if w.difficulty is Difficulty.EASY or w.difficulty is target
            ]

        if prioritize_weak and stats and stats.weakest_categories:
            weak = [w for w in candidates if w.category in stats.weakest_categories]
            if weak:
                selected = weak[: math.ceil(count * WEAK_CATEGORY_SHARE)]
                chosen = {w.id for w in selected}
                rest = [w for w in candidates if w.id not in chosen]
                return selected + rest[: count - len(selected)]

        candidates = list(candidates)
        self.rng.shuffle(candidates)
        return candidates[:count]

    @staticmethod
    def _new_word_target(stats: PerformanceStats | None) -> Difficulty:
        accuracy = stats.average_accuracy if stats else 0.0
        if accuracy > 95:
            return Difficulty.HARD
        if accuracy > 85:
            return Difficulty.MEDIUM
        return Difficulty.EASY

    def _select_review(
        self,
        words: Sequence[Word],
        count: int,
        stats: PerformanceStats | None,
    ) -> list[Word]:
        if stats and stats.strongest_categories:
            strong = [w for w in words if w.category in stats.strongest_categories]
            if len(strong) >= count:
                return strong[:count]

        shuffled = list(words)
        self.rng.shuffle(shuffled)
        return shuffled[:count]

    @staticmethod
    def fill_mix(stats: PerformanceStats | None) -> dict[Difficulty, float]:
        """Difficulty mix for the adaptive top-up."""
        if stats is None:
            return NO_STATS_FILL_MIX

        accuracy = stats.average_accuracy
        if accuracy < 60:
            return STRUGGLING_FILL_MIX
        if accuracy < 80:
            return STEADY_FILL_MIX
        return STRONG_FILL_MIX

    def _select_adaptive(
        self,
        words: Sequence[Word],
        count: int,
        stats: PerformanceStats | None,
    ) -> list[Word]:
        selected: list[Word] = []
        for difficulty, ratio in self.fill_mix(stats).items():
            bucket = [w for w in words if w.difficulty is difficulty]
            selected.extend(bucket[: share(count, ratio)])

        if len(selected) < count:
            chosen = {w.id for w in selected}
            rest = [w for w in words if w.id not in chosen]
            selected.extend(rest[: count - len(selected)])

        return selected[:count]

    def _order_by_difficulty(self, words: Sequence[Word]) -> list[Word]:
        ordered: list[Word] = []
        for difficulty in (Difficulty.EASY, Difficulty.MEDIUM, Difficulty.HARD):
            group = [w for w in words if w.difficulty is difficulty]
            self.rng.shuffle(group)
            ordered.extend(group)
        return ordered
