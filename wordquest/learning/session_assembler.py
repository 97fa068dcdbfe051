"""
Session Assembler.

Builds one learning session:
1. Measure category exhaustion and pick a strategy
2. Run the strategy's pool selector(s)
3. Order with difficulty progression (easy, medium, hard, easy, ...)
4. Drop anything still on cooldown
5. Pad a short session, respecting an explicit category choice
6. Truncate to the session size and summarize

Strategy recipes:
- fresh_exploration:   fresh words only
- mixed_reinforcement: 60% fresh, then forgotten, then remembered
- targeted_review:     70% forgotten, then remembered
- cross_category:      even share of fresh words per category
- adaptive_difficulty: difficulty mix from accuracy tier
"""

from __future__ import annotations

import random
from collections.abc import Sequence
from typing import TYPE_CHECKING

from loguru import logger

from wordquest.core.clock import Clock, current_millis
from wordquest.core.models import (
    ALL_CATEGORIES,
    Difficulty,
    PerformanceStats,
    SessionInfo,
    SessionResult,
    SessionStrategy,
    UserProgress,
    Word,
    WordHistory,
)
from wordquest.core.scheduler_config import SchedulerConfig
from wordquest.learning.pool_selectors import (
    AdaptiveDifficultySelector,
    CrossCategorySelector,
    ForgottenWordSelector,
    FreshWordSelector,
    PoolContext,
    RememberedWordSelector,
)
from wordquest.study.difficulty import classify_session_difficulty
from wordquest.study.distribution import share
from wordquest.study.exhaustion import CategoryExhaustionEvaluator
from wordquest.study.strategy import StrategyContext, StrategySelector

if TYPE_CHECKING:
    from collections.abc import Mapping

    from wordquest.delivery.word_catalog import WordCatalog

MIXED_FRESH_SHARE = 0.6
REVIEW_FORGOTTEN_SHARE = 0.7

_PROGRESSION = (Difficulty.EASY, Difficulty.MEDIUM, Difficulty.HARD)


def shuffle_with_progression(
    words: Sequence[Word],
    rng: random.Random,
    swap_probability: float = 0.3,
) -> list[Word]:
    """
    Shuffle while keeping a rough easy-to-hard progression.

    Words are shuffled within their difficulty, dealt round-robin
    (easy, medium, hard, easy, ...), then each adjacent pair is swapped
    with ``swap_probability`` in a single backward pass.
    """
    groups = {d: [w for w in words if w.difficulty is d] for d in _PROGRESSION}
    for group in groups.values():
        rng.shuffle(group)

    result: list[Word] = []
    longest = max((len(g) for g in groups.values()), default=0)
    for i in range(longest):
        for difficulty in _PROGRESSION:
            group = groups[difficulty]
            if i < len(group):
                result.append(group[i])

    for i in range(len(result) - 1, 0, -1):
        if rng.random() < swap_probability:
            result[i], result[i - 1] = result[i - 1], result[i]

    return result


def _dedupe(words: Sequence[Word]) -> list[Word]:
    seen: set[int] = set()
    unique = []
    for word in words:
        if word.id not in seen:
            seen.add(word.id)
            unique.append(word)
    return unique


class SessionAssembler:
    """
    Orchestrates strategy selection and pool selectors into a session.

    Holds only configuration and collaborators; all per-user state is
    passed into ``generate_session``.
    """

    def __init__(
        self,
        catalog: WordCatalog,
        config: SchedulerConfig | None = None,
        rng: random.Random | None = None,
        clock: Clock = current_millis,
        strategies: StrategySelector | None = None,
    ):
        """
        Initialize the assembler.

        Args:
            catalog: Read-only word catalog
            config: Session size, swap probability, padding policy
            rng: Random source for ordering (unseeded if None)
            clock: Epoch-millisecond clock for cooldown checks
            strategies: Strategy rule table (default rules if None)
        """
        self.catalog = catalog
        self.config = config or SchedulerConfig()
        self.rng = rng or random.Random()
        self.clock = clock

        self.exhaustion = CategoryExhaustionEvaluator(catalog)
        self.strategies = strategies or StrategySelector()
        self.fresh = FreshWordSelector()
        self.forgotten = ForgottenWordSelector()
        self.remembered = RememberedWordSelector()
        self.cross_category = CrossCategorySelector(self.config, self.fresh)
        self.adaptive = AdaptiveDifficultySelector()

    def generate_session(
        self,
        category: str,
        history: Mapping[int, WordHistory],
        progress: UserProgress,
        stats: PerformanceStats | None = None,
        session_number: int = 1,
        strategy: SessionStrategy | None = None,
    ) -> SessionResult:
        """
        Select the words for the next session.

        Args:
            category: Requested category or "all"
            history: The user's history map (read only)
            progress: The user's learning sets
            stats: Optional performance signal
            session_number: Caller's running session counter
            strategy: Force a strategy instead of consulting the rule table

        Returns:
            SessionResult with at most ``session_size`` unique words
        """
        size = self.config.session_size
        context = PoolContext(
            catalog=self.catalog,
            history=history,
            progress=progress,
            now=self.clock(),
            stats=stats,
        )

        pool = context.eligible_words(category)
        exhaustion = self.exhaustion.exhaustion(category, history, progress)

        if strategy is None:
            strategy = self.strategies.resolve(
                StrategyContext.build(exhaustion, stats, len(pool), size),
                category,
            )

        logger.info(
            f"Session strategy: {strategy.value}, exhaustion: {exhaustion:.2f}, "
            f"category: {category}, eligible: {len(pool)}"
        )

        selected = _dedupe(self._select(strategy, context, pool, size))
        ordered = shuffle_with_progression(
            selected, self.rng, self.config.progression_swap_probability
        )

        ready = [w for w in ordered if context.is_eligible(w.id)]
        if len(ready) < len(ordered):
            logger.debug(f"Safety filter dropped {len(ordered) - len(ready)} cooling words")

        if len(ready) < size:
            ready = self._fill_shortfall(ready, context, category, pool, size)

        words = ready[:size]
        return SessionResult(
            words=tuple(words),
            session_info=self._summarize(words, progress, exhaustion, strategy, session_number),
        )

    def _select(
        self,
        strategy: SessionStrategy,
        context: PoolContext,
        pool: list[Word],
        size: int,
    ) -> list[Word]:
        """Run the selector recipe for a strategy."""
        if strategy is SessionStrategy.MIXED_REINFORCEMENT:
            selected = self.fresh.select(context, pool, share(size, MIXED_FRESH_SHARE))
            selected += self.forgotten.select(context, pool, size - len(selected))
            selected += self.remembered.select(context, pool, size - len(selected))
            return selected

        if strategy is SessionStrategy.TARGETED_REVIEW:
            selected = self.forgotten.select(context, pool, share(size, REVIEW_FORGOTTEN_SHARE))
            selected += self.remembered.select(context, pool, size - len(selected))
            return selected

        if strategy is SessionStrategy.CROSS_CATEGORY:
            return self.cross_category.select(context, size)

        if strategy is SessionStrategy.ADAPTIVE_DIFFICULTY:
            return self.adaptive.select(context, pool, size)

        return self.fresh.select(context, pool, size)

    def _fill_shortfall(
        self,
        words: list[Word],
        context: PoolContext,
        category: str,
        pool: list[Word],
        size: int,
    ) -> list[Word]:
        """
        Pad a short session.

        Order of preference:
        1. Unselected eligible words from the requested category
        2. Eligible words anywhere, only for "all" or an empty category pool
        3. Words still cooling down, soonest first, only if the session
           would otherwise be empty
        """
        result = list(words)
        chosen = {w.id for w in result}

        def take(candidates: Sequence[Word]) -> int:
            added = 0
            for word in candidates:
                if len(result) >= size:
                    break
                if word.id in chosen or context.is_excluded(word.id):
                    continue
                result.append(word)
                chosen.add(word.id)
                added += 1
            return added

        take(pool)

        if len(result) < size and self.strategies.allows_cross_category(category, len(pool)):
            added = take(context.eligible_words(ALL_CATEGORIES))
            if added:
                logger.warning(f"Category '{category}' has no eligible words; padded {added} from catalog")

        if not result and self.config.pad_ignoring_cooldown:
            scope = self.catalog.by_category(category) or list(self.catalog)
            cooling = sorted(
                (w for w in scope if w.id in context.history),
                key=lambda w: context.history[w.id].next_eligible_time,
            )
            added = take(cooling)
            if added:
                logger.warning(f"No eligible words; padded {added} words still on cooldown")

        return result

    @staticmethod
    def _summarize(
        words: list[Word],
        progress: UserProgress,
        exhaustion: float,
        strategy: SessionStrategy,
        session_number: int,
    ) -> SessionInfo:
        new_words = sum(1 for w in words if not progress.is_known(w.id))
        categories = tuple(dict.fromkeys(w.category for w in words))

        return SessionInfo(
            total_new_words=new_words,
            review_words=len(words) - new_words,
            difficulty=classify_session_difficulty(words),
            categories=categories,
            exhaustion_level=exhaustion,
            session_strategy=strategy,
            session_number=session_number,
        )
