"""
Session Strategy Selection.

Chooses how the next session is built from:
- Category exhaustion (how much of the pool has been seen)
- Learner accuracy and number of completed review sessions
- How many words are currently off cooldown

Rules are evaluated top to bottom and the first match wins. Order is
significant: a later rule never sees a context an earlier rule accepted.

| # | Condition                                         | Strategy            |
|---|---------------------------------------------------|---------------------|
| 1 | exhaustion < 0.3 and available >= session size    | fresh_exploration   |
| 2 | exhaustion < 0.7 and accuracy >= 60               | mixed_reinforcement |
| 3 | exhaustion >= 0.7 or (accuracy < 60, sessions > 5)| targeted_review     |
| 4 | exhaustion >= 0.8                                 | cross_category      |
| 5 | accuracy >= 85 and sessions > 15                  | adaptive_difficulty |
| - | otherwise                                         | fresh_exploration   |

cross_category is only honoured when the caller asked for "all" or the
requested category has no eligible words; otherwise it is downgraded so
an explicit category choice is respected.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from loguru import logger

from wordquest.core.models import ALL_CATEGORIES, PerformanceStats, SessionStrategy

FRESH_EXHAUSTION_LIMIT = 0.3
MIXED_EXHAUSTION_LIMIT = 0.7
REVIEW_EXHAUSTION_LEVEL = 0.7
CROSS_CATEGORY_EXHAUSTION_LEVEL = 0.8
PASSING_ACCURACY = 60.0
STRUGGLING_AFTER_SESSIONS = 5
ADVANCED_ACCURACY = 85.0
ADVANCED_AFTER_SESSIONS = 15


@dataclass(frozen=True)
class StrategyContext:
    """Inputs to strategy selection."""

    exhaustion: float
    accuracy: float
    session_count: int
    available_words: int
    session_size: int

    @classmethod
    def build(
        cls,
        exhaustion: float,
        stats: PerformanceStats | None,
        available_words: int,
        session_size: int,
    ) -> StrategyContext:
        """Missing stats count as zero accuracy and zero sessions."""
        return cls(
            exhaustion=exhaustion,
            accuracy=stats.average_accuracy if stats else 0.0,
            session_count=stats.total_review_sessions if stats else 0,
            available_words=available_words,
            session_size=session_size,
        )


@dataclass(frozen=True)
class StrategyRule:
    """One row of the strategy table."""

    strategy: SessionStrategy
    applies: Callable[[StrategyContext], bool]
    reason: str


STRATEGY_RULES: tuple[StrategyRule, ...] = (
    StrategyRule(
        SessionStrategy.FRESH_EXPLORATION,
        lambda c: c.exhaustion < FRESH_EXHAUSTION_LIMIT and c.available_words >= c.session_size,
        "plenty of unseen words",
    ),
    StrategyRule(
        SessionStrategy.MIXED_REINFORCEMENT,
        lambda c: c.exhaustion < MIXED_EXHAUSTION_LIMIT and c.accuracy >= PASSING_ACCURACY,
        "moderate exhaustion with passing accuracy",
    ),
    StrategyRule(
        SessionStrategy.TARGETED_REVIEW,
        lambda c: c.exhaustion >= REVIEW_EXHAUSTION_LEVEL
        or (c.accuracy < PASSING_ACCURACY and c.session_count > STRUGGLING_AFTER_SESSIONS),
        "pool mostly seen or learner struggling",
    ),
    StrategyRule(
        SessionStrategy.CROSS_CATEGORY,
        lambda c: c.exhaustion >= CROSS_CATEGORY_EXHAUSTION_LEVEL,
        "category exhausted",
    ),
    StrategyRule(
        SessionStrategy.ADAPTIVE_DIFFICULTY,
        lambda c: c.accuracy >= ADVANCED_ACCURACY and c.session_count > ADVANCED_AFTER_SESSIONS,
        "advanced learner",
    ),
)

DEFAULT_STRATEGY = SessionStrategy.FRESH_EXPLORATION


class StrategySelector:
    """First-match evaluation of the strategy rule table."""

    def __init__(self, rules: tuple[StrategyRule, ...] = STRATEGY_RULES):
        self.rules = rules

    def select(self, context: StrategyContext) -> SessionStrategy:
        """
        Pick the first strategy whose rule matches.

        Always returns a strategy; falls back to fresh_exploration.
        """
        for rule in self.rules:
            if rule.applies(context):
                logger.debug(f"Strategy {rule.strategy.value}: {rule.reason}")
                return rule.strategy
        return DEFAULT_STRATEGY

    @staticmethod
    def allows_cross_category(requested_category: str, available_words: int) -> bool:
        """Cross-category only for the aggregate category or an empty pool."""
        return requested_category == ALL_CATEGORIES or available_words == 0

    def resolve(self, context: StrategyContext, requested_category: str) -> SessionStrategy:
        """
        Select a strategy and apply the explicit-category override.

        Args:
            context: Selection inputs; ``available_words`` must be the
                eligible count for ``requested_category``
            requested_category: The category the caller asked for

        Returns:
            Concrete strategy for the session
        """
        strategy = self.select(context)

        if strategy is SessionStrategy.CROSS_CATEGORY and not self.allows_cross_category(
            requested_category, context.available_words
        ):
            strategy = (
                SessionStrategy.TARGETED_REVIEW
                if context.exhaustion >= CROSS_CATEGORY_EXHAUSTION_LEVEL
                else SessionStrategy.MIXED_REINFORCEMENT
            )
            logger.info(
                f"Overriding cross_category to {strategy.value} to respect "
                f"category selection: {requested_category}"
            )

        return strategy
