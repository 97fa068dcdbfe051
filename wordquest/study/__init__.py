"""
Study Module for word scheduling.

Provides the pure decision logic for:
- Word cooldowns after each answer (hour granularity)
- Day-granularity next-review dates
- Category exhaustion and session strategy selection
- Forgotten/new/review bucket distribution
- Session difficulty classification and adjustment
"""

from wordquest.study.cooldown import CooldownCalculator, cooldown_hours
from wordquest.study.difficulty import (
    DynamicDifficultyAdjuster,
    SessionPacing,
    classify_session_difficulty,
)
from wordquest.study.distribution import BucketDistribution, DistributionCalculator
from wordquest.study.exhaustion import CategoryExhaustionEvaluator
from wordquest.study.spaced_repetition import EnhancedSpacedRepetition
from wordquest.study.strategy import StrategyContext, StrategySelector

__all__ = [
    "cooldown_hours",
    "CooldownCalculator",
    "EnhancedSpacedRepetition",
    "CategoryExhaustionEvaluator",
    "StrategyContext",
    "StrategySelector",
    "BucketDistribution",
    "DistributionCalculator",
    "classify_session_difficulty",
    "DynamicDifficultyAdjuster",
    "SessionPacing",
]
