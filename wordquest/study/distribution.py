"""
Bucket Distribution for Smart Selection.

Splits a requested word count into forgotten / new / review buckets.

Default ratio (forgotten-new-review): 40 / 40 / 20
- Accuracy below 60%: 60 / 30 / 10 (struggling, revisit forgotten words)
- Accuracy above 85%: 30 / 50 / 20 (doing well, introduce more new words)

Forgotten is sized first; new and review share what is left in their
ratio. Every bucket is capped by the words actually available, and
unused capacity is left for the caller to fill.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from wordquest.core.models import PerformanceStats

STRUGGLING_ACCURACY = 60.0
EXCELLING_ACCURACY = 85.0

# Absorbs float error so 12 * (0.4 / 0.6) floors to 8, not 7
_EPSILON = 1e-9


def share(count: int, ratio: float) -> int:
    """Whole number of items for a ratio of ``count``."""
    return math.floor(count * ratio + _EPSILON)


@dataclass(frozen=True)
class BucketRatios:
    forgotten: float
    new: float
    review: float


@dataclass(frozen=True)
class BucketDistribution:
    """Target bucket sizes."""

    forgotten: int
    new: int
    review: int

    @property
    def total(self) -> int:
        return self.forgotten + self.new + self.review


DEFAULT_RATIOS = BucketRatios(forgotten=0.4, new=0.4, review=0.2)
STRUGGLING_RATIOS = BucketRatios(forgotten=0.6, new=0.3, review=0.1)
EXCELLING_RATIOS = BucketRatios(forgotten=0.3, new=0.5, review=0.2)


class DistributionCalculator:
    """Computes bucket sizes from accuracy and pool availability."""

    @staticmethod
    def ratios_for(stats: PerformanceStats | None) -> BucketRatios:
        if stats is None:
            return DEFAULT_RATIOS

        accuracy = stats.average_accuracy
        if accuracy < STRUGGLING_ACCURACY:
            return STRUGGLING_RATIOS
        if accuracy > EXCELLING_ACCURACY:
            return EXCELLING_RATIOS
        return DEFAULT_RATIOS

    def calculate(
        self,
        total_count: int,
        forgotten_available: int,
        new_available: int,
        review_available: int,
        stats: PerformanceStats | None = None,
    ) -> BucketDistribution:
        """
        Calculate bucket sizes.

        Args:
            total_count: Requested number of words
            forgotten_available: Forgotten words in the pool
            new_available: Never-seen words in the pool
            review_available: Remembered words in the pool
            stats: Performance signal selecting the ratio

        Returns:
            BucketDistribution with each bucket <= its availability
        """
        ratios = self.ratios_for(stats)

        forgotten = min(share(total_count, ratios.forgotten), forgotten_available)

        remaining = total_count - forgotten
        new_share = ratios.new / (ratios.new + ratios.review)
        new = min(share(remaining, new_share), new_available)

        review = max(0, min(total_count - forgotten - new, review_available))

        return BucketDistribution(forgotten=forgotten, new=new, review=review)
