"""
Category Exhaustion.

Measures how much of a category's word pool the learner has already met.
A word counts as seen when it has a history record or sits in the
remembered or forgotten set. Excluded words are not counted as seen.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from wordquest.core.models import UserProgress, WordHistory

if TYPE_CHECKING:
    from wordquest.delivery.word_catalog import WordCatalog


class CategoryExhaustionEvaluator:
    """Computes seen / total for a category ("all" = full catalog)."""

    def __init__(self, catalog: WordCatalog):
        self.catalog = catalog

    def exhaustion(
        self,
        category: str,
        history: Mapping[int, WordHistory],
        progress: UserProgress,
    ) -> float:
        """
        Fraction of the category already seen.

        Args:
            category: Category name or "all"
            history: The user's history map
            progress: The user's learning sets

        Returns:
            Value in [0, 1]. An empty category reports 1.0 since it has
            nothing fresh to offer.
        """
        words = self.catalog.by_category(category)
        if not words:
            return 1.0

        seen = sum(
            1 for w in words
            if w.id in history or progress.is_known(w.id)
        )
        return min(1.0, seen / len(words))
