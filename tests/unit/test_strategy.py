"""
Unit tests for category exhaustion and session strategy selection.

Tests:
- Exhaustion counts history and learning sets
- First-match rule order
- Explicit-category override of cross_category
"""

import pytest

from wordquest.core.models import PerformanceStats, SessionStrategy, UserProgress
from wordquest.study.exhaustion import CategoryExhaustionEvaluator
from wordquest.study.strategy import (
    STRATEGY_RULES,
    StrategyContext,
    StrategyRule,
    StrategySelector,
)


def context(exhaustion=0.0, accuracy=0.0, session_count=0, available_words=0, session_size=20):
    return StrategyContext(
        exhaustion=exhaustion,
        accuracy=accuracy,
        session_count=session_count,
        available_words=available_words,
        session_size=session_size,
    )


class TestExhaustion:
    def test_unseen_category(self, catalog, progress):
        evaluator = CategoryExhaustionEvaluator(catalog)
        assert evaluator.exhaustion("animals", {}, progress) == 0.0

    def test_history_counts_as_seen(self, catalog, progress, make_history):
        evaluator = CategoryExhaustionEvaluator(catalog)
        history = {i: make_history(catalog.get(i)) for i in (1, 2, 3)}

        assert evaluator.exhaustion("animals", history, progress) == pytest.approx(0.5)

    def test_learning_sets_count_as_seen(self, catalog):
        evaluator = CategoryExhaustionEvaluator(catalog)
        progress = UserProgress(remembered_words={7}, forgotten_words={8})

        assert evaluator.exhaustion("food", {}, progress) == pytest.approx(0.5)

    def test_other_categories_ignored(self, catalog, progress, make_history):
        evaluator = CategoryExhaustionEvaluator(catalog)
        history = {11: make_history(catalog.get(11))}

        assert evaluator.exhaustion("animals", history, progress) == 0.0
        assert evaluator.exhaustion("all", history, progress) == pytest.approx(1 / 12)

    def test_empty_category_is_exhausted(self, catalog, progress):
        evaluator = CategoryExhaustionEvaluator(catalog)
        assert evaluator.exhaustion("dinosaurs", {}, progress) == 1.0


class TestRuleOrder:
    def test_targeted_review_for_struggling_learner(self):
        selector = StrategySelector()
        result = selector.select(context(exhaustion=0.75, accuracy=40, session_count=8, available_words=10))
        assert result is SessionStrategy.TARGETED_REVIEW

    def test_fresh_exploration_with_plenty_of_words(self):
        selector = StrategySelector()
        result = selector.select(context(exhaustion=0.1, available_words=25))
        assert result is SessionStrategy.FRESH_EXPLORATION

    def test_mixed_reinforcement(self):
        selector = StrategySelector()
        result = selector.select(context(exhaustion=0.5, accuracy=70, available_words=10))
        assert result is SessionStrategy.MIXED_REINFORCEMENT

    def test_targeted_review_when_mostly_seen(self):
        selector = StrategySelector()
        result = selector.select(context(exhaustion=0.9, accuracy=95, session_count=30))
        assert result is SessionStrategy.TARGETED_REVIEW

    def test_early_struggles_fall_through_to_default(self):
        selector = StrategySelector()
        result = selector.select(context(exhaustion=0.5, accuracy=40, session_count=3, available_words=5))
        assert result is SessionStrategy.FRESH_EXPLORATION

    def test_earlier_rule_wins(self):
        """Advanced learner with a fresh pool still explores."""
        selector = StrategySelector()
        result = selector.select(
            context(exhaustion=0.2, accuracy=95, session_count=30, available_words=30)
        )
        assert result is SessionStrategy.FRESH_EXPLORATION

    def test_later_rules_reachable_without_earlier_ones(self):
        selector = StrategySelector(rules=STRATEGY_RULES[3:])

        assert selector.select(context(exhaustion=0.85)) is SessionStrategy.CROSS_CATEGORY
        assert (
            selector.select(context(exhaustion=0.1, accuracy=90, session_count=16))
            is SessionStrategy.ADAPTIVE_DIFFICULTY
        )

    def test_build_without_stats(self):
        built = StrategyContext.build(0.4, None, available_words=7, session_size=20)
        assert built.accuracy == 0.0
        assert built.session_count == 0

    def test_build_with_stats(self):
        stats = PerformanceStats(average_accuracy=72.5, total_review_sessions=9)
        built = StrategyContext.build(0.4, stats, available_words=7, session_size=20)
        assert built.accuracy == 72.5
        assert built.session_count == 9


class TestCrossCategoryOverride:
    @pytest.fixture
    def cross_first(self):
        return StrategySelector(rules=STRATEGY_RULES[3:])

    def test_aggregate_category_keeps_cross(self, cross_first):
        result = cross_first.resolve(context(exhaustion=0.9, available_words=4), "all")
        assert result is SessionStrategy.CROSS_CATEGORY

    def test_empty_pool_keeps_cross(self, cross_first):
        result = cross_first.resolve(context(exhaustion=0.9, available_words=0), "animals")
        assert result is SessionStrategy.CROSS_CATEGORY

    def test_explicit_category_becomes_targeted_review(self, cross_first):
        result = cross_first.resolve(context(exhaustion=0.9, available_words=3), "animals")
        assert result is SessionStrategy.TARGETED_REVIEW

    def test_explicit_category_below_threshold_becomes_mixed(self):
        always_cross = StrategySelector(
            rules=(StrategyRule(SessionStrategy.CROSS_CATEGORY, lambda c: True, "always"),)
        )
        result = always_cross.resolve(context(exhaustion=0.5, available_words=4), "food")
        assert result is SessionStrategy.MIXED_REINFORCEMENT

    def test_allows_cross_category(self):
        assert StrategySelector.allows_cross_category("all", 10)
        assert StrategySelector.allows_cross_category("animals", 0)
        assert not StrategySelector.allows_cross_category("animals", 1)
