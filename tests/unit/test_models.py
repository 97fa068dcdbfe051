"""
Unit tests for domain models.

Tests:
- Word parsing from catalog JSON
- WordHistory record shape and validation
- UserProgress immutability and answer migration
"""

import pytest
from pydantic import ValidationError

from wordquest.core.models import Difficulty, UserProgress, Word, WordHistory


class TestWordFromDict:
    def test_accepts_word_key_and_camel_case(self):
        word = Word.from_dict(
            {
                "id": "12",
                "word": "Telescope",
                "category": "space",
                "difficulty": "hard",
                "funFact": "Galileo improved it",
                "imageUrl": "https://example.org/t.png",
            }
        )

        assert word.id == 12
        assert word.text == "Telescope"
        assert word.difficulty is Difficulty.HARD
        assert word.fun_fact == "Galileo improved it"
        assert word.image_url == "https://example.org/t.png"

    def test_rejects_unknown_difficulty(self):
        with pytest.raises(ValueError):
            Word.from_dict({"id": 1, "text": "x", "category": "a", "difficulty": "extreme"})

    def test_missing_category(self):
        with pytest.raises(KeyError):
            Word.from_dict({"id": 1, "text": "x", "difficulty": "easy"})


class TestWordHistoryRecord:
    def test_record_uses_camel_case(self, catalog, make_history):
        entry = make_history(catalog.get(5), times_shown=3, consecutive_correct=2, average_accuracy=66.5)

        record = entry.to_record()

        assert set(record) == {
            "wordId",
            "lastSeen",
            "timesShown",
            "consecutiveCorrect",
            "averageAccuracy",
            "nextEligibleTime",
            "category",
            "difficulty",
        }
        assert record["difficulty"] == "medium"
        assert WordHistory.from_record(record) == entry

    def test_rejects_accuracy_out_of_range(self, catalog, make_history):
        record = make_history(catalog.get(1)).to_record()
        record["averageAccuracy"] = 120

        with pytest.raises(ValidationError):
            WordHistory.from_record(record)

    def test_rejects_eligible_before_seen(self, catalog, make_history):
        record = make_history(catalog.get(1)).to_record()
        record["nextEligibleTime"] = record["lastSeen"]

        with pytest.raises(ValidationError):
            WordHistory.from_record(record)

    def test_mastery_score(self, catalog, make_history):
        entry = make_history(catalog.get(1), consecutive_correct=3, average_accuracy=80.0)
        assert entry.mastery_score == pytest.approx(240.0)


class TestUserProgress:
    def test_coerces_sets(self):
        progress = UserProgress(remembered_words={1, 2}, forgotten_words=[3])

        assert progress.remembered_words == frozenset({1, 2})
        assert progress.forgotten_words == frozenset({3})
        assert progress.is_known(3)
        assert not progress.is_known(4)

    def test_record_answer_returns_new_value(self):
        progress = UserProgress(forgotten_words={5})

        updated = progress.record_answer(5, was_correct=True)

        assert updated.remembered_words == frozenset({5})
        assert updated.forgotten_words == frozenset()
        assert progress.forgotten_words == frozenset({5})

    def test_incorrect_moves_to_forgotten(self):
        progress = UserProgress(remembered_words={5}, excluded_word_ids={9})

        updated = progress.record_answer(5, was_correct=False)

        assert 5 in updated.forgotten_words
        assert 5 not in updated.remembered_words
        assert updated.excluded_word_ids == frozenset({9})
