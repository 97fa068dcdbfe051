"""
Domain models for word scheduling.

Catalog entries (Word), per-word scheduling state (WordHistory), the
caller-owned learning sets (UserProgress), optional performance signals
(PerformanceStats) and the session output (SessionResult).

All models are immutable values. History updates produce a new record
that the caller stores under the same word id.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Aggregate category name covering the whole catalog
ALL_CATEGORIES = "all"


class Difficulty(str, Enum):
    """Word difficulty level."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @property
    def rank(self) -> int:
        """Sort order for easy -> medium -> hard progression."""
        return _DIFFICULTY_RANK[self]


_DIFFICULTY_RANK = {Difficulty.EASY: 1, Difficulty.MEDIUM: 2, Difficulty.HARD: 3}


class SessionStrategy(str, Enum):
    """Named algorithm governing how a session's words are chosen."""

    FRESH_EXPLORATION = "fresh_exploration"
    MIXED_REINFORCEMENT = "mixed_reinforcement"
    TARGETED_REVIEW = "targeted_review"
    CROSS_CATEGORY = "cross_category"
    ADAPTIVE_DIFFICULTY = "adaptive_difficulty"


# =============================================================================
# Catalog
# =============================================================================


@dataclass(frozen=True)
class Word:
    """
    A vocabulary word from the catalog.

    Only id, category and difficulty matter for scheduling; the rest is
    display metadata carried through for the presentation layer.
    """

    id: int
    text: str
    category: str
    difficulty: Difficulty

    # Display metadata
    pronunciation: str = ""
    definition: str = ""
    example: str = ""
    fun_fact: str = ""
    emoji: str = ""
    image_url: str | None = None

    @classmethod
    def from_dict(cls, data: dict) -> Word:
        """
        Create a Word from a catalog dictionary (JSON).

        Accepts either ``text`` or ``word`` for the word itself and
        camelCase or snake_case metadata keys.
        """
        return cls(
            id=int(data["id"]),
            text=data.get("text") or data["word"],
            category=data["category"],
            difficulty=Difficulty(data["difficulty"]),
            pronunciation=data.get("pronunciation", ""),
            definition=data.get("definition", ""),
            example=data.get("example", ""),
            fun_fact=data.get("fun_fact") or data.get("funFact", ""),
            emoji=data.get("emoji", ""),
            image_url=data.get("image_url") or data.get("imageUrl"),
        )


# =============================================================================
# Scheduling State
# =============================================================================


class WordHistoryRecord(BaseModel):
    """Persisted shape of a WordHistory (camelCase, epoch milliseconds)."""

    model_config = ConfigDict(populate_by_name=True)

    word_id: int = Field(alias="wordId")
    last_seen: int = Field(alias="lastSeen")
    times_shown: int = Field(alias="timesShown", ge=0)
    consecutive_correct: int = Field(alias="consecutiveCorrect", ge=0)
    average_accuracy: float = Field(alias="averageAccuracy", ge=0.0, le=100.0)
    next_eligible_time: int = Field(alias="nextEligibleTime")
    category: str
    difficulty: Difficulty

    @model_validator(mode="after")
    def _eligible_after_seen(self) -> WordHistoryRecord:
        if self.next_eligible_time <= self.last_seen:
            raise ValueError("nextEligibleTime must be after lastSeen")
        return self


@dataclass(frozen=True)
class WordHistory:
    """Scheduling state for one (user, word) pair."""

    word_id: int
    last_seen: int  # epoch ms
    times_shown: int
    consecutive_correct: int
    average_accuracy: float  # 0-100 running mean
    next_eligible_time: int  # epoch ms
    category: str
    difficulty: Difficulty

    @classmethod
    def empty(cls, word: Word) -> WordHistory:
        """Zeroed record for a word that has never been shown."""
        return cls(
            word_id=word.id,
            last_seen=0,
            times_shown=0,
            consecutive_correct=0,
            average_accuracy=0.0,
            next_eligible_time=0,
            category=word.category,
            difficulty=word.difficulty,
        )

    @property
    def mastery_score(self) -> float:
        """Streak weighted by accuracy; low scores are fragile words."""
        return self.consecutive_correct * self.average_accuracy

    def is_eligible(self, now_ms: int) -> bool:
        """Check whether the cooldown has expired."""
        return now_ms >= self.next_eligible_time

    def to_record(self) -> dict[str, Any]:
        """Serialize to the persisted record shape."""
        record = WordHistoryRecord(
            word_id=self.word_id,
            last_seen=self.last_seen,
            times_shown=self.times_shown,
            consecutive_correct=self.consecutive_correct,
            average_accuracy=self.average_accuracy,
            next_eligible_time=self.next_eligible_time,
            category=self.category,
            difficulty=self.difficulty,
        )
        return record.model_dump(by_alias=True, mode="json")

    @classmethod
    def from_record(cls, data: dict[str, Any]) -> WordHistory:
        """
        Deserialize from the persisted record shape.

        Raises:
            pydantic.ValidationError: if the record violates field bounds
        """
        record = WordHistoryRecord.model_validate(data)
        return cls(
            word_id=record.word_id,
            last_seen=record.last_seen,
            times_shown=record.times_shown,
            consecutive_correct=record.consecutive_correct,
            average_accuracy=record.average_accuracy,
            next_eligible_time=record.next_eligible_time,
            category=record.category,
            difficulty=record.difficulty,
        )


@dataclass(frozen=True)
class UserProgress:
    """
    Caller-owned learning sets.

    The scheduler only reads these. ``record_answer`` is a convenience for
    callers that migrate words between remembered and forgotten; it returns
    a new value and leaves this one untouched.
    """

    remembered_words: frozenset[int] = field(default_factory=frozenset)
    forgotten_words: frozenset[int] = field(default_factory=frozenset)
    excluded_word_ids: frozenset[int] = field(default_factory=frozenset)

    def __post_init__(self):
        object.__setattr__(self, "remembered_words", frozenset(self.remembered_words))
        object.__setattr__(self, "forgotten_words", frozenset(self.forgotten_words))
        object.__setattr__(self, "excluded_word_ids", frozenset(self.excluded_word_ids))

    def is_known(self, word_id: int) -> bool:
        """True if the word is in either the remembered or forgotten set."""
        return word_id in self.remembered_words or word_id in self.forgotten_words

    def record_answer(self, word_id: int, was_correct: bool) -> UserProgress:
        if was_correct:
            return replace(
                self,
                remembered_words=self.remembered_words | {word_id},
                forgotten_words=self.forgotten_words - {word_id},
            )
        return replace(
            self,
            remembered_words=self.remembered_words - {word_id},
            forgotten_words=self.forgotten_words | {word_id},
        )


@dataclass(frozen=True)
class PerformanceStats:
    """Read-only learner performance signal used to bias selection."""

    average_accuracy: float = 0.0
    total_review_sessions: int = 0
    weakest_categories: tuple[str, ...] = ()
    strongest_categories: tuple[str, ...] = ()


# =============================================================================
# Session Output
# =============================================================================


@dataclass(frozen=True)
class SessionInfo:
    """Summary of how a session was built."""

    total_new_words: int
    review_words: int
    difficulty: Difficulty
    categories: tuple[str, ...]
    exhaustion_level: float
    session_strategy: SessionStrategy
    session_number: int = 1


@dataclass(frozen=True)
class SessionResult:
    """Ordered words for the next session plus its summary."""

    words: tuple[Word, ...]
    session_info: SessionInfo

    @property
    def word_ids(self) -> list[int]:
        return [w.id for w in self.words]
