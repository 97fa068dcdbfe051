"""
WordScheduler - the two-call scheduling surface.

    scheduler = WordScheduler(WordCatalog.load_default())
    session = scheduler.generate_session("animals", history, progress)
    for word in session.words:
        scheduler.update_history(word.id, was_correct, history)

The scheduler is stateless between calls apart from its collaborators;
callers own the history map and learning sets and serialize access per
user.
"""

from __future__ import annotations

import random
from collections.abc import Mapping

from wordquest.core.clock import Clock, current_millis
from wordquest.core.models import (
    PerformanceStats,
    SessionResult,
    SessionStrategy,
    UserProgress,
    WordHistory,
)
from wordquest.core.scheduler_config import SchedulerConfig
from wordquest.delivery.history_store import HistoryMap, WordHistoryStore
from wordquest.delivery.word_catalog import WordCatalog
from wordquest.learning.session_assembler import SessionAssembler


class WordScheduler:
    """Facade over session assembly and history updates sharing one clock."""

    def __init__(
        self,
        catalog: WordCatalog,
        config: SchedulerConfig | None = None,
        rng: random.Random | None = None,
        clock: Clock = current_millis,
    ):
        self.catalog = catalog
        self.config = config or SchedulerConfig()
        self.assembler = SessionAssembler(catalog, self.config, rng=rng, clock=clock)
        self.store = WordHistoryStore(catalog, self.config, clock=clock)

    @classmethod
    def from_seed(
        cls,
        catalog: WordCatalog,
        config: SchedulerConfig | None = None,
        seed: int | None = None,
        clock: Clock = current_millis,
    ) -> WordScheduler:
        """Build with a seeded random source (unseeded if ``seed`` is None)."""
        return cls(catalog, config, rng=random.Random(seed), clock=clock)

    def generate_session(
        self,
        category: str,
        history: Mapping[int, WordHistory],
        progress: UserProgress,
        stats: PerformanceStats | None = None,
        session_number: int = 1,
        strategy: SessionStrategy | None = None,
    ) -> SessionResult:
        """Select the words for the next session. See SessionAssembler."""
        return self.assembler.generate_session(
            category,
            history,
            progress,
            stats=stats,
            session_number=session_number,
            strategy=strategy,
        )

    def update_history(self, word_id: int, was_correct: bool, history: HistoryMap) -> WordHistory:
        """
        Record an answer.

        Raises:
            NotFoundError: if ``word_id`` is not in the catalog
        """
        return self.store.update(word_id, was_correct, history)
