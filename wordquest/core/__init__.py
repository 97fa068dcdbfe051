"""
Core Module - Shared domain models and configuration.

Components:
- models: Word, WordHistory, UserProgress, PerformanceStats, SessionResult
- errors: WordQuestError hierarchy (NotFoundError, CatalogLoadError, HistoryFileError)
- scheduler_config: SchedulerConfig tuning values
- clock: millisecond clock injected for cooldown timestamps

All domain modules (wordquest/study/, wordquest/learning/, wordquest/delivery/)
import shared concepts from here rather than redefining them.
"""

from wordquest.core.clock import DAY_MS, HOUR_MS, Clock, current_millis
from wordquest.core.errors import (
    CatalogLoadError,
    HistoryFileError,
    NotFoundError,
    WordQuestError,
)
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
    WordHistoryRecord,
)
from wordquest.core.scheduler_config import SchedulerConfig

__all__ = [
    # Models
    "ALL_CATEGORIES",
    "Difficulty",
    "SessionStrategy",
    "Word",
    "WordHistory",
    "WordHistoryRecord",
    "UserProgress",
    "PerformanceStats",
    "SessionInfo",
    "SessionResult",
    # Errors
    "WordQuestError",
    "NotFoundError",
    "CatalogLoadError",
    "HistoryFileError",
    # Config
    "SchedulerConfig",
    # Clock
    "Clock",
    "current_millis",
    "HOUR_MS",
    "DAY_MS",
]
