"""
WordQuest Scheduler - adaptive word selection and spaced repetition.

Picks which vocabulary words a child sees in each learning session and
schedules when each word may reappear.

Packages:
- core: domain models, errors, configuration
- delivery: word catalog, history updates, JSON persistence
- study: cooldowns, exhaustion, strategy rules, distribution, difficulty
- learning: pool selectors, session assembler, smart selector
- cli: developer command line
"""

from wordquest.core.errors import NotFoundError, WordQuestError
from wordquest.core.models import (
    Difficulty,
    PerformanceStats,
    SessionResult,
    SessionStrategy,
    UserProgress,
    Word,
    WordHistory,
)
from wordquest.core.scheduler_config import SchedulerConfig
from wordquest.delivery.word_catalog import WordCatalog
from wordquest.scheduler import WordScheduler

__version__ = "1.0.0"

__all__ = [
    "WordScheduler",
    "WordCatalog",
    "SchedulerConfig",
    "Word",
    "WordHistory",
    "UserProgress",
    "PerformanceStats",
    "SessionResult",
    "SessionStrategy",
    "Difficulty",
    "WordQuestError",
    "NotFoundError",
]
