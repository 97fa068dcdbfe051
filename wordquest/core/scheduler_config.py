"""
Scheduler tuning.

Domain components take a SchedulerConfig rather than reading settings, so
they stay pure and can be built with plain defaults in tests. The CLI
builds one from the environment via ``SchedulerConfig.from_settings``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from wordquest.core.models import Difficulty

if TYPE_CHECKING:
    from config import Settings

DEFAULT_CROSS_CATEGORIES = ("food", "animals", "objects", "nature", "body", "colors")


@dataclass(frozen=True)
class SchedulerConfig:
    """Configuration for session construction and cooldowns."""

    session_size: int = 20
    min_cooldown_hours: float = 4.0
    max_cooldown_hours: float = 72.0
    difficulty_multipliers: dict[Difficulty, float] = field(
        default_factory=lambda: {
            Difficulty.EASY: 1.0,
            Difficulty.MEDIUM: 1.5,
            Difficulty.HARD: 2.0,
        }
    )
    cross_categories: tuple[str, ...] = DEFAULT_CROSS_CATEGORIES
    progression_swap_probability: float = 0.3
    pad_ignoring_cooldown: bool = True

    @classmethod
    def from_settings(cls, settings: Settings) -> SchedulerConfig:
        """Build from application settings."""
        return cls(**settings.get_scheduler_config())
