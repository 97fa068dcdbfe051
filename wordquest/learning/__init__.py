"""
Learning: word selection for sessions.

Components:
- pool_selectors: fresh / forgotten / remembered / cross-category / adaptive pools
- session_assembler: strategy-driven session construction with cooldowns
- smart_selector: distribution-driven selection from the learning sets
"""

from .pool_selectors import (
    AdaptiveDifficultySelector,
    CrossCategorySelector,
    ForgottenWordSelector,
    FreshWordSelector,
    PoolContext,
    RememberedWordSelector,
)
from .session_assembler import SessionAssembler, shuffle_with_progression
from .smart_selector import (
    SelectionReason,
    SmartSelection,
    SmartSelectionOptions,
    SmartWordSelector,
)

__all__ = [
    # Pools
    "PoolContext",
    "FreshWordSelector",
    "ForgottenWordSelector",
    "RememberedWordSelector",
    "CrossCategorySelector",
    "AdaptiveDifficultySelector",
    # Sessions
    "SessionAssembler",
    "shuffle_with_progression",
    # Smart selection
    "SmartWordSelector",
    "SmartSelectionOptions",
    "SmartSelection",
    "SelectionReason",
]
