"""
Delivery: catalog access and per-user state.

Components:
- WordCatalog: JSON loading and word lookup
- WordHistoryStore: applies answers to a caller-owned history map
- history_file: JSON persistence helpers for history and progress
"""

from .history_file import load_history, load_progress, save_history, save_progress
from .history_store import WordHistoryStore, running_accuracy
from .word_catalog import WordCatalog

__all__ = [
    # Catalog
    "WordCatalog",
    # History
    "WordHistoryStore",
    "running_accuracy",
    # Persistence
    "load_history",
    "save_history",
    "load_progress",
    "save_progress",
]
