"""Exception hierarchy for the word scheduler."""

from __future__ import annotations


class WordQuestError(Exception):
    """Base class for all scheduler errors."""


class NotFoundError(WordQuestError):
    """Raised when a word id is not present in the catalog."""

    def __init__(self, word_id: int):
        self.word_id = word_id
        super().__init__(f"Word with ID {word_id} not found")


class CatalogLoadError(WordQuestError):
    """Raised when a word catalog file cannot be read."""
    pass


class HistoryFileError(WordQuestError):
    """Raised when a persisted history or progress file is unreadable or invalid."""
    pass
