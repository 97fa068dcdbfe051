"""
JSON persistence for per-user history and progress.

Caller-side helpers for the CLI and integrations. Records use the
persisted camelCase shape (epoch milliseconds) validated by pydantic.

Default location: ~/.wordquest/
"""

from __future__ import annotations

import json
from pathlib import Path

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from wordquest.core.errors import HistoryFileError
from wordquest.core.models import UserProgress, WordHistory


class UserProgressRecord(BaseModel):
    """Persisted shape of UserProgress."""

    model_config = ConfigDict(populate_by_name=True)

    remembered_words: list[int] = Field(default_factory=list, alias="rememberedWords")
    forgotten_words: list[int] = Field(default_factory=list, alias="forgottenWords")
    excluded_word_ids: list[int] = Field(default_factory=list, alias="excludedWordIds")


def _read_json(path: Path) -> object:
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise HistoryFileError(f"Failed to read {path}: {e}") from e


def _write_json(path: Path, payload: object) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_suffix(path.suffix + ".tmp")
    try:
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2)
        tmp_path.replace(path)
    except (OSError, TypeError, ValueError):
        tmp_path.unlink(missing_ok=True)
        raise


# =============================================================================
# History
# =============================================================================


def load_history(path: Path) -> dict[int, WordHistory]:
    """
    Load a history map from JSON.

    Missing files yield an empty map.

    Raises:
        HistoryFileError: if the file is unreadable or a record is invalid
    """
    if not path.exists():
        return {}

    data = _read_json(path)
    records = data.get("records", []) if isinstance(data, dict) else data
    if not isinstance(records, list):
        raise HistoryFileError(f"{path}: expected a list of history records")

    history: dict[int, WordHistory] = {}
    for record in records:
        try:
            entry = WordHistory.from_record(record)
        except ValidationError as e:
            raise HistoryFileError(f"{path}: invalid history record: {e}") from e
        history[entry.word_id] = entry

    logger.debug(f"Loaded {len(history)} history records from {path}")
    return history


def save_history(path: Path, history: dict[int, WordHistory]) -> None:
    """Write a history map to JSON, ordered by word id."""
    records = [history[word_id].to_record() for word_id in sorted(history)]
    _write_json(path, {"records": records})
    logger.debug(f"Saved {len(records)} history records to {path}")


# =============================================================================
# Progress
# =============================================================================


def load_progress(path: Path) -> UserProgress:
    """
    Load remembered/forgotten/excluded sets from JSON.

    Missing files yield empty sets.

    Raises:
        HistoryFileError: if the file is unreadable or invalid
    """
    if not path.exists():
        return UserProgress()

    try:
        record = UserProgressRecord.model_validate(_read_json(path))
    except ValidationError as e:
        raise HistoryFileError(f"{path}: invalid progress record: {e}") from e

    return UserProgress(
        remembered_words=frozenset(record.remembered_words),
        forgotten_words=frozenset(record.forgotten_words),
        excluded_word_ids=frozenset(record.excluded_word_ids),
    )


def save_progress(path: Path, progress: UserProgress) -> None:
    record = UserProgressRecord(
        remembered_words=sorted(progress.remembered_words),
        forgotten_words=sorted(progress.forgotten_words),
        excluded_word_ids=sorted(progress.excluded_word_ids),
    )
    _write_json(path, record.model_dump(by_alias=True))
