"""
Unit tests for JSON history and progress files.
"""

import json

import pytest

from wordquest.core.errors import HistoryFileError
from wordquest.core.models import UserProgress
from wordquest.delivery.history_file import (
    _write_json,
    load_history,
    load_progress,
    save_history,
    save_progress,
)


class TestHistoryFile:
    def test_missing_file_is_empty(self, tmp_path):
        assert load_history(tmp_path / "missing.json") == {}

    def test_save_and_load(self, tmp_path, catalog, make_history):
        path = tmp_path / "nested" / "history.json"
        history = {
            9: make_history(catalog.get(9), consecutive_correct=1, average_accuracy=100.0),
            2: make_history(catalog.get(2)),
        }

        save_history(path, history)

        data = json.loads(path.read_text(encoding="utf-8"))
        assert [r["wordId"] for r in data["records"]] == [2, 9]
        assert load_history(path) == history

    def test_accepts_bare_list(self, tmp_path, catalog, make_history):
        path = tmp_path / "history.json"
        entry = make_history(catalog.get(3))
        path.write_text(json.dumps([entry.to_record()]), encoding="utf-8")

        assert load_history(path) == {3: entry}

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "history.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(HistoryFileError):
            load_history(path)

    def test_invalid_record(self, tmp_path, catalog, make_history):
        path = tmp_path / "history.json"
        record = make_history(catalog.get(3)).to_record()
        record["timesShown"] = -1
        path.write_text(json.dumps({"records": [record]}), encoding="utf-8")

        with pytest.raises(HistoryFileError):
            load_history(path)


class TestProgressFile:
    def test_missing_file_is_empty(self, tmp_path):
        assert load_progress(tmp_path / "progress.json") == UserProgress()

    def test_save_and_load(self, tmp_path):
        path = tmp_path / "progress.json"
        progress = UserProgress(remembered_words={3, 1}, forgotten_words={2}, excluded_word_ids={7})

        save_progress(path, progress)

        data = json.loads(path.read_text(encoding="utf-8"))
        assert data == {"rememberedWords": [1, 3], "forgottenWords": [2], "excludedWordIds": [7]}
        assert load_progress(path) == progress

    def test_invalid_progress(self, tmp_path):
        path = tmp_path / "progress.json"
        path.write_text(json.dumps({"rememberedWords": "lots"}), encoding="utf-8")

        with pytest.raises(HistoryFileError):
            load_progress(path)


class TestAtomicWrite:
    def test_failed_write_keeps_previous_file(self, tmp_path):
        path = tmp_path / "progress.json"
        save_progress(path, UserProgress(forgotten_words={2}))

        with pytest.raises(TypeError):
            _write_json(path, {"rememberedWords": [1], "forgottenWords": object()})

        assert not (tmp_path / "progress.json.tmp").exists()
        assert load_progress(path) == UserProgress(forgotten_words={2})
