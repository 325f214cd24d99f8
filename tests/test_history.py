import json
import logging

import gridsnake.history as history_module
from gridsnake.config import HIGHEST_KEY, HISTORY_KEY
from gridsnake.history import ScoreHistoryStore


def test_zero_scores_are_not_recorded(tmp_path):
    store = ScoreHistoryStore(str(tmp_path / "scores.json"))
    for score in (5, 0, 8):
        store.append(score)
    assert store.get_all() == [5, 8]
    assert store.get_highest() == 8


def test_history_survives_a_new_store(tmp_path):
    path = str(tmp_path / "nested" / "scores.json")
    first = ScoreHistoryStore(path)
    first.append(3)
    first.append(9)
    first.append(4)

    second = ScoreHistoryStore(path)
    assert second.get_all() == [3, 9, 4]
    assert second.get_highest() == 9

    with open(path, encoding="utf-8") as fh:
        data = json.load(fh)
    assert data == {HISTORY_KEY: [3, 9, 4], HIGHEST_KEY: 9}


def test_empty_store_has_no_highest(tmp_path):
    store = ScoreHistoryStore(str(tmp_path / "missing.json"))
    assert store.get_all() == []
    assert store.get_highest() == 0


def test_get_all_returns_a_copy():
    store = ScoreHistoryStore(None)
    store.append(2)
    store.get_all().append(99)
    assert store.get_all() == [2]


def test_corrupt_file_starts_empty(tmp_path, caplog):
    path = tmp_path / "scores.json"
    path.write_text("{not json", encoding="utf-8")
    with caplog.at_level(logging.WARNING, logger="gridsnake.history"):
        store = ScoreHistoryStore(str(path))
    assert store.get_all() == []
    assert any("Could not read" in r.message for r in caplog.records)


def test_unwritable_location_warns_once_and_keeps_scores(tmp_path, caplog):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    store = ScoreHistoryStore(str(blocker / "scores.json"))

    with caplog.at_level(logging.WARNING, logger="gridsnake.history"):
        assert store.append(4)
        assert store.append(6)

    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert store.get_all() == [4, 6]
    assert store.get_highest() == 6


def test_invalid_path_is_not_fatal(caplog):
    store = ScoreHistoryStore("scores\x00.json")
    with caplog.at_level(logging.WARNING, logger="gridsnake.history"):
        assert store.append(5)
    assert store.get_all() == [5]
    assert any("not saved" in r.message for r in caplog.records)


def test_failed_write_removes_temp_file(tmp_path, monkeypatch):
    def disk_full(*args, **kwargs):
        raise OSError("No space left on device")

    path = tmp_path / "scores.json"
    store = ScoreHistoryStore(str(path))
    monkeypatch.setattr(history_module.json, "dump", disk_full)
    assert store.append(3)
    assert store.get_all() == [3]
    assert not (tmp_path / "scores.json.tmp").exists()
    assert not path.exists()
