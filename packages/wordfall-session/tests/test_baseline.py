"""Tests for BaselineStore and MemoryBaselineStore."""
from __future__ import annotations

import json
import logging

import pytest
from wordfall_session import BaselineStore, MemoryBaselineStore


@pytest.fixture
def path(tmp_path):
    return tmp_path / "profile" / "baseline.json"


class TestBaselineStore:
    def test_missing_file_gives_default(self, path):
        assert BaselineStore(path).load() == 40.0
        assert BaselineStore(path, default=55.0).load() == 55.0

    def test_save_then_load(self, path):
        store = BaselineStore(path)
        store.save(61.5)
        assert json.loads(path.read_text()) == {"baseline_wpm": 61.5}
        assert BaselineStore(path).load() == 61.5

    def test_corrupt_file_falls_back(self, path, caplog):
        path.parent.mkdir(parents=True)
        path.write_text("{not json")
        with caplog.at_level(logging.WARNING):
            assert BaselineStore(path).load() == 40.0
        assert "unreadable baseline" in caplog.text

    def test_wrong_shape_falls_back(self, path):
        path.parent.mkdir(parents=True)
        path.write_text(json.dumps({"wpm": 70}))
        assert BaselineStore(path).load() == 40.0

    def test_non_positive_value_falls_back(self, path):
        path.parent.mkdir(parents=True)
        path.write_text(json.dumps({"baseline_wpm": 0}))
        assert BaselineStore(path).load() == 40.0

    def test_record_only_on_improvement(self, path):
        store = BaselineStore(path)
        assert not store.record(30.0)
        assert not path.exists()
        assert store.record(48.0)
        assert store.load() == 48.0
        assert not store.record(48.0)
        assert store.load() == 48.0


class TestMemoryBaselineStore:
    def test_record(self):
        store = MemoryBaselineStore(20.0)
        assert store.load() == 20.0
        assert store.record(25.0)
        assert not store.record(10.0)
        assert store.value == 25.0
