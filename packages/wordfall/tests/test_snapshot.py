"""Tests for GameState snapshot/restore."""
import json
from dataclasses import replace

import pytest
from wordfall import (
    SnapshotError,
    TypeChar,
    Word,
    apply,
    initial_state,
    restore_state,
    snapshot_state,
)


def _busy_state():
    state = replace(
        initial_state(baseline_wpm=48.0),
        words=(
            Word(id=1, text="ab", x=10.0, y=20.0, speed=50.0),
            Word(id=2, text="quartz", x=300.0, y=80.0, speed=44.0, typed=0),
        ),
        level=2,
        wave=3,
    )
    return apply(apply(state, TypeChar("a", 7.0)), TypeChar("b", 7.2))


def test_round_trip_through_json():
    state = _busy_state()
    data = json.loads(json.dumps(snapshot_state(state)))
    assert restore_state(data) == state


def test_version_mismatch():
    data = snapshot_state(initial_state())
    data["version"] = 99
    with pytest.raises(SnapshotError):
        restore_state(data)


def test_malformed_payload():
    data = snapshot_state(initial_state())
    del data["state"]["cities"]
    with pytest.raises(SnapshotError):
        restore_state(data)
