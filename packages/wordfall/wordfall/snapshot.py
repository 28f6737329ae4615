"""JSON-compatible snapshot and restore of a GameState."""
from __future__ import annotations

import dataclasses
from typing import Any

from wordfall.types import City, CompletedWord, FlowState, GameState, SnapshotError, Word

_SNAPSHOT_VERSION = 1


def snapshot_state(state: GameState) -> dict[str, Any]:
    data = {f.name: getattr(state, f.name) for f in dataclasses.fields(state)}
    data["words"] = [dataclasses.asdict(w) for w in state.words]
    data["cities"] = [dataclasses.asdict(c) for c in state.cities]
    data["completed_words"] = [dataclasses.asdict(cw) for cw in state.completed_words]
    data["typed_timestamps"] = list(state.typed_timestamps)
    data["flow_state"] = state.flow_state.value
    return {"version": _SNAPSHOT_VERSION, "state": data}


def restore_state(data: dict[str, Any]) -> GameState:
    version = data.get("version")
    if version != _SNAPSHOT_VERSION:
        raise SnapshotError(
            f"Unsupported snapshot version {version!r}, expected {_SNAPSHOT_VERSION}"
        )
    fields = dict(data["state"])
    try:
        fields["words"] = tuple(Word(**w) for w in fields["words"])
        fields["cities"] = tuple(City(**c) for c in fields["cities"])
        fields["completed_words"] = tuple(
            CompletedWord(**cw) for cw in fields["completed_words"]
        )
        fields["typed_timestamps"] = tuple(fields["typed_timestamps"])
        fields["flow_state"] = FlowState(fields["flow_state"])
        return GameState(**fields)
    except (KeyError, TypeError, ValueError) as exc:
        raise SnapshotError(f"Malformed game state snapshot: {exc}") from exc
