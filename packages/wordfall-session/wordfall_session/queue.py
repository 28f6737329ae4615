"""ActionQueue - the single serialized entry point into the reducer."""
from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field

from wordfall import Action, Deferred, Event, GameState, reduce


@dataclass
class DrainResult:
    state: GameState
    applied: int = 0
    followups: list[Deferred] = field(default_factory=list)
    events: list[Event] = field(default_factory=list)


class ActionQueue:
    """FIFO of pending actions from every producer (frame clock, keyboard,
    spawn loop, deferred timers). ``drain`` folds them through the reducer
    one at a time, in arrival order.
    """

    def __init__(self) -> None:
        self._pending: deque[Action] = deque()

    def enqueue(self, action: Action) -> None:
        self._pending.append(action)

    def pending(self) -> int:
        return len(self._pending)

    def clear(self) -> None:
        self._pending.clear()

    def drain(self, state: GameState) -> DrainResult:
        result = DrainResult(state=state)
        while self._pending:
            transition = reduce(result.state, self._pending.popleft())
            result.state = transition.state
            result.applied += 1
            result.followups.extend(transition.followups)
            result.events.extend(transition.events)
        return result
