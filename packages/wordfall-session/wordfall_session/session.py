"""GameSession - drives the reducer from clock, keyboard, and spawn producers."""
from __future__ import annotations

import logging
import os
import random
import time
from typing import Any, Callable, Protocol

from wordfall import (
    Action,
    Deferred,
    FrameClock,
    GameOver,
    GameState,
    LevelAdvanced,
    ResetGame,
    SetChallengeMultiplier,
    Tick,
    TimerHandle,
    TimerScheduler,
    TypeChar,
    WaveAdvanced,
    current_wpm,
    initial_state,
    is_letter,
    restore_state,
    snapshot_state,
)
from wordfall_spawn import SpawnConfig, SpawnController, WordPoolProvider

from wordfall_session.baseline import MemoryBaselineStore
from wordfall_session.bus import SignalBus
from wordfall_session.queue import ActionQueue

logger = logging.getLogger(__name__)


class BaselineSource(Protocol):
    def load(self) -> float: ...

    def record(self, final_wpm: float) -> bool: ...


class GameSession:
    """One player's game, from first frame to teardown.

    Every producer funnels into one ``ActionQueue`` and each public call
    drains it before returning, so actions reach the reducer one at a time
    in arrival order. Timers (deferred wave/level advances and the spawn
    loop) only fire from ``TimerScheduler.advance``, which every call runs
    first with its own timestamp; a deferred action therefore lands after
    anything that arrived before it was due and before anything after.
    """

    def __init__(
        self,
        provider: WordPoolProvider,
        store: BaselineSource | None = None,
        spawn_config: SpawnConfig | None = None,
        seed: int | None = None,
        clock: Callable[[], float] = time.monotonic,
        max_frame_delta: float = 0.25,
    ) -> None:
        self._clock = clock
        self._store = store if store is not None else MemoryBaselineStore()
        self._state = initial_state(baseline_wpm=self._store.load())

        if seed is None:
            seed = int.from_bytes(os.urandom(8))
        self._seed = seed

        self._queue = ActionQueue()
        self._bus = SignalBus()
        self._frames = FrameClock(max_delta=max_frame_delta)
        self._scheduler = TimerScheduler(now=clock())
        self._deferred: list[TimerHandle] = []
        self._spawner = SpawnController(
            provider,
            self._scheduler,
            self._queue.enqueue,
            config=spawn_config,
            rng=random.Random(seed),
        )
        self._spawner.observe(self._state)
        self._started = False
        self._closed = False

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def bus(self) -> SignalBus:
        return self._bus

    @property
    def spawner(self) -> SpawnController:
        return self._spawner

    @property
    def scheduler(self) -> TimerScheduler:
        return self._scheduler

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def closed(self) -> bool:
        return self._closed

    # -- Producers --

    def start(self) -> None:
        if self._closed:
            return
        self._started = True
        self._spawner.start()

    def frame(self, now: float | None = None) -> GameState:
        """Advance one animation frame: fire due timers, then TICK."""
        if self._closed:
            return self._state
        now = self._now(now)
        delta = self._frames.advance(now)
        self._scheduler.advance(now)
        self._queue.enqueue(Tick(delta))
        self._process(now)
        return self._state

    def press(self, key: str, now: float | None = None) -> bool:
        """Feed one keydown. Returns False when the key was ignored."""
        if self._closed or self._state.game_over or len(key) != 1:
            return False
        char = key.lower()
        if not is_letter(char):
            return False
        now = self._now(now)
        self._scheduler.advance(now)
        self._queue.enqueue(TypeChar(char=char, now=now))
        self._process(now)
        return True

    def dispatch(self, action: Action, now: float | None = None) -> GameState:
        if self._closed:
            return self._state
        now = self._now(now)
        self._scheduler.advance(now)
        self._queue.enqueue(action)
        self._process(now)
        return self._state

    def set_challenge(self, value: float, now: float | None = None) -> GameState:
        return self.dispatch(SetChallengeMultiplier(value), now)

    def reset(self, now: float | None = None) -> GameState:
        """Restart the game, keeping the baseline; pending advances are dropped."""
        if self._closed:
            return self._state
        self._cancel_deferred()
        self.dispatch(ResetGame(), now)
        self._started = True
        self._spawner.start()
        logger.info("game reset (baseline %.1f WPM)", self._state.baseline_wpm)
        return self._state

    def close(self) -> None:
        """Tear down every timer so nothing fires into a dead session."""
        self._spawner.stop()
        self._cancel_deferred()
        self._scheduler.cancel_all()
        self._queue.clear()
        self._bus.clear()
        self._closed = True

    # -- Snapshot / restore --

    def snapshot(self) -> dict[str, Any]:
        return {"seed": self._seed, "game": snapshot_state(self._state)}

    def restore(self, data: dict[str, Any]) -> None:
        """Replace the game state. A started session resumes spawning unless the
        restored game is already over."""
        if self._closed:
            return
        self._cancel_deferred()
        self._queue.clear()
        self._state = restore_state(data["game"])
        self._frames.reset()
        self._spawner.observe(self._state)
        if self._started and not self._state.game_over:
            self._spawner.start()

    # -- Consumer --

    def _now(self, now: float | None) -> float:
        return self._clock() if now is None else now

    def _process(self, now: float) -> None:
        previous = self._state
        result = self._queue.drain(previous)
        self._state = result.state

        for deferred in result.followups:
            self._schedule(deferred)
        if self._state.game_over:
            self._cancel_deferred()
        for event in result.events:
            if isinstance(event, WaveAdvanced):
                logger.info("wave %d of level %d", event.wave, event.level)
            elif isinstance(event, LevelAdvanced):
                logger.info("level up: %d", event.level)
            elif isinstance(event, GameOver):
                logger.info("game over, score %d", event.score)
            self._bus.publish(event)

        if self._state.game_over and not previous.game_over:
            final_wpm = current_wpm(self._state.typed_timestamps, now)
            self._store.record(final_wpm)

        self._spawner.observe(self._state)
        self._bus.flush()

    def _schedule(self, deferred: Deferred) -> None:
        self._deferred = [h for h in self._deferred if not h.cancelled]
        action = deferred.action
        handle = self._scheduler.call_later(
            deferred.delay, lambda: self._queue.enqueue(action)
        )
        self._deferred.append(handle)

    def _cancel_deferred(self) -> None:
        for handle in self._deferred:
            handle.cancel()
        self._deferred.clear()
