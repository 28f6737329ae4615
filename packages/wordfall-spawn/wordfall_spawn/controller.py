"""SpawnController - adaptive loop that emits SpawnWord actions."""
from __future__ import annotations

import logging
import os
import random
from collections import deque
from typing import Callable

from wordfall import GameState, SpawnWord, TimerHandle, TimerScheduler, Word

from wordfall_spawn.config import SpawnConfig
from wordfall_spawn.policy import (
    choose_x,
    initial_speed,
    max_active_words,
    pick_text,
    spawn_interval,
)
from wordfall_spawn.pool import WordPoolProvider, playable_words

logger = logging.getLogger(__name__)


class SpawnController:
    """Self-rescheduling spawn loop.

    The controller never reads game state directly. The driver sends it
    immutable snapshots through ``observe()``; each cycle works from the
    latest one received. Exactly one timer is outstanding while running.
    A level change seen in a snapshot tears the loop down and rebuilds it
    with the new level's pool; a game-over snapshot stops it.
    """

    def __init__(
        self,
        provider: WordPoolProvider,
        scheduler: TimerScheduler,
        emit: Callable[[SpawnWord], None],
        config: SpawnConfig | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._provider = provider
        self._scheduler = scheduler
        self._emit = emit
        self._config = config if config is not None else SpawnConfig()
        if rng is None:
            rng = random.Random(int.from_bytes(os.urandom(8)))
        self._rng = rng

        self._inbox: deque[GameState] = deque()
        self._snapshot: GameState | None = None
        self._handle: TimerHandle | None = None
        self._running = False
        self._level = 1
        self._pool: list[str] = []
        self._last_id = 0
        self._unseen: list[Word] = []

    @property
    def running(self) -> bool:
        return self._running

    @property
    def level(self) -> int:
        return self._level

    @property
    def pool(self) -> list[str]:
        return list(self._pool)

    @property
    def config(self) -> SpawnConfig:
        return self._config

    # -- Lifecycle --

    def start(self) -> None:
        """Load the current level's pool and schedule the first cycle.

        A no-op while already running, so repeated calls never double-schedule.
        """
        if self._running:
            return
        if self._snapshot is not None and self._snapshot.game_over:
            logger.debug("spawn loop not started: game is over")
            return
        self._running = True
        self._pool = playable_words(self._provider(self._level))
        if not self._pool:
            logger.warning("empty word pool for level %d, nothing will spawn", self._level)
        logger.info("spawn loop started at level %d (%d words)", self._level, len(self._pool))
        self._schedule()

    def stop(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
        if self._running:
            logger.info("spawn loop stopped at level %d", self._level)
        self._running = False

    def restart(self, level: int) -> None:
        self.stop()
        self._level = level
        self.start()

    # -- Snapshot channel --

    def observe(self, state: GameState) -> None:
        """Deliver a fresh state snapshot."""
        self._inbox.append(state)
        self._receive()

    def _receive(self) -> None:
        if not self._inbox:
            return
        while self._inbox:
            self._snapshot = self._inbox.popleft()
        self._unseen.clear()
        snap = self._snapshot
        if snap.level != self._level:
            if self._running:
                logger.info("level %d -> %d, rebuilding spawn loop", self._level, snap.level)
                self.restart(snap.level)
            else:
                self._level = snap.level
        if snap.game_over and self._running:
            self.stop()

    # -- Cycle --

    def _schedule(self) -> None:
        if self._snapshot is None:
            delay = 1.0 / self._config.base_rate
        else:
            delay = spawn_interval(self._snapshot, self._scheduler.now, self._config)
        self._handle = self._scheduler.call_later(delay, self._cycle)

    def _cycle(self) -> None:
        self._handle = None
        snap = self._snapshot
        if snap is not None and snap.game_over:
            self.stop()
            return
        if snap is not None:
            self._try_spawn(snap)
        if self._running:
            self._schedule()

    def _try_spawn(self, snap: GameState) -> None:
        active = len(snap.words) + len(self._unseen)
        if active >= max_active_words(snap.level, self._config):
            return
        text = pick_text(self._pool, self._rng)
        if text is None:
            return
        occupied = [w.x for w in snap.words] + [w.x for w in self._unseen]
        word = Word(
            id=max(snap.next_word_id, self._last_id + 1),
            text=text,
            x=choose_x(text, occupied, self._rng, self._config),
            y=0.0,
            speed=initial_speed(
                snap.level,
                snap.difficulty_multiplier,
                snap.challenge_multiplier,
                self._rng,
                self._config,
            ),
        )
        self._last_id = word.id
        self._unseen.append(word)
        self._emit(SpawnWord(word))
