"""Tests for the SpawnController loop."""
from __future__ import annotations

import random
from dataclasses import replace

import pytest
from wordfall import SpawnWord, TimerScheduler, Word, initial_state
from wordfall_spawn import SpawnConfig, SpawnController, StaticWordPool

FIRST_INTERVAL = 1 / (0.5 * 0.8 * 1.15)  # fresh game, level 1


class RecordingPool:
    def __init__(self, pools: dict[int, list[str]]) -> None:
        self._pool = StaticWordPool(pools)
        self.calls: list[int] = []

    def __call__(self, level: int):
        self.calls.append(level)
        return self._pool(level)


@pytest.fixture
def scheduler() -> TimerScheduler:
    return TimerScheduler(now=0.0)


@pytest.fixture
def provider() -> RecordingPool:
    return RecordingPool({1: ["cat", "dog", "a"], 2: ["zebra", "quartz"]})


@pytest.fixture
def emitted() -> list[SpawnWord]:
    return []


@pytest.fixture
def controller(provider, scheduler, emitted) -> SpawnController:
    ctl = SpawnController(provider, scheduler, emitted.append, rng=random.Random(7))
    ctl.observe(initial_state())
    return ctl


class TestLifecycle:
    def test_idle_until_started(self, controller, scheduler, emitted):
        assert not controller.running
        scheduler.advance(60.0)
        assert emitted == []

    def test_start_schedules_one_cycle(self, controller, scheduler, provider):
        controller.start()
        assert controller.running
        assert scheduler.pending() == 1
        assert provider.calls == [1]
        assert controller.pool == ["cat", "dog"]

    def test_start_twice_does_not_double_schedule(self, controller, scheduler):
        controller.start()
        controller.start()
        assert scheduler.pending() == 1

    def test_stop_cancels_timer(self, controller, scheduler, emitted):
        controller.start()
        controller.stop()
        assert not controller.running
        assert scheduler.pending() == 0
        scheduler.advance(60.0)
        assert emitted == []


class TestCycle:
    def test_spawns_after_interval(self, controller, scheduler, emitted):
        controller.start()
        scheduler.advance(FIRST_INTERVAL - 0.01)
        assert emitted == []
        scheduler.advance(FIRST_INTERVAL + 0.01)
        assert len(emitted) == 1
        word = emitted[0].word
        assert word.id == 1
        assert word.text in {"cat", "dog"}
        assert word.y == 0.0
        assert word.typed == 0
        assert 48.0 <= word.speed <= 88.0
        assert scheduler.pending() == 1

    def test_ids_stay_unique_between_snapshots(self, controller, scheduler, emitted):
        controller.start()
        scheduler.advance(FIRST_INTERVAL * 3 + 0.1)
        ids = [a.word.id for a in emitted]
        assert ids == [1, 2, 3]

    def test_skips_when_at_cap_but_keeps_cycling(self, controller, scheduler, emitted):
        words = tuple(
            Word(id=i, text="cat", x=i * 150.0, y=0.0, speed=1.0) for i in range(1, 5)
        )
        controller.observe(replace(initial_state(), words=words, next_word_id=5))
        controller.start()
        scheduler.advance(FIRST_INTERVAL * 2 + 0.1)
        assert emitted == []
        assert scheduler.pending() == 1

    def test_empty_pool_never_spawns(self, scheduler, emitted):
        ctl = SpawnController(StaticWordPool({1: ["a", "b"]}), scheduler, emitted.append)
        ctl.observe(initial_state())
        ctl.start()
        scheduler.advance(30.0)
        assert emitted == []
        assert ctl.running
        assert scheduler.pending() == 1

    def test_interval_follows_snapshot(self, scheduler, emitted, provider):
        ctl = SpawnController(
            provider, scheduler, emitted.append,
            config=SpawnConfig(base_rate=10.0, max_rate=2.0),
            rng=random.Random(1),
        )
        ctl.observe(initial_state())
        ctl.start()
        scheduler.advance(0.5)
        assert len(emitted) == 1


class TestSnapshots:
    def test_level_change_rebuilds_with_new_pool(self, controller, scheduler, provider, emitted):
        controller.start()
        controller.observe(replace(initial_state(), level=2))
        assert controller.level == 2
        assert provider.calls == [1, 2]
        assert controller.pool == ["zebra", "quartz"]
        assert scheduler.pending() == 1
        scheduler.advance(30.0)
        assert emitted and all(a.word.text in {"zebra", "quartz"} for a in emitted)

    def test_level_change_while_stopped_only_records_level(self, controller, provider):
        controller.observe(replace(initial_state(), level=3))
        assert controller.level == 3
        assert not controller.running
        assert provider.calls == []

    def test_game_over_stops_loop(self, controller, scheduler, emitted):
        controller.start()
        controller.observe(replace(initial_state(), game_over=True))
        assert not controller.running
        assert scheduler.pending() == 0
        scheduler.advance(60.0)
        assert emitted == []

    def test_start_refused_after_game_over(self, controller, scheduler):
        controller.observe(replace(initial_state(), game_over=True))
        controller.start()
        assert not controller.running
        assert scheduler.pending() == 0

    def test_reset_snapshot_allows_restart(self, controller, scheduler):
        controller.observe(replace(initial_state(), level=4, game_over=True))
        controller.observe(initial_state())
        controller.start()
        assert controller.level == 1
        assert scheduler.pending() == 1

    def test_placement_avoids_active_words(self, scheduler, emitted, provider):
        ctl = SpawnController(
            provider, scheduler, emitted.append,
            config=SpawnConfig(placement_attempts=500),
            rng=random.Random(11),
        )
        busy = (Word(id=1, text="dog", x=400.0, y=10.0, speed=1.0),)
        ctl.observe(replace(initial_state(), words=busy, next_word_id=2))
        ctl.start()
        scheduler.advance(FIRST_INTERVAL + 0.1)
        assert len(emitted) == 1
        assert emitted[0].word.id == 2
        assert abs(emitted[0].word.x - 400.0) >= 100.0
