"""Pure spawn policy: rate, cap, speed, and placement.

Every function reads a state snapshot and a ``SpawnConfig``; randomness comes
in through an explicit ``random.Random``.
"""
from __future__ import annotations

import random
from typing import Sequence

from wordfall import GameState, current_wpm
from wordfall.rules import clamp
from wordfall.scoring import wpm_ratio

from wordfall_spawn.config import SpawnConfig


def spawn_rate(state: GameState, now: float, config: SpawnConfig) -> float:
    """Spawns per second, capped at ``config.max_rate``."""
    wpm = current_wpm(state.typed_timestamps, now)
    wpm_factor = clamp(
        wpm_ratio(wpm, state.baseline_wpm),
        config.wpm_factor_floor,
        config.wpm_factor_ceiling,
    )
    level_factor = 1.0 + state.level * config.level_coefficient
    rate = (
        config.base_rate
        * wpm_factor
        * level_factor
        * state.difficulty_multiplier
        * state.challenge_multiplier
    )
    return min(config.max_rate, rate)


def spawn_interval(state: GameState, now: float, config: SpawnConfig) -> float:
    """Seconds until the next spawn cycle."""
    return 1.0 / spawn_rate(state, now, config)


def max_active_words(level: int, config: SpawnConfig) -> int:
    return config.min_words + level * config.words_per_level


def initial_speed(
    level: int,
    difficulty: float,
    challenge: float,
    rng: random.Random,
    config: SpawnConfig,
) -> float:
    # Only the random variation scales with the multipliers.
    variation = rng.uniform(0.0, config.speed_variation) * difficulty * challenge
    return config.speed_base + level * config.speed_per_level + variation


def choose_x(
    text: str,
    occupied: Sequence[float],
    rng: random.Random,
    config: SpawnConfig,
) -> float:
    """Rejection-sample a left edge that keeps ``safety_margin`` from every
    occupied x. After ``placement_attempts`` misses the last sample is used
    and overlap is tolerated."""
    span = max(0.0, config.field_width - len(text) * config.char_width)
    x = 0.0
    for _ in range(config.placement_attempts):
        x = rng.uniform(0.0, span)
        if all(abs(x - other) >= config.safety_margin for other in occupied):
            return x
    return x


def pick_text(pool: Sequence[str], rng: random.Random) -> str | None:
    if not pool:
        return None
    return pool[rng.randrange(len(pool))]
