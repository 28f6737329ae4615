"""wordfall-spawn - Adaptive word spawning for wordfall."""
from __future__ import annotations

from wordfall_spawn.config import SpawnConfig
from wordfall_spawn.controller import SpawnController
from wordfall_spawn.policy import (
    choose_x,
    initial_speed,
    max_active_words,
    pick_text,
    spawn_interval,
    spawn_rate,
)
from wordfall_spawn.pool import StaticWordPool, WordPoolProvider, playable_words

__all__ = [
    "SpawnConfig",
    "SpawnController",
    "StaticWordPool",
    "WordPoolProvider",
    "choose_x",
    "initial_speed",
    "max_active_words",
    "pick_text",
    "playable_words",
    "spawn_interval",
    "spawn_rate",
]
