"""Spawn tuning knobs."""
from __future__ import annotations

from dataclasses import dataclass

from wordfall import rules


@dataclass(frozen=True)
class SpawnConfig:
    # Spawn rate (spawns per second)
    base_rate: float = 0.5
    wpm_factor_floor: float = 0.8
    wpm_factor_ceiling: float = 2.0
    level_coefficient: float = 0.15
    max_rate: float = 2.5

    # Active-word cap: min_words + level * words_per_level
    min_words: int = 3
    words_per_level: int = 1

    # Initial fall speed (pixels per second)
    speed_base: float = 40.0
    speed_per_level: float = 8.0
    speed_variation: float = 40.0

    # Placement
    safety_margin: float = 100.0  # min horizontal gap to any active word
    placement_attempts: int = 10
    char_width: float = 12.0
    field_width: float = rules.FIELD_WIDTH

    def __post_init__(self) -> None:
        if self.base_rate <= 0 or self.max_rate <= 0:
            raise ValueError("spawn rates must be positive")
        if self.wpm_factor_floor <= 0:
            raise ValueError("wpm_factor_floor must be positive")
        if self.wpm_factor_floor > self.wpm_factor_ceiling:
            raise ValueError("wpm_factor_floor must not exceed wpm_factor_ceiling")
        if self.placement_attempts < 1:
            raise ValueError("placement_attempts must be >= 1")
