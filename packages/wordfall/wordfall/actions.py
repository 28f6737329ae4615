"""Actions consumed by the reducer and the transition events it emits.

Actions are frozen dataclasses dispatched by type. A reducer step returns a
``Transition``: the next state, any follow-up actions to dispatch after a
delay, and the events the step produced, in order.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union

from wordfall.types import GameState, Word, WordId

_LETTERS = frozenset("abcdefghijklmnopqrstuvwxyz")


# -- Actions --

@dataclass(frozen=True, slots=True)
class SpawnWord:
    word: Word


@dataclass(frozen=True, slots=True)
class Tick:
    delta: float  # seconds since the previous frame

    def __post_init__(self) -> None:
        if self.delta < 0:
            raise ValueError(f"Tick delta must be non-negative, got {self.delta}")


@dataclass(frozen=True, slots=True)
class TypeChar:
    char: str
    now: float  # monotonic seconds, stamped by the input source

    def __post_init__(self) -> None:
        if self.char not in _LETTERS:
            raise ValueError(f"TypeChar expects one lowercase letter, got {self.char!r}")


@dataclass(frozen=True, slots=True)
class SetChallengeMultiplier:
    value: float


@dataclass(frozen=True, slots=True)
class NextWave:
    pass


@dataclass(frozen=True, slots=True)
class LevelUp:
    pass


@dataclass(frozen=True, slots=True)
class ResetGame:
    pass


Action = Union[
    SpawnWord, Tick, TypeChar, SetChallengeMultiplier, NextWave, LevelUp, ResetGame
]


def is_letter(key: str) -> bool:
    """True for a single lowercase ASCII letter."""
    return key in _LETTERS


# -- Transition events --

@dataclass(frozen=True, slots=True)
class WordCompleted:
    signal: ClassVar[str] = "word_completed"

    word_id: WordId
    text: str
    x: float
    y: float
    score: int


@dataclass(frozen=True, slots=True)
class CityDestroyed:
    signal: ClassVar[str] = "city_destroyed"

    city_id: int
    word_id: WordId


@dataclass(frozen=True, slots=True)
class WaveAdvanced:
    signal: ClassVar[str] = "wave_advanced"

    level: int
    wave: int


@dataclass(frozen=True, slots=True)
class LevelAdvanced:
    signal: ClassVar[str] = "level_advanced"

    level: int


@dataclass(frozen=True, slots=True)
class GameOver:
    signal: ClassVar[str] = "game_over"

    score: int


Event = Union[WordCompleted, CityDestroyed, WaveAdvanced, LevelAdvanced, GameOver]


# -- Reducer output --

@dataclass(frozen=True, slots=True)
class Deferred:
    """A follow-up action the driver must dispatch after ``delay`` seconds."""

    delay: float
    action: Action


@dataclass(frozen=True, slots=True)
class Transition:
    state: GameState
    followups: tuple[Deferred, ...] = ()
    events: tuple[Event, ...] = ()
