"""Game entities and the GameState aggregate."""
from __future__ import annotations

import enum
from dataclasses import dataclass, field

from wordfall import rules

WordId = int


@dataclass(frozen=True, slots=True)
class Word:
    id: WordId
    text: str
    x: float
    y: float
    speed: float  # pixels per second
    typed: int = 0  # leading characters matched

    @property
    def next_char(self) -> str | None:
        if self.typed >= len(self.text):
            return None
        return self.text[self.typed]

    @property
    def complete(self) -> bool:
        return self.typed == len(self.text)


@dataclass(frozen=True, slots=True)
class City:
    id: int
    x: float
    alive: bool = True


@dataclass(frozen=True, slots=True)
class CompletedWord:
    """Short-lived record of a destroyed word, kept for fade-out effects."""

    id: WordId
    text: str
    x: float
    y: float
    timestamp: float
    score: int


class FlowState(str, enum.Enum):
    """Descriptive player-flow tag. Carried in state, never transitioned."""

    STRUGGLING = "struggling"
    NORMAL = "normal"
    IN_FLOW = "in-flow"


def make_cities() -> tuple[City, ...]:
    """Six living cities evenly spaced along the bottom edge."""
    spacing = rules.FIELD_WIDTH / (rules.CITY_COUNT + 1)
    return tuple(City(id=i, x=(i + 1) * spacing) for i in range(rules.CITY_COUNT))


@dataclass(frozen=True, slots=True)
class GameState:
    words: tuple[Word, ...] = ()
    cities: tuple[City, ...] = field(default_factory=make_cities)
    next_word_id: WordId = 1
    game_over: bool = False
    score: int = 0
    total_keystrokes: int = 0
    correct_keystrokes: int = 0
    typed_timestamps: tuple[float, ...] = ()
    level: int = 1
    wave: int = 1
    consecutive_successes: int = 0
    consecutive_failures: int = 0
    baseline_wpm: float = rules.DEFAULT_BASELINE_WPM
    flow_state: FlowState = FlowState.NORMAL
    difficulty_multiplier: float = 1.0
    challenge_multiplier: float = 1.0
    words_completed_in_wave: int = 0
    completed_words: tuple[CompletedWord, ...] = ()

    @property
    def alive_cities(self) -> int:
        return sum(1 for c in self.cities if c.alive)

    @property
    def accuracy(self) -> float:
        """Percentage of correct keystrokes; 100 before the first keystroke."""
        if self.total_keystrokes == 0:
            return 100.0
        return 100.0 * self.correct_keystrokes / self.total_keystrokes


def initial_state(baseline_wpm: float = rules.DEFAULT_BASELINE_WPM) -> GameState:
    return GameState(baseline_wpm=baseline_wpm)


class SnapshotError(Exception):
    """Raised on restore failures (version mismatch, malformed payload)."""
