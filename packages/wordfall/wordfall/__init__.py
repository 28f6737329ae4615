"""wordfall - falling-words typing defense: state model and pure reducer."""

from wordfall.actions import (
    Action,
    CityDestroyed,
    Deferred,
    Event,
    GameOver,
    LevelAdvanced,
    LevelUp,
    NextWave,
    ResetGame,
    SetChallengeMultiplier,
    SpawnWord,
    Tick,
    Transition,
    TypeChar,
    WaveAdvanced,
    WordCompleted,
    is_letter,
)
from wordfall.clock import FrameClock
from wordfall.reducer import apply, reduce
from wordfall.scheduler import TimerHandle, TimerScheduler
from wordfall.scoring import ScoreMultipliers, current_wpm, multipliers, word_score
from wordfall.snapshot import restore_state, snapshot_state
from wordfall.types import (
    City,
    CompletedWord,
    FlowState,
    GameState,
    SnapshotError,
    Word,
    WordId,
    initial_state,
    make_cities,
)

__all__ = [
    "Action",
    "City",
    "CityDestroyed",
    "CompletedWord",
    "Deferred",
    "Event",
    "FlowState",
    "FrameClock",
    "GameOver",
    "GameState",
    "LevelAdvanced",
    "LevelUp",
    "NextWave",
    "ResetGame",
    "ScoreMultipliers",
    "SetChallengeMultiplier",
    "SnapshotError",
    "SpawnWord",
    "Tick",
    "TimerHandle",
    "TimerScheduler",
    "Transition",
    "TypeChar",
    "WaveAdvanced",
    "Word",
    "WordCompleted",
    "WordId",
    "apply",
    "current_wpm",
    "initial_state",
    "is_letter",
    "make_cities",
    "multipliers",
    "reduce",
    "restore_state",
    "snapshot_state",
    "word_score",
]
