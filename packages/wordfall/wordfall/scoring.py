"""Typing-rate statistics and the compounding score formula."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from wordfall import rules
from wordfall.types import GameState


def current_wpm(timestamps: Iterable[float], now: float) -> float:
    """Words per minute over the trailing WPM window (6 x completions in 10s)."""
    recent = sum(1 for ts in timestamps if now - ts <= rules.WPM_WINDOW)
    return recent * (60.0 / rules.WPM_WINDOW)


def wpm_ratio(wpm: float, baseline_wpm: float) -> float:
    """Current rate relative to the baseline. A non-positive baseline counts as parity."""
    if baseline_wpm <= 0:
        return 1.0
    return wpm / baseline_wpm


def wpm_multiplier(wpm: float, baseline_wpm: float) -> float:
    return min(rules.WPM_MULTIPLIER_CAP, wpm_ratio(wpm, baseline_wpm))


def accuracy_bonus(consecutive_successes: int) -> float:
    return rules.STREAK_BONUS_BASE ** consecutive_successes


def survival_bonus(alive_cities: int) -> float:
    return rules.SURVIVAL_BONUS_MAX * (alive_cities / rules.CITY_COUNT)


def word_score(
    text: str,
    wpm: float,
    baseline_wpm: float,
    consecutive_successes: int,
    alive_cities: int,
) -> int:
    """Points for one completed word.

    ``round(10 * len(text) * wpm_mult * streak_bonus * survival_bonus)``.
    Every factor is non-negative, so the result never is either.
    """
    base = rules.POINTS_PER_LETTER * len(text)
    raw = (
        base
        * wpm_multiplier(wpm, baseline_wpm)
        * accuracy_bonus(consecutive_successes)
        * survival_bonus(alive_cities)
    )
    return max(0, round(raw))


@dataclass(frozen=True, slots=True)
class ScoreMultipliers:
    """Live multiplier breakdown for HUD read-outs."""

    wpm: float
    speed: float
    streak: float
    survival: float
    difficulty: float
    challenge: float


def multipliers(state: GameState, now: float) -> ScoreMultipliers:
    wpm = current_wpm(state.typed_timestamps, now)
    return ScoreMultipliers(
        wpm=wpm,
        speed=wpm_multiplier(wpm, state.baseline_wpm),
        streak=accuracy_bonus(state.consecutive_successes),
        survival=survival_bonus(state.alive_cities),
        difficulty=state.difficulty_multiplier,
        challenge=state.challenge_multiplier,
    )
