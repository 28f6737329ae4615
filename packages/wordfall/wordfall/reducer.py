"""Pure state reducer: ``reduce(state, action) -> Transition``.

The reducer never performs I/O and never reads a clock. Keystrokes carry
their own timestamp, and wave/level advances come back to the caller as
deferred follow-up actions instead of being applied in place.
"""
from __future__ import annotations

from dataclasses import replace
from typing import Any, Callable

from wordfall import rules
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
)
from wordfall.scoring import current_wpm, word_score
from wordfall.types import City, CompletedWord, GameState, Word, initial_state


def _spawn_word(state: GameState, action: SpawnWord) -> Transition:
    return Transition(
        replace(
            state,
            words=state.words + (action.word,),
            next_word_id=state.next_word_id + 1,
        )
    )


def _tick(state: GameState, action: Tick) -> Transition:
    cities = list(state.cities)
    game_over = state.game_over
    events: list[Event] = []
    remaining: list[Word] = []

    for word in state.words:
        moved = replace(word, y=word.y + word.speed * action.delta)
        if moved.y < rules.STRIKE_LINE_Y:
            remaining.append(moved)
            continue
        # Landed: the first living city takes the hit.
        target = _first_alive(cities)
        if target is None:
            continue
        cities[target] = replace(cities[target], alive=False)
        events.append(CityDestroyed(city_id=cities[target].id, word_id=word.id))
        if not game_over and _first_alive(cities) is None:
            game_over = True
            events.append(GameOver(score=state.score))

    return Transition(
        replace(state, words=tuple(remaining), cities=tuple(cities), game_over=game_over),
        events=tuple(events),
    )


def _first_alive(cities: list[City]) -> int | None:
    for i, city in enumerate(cities):
        if city.alive:
            return i
    return None


def _type_char(state: GameState, action: TypeChar) -> Transition:
    char, now = action.char, action.now
    correct = any(w.next_char == char for w in state.words)

    # Streaks and heat-up / cool-down hysteresis.
    streak_before = state.consecutive_successes
    if correct:
        successes, failures = state.consecutive_successes + 1, 0
    else:
        successes, failures = 0, state.consecutive_failures + 1
    difficulty = state.difficulty_multiplier
    if successes >= rules.STREAK_THRESHOLD:
        difficulty = min(rules.DIFFICULTY_MAX, difficulty * rules.HEAT_UP_FACTOR)
        successes = 0
    if failures >= rules.STREAK_THRESHOLD:
        difficulty = max(rules.DIFFICULTY_MIN, difficulty * rules.COOL_DOWN_FACTOR)
        failures = 0

    alive = state.alive_cities
    score = state.score
    timestamps = list(state.typed_timestamps)
    completed = list(state.completed_words)
    in_wave = state.words_completed_in_wave
    remaining: list[Word] = []
    events: list[Event] = []
    followups: list[Deferred] = []

    for word in state.words:
        matched = word.next_char == char
        word = replace(word, typed=word.typed + 1 if matched else 0)
        if not (matched and word.complete):
            remaining.append(word)
            continue

        points = word_score(
            word.text,
            current_wpm(timestamps, now),
            state.baseline_wpm,
            streak_before,
            alive,
        )
        score += points
        completed.append(
            CompletedWord(
                id=word.id, text=word.text, x=word.x, y=word.y, timestamp=now, score=points
            )
        )
        timestamps.append(now)
        events.append(
            WordCompleted(word_id=word.id, text=word.text, x=word.x, y=word.y, score=points)
        )

        in_wave += 1
        if in_wave >= rules.WORDS_PER_WAVE:
            in_wave = 0
            advance = LevelUp() if state.wave >= rules.WAVES_PER_LEVEL else NextWave()
            followups.append(Deferred(delay=rules.ADVANCE_DELAY, action=advance))

    return Transition(
        replace(
            state,
            words=tuple(remaining),
            score=score,
            total_keystrokes=state.total_keystrokes + 1,
            correct_keystrokes=state.correct_keystrokes + (1 if correct else 0),
            consecutive_successes=successes,
            consecutive_failures=failures,
            difficulty_multiplier=difficulty,
            typed_timestamps=tuple(
                ts for ts in timestamps if now - ts <= rules.TIMESTAMP_RETENTION
            ),
            completed_words=tuple(
                cw for cw in completed if now - cw.timestamp <= rules.COMPLETED_DISPLAY
            ),
            words_completed_in_wave=in_wave,
        ),
        followups=tuple(followups),
        events=tuple(events),
    )


def _set_challenge(state: GameState, action: SetChallengeMultiplier) -> Transition:
    value = rules.clamp(action.value, rules.CHALLENGE_MIN, rules.CHALLENGE_MAX)
    return Transition(replace(state, challenge_multiplier=value))


def _next_wave(state: GameState, action: NextWave) -> Transition:
    wave = state.wave + 1
    return Transition(
        replace(state, wave=wave, words_completed_in_wave=0),
        events=(WaveAdvanced(level=state.level, wave=wave),),
    )


def _level_up(state: GameState, action: LevelUp) -> Transition:
    level = min(rules.MAX_LEVEL, state.level + 1)
    return Transition(
        replace(
            state,
            level=level,
            wave=1,
            words_completed_in_wave=0,
            difficulty_multiplier=1.0,
        ),
        events=(LevelAdvanced(level=level),),
    )


def _reset_game(state: GameState, action: ResetGame) -> Transition:
    return Transition(initial_state(baseline_wpm=state.baseline_wpm))


_HANDLERS: dict[type[Any], Callable[[GameState, Any], Transition]] = {
    SpawnWord: _spawn_word,
    Tick: _tick,
    TypeChar: _type_char,
    SetChallengeMultiplier: _set_challenge,
    NextWave: _next_wave,
    LevelUp: _level_up,
    ResetGame: _reset_game,
}


def reduce(state: GameState, action: Action) -> Transition:
    """Apply one action. Raises ``TypeError`` for an unknown action type."""
    handler = _HANDLERS.get(type(action))
    if handler is None:
        raise TypeError(f"No reducer registered for {type(action).__qualname__}")
    return handler(state, action)


def apply(state: GameState, action: Action) -> GameState:
    """Apply one action and keep only the resulting state."""
    return reduce(state, action).state
