"""Tests for wave/level progression, challenge, and reset."""
from dataclasses import replace

import pytest
from wordfall import (
    Deferred,
    LevelAdvanced,
    LevelUp,
    NextWave,
    ResetGame,
    SetChallengeMultiplier,
    SpawnWord,
    Tick,
    TypeChar,
    WaveAdvanced,
    Word,
    apply,
    initial_state,
    reduce,
)
from wordfall import rules


def _complete_one(state, wid: int, now: float):
    """Spawn a two-letter word and type it out; returns the last transition."""
    state = apply(state, SpawnWord(Word(id=wid, text="ab", x=0.0, y=0.0, speed=1.0)))
    state = apply(state, TypeChar("a", now))
    return reduce(state, TypeChar("b", now))


class TestWaves:
    def test_ten_completions_schedule_one_next_wave(self):
        state = initial_state()
        followups = []
        for i in range(1, 11):
            transition = _complete_one(state, i, float(i))
            state = transition.state
            followups.extend(transition.followups)
            if i < 10:
                assert state.words_completed_in_wave == i
                assert followups == []
        assert state.words_completed_in_wave == 0
        assert followups == [Deferred(delay=rules.ADVANCE_DELAY, action=NextWave())]
        # Scheduled, not applied.
        assert state.wave == 1

    def test_last_wave_of_level_schedules_level_up(self):
        state = replace(initial_state(), wave=5, words_completed_in_wave=9)
        transition = _complete_one(state, 1, 1.0)
        assert transition.followups == (Deferred(delay=0.5, action=LevelUp()),)
        assert transition.state.words_completed_in_wave == 0

    def test_next_wave(self):
        state = replace(initial_state(), level=2, wave=3, words_completed_in_wave=4)
        transition = reduce(state, NextWave())
        assert transition.state.wave == 4
        assert transition.state.words_completed_in_wave == 0
        assert transition.events == (WaveAdvanced(level=2, wave=4),)


class TestLevels:
    def test_level_up(self):
        state = replace(
            initial_state(), level=2, wave=5, difficulty_multiplier=1.4
        )
        transition = reduce(state, LevelUp())
        after = transition.state
        assert (after.level, after.wave) == (3, 1)
        assert after.difficulty_multiplier == 1.0
        assert after.words_completed_in_wave == 0
        assert transition.events == (LevelAdvanced(level=3),)

    def test_level_capped_at_max(self):
        state = replace(initial_state(), level=rules.MAX_LEVEL, wave=5)
        after = apply(state, LevelUp())
        assert after.level == rules.MAX_LEVEL
        assert after.wave == 1


class TestChallenge:
    @pytest.mark.parametrize(
        "value,expected", [(1.1, 1.1), (2.0, 1.2), (0.1, 0.8), (0.8, 0.8)]
    )
    def test_clamped(self, value, expected):
        after = apply(initial_state(), SetChallengeMultiplier(value))
        assert after.challenge_multiplier == expected

    def test_touches_nothing_else(self):
        state = initial_state()
        after = apply(state, SetChallengeMultiplier(1.1))
        assert replace(after, challenge_multiplier=1.0) == state


def test_spawn_word_appends_and_counts():
    state = initial_state()
    w1 = Word(id=1, text="one", x=0.0, y=0.0, speed=1.0)
    w2 = Word(id=2, text="two", x=0.0, y=0.0, speed=1.0)
    state = apply(apply(state, SpawnWord(w1)), SpawnWord(w2))
    assert state.words == (w1, w2)
    assert state.next_word_id == 3


def test_reset_restores_everything_but_baseline():
    state = replace(initial_state(), baseline_wpm=55.0)
    state = apply(state, SpawnWord(Word(id=1, text="ab", x=0.0, y=600.0, speed=1.0)))
    state = apply(state, Tick(0.1))
    state = apply(state, SpawnWord(Word(id=2, text="cd", x=0.0, y=0.0, speed=1.0)))
    state = apply(state, TypeChar("z", 1.0))
    state = apply(state, SetChallengeMultiplier(1.2))
    state = replace(state, level=3, wave=2, score=400, game_over=True)

    after = apply(state, ResetGame())
    assert after == initial_state(baseline_wpm=55.0)
    assert after.alive_cities == 6
    assert after.words == ()
    assert after.score == 0
    assert after.total_keystrokes == 0
    assert after.game_over is False


def test_unknown_action_type_raises():
    class Bogus:
        pass

    with pytest.raises(TypeError):
        reduce(initial_state(), Bogus())  # type: ignore[arg-type]
