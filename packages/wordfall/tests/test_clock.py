"""Tests for FrameClock delta derivation."""
import pytest
from wordfall import FrameClock


def test_first_frame_has_zero_delta():
    clock = FrameClock()
    assert clock.advance(12.5) == 0.0
    assert clock.frame_number == 1
    assert clock.last == 12.5


def test_delta_between_frames():
    clock = FrameClock()
    clock.advance(1.0)
    assert clock.advance(1.016) == pytest.approx(0.016)
    assert clock.advance(1.05) == pytest.approx(0.034)


def test_long_gap_clamped():
    clock = FrameClock(max_delta=0.1)
    clock.advance(0.0)
    assert clock.advance(5.0) == 0.1


def test_backwards_timestamp_yields_zero():
    clock = FrameClock()
    clock.advance(3.0)
    assert clock.advance(2.0) == 0.0


def test_reset_forgets_last_frame():
    clock = FrameClock()
    clock.advance(1.0)
    clock.reset()
    assert clock.frame_number == 0
    assert clock.advance(9.0) == 0.0


def test_invalid_max_delta():
    with pytest.raises(ValueError):
        FrameClock(max_delta=0)
