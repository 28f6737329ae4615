"""Fixed game rules: field geometry, progression, and multiplier bounds."""
from __future__ import annotations

# Playfield (pixels)
FIELD_WIDTH = 800.0
FIELD_HEIGHT = 600.0
STRIKE_LINE_Y = 580.0
CITY_COUNT = 6

# Progression
WORDS_PER_WAVE = 10
WAVES_PER_LEVEL = 5
MAX_LEVEL = 5

# Time windows (seconds)
WPM_WINDOW = 10.0
TIMESTAMP_RETENTION = 30.0
COMPLETED_DISPLAY = 1.0
ADVANCE_DELAY = 0.5

# Heat-up / cool-down
STREAK_THRESHOLD = 4
HEAT_UP_FACTOR = 1.1
COOL_DOWN_FACTOR = 0.85
DIFFICULTY_MIN = 0.7
DIFFICULTY_MAX = 1.5

# Player-set challenge
CHALLENGE_MIN = 0.8
CHALLENGE_MAX = 1.2

# Scoring
POINTS_PER_LETTER = 10
WPM_MULTIPLIER_CAP = 3.0
STREAK_BONUS_BASE = 1.1
SURVIVAL_BONUS_MAX = 1.5

DEFAULT_BASELINE_WPM = 40.0


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))
