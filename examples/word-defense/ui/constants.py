"""Layout constants and color definitions."""

from wordfall import rules

# Timing
FPS = 60

# Layout dimensions
SCREEN_W = int(rules.FIELD_WIDTH)
SCREEN_H = int(rules.FIELD_HEIGHT)
HUD_PAD = 10
LINE_H = 18

# Words
WORD_FONT_SIZE = 18
WORD_PAD = 2

# Cities
CITY_HALF_W = 20
CITY_TOP_Y = 570
CITY_BASE_Y = 590
CITY_GLOW_R = 30

# Notifications (seconds on screen)
LEVEL_NOTICE_TIME = 3.0
WAVE_NOTICE_TIME = 2.0

# Stars
STAR_COUNT = 100

# Challenge slider step
CHALLENGE_STEP = 0.05

# Colors
BG_TOP = (0, 0, 51)
BG_BOTTOM = (0, 0, 34)
STAR_COLOR = (255, 255, 255)
CITY_ALIVE = (127, 255, 127)
CITY_DEAD = (255, 51, 51)
WORD_BG = (0, 0, 50)
WORD_BORDER = (70, 70, 180)
WORD_TEXT = (255, 255, 255)
WORD_TYPED = (255, 220, 60)
COMPLETED_TEXT = (120, 255, 120)
STRIKE_LINE = (60, 40, 40)
TEXT_COLOR = (220, 220, 230)
TEXT_DIM = (140, 140, 160)
BAR_BG = (55, 65, 81)
BAR_FILL = (59, 130, 246)
NOTICE_LEVEL = (255, 215, 0)
NOTICE_WAVE = (120, 200, 255)
OVERLAY_BG = (0, 0, 0, 180)
GAME_OVER_TEXT = (255, 80, 80)
