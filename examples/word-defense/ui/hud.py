"""HUD panel, notices, and the game-over overlay."""
from __future__ import annotations

import pygame

from wordfall import GameState, rules
from wordfall.scoring import ScoreMultipliers
from ui.constants import (
    BAR_BG,
    BAR_FILL,
    GAME_OVER_TEXT,
    HUD_PAD,
    LINE_H,
    OVERLAY_BG,
    SCREEN_H,
    SCREEN_W,
    TEXT_COLOR,
    TEXT_DIM,
)


def draw_hud(
    surface: pygame.Surface,
    font: pygame.font.Font,
    state: GameState,
    mult: ScoreMultipliers,
) -> None:
    """Draw the top-left stats column."""
    x, y = HUD_PAD, HUD_PAD

    def line(text: str, color=TEXT_COLOR) -> None:
        nonlocal y
        surface.blit(font.render(text, True, color), (x, y))
        y += LINE_H

    line(f"Level {state.level} - Wave {state.wave}")

    # Wave progress bar
    bar_w = 160
    pygame.draw.rect(surface, BAR_BG, (x, y, bar_w, 6))
    filled = int(bar_w * state.words_completed_in_wave / rules.WORDS_PER_WAVE)
    pygame.draw.rect(surface, BAR_FILL, (x, y, filled, 6))
    y += 10
    line(f"{state.words_completed_in_wave}/{rules.WORDS_PER_WAVE} words", TEXT_DIM)

    line(f"Score: {state.score}")
    line(f"WPM: {mult.wpm:.0f}")
    line(f"Accuracy: {round(state.accuracy)}%")
    line(f"Cities: {state.alive_cities}/{rules.CITY_COUNT}")
    y += 6

    line("Multipliers", TEXT_DIM)
    line(f"Speed: {mult.speed:.1f}x")
    if state.consecutive_successes > 0:
        line(f"Streak: {mult.streak:.2f}x ({state.consecutive_successes})")
    line(f"Survival: {mult.survival:.1f}x")
    line(f"Difficulty: {mult.difficulty:.1f}x")
    y += 6
    line(f"Challenge: {round(mult.challenge * 100)}%  [Up/Down]", TEXT_DIM)


def draw_notices(surface: pygame.Surface, font: pygame.font.Font, notices) -> None:
    """Centered banners, newest on top."""
    y = SCREEN_H // 3
    for notice in reversed(notices):
        img = font.render(notice.text, True, notice.color)
        surface.blit(img, (SCREEN_W // 2 - img.get_width() // 2, y))
        y += img.get_height() + 8


def draw_game_over(
    surface: pygame.Surface,
    big_font: pygame.font.Font,
    font: pygame.font.Font,
    state: GameState,
) -> None:
    """Dim the field and show the final score with a restart hint."""
    overlay = pygame.Surface((SCREEN_W, SCREEN_H), pygame.SRCALPHA)
    overlay.fill(OVERLAY_BG)
    surface.blit(overlay, (0, 0))

    cx, cy = SCREEN_W // 2, SCREEN_H // 2
    title = big_font.render("GAME OVER", True, GAME_OVER_TEXT)
    surface.blit(title, (cx - title.get_width() // 2, cy - 60))
    lines = [
        f"Score: {state.score}",
        f"Level {state.level} - Wave {state.wave}",
        f"Accuracy: {round(state.accuracy)}%",
        "[Enter] Play again   [Esc] Quit",
    ]
    y = cy
    for text in lines:
        img = font.render(text, True, TEXT_COLOR)
        surface.blit(img, (cx - img.get_width() // 2, y))
        y += LINE_H + 4
