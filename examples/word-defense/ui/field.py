"""Playfield renderer: sky, cities, falling words, completed-word flashes."""
from __future__ import annotations

import random

import pygame

from wordfall import GameState, rules
from ui.constants import (
    BG_BOTTOM,
    BG_TOP,
    CITY_ALIVE,
    CITY_BASE_Y,
    CITY_DEAD,
    CITY_GLOW_R,
    CITY_HALF_W,
    CITY_TOP_Y,
    COMPLETED_TEXT,
    SCREEN_H,
    SCREEN_W,
    STAR_COLOR,
    STAR_COUNT,
    STRIKE_LINE,
    WORD_BG,
    WORD_BORDER,
    WORD_PAD,
    WORD_TEXT,
    WORD_TYPED,
)


class StarField:
    """Twinkling background stars. Purely cosmetic, seeded separately from the game."""

    def __init__(self, seed: int) -> None:
        rng = random.Random(seed)
        self._stars = [
            [
                rng.uniform(0, SCREEN_W),
                rng.uniform(0, SCREEN_H),
                rng.uniform(0.5, 2.5),   # radius
                rng.uniform(0.2, 1.0),   # brightness
                rng.uniform(0.2, 0.8) * rng.choice((-1, 1)),  # twinkle rate
            ]
            for _ in range(STAR_COUNT)
        ]

    def update(self, dt: float) -> None:
        for star in self._stars:
            star[3] += star[4] * dt
            if star[3] >= 1.0:
                star[3], star[4] = 1.0, -abs(star[4])
            elif star[3] <= 0.2:
                star[3], star[4] = 0.2, abs(star[4])

    def draw(self, surface: pygame.Surface) -> None:
        for x, y, radius, brightness, _ in self._stars:
            color = tuple(int(c * brightness) for c in STAR_COLOR)
            pygame.draw.circle(surface, color, (int(x), int(y)), max(1, int(radius)))


def draw_sky(surface: pygame.Surface) -> None:
    """Vertical gradient background."""
    for y in range(SCREEN_H):
        t = y / SCREEN_H
        color = tuple(int(a + (b - a) * t) for a, b in zip(BG_TOP, BG_BOTTOM))
        pygame.draw.line(surface, color, (0, y), (SCREEN_W, y))
    pygame.draw.line(
        surface, STRIKE_LINE, (0, rules.STRIKE_LINE_Y), (SCREEN_W, rules.STRIKE_LINE_Y)
    )


def draw_cities(surface: pygame.Surface, state: GameState) -> None:
    glow = pygame.Surface((CITY_GLOW_R * 2, CITY_GLOW_R * 2), pygame.SRCALPHA)
    pygame.draw.circle(glow, (*CITY_ALIVE, 60), (CITY_GLOW_R, CITY_GLOW_R), CITY_GLOW_R)

    for city in state.cities:
        x = int(city.x)
        color = CITY_ALIVE if city.alive else CITY_DEAD
        if city.alive:
            surface.blit(glow, (x - CITY_GLOW_R, int(rules.STRIKE_LINE_Y) - CITY_GLOW_R))
        pygame.draw.polygon(
            surface,
            color,
            [(x - CITY_HALF_W, CITY_BASE_Y), (x, CITY_TOP_Y), (x + CITY_HALF_W, CITY_BASE_Y)],
        )


def draw_words(surface: pygame.Surface, state: GameState, font: pygame.font.Font) -> None:
    """Falling words, with the typed prefix highlighted."""
    for word in state.words:
        x, y = int(word.x), int(word.y)
        typed = word.text[: word.typed]
        rest = word.text[word.typed :]
        typed_img = font.render(typed, True, WORD_TYPED)
        rest_img = font.render(rest, True, WORD_TEXT)
        w = typed_img.get_width() + rest_img.get_width()
        h = max(typed_img.get_height(), rest_img.get_height())

        box = pygame.Rect(x - WORD_PAD, y - WORD_PAD, w + WORD_PAD * 2, h + WORD_PAD * 2)
        pygame.draw.rect(surface, WORD_BG, box)
        pygame.draw.rect(surface, WORD_BORDER, box, 1)
        surface.blit(typed_img, (x, y))
        surface.blit(rest_img, (x + typed_img.get_width(), y))


def draw_completed(
    surface: pygame.Surface, state: GameState, font: pygame.font.Font, now: float
) -> None:
    """Completed words fade out and rise over their display window."""
    for done in state.completed_words:
        age = now - done.timestamp
        if age < 0 or age > rules.COMPLETED_DISPLAY:
            continue
        fade = 1.0 - age / rules.COMPLETED_DISPLAY
        img = font.render(f"{done.text} +{done.score}", True, COMPLETED_TEXT)
        img.set_alpha(int(255 * fade))
        surface.blit(img, (int(done.x), int(done.y - 30 * age)))
