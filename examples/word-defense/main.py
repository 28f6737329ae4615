"""Word Defense - falling-words typing arcade game.

Exercises wordfall, wordfall-spawn, and wordfall-session.

Controls:
  a-z         Type the falling words
  Up / Down   Raise / lower the challenge multiplier
  Enter       Play again (after game over)
  Escape      Quit
"""
from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

import pygame

from wordfall import multipliers
from wordfall_session import BaselineStore, GameSession

from game.notices import NoticeBoard
from game.words import make_word_pool
from ui.constants import CHALLENGE_STEP, FPS, SCREEN_H, SCREEN_W, WORD_FONT_SIZE
from ui.field import StarField, draw_cities, draw_completed, draw_sky, draw_words
from ui.hud import draw_game_over, draw_hud, draw_notices

logger = logging.getLogger("word_defense")


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Word Defense - wordfall typing demo")
    p.add_argument("--seed", type=int, default=None, help="Random seed (default: random)")
    p.add_argument("--baseline-file", type=Path,
                   default=Path.home() / ".word-defense" / "baseline.json",
                   metavar="FILE", help="Where the personal-best WPM is kept")
    p.add_argument("--challenge", type=float, default=1.0,
                   help="Starting challenge multiplier (0.8-1.2, default: 1.0)")
    p.add_argument("--fps", type=int, default=FPS, help=f"Frame rate cap (default: {FPS})")
    p.add_argument("--verbose", action="store_true", help="Log game events to stderr")
    args = p.parse_args()
    args.fps = max(10, min(240, args.fps))
    return args


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    session = GameSession(
        make_word_pool(),
        store=BaselineStore(args.baseline_file),
        seed=args.seed,
        clock=time.monotonic,
    )
    notices = NoticeBoard(session.bus, time.monotonic)
    session.bus.subscribe(
        "city_destroyed", lambda e: logger.info("city %d destroyed", e.city_id)
    )
    session.set_challenge(args.challenge)
    session.start()
    logger.info("seed %d, baseline %.1f WPM", session.seed, session.state.baseline_wpm)

    # Pygame init
    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Word Defense - wordfall demo")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 14)
    word_font = pygame.font.SysFont("monospace", WORD_FONT_SIZE)
    big_font = pygame.font.SysFont("monospace", 48, bold=True)
    stars = StarField(seed=session.seed)

    running = True
    while running:
        dt = clock.tick(args.fps) / 1000.0

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False

                elif event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                    if session.state.game_over:
                        notices.clear()
                        session.reset()

                elif event.key == pygame.K_UP:
                    session.set_challenge(session.state.challenge_multiplier + CHALLENGE_STEP)

                elif event.key == pygame.K_DOWN:
                    session.set_challenge(session.state.challenge_multiplier - CHALLENGE_STEP)

                elif event.unicode:
                    session.press(event.unicode)

        # --- Frame ---
        now = time.monotonic()
        state = session.frame(now)
        stars.update(dt)

        # --- Render ---
        draw_sky(screen)
        stars.draw(screen)
        draw_cities(screen, state)
        draw_words(screen, state, word_font)
        draw_completed(screen, state, word_font, now)
        draw_hud(screen, font, state, multipliers(state, now))
        draw_notices(screen, big_font, notices.active(now))
        if state.game_over:
            draw_game_over(screen, big_font, font, state)

        pygame.display.flip()

    session.close()
    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
