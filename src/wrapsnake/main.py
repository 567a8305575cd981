# main.py
from __future__ import annotations
import argparse
import logging
import random

import pygame  # type: ignore

from .config import WIDTH, HEIGHT, Config
from .controls import InputRouter
from .game import GameEngine
from .highscore import HighScoreStore
from .render import draw_game

logger = logging.getLogger(__name__)

TICK_EVENT = pygame.USEREVENT + 1


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="wrapsnake", description="Snake on a wrap-around 20x20 grid.")
    parser.add_argument("--seed", type=int, default=None, help="seed for food placement")
    parser.add_argument("--tick-ms", type=int, default=None, help="milliseconds between moves (default 100)")
    parser.add_argument("--high-score-file", type=str, default=None, help="where the best score is kept")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser.parse_args(argv)


def save_high_score(store: HighScoreStore, score: int) -> None:
    try:
        store.record(score)
    except OSError as exc:
        logger.error("Could not save high score to %s: %s", store.path, exc)


def run(cfg: Config) -> None:
    store = HighScoreStore(cfg.high_score_path)
    high_score = store.load()
    engine = GameEngine(rng=random.Random(cfg.seed))
    router = InputRouter(engine)

    pygame.init()
    font = pygame.font.SysFont(None, 28)
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption("Snake")
    clock = pygame.time.Clock()
    pygame.time.set_timer(TICK_EVENT, cfg.tick_ms)
    logger.info("Starting game, tick=%dms, high score=%d", cfg.tick_ms, high_score)

    snap = engine.snapshot()
    running = True
    try:
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == TICK_EVENT:
                    result = engine.tick(high_score)
                    snap = result.snapshot
                    if result.new_high_score is not None:
                        high_score = result.new_high_score
                        save_high_score(store, high_score)
                elif event.type == pygame.KEYDOWN:
                    changed = router.handle_key(event.key)
                    if changed is not None:
                        snap = changed

            draw_game(screen, font, snap, high_score)
            pygame.display.flip()
            clock.tick(60)  # redraw rate; movement is paced by TICK_EVENT
    finally:
        pygame.time.set_timer(TICK_EVENT, 0)
        pygame.quit()


def main(argv=None) -> None:
    args = parse_args(argv)
    cfg = Config.from_args(args)
    logging.basicConfig(
        level=getattr(logging, cfg.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    run(cfg)


if __name__ == "__main__":
    main()
