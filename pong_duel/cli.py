import argparse
import logging
import random

import pygame

from .constants import BG_COLOR, FPS, HEIGHT, WIDTH
from .controls import ControlState
from .game_engine import GameEngine

logger = logging.getLogger("pong_duel")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Two-player Pong (A/Z vs J/N)")
    parser.add_argument("--width", type=int, default=WIDTH, help="Window width in pixels")
    parser.add_argument("--height", type=int, default=HEIGHT, help="Window height in pixels")
    parser.add_argument("--fps", type=int, default=FPS, help="Frame rate cap")
    parser.add_argument("--seed", type=int, default=None, help="Seed for serve directions")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    # Initialize pygame/Start application
    pygame.init()
    try:
        screen = pygame.display.set_mode((args.width, args.height))
        pygame.display.set_caption("Pong Duel")
        clock = pygame.time.Clock()

        engine = GameEngine(args.width, args.height, rng=random.Random(args.seed))
        logger.info("Starting game at %d FPS", args.fps)

        # Game loop
        while not engine.request_quit:
            dt = clock.tick(args.fps) / 1000.0  # seconds since last frame
            engine.handle_events(pygame.event.get())

            controls = ControlState.from_keys(pygame.key.get_pressed())
            engine.update(dt, controls)

            screen.fill(BG_COLOR)
            engine.render(screen)
            pygame.display.flip()
    finally:
        pygame.quit()


if __name__ == "__main__":
    main()
