#!/usr/bin/env python3
"""Artifact Clash - Standalone Entry Point.

Two players share one keyboard.

Usage:
    python main.py
    python main.py --fullscreen
    python main.py --seed 42 --log-level DEBUG
"""

import argparse
import sys
import os

# Add project root to path for imports
_project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

import pygame

from arena.logging import (
    close_all_sinks,
    configure_logging,
    create_sink_for_environment,
    get_logger,
    register_sink,
)
from games.ArtifactClash.config import FPS, FULLSCREEN, SCREEN_HEIGHT, SCREEN_WIDTH
from games.ArtifactClash.game_mode import ArtifactClashMode
from games.ArtifactClash.input import KeyboardInputSource

log = get_logger('main')


def build_parser() -> argparse.ArgumentParser:
    """Command line parser: display options plus the game's own arguments."""
    parser = argparse.ArgumentParser(description="Artifact Clash - Standalone")

    # Display options
    parser.add_argument('--width', type=int, default=SCREEN_WIDTH, help='Screen width')
    parser.add_argument('--height', type=int, default=SCREEN_HEIGHT, help='Screen height')
    parser.add_argument('--fullscreen', action='store_true', default=FULLSCREEN,
                        help='Run fullscreen')
    parser.add_argument('--fps', type=int, default=FPS, help='Frame rate cap')

    # Game options (--skin, --seed, --log-level)
    for arg in ArtifactClashMode.get_arguments():
        kwargs = {k: v for k, v in arg.items() if k != 'name'}
        parser.add_argument(arg['name'], **kwargs)

    return parser


def main(argv=None):
    """Run Artifact Clash standalone."""
    args = build_parser().parse_args(argv)

    if args.log_level:
        configure_logging(level=args.log_level)
    register_sink('match', create_sink_for_environment('match'))

    # Initialize pygame
    pygame.init()
    pygame.font.init()

    try:
        # Create display
        if args.fullscreen:
            screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
        else:
            screen = pygame.display.set_mode((args.width, args.height), pygame.RESIZABLE)

        pygame.display.set_caption("Artifact Clash")

        game = ArtifactClashMode(skin=args.skin, seed=args.seed)
        keyboard = KeyboardInputSource()

        clock = pygame.time.Clock()
        running = True

        print("\n" + "=" * 50)
        print("ARTIFACT CLASH")
        print("=" * 50)
        print("Controls:")
        print("  - Red:  WASD to drive, F to intake/shoot")
        print("  - Blue: Arrows to drive, M to intake/shoot")
        print("  - SPACE to start / restart")
        print("  - ESC to quit")
        print("=" * 50 + "\n")

        while running:
            dt = clock.tick(args.fps) / 1000.0

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False

            keyboard.update(dt)
            game.handle_input(keyboard.poll_keys())
            game.update(dt)

            game.render(screen)
            pygame.display.flip()

        log.info(f"Quit with scores {game.get_scores()}")
    except Exception:
        log.exception("Artifact Clash crashed")
        raise
    finally:
        close_all_sinks()
        pygame.quit()

    return 0


if __name__ == "__main__":
    sys.exit(main())
