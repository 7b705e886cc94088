"""
Classic Snake - command line entry point.

Usage:
    classic-snake                          # Play with config.yaml or defaults
    classic-snake --tick-ms 120            # Slower snake
    classic-snake --config my_config.yaml --show-grid
"""
import argparse
import dataclasses
import logging
import os
import warnings
from typing import List, Optional

# Suppress pygame messages
os.environ['PYGAME_HIDE_SUPPORT_PROMPT'] = '1'
warnings.filterwarnings('ignore', category=UserWarning, module='pygame')

from .utils.config_loader import AppConfig, load_config
from .utils.logging_setup import setup_logging
from .visualization.window import GameWindow

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Classic Snake - steer with the arrow keys",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  classic-snake                       # Defaults or config.yaml
  classic-snake --tick-ms 120         # Slower snake
  classic-snake --seed 7 --show-grid  # Reproducible food, grid lines
"""
    )

    parser.add_argument(
        "-c", "--config",
        type=str,
        default=None,
        metavar="PATH",
        help="Path to a YAML config file (default: config.yaml if present)"
    )
    parser.add_argument(
        "--tick-ms",
        type=int,
        default=None,
        help="Milliseconds between snake moves (default: 80)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for food placement"
    )
    parser.add_argument(
        "--show-grid",
        action="store_true",
        help="Draw grid lines on the board"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override the configured log level"
    )

    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> AppConfig:
    """Load the config file and apply command line overrides."""
    config = load_config(args.config)

    if args.tick_ms is not None:
        config.board = dataclasses.replace(config.board, tick_ms=args.tick_ms)
    if args.show_grid:
        config.display.show_grid = True
    if args.log_level is not None:
        config.logging.level = args.log_level

    return config


def main(argv: Optional[List[str]] = None):
    """Main entry point."""
    args = parse_args(argv)
    config = build_config(args)
    setup_logging(config.logging)

    logger.info(
        "Starting Snake: %dx%d board, %d ms ticks",
        config.board.width, config.board.height, config.board.tick_ms,
    )

    window = GameWindow(
        config.board,
        title=config.display.title,
        fps=config.display.fps,
        show_grid=config.display.show_grid,
        seed=args.seed,
    )
    window.run()

    logger.info("Final score: %d", window.panel.game.score)


if __name__ == "__main__":
    main()
