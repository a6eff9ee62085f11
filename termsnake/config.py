import argparse
import logging
import os

# Board configuration (cells, border included)
BOARD_WIDTH = 40
BOARD_HEIGHT = 20
MIN_BOARD_SIZE = 14

# Starting snake, head first, moving right
SPAWN = (10, 10)
START_BODY = [(10, 10), (9, 10), (8, 10)]
SPAWN_PROTECTION = 2

# Timing (milliseconds per tick)
START_INTERVAL_MS = 150
INTERVAL_STEP_MS = 10
MIN_INTERVAL_MS = 50

# Scoring and progression
POINTS_PER_LEVEL = 50
POWER_UP_CHANCE = 20  # percent
OBSTACLES_PER_LEVEL = 2
MAX_OBSTACLES = 20

# Rejection sampling budgets
FOOD_ATTEMPTS = 100
OBSTACLE_ATTEMPTS = 50

# Audio
SOUND_ENABLED = True
SAMPLE_RATE = 44100

HIGHSCORE_FILE = "highscore.txt"


def interval_for_level(level):
    """Return the tick interval in ms for a level, floored at MIN_INTERVAL_MS."""
    return max(START_INTERVAL_MS - (level - 1) * INTERVAL_STEP_MS, MIN_INTERVAL_MS)


def level_for_score(score):
    """Return the level a score belongs to (50 points per level, starting at 1)."""
    return score // POINTS_PER_LEVEL + 1


def obstacle_count(level):
    """Number of obstacles on the board for a level."""
    return min(level * OBSTACLES_PER_LEVEL, MAX_OBSTACLES)


def board_size(text):
    """argparse type for a board dimension."""
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}")
    if value < MIN_BOARD_SIZE:
        raise argparse.ArgumentTypeError(f"must be at least {MIN_BOARD_SIZE} cells")
    return value


def build_parser():
    parser = argparse.ArgumentParser(
        prog="termsnake",
        description="Terminal snake with levels, obstacles and power-ups.",
    )
    parser.add_argument("--width", type=board_size, default=BOARD_WIDTH,
                        help=f"board width in cells (default {BOARD_WIDTH})")
    parser.add_argument("--height", type=board_size, default=BOARD_HEIGHT,
                        help=f"board height in cells (default {BOARD_HEIGHT})")
    parser.add_argument("--highscore-file", default=HIGHSCORE_FILE,
                        help="where the best score is kept")
    parser.add_argument("--mute", action="store_true", help="disable sound")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for food and obstacle placement")
    parser.add_argument("--log-file", default=None,
                        help="write log records to this file")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


def parse_args(argv=None):
    return build_parser().parse_args(argv)


def setup_logging(log_file, level="INFO"):
    """Route log records to a file; the terminal itself belongs to curses."""
    logging.basicConfig(
        filename=log_file or os.devnull,
        level=getattr(logging, level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
