"""Rejection-sampling placement of food and obstacles."""
import logging

from termsnake import config
from termsnake.model import Food, FoodKind

logger = logging.getLogger(__name__)


def in_spawn_zone(pos, spawn=config.SPAWN, margin=config.SPAWN_PROTECTION):
    """True if pos lies in the square kept clear around the spawn point."""
    return abs(pos[0] - spawn[0]) <= margin and abs(pos[1] - spawn[1]) <= margin


def safety_check(body, food_pos=None, obstacles=(), spawn=config.SPAWN):
    """Build a predicate rejecting occupied or protected cells."""
    def is_safe(pos):
        if pos in body or pos == food_pos or pos in obstacles:
            return False
        return not in_spawn_zone(pos, spawn)

    return is_safe


def find_cell(is_safe, width, height, attempts, rng):
    """Sample interior cells until one is safe.

    Gives up after ``attempts`` draws and returns the last candidate, which may
    be unsafe. The game never waits for free space.
    """
    candidate = None
    for _ in range(attempts):
        candidate = (rng.randint(1, width - 2), rng.randint(1, height - 2))
        if is_safe(candidate):
            return candidate
    logger.debug("no safe cell after %d attempts, using %s", attempts, candidate)
    return candidate


def place_food(body, obstacles, width, height, rng):
    """Return a new Food away from the snake, obstacles and spawn zone."""
    pos = find_cell(
        safety_check(body, obstacles=obstacles),
        width,
        height,
        config.FOOD_ATTEMPTS,
        rng,
    )
    kind = FoodKind.POWER_UP if rng.randrange(100) < config.POWER_UP_CHANCE else FoodKind.NORMAL
    return Food(pos, kind)


def generate_obstacles(level, body, food_pos, width, height, rng):
    """Build the full obstacle list for a level from scratch."""
    obstacles = []
    for _ in range(config.obstacle_count(level)):
        is_safe = safety_check(body, food_pos, obstacles)
        obstacles.append(find_cell(is_safe, width, height, config.OBSTACLE_ATTEMPTS, rng))
    return obstacles
