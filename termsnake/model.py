"""Value types shared by the simulation and its adapters.

Positions are plain ``(x, y)`` tuples; y grows downward like terminal rows.
"""
from collections import namedtuple
from enum import Enum


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self):
        dx, dy = self.value
        return Direction((-dx, -dy))

    def step(self, pos):
        """Return the cell one unit away from pos in this direction."""
        dx, dy = self.value
        return (pos[0] + dx, pos[1] + dy)


class FoodKind(Enum):
    NORMAL = 10
    POWER_UP = 50

    @property
    def points(self):
        return self.value


Food = namedtuple("Food", ["pos", "kind"])


class GamePhase(Enum):
    MENU = "menu"
    PLAYING = "playing"
    GAME_OVER = "game_over"


class InputEvent(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    CONFIRM = "confirm"
    RESTART = "restart"
    QUIT = "quit"


ARROW_DIRECTIONS = {
    InputEvent.UP: Direction.UP,
    InputEvent.DOWN: Direction.DOWN,
    InputEvent.LEFT: Direction.LEFT,
    InputEvent.RIGHT: Direction.RIGHT,
}


class Cue(Enum):
    EAT = "eat"
    POWER_UP = "power_up"
    LEVEL_UP = "level_up"
    GAME_OVER = "game_over"
