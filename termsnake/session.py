"""Game session: the phase state machine and the per-tick snake simulation."""
import logging
import random

from termsnake import config
from termsnake.collision import is_fatal
from termsnake.model import ARROW_DIRECTIONS, Cue, Direction, FoodKind, GamePhase, InputEvent
from termsnake.placement import generate_obstacles, place_food

logger = logging.getLogger(__name__)


class NullStore:
    """Store used when no high-score file is wanted."""

    def load(self):
        return 0

    def save(self, score):
        return True


def no_cue(cue):
    pass


class GameSession:
    """Everything that changes while the game runs.

    The session is not thread-safe; a single owner (the tick loop) must feed
    it input events and ticks.
    """

    def __init__(self, width=config.BOARD_WIDTH, height=config.BOARD_HEIGHT,
                 store=None, cues=no_cue, rng=None):
        if width < config.MIN_BOARD_SIZE or height < config.MIN_BOARD_SIZE:
            raise ValueError(
                f"board {width}x{height} is too small, need at least "
                f"{config.MIN_BOARD_SIZE}x{config.MIN_BOARD_SIZE}"
            )
        self.width = width
        self.height = height
        self.store = store if store is not None else NullStore()
        self.cues = cues
        self.rng = rng if rng is not None else random.Random()

        self.high_score = self.store.load()
        self._start_round()
        self.phase = GamePhase.MENU

    def _start_round(self):
        self.snake = list(config.START_BODY)
        self.direction = Direction.RIGHT
        self.next_direction = Direction.RIGHT
        self.score = 0
        self.level = 1
        self.interval_ms = config.interval_for_level(1)
        self.frame_count = 0
        self.new_record = False
        self.obstacles = []
        self.food = None
        self.spawn_food()
        self.regenerate_obstacles()

    def reset(self):
        """Start a fresh round and go straight to PLAYING."""
        self._start_round()
        self.phase = GamePhase.PLAYING
        logger.info("round restarted")

    @property
    def head(self):
        return self.snake[0]

    def spawn_food(self):
        self.food = place_food(self.snake, self.obstacles, self.width, self.height, self.rng)

    def regenerate_obstacles(self):
        food_pos = self.food.pos if self.food else None
        self.obstacles = generate_obstacles(
            self.level, self.snake, food_pos, self.width, self.height, self.rng
        )

    def handle_event(self, event):
        """Fold one input event into the session.

        QUIT is not the session's business and is ignored here.
        """
        if event is InputEvent.CONFIRM and self.phase is GamePhase.MENU:
            self.phase = GamePhase.PLAYING
            logger.info("game started")
        elif event is InputEvent.RESTART and self.phase is GamePhase.GAME_OVER:
            self.reset()
        elif event in ARROW_DIRECTIONS and self.phase is GamePhase.PLAYING:
            self.turn(ARROW_DIRECTIONS[event])

    def turn(self, direction):
        """Buffer a direction for the next tick unless it reverses the snake.

        The check is against the direction applied on the last tick, so two
        quick turns between ticks can never fold the snake back on itself.
        """
        if direction is not self.direction.opposite:
            self.next_direction = direction

    def tick(self):
        """Advance one tick. Only PLAYING runs the simulation."""
        self.frame_count += 1
        if self.phase is GamePhase.PLAYING:
            self.move_snake()

    def move_snake(self):
        self.direction = self.next_direction
        new_head = self.direction.step(self.head)

        if is_fatal(new_head, self.snake, self.obstacles, self.width, self.height):
            self.game_over()
            return

        self.snake.insert(0, new_head)

        if new_head == self.food.pos:
            self.eat(self.food)
        else:
            self.snake.pop()

    def eat(self, food):
        self.score += food.kind.points
        self.cues(Cue.POWER_UP if food.kind is FoodKind.POWER_UP else Cue.EAT)

        new_level = config.level_for_score(self.score)
        if new_level > self.level:
            self.level = new_level
            self.interval_ms = config.interval_for_level(new_level)
            self.regenerate_obstacles()
            self.cues(Cue.LEVEL_UP)
            logger.info("level %d, interval %d ms", self.level, self.interval_ms)

        self.spawn_food()

    def game_over(self):
        self.phase = GamePhase.GAME_OVER
        logger.info("game over: score %d, level %d, length %d",
                    self.score, self.level, len(self.snake))
        if self.score > self.high_score:
            self.high_score = self.score
            self.new_record = True
            if not self.store.save(self.high_score):
                logger.warning("high score %d was not saved", self.high_score)
        self.cues(Cue.GAME_OVER)
