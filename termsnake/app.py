"""Entry point: curses setup, keyboard reader thread and the tick loop."""
import curses
import logging
import os
import queue
import random
import threading
import time

from termsnake import config
from termsnake.audio import ToneCues
from termsnake.highscore import HighScoreStore
from termsnake.model import InputEvent
from termsnake.render import init_colors, render
from termsnake.session import GameSession

logger = logging.getLogger(__name__)

KEY_EVENTS = {
    curses.KEY_UP: InputEvent.UP,
    curses.KEY_DOWN: InputEvent.DOWN,
    curses.KEY_LEFT: InputEvent.LEFT,
    curses.KEY_RIGHT: InputEvent.RIGHT,
    ord("w"): InputEvent.UP,
    ord("W"): InputEvent.UP,
    ord("s"): InputEvent.DOWN,
    ord("S"): InputEvent.DOWN,
    ord("a"): InputEvent.LEFT,
    ord("A"): InputEvent.LEFT,
    ord("d"): InputEvent.RIGHT,
    ord("D"): InputEvent.RIGHT,
    curses.KEY_ENTER: InputEvent.CONFIRM,
    ord("\n"): InputEvent.CONFIRM,
    ord("\r"): InputEvent.CONFIRM,
    ord("r"): InputEvent.RESTART,
    ord("R"): InputEvent.RESTART,
    27: InputEvent.QUIT,  # Esc
    ord("q"): InputEvent.QUIT,
    ord("Q"): InputEvent.QUIT,
}

INPUT_POLL_SECONDS = 0.01


def key_to_event(key):
    """Map a curses key code to an InputEvent, or None for unbound keys."""
    return KEY_EVENTS.get(key)


def read_input(screen, screen_lock, events, quit_event):
    """Post key presses to the events queue until the player quits."""
    while not quit_event.is_set():
        with screen_lock:
            key = screen.getch()
        if key == -1:
            time.sleep(INPUT_POLL_SECONDS)
            continue
        event = key_to_event(key)
        if event is InputEvent.QUIT:
            quit_event.set()
        elif event is not None:
            events.put(event)


def drain(events, session):
    """Apply every event buffered since the last tick, oldest first."""
    while True:
        try:
            event = events.get_nowait()
        except queue.Empty:
            return
        session.handle_event(event)


def run_loop(screen, session, events, quit_event, screen_lock):
    """Tick until quit, re-reading the interval each time so level-ups apply at once."""
    next_tick = time.monotonic()
    while not quit_event.is_set():
        drain(events, session)
        session.tick()
        with screen_lock:
            render(screen, session)

        next_tick += session.interval_ms / 1000.0
        delay = next_tick - time.monotonic()
        if delay < 0:
            # fell behind, start counting again from now
            next_tick = time.monotonic()
            delay = 0
        quit_event.wait(delay)


def play(screen, session):
    curses.curs_set(0)
    curses.noecho()
    screen.keypad(True)
    screen.nodelay(True)
    init_colors()

    events = queue.Queue()
    quit_event = threading.Event()
    screen_lock = threading.Lock()
    reader = threading.Thread(
        target=read_input,
        args=(screen, screen_lock, events, quit_event),
        name="input",
        daemon=True,
    )
    reader.start()
    try:
        run_loop(screen, session, events, quit_event, screen_lock)
    finally:
        quit_event.set()
        reader.join(timeout=1.0)


def main(argv=None):
    args = config.parse_args(argv)
    # short Esc delay so quitting feels immediate
    os.environ.setdefault("ESCDELAY", "25")
    config.setup_logging(args.log_file, args.log_level)

    cues = ToneCues(enabled=not args.mute)
    session = GameSession(
        width=args.width,
        height=args.height,
        store=HighScoreStore(args.highscore_file),
        cues=cues,
        rng=random.Random(args.seed),
    )
    logger.info("starting %dx%d board, record %d", args.width, args.height, session.high_score)
    try:
        curses.wrapper(play, session)
    finally:
        cues.close()
    print(f"Score: {session.score}  Record: {session.high_score}")
