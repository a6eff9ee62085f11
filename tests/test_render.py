import curses
import random

import pytest

from termsnake import render
from termsnake.model import Food, FoodKind, GamePhase, InputEvent
from termsnake.render import food_style, game_over_lines
from termsnake.session import GameSession

from helpers import FakeStore


class FakeScreen:
    """Records addstr calls; cells listed in off_screen raise like curses does."""

    def __init__(self, off_screen=()):
        self.cells = {}
        self.off_screen = set(off_screen)
        self.refreshed = 0

    def erase(self):
        self.cells = {}

    def addstr(self, y, x, text, attr=0):
        if (y, x) in self.off_screen:
            raise curses.error("addwstr() returned ERR")
        self.cells[y, x] = (text, attr)

    def refresh(self):
        self.refreshed += 1

    def text(self):
        return [text for text, _ in self.cells.values()]


@pytest.fixture(autouse=True)
def fake_color_pairs(monkeypatch):
    # color_pair needs initscr(); give each pair a distinct attribute instead
    monkeypatch.setattr(render.curses, "color_pair", lambda pair: pair << 8)


def playing_session(kind=FoodKind.NORMAL):
    s = GameSession(store=FakeStore(70), rng=random.Random(1))
    s.handle_event(InputEvent.CONFIRM)
    s.obstacles = [(20, 4)]
    s.food = Food((30, 15), kind)
    return s


def test_menu_frame():
    s = GameSession(store=FakeStore(70), rng=random.Random(1))
    screen = FakeScreen()
    render.render(screen, s)
    assert "RECORD: 70" in screen.text()
    assert "Press ENTER to start" in screen.text()
    assert screen.refreshed == 1


def test_board_frame_places_snake_food_and_obstacles():
    s = playing_session()
    screen = FakeScreen()
    render.render(screen, s)
    assert screen.cells[10, 10][0] == "@"
    assert screen.cells[10, 9][0] == "O"
    assert screen.cells[10, 8][0] == "O"
    assert screen.cells[15, 30][0] == "o"
    assert screen.cells[4, 20][0] == "#"
    hud = screen.cells[s.height, 2][0]
    assert "Score: 0" in hud
    assert "Record: 70" in hud
    assert "Length: 3" in hud


def test_game_over_frame():
    s = playing_session()
    s.phase = GamePhase.GAME_OVER
    screen = FakeScreen()
    render.render(screen, s)
    assert any("GAME OVER!" in text for text in screen.text())


def test_power_up_blinks_every_five_frames():
    s = playing_session(FoodKind.POWER_UP)
    bold = curses.A_BOLD
    s.frame_count = 0
    assert food_style(s) == ("*", (render.MAGENTA << 8) | bold)
    s.frame_count = 5
    assert food_style(s) == ("*", (render.YELLOW << 8) | bold)
    s.frame_count = 10
    assert food_style(s)[1] == (render.MAGENTA << 8) | bold


def test_normal_food_does_not_blink():
    s = playing_session()
    styles = set()
    for frame in range(12):
        s.frame_count = frame
        styles.add(food_style(s))
    assert styles == {("o", (render.RED << 8) | curses.A_BOLD)}


def test_cells_outside_terminal_are_skipped():
    s = playing_session()
    screen = FakeScreen(off_screen={(s.height, 2)})
    render.render(screen, s)
    assert (s.height, 2) not in screen.cells
    assert screen.cells[10, 10][0] == "@"


def test_game_over_panel_shows_record_when_beaten():
    s = GameSession(store=FakeStore(20), rng=random.Random(1))
    s.score = 30
    s.new_record = True
    lines = game_over_lines(s)
    assert "* NEW RECORD! *" in lines
    assert "Score:  30" in lines
    assert not any(line.startswith("Record:") for line in lines)


def test_game_over_panel_shows_record_otherwise():
    s = GameSession(store=FakeStore(90), rng=random.Random(1))
    s.score = 30
    lines = game_over_lines(s)
    assert "* NEW RECORD! *" not in lines
    assert "Record: 90" in lines
    assert "Length: 3" in lines
