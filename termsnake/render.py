"""curses drawing for the menu, the board and the game-over panel."""
import curses

from termsnake.model import FoodKind, GamePhase

# color pair numbers
GREEN, YELLOW, RED, MAGENTA, CYAN, WHITE = range(1, 7)

TITLE = [
    r"  ____  _   _    _    _  _______ ",
    r" / ___|| \ | |  / \  | |/ / ____|",
    r" \___ \|  \| | / _ \ | ' /|  _|  ",
    r"  ___) | |\  |/ ___ \| . \| |___ ",
    r" |____/|_| \_/_/   \_\_|\_\_____|",
]

MENU_LINES = [
    "CONTROLS",
    "  Arrows / WASD : move",
    "  Enter         : start",
    "  R             : restart",
    "  Esc / Q       : quit",
    "",
    "RULES",
    "  o food ............. 10 points",
    "  * power-up ......... 50 points",
    "  # obstacle ......... avoid!",
    "",
    "Every 50 points is a new level:",
    "faster snake, more obstacles.",
]


def init_colors():
    """Set up color pairs; call once after curses starts."""
    curses.start_color()
    curses.use_default_colors()
    curses.init_pair(GREEN, curses.COLOR_GREEN, -1)
    curses.init_pair(YELLOW, curses.COLOR_YELLOW, -1)
    curses.init_pair(RED, curses.COLOR_RED, -1)
    curses.init_pair(MAGENTA, curses.COLOR_MAGENTA, -1)
    curses.init_pair(CYAN, curses.COLOR_CYAN, -1)
    curses.init_pair(WHITE, curses.COLOR_WHITE, -1)


def put(screen, y, x, text, attr=0):
    """addstr that skips cells outside the terminal instead of raising."""
    try:
        screen.addstr(y, x, text, attr)
    except curses.error:
        pass


def draw_menu(screen, session):
    screen.erase()
    for i, line in enumerate(TITLE):
        put(screen, 1 + i, 2, line, curses.color_pair(GREEN) | curses.A_BOLD)
    top = len(TITLE) + 2
    put(screen, top, 4, f"RECORD: {session.high_score}", curses.color_pair(YELLOW) | curses.A_BOLD)
    for i, line in enumerate(MENU_LINES):
        put(screen, top + 2 + i, 4, line, curses.color_pair(CYAN))
    put(screen, top + 3 + len(MENU_LINES), 4, "Press ENTER to start",
        curses.color_pair(YELLOW) | curses.A_BOLD)
    screen.refresh()


def food_style(session):
    """Glyph and attribute for the food; power-ups blink every 5 frames."""
    if session.food.kind is FoodKind.POWER_UP:
        pair = MAGENTA if (session.frame_count // 5) % 2 == 0 else YELLOW
        return "*", curses.color_pair(pair) | curses.A_BOLD
    return "o", curses.color_pair(RED) | curses.A_BOLD


def draw_board(screen, session):
    screen.erase()
    width, height = session.width, session.height
    border = curses.color_pair(WHITE)

    put(screen, 0, 0, "+" + "-" * (width - 2) + "+", border)
    for y in range(1, height - 1):
        put(screen, y, 0, "|", border)
        put(screen, y, width - 1, "|", border)
    put(screen, height - 1, 0, "+" + "-" * (width - 2) + "+", border)

    for x, y in session.obstacles:
        put(screen, y, x, "#", border)

    for i, (x, y) in enumerate(session.snake):
        if i == 0:
            put(screen, y, x, "@", curses.color_pair(YELLOW) | curses.A_BOLD)
        else:
            put(screen, y, x, "O", curses.color_pair(GREEN))

    glyph, attr = food_style(session)
    fx, fy = session.food.pos
    put(screen, fy, fx, glyph, attr)

    hud = (f" Score: {session.score} | Record: {session.high_score} | "
           f"Level: {session.level} | Length: {len(session.snake)} ")
    put(screen, height, 2, hud, curses.color_pair(CYAN))
    screen.refresh()


def game_over_lines(session):
    lines = ["GAME OVER!", ""]
    if session.new_record:
        lines += ["* NEW RECORD! *", ""]
    lines.append(f"Score:  {session.score}")
    if not session.new_record:
        lines.append(f"Record: {session.high_score}")
    lines += [
        f"Level:  {session.level}",
        f"Length: {len(session.snake)}",
        "",
        "R - restart",
        "Esc - quit",
    ]
    return lines


def draw_game_over(screen, session):
    screen.erase()
    lines = game_over_lines(session)
    inner = max(len(line) for line in lines) + 4
    top = max(0, session.height // 2 - (len(lines) + 2) // 2)
    left = max(0, session.width // 2 - (inner + 2) // 2)
    red = curses.color_pair(RED) | curses.A_BOLD

    put(screen, top, left, "+" + "-" * inner + "+", red)
    for i, line in enumerate(lines):
        attr = red
        if line.startswith("* NEW RECORD"):
            attr = curses.color_pair(YELLOW) | curses.A_BOLD
        put(screen, top + 1 + i, left, "|", red)
        put(screen, top + 1 + i, left + 1, ("  " + line).ljust(inner), attr)
        put(screen, top + 1 + i, left + inner + 1, "|", red)
    put(screen, top + len(lines) + 1, left, "+" + "-" * inner + "+", red)
    screen.refresh()


def render(screen, session):
    """Draw one frame for the session's current phase."""
    if session.phase is GamePhase.MENU:
        draw_menu(screen, session)
    elif session.phase is GamePhase.PLAYING:
        draw_board(screen, session)
    else:
        draw_game_over(screen, session)
