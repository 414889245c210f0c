import curses
import logging
import random
from typing import Optional, Tuple

from .config import Config
from .errors import InputSourceError
from .game import Command, new_game_state
from .grid import Arena
from .loop import run
from .render import Style

logger = logging.getLogger(__name__)

KEYMAP = {
    ord("q"): Command.QUIT,
    ord("w"): Command.UP,
    ord("a"): Command.LEFT,
    ord("s"): Command.DOWN,
    ord("d"): Command.RIGHT,
    ord("m"): Command.STOP,
    ord("n"): Command.RESTART,
    curses.KEY_UP: Command.UP,
    curses.KEY_LEFT: Command.LEFT,
    curses.KEY_DOWN: Command.DOWN,
    curses.KEY_RIGHT: Command.RIGHT,
}

SNAKE_COLOR_256 = 0xa2


def translate_key(key: int) -> Optional[Command]:
    return KEYMAP.get(key)


class CursesSurface:
    """Render surface over a curses window, one character per cell."""

    def __init__(self, stdscr):
        self.stdscr = stdscr
        self.attrs = {style: curses.A_NORMAL for style in Style}
        self.attrs[Style.SNAKE] = curses.A_BOLD

    def init_colors(self) -> None:
        if not curses.has_colors():
            return
        curses.start_color()
        snake = SNAKE_COLOR_256 if curses.COLORS >= 256 else curses.COLOR_GREEN
        curses.init_pair(1, snake, snake)
        curses.init_pair(2, curses.COLOR_WHITE, curses.COLOR_CYAN)
        curses.init_pair(3, curses.COLOR_WHITE, curses.COLOR_BLACK)
        self.attrs[Style.SNAKE] = curses.color_pair(1) | curses.A_BOLD
        self.attrs[Style.FOOD] = curses.color_pair(2)
        self.attrs[Style.TEXT] = curses.color_pair(3)

    def size(self) -> Tuple[int, int]:
        height, width = self.stdscr.getmaxyx()
        return width, height

    def clear(self) -> None:
        self.stdscr.erase()

    def draw(self, x: int, y: int, text: str, style: Style) -> None:
        width, height = self.size()
        if not (0 <= x < width and 0 <= y < height):
            return
        try:
            self.stdscr.addstr(y, x, text[:width - x], self.attrs[style])
        except curses.error:
            # addstr reports an error after writing the bottom-right cell
            pass

    def present(self) -> None:
        self.stdscr.refresh()


class CursesInput:
    """Keyboard input from a curses window with a per-poll timeout."""

    def __init__(self, stdscr):
        self.stdscr = stdscr
        self.stdscr.keypad(True)

    def poll(self, timeout_ms: int) -> Optional[Command]:
        self.stdscr.timeout(timeout_ms)
        try:
            key = self.stdscr.getch()
        except curses.error as exc:
            raise InputSourceError(f"Reading the keyboard failed: {exc}") from exc
        if key == -1:
            return None
        return translate_key(key)


def _session(stdscr, config: Config) -> int:
    try:
        curses.curs_set(0)
    except curses.error:
        logger.debug("Terminal cannot hide the cursor")

    surface = CursesSurface(stdscr)
    surface.init_colors()
    width, height = surface.size()
    arena = Arena(width, height, config.boundary)
    state = new_game_state(arena, random.Random(config.seed), debug=config.debug)

    run(surface, CursesInput(stdscr), state)
    return state.score


def play_terminal(config: Config) -> int:
    """Play in the current terminal; returns the last score."""
    return curses.wrapper(_session, config)
