# window.py
import logging
import random
from typing import Callable, Optional, Tuple

import pygame # type: ignore

from .config import BG, CYAN, GREEN, TEXT, Config
from .errors import InputSourceError
from .game import Command, new_game_state
from .grid import Arena
from .loop import run
from .render import Style

logger = logging.getLogger(__name__)

KEYMAP = {
    pygame.K_q: Command.QUIT,
    pygame.K_w: Command.UP,
    pygame.K_a: Command.LEFT,
    pygame.K_s: Command.DOWN,
    pygame.K_d: Command.RIGHT,
    pygame.K_m: Command.STOP,
    pygame.K_n: Command.RESTART,
    pygame.K_UP: Command.UP,
    pygame.K_LEFT: Command.LEFT,
    pygame.K_DOWN: Command.DOWN,
    pygame.K_RIGHT: Command.RIGHT,
}

CELL_COLORS = {Style.SNAKE: GREEN, Style.FOOD: CYAN}


def translate_event(event: pygame.event.Event) -> Optional[Command]:
    if event.type == pygame.QUIT:
        return Command.QUIT
    if event.type == pygame.KEYDOWN:
        return KEYMAP.get(event.key)
    return None


class PygameSurface:
    """
    Character-grid surface drawn into a pygame window.
    Snake and food fill a whole cell; text is rendered starting at its cell.
    """

    def __init__(self, screen: pygame.Surface, font: pygame.font.Font, grid: Tuple[int, int],
                 cell_size: int, on_present: Callable[[], None] = pygame.display.flip):
        self.screen = screen
        self.font = font
        self.grid = grid
        self.cell_size = cell_size
        self.on_present = on_present

    def size(self) -> Tuple[int, int]:
        return self.grid

    def clear(self) -> None:
        self.screen.fill(BG)

    def draw(self, x: int, y: int, text: str, style: Style) -> None:
        px, py = x * self.cell_size, y * self.cell_size
        if style is Style.TEXT:
            txt = self.font.render(text, True, TEXT)
            self.screen.blit(txt, (px, py))
            return
        rect = pygame.Rect(px, py, self.cell_size, self.cell_size)
        pygame.draw.rect(self.screen, CELL_COLORS[style], rect)

    def present(self) -> None:
        self.on_present()


class PygameInput:
    """Waits up to one tick for a recognised key; other events are dropped."""

    def poll(self, timeout_ms: int) -> Optional[Command]:
        deadline = pygame.time.get_ticks() + timeout_ms
        try:
            while True:
                remaining = deadline - pygame.time.get_ticks()
                if remaining <= 0:
                    return None
                event = pygame.event.wait(remaining)
                if event.type == pygame.NOEVENT:
                    return None
                command = translate_event(event)
                if command is not None:
                    return command
        except pygame.error as exc:
            raise InputSourceError(f"Reading pygame events failed: {exc}") from exc


def play_window(config: Config) -> int:
    """Play in a pygame window sized to config.window_grid; returns the last score."""
    cols, rows = config.window_grid
    pygame.init()
    try:
        screen = pygame.display.set_mode((cols * config.cell_size, rows * config.cell_size))
        pygame.display.set_caption("Snake")
        font = pygame.font.SysFont(None, config.cell_size)

        surface = PygameSurface(screen, font, (cols, rows), config.cell_size)
        arena = Arena(cols, rows, config.boundary)
        state = new_game_state(arena, random.Random(config.seed), debug=config.debug)

        run(surface, PygameInput(), state)
        return state.score
    finally:
        pygame.quit()
