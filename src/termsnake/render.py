from enum import Enum
from typing import Protocol, Tuple

from .config import (
    DEBUG_TEMPLATE, FOOD_GLYPH, GAME_OVER_TEMPLATE, SNAKE_GLYPH,
    STATUS_ROW, STATUS_TEMPLATE,
)


class Style(Enum):
    SNAKE = "snake"
    FOOD = "food"
    TEXT = "text"


class Surface(Protocol):
    """Character-cell drawing target (curses screen, pygame window, test fake)."""

    def size(self) -> Tuple[int, int]: ...
    def clear(self) -> None: ...
    def draw(self, x: int, y: int, text: str, style: Style) -> None: ...
    def present(self) -> None: ...


# ---------- Draw ----------
def draw_game(surface: Surface, state) -> None:
    surface.clear()
    # snake
    for x, y in state.snake:
        surface.draw(x, y, SNAKE_GLYPH, Style.SNAKE)
    # food
    surface.draw(state.food[0], state.food[1], FOOD_GLYPH, Style.FOOD)
    # score + help
    surface.draw(0, STATUS_ROW, STATUS_TEMPLATE.format(score=state.score), Style.TEXT)
    if state.debug:
        draw_debug(surface, state)
    surface.present()


def draw_game_over(surface: Surface, state) -> None:
    surface.clear()
    msg = GAME_OVER_TEMPLATE.format(score=state.score)
    width, height = state.arena.width, state.arena.height
    x = max(width // 2 - len(msg) // 2, 0)
    surface.draw(x, height // 2, msg, Style.TEXT)
    surface.present()


def draw_debug(surface: Surface, state) -> None:
    # Dev only, bottom row
    hx, hy = state.snake.head
    line = DEBUG_TEMPLATE.format(
        x=hx, y=hy, w=state.arena.width, h=state.arena.height,
        direction=state.direction_name,
    )
    surface.draw(1, state.arena.height - 1, line, Style.TEXT)
