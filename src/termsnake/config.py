from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

# ----- Timing -----
TICK_RATE = 20                  # ticks per second
TICK_MS = 1000 // TICK_RATE     # bounded input wait per tick

# ----- Arena -----
STATUS_ROW = 0                  # row 0 is reserved for score and help text
DEFAULT_COLS, DEFAULT_ROWS = 40, 25
CELL_SIZE = 20                  # pixels per cell in the window backend

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)
STOP = (0, 0)
DIRECTION_NAMES = {UP: "Up", DOWN: "Down", LEFT: "Left", RIGHT: "Right", STOP: "Stop"}
DEFAULT_DIRECTION = LEFT

# ----- Glyphs & colors -----
SNAKE_GLYPH = "s"
FOOD_GLYPH = "f"
BG    = (20, 20, 24)
GREEN = (80, 200, 80)
CYAN  = (70, 200, 200)
TEXT  = (220, 220, 230)

# ----- Messages -----
STATUS_TEMPLATE = "Score: {score} | Press 'q' to exit | 'wasd' to move"
GAME_OVER_TEMPLATE = "Game Over | Final Score: {score} | 'n' to start a new game | 'q' to quit"
DEBUG_TEMPLATE = "| Debug Info: | Head: {x}, {y} | Scene: {w}, {h} | Direction: {direction}"

# Dev-only seeding: a long horizontal snake on row 5
DEBUG_SNAKE_ROW = 5
DEBUG_SNAKE_LEN = 34


class Boundary(Enum):
    """What happens when the head leaves the arena."""
    WRAP = "wrap"   # re-enter on the opposite edge
    WALL = "wall"   # leaving the arena ends the game


class Backend(Enum):
    TERMINAL = "terminal"
    WINDOW = "window"


# ----- Tunables -----
@dataclass
class Config:
    seed: Optional[int] = None
    boundary: Boundary = Boundary.WRAP
    backend: Backend = Backend.TERMINAL
    debug: bool = False
    cell_size: int = CELL_SIZE
    window_grid: Tuple[int, int] = (DEFAULT_COLS, DEFAULT_ROWS)
    log_file: Optional[str] = None
    log_level: str = "INFO"

