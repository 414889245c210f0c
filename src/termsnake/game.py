# game.py
from dataclasses import dataclass
from enum import Enum
import logging
import random
from typing import Optional, Tuple

from .config import DEFAULT_DIRECTION, DIRECTION_NAMES, UP, DOWN, LEFT, RIGHT, STOP
from .engine import TickOutcome, resolve_tick
from .food import spawn_food
from .grid import Arena, Coord, Direction, is_opposite
from .snake import Snake, debug_snake

logger = logging.getLogger(__name__)


class Command(Enum):
    QUIT = "quit"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    STOP = "stop"
    RESTART = "restart"


COMMAND_DIRECTIONS = {
    Command.UP: UP,
    Command.DOWN: DOWN,
    Command.LEFT: LEFT,
    Command.RIGHT: RIGHT,
    Command.STOP: STOP,
}


class Phase(Enum):
    PLAYING = "playing"
    GAME_OVER = "game_over"


# ---------- State ----------
@dataclass
class GameState:
    arena: Arena
    snake: Snake                   # head at index 0
    direction: Direction
    food: Coord
    score: int
    game_over: bool
    rng: random.Random
    debug: bool = False

    @property
    def phase(self) -> Phase:
        return Phase.GAME_OVER if self.game_over else Phase.PLAYING

    @property
    def direction_name(self) -> str:
        return DIRECTION_NAMES[self.direction]


def initial_snake(arena: Arena, debug: bool = False) -> Snake:
    if debug:
        candidate = debug_snake()
        if all(arena.contains(c) for c in candidate):
            return candidate
        logger.warning("Debug snake does not fit a %dx%d arena, using a single segment",
                       arena.width, arena.height)
    return Snake([arena.center])


def new_game_state(arena: Arena, rng: Optional[random.Random] = None, debug: bool = False) -> GameState:
    rng = rng if rng is not None else random.Random()
    return GameState(
        arena=arena,
        snake=initial_snake(arena, debug),
        direction=DEFAULT_DIRECTION,
        food=spawn_food(arena.width, arena.height, rng),
        score=0,
        game_over=False,
        rng=rng,
        debug=debug,
    )


# ---------- Input / Update ----------
def set_direction(state: GameState, direction: Direction) -> bool:
    """Change heading unless it is a 180° turn. STOP is always accepted."""
    if direction == STOP or not is_opposite(direction, state.direction):
        state.direction = direction
        return True
    return False


def restart(state: GameState) -> None:
    """Reset score, flag, snake, direction and food together."""
    fresh = new_game_state(state.arena, state.rng, state.debug)
    state.snake = fresh.snake
    state.direction = fresh.direction
    state.food = fresh.food
    state.score = 0
    state.game_over = False
    logger.info("New game started")


def apply_command(state: GameState, command: Optional[Command]) -> bool:
    """Apply one input command. Return False to quit."""
    if command is None:
        return True
    if command is Command.QUIT:
        return False
    if command is Command.RESTART:
        if state.game_over:
            restart(state)
        return True
    set_direction(state, COMMAND_DIRECTIONS[command])
    return True


def step_game(state: GameState) -> Tuple[bool, TickOutcome]:
    """
    Advance the simulation by one tick.
    Returns (alive, outcome); nothing changes once the game is over.
    A paused snake (STOP) stays put but is still checked for collisions and food.
    """
    outcome = TickOutcome()
    if state.game_over:
        return False, outcome

    new_head = state.snake.move(state.direction, state.arena)
    if new_head is None:
        # Only reachable with Boundary.WALL
        state.direction = STOP
        state.game_over = True
        outcome.collided = True
        logger.info("Hit the wall at %s, final score %d", state.snake.head, state.score)
        return False, outcome

    outcome = resolve_tick(state)
    return not state.game_over, outcome

