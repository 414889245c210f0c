import logging
from dataclasses import dataclass

from .config import STOP
from .food import spawn_food

logger = logging.getLogger(__name__)


@dataclass
class TickOutcome:
    collided: bool = False
    ate: bool = False


def resolve_tick(state) -> TickOutcome:
    """
    Collision and scoring for one tick, run after the snake has moved.

    1) head on any tail segment -> game over, direction forced to STOP
    2) head on food -> score +1, grow at the old food cell, spawn new food

    Both checks always run; self-collision comes first.
    """
    outcome = TickOutcome()
    head = state.snake.head

    if head in state.snake.tail:
        state.direction = STOP
        state.game_over = True
        outcome.collided = True
        logger.info("Self collision at %s, final score %d", head, state.score)

    if head == state.food:
        state.score += 1
        old_food = state.food
        state.snake.grow(old_food)
        state.food = spawn_food(state.arena.width, state.arena.height, state.rng)
        outcome.ate = True
        logger.debug("Ate food at %s, score %d, next food %s", old_food, state.score, state.food)

    return outcome
