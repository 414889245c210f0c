import logging
from typing import Optional, Protocol

from .config import TICK_MS
from .game import Command, GameState, apply_command, step_game
from .render import Surface, draw_game, draw_game_over

logger = logging.getLogger(__name__)


class InputSource(Protocol):
    def poll(self, timeout_ms: int) -> Optional[Command]:
        """Wait at most timeout_ms for a command; None when nothing arrived."""


def run(surface: Surface, source: InputSource, state: GameState) -> None:
    """
    Fixed-rate game loop: input -> update -> render, once per tick.
    The poll is the only wait; input errors propagate and end the game.
    """
    logger.info("Game loop started on a %dx%d arena (%s)",
                state.arena.width, state.arena.height, state.arena.boundary.value)
    while True:
        # 1) input
        command = source.poll(TICK_MS)
        if not apply_command(state, command):
            break

        # 2) update + 3) render
        if state.game_over:
            draw_game_over(surface, state)
        else:
            step_game(state)
            draw_game(surface, state)

    logger.info("Game loop stopped, score %d", state.score)
