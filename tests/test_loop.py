import pytest

from termsnake.config import GAME_OVER_TEMPLATE, STATUS_TEMPLATE, TICK_MS
from termsnake.errors import InputSourceError
from termsnake.game import Command
from termsnake.loop import run
from termsnake.render import Style, draw_game, draw_game_over
from termsnake.snake import Snake

from conftest import ScriptedInput


class TestRender:
    """Draw calls issued per frame."""

    def test_playing_frame(self, state, surface):
        state.snake = Snake([(5, 5), (4, 5), (3, 5)])
        state.food = (9, 9)
        draw_game(surface, state)

        assert surface.calls[0] == ("clear",)
        assert surface.calls[-1] == ("present",)
        draws = [c for c in surface.calls if c[0] == "draw"]
        assert len(draws) == 3 + 1 + 1
        assert [c[1:3] for c in draws if c[4] is Style.SNAKE] == [(5, 5), (4, 5), (3, 5)]
        assert [c[1:3] for c in draws if c[4] is Style.FOOD] == [(9, 9)]
        assert ("draw", 0, 0, STATUS_TEMPLATE.format(score=0), Style.TEXT) in draws

    def test_game_over_frame_is_centered(self, state, surface):
        state.score = 4
        draw_game_over(surface, state)

        msg = GAME_OVER_TEMPLATE.format(score=4)
        width, height = state.arena.width, state.arena.height
        assert surface.calls == [
            ("clear",),
            ("draw", max(width // 2 - len(msg) // 2, 0), height // 2, msg, Style.TEXT),
            ("present",),
        ]

    def test_debug_line_on_bottom_row(self, state, surface):
        state.debug = True
        draw_game(surface, state)
        texts = [c for c in surface.calls if c[0] == "draw" and c[4] is Style.TEXT]
        assert len(texts) == 2
        assert texts[1][2] == state.arena.height - 1
        assert "Direction: Left" in texts[1][3]


class TestLoop:
    def test_polls_once_per_tick_with_tick_timeout(self, state, surface):
        source = ScriptedInput([None, None, None])
        run(surface, source, state)
        assert source.timeouts == [TICK_MS] * 4
        assert surface.frames() == 3

    def test_quit_stops_before_update(self, state, surface):
        head = state.snake.head
        run(surface, ScriptedInput([Command.QUIT]), state)
        assert surface.calls == []
        assert state.snake.head == head

    def test_idle_ticks_only_move_the_snake(self, state, surface):
        state.snake = Snake([(5, 5)])
        state.food = (0, 1)
        run(surface, ScriptedInput([None, None]), state)
        assert state.snake.head == (3, 5)
        assert state.score == 0

    def test_game_over_draws_end_screen_without_updating(self, state, surface):
        state.game_over = True
        state.snake = Snake([(5, 5)])
        run(surface, ScriptedInput([None, Command.UP]), state)
        assert state.snake.head == (5, 5)
        assert surface.frames() == 2
        assert all(c[4] is Style.TEXT for c in surface.calls if c[0] == "draw")

    def test_restart_resumes_play(self, state, surface):
        state.game_over = True
        state.score = 9
        run(surface, ScriptedInput([Command.RESTART]), state)
        assert not state.game_over
        assert any(c[0] == "draw" and c[4] is Style.SNAKE for c in surface.calls)

    def test_input_errors_propagate(self, state, surface):
        class Broken:
            def poll(self, timeout_ms):
                raise InputSourceError("tty closed")

        with pytest.raises(InputSourceError):
            run(surface, Broken(), state)
