import random

import pytest

from termsnake.game import Command, new_game_state
from termsnake.grid import Arena


class FakeSurface:
    """Records every call the render adapter makes."""

    def __init__(self, width=40, height=20):
        self.width = width
        self.height = height
        self.calls = []

    def size(self):
        return (self.width, self.height)

    def clear(self):
        self.calls.append(("clear",))

    def draw(self, x, y, text, style):
        self.calls.append(("draw", x, y, text, style))

    def present(self):
        self.calls.append(("present",))

    def frames(self):
        return sum(1 for call in self.calls if call[0] == "present")


class ScriptedInput:
    """Replays a list of commands, one per poll, then quits."""

    def __init__(self, commands):
        self.commands = list(commands)
        self.timeouts = []

    def poll(self, timeout_ms):
        self.timeouts.append(timeout_ms)
        if not self.commands:
            return Command.QUIT
        return self.commands.pop(0)


@pytest.fixture
def arena():
    return Arena(20, 10)


@pytest.fixture
def state(arena):
    return new_game_state(arena, random.Random(1234))


@pytest.fixture
def surface():
    return FakeSurface()
