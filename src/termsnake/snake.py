from collections import deque
from typing import Iterable, Iterator, List, Optional

from .config import DEBUG_SNAKE_LEN, DEBUG_SNAKE_ROW, STOP
from .grid import Arena, Coord, Direction


class Snake:
    """
    Body segments from head (index 0) to tail.

    Moving only derives a new head and drops the last segment, so the body
    follows the head without shifting every cell.
    """

    def __init__(self, segments: Iterable[Coord]):
        self.segments = deque(segments)
        if not self.segments:
            raise ValueError("A snake needs at least one segment")

    @property
    def head(self) -> Coord:
        return self.segments[0]

    @property
    def tail(self) -> List[Coord]:
        return list(self.segments)[1:]

    def __len__(self) -> int:
        return len(self.segments)

    def __iter__(self) -> Iterator[Coord]:
        return iter(self.segments)

    def __contains__(self, coord) -> bool:
        return coord in self.segments

    def __repr__(self) -> str:
        return f"Snake({list(self.segments)!r})"

    def move(self, direction: Direction, arena: Arena) -> Optional[Coord]:
        """Advance one cell. Returns the new head, or None if a wall blocked it."""
        if direction == STOP:
            return self.head
        new_head = arena.step(self.head, direction)
        if new_head is None:
            return None
        self.segments.appendleft(new_head)
        self.segments.pop()
        return new_head

    def grow(self, at: Coord) -> None:
        self.segments.append(at)


def debug_snake() -> Snake:
    # Dev only: a long snake laid out along one row, head on the left.
    return Snake((x, DEBUG_SNAKE_ROW) for x in range(1, DEBUG_SNAKE_LEN + 1))
