from dataclasses import dataclass
from typing import Optional, Tuple

from .config import STATUS_ROW, STOP, Boundary

Coord = Tuple[int, int]
Direction = Tuple[int, int]


def is_opposite(a: Direction, b: Direction) -> bool:
    return a != STOP and a[0] == -b[0] and a[1] == -b[1]


@dataclass(frozen=True)
class Arena:
    """
    Playable rectangle [0, width) x [1, height).

    Row 0 belongs to the status line, so vertical wrapping cycles through
    rows 1..height-1 only.
    """
    width: int
    height: int
    boundary: Boundary = Boundary.WRAP

    def __post_init__(self):
        if self.width < 1 or self.height < STATUS_ROW + 2:
            raise ValueError(f"Arena too small: {self.width}x{self.height}")

    @property
    def top(self) -> int:
        return STATUS_ROW + 1

    @property
    def rows(self) -> int:
        return self.height - self.top

    @property
    def center(self) -> Coord:
        x = max(self.width // 2 - 1, 0)
        y = max(self.height // 2 - 1, self.top)
        return (x, y)

    def contains(self, coord: Coord) -> bool:
        x, y = coord
        return 0 <= x < self.width and self.top <= y < self.height

    def step(self, coord: Coord, direction: Direction) -> Optional[Coord]:
        """Move one cell; None means the step hit a wall."""
        x, y = coord
        dx, dy = direction
        nx, ny = x + dx, y + dy
        if self.boundary is Boundary.WALL:
            return (nx, ny) if self.contains((nx, ny)) else None
        return (nx % self.width, (ny - self.top) % self.rows + self.top)
