"""
Geometry: positions on a toroidal grid. Every edge wraps to the opposite
edge, so there are no boundary cells.
"""
from dataclasses import dataclass
from typing import NamedTuple, Tuple


class Point(NamedTuple):
    x: int
    y: int


# left, right, up, down
DIRECTIONS: Tuple[Tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


@dataclass(frozen=True)
class Torus:
    width: int
    height: int

    @property
    def size(self) -> int:
        return self.width * self.height

    def wrap(self, x: int, y: int) -> Point:
        # python's % is a true modulo for negative operands
        return Point(x % self.width, y % self.height)

    def offset(self, p: Point, dx: int, dy: int) -> Point:
        return Point((p.x + dx) % self.width, (p.y + dy) % self.height)

    def index(self, p: Point) -> int:
        p = self.wrap(p.x, p.y)
        return p.y * self.width + p.x

    def point(self, ix: int) -> Point:
        if not 0 <= ix < self.size:
            raise IndexError(f"cell index {ix} outside grid of {self.size} cells")
        y, x = divmod(int(ix), self.width)
        return Point(x, y)
