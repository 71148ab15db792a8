"""
Occupancy board: dense grid of cell codes, the single source of truth for
what occupies where.

Cell codes:
  0 empty, 1 fish, 2 new fish, 3 shark, 4 new shark, 5 fed shark
Codes 2, 4 and 5 mean "changed this tick" and only live until the next
call to settle(); for occupancy they count as plain fish / shark.
"""
from enum import Enum, IntEnum

import numpy as np

from .errors import InvariantError
from .geometry import Point, Torus


class Cell(IntEnum):
    EMPTY = 0
    FISH = 1
    NEW_FISH = 2
    SHARK = 3
    NEW_SHARK = 4
    FED_SHARK = 5


class Occupancy(Enum):
    EMPTY = "empty"
    FISH = "fish"
    SHARK = "shark"


_OCCUPANCY = {
    Cell.EMPTY: Occupancy.EMPTY,
    Cell.FISH: Occupancy.FISH,
    Cell.NEW_FISH: Occupancy.FISH,
    Cell.SHARK: Occupancy.SHARK,
    Cell.NEW_SHARK: Occupancy.SHARK,
    Cell.FED_SHARK: Occupancy.SHARK,
}

# transient code -> base code, indexed by code
_SETTLED = np.array([Cell.EMPTY, Cell.FISH, Cell.FISH, Cell.SHARK, Cell.SHARK, Cell.SHARK],
                    dtype=np.int8)


def occupancy(code: int) -> Occupancy:
    return _OCCUPANCY[Cell(code)]


class Board:
    def __init__(self, torus: Torus):
        self.torus = torus
        self._cells = np.zeros((torus.height, torus.width), dtype=np.int8)

    # ---------- access ----------
    def get(self, p: Point) -> Cell:
        return Cell(self._cells[p.y, p.x])

    def set(self, p: Point, code: Cell) -> None:
        self._cells[p.y, p.x] = code

    def place(self, p: Point, code: Cell) -> None:
        """Set a cell that must currently be empty."""
        current = self._cells[p.y, p.x]
        if current != Cell.EMPTY:
            raise InvariantError(
                f"cannot place {Cell(code).name} at ({p.x}, {p.y}): cell holds {Cell(current).name}"
            )
        self._cells[p.y, p.x] = code

    # ---------- occupancy tests ----------
    def is_empty(self, p: Point) -> bool:
        return self._cells[p.y, p.x] == Cell.EMPTY

    def has_fish(self, p: Point) -> bool:
        return Cell.FISH <= self._cells[p.y, p.x] <= Cell.NEW_FISH

    def has_shark(self, p: Point) -> bool:
        return self._cells[p.y, p.x] >= Cell.SHARK

    def count(self, kind: Occupancy) -> int:
        settled = _SETTLED[self._cells]
        if kind is Occupancy.EMPTY:
            return int(np.count_nonzero(settled == Cell.EMPTY))
        if kind is Occupancy.FISH:
            return int(np.count_nonzero(settled == Cell.FISH))
        return int(np.count_nonzero(settled == Cell.SHARK))

    # ---------- per-tick bookkeeping ----------
    def settle(self) -> None:
        """Drop the new/fed flags left over from the previous tick."""
        self._cells[:] = _SETTLED[self._cells]

    # ---------- renderer access ----------
    @property
    def cells(self) -> np.ndarray:
        view = self._cells.view()
        view.flags.writeable = False
        return view

    @property
    def flat(self) -> np.ndarray:
        """Cells in y*width + x order."""
        return self.cells.ravel()

    def __getitem__(self, ix: int) -> Cell:
        return Cell(self._cells.flat[ix])
