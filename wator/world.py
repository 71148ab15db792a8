"""
World engine: owns the board, the fish and shark lists and the random
source, and advances them together one tick at a time.

A tick is a fish phase, then a shark phase, then compaction of eaten fish
and starved sharks. Entities are visited in list order and the board is
mutated in place, so entity i sees every move made by entities 0..i-1 of
the same phase. Entities born during a phase are appended after it and
wait for the next tick.
"""
import dataclasses
import itertools
import logging
from collections import deque
from dataclasses import dataclass
from typing import Callable, Deque, Dict, List, Optional, Sequence, Set, Tuple

import numpy as np

from .board import Board, Cell
from .config import WorldConfig
from .entities import Fish, Shark
from .errors import InvariantError
from .geometry import DIRECTIONS, Point, Torus

log = logging.getLogger(__name__)

HISTORY_LEN = 2000

# all 24 orderings of the four moves; drawing one uniformly is a uniform shuffle
_ORDERS: Tuple[Tuple[Tuple[int, int], ...], ...] = tuple(itertools.permutations(DIRECTIONS))


@dataclass(frozen=True)
class TickStats:
    tick: int
    fish: int
    sharks: int
    born_fish: int = 0
    born_sharks: int = 0
    eaten: int = 0
    starved: int = 0


class World:
    def __init__(self, cfg: WorldConfig, populate: bool = True):
        self.cfg = cfg.validate()
        self.torus = Torus(cfg.width, cfg.height)
        self.board = Board(self.torus)
        self.rng = np.random.default_rng(cfg.seed)
        self.tick = 0

        self.fishes: List[Fish] = []
        self.sharks: List[Shark] = []

        # rolling population record, newest last
        self.history: Deque[TickStats] = deque(maxlen=HISTORY_LEN)
        # species name -> tick it died out
        self.extinctions: Dict[str, int] = {}

        self._last = TickStats(self.tick, 0, 0)
        self.history.append(self._last)
        if populate:
            self._populate()
        log.info("world %dx%d ready: %d fish, %d sharks (seed=%s)",
                 cfg.width, cfg.height, len(self.fishes), len(self.sharks), cfg.seed)

    # ---------- population ----------
    def _populate(self) -> None:
        cfg = self.cfg
        n_fish, n_sharks = cfg.n_fish, cfg.n_sharks
        cells = self.rng.choice(self.torus.size, size=n_fish + n_sharks, replace=False)
        # staggered timers so the population does not breed in lockstep
        fish_breed = self.rng.integers(1, cfg.fish_breed, size=n_fish, endpoint=True)
        shark_breed = self.rng.integers(1, cfg.shark_breed, size=n_sharks, endpoint=True)
        for ix, breed in zip(cells[:n_fish], fish_breed):
            self.add_fish(self.torus.point(ix), int(breed))
        for ix, breed in zip(cells[n_fish:], shark_breed):
            self.add_shark(self.torus.point(ix), int(breed))

    def add_fish(self, pos: Tuple[int, int], breed: int = 0) -> Fish:
        p = self.torus.wrap(*pos)
        self.board.place(p, Cell.FISH)
        fish = Fish(p, breed)
        self.fishes.append(fish)
        self._recount()
        return fish

    def add_shark(self, pos: Tuple[int, int], breed: int = 0, starve: int = 0) -> Shark:
        p = self.torus.wrap(*pos)
        self.board.place(p, Cell.SHARK)
        shark = Shark(p, breed, starve)
        self.sharks.append(shark)
        self._recount()
        return shark

    def _recount(self) -> None:
        # hand-placed entities count towards the current tick's record
        self._last = dataclasses.replace(self._last, fish=len(self.fishes), sharks=len(self.sharks))
        self.history[-1] = self._last

    # ---------- dynamics ----------
    def update(self) -> TickStats:
        """Advance the world by one tick."""
        before = (len(self.fishes), len(self.sharks))
        self.board.settle()
        born_fish = self._fish_phase()

        eaten: Set[Point] = set()
        born_sharks = self._shark_phase(eaten)

        self._remove_eaten(eaten)
        starved = self._remove_starved()

        self.tick += 1
        self._last = TickStats(self.tick, len(self.fishes), len(self.sharks),
                               born_fish, born_sharks, len(eaten), starved)
        self.history.append(self._last)
        self._note_extinctions(*before)
        log.debug("tick %d: fish=%d sharks=%d born=%d/%d eaten=%d starved=%d",
                  self.tick, self._last.fish, self._last.sharks,
                  born_fish, born_sharks, len(eaten), starved)
        return self._last

    def _first(self, start: Point, order: Sequence[Tuple[int, int]],
               accept: Callable[[Point], bool]) -> Optional[Point]:
        for dx, dy in order:
            p = self.torus.offset(start, dx, dy)
            if accept(p):
                return p
        return None

    def _fish_phase(self) -> int:
        board = self.board
        threshold = self.cfg.fish_breed
        born: List[Fish] = []
        orders = self.rng.integers(len(_ORDERS), size=len(self.fishes))

        for fish, k in zip(self.fishes, orders):
            start = fish.pos
            dest = self._first(start, _ORDERS[k], board.is_empty)
            if dest is None:
                # trapped fish neither move nor age towards breeding
                continue
            board.set(start, Cell.EMPTY)
            board.place(dest, Cell.FISH)
            fish.pos = dest

            fish.breed += 1
            if fish.breed >= threshold:
                fish.breed = 0
                board.place(start, Cell.NEW_FISH)
                born.append(Fish(start, 0))

        self.fishes.extend(born)
        return len(born)

    def _shark_phase(self, eaten: Set[Point]) -> int:
        board = self.board
        threshold = self.cfg.shark_breed
        born: List[Shark] = []
        # two independent shuffles per shark: one to hunt, one to move
        orders = self.rng.integers(len(_ORDERS), size=(len(self.sharks), 2))

        for shark, (k_eat, k_move) in zip(self.sharks, orders):
            start = shark.pos
            shark.starve += 1

            prey = self._first(start, _ORDERS[k_eat], board.has_fish)
            if prey is not None:
                # the fish record is dropped after the phase; the cell changes now
                eaten.add(prey)
                shark.starve = 0
                board.set(start, Cell.EMPTY)
                board.set(prey, Cell.FED_SHARK)
                shark.pos = prey
            else:
                dest = self._first(start, _ORDERS[k_move], board.is_empty)
                if dest is None:
                    continue
                board.set(start, Cell.EMPTY)
                board.place(dest, Cell.SHARK)
                shark.pos = dest

            shark.breed += 1
            if shark.breed == threshold:
                shark.breed = 0
                board.place(start, Cell.NEW_SHARK)
                born.append(Shark(start, 0, 0))

        self.sharks.extend(born)
        return len(born)

    def _remove_eaten(self, eaten: Set[Point]) -> None:
        if not eaten:
            return
        before = len(self.fishes)
        self.fishes[:] = [fish for fish in self.fishes if fish.pos not in eaten]
        if before - len(self.fishes) != len(eaten):
            raise InvariantError(
                f"{len(eaten)} fish eaten but {before - len(self.fishes)} removed"
            )

    def _remove_starved(self) -> int:
        limit = self.cfg.shark_starve
        board = self.board
        survivors: List[Shark] = []
        for shark in self.sharks:
            if shark.starve >= limit:
                if not board.has_shark(shark.pos):
                    raise InvariantError(
                        f"starved shark at ({shark.pos.x}, {shark.pos.y}) "
                        f"but board holds {board.get(shark.pos).name}"
                    )
                board.set(shark.pos, Cell.EMPTY)
            else:
                survivors.append(shark)
        starved = len(self.sharks) - len(survivors)
        self.sharks[:] = survivors
        return starved

    def _note_extinctions(self, fish_before: int, sharks_before: int) -> None:
        for name, before, now in (("fish", fish_before, self._last.fish),
                                  ("sharks", sharks_before, self._last.sharks)):
            if before > 0 and now == 0 and name not in self.extinctions:
                self.extinctions[name] = self.tick
                log.info("%s died out at tick %d", name, self.tick)

    # ---------- inspection ----------
    @property
    def extinct(self) -> bool:
        return bool(self.extinctions)

    def stats(self) -> TickStats:
        return self._last

    def check_invariants(self) -> None:
        """Raise InvariantError unless board and entity lists agree exactly."""
        seen: Dict[Point, str] = {}
        for kind, entities, present in (("fish", self.fishes, self.board.has_fish),
                                        ("shark", self.sharks, self.board.has_shark)):
            for entity in entities:
                p = entity.pos
                if p in seen:
                    raise InvariantError(f"{kind} at ({p.x}, {p.y}) shares its cell with a {seen[p]}")
                if not present(p):
                    raise InvariantError(
                        f"{kind} at ({p.x}, {p.y}) but board holds {self.board.get(p).name}"
                    )
                seen[p] = kind
        occupied = int(np.count_nonzero(self.board.cells))
        if occupied != len(seen):
            raise InvariantError(f"{occupied} occupied cells for {len(seen)} live entities")
