"""
World: the ordered history of generations and the only mutable entry point.

A bounded world drops anything that would live outside [0, width) x [0, height);
an unbounded one lets patterns travel freely and only uses width/height, when
given, as the viewport for rendering.

Fingerprints hash the frame bitmap so repeated configurations can be spotted by
the caller, who owns the registry of fingerprints seen so far.
"""
import hashlib
import logging
from dataclasses import dataclass
from enum import Enum
from numbers import Integral
from typing import Iterable, List, MutableMapping, Optional, Sequence, Tuple

import numpy as np

from .cells import Cell, LifeStatus
from .generation import Generation, as_positions

logger = logging.getLogger(__name__)


class OutOfBoundsError(IndexError):
    pass


class EmptyHistoryError(RuntimeError):
    pass


class Status(Enum):
    CAOS = "Caos"                       # still evolving, nothing recognised
    EXTINCTION = "Extinction"           # every cell is dead
    STATIC = "Static"                   # configuration already seen
    OSCILLATOR = "Oscillator"           # reserved
    INFINITE_GROWTH = "InfiniteGrowth"  # reserved
    LIMITED_GROWTH = "LimitedGrowth"    # reserved

    @property
    def terminal(self) -> bool:
        return self in (Status.EXTINCTION, Status.STATIC)


@dataclass
class WorldConfig:
    width: Optional[int] = 10
    height: Optional[int] = 10
    bounded: bool = True

    def __post_init__(self) -> None:
        for name in ("width", "height"):
            v = getattr(self, name)
            if v is not None and (isinstance(v, bool) or not isinstance(v, Integral) or v <= 0):
                raise ValueError(f"{name} must be a positive integer, got {v!r}")
        if self.bounded and (self.width is None or self.height is None):
            raise ValueError("a bounded world needs both width and height")

    @property
    def has_size(self) -> bool:
        return self.width is not None and self.height is not None


class World:
    def __init__(self, cfg: WorldConfig, points: Iterable[Sequence[int]] = ()):
        self.cfg = cfg
        seed = as_positions(points)
        for (x, y) in seed:
            self._check_bounds(x, y)
        self._history: List[Generation] = [Generation.seed(seed)]
        logger.debug("world %sx%s (bounded=%s) seeded with %d cells",
                     cfg.width, cfg.height, cfg.bounded, len(seed))

    # ---------- history ----------
    @property
    def history(self) -> Tuple[Generation, ...]:
        return tuple(self._history)

    @property
    def current(self) -> Generation:
        if not self._history:
            raise EmptyHistoryError("world has no generations")
        return self._history[-1]

    def current_step(self) -> int:
        return self.current.step

    def count_alive(self) -> int:
        return self.current.count_alive()

    # ---------- bounds ----------
    def in_bounds(self, x: int, y: int) -> bool:
        if not self.cfg.bounded:
            return True
        return 0 <= x < self.cfg.width and 0 <= y < self.cfg.height

    def _check_bounds(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(
                f"invalid cell position ({x}, {y}) for a {self.cfg.width}x{self.cfg.height} world"
            )

    def cell_at(self, x: int, y: int) -> Cell:
        self._check_bounds(x, y)
        cell = self.current.cells.cell_at((x, y))
        return cell if cell is not None else Cell(x, y, LifeStatus.DEAD)

    # ---------- dynamics ----------
    def step(self) -> Generation:
        """Advance by one generation and return it."""
        prev = self.current
        nxt = prev.advance(self.in_bounds if self.cfg.bounded else None)
        self._history.append(nxt)
        logger.debug("step %d: %d alive, transitions %s", nxt.step, nxt.count_alive(),
                     {k.value: v for k, v in nxt.transitions.items()})
        return nxt

    # ---------- frames ----------
    def frame(self) -> Tuple[int, int, int, int]:
        """(x0, y0, width, height) of the area fingerprinted and drawn."""
        if self.cfg.bounded:
            return 0, 0, self.cfg.width, self.cfg.height
        box = self.current.cells.bounding_box()
        if box is None:
            return 0, 0, 0, 0
        x0, y0, x1, y1 = box
        return x0, y0, x1 - x0 + 1, y1 - y0 + 1

    def to_array(self, x0: int = None, y0: int = None, width: int = None,
                 height: int = None) -> np.ndarray:
        """Row-major uint8 bitmap, rows are y and columns are x."""
        if x0 is None:
            x0, y0, width, height = self.frame()
        grid = np.zeros((height, width), dtype=np.uint8)
        for (x, y) in self.current.cells.alive_positions():
            if x0 <= x < x0 + width and y0 <= y < y0 + height:
                grid[y - y0, x - x0] = 1
        return grid

    def fingerprint(self) -> str:
        x0, y0, w, h = self.frame()
        bitmap = self.to_array(x0, y0, w, h)
        generation_id = f"{w}_{h}_{self.count_alive()}_{bitmap.tobytes().hex()}"
        if not self.cfg.bounded:
            generation_id = f"{x0}_{y0}_{generation_id}"
        return hashlib.sha256(generation_id.encode("ascii")).hexdigest()

    def status(self, seen: MutableMapping[str, int]) -> Status:
        """
        Classify the current generation against `seen` (fingerprint -> alive count).
        Records the fingerprint when the world is still evolving, so the same
        mapping has to be passed for the whole run.
        """
        alive = self.count_alive()
        if alive == 0:
            return Status.EXTINCTION
        fp = self.fingerprint()
        if fp in seen:
            return Status.STATIC
        seen[fp] = alive
        return Status.CAOS

    # ---------- rendering ----------
    def render(self, alive: str = "x", dead: str = " ") -> str:
        """One line per y, one character per x.

        This is the transpose of printing a board indexed [x][y] row by row,
        which would give one line per x.
        """
        if self.cfg.has_size:
            grid = self.to_array(0, 0, self.cfg.width, self.cfg.height)
        else:
            grid = self.to_array()
        return "\n".join("".join(alive if v else dead for v in row) for row in grid)


def new_world(width: Optional[int], height: Optional[int],
              points: Iterable[Sequence[int]] = (), bounded: bool = True) -> World:
    return World(WorldConfig(width=width, height=height, bounded=bounded), points)
