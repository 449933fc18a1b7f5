"""
Generation snapshots: a step index plus the cells known at that step.
"""
from collections import Counter
from dataclasses import dataclass, field
from numbers import Integral
from typing import Callable, Dict, Iterable, Optional, Sequence

from .cells import Cell, CellsMap, LifeStatus, Position, Transition

InBounds = Callable[[int, int], bool]


class InvalidPointError(ValueError):
    pass


def _as_position(point: Sequence[int]) -> Position:
    try:
        n = len(point)
    except TypeError:
        raise InvalidPointError(f"invalid point {point!r} - it must contain 2 integers") from None
    if n != 2 or not all(isinstance(v, Integral) and not isinstance(v, bool) for v in point):
        raise InvalidPointError(f"invalid point {point!r} - it must contain 2 integers")
    return int(point[0]), int(point[1])


def as_positions(points: Iterable[Sequence[int]]) -> Dict[Position, None]:
    """Validate seed points, dropping duplicates but keeping first-seen order."""
    return {_as_position(p): None for p in points}


@dataclass(frozen=True)
class Generation:
    step: int
    cells: CellsMap
    transitions: Dict[Transition, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.cells.freeze()

    @classmethod
    def seed(cls, points: Iterable[Sequence[int]]) -> "Generation":
        return cls(step=0, cells=CellsMap.from_points(as_positions(points)))

    def count_alive(self) -> int:
        return self.cells.count_alive()

    def advance(self, in_bounds: Optional[InBounds] = None) -> "Generation":
        """Evaluate every relevant cell and keep the ones that end up alive."""
        nxt = CellsMap()
        tally: Counter = Counter()
        for cell in self.cells.relevant_cells():
            if in_bounds is not None and not in_bounds(cell.x, cell.y):
                continue
            status, kind = cell.check_transition(self.cells)
            tally[kind] += 1
            if status is not LifeStatus.ALIVE:
                continue
            nxt[cell.position] = Cell(cell.x, cell.y, status)
        return Generation(step=self.step + 1, cells=nxt, transitions=dict(tally))
