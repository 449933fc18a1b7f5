"""
Cells and the sparse per-generation cell map.

A cell only knows its position and whether it is alive. Anything not stored in
a CellsMap is dead, so a generation only has to keep its live cells around and
the next one is computed from the live cells plus their neighbourhoods.
"""
from collections import UserDict
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Optional, Set, Tuple

Position = Tuple[int, int]

# Moore neighbourhood, self excluded
NEIGHBOR_OFFSETS: Tuple[Position, ...] = tuple(
    (dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if not (dx == 0 and dy == 0)
)


class LifeStatus(Enum):
    ALIVE = "alive"
    DEAD = "dead"


class Transition(Enum):
    UNDER_POPULATION = "under_population"  # live cell, fewer than 2 live neighbours
    LIVES_ON = "lives_on"                  # live cell, 2 or 3 live neighbours
    OVER_POPULATION = "over_population"    # live cell, more than 3 live neighbours
    REPRODUCTION = "reproduction"          # dead cell, exactly 3 live neighbours
    REMAINS_DEAD = "remains_dead"


def position_key(x: int, y: int) -> str:
    return f"{x}_{y}"


def transition_for(status: LifeStatus, alive_neighbors: int) -> Tuple[LifeStatus, Transition]:
    """B3/S23: next status and the kind of transition for a cell."""
    if status is LifeStatus.ALIVE:
        if alive_neighbors < 2:
            return LifeStatus.DEAD, Transition.UNDER_POPULATION
        if alive_neighbors > 3:
            return LifeStatus.DEAD, Transition.OVER_POPULATION
        return LifeStatus.ALIVE, Transition.LIVES_ON
    if alive_neighbors == 3:
        return LifeStatus.ALIVE, Transition.REPRODUCTION
    return LifeStatus.DEAD, Transition.REMAINS_DEAD


@dataclass(frozen=True)
class Cell:
    x: int
    y: int
    status: LifeStatus = LifeStatus.DEAD

    @property
    def position(self) -> Position:
        return (self.x, self.y)

    @property
    def alive(self) -> bool:
        return self.status is LifeStatus.ALIVE

    def neighbors(self, cells: "CellsMap") -> List["Cell"]:
        out: List[Cell] = []
        for dx, dy in NEIGHBOR_OFFSETS:
            pos = (self.x + dx, self.y + dy)
            out.append(Cell(pos[0], pos[1], cells.status_at(pos)))
        return out

    def alive_neighbors(self, cells: "CellsMap") -> int:
        return sum(1 for n in self.neighbors(cells) if n.alive)

    def check_transition(self, cells: "CellsMap") -> Tuple[LifeStatus, Transition]:
        return transition_for(self.status, self.alive_neighbors(cells))


class CellsMap(UserDict):
    """
    Position -> Cell for one generation. Missing keys read as dead cells.
    Every entry is stored under its own cell's position, and a map handed to a
    Generation is frozen: any further write raises TypeError.
    """
    _frozen = False

    @classmethod
    def from_points(cls, points: Iterable[Position]) -> "CellsMap":
        cells = cls()
        for x, y in points:
            cells[(x, y)] = Cell(x, y, LifeStatus.ALIVE)
        return cells

    def freeze(self) -> "CellsMap":
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def _check_writable(self) -> None:
        if self._frozen:
            raise TypeError("cells of a past generation cannot be changed")

    def __setitem__(self, key: Position, cell: Cell) -> None:
        self._check_writable()
        if key != cell.position:
            raise ValueError(f"cell at {cell.position} stored under key {key}")
        self.data[key] = cell

    def __delitem__(self, key: Position) -> None:
        self._check_writable()
        del self.data[key]

    def copy(self) -> "CellsMap":
        """Writable copy, even of a frozen map."""
        return type(self)(self.data)

    def cell_at(self, pos: Position) -> Optional[Cell]:
        return self.get(pos)

    def status_at(self, pos: Position) -> LifeStatus:
        cell = self.get(pos)
        return cell.status if cell is not None else LifeStatus.DEAD

    def alive_cells(self) -> List[Cell]:
        return sorted((c for c in self.values() if c.alive), key=lambda c: c.position)

    def alive_positions(self) -> Set[Position]:
        return {pos for pos, c in self.items() if c.alive}

    def count_alive(self) -> int:
        return sum(1 for c in self.values() if c.alive)

    def relevant_cells(self) -> List[Cell]:
        """Live cells plus their whole neighbourhoods, one entry per position.

        Only these can be alive in the next generation; everything else has no
        live neighbour and stays dead.
        """
        seen: Dict[Position, Cell] = {}
        for cell in self.alive_cells():
            seen[cell.position] = cell
            for n in cell.neighbors(self):
                seen.setdefault(n.position, n)
        return [seen[pos] for pos in sorted(seen)]

    def bounding_box(self) -> Optional[Tuple[int, int, int, int]]:
        """(min_x, min_y, max_x, max_y) of the live cells, None if there are none."""
        alive = self.alive_positions()
        if not alive:
            return None
        xs = [p[0] for p in alive]
        ys = [p[1] for p in alive]
        return min(xs), min(ys), max(xs), max(ys)
