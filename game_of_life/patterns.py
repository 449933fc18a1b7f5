"""
Named seed patterns as (x, y) offsets, plus parsing of "x,y;x,y" seed strings.
"""
from typing import Dict, List, Tuple

from .cells import Position
from .generation import InvalidPointError

PATTERNS: Dict[str, List[Position]] = {
    # still lifes
    "block": [(0, 0), (1, 0), (0, 1), (1, 1)],
    # period 2 oscillators
    "blinker": [(0, 1), (1, 1), (2, 1)],
    "toad": [(1, 0), (2, 0), (3, 0), (0, 1), (1, 1), (2, 1)],
    "beacon": [(0, 0), (1, 0), (0, 1), (3, 2), (2, 3), (3, 3)],
    # spaceships
    "glider": [(1, 0), (2, 1), (0, 2), (1, 2), (2, 2)],
    "lwss": [(1, 0), (4, 0), (0, 1), (0, 2), (4, 2), (0, 3), (1, 3), (2, 3), (3, 3)],
    # methuselahs
    "r_pentomino": [(1, 0), (2, 0), (0, 1), (1, 1), (1, 2)],
    # default board of the command line runner (10x10)
    "sample": [(0, 0), (7, 5), (7, 6), (8, 7), (9, 8), (9, 7)],
}


def pattern_names() -> List[str]:
    return sorted(PATTERNS)


def get_pattern(name: str, offset: Tuple[int, int] = (0, 0)) -> List[Position]:
    try:
        cells = PATTERNS[name]
    except KeyError:
        raise KeyError(f"unknown pattern {name!r}, choose from {', '.join(pattern_names())}") from None
    ox, oy = offset
    return [(x + ox, y + oy) for (x, y) in cells]


def parse_points(text: str) -> List[Position]:
    """'1,1;1,2 2,1' -> [(1, 1), (1, 2), (2, 1)]. Points split on ';' or whitespace."""
    points: List[Position] = []
    for chunk in text.replace(";", " ").split():
        parts = chunk.split(",")
        if len(parts) != 2:
            raise InvalidPointError(f"invalid point {chunk!r} - it must contain 2 integers")
        try:
            points.append((int(parts[0]), int(parts[1])))
        except ValueError:
            raise InvalidPointError(f"invalid point {chunk!r} - it must contain 2 integers") from None
    return points
