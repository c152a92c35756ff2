# grid.py
from typing import Iterator, Tuple

from .config import GRID_SIZE

Cell = Tuple[int, int]
Direction = Tuple[int, int]


def in_bounds(cell: Cell, size: int = GRID_SIZE) -> bool:
    """Check if a cell is inside the square playing field."""
    x, y = cell
    return 0 <= x < size and 0 <= y < size

def move(cell: Cell, direction: Direction) -> Cell:
    return (cell[0] + direction[0], cell[1] + direction[1])

def is_opposite(a: Direction, b: Direction) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]

def all_cells(size: int = GRID_SIZE) -> Iterator[Cell]:
    """Every cell of the field, row by row."""
    for y in range(size):
        for x in range(size):
            yield (x, y)
