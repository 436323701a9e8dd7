# hillclimb/core/grid.py
#!/usr/bin/env python3
"""
ElevationGrid: read-only view over a parsed height map.

Elevations are small ints (0..25, 'a'..'z'). A forward move goes to one of the
four orthogonal neighbours and is legal when it climbs at most one level;
descending any amount is fine.

neighbors_reverse() answers the opposite question ("who may step onto me?"),
which is what lets one search from the end cell reach every start candidate.
"""

from dataclasses import dataclass
from typing import Iterator, List, Sequence, Tuple

from hillclimb.core.types import Cell

MIN_ELEVATION = 0
MAX_ELEVATION = 25
MAX_CLIMB = 1

# left, up, right, down
OFFSETS4: Tuple[Cell, ...] = ((-1, 0), (0, -1), (1, 0), (0, 1))


@dataclass(frozen=True)
class ElevationGrid:
    cells: Tuple[Tuple[int, ...], ...]   # [row][col]
    start: Cell
    end: Cell

    def __post_init__(self) -> None:
        rows = tuple(tuple(int(v) for v in row) for row in self.cells)
        object.__setattr__(self, "cells", rows)
        object.__setattr__(self, "start", tuple(self.start))
        object.__setattr__(self, "end", tuple(self.end))

        assert rows and rows[0], "grid must have at least one cell"
        assert all(len(r) == len(rows[0]) for r in rows), "rows differ in length"
        assert all(MIN_ELEVATION <= v <= MAX_ELEVATION for r in rows for v in r), \
            "elevation out of range"
        assert self.in_bounds(self.start), "start out of bounds"
        assert self.in_bounds(self.end), "end out of bounds"

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]], start: Cell, end: Cell) -> "ElevationGrid":
        return cls(tuple(tuple(r) for r in rows), start, end)

    # -------------------- dimensions --------------------

    @property
    def width(self) -> int:
        return len(self.cells[0])

    @property
    def height(self) -> int:
        return len(self.cells)

    def in_bounds(self, c: Cell) -> bool:
        x, y = c
        return 0 <= x < self.width and 0 <= y < self.height

    # -------------------- elevation queries --------------------

    def elevation(self, c: Cell) -> int:
        """Elevation at c. Raises IndexError outside the grid (no wrap-around)."""
        if not self.in_bounds(c):
            raise IndexError(f"cell {c} outside {self.width}x{self.height} grid")
        x, y = c
        return self.cells[y][x]

    def can_step(self, src: Cell, dst: Cell) -> bool:
        """True if a single forward move src -> dst is legal."""
        sx, sy = src
        dx, dy = dst
        if abs(sx - dx) + abs(sy - dy) != 1:
            return False
        return self.elevation(dst) - self.elevation(src) <= MAX_CLIMB

    def _adjacent(self, c: Cell) -> Iterator[Cell]:
        x, y = c
        for ox, oy in OFFSETS4:
            n = (x + ox, y + oy)
            if self.in_bounds(n):
                yield n

    def neighbors_reverse(self, c: Cell) -> List[Cell]:
        """Neighbours n for which the forward move n -> c is legal."""
        here = self.elevation(c)
        return [n for n in self._adjacent(c) if here - self.elevation(n) <= MAX_CLIMB]

    def neighbors_forward(self, c: Cell) -> List[Cell]:
        """Neighbours n for which the forward move c -> n is legal."""
        here = self.elevation(c)
        return [n for n in self._adjacent(c) if self.elevation(n) - here <= MAX_CLIMB]

    # -------------------- whole-grid views --------------------

    def iter_cells(self) -> Iterator[Cell]:
        """Every cell in row-major order."""
        for y in range(self.height):
            for x in range(self.width):
                yield (x, y)

    def lowest_elevation(self) -> int:
        return min(min(row) for row in self.cells)

    def lowest_cells(self) -> List[Cell]:
        low = self.lowest_elevation()
        return [c for c in self.iter_cells() if self.elevation(c) == low]
