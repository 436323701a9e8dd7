# hillclimb/core/parse.py
#!/usr/bin/env python3
"""
Text height maps -> ElevationGrid.

    Sabqponm
    abcryxxl
    accszExk

'a'..'z' are elevations 0..25. 'S' marks the start (elevation of 'a'),
'E' marks the end (elevation of 'z'). Surrounding whitespace and blank
leading/trailing lines are ignored.
"""

from pathlib import Path
from typing import List, Optional, Union

from hillclimb.core.grid import ElevationGrid
from hillclimb.core.types import Cell

START_MARK = "S"
END_MARK = "E"


class HeightMapParseError(ValueError):
    pass


def _elevation_of(ch: str) -> Optional[int]:
    if "a" <= ch <= "z":
        return ord(ch) - ord("a")
    if ch == START_MARK:
        return 0
    if ch == END_MARK:
        return ord("z") - ord("a")
    return None


def parse_heightmap(text: str) -> ElevationGrid:
    start: Optional[Cell] = None
    end: Optional[Cell] = None
    rows: List[List[int]] = []

    lines = [line.strip() for line in text.strip().splitlines()]
    if not lines or not lines[0]:
        raise HeightMapParseError("Empty height map")

    for y, line in enumerate(lines):
        row: List[int] = []
        for x, ch in enumerate(line):
            v = _elevation_of(ch)
            if v is None:
                raise HeightMapParseError(f"Unexpected character: {ch!r} in {line}")
            if ch == START_MARK:
                if start is not None:
                    raise HeightMapParseError(f"Second start location at {(x, y)}, first at {start}")
                start = (x, y)
            elif ch == END_MARK:
                if end is not None:
                    raise HeightMapParseError(f"Second end location at {(x, y)}, first at {end}")
                end = (x, y)
            row.append(v)
        if rows and len(row) != len(rows[0]):
            raise HeightMapParseError(
                f"Row {y} has {len(row)} cells, expected {len(rows[0])}: {line}")
        rows.append(row)

    if start is None:
        raise HeightMapParseError("No start location found")
    if end is None:
        raise HeightMapParseError("No end location found")

    return ElevationGrid.from_rows(rows, start, end)


def load_map(path: Union[str, Path]) -> ElevationGrid:
    with open(path, "r") as f:
        return parse_heightmap(f.read())
