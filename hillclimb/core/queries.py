# hillclimb/core/queries.py
#!/usr/bin/env python3
"""
The two questions asked of a height map, both answered from a single search
anchored at the end cell:

- shortest_path():       fewest steps from the marked start to the end.
- nearest_lowest_path(): fewest steps to the end from whichever lowest cell
                         is closest.

"No path" comes back as QueryResult(status="no_path"), never as an exception.
"""

import logging
from typing import Dict, Optional

from hillclimb.core.dijkstra import reconstruct_path, search
from hillclimb.core.grid import ElevationGrid
from hillclimb.core.types import Cell, QueryResult

logger = logging.getLogger(__name__)

QUERY_MODES = ("direct", "nearest")


def path_from(came_from: Dict[Cell, Cell], anchor: Cell, origin: Cell) -> QueryResult:
    path = reconstruct_path(came_from, anchor, origin)
    if path is None:
        return QueryResult(status="no_path", origin=origin)
    return QueryResult(status="found", steps=len(path) - 1, path=path, origin=origin)


def shortest_path(grid: ElevationGrid, came_from: Optional[Dict[Cell, Cell]] = None) -> QueryResult:
    if came_from is None:
        came_from = search(grid, grid.end)
    result = path_from(came_from, grid.end, grid.start)
    logger.info("direct %s -> %s: %s", grid.start, grid.end,
                result.steps if result.found else "no path")
    return result


def nearest_lowest_path(grid: ElevationGrid, came_from: Optional[Dict[Cell, Cell]] = None) -> QueryResult:
    if came_from is None:
        came_from = search(grid, grid.end)

    candidates = grid.lowest_cells()
    best = QueryResult(status="no_path")
    connected = 0
    for cell in candidates:
        res = path_from(came_from, grid.end, cell)
        if not res.found:
            continue
        connected += 1
        logger.debug("Found path with length %d at %s", res.steps, cell)
        if not best.found or res.steps < best.steps:
            best = res

    best.metrics = {"candidates": len(candidates), "connected": connected}
    logger.info("nearest lowest cell -> %s: %s (%d of %d candidates connected)", grid.end,
                best.steps if best.found else "no path", connected, len(candidates))
    return best


def run_query(grid: ElevationGrid, mode: str,
              came_from: Optional[Dict[Cell, Cell]] = None) -> QueryResult:
    if mode == "direct":
        return shortest_path(grid, came_from)
    if mode == "nearest":
        return nearest_lowest_path(grid, came_from)
    raise ValueError(f"Unknown query mode {mode!r}, expected one of {QUERY_MODES}")


def fewest_steps(grid: ElevationGrid) -> Optional[int]:
    return shortest_path(grid).steps


def fewest_steps_from_lowest(grid: ElevationGrid) -> Optional[int]:
    return nearest_lowest_path(grid).steps
