# tests/helpers.py
"""
Hand-built maps and an independent forward BFS to check the engine against.
"""

from __future__ import annotations

from collections import deque
from typing import Dict, List, Optional

from hillclimb.core.grid import ElevationGrid
from hillclimb.core.types import Cell

SAMPLE = """
Sabqponm
abcryxxl
accszExk
acctuvwj
abdefghi"""

# ridge of 'z' between the marked start and a ramp up to E
WALLED = """
SazabcdefghijklmnopqrstuvwxyE
aazabcdefghijklmnopqrstuvwxyz"""

# E can only be entered from the 'z' above it, which nothing can climb to
SEALED = """
Saz
aaE"""


def forward_bfs(grid: ElevationGrid, origin: Cell, goal: Cell) -> Optional[int]:
    """Plain BFS along legal forward moves; returns step count or None."""
    dist: Dict[Cell, int] = {origin: 0}
    queue = deque([origin])
    while queue:
        cur = queue.popleft()
        if cur == goal:
            return dist[cur]
        for nxt in grid.neighbors_forward(cur):
            if nxt not in dist:
                dist[nxt] = dist[cur] + 1
                queue.append(nxt)
    return None


def assert_legal_walk(grid: ElevationGrid, path: List[Cell]) -> None:
    for a, b in zip(path, path[1:]):
        assert grid.can_step(a, b), f"illegal move {a} -> {b}"
