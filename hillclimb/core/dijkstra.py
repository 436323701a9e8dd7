# hillclimb/core/dijkstra.py
#!/usr/bin/env python3
"""
Dijkstra over reversed hill-climb edges, one pop per step() so the viewer can
animate it; search() drives the same object to completion.

The search starts at an anchor (normally the end cell) and expands
neighbors_reverse(), so the resulting parent map holds, for every cell that can
walk to the anchor, the next cell on a shortest walk there.

PQ entries are (g, cell): lower g first, then lower (col, row).
"""

import heapq
import logging
from dataclasses import dataclass, field
from math import inf
from typing import Dict, List, Optional, Tuple

from hillclimb.core.grid import ElevationGrid
from hillclimb.core.types import Cell, StepResult

logger = logging.getLogger(__name__)

STEP_COST = 1


@dataclass
class DijkstraAlgo:
    name: str = "Dijkstra"

    grid: Optional[ElevationGrid] = None
    anchor: Optional[Cell] = None
    open_pq: List[Tuple[int, Cell]] = field(default_factory=list)   # (g, cell)
    open_set: set = field(default_factory=set)
    closed_set: set = field(default_factory=set)
    g: Dict[Cell, int] = field(default_factory=dict)
    parent: Dict[Cell, Cell] = field(default_factory=dict)
    popped_count: int = 0
    stale_count: int = 0
    done: bool = False

    def init(self, grid: ElevationGrid, anchor: Optional[Cell] = None) -> None:
        self.grid = grid
        self.anchor = grid.end if anchor is None else tuple(anchor)
        self.reset()

    def reset(self) -> None:
        if self.grid is None:
            return
        if not self.grid.in_bounds(self.anchor):
            raise IndexError(f"anchor {self.anchor} outside the grid")
        self.open_pq.clear()
        self.open_set.clear()
        self.closed_set.clear()
        self.g.clear()
        self.parent.clear()
        self.popped_count = 0
        self.stale_count = 0
        self.done = False

        a = self.anchor
        self.g[a] = 0
        heapq.heappush(self.open_pq, (0, a))
        self.open_set.add(a)

    def step(self) -> StepResult:
        if self.grid is None:
            return StepResult(status="idle", metrics={"algo": self.name})

        if self.done or not self.open_pq:
            self.done = True
            return StepResult(status="done", metrics=self._metrics())

        g_u, u = heapq.heappop(self.open_pq)
        if g_u != self.g.get(u, inf):
            # superseded by a later, shorter push
            self.stale_count += 1
            return StepResult(status="running", current=u, metrics=self._metrics())

        self.popped_count += 1
        self.open_set.discard(u)
        self.closed_set.add(u)

        opened_now: List[Cell] = []
        for v in self.grid.neighbors_reverse(u):
            alt = g_u + STEP_COST
            if alt < self.g.get(v, inf):
                self.g[v] = alt
                self.parent[v] = u
                heapq.heappush(self.open_pq, (alt, v))
                if v not in self.closed_set and v not in self.open_set:
                    self.open_set.add(v)
                    opened_now.append(v)

        return StepResult(status="running", opened=opened_now, closed=[u], current=u,
                          metrics=self._metrics())

    def run(self) -> StepResult:
        """Step until the frontier is exhausted."""
        res = self.step()
        while res.status == "running":
            res = self.step()
        return res

    def _metrics(self) -> dict:
        return {
            "algo": self.name,
            "popped": self.popped_count,
            "stale": self.stale_count,
            "open_size": len(self.open_set),
            "closed_count": len(self.closed_set),
        }


def search(grid: ElevationGrid, anchor: Cell) -> Dict[Cell, Cell]:
    """
    Single-source search from anchor against the forward edge direction.

    Returns the predecessor map: cell -> next cell towards anchor. Cells that
    cannot walk to anchor are absent; anchor itself is absent too.
    """
    algo = DijkstraAlgo()
    algo.init(grid, anchor)
    res = algo.run()
    logger.debug("search from %s: %s", anchor, res.metrics)
    return dict(algo.parent)


def reconstruct_path(came_from: Dict[Cell, Cell], anchor: Cell,
                     target: Cell) -> Optional[List[Cell]]:
    """
    Follow came_from from target to anchor.

    The list runs target first, anchor last, which is the order a walker
    would take. None if target never reaches anchor.
    """
    anchor = tuple(anchor)
    cur = tuple(target)
    path: List[Cell] = [cur]
    while cur != anchor:
        nxt = came_from.get(cur)
        if nxt is None:
            return None
        cur = nxt
        path.append(cur)
    return path
