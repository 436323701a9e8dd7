# tests/test_grid.py
"""
ElevationGrid queries over the sample map:

    Sabqponm
    abcryxxl
    accszExk
    acctuvwj
    abdefghi
"""

from __future__ import annotations

import pytest

from hillclimb.core.grid import ElevationGrid


def test_dimensions_and_markers(sample_grid: ElevationGrid) -> None:
    assert sample_grid.width == 8
    assert sample_grid.height == 5
    assert sample_grid.start == (0, 0)
    assert sample_grid.end == (5, 2)


def test_elevation_lookup_is_col_row(sample_grid: ElevationGrid) -> None:
    assert sample_grid.elevation((0, 0)) == 0    # S
    assert sample_grid.elevation((3, 0)) == 16   # q
    assert sample_grid.elevation((5, 2)) == 25   # E
    assert sample_grid.elevation((7, 4)) == 8    # i


@pytest.mark.parametrize("cell", [(-1, 0), (0, -1), (8, 0), (0, 5), (8, 5)])
def test_elevation_out_of_bounds_raises(sample_grid: ElevationGrid, cell) -> None:
    with pytest.raises(IndexError):
        sample_grid.elevation(cell)


def test_neighbors_reverse_allows_any_drop_into_cell(sample_grid: ElevationGrid) -> None:
    # b at (2,0): a on the left, q on the right and c below may all step onto it
    assert sample_grid.neighbors_reverse((2, 0)) == [(1, 0), (3, 0), (2, 1)]
    # q at (3,0): b is too low to climb up, p and r are fine
    assert sample_grid.neighbors_reverse((3, 0)) == [(4, 0), (3, 1)]


def test_neighbors_forward_is_the_mirror_view(sample_grid: ElevationGrid) -> None:
    assert sample_grid.neighbors_forward((2, 0)) == [(1, 0), (2, 1)]
    for cell in sample_grid.iter_cells():
        for n in sample_grid.neighbors_reverse(cell):
            assert cell in sample_grid.neighbors_forward(n)


def test_corner_has_two_neighbours_at_most(sample_grid: ElevationGrid) -> None:
    assert len(sample_grid.neighbors_reverse((0, 0))) <= 2
    assert sample_grid.neighbors_reverse((0, 0)) == [(1, 0), (0, 1)]


def test_can_step(sample_grid: ElevationGrid) -> None:
    assert sample_grid.can_step((0, 0), (1, 0))       # a -> a
    assert sample_grid.can_step((1, 0), (2, 0))       # a -> b
    assert not sample_grid.can_step((2, 0), (3, 0))   # b -> q
    assert sample_grid.can_step((3, 0), (2, 0))       # q -> b
    assert not sample_grid.can_step((0, 0), (1, 1))   # diagonal
    assert not sample_grid.can_step((0, 0), (0, 0))


def test_lowest_cells_row_major(sample_grid: ElevationGrid) -> None:
    assert sample_grid.lowest_elevation() == 0
    assert sample_grid.lowest_cells() == [(0, 0), (1, 0), (0, 1), (0, 2), (0, 3), (0, 4)]


def test_grid_is_immutable(sample_grid: ElevationGrid) -> None:
    with pytest.raises(AttributeError):
        sample_grid.start = (1, 1)
    assert isinstance(sample_grid.cells, tuple)
    assert isinstance(sample_grid.cells[0], tuple)


def test_from_rows_copies_input() -> None:
    rows = [[0, 1], [2, 3]]
    grid = ElevationGrid.from_rows(rows, (0, 0), (1, 1))
    rows[0][0] = 9
    assert grid.elevation((0, 0)) == 0


@pytest.mark.parametrize(
    "rows, start, end",
    [
        ([[0, 1], [2]], (0, 0), (1, 0)),        # ragged
        ([[0, 26]], (0, 0), (1, 0)),            # above z
        ([[0, -1]], (0, 0), (1, 0)),            # below a
        ([[0, 1]], (0, 0), (2, 0)),             # end outside
        ([[0, 1]], (0, 1), (1, 0)),             # start outside
    ],
)
def test_invalid_grids_are_rejected(rows, start, end) -> None:
    with pytest.raises(AssertionError):
        ElevationGrid.from_rows(rows, start, end)
