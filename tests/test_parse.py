# tests/test_parse.py
from __future__ import annotations

from pathlib import Path

import pytest

from hillclimb.core.parse import HeightMapParseError, load_map, parse_heightmap

from helpers import SAMPLE


def test_letters_map_to_elevations() -> None:
    grid = parse_heightmap("Sbz\nayE")
    assert grid.cells == ((0, 1, 25), (0, 24, 25))
    assert grid.start == (0, 0)
    assert grid.end == (2, 1)


def test_surrounding_whitespace_is_ignored() -> None:
    grid = parse_heightmap("\n\n   SabqE  \n    abcde\n\n")
    assert grid.width == 5
    assert grid.height == 2
    assert grid.end == (4, 0)


@pytest.mark.parametrize(
    "text, message",
    [
        ("Sab#\nabcE", "Unexpected character: '#'"),
        ("SabA\nabcE", "Unexpected character: 'A'"),
        ("Sabc\nabcd", "No end location found"),
        ("aabc\nabcE", "No start location found"),
        ("SabS\nabcE", "Second start location"),
        ("SabE\nabcE", "Second end location"),
        ("Sabc\nabE", "Row 1 has 3 cells"),
        ("", "Empty height map"),
        ("   \n  ", "Empty height map"),
    ],
)
def test_malformed_maps_raise(text: str, message: str) -> None:
    with pytest.raises(HeightMapParseError, match=message):
        parse_heightmap(text)


def test_parse_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        parse_heightmap("S?E")


def test_load_map_reads_file(tmp_path: Path) -> None:
    path = tmp_path / "sample.txt"
    path.write_text(SAMPLE)
    grid = load_map(path)
    assert (grid.width, grid.height) == (8, 5)
    assert grid.start == (0, 0)
    assert grid.end == (5, 2)


def test_bundled_maps_parse(maps_dir: Path) -> None:
    names = sorted(p.name for p in maps_dir.glob("*.txt"))
    assert names == ["01_sample.txt", "02_walled.txt", "03_ridges.txt"]
    for name in names:
        grid = load_map(maps_dir / name)
        assert grid.start != grid.end
