import pytest

from cavegen.cave.tiles import CaveGrid, Coord, Tile


def test_from_rows_round_trip():
    rows = [
        "#####",
        "#..##",
        "#...#",
        "#####",
    ]
    grid = CaveGrid.from_rows(rows)
    assert grid.width == 5 and grid.height == 4
    assert grid.is_open(1, 1)
    assert grid.is_wall(3, 1)
    assert grid.to_rows() == rows


def test_from_rows_rejects_ragged_rows():
    with pytest.raises(ValueError):
        CaveGrid.from_rows(["###", "##"])


def test_out_of_bounds_access_raises():
    grid = CaveGrid(4, 3)
    with pytest.raises(IndexError):
        grid.get(4, 0)
    with pytest.raises(IndexError):
        grid.set(-1, 0, Tile.OPEN)


def test_non_positive_size_rejected():
    with pytest.raises(ValueError):
        CaveGrid(0, 5)


def test_neighbors4_excludes_out_of_range():
    grid = CaveGrid(3, 3)
    assert sorted(grid.neighbors4(0, 0)) == [Coord(0, 1), Coord(1, 0)]
    assert len(list(grid.neighbors4(1, 1))) == 4


def test_seal_outer_ring_and_copy():
    grid = CaveGrid(6, 5, fill=Tile.OPEN)
    grid.seal_outer_ring()
    clone = grid.copy()
    assert clone == grid
    for x in range(grid.width):
        assert grid.is_wall(x, 0) and grid.is_wall(x, grid.height - 1)
    for y in range(grid.height):
        assert grid.is_wall(0, y) and grid.is_wall(grid.width - 1, y)
    assert grid.count(Tile.OPEN) == 4 * 3

    clone.set(2, 2, Tile.WALL)
    assert grid.is_open(2, 2), "copy must not share rows"


def test_coords_are_column_major():
    grid = CaveGrid(3, 2)
    assert list(grid.coords()) == [(0, 0), (0, 1), (1, 0), (1, 1), (2, 0), (2, 1)]
