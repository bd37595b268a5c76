import pytest

from cavegen.cave.border import add_border
from cavegen.cave.passages import carve_passage, get_line, stamp_disc
from cavegen.cave.tiles import CaveGrid, Coord, Tile


def test_horizontal_line_includes_both_endpoints():
    assert get_line(Coord(0, 0), Coord(5, 0)) == [Coord(x, 0) for x in range(6)]


def test_diagonal_line():
    assert get_line(Coord(0, 0), Coord(3, 3)) == [Coord(0, 0), Coord(1, 1), Coord(2, 2), Coord(3, 3)]


def test_degenerate_line_is_single_cell():
    assert get_line(Coord(4, 2), Coord(4, 2)) == [Coord(4, 2)]


@pytest.mark.parametrize(
    "start,end",
    [
        (Coord(0, 0), Coord(0, -7)),
        (Coord(3, 9), Coord(-4, 2)),
        (Coord(10, 1), Coord(2, 4)),
        (Coord(-2, -2), Coord(5, 11)),
    ],
)
def test_line_is_eight_connected_and_ends_at_target(start, end):
    line = get_line(start, end)
    assert line[0] == start
    assert line[-1] == end
    assert len(line) == max(abs(end.x - start.x), abs(end.y - start.y)) + 1
    for a, b in zip(line, line[1:]):
        assert max(abs(a.x - b.x), abs(a.y - b.y)) == 1


def test_disc_stamp_opens_exact_disc():
    grid = CaveGrid(50, 30, fill=Tile.WALL)
    stamp_disc(grid, Coord(25, 15), 5)
    for c in grid.coords():
        inside = (c.x - 25) ** 2 + (c.y - 15) ** 2 <= 25
        assert grid.is_open(c.x, c.y) == inside
    assert grid.count(Tile.OPEN) == 81


def test_disc_stamp_clips_to_bounds():
    grid = CaveGrid(6, 6, fill=Tile.WALL)
    stamp_disc(grid, Coord(0, 0), 2)
    assert grid.count(Tile.OPEN) == 6
    assert grid.is_open(2, 0) and grid.is_open(1, 1)
    assert grid.is_wall(2, 1)


def test_carve_passage_width():
    grid = CaveGrid(30, 20, fill=Tile.WALL)
    line = carve_passage(grid, Coord(5, 10), Coord(24, 10), radius=2)
    assert len(line) == 20
    for x in range(5, 25):
        for y in range(8, 13):
            assert grid.is_open(x, y)
    assert grid.is_wall(15, 7)


def test_border_pads_with_walls_and_preserves_source():
    grid = CaveGrid.from_rows(
        [
            "####",
            "#..#",
            "####",
        ]
    )
    before = grid.copy()
    bordered = add_border(grid, 2)
    assert grid == before
    assert (bordered.width, bordered.height) == (8, 7)
    for c in bordered.coords():
        if 2 <= c.x < 6 and 2 <= c.y < 5:
            assert bordered.get(c.x, c.y) == grid.get(c.x - 2, c.y - 2)
        else:
            assert bordered.is_wall(c.x, c.y)


def test_zero_border_is_a_copy():
    grid = CaveGrid(3, 3, fill=Tile.OPEN)
    bordered = add_border(grid, 0)
    assert bordered == grid
    assert bordered is not grid
