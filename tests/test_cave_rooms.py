from cavegen.cave.rooms import (
    Room,
    RoomGraph,
    build_rooms,
    find_edge_tiles,
    process_regions,
    remove_small_wall_regions,
)
from cavegen.cave.regions import get_regions
from cavegen.cave.tiles import CaveGrid, Coord, Tile


def carve(grid: CaveGrid, x0: int, x1: int, y0: int, y1: int) -> None:
    for x in range(x0, x1 + 1):
        for y in range(y0, y1 + 1):
            grid.set(x, y, Tile.OPEN)


def test_edge_tiles_use_orthogonal_neighbours():
    grid = CaveGrid.from_rows(
        [
            "#####",
            "#...#",
            "#...#",
            "#...#",
            "#####",
        ]
    )
    (region,) = get_regions(grid, Tile.OPEN)
    edges = find_edge_tiles(grid, region)
    assert len(edges) == 8
    assert Coord(2, 2) not in edges
    assert len(set(edges)) == len(edges)


def test_corner_tile_only_diagonal_to_wall_is_not_edge():
    grid = CaveGrid.from_rows(
        [
            "######",
            "#....#",
            "#....#",
            "#..#.#",
            "#....#",
            "######",
        ]
    )
    (region,) = get_regions(grid, Tile.OPEN)
    edges = find_edge_tiles(grid, region)
    # (2,2) touches the inner wall only diagonally
    assert Coord(2, 2) not in edges
    assert Coord(3, 2) in edges


def test_small_wall_regions_opened_but_ring_kept():
    grid = CaveGrid(12, 12, fill=Tile.OPEN)
    grid.seal_outer_ring()
    grid.set(5, 5, Tile.WALL)
    grid.set(6, 5, Tile.WALL)
    removed = remove_small_wall_regions(grid, 50)
    assert removed == 1
    assert grid.is_open(5, 5) and grid.is_open(6, 5)
    # Ring region is smaller than the threshold yet survives
    assert grid.count(Tile.WALL) == 44


def test_small_pockets_filled_and_largest_room_is_main():
    grid = CaveGrid(20, 10)
    carve(grid, 1, 10, 1, 8)
    grid.set(15, 4, Tile.OPEN)
    grid.set(16, 4, Tile.OPEN)
    graph = build_rooms(grid, 10)
    assert len(graph) == 1
    main = graph.main_room
    assert main.size == 80
    assert main.is_main_room and main.is_accessible_from_main_room
    assert grid.is_wall(15, 4) and grid.is_wall(16, 4)


def test_rooms_sorted_by_size_descending():
    grid = CaveGrid(30, 12)
    carve(grid, 1, 8, 1, 10)
    carve(grid, 20, 28, 1, 10)
    graph = process_regions(grid, 50, 50)
    assert [r.size for r in graph] == [90, 80]
    assert [r.is_main_room for r in graph] == [True, False]
    assert [r.is_accessible_from_main_room for r in graph] == [True, False]


def test_no_surviving_rooms_yields_empty_graph():
    grid = CaveGrid(10, 10)
    carve(grid, 2, 4, 2, 4)
    graph = process_regions(grid, 50, 50)
    assert len(graph) == 0
    assert graph.main_room is None
    assert grid.count(Tile.OPEN) == 0


def _graph(n: int) -> RoomGraph:
    rooms = [Room(i, [Coord(i, 0)], [Coord(i, 0)]) for i in range(n)]
    rooms[0].is_main_room = True
    rooms[0].is_accessible_from_main_room = True
    return RoomGraph(rooms)


def test_connect_is_symmetric_and_idempotent():
    graph = _graph(3)
    assert graph.connect(1, 2)
    assert not graph.connect(2, 1)
    assert graph.is_connected(1, 2) and graph.is_connected(2, 1)
    assert graph[1].connected_rooms == {2}
    assert not graph[1].is_accessible_from_main_room


def test_accessibility_spreads_transitively():
    graph = _graph(4)
    graph.connect(1, 2)
    graph.connect(2, 3)
    assert graph.inaccessible() == [graph[1], graph[2], graph[3]]
    graph.connect(3, 0)
    assert graph.all_accessible()
