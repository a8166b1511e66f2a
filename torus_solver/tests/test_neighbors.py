import pytest

from torus_solver.src.core.errors import InvalidIndexError
from torus_solver.src.core.neighbors import ALL_DIRECTIONS, NeighborFinder, find_neighbors
from torus_solver.src.core.torus_grid import TorusGrid


def test_direction_order():
    assert [d.name for d in ALL_DIRECTIONS] == [
        "TopLeft",
        "Top",
        "TopRight",
        "Left",
        "Right",
        "BottomLeft",
        "Bottom",
        "BottomRight",
    ]
    offsets = [(d.row_offset, d.col_offset) for d in ALL_DIRECTIONS]
    assert len(set(offsets)) == 8
    assert (0, 0) not in offsets


@pytest.mark.parametrize(
    "width,height,index,expected",
    [
        (4, 4, 5, [0, 1, 2, 4, 6, 8, 9, 10]),
        (4, 4, 0, [15, 12, 13, 3, 1, 7, 4, 5]),
        (5, 4, 1, [15, 16, 17, 0, 2, 5, 6, 7]),
        (3, 1, 2, [1, 2, 0, 1, 0, 1, 2, 0]),
        (1, 1, 0, [0, 0, 0, 0, 0, 0, 0, 0]),
    ],
)
def test_find_neighbors(width, height, index, expected):
    assert find_neighbors(width, height, index) == expected


def test_bottom_right_corner_wraps(grid_4x4):
    assert NeighborFinder(grid_4x4).find_neighbors(15) == [10, 11, 8, 14, 12, 2, 3, 0]


@pytest.mark.parametrize("index", [-1, 16])
def test_invalid_center(grid_4x4, index):
    with pytest.raises(InvalidIndexError) as info:
        NeighborFinder(grid_4x4).find_neighbors(index)
    assert info.value.index == index
    assert (info.value.width, info.value.height) == (4, 4)
    assert "4x4" in str(info.value)


@pytest.mark.parametrize("width,height", [(1, 1), (2, 2), (4, 4), (5, 3), (1, 7)])
def test_every_cell_has_eight_valid_neighbors(width, height):
    grid = TorusGrid(width, height)
    finder = NeighborFinder(grid)
    for i in range(grid.total_elements):
        neighbors = finder.find_neighbors(i)
        assert len(neighbors) == 8
        assert all(grid.is_valid_index(n) for n in neighbors)


def test_named_neighbors(grid_4x4):
    named = NeighborFinder(grid_4x4).find_named_neighbors(0)
    assert list(named) == [d.name for d in ALL_DIRECTIONS]
    assert named["TopLeft"] == 15
    assert named["Right"] == 1
    assert named["BottomRight"] == 5
