from __future__ import annotations

"""Compass-direction neighbor lookup on a torus grid."""

from typing import Dict, List, NamedTuple, Tuple

from .errors import InvalidIndexError
from .torus_grid import TorusGrid


class Direction(NamedTuple):
    row_offset: int
    col_offset: int
    name: str


# Output order is part of the wire format.
ALL_DIRECTIONS: Tuple[Direction, ...] = (
    Direction(-1, -1, "TopLeft"),
    Direction(-1, 0, "Top"),
    Direction(-1, 1, "TopRight"),
    Direction(0, -1, "Left"),
    Direction(0, 1, "Right"),
    Direction(1, -1, "BottomLeft"),
    Direction(1, 0, "Bottom"),
    Direction(1, 1, "BottomRight"),
)


class NeighborFinder:
    """Locate the eight wrapped neighbors of a cell."""

    def __init__(self, grid: TorusGrid):
        self.grid = grid

    def find_neighbors(self, index: int) -> List[int]:
        """Return neighbor indices of ``index`` in :data:`ALL_DIRECTIONS` order.

        Raises :class:`InvalidIndexError` if ``index`` is not a cell of the grid.
        """
        if not self.grid.is_valid_index(index):
            raise InvalidIndexError(index, self.grid.width, self.grid.height)

        center_row, center_col = self.grid.index_to_coordinates(index)
        return [
            self.grid.coordinates_to_index(
                center_row + d.row_offset, center_col + d.col_offset
            )
            for d in ALL_DIRECTIONS
        ]

    def find_named_neighbors(self, index: int) -> Dict[str, int]:
        """Return the neighbors of ``index`` keyed by direction name."""
        neighbors = self.find_neighbors(index)
        return {d.name: n for d, n in zip(ALL_DIRECTIONS, neighbors)}


def find_neighbors(width: int, height: int, index: int) -> List[int]:
    """Shortcut for ``NeighborFinder(TorusGrid(width, height)).find_neighbors(index)``."""
    return NeighborFinder(TorusGrid(width, height)).find_neighbors(index)


__all__ = ["Direction", "ALL_DIRECTIONS", "NeighborFinder", "find_neighbors"]
