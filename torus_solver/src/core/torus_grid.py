"""Index arithmetic for a fixed-size wrap-around (torus) grid."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

import numpy as np

from .errors import InvalidDimensionsError, OutOfRangeError


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


Coordinate = Union[int, np.ndarray]


@dataclass(frozen=True)
class TorusGrid:
    """Rectangular grid whose edges wrap around in both dimensions.

    Cells are addressed by a linear index in row-major order
    (``index = row * width + col``). The grid stores no cell values, only
    its dimensions, so every operation is a pure function of them.
    """

    width: int
    height: int

    def __post_init__(self) -> None:
        if not (_is_int(self.width) and _is_int(self.height)):
            raise InvalidDimensionsError(self.width, self.height)
        if self.width <= 0 or self.height <= 0:
            raise InvalidDimensionsError(self.width, self.height)

    @property
    def dimensions(self) -> Tuple[int, int]:
        """Return ``(width, height)``."""
        return self.width, self.height

    @property
    def shape(self) -> Tuple[int, int]:
        """Return the grid shape as ``(height, width)``."""
        return self.height, self.width

    @property
    def total_elements(self) -> int:
        return self.width * self.height

    def is_valid_index(self, index: object) -> bool:
        """Return ``True`` if ``index`` addresses a cell of this grid."""
        return _is_int(index) and 0 <= index < self.total_elements

    def index_to_coordinates(self, index: int) -> Tuple[int, int]:
        """Return ``(row, col)`` for ``index``.

        Raises :class:`OutOfRangeError` when ``index`` is outside
        ``[0, width * height)``.
        """
        if not self.is_valid_index(index):
            raise OutOfRangeError(index, self.width, self.height)
        return index // self.width, index % self.width

    def wrap(self, row: Coordinate, col: Coordinate) -> Tuple[Coordinate, Coordinate]:
        """Return ``(row, col)`` folded back into the grid.

        Python's ``%`` takes the sign of the divisor, so with positive
        dimensions the result is always in ``[0, height)`` / ``[0, width)``.
        numpy integer arrays follow the same floored rule, so ``row`` and
        ``col`` may also be arrays that broadcast against each other.
        """
        return row % self.height, col % self.width

    def coordinates_to_index(self, row: Coordinate, col: Coordinate) -> Coordinate:
        """Return the linear index of ``(row, col)`` after wrapping.

        Given numpy arrays, returns an array of indices with the broadcast
        shape of ``row`` and ``col``.
        """
        wrapped_row, wrapped_col = self.wrap(row, col)
        return wrapped_row * self.width + wrapped_col


__all__ = ["TorusGrid"]
