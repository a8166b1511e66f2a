"""Known-good results used by the solver's self-check."""

from __future__ import annotations

from typing import NamedTuple, Tuple


class NeighborFixture(NamedTuple):
    width: int
    height: int
    target_index: int
    expected: Tuple[int, ...]
    description: str


class HashFixture(NamedTuple):
    width: int
    height: int
    expected: str


NEIGHBOR_FIXTURES: Tuple[NeighborFixture, ...] = (
    NeighborFixture(4, 4, 5, (0, 1, 2, 4, 6, 8, 9, 10), "4x4 matrix, index 5"),
    NeighborFixture(4, 4, 0, (15, 12, 13, 3, 1, 7, 4, 5), "4x4 matrix, index 0"),
    NeighborFixture(5, 4, 1, (15, 16, 17, 0, 2, 5, 6, 7), "4x5 matrix, index 1"),
    NeighborFixture(3, 1, 2, (1, 2, 0, 1, 0, 1, 2, 0), "1x3 matrix, index 2"),
    NeighborFixture(1, 1, 0, (0, 0, 0, 0, 0, 0, 0, 0), "1x1 matrix, index 0"),
)

HASH_FIXTURE = HashFixture(4, 4, "hJVz5fi5z2YecMNLsihGJQHBpAGUAYitNUOFGmjBg38=")
