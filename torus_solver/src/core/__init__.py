"""Torus index arithmetic, neighbor lookup and wrapped-matrix hashing."""

from .errors import (
    FixtureMismatchError,
    HashMismatchError,
    InvalidDimensionsError,
    InvalidIndexError,
    MissingClientError,
    OutOfRangeError,
    ParseError,
    SelfCheckError,
    TorusError,
)
from .torus_grid import TorusGrid
from .neighbors import ALL_DIRECTIONS, Direction, NeighborFinder, find_neighbors
from .matrix_hasher import MatrixHasher, hash_bytes

__all__ = [
    "TorusGrid",
    "Direction",
    "ALL_DIRECTIONS",
    "NeighborFinder",
    "find_neighbors",
    "MatrixHasher",
    "hash_bytes",
    "TorusError",
    "InvalidDimensionsError",
    "OutOfRangeError",
    "InvalidIndexError",
    "ParseError",
    "HashMismatchError",
    "FixtureMismatchError",
    "SelfCheckError",
    "MissingClientError",
]
