"""Wrapped-matrix construction and hashing.

The wrapped matrix is the grid's index layout padded on every side by one
cell taken from the opposite edge, i.e. the torus unrolled one step in each
direction. It is serialised as comma separated columns and newline separated
rows (no trailing newline) and hashed with SHA-256; the digest is reported as
standard padded base64.
"""

from __future__ import annotations

import base64
import hashlib

import numpy as np

from .errors import HashMismatchError
from .torus_grid import TorusGrid


def hash_bytes(data: bytes) -> str:
    """Return the base64 encoded SHA-256 digest of ``data``."""
    return base64.b64encode(hashlib.sha256(data).digest()).decode("ascii")


class MatrixHasher:
    """Build and hash the wrapped matrix of a :class:`TorusGrid`."""

    def __init__(self, grid: TorusGrid):
        self.grid = grid

    def generate_wrapped_matrix(self) -> np.ndarray:
        """Return the ``(height + 2, width + 2)`` matrix of wrapped indices.

        Cell ``[r, c]`` holds ``coordinates_to_index(r - 1, c - 1)``.
        """
        rows = np.arange(self.grid.height + 2, dtype=np.int64)[:, None] - 1
        cols = np.arange(self.grid.width + 2, dtype=np.int64)[None, :] - 1
        # the mapper's arithmetic broadcasts over the index vectors
        return self.grid.coordinates_to_index(rows, cols)

    def generate_matrix_string(self) -> str:
        wrapped = self.generate_wrapped_matrix()
        return "\n".join(",".join(str(int(v)) for v in row) for row in wrapped)

    def calculate_hash(self) -> str:
        """Return the base64 SHA-256 digest of :meth:`generate_matrix_string`."""
        return hash_bytes(self.generate_matrix_string().encode("utf-8"))

    def validate_expected_hash(self, expected: str) -> None:
        """Raise :class:`HashMismatchError` unless the digest equals ``expected``."""
        calculated = self.calculate_hash()
        if calculated != expected:
            raise HashMismatchError(expected, calculated)


__all__ = ["MatrixHasher", "hash_bytes"]
