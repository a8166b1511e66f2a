"""Typed errors raised by the torus core."""

from __future__ import annotations

from typing import Sequence


class TorusError(Exception):
    """Base class for every error raised by ``torus_solver``."""


class InvalidDimensionsError(TorusError, ValueError):
    def __init__(self, width: object, height: object):
        self.width = width
        self.height = height
        super().__init__(
            f"width and height must be positive integers, got width={width}, height={height}"
        )


class OutOfRangeError(TorusError, IndexError):
    def __init__(self, index: int, width: int, height: int):
        self.index = index
        self.width = width
        self.height = height
        super().__init__(
            f"index {index} is out of bounds for matrix {width}x{height}"
        )


class InvalidIndexError(TorusError, ValueError):
    """Raised when a center or target index does not address a cell of the grid."""

    def __init__(self, index: object, width: int, height: int):
        self.index = index
        self.width = width
        self.height = height
        super().__init__(
            f"invalid index {index} for matrix dimensions {width}x{height}"
        )


class ParseError(TorusError, ValueError):
    """Raised when a challenge field is not a base-10 integer."""

    def __init__(self, field: str, raw: object):
        self.field = field
        self.raw = raw
        super().__init__(f"invalid {field} value {raw!r}: expected a base-10 integer")


class HashMismatchError(TorusError, ValueError):
    def __init__(self, expected: str, computed: str):
        self.expected = expected
        self.computed = computed
        super().__init__(f"hash mismatch: expected {expected}, got {computed}")


class FixtureMismatchError(TorusError, AssertionError):
    """Raised by the self-check when a known neighbor fixture is not reproduced."""

    def __init__(self, description: str, expected: Sequence[int], actual: Sequence[int]):
        self.description = description
        self.expected = list(expected)
        self.actual = list(actual)
        super().__init__(
            f"{description}: expected neighbors {self.expected}, got {self.actual}"
        )


class SelfCheckError(TorusError, RuntimeError):
    """Raised when the local self-check fails before talking to the service."""


class MissingClientError(TorusError, RuntimeError):
    """Raised when a network operation is requested from a solver built without a client."""


__all__ = [
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
