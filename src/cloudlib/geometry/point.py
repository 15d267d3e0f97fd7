"""
Copyright (c) 2024 Idiap Research Institute, http://www.idiap.ch/
Written by Cem Bilaloglu <cem.bilaloglu@idiap.ch>

This file is part of cloudlib.
Licensed under the MIT License. See LICENSE file in the project root.
"""

from dataclasses import dataclass
from numbers import Real
from typing import List, Tuple

import numpy as np

# Points are stored at the precision of the binary container
_FLOAT32 = np.finfo(np.float32)
EPSILON = float(_FLOAT32.eps)
SMALLEST_NORMAL = float(_FLOAT32.tiny)


def compare(x: float, y: float, ulp: int = 10) -> bool:
    """
    Compare two reals with a tolerance scaled by their magnitude.

    Two values are equal when they differ by less than `ulp` units in the
    last place of single precision, or when the difference is below the
    smallest normal single precision value. This is not transitive near zero.

    Args:
        x, y: Values to compare
        ulp: Number of units in the last place to tolerate

    Returns:
        bool: True when the values are considered equal
    """
    diff = abs(x - y)
    return diff < EPSILON * abs(x + y) * ulp or diff < SMALLEST_NORMAL


def _single(value) -> float:
    # Values beyond the single precision range become +-inf
    with np.errstate(over="ignore"):
        return float(np.float32(value))


@dataclass(frozen=True, eq=False)
class Point:
    """A 3D point with single precision components."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, "x", _single(self.x))
        object.__setattr__(self, "y", _single(self.y))
        object.__setattr__(self, "z", _single(self.z))

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: "Point") -> "Point":
        return Point(self.x * other.x, self.y * other.y, self.z * other.z)

    def __truediv__(self, other) -> "Point":
        # Point / Point is componentwise, Point / scalar divides every component
        if isinstance(other, Point):
            return Point(self.x / other.x, self.y / other.y, self.z / other.z)
        if isinstance(other, Real):
            return Point(self.x / other, self.y / other, self.z / other)
        return NotImplemented

    def __eq__(self, other) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return (
            compare(self.x, other.x)
            and compare(self.y, other.y)
            and compare(self.z, other.z)
        )

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __str__(self) -> str:
        return f"[ {self.x:g}, {self.y:g}, {self.z:g} ]"

    def to_tuple(self) -> Tuple[float, float, float]:
        """Return point as (x, y, z) tuple."""
        return (self.x, self.y, self.z)

    def to_list(self) -> List[float]:
        """Return point as [x, y, z] list."""
        return [self.x, self.y, self.z]
