"""
Copyright (c) 2024 Idiap Research Institute, http://www.idiap.ch/
Written by Cem Bilaloglu <cem.bilaloglu@idiap.ch>

This file is part of cloudlib.
Licensed under the MIT License. See LICENSE file in the project root.
"""

"""
Simple statistics over real values and points.

All functions return 0 (or the origin) for empty input instead of raising.
"""

from typing import Iterable

import numpy as np


def mean(values: Iterable[float]) -> float:
    """Arithmetic mean of `values`, 0.0 for an empty input."""
    arr = np.fromiter(values, dtype=np.float64)
    if arr.size == 0:
        return 0.0
    return float(arr.mean())


def median(values: Iterable[float]) -> float:
    """
    Median of `values`, 0.0 for an empty input.

    The values are sorted in a copy; the caller's sequence keeps its order.
    For an even count the two central values are averaged.

    Args:
        values: Sequence (or any iterable) of reals

    Returns:
        float: The median value
    """
    arr = np.sort(np.fromiter(values, dtype=np.float64))
    n = arr.size
    if n == 0:
        return 0.0
    mid = n // 2
    if n % 2 == 1:
        return float(arr[mid])
    return float((arr[mid - 1] + arr[mid]) / 2.0)


def centroid(points) -> "Point":
    """
    Component-wise mean of a cloud or of an iterable of points.

    Args:
        points: PointCloud, iterable of Point or of (x, y, z) triples

    Returns:
        Point: The centroid, Point(0, 0, 0) when there are no points
    """
    from ..geometry.point import Point

    coords = np.array([tuple(p) for p in points], dtype=np.float64).reshape(-1, 3)
    if coords.shape[0] == 0:
        return Point()
    return Point(*coords.mean(axis=0))
