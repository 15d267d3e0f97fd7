"""
Copyright (c) 2024 Idiap Research Institute, http://www.idiap.ch/
Written by Cem Bilaloglu <cem.bilaloglu@idiap.ch>

This file is part of cloudlib.
Licensed under the MIT License. See LICENSE file in the project root.
"""

"""
Windowed median depth filter for organized (range sensor) point clouds.

A point is kept when its depth (z) lies strictly within `range_threshold` of
the median depth of the square grid window centred on it. The window always
samples the underlying grid, not only the candidate points, and is clamped
to the grid bounds.
"""

import logging
import operator
from typing import Iterable, Optional

import numpy as np
from scipy import ndimage

from ..core import Config
from ..core.exceptions import LayoutMismatchError, PointIndexError, UnsupportedLayoutError
from ..core.statistics import median
from ..geometry.pointcloud import PointCloud, PointIndices

logger = logging.getLogger(__name__)


def _check_grid(cloud: PointCloud) -> None:
    if not cloud.is_organized():
        raise UnsupportedLayoutError(
            f"Noise filter requires an organized point cloud, '{cloud.name}' is unorganized"
        )
    if not cloud.is_consistent():
        raise LayoutMismatchError(
            f"Organized point cloud '{cloud.name}' has {len(cloud)} points, "
            f"expected {cloud.width} x {cloud.height} = {cloud.width * cloud.height}"
        )


def _check_window(window_size: int) -> int:
    try:
        window_size = operator.index(window_size)
    except TypeError as e:
        raise ValueError(f"Window size must be an integer, got {window_size!r}") from e
    if window_size < 1:
        raise ValueError(f"Window size must be at least 1, got {window_size}")
    return window_size


def _check_threshold(range_threshold: float) -> float:
    # NaN fails the comparison
    if not range_threshold >= 0:
        raise ValueError(f"Range threshold must be non-negative, got {range_threshold}")
    return range_threshold


def _depth_grid(cloud: PointCloud) -> np.ndarray:
    return cloud.to_numpy()[:, 2].astype(np.float64).reshape(cloud.height, cloud.width)


def filter_noise(
    cloud: PointCloud,
    candidate_indices: Iterable[int],
    window_size: int,
    range_threshold: float,
) -> PointIndices:
    """
    Keep the candidates whose depth agrees with their grid neighbourhood.

    For every candidate p (row = p // width, column = p % width) the z values
    of the grid cells in [row - w//2, row + w//2] x [column - w//2, column + w//2],
    clamped to the grid, are collected and their median m computed. The
    candidate is accepted iff m - range_threshold < z_p < m + range_threshold.

    Args:
        cloud: Organized point cloud with width * height points
        candidate_indices: Indices to test, in the order they are reported
        window_size: Side of the square window in cells (w)
        range_threshold: Accepted distance from the window median

    Returns:
        PointIndices: Accepted candidates, in input order

    Raises:
        UnsupportedLayoutError: If the cloud is unorganized
        LayoutMismatchError: If the point count is not width * height
        PointIndexError: If a candidate is outside of the cloud
        ValueError: If window_size is not an integer >= 1, or
            range_threshold is negative or NaN
    """
    _check_grid(cloud)
    window_size = _check_window(window_size)
    _check_threshold(range_threshold)

    candidates = [operator.index(p) for p in candidate_indices]
    size = len(cloud)
    for p in candidates:
        if not 0 <= p < size:
            raise PointIndexError(
                f"Candidate index {p} out of range for point cloud of size {size}"
            )

    width, height = cloud.width, cloud.height
    depth = _depth_grid(cloud)
    half = window_size // 2

    accepted = []
    for p in candidates:
        row, column = divmod(p, width)
        row_min, row_max = max(row - half, 0), min(row + half, height - 1)
        col_min, col_max = max(column - half, 0), min(column + half, width - 1)

        median_range = median(depth[row_min:row_max + 1, col_min:col_max + 1].ravel())
        if median_range - range_threshold < depth[row, column] < median_range + range_threshold:
            accepted.append(p)

    logger.debug(
        f"Noise filter on '{cloud.name}': accepted {len(accepted)} of {len(candidates)} "
        f"candidates (window {window_size}, threshold {range_threshold})"
    )
    return accepted


def _window_median(values: np.ndarray) -> float:
    # Cells outside of the grid are padded with NaN
    values = values[~np.isnan(values)]
    if values.size == 0:
        return np.nan
    return median(values)


def median_depth_map(cloud: PointCloud, window_size: int) -> np.ndarray:
    """
    Windowed median depth at every grid cell.

    The window is the one used by `filter_noise`, clamped to the grid. Cells
    whose depth is NaN are left out of the window median; a window with no
    valid depth yields NaN.

    Args:
        cloud: Organized point cloud with width * height points
        window_size: Side of the square window in cells

    Returns:
        np.ndarray: (height, width) float64 array of median depths
    """
    _check_grid(cloud)
    window_size = _check_window(window_size)

    half = window_size // 2
    return ndimage.generic_filter(
        _depth_grid(cloud),
        _window_median,
        size=2 * half + 1,
        output=np.float64,
        mode="constant",
        cval=np.nan,
    )


class NoiseFilter:
    """
    Median depth noise filter with configurable parameters.

    Parameters that are not given are loaded from a profile of the packaged
    noise_filter.yaml configuration.
    """

    def __init__(
        self,
        window_size: Optional[int] = None,
        range_threshold: Optional[float] = None,
        profile: str = "default",
    ):
        self.profile = profile
        self.window_size = window_size
        self.range_threshold = range_threshold
        if self.window_size is None or self.range_threshold is None:
            self.load_profile_parameters()

        self.window_size = _check_window(self.window_size)
        _check_threshold(self.range_threshold)

    def load_profile_parameters(self):
        params = Config.load_noise_filter_config(self.profile)

        if self.window_size is None:
            self.window_size = int(params["window_size"])
        if self.range_threshold is None:
            self.range_threshold = float(params["range_threshold"])

    def __repr__(self):
        return (
            f"<NoiseFilter: window_size={self.window_size}, "
            f"range_threshold={self.range_threshold}>"
        )

    def filter(
        self, cloud: PointCloud, candidate_indices: Optional[Iterable[int]] = None
    ) -> PointIndices:
        """Run `filter_noise`, over every point when no candidates are given."""
        if candidate_indices is None:
            candidate_indices = range(len(cloud))
        return filter_noise(cloud, candidate_indices, self.window_size, self.range_threshold)

    def apply(self, cloud: PointCloud) -> PointCloud:
        """
        Return a new unorganized cloud with the accepted points of `cloud`.

        The result keeps the name of the input; the input is not modified.
        """
        accepted = self.filter(cloud)
        return PointCloud(points=[cloud[i] for i in accepted], name=cloud.name)

    def median_depth_map(self, cloud: PointCloud) -> np.ndarray:
        return median_depth_map(cloud, self.window_size)
