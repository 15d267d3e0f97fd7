"""
Copyright (c) 2024 Idiap Research Institute, http://www.idiap.ch/
Written by Cem Bilaloglu <cem.bilaloglu@idiap.ch>

This file is part of cloudlib.
Licensed under the MIT License. See LICENSE file in the project root.
"""

"""
Plain text point cloud files.

The first line holds the number of points, every following line one point
as three whitespace separated numbers:

    2
    1 2 3
    4 5 6
"""

import logging
from pathlib import Path
from typing import Optional, Union

import numpy as np

from ..core.exceptions import DecodeError
from ..geometry.pointcloud import PointCloud

logger = logging.getLogger(__name__)

# Nine significant digits round-trip single precision values exactly
_FLOAT_FORMAT = "%.9g"


def save_to_file(path: Union[str, Path], cloud: PointCloud) -> None:
    """
    Write a point cloud to a plain text file.

    Args:
        path: Destination file, overwritten when it exists
        cloud: Point cloud to write (name and layout are not stored)
    """
    path = Path(path)
    with open(path, "w") as file:
        file.write(f"{len(cloud)}\n")
        if len(cloud):
            np.savetxt(file, cloud.to_numpy(), fmt=_FLOAT_FORMAT, delimiter=" ")
    logger.info(f"Saved {len(cloud)} points to {path}")


def load_from_file(
    path: Union[str, Path], cloud: Optional[PointCloud] = None
) -> PointCloud:
    """
    Append the points of a plain text file to a point cloud.

    The points are appended in file order. The whole file is validated before
    anything is appended, so `cloud` is unchanged when an error is raised.

    Args:
        path: File written by `save_to_file`
        cloud: Cloud to populate, a new unnamed cloud when None

    Returns:
        PointCloud: The populated cloud

    Raises:
        OSError: If the file cannot be read
        DecodeError: If the count line or a point row is malformed, or the
            number of rows differs from the declared count
    """
    path = Path(path)
    if cloud is None:
        cloud = PointCloud()

    with open(path, "r") as file:
        lines = [line.strip() for line in file]

    # Blank lines carry no points
    numbered = [(n, line) for n, line in enumerate(lines, start=1) if line]
    if not numbered:
        raise DecodeError(f"{path}: missing point count line")

    count_line_number, count_line = numbered[0]
    try:
        declared = int(count_line)
    except ValueError as e:
        raise DecodeError(
            f"{path}:{count_line_number}: invalid point count {count_line!r}"
        ) from e
    if declared < 0:
        raise DecodeError(f"{path}:{count_line_number}: negative point count {declared}")

    rows = []
    for line_number, line in numbered[1:]:
        fields = line.split()
        if len(fields) != 3:
            raise DecodeError(
                f"{path}:{line_number}: expected 3 values per point, got {len(fields)}"
            )
        try:
            rows.append([float(value) for value in fields])
        except ValueError as e:
            raise DecodeError(f"{path}:{line_number}: invalid point {line!r}") from e

    if len(rows) != declared:
        raise DecodeError(
            f"{path}: declares {declared} points but contains {len(rows)}"
        )

    cloud.extend_from_numpy(np.array(rows, dtype=np.float32).reshape(-1, 3))
    logger.info(f"Loaded {len(rows)} points from {path}")
    return cloud
