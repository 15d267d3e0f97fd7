"""
Copyright (c) 2024 Idiap Research Institute, http://www.idiap.ch/
Written by Cem Bilaloglu <cem.bilaloglu@idiap.ch>

This file is part of cloudlib.
Licensed under the MIT License. See LICENSE file in the project root.
"""

"""
Geometric data structures.

This module contains the point cloud data model:
- Point: single precision 3D point with tolerant equality
- PointCloud: ordered point collection with an optional grid layout
- Organized / Unorganized: layout variants of a PointCloud

Dependencies: numpy
"""

from .point import Point, compare
from .pointcloud import Layout, Organized, PointCloud, PointIndices, Unorganized

__all__ = [
    'Point', 'compare',
    'PointCloud', 'PointIndices', 'Layout', 'Organized', 'Unorganized'
]
