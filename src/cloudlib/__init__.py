"""
Copyright (c) 2024 Idiap Research Institute, http://www.idiap.ch/
Written by Cem Bilaloglu <cem.bilaloglu@idiap.ch>

This file is part of cloudlib.
Licensed under the MIT License. See LICENSE file in the project root.
"""

"""
cloudlib - A Python package for storing, filtering and persisting 3D point clouds.

The package is organized into focused submodules:
- core: Configuration, error types and statistics helpers
- geometry: Point and PointCloud data model (organized and unorganized clouds)
- filtering: Windowed median noise filter for organized clouds
- io: Binary multi-cloud container and plain text files

Copyright (c) 2024 Idiap Research Institute
Written by Cem Bilaloglu <cem.bilaloglu@idiap.ch>

This file is part of cloudlib.
Licensed under the MIT License. See LICENSE file in the project root.
"""

# Version information
__version__ = "0.1.0"
__author__ = "Cem Bilaloglu"
__email__ = "cem.bilaloglu@idiap.ch"
__license__ = "MIT"

# Core submodule - configuration, errors and statistics
from .core import (
    CloudError, Config, DecodeError, EncodeError, FrozenCloudError,
    LayoutMismatchError, PointIndexError, TruncatedStreamError,
    UnsupportedLayoutError, centroid, mean, median
)

# Geometry submodule - data model
from .geometry import (
    Organized, Point, PointCloud, PointIndices, Unorganized, compare
)

# Filtering submodule - noise removal
from .filtering import NoiseFilter, filter_noise, median_depth_map

# IO submodule - persistence
from .io import (
    decode, encode, load_from_file, read_clouds, save_to_file, write_clouds
)

__all__ = [
    # core
    "Config", "CloudError", "DecodeError", "EncodeError", "FrozenCloudError",
    "LayoutMismatchError", "PointIndexError", "TruncatedStreamError",
    "UnsupportedLayoutError", "centroid", "mean", "median",
    # geometry
    "Point", "compare", "PointCloud", "PointIndices", "Organized", "Unorganized",
    # filtering
    "NoiseFilter", "filter_noise", "median_depth_map",
    # io
    "encode", "decode", "write_clouds", "read_clouds",
    "save_to_file", "load_from_file",
]

# Provide easy access to submodules
from . import core
from . import geometry
from . import filtering
from . import io
