"""
Copyright (c) 2024 Idiap Research Institute, http://www.idiap.ch/
Written by Cem Bilaloglu <cem.bilaloglu@idiap.ch>

This file is part of cloudlib.
Licensed under the MIT License. See LICENSE file in the project root.
"""

"""
Core utilities and shared components for cloudlib.

This module contains:
- Centralized configuration management
- Error types
- Statistics helpers (mean, median, centroid)
"""

from .config import Config
from .exceptions import (
    CloudError,
    DecodeError,
    EncodeError,
    FrozenCloudError,
    LayoutMismatchError,
    PointIndexError,
    TruncatedStreamError,
    UnsupportedLayoutError,
)
from .statistics import centroid, mean, median

__all__ = [
    "Config",
    "CloudError",
    "DecodeError",
    "EncodeError",
    "FrozenCloudError",
    "LayoutMismatchError",
    "PointIndexError",
    "TruncatedStreamError",
    "UnsupportedLayoutError",
    "centroid",
    "mean",
    "median",
]
