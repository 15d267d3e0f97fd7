"""
Copyright (c) 2024 Idiap Research Institute, http://www.idiap.ch/
Written by Cem Bilaloglu <cem.bilaloglu@idiap.ch>

This file is part of cloudlib.
Licensed under the MIT License. See LICENSE file in the project root.
"""

"""
Filters for organized point clouds.

This module contains:
- NoiseFilter: windowed median depth filter
- filter_noise, median_depth_map: functional interface

Dependencies: numpy, scipy
"""

from .noise_filter import NoiseFilter, filter_noise, median_depth_map

__all__ = ['NoiseFilter', 'filter_noise', 'median_depth_map']
