"""
Copyright (c) 2024 Idiap Research Institute, http://www.idiap.ch/
Written by Cem Bilaloglu <cem.bilaloglu@idiap.ch>

This file is part of cloudlib.
Licensed under the MIT License. See LICENSE file in the project root.
"""

"""
Unit tests for mean, median and centroid.
"""

import ast
import inspect

import numpy as np

from cloudlib.core import statistics
from cloudlib.core.statistics import centroid, mean, median
from cloudlib.geometry import Point, PointCloud


def test_mean():
    assert mean([]) == 0.0
    assert mean([5.0]) == 5.0
    assert mean([1.0, 2.0, 3.0, 6.0]) == 3.0


def test_mean_accepts_iterables():
    assert mean(x for x in (2.0, 4.0)) == 3.0
    assert mean(np.array([1.0, 3.0])) == 2.0


def test_median():
    assert median([]) == 0.0
    assert median([5.0]) == 5.0
    assert median([1.0, 3.0]) == 2.0
    assert median([1.0, 2.0, 3.0, 4.0]) == 2.5


def test_median_unsorted_input():
    assert median([9.0, 1.0, 5.0]) == 5.0
    assert median([4.0, 1.0, 3.0, 2.0]) == 2.5


def test_median_does_not_reorder_input():
    values = [3.0, 1.0, 2.0]
    median(values)
    assert values == [3.0, 1.0, 2.0], "median must not sort the caller's list"

    arr = np.array([3.0, 1.0, 2.0])
    median(arr)
    np.testing.assert_array_equal(arr, [3.0, 1.0, 2.0])


def test_centroid():
    cloud = PointCloud()
    cloud.push_back(Point(1.0, 2.0, 3.0))
    cloud.push_back(Point(3.0, 4.0, 5.0))

    assert centroid(cloud) == Point(2.0, 3.0, 4.0)
    assert centroid(cloud).to_tuple() == (2.0, 3.0, 4.0)


def test_centroid_of_triples():
    assert centroid([(0.0, 0.0, 0.0), (2.0, 2.0, 2.0)]).to_tuple() == (1.0, 1.0, 1.0)


def test_centroid_of_empty_cloud_is_origin():
    assert centroid(PointCloud()).to_tuple() == (0.0, 0.0, 0.0)


def test_statistics_does_not_import_geometry_at_module_level():
    tree = ast.parse(inspect.getsource(statistics))
    modules = [
        node.module or ""
        for node in tree.body
        if isinstance(node, ast.ImportFrom)
    ]
    modules += [
        alias.name
        for node in tree.body
        if isinstance(node, ast.Import)
        for alias in node.names
    ]
    assert not [m for m in modules if "geometry" in m], modules
