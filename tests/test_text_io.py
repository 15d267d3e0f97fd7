"""
Copyright (c) 2024 Idiap Research Institute, http://www.idiap.ch/
Written by Cem Bilaloglu <cem.bilaloglu@idiap.ch>

This file is part of cloudlib.
Licensed under the MIT License. See LICENSE file in the project root.
"""

"""
Unit tests for plain text point cloud files.
"""

import numpy as np
import pytest

from cloudlib.core.exceptions import DecodeError, FrozenCloudError
from cloudlib.geometry import Point, PointCloud
from cloudlib.io.text import load_from_file, save_to_file


def test_save_format(tmp_path):
    path = tmp_path / "cloud.txt"
    cloud = PointCloud(points=[(1.0, 2.0, 3.0), (4.0, 5.5, -6.0)])

    save_to_file(path, cloud)

    assert path.read_text() == "2\n1 2 3\n4 5.5 -6\n"


def test_save_and_load(tmp_path):
    path = tmp_path / "cloud.txt"
    rng = np.random.default_rng(seed=0)
    cloud = PointCloud.from_numpy(rng.uniform(-100.0, 100.0, size=(50, 3)))

    save_to_file(path, cloud)
    loaded = load_from_file(path)

    assert len(loaded) == 50
    np.testing.assert_array_equal(loaded.to_numpy(), cloud.to_numpy())


def test_empty_cloud(tmp_path):
    path = tmp_path / "empty.txt"
    save_to_file(path, PointCloud())

    assert path.read_text() == "0\n"
    assert load_from_file(path).empty()


def test_load_appends_in_file_order(tmp_path):
    path = tmp_path / "cloud.txt"
    path.write_text("2\n1 1 1\n2 2 2\n")

    cloud = PointCloud(name="scan")
    cloud.push_back(Point(0.0, 0.0, 0.0))
    result = load_from_file(str(path), cloud)

    assert result is cloud
    assert [p.x for p in cloud] == [0.0, 1.0, 2.0]
    assert cloud.name == "scan"


def test_blank_lines_are_ignored(tmp_path):
    path = tmp_path / "cloud.txt"
    path.write_text("\n1\n\n  7 8 9  \n\n")
    assert load_from_file(path)[0].to_tuple() == (7.0, 8.0, 9.0)


@pytest.mark.parametrize(
    "content",
    [
        "",
        "two\n1 2 3\n",
        "-1\n",
        "1\n1 2\n",
        "1\n1 2 3 4\n",
        "1\n1 2 x\n",
        "2\n1 2 3\n",
        "1\n1 2 3\n4 5 6\n",
    ],
)
def test_malformed_files_leave_cloud_unchanged(tmp_path, content):
    path = tmp_path / "bad.txt"
    path.write_text(content)
    cloud = PointCloud(points=[(1.0, 1.0, 1.0)])

    with pytest.raises(DecodeError):
        load_from_file(path, cloud)
    assert len(cloud) == 1


def test_missing_file_is_reported(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_from_file(tmp_path / "missing.txt")


def test_frozen_target_is_rejected(tmp_path):
    path = tmp_path / "cloud.txt"
    path.write_text("1\n1 2 3\n")
    with pytest.raises(FrozenCloudError):
        load_from_file(path, PointCloud().freeze())
