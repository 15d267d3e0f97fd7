"""
Copyright (c) 2024 Idiap Research Institute, http://www.idiap.ch/
Written by Cem Bilaloglu <cem.bilaloglu@idiap.ch>

This file is part of cloudlib.
Licensed under the MIT License. See LICENSE file in the project root.
"""

from dataclasses import dataclass
from typing import Iterator, List, Optional, Union

import numpy as np

from ..core.exceptions import FrozenCloudError, PointIndexError
from .point import Point

# Indices into a PointCloud, not necessarily unique or sorted
PointIndices = List[int]


@dataclass(frozen=True)
class Unorganized:
    """Layout of a cloud whose points form an arbitrary list."""

    width: int = 0
    height: int = 0


@dataclass(frozen=True)
class Organized:
    """Layout of a cloud whose points form a row-major width x height grid."""

    width: int
    height: int

    def __post_init__(self):
        for label, value in (("width", self.width), ("height", self.height)):
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise ValueError(f"Grid {label} must be an integer, got {value!r}")
            if value <= 0:
                raise ValueError(f"Grid {label} must be positive, got {value}")
        object.__setattr__(self, "width", int(self.width))
        object.__setattr__(self, "height", int(self.height))

    @property
    def size(self) -> int:
        return self.width * self.height


Layout = Union[Unorganized, Organized]


class PointCloud:
    """
    Ordered collection of 3D points with an optional name and grid layout.

    Insertion order and duplicates are preserved by every operation. An
    organized cloud interprets its points as a row-major grid: index `i`
    lies at row `i // width`, column `i % width`. The model does not force
    the point count to match the grid; use `is_consistent()` to check it.

    A producer may `freeze()` the cloud before handing it to consumers, after
    which every mutating method raises FrozenCloudError.
    """

    def __init__(
        self,
        points=None,
        name: str = "",
        width: int = 0,
        height: int = 0,
        layout: Optional[Layout] = None,
    ):
        self._points: List[Point] = []
        self._name = name or ""
        self._frozen = False
        if layout is None:
            layout = Organized(width, height) if (width or height) else Unorganized()
        self._layout: Layout = layout
        if points is not None:
            for point in points:
                self._points.append(_as_point(point))

    # Layout
    # ==============================================================================
    @property
    def layout(self) -> Layout:
        return self._layout

    @property
    def width(self) -> int:
        return self._layout.width

    @property
    def height(self) -> int:
        return self._layout.height

    def is_organized(self) -> bool:
        """A cloud with a grid layout is considered organized."""
        return isinstance(self._layout, Organized)

    def is_consistent(self) -> bool:
        """True unless the cloud is organized and its size differs from width * height."""
        if not self.is_organized():
            return True
        return len(self._points) == self._layout.size

    def organize(self, width: int, height: int) -> "PointCloud":
        self._check_mutable()
        self._layout = Organized(width, height)
        return self

    def unorganize(self) -> "PointCloud":
        self._check_mutable()
        self._layout = Unorganized()
        return self

    # Name
    # ==============================================================================
    @property
    def name(self) -> str:
        """Name of the cloud, empty string when unnamed."""
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._check_mutable()
        self._name = value or ""

    # Ownership
    # ==============================================================================
    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> "PointCloud":
        """Mark the cloud read-only before sharing it with consumers."""
        self._frozen = True
        return self

    def copy(self) -> "PointCloud":
        """Return an unfrozen copy with the same points, name and layout."""
        clone = PointCloud(name=self._name, layout=self._layout)
        clone._points = list(self._points)
        return clone

    def _check_mutable(self) -> None:
        if self._frozen:
            raise FrozenCloudError(
                f"Point cloud '{self._name or '<unnamed>'}' is frozen and cannot be modified"
            )

    # Sequence access
    # ==============================================================================
    def push_back(self, point) -> None:
        self._check_mutable()
        self._points.append(_as_point(point))

    def resize(self, size: int) -> None:
        """Truncate the cloud, or pad it with Point(0, 0, 0), to `size` points."""
        self._check_mutable()
        if size < 0:
            raise ValueError(f"Cannot resize point cloud to negative size {size}")
        if size <= len(self._points):
            del self._points[size:]
        else:
            self._points.extend(Point() for _ in range(size - len(self._points)))

    def at(self, index: int) -> Point:
        """Return the point at `index`, raising PointIndexError when out of range."""
        if not 0 <= index < len(self._points):
            raise PointIndexError(
                f"Index {index} out of range for point cloud of size {len(self._points)}"
            )
        return self._points[index]

    def empty(self) -> bool:
        return not self._points

    def __getitem__(self, index):
        if isinstance(index, slice):
            return self._points[index]
        if index < 0:
            index += len(self._points)
        return self.at(index)

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)

    def __str__(self) -> str:
        lines = [f"CloudSize({len(self._points)}) {{"]
        lines.extend(f"  {point}" for point in self._points)
        lines.append("}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        layout = (
            f"{self.width}x{self.height}" if self.is_organized() else "unorganized"
        )
        return f"<PointCloud '{self._name}': {len(self._points)} points, {layout}>"

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        # Points are immutable, a shallow list copy is a full copy
        return self.copy()

    # Raw buffer access
    # ==============================================================================
    def to_numpy(self) -> np.ndarray:
        """
        Get points as a float32 numpy array.

        Returns:
            np.ndarray: Array of shape (N, 3) with x, y, z columns
        """
        if not self._points:
            return np.empty((0, 3), dtype=np.float32)
        return np.array([p.to_tuple() for p in self._points], dtype=np.float32)

    def extend_from_numpy(self, array) -> None:
        """
        Append points from an (N, 3) array, in row order.

        Args:
            array: Array-like of shape (N, 3)
        """
        self._check_mutable()
        arr = np.asarray(array, dtype=np.float32)
        if arr.size == 0:
            return
        if arr.ndim != 2 or arr.shape[1] != 3:
            raise ValueError(f"Expected an array of shape (N, 3), got {arr.shape}")
        self._points.extend(Point(*row) for row in arr.tolist())

    @classmethod
    def from_numpy(
        cls, array, name: str = "", layout: Optional[Layout] = None
    ) -> "PointCloud":
        cloud = cls(name=name, layout=layout)
        cloud.extend_from_numpy(array)
        return cloud

    # Combination
    # ==============================================================================
    def concatenate(self, other: "PointCloud") -> "PointCloud":
        """
        Prepend the points of `other` to this cloud, in place.

        This is list concatenation (other's points first), not geometric
        addition. The layout of this cloud is left untouched.

        Returns:
            PointCloud: This cloud
        """
        self._check_mutable()
        self._points[0:0] = list(other)
        return self

    def pairwise_add(self, other: "PointCloud") -> "PointCloud":
        """Return a new cloud holding the componentwise sums of matching points."""
        if len(self) != len(other):
            raise ValueError(
                f"Cannot add point clouds of different sizes ({len(self)} and {len(other)})"
            )
        return PointCloud(
            points=[a + b for a, b in zip(self, other)],
            name=self._name,
            layout=self._layout,
        )


def _as_point(value) -> Point:
    if isinstance(value, Point):
        return value
    x, y, z = value
    return Point(x, y, z)
