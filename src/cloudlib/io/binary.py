"""
Copyright (c) 2024 Idiap Research Institute, http://www.idiap.ch/
Written by Cem Bilaloglu <cem.bilaloglu@idiap.ch>

This file is part of cloudlib.
Licensed under the MIT License. See LICENSE file in the project root.
"""

"""
Binary container for an ordered sequence of point clouds.

Layout (little-endian, no version tag, no checksum):

    u32  cloud_count
    repeat cloud_count times:
        u32    point_count (N)
        u8     flags            0x10 set when a name follows
        bytes  name             UTF-8, NUL-terminated (only with 0x10)
        f32    N * 3 values     x0, y0, z0, x1, y1, z1, ...

Grid dimensions are not stored: decoded clouds are always unorganized.
"""

import logging
import struct
from pathlib import Path
from typing import Iterable, List, Union

import numpy as np

from ..core.exceptions import DecodeError, EncodeError, TruncatedStreamError
from ..geometry.pointcloud import PointCloud

logger = logging.getLogger(__name__)

NAME_FLAG = 0x10

_COUNT = struct.Struct("<I")
_FLAGS = struct.Struct("<B")
_MAX_COUNT = 0xFFFFFFFF
_POINT_DTYPE = np.dtype("<f4")
_BYTES_PER_POINT = 3 * _POINT_DTYPE.itemsize


def _encode_name(name: str) -> bytes:
    raw = name.encode("utf-8")
    if b"\x00" in raw:
        raise EncodeError(f"Point cloud name {name!r} contains a NUL character")
    return raw + b"\x00"


def encode(clouds: Iterable[PointCloud]) -> bytes:
    """
    Serialize point clouds, in order, to the binary container format.

    The name of each cloud is written when it is not empty. Grid layouts are
    not part of the format and are dropped.

    Args:
        clouds: Ordered point clouds

    Returns:
        bytes: The encoded container

    Raises:
        EncodeError: If a name contains NUL or a count does not fit in u32
    """
    clouds = list(clouds)
    if len(clouds) > _MAX_COUNT:
        raise EncodeError(f"Too many point clouds to encode: {len(clouds)}")

    chunks = [_COUNT.pack(len(clouds))]
    for cloud in clouds:
        size = len(cloud)
        if size > _MAX_COUNT:
            raise EncodeError(f"Point cloud '{cloud.name}' has too many points: {size}")
        chunks.append(_COUNT.pack(size))

        if cloud.name:
            chunks.append(_FLAGS.pack(NAME_FLAG))
            chunks.append(_encode_name(cloud.name))
        else:
            chunks.append(_FLAGS.pack(0))

        chunks.append(cloud.to_numpy().astype(_POINT_DTYPE, copy=False).tobytes())

    data = b"".join(chunks)
    logger.debug(f"Encoded {len(clouds)} point clouds into {len(data)} bytes")
    return data


class _Reader:
    """Bounds-checked cursor over an encoded buffer."""

    def __init__(self, data: bytes):
        self.data = memoryview(data)
        self.offset = 0

    def remaining(self) -> int:
        return len(self.data) - self.offset

    def take(self, size: int, what: str) -> memoryview:
        if size > self.remaining():
            raise TruncatedStreamError(
                f"Truncated stream: {what} needs {size} bytes at offset {self.offset}, "
                f"only {self.remaining()} left"
            )
        chunk = self.data[self.offset:self.offset + size]
        self.offset += size
        return chunk

    def unpack(self, fmt: struct.Struct, what: str) -> int:
        return fmt.unpack(self.take(fmt.size, what))[0]

    def take_until_nul(self, what: str) -> bytes:
        # Scan byte by byte for the terminator, then consume name and NUL
        end = self.offset
        while end < len(self.data) and self.data[end] != 0:
            end += 1
        if end >= len(self.data):
            raise TruncatedStreamError(
                f"Truncated stream: {what} at offset {self.offset} has no NUL terminator"
            )
        raw = bytes(self.data[self.offset:end])
        self.offset = end + 1
        return raw


def decode(data: bytes) -> List[PointCloud]:
    """
    Deserialize point clouds from the binary container format.

    Args:
        data: Encoded container (bytes, bytearray or memoryview)

    Returns:
        List[PointCloud]: Unorganized clouds, in encoded order

    Raises:
        TruncatedStreamError: If the data ends before what its headers announce
        DecodeError: On unknown flags, invalid names or trailing bytes
    """
    reader = _Reader(data)
    cloud_count = reader.unpack(_COUNT, "cloud count")

    clouds = []
    for i in range(cloud_count):
        size = reader.unpack(_COUNT, f"point count of cloud {i}")
        flags = reader.unpack(_FLAGS, f"flags of cloud {i}")
        if flags & ~NAME_FLAG:
            raise DecodeError(f"Unknown flags 0x{flags:02x} for cloud {i}")

        name = ""
        if flags & NAME_FLAG:
            raw = reader.take_until_nul(f"name of cloud {i}")
            try:
                name = raw.decode("utf-8")
            except UnicodeDecodeError as e:
                raise DecodeError(f"Name of cloud {i} is not valid UTF-8: {e}") from e

        cloud = PointCloud(name=name)
        payload = reader.take(size * _BYTES_PER_POINT, f"points of cloud {i}")
        if size:
            cloud.extend_from_numpy(
                np.frombuffer(payload, dtype=_POINT_DTYPE).reshape(size, 3)
            )
        clouds.append(cloud)

    if reader.remaining():
        raise DecodeError(
            f"{reader.remaining()} unexpected bytes after the last of {cloud_count} clouds"
        )

    logger.debug(f"Decoded {len(clouds)} point clouds from {len(reader.data)} bytes")
    return clouds


def write_clouds(path: Union[str, Path], clouds: Iterable[PointCloud]) -> None:
    """
    Write point clouds to a binary container file.

    The whole container is encoded before the file is opened, so an
    EncodeError never leaves a partial file behind.
    """
    data = encode(clouds)
    path = Path(path)
    with open(path, "wb") as file:
        file.write(data)
    logger.info(f"Wrote {len(data)} bytes of point clouds to {path}")


def read_clouds(path: Union[str, Path]) -> List[PointCloud]:
    """Read every point cloud of a binary container file, in file order."""
    path = Path(path)
    with open(path, "rb") as file:
        data = file.read()
    clouds = decode(data)
    logger.info(f"Read {len(clouds)} point clouds from {path}")
    return clouds
