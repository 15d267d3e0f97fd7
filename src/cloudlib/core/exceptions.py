"""
Copyright (c) 2024 Idiap Research Institute, http://www.idiap.ch/
Written by Cem Bilaloglu <cem.bilaloglu@idiap.ch>

This file is part of cloudlib.
Licensed under the MIT License. See LICENSE file in the project root.
"""

"""
Error types raised by cloudlib.

Every error also derives from the builtin exception a caller would expect
(ValueError, IndexError, RuntimeError), so generic handlers keep working.
"""


class CloudError(Exception):
    """Base class for all cloudlib errors."""


class UnsupportedLayoutError(CloudError, ValueError):
    """Operation requires an organized (grid) point cloud."""


class LayoutMismatchError(UnsupportedLayoutError):
    """Point count of an organized cloud does not match width * height."""


class PointIndexError(CloudError, IndexError):
    """Point index outside of the cloud."""


class FrozenCloudError(CloudError, RuntimeError):
    """Attempt to mutate a cloud that was frozen by its producer."""


class EncodeError(CloudError, ValueError):
    """Cloud cannot be represented in the target format."""


class DecodeError(CloudError, ValueError):
    """Malformed input stream or file."""


class TruncatedStreamError(DecodeError):
    """Stream ended before the data its headers announce."""
