"""
Copyright (c) 2024 Idiap Research Institute, http://www.idiap.ch/
Written by Cem Bilaloglu <cem.bilaloglu@idiap.ch>

This file is part of cloudlib.
Licensed under the MIT License. See LICENSE file in the project root.
"""

"""
Point cloud persistence.

This module contains:
- binary: multi-cloud binary container (encode, decode, file helpers)
- text: single cloud plain text files

Dependencies: numpy
"""

from .binary import decode, encode, read_clouds, write_clouds
from .text import load_from_file, save_to_file

__all__ = [
    'encode', 'decode', 'write_clouds', 'read_clouds',
    'save_to_file', 'load_from_file'
]
