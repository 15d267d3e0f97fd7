"""
Copyright (c) 2024 Idiap Research Institute, http://www.idiap.ch/
Written by Cem Bilaloglu <cem.bilaloglu@idiap.ch>

This file is part of cloudlib.
Licensed under the MIT License. See LICENSE file in the project root.
"""

from setuptools import find_packages, setup


# Read version from __init__.py
def get_version():
    with open("src/cloudlib/__init__.py", "r") as f:
        for line in f:
            if line.startswith("__version__"):
                return line.split("=")[1].strip().strip("\"'")
    return "0.0.1"


setup(
    name="cloudlib",
    version=get_version(),
    packages=find_packages("src"),
    package_dir={"": "src"},
    install_requires=[
        # Core dependencies
        "numpy>=1.21.0",
        "scipy>=1.7.0",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=6.0",
        ],
        "dev": [
            "pytest>=6.0",
            "pytest-cov",
            "black",
            "flake8",
        ],
    },
    include_package_data=True,
    package_data={
        "cloudlib": ["config/*.yaml"],
    },
    zip_safe=False,
    description="A Python package for storing, filtering and persisting 3D point clouds",
    long_description="""
    cloudlib stores and manipulates 3D point clouds. It distinguishes
    unorganized clouds (arbitrary point lists) from organized clouds
    (row-major grids produced by range sensors).

    This package provides tools for:
    - Point and point cloud data structures with tolerant point equality
    - Mean, median and centroid statistics
    - Windowed median depth noise filtering of organized clouds
    - A compact binary container holding several named point clouds
    - Plain text point cloud files
    """,
    long_description_content_type="text/plain",
    author="Cem Bilaloglu",
    author_email="cem.bilaloglu@idiap.ch",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Topic :: Scientific/Engineering",
    ],
    python_requires=">=3.8",
    keywords="point-cloud, organized-point-cloud, noise-filter, serialization",
)
