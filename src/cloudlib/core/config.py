"""
Copyright (c) 2024 Idiap Research Institute
Written by Cem Bilaloglu <cem.bilaloglu@idiap.ch>

This file is part of cloudlib.
Licensed under the MIT License. See LICENSE file in the project root.
"""

"""
Centralized configuration management for cloudlib.

This module provides a single source of truth for:
- Package paths (package root, config directory)
- Configuration file loading
- Noise filter parameter profiles
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

# Environment variable that points to an alternative config directory
CONFIG_DIR_ENV = "CLOUDLIB_CONFIG_DIR"


class Config:
    """Centralized configuration management for cloudlib."""

    _package_root: Optional[Path] = None

    @classmethod
    def get_package_root(cls) -> Path:
        """
        Get the package root directory.

        This method calculates the package root once and caches it.
        This file is in: src/cloudlib/core/config.py, so the package
        root is one level up.

        Returns:
            Path: The cloudlib package directory
        """
        if cls._package_root is None:
            cls._package_root = Path(__file__).resolve().parents[1]

        return cls._package_root

    @classmethod
    def get_config_dir(cls) -> Path:
        """Get the config directory path, honouring CLOUDLIB_CONFIG_DIR."""
        override = os.environ.get(CONFIG_DIR_ENV)
        if override:
            return Path(override)
        return cls.get_package_root() / "config"

    @classmethod
    def get_noise_filter_config_path(cls) -> Path:
        """Get the noise filter configuration file path."""
        return cls.get_config_dir() / "noise_filter.yaml"

    @classmethod
    def load_noise_filter_config(cls, profile: str = "default") -> Dict[str, Any]:
        """
        Load a noise filter parameter profile.

        Args:
            profile: Name of the profile section in noise_filter.yaml

        Returns:
            Dict containing the filter parameters (window_size, range_threshold)

        Raises:
            FileNotFoundError: If config file doesn't exist
            KeyError: If profile not found in config
        """
        config_path = cls.get_noise_filter_config_path()

        with open(config_path, "r") as file:
            config = yaml.safe_load(file) or {}

        if profile not in config:
            raise KeyError(f"Profile '{profile}' not found in noise filter config")

        return config[profile]

    @classmethod
    def get_info(cls) -> Dict[str, str]:
        """
        Get configuration information for debugging.

        Returns:
            Dict with current path configurations
        """
        return {
            "package_root": str(cls.get_package_root()),
            "config_dir": str(cls.get_config_dir()),
            "noise_filter_config": str(cls.get_noise_filter_config_path()),
        }
