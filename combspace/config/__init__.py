"""Configuration system for the combspace package.

Configuration models, default settings, profiles, and loaders.

Examples
--------
>>> from combspace.config import load_config, get_profile
>>> config = get_profile("test")
>>> config.sampling.seed
42
>>> load_config(sampling__sample_size=3).sampling.sample_size
3
"""

from __future__ import annotations

from combspace.config.config import CombspaceConfig
from combspace.config.defaults import DEFAULT_CONFIG, get_default_config
from combspace.config.env import load_from_env
from combspace.config.loader import load_config, load_yaml_file, merge_configs
from combspace.config.logging import LoggingConfig, configure_logging
from combspace.config.profiles import (
    DEV_CONFIG,
    PROFILES,
    TEST_CONFIG,
    get_profile,
    list_profiles,
)
from combspace.config.sampling import SamplingConfig
from combspace.config.serialization import save_yaml, to_yaml

__all__ = [
    # Main config
    "CombspaceConfig",
    # Config sections
    "SamplingConfig",
    "LoggingConfig",
    # Defaults
    "DEFAULT_CONFIG",
    "get_default_config",
    # Profiles
    "DEV_CONFIG",
    "TEST_CONFIG",
    "PROFILES",
    "get_profile",
    "list_profiles",
    # Loading
    "load_config",
    "load_yaml_file",
    "merge_configs",
    "load_from_env",
    # Logging
    "configure_logging",
    # Serialization
    "save_yaml",
    "to_yaml",
]
