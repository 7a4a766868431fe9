"""Configuration profiles for the combspace package.

Pre-configured profiles for development and testing alongside the defaults.
"""

from __future__ import annotations

from combspace.config.config import CombspaceConfig
from combspace.config.defaults import DEFAULT_CONFIG
from combspace.config.logging import LoggingConfig
from combspace.config.sampling import SamplingConfig

# development profile: verbose logging, small samples
DEV_CONFIG = CombspaceConfig(
    profile="dev",
    sampling=SamplingConfig(sample_size=5),
    logging=LoggingConfig(level="DEBUG", console=True),
)
"""Development configuration profile.

Examples
--------
>>> DEV_CONFIG.logging.level
'DEBUG'
>>> DEV_CONFIG.sampling.sample_size
5
"""

# test profile: fixed seed, quiet logging
TEST_CONFIG = CombspaceConfig(
    profile="test",
    sampling=SamplingConfig(seed=42, sample_size=10),
    logging=LoggingConfig(level="WARNING", console=False),
)
"""Test configuration profile.

Fixed random seed for reproducible samples and no console logging.

Examples
--------
>>> TEST_CONFIG.sampling.seed
42
>>> TEST_CONFIG.logging.console
False
"""

PROFILES: dict[str, CombspaceConfig] = {
    "default": DEFAULT_CONFIG,
    "dev": DEV_CONFIG,
    "test": TEST_CONFIG,
}
"""Registry of available configuration profiles."""


def get_profile(name: str) -> CombspaceConfig:
    """Get configuration profile by name.

    Parameters
    ----------
    name : str
        Profile name. Must be one of: 'default', 'dev', 'test'.

    Returns
    -------
    CombspaceConfig
        Deep copy of the configuration for the profile.

    Raises
    ------
    ValueError
        If profile name is not found in the registry.

    Examples
    --------
    >>> get_profile("dev").logging.level
    'DEBUG'
    >>> try:
    ...     get_profile("invalid")
    ... except ValueError as e:
    ...     print(str(e))
    Profile 'invalid' not found. Available profiles: default, dev, test
    """
    if name not in PROFILES:
        available = ", ".join(sorted(PROFILES.keys()))
        msg = f"Profile {name!r} not found. Available profiles: {available}"
        raise ValueError(msg)

    return PROFILES[name].model_copy(deep=True)


def list_profiles() -> list[str]:
    """Return available profile names, sorted alphabetically."""
    return sorted(PROFILES.keys())
