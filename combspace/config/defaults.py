"""Default configuration for the combspace package."""

from __future__ import annotations

from combspace.config.config import CombspaceConfig
from combspace.config.logging import LoggingConfig
from combspace.config.sampling import SamplingConfig

DEFAULT_CONFIG = CombspaceConfig(
    profile="default",
    sampling=SamplingConfig(),
    logging=LoggingConfig(),
)
"""Default configuration instance.

Uses the default values of each config model. It's the base configuration
used when no config file is provided.

Examples
--------
>>> from combspace.config.defaults import DEFAULT_CONFIG
>>> DEFAULT_CONFIG.profile
'default'
>>> DEFAULT_CONFIG.sampling.seed is None
True
"""


def get_default_config() -> CombspaceConfig:
    """Get a copy of the default configuration.

    Returns
    -------
    CombspaceConfig
        A deep copy of the default configuration.

    Examples
    --------
    >>> config = get_default_config()
    >>> config.profile
    'default'

    Notes
    -----
    Returns a deep copy so modifications don't affect ``DEFAULT_CONFIG``.
    """
    return DEFAULT_CONFIG.model_copy(deep=True)
