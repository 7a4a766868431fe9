"""Main configuration model for the combspace package."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field

from combspace.config.logging import LoggingConfig
from combspace.config.sampling import SamplingConfig

if TYPE_CHECKING:
    from combspace.product.space import ProductSpace


class CombspaceConfig(BaseModel):
    """Main configuration for the combspace package.

    Parameters
    ----------
    profile : str
        Configuration profile name.
    sampling : SamplingConfig
        Sampling configuration.
    logging : LoggingConfig
        Logging configuration.

    Examples
    --------
    >>> config = CombspaceConfig()
    >>> config.profile
    'default'
    >>> config.sampling.sample_size
    10
    >>> config.logging.level
    'INFO'
    """

    profile: str = Field(default="default", description="Configuration profile name")
    sampling: SamplingConfig = Field(
        default_factory=SamplingConfig, description="Sampling configuration"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary.

        Returns
        -------
        dict[str, Any]
            Configuration as a dictionary.
        """
        return self.model_dump()

    def to_yaml(self) -> str:
        """Convert configuration to YAML string.

        Returns
        -------
        str
            Configuration as YAML string, omitting default values.

        Examples
        --------
        >>> config = CombspaceConfig(profile="dev")
        >>> 'profile: dev' in config.to_yaml()
        True
        """
        from combspace.config.serialization import to_yaml  # noqa: PLC0415

        return to_yaml(self, include_defaults=False)

    def space[T](self, dimensions: Sequence[Sequence[T]]) -> ProductSpace[T]:
        """Create a product space that samples with this configuration.

        Parameters
        ----------
        dimensions : Sequence[Sequence[T]]
            Ordered dimensions of the product.

        Returns
        -------
        ProductSpace[T]
            Space whose default sample size, seed, and count limit come
            from ``sampling``.

        Examples
        --------
        >>> from combspace.config import get_profile
        >>> space = get_profile("test").space([["a", "b"], ["x", "y", "z"]])
        >>> len(space.sample(3))
        3
        """
        from combspace.product.space import ProductSpace  # noqa: PLC0415

        return ProductSpace.from_config(dimensions, self.sampling)
