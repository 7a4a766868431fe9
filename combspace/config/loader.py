"""Build a :class:`CombspaceConfig` from layered sources.

Layers are applied lowest precedence first: the named profile, a YAML
file, ``COMBSPACE_*`` environment variables, then keyword overrides.
Each layer is a nested dictionary that only needs the keys it changes.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import Any

import yaml

from combspace.config.config import CombspaceConfig
from combspace.config.env import load_from_env, nest_keys
from combspace.config.profiles import get_profile

logger = logging.getLogger(__name__)


def merge_configs(base: dict[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Overlay ``override`` on ``base``, merging sections key by key.

    Neither argument is modified.

    Examples
    --------
    >>> merge_configs({"a": 1, "b": {"c": 2}}, {"b": {"d": 3}})
    {'a': 1, 'b': {'c': 2, 'd': 3}}
    """
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, Mapping):
            merged[key] = merge_configs(current, value)  # type: ignore[arg-type]
        else:
            merged[key] = value
    return merged


def load_yaml_file(path: Path | str) -> dict[str, Any]:
    """Read a YAML configuration file.

    Parameters
    ----------
    path : Path | str
        File to read.

    Returns
    -------
    dict[str, Any]
        File contents. An empty file gives ``{}``.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    yaml.YAMLError
        If the file is not valid YAML.
    ValueError
        If the top level of the file is not a mapping.
    """
    path = Path(path)
    try:
        text = path.read_text()
    except FileNotFoundError:
        raise FileNotFoundError(f"Configuration file not found: {path}") from None

    try:
        content = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise yaml.YAMLError(f"Failed to parse YAML file {path}: {e}") from e

    if content is None:
        return {}
    if not isinstance(content, dict):
        raise ValueError(
            f"Configuration file {path} must contain a mapping, "
            f"not {type(content).__name__}"
        )
    return content


def _layers(
    profile: str,
    config_path: Path | str | None,
    use_env: bool,
    overrides: Mapping[str, Any],
) -> Iterator[tuple[str, dict[str, Any]]]:
    yield f"profile {profile!r}", get_profile(profile).model_dump()
    if config_path is not None:
        yield f"file {config_path}", load_yaml_file(config_path)
    if use_env:
        yield "environment", load_from_env()
    if overrides:
        yield "keyword overrides", nest_keys(overrides)


def load_config(
    config_path: Path | str | None = None,
    profile: str = "default",
    use_env: bool = False,
    **overrides: Any,
) -> CombspaceConfig:
    """Load configuration from a profile, a YAML file, and overrides.

    Parameters
    ----------
    config_path : Path | str | None
        YAML file layered over the profile. Default: None.
    profile : str
        Base profile: ``"default"``, ``"dev"`` or ``"test"``.
    use_env : bool
        Whether to layer ``COMBSPACE_*`` environment variables over the
        file. Default: False.
    **overrides : Any
        Highest-precedence values, nested with ``__``, e.g.
        ``sampling__seed=7``.

    Returns
    -------
    CombspaceConfig
        Validated configuration.

    Raises
    ------
    FileNotFoundError
        If ``config_path`` does not exist.
    yaml.YAMLError
        If the YAML file is malformed.
    ValueError
        If ``profile`` is unknown or the file is not a mapping.
    pydantic.ValidationError
        If the merged values are invalid.

    Examples
    --------
    >>> load_config(profile="dev").profile
    'dev'
    >>> load_config(profile="test", sampling__sample_size=3).sampling.seed
    42
    """
    merged: dict[str, Any] = {}
    for name, layer in _layers(profile, config_path, use_env, overrides):
        logger.debug(f"Applying configuration layer: {name} ({sorted(layer)})")
        merged = merge_configs(merged, layer)
    return CombspaceConfig.model_validate(merged)
