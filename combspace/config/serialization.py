"""Configuration serialization to YAML format."""

from pathlib import Path
from typing import Any

import yaml

from combspace.config.config import CombspaceConfig
from combspace.config.defaults import get_default_config


def config_to_dict(
    config: CombspaceConfig, include_defaults: bool = False
) -> dict[str, Any]:
    """Convert a configuration to a dictionary for YAML serialization.

    Parameters
    ----------
    config : CombspaceConfig
        Configuration to convert.
    include_defaults : bool
        Whether to include values equal to the defaults.

    Returns
    -------
    dict[str, Any]
        Dictionary representation suitable for YAML; paths become strings.
    """
    config_dict: dict[str, Any] = config.model_dump(mode="json")

    if not include_defaults:
        default_dict: dict[str, Any] = get_default_config().model_dump(mode="json")
        config_dict = _remove_defaults(config_dict, default_dict)

    return config_dict


def _remove_defaults(
    config_dict: dict[str, Any], default_dict: dict[str, Any]
) -> dict[str, Any]:
    """Remove values that match defaults, recursing into sections."""
    result: dict[str, Any] = {}
    for key, value in config_dict.items():
        if key not in default_dict:
            result[key] = value
        elif isinstance(value, dict) and isinstance(default_dict[key], dict):
            nested = _remove_defaults(value, default_dict[key])  # type: ignore[arg-type]
            if nested:
                result[key] = nested
        elif value != default_dict[key]:
            result[key] = value
    return result


def to_yaml(config: CombspaceConfig, include_defaults: bool = False) -> str:
    """Serialize configuration to a YAML string.

    Parameters
    ----------
    config : CombspaceConfig
        Configuration to serialize.
    include_defaults : bool
        If True, include all fields even if they have default values.

    Returns
    -------
    str
        YAML representation of configuration.

    Examples
    --------
    >>> from combspace.config import get_profile
    >>> "seed: 42" in to_yaml(get_profile("test"))
    True
    """
    config_dict = config_to_dict(config, include_defaults=include_defaults)
    return yaml.dump(
        config_dict,
        default_flow_style=False,
        sort_keys=True,
        allow_unicode=True,
        indent=2,
    )


def save_yaml(
    config: CombspaceConfig,
    path: Path | str,
    include_defaults: bool = False,
    create_dirs: bool = True,
) -> None:
    """Save configuration to a YAML file.

    Parameters
    ----------
    config : CombspaceConfig
        Configuration to save.
    path : Path | str
        Path where the YAML file should be saved.
    include_defaults : bool
        If True, include all fields even if they have default values.
    create_dirs : bool
        If True, create parent directories if they don't exist.

    Raises
    ------
    FileNotFoundError
        If create_dirs is False and the parent directory doesn't exist.
    OSError
        If the file cannot be written.
    """
    path = Path(path)

    if create_dirs:
        path.parent.mkdir(parents=True, exist_ok=True)
    elif not path.parent.exists():
        raise FileNotFoundError(
            f"Parent directory does not exist: {path.parent}. "
            f"Set create_dirs=True to create it automatically."
        )

    yaml_str = to_yaml(config, include_defaults=include_defaults)
    try:
        with open(path, "w") as f:
            f.write(yaml_str)
    except OSError as e:
        raise OSError(f"Failed to write YAML file {path}: {e}") from e
