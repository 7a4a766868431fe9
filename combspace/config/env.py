"""Configuration values from ``COMBSPACE_*`` environment variables.

A variable such as ``COMBSPACE_SAMPLING__SEED=7`` sets ``sampling.seed``.
Double underscores separate nesting levels and names are lowercased.
Values are read as YAML scalars, so ``7`` is an int, ``on`` is True and
``null`` clears an optional field.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any

import yaml

ENV_PREFIX = "COMBSPACE_"
KEY_SEPARATOR = "__"

_SCALAR_TYPES = (type(None), bool, int, float, str)


def parse_env_value(value: str) -> Any:
    """Read a raw environment value as a YAML scalar.

    Anything that does not load as a single scalar (mappings, flow
    sequences, text YAML rejects such as logging format strings starting
    with ``%``) is returned unchanged.

    Parameters
    ----------
    value : str
        Raw environment variable value.

    Returns
    -------
    Any
        None, bool, int, float, or str.

    Examples
    --------
    >>> parse_env_value("42")
    42
    >>> parse_env_value("on")
    True
    >>> parse_env_value("null") is None
    True
    >>> parse_env_value("%(levelname)s: %(message)s")
    '%(levelname)s: %(message)s'
    """
    if not value.strip():
        return value
    try:
        parsed = yaml.safe_load(value)
    except yaml.YAMLError:
        return value
    return parsed if isinstance(parsed, _SCALAR_TYPES) else value


def nest_keys(
    flat: Mapping[str, Any], separator: str = KEY_SEPARATOR
) -> dict[str, Any]:
    """Expand ``section__key`` names into nested dictionaries.

    Parameters
    ----------
    flat : Mapping[str, Any]
        Values keyed by dotted-path names using ``separator``.
    separator : str
        Delimiter between nesting levels. Default: ``"__"``.

    Returns
    -------
    dict[str, Any]
        Nested dictionary.

    Examples
    --------
    >>> nest_keys({"sampling__seed": 7, "profile": "dev"})
    {'sampling': {'seed': 7}, 'profile': 'dev'}
    """
    nested: dict[str, Any] = {}
    for name, value in flat.items():
        *sections, leaf = name.split(separator)
        target = nested
        for section in sections:
            target = target.setdefault(section, {})
        target[leaf] = value
    return nested


def env_to_nested_dict(env_vars: Mapping[str, str], prefix: str) -> dict[str, Any]:
    """Select prefixed variables and nest them by ``__``.

    Parameters
    ----------
    env_vars : Mapping[str, str]
        Variables to read, usually ``os.environ``.
    prefix : str
        Prefix to select and strip. Other variables are ignored.

    Returns
    -------
    dict[str, Any]
        Nested configuration dictionary.

    Examples
    --------
    >>> env_to_nested_dict({"COMBSPACE_LOGGING__LEVEL": "DEBUG"}, "COMBSPACE_")
    {'logging': {'level': 'DEBUG'}}
    """
    return nest_keys(
        {
            name.removeprefix(prefix).lower(): parse_env_value(raw)
            for name, raw in env_vars.items()
            if name.startswith(prefix)
        }
    )


def load_from_env(prefix: str = ENV_PREFIX) -> dict[str, Any]:
    """Read configuration values from the process environment.

    Parameters
    ----------
    prefix : str
        Variable prefix. Default: ``"COMBSPACE_"``.

    Returns
    -------
    dict[str, Any]
        Nested configuration dictionary.
    """
    return env_to_nested_dict(os.environ, prefix)
