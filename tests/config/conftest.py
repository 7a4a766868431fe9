"""Pytest fixtures for config module tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest


@pytest.fixture
def sample_yaml_file(tmp_path: Path) -> Path:
    """Create a sample YAML config file for testing.

    Parameters
    ----------
    tmp_path : Path
        Temporary directory path provided by pytest.

    Returns
    -------
    Path
        Path to the created YAML config file.
    """
    config_file = tmp_path / "config.yaml"
    config_file.write_text(
        """
profile: test
sampling:
  seed: 7
  sample_size: 25
logging:
  level: DEBUG
"""
    )
    return config_file


@pytest.fixture
def malformed_yaml_file(tmp_path: Path) -> Path:
    """Create a malformed YAML file for testing.

    Parameters
    ----------
    tmp_path : Path
        Temporary directory path provided by pytest.

    Returns
    -------
    Path
        Path to the created malformed YAML file.
    """
    config_file = tmp_path / "bad.yaml"
    config_file.write_text("profile: test\n  sampling:\n    seed: [not valid")
    return config_file


@pytest.fixture
def env_vars(monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    """Set up test environment variables.

    Parameters
    ----------
    monkeypatch : pytest.MonkeyPatch
        Pytest monkeypatch fixture for modifying environment.

    Returns
    -------
    dict[str, str]
        Dictionary of environment variables that were set.
    """
    test_vars = {
        "COMBSPACE_LOGGING__LEVEL": "ERROR",
        "COMBSPACE_SAMPLING__SEED": "99",
        "COMBSPACE_SAMPLING__SAMPLE_SIZE": "3",
    }
    for key, value in test_vars.items():
        monkeypatch.setenv(key, value)
    return test_vars


@pytest.fixture
def package_logger() -> Iterator[logging.Logger]:
    """Provide the combspace logger and restore its state afterwards.

    Yields
    ------
    logging.Logger
        The ``combspace`` package logger.
    """
    logger = logging.getLogger("combspace")
    level = logger.level
    handlers = list(logger.handlers)
    yield logger
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(level)
