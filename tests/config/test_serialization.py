"""Tests for configuration serialization."""

from pathlib import Path

import pytest
import yaml

from combspace.config.config import CombspaceConfig
from combspace.config.loader import load_config
from combspace.config.logging import LoggingConfig
from combspace.config.profiles import get_profile
from combspace.config.serialization import config_to_dict, save_yaml, to_yaml


def test_config_to_dict_omits_defaults() -> None:
    """Test default values are dropped unless requested."""
    assert config_to_dict(CombspaceConfig()) == {}


def test_config_to_dict_keeps_changed_values() -> None:
    """Test only non-default values are kept."""
    result = config_to_dict(get_profile("test"))
    assert result["profile"] == "test"
    assert result["sampling"] == {"seed": 42}


def test_config_to_dict_with_defaults() -> None:
    """Test including default values."""
    result = config_to_dict(CombspaceConfig(), include_defaults=True)
    assert result["sampling"]["sample_size"] == 10
    assert result["logging"]["file"] is None


def test_paths_become_strings() -> None:
    """Test log file paths serialize as strings."""
    config = CombspaceConfig(logging=LoggingConfig(file=Path("/tmp/combspace.log")))
    assert config_to_dict(config)["logging"]["file"] == "/tmp/combspace.log"


def test_to_yaml() -> None:
    """Test YAML output parses back to the same values."""
    parsed = yaml.safe_load(to_yaml(get_profile("dev")))
    assert parsed["profile"] == "dev"
    assert parsed["logging"]["level"] == "DEBUG"


def test_config_to_yaml_method() -> None:
    """Test the model's to_yaml delegates to the serializer."""
    config = get_profile("test")
    assert config.to_yaml() == to_yaml(config)


def test_to_dict_method() -> None:
    """Test the model's to_dict includes every section."""
    assert set(CombspaceConfig().to_dict()) == {"profile", "sampling", "logging"}


def test_save_yaml_roundtrip(tmp_path: Path) -> None:
    """Test a saved configuration loads back."""
    path = tmp_path / "nested" / "combspace.yaml"
    save_yaml(get_profile("test"), path)

    loaded = load_config(config_path=path)
    assert loaded.profile == "test"
    assert loaded.sampling.seed == 42


def test_save_yaml_missing_parent(tmp_path: Path) -> None:
    """Test saving without creating parent directories."""
    with pytest.raises(FileNotFoundError, match="Parent directory does not exist"):
        save_yaml(
            CombspaceConfig(), tmp_path / "missing" / "c.yaml", create_dirs=False
        )
