"""Tests for Config loading and MatchLimits validation."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from hapolicy.config import DEFAULT_LIMITS, DEFAULT_MAX_LENGTH, Config, MatchLimits
from hapolicy.errors import ConfigError, ConfigNotFoundError, ErrorCodes


# === Config ===


class TestConfig:
    """Tests for the dot-path Config accessor."""

    def test_get_nested_value(self) -> None:
        config = Config({"glob": {"limits": {"max_pattern_length": 10}}})
        assert config.get("glob.limits.max_pattern_length") == 10

    def test_get_missing_returns_default(self) -> None:
        config = Config({"glob": {}})
        assert config.get("glob.limits", "fallback") == "fallback"
        assert config.get("other") is None

    def test_get_through_non_mapping_returns_default(self) -> None:
        config = Config({"glob": 5})
        assert config.get("glob.limits", {}) == {}

    def test_empty_config(self) -> None:
        assert Config().get("glob.limits") is None


class TestConfigLoad:
    """Tests for loading Config from YAML files."""

    def test_load_valid_yaml(self, config_yaml: str) -> None:
        config = Config.load(config_yaml)
        assert config.get("glob.limits.max_pattern_length") == 64
        assert config.path == config_yaml

    def test_load_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigNotFoundError) as exc_info:
            Config.load(str(tmp_path / "missing.yaml"))
        assert exc_info.value.details["config_path"].endswith("missing.yaml")

    def test_load_invalid_yaml(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "bad.yaml"
        yaml_file.write_text("{{invalid yaml:")
        with pytest.raises(ConfigError) as exc_info:
            Config.load(str(yaml_file))
        assert exc_info.value.code == ErrorCodes.CONFIG_INVALID
        assert isinstance(exc_info.value.cause, yaml.YAMLError)
        assert exc_info.value.__cause__ is exc_info.value.cause

    def test_load_non_mapping(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "list.yaml"
        yaml_file.write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="must be a mapping"):
            Config.load(str(yaml_file))

    def test_load_empty_file(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "empty.yaml"
        yaml_file.write_text("")
        assert Config.load(str(yaml_file)).get("glob") is None


# === MatchLimits ===


class TestMatchLimits:
    """Tests for MatchLimits defaults and validation."""

    def test_defaults(self) -> None:
        limits = MatchLimits()
        assert DEFAULT_MAX_LENGTH == 1024
        assert limits.max_pattern_length == DEFAULT_MAX_LENGTH
        assert limits.max_candidate_length == DEFAULT_MAX_LENGTH
        assert DEFAULT_LIMITS == limits

    def test_default_limits_shared_by_entry_points(self) -> None:
        """The glob matcher and resource matcher use the same default instance."""
        from hapolicy import resource
        from hapolicy.glob import matcher

        assert matcher.DEFAULT_LIMITS is DEFAULT_LIMITS
        assert resource.DEFAULT_LIMITS is DEFAULT_LIMITS

    def test_unbounded(self) -> None:
        limits = MatchLimits.unbounded()
        assert limits.max_pattern_length is None
        assert limits.max_candidate_length is None

    def test_frozen_and_hashable(self) -> None:
        assert hash(MatchLimits()) == hash(MatchLimits())
        assert MatchLimits() == MatchLimits()

    def test_from_config(self, config_yaml: str) -> None:
        limits = MatchLimits.from_config(Config.load(config_yaml))
        assert limits.max_pattern_length == 64
        assert limits.max_candidate_length == 128

    def test_from_config_without_section_uses_defaults(self) -> None:
        assert MatchLimits.from_config(Config()) == MatchLimits()

    def test_from_config_null_disables_limit(self) -> None:
        config = Config({"glob": {"limits": {"max_pattern_length": None}}})
        limits = MatchLimits.from_config(config)
        assert limits.max_pattern_length is None
        assert limits.max_candidate_length == DEFAULT_MAX_LENGTH

    def test_from_config_rejects_non_positive(self) -> None:
        config = Config({"glob": {"limits": {"max_candidate_length": 0}}})
        with pytest.raises(ConfigError, match="glob.limits"):
            MatchLimits.from_config(config)

    def test_from_config_rejects_unknown_keys(self) -> None:
        config = Config({"glob": {"limits": {"max_depth": 3}}})
        with pytest.raises(ConfigError):
            MatchLimits.from_config(config)

    def test_from_config_rejects_non_mapping_section(self) -> None:
        config = Config({"glob": {"limits": [1, 2]}})
        with pytest.raises(ConfigError, match="must be a mapping"):
            MatchLimits.from_config(config)
