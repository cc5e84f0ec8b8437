"""Configuration loading and validation."""

from __future__ import annotations

import logging
import os
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, PositiveInt, ValidationError

from hapolicy.errors import ConfigError, ConfigNotFoundError, MatchLimitExceededError

__all__ = ["Config", "MatchLimits", "DEFAULT_MAX_LENGTH", "DEFAULT_LIMITS"]

DEFAULT_MAX_LENGTH = 1024

_logger = logging.getLogger("hapolicy.config")


class Config:
    """Configuration accessor with dot-path key support."""

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = data or {}
        self._yaml_path: str | None = None

    @classmethod
    def load(cls, yaml_path: str) -> Config:
        """Load configuration from a YAML file.

        Args:
            yaml_path: Path to the YAML configuration file.

        Returns:
            A new Config wrapping the parsed mapping.

        Raises:
            ConfigNotFoundError: If the file does not exist.
            ConfigError: If the YAML is invalid or is not a mapping.
        """
        if not os.path.isfile(yaml_path):
            raise ConfigNotFoundError(config_path=yaml_path)

        with open(yaml_path) as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigError(f"Invalid YAML in {yaml_path}: {e}", cause=e) from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(
                f"Config must be a mapping, got {type(data).__name__}"
            )

        _logger.debug("Loaded config from %s", yaml_path)
        config = cls(data)
        config._yaml_path = yaml_path
        return config

    @property
    def path(self) -> str | None:
        """The YAML file this config was loaded from, if any."""
        return self._yaml_path

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value by dot-path key."""
        parts = key.split(".")
        current: Any = self._data
        for part in parts:
            if isinstance(current, dict) and part in current:
                current = current[part]
            else:
                return default
        return current


class MatchLimits(BaseModel):
    """Upper bounds on input size accepted by the matcher.

    Lengths are counted in Unicode code points. ``None`` disables a bound.

    Matching costs O(pattern length * candidate length) comparisons, so the
    worst case grows with the product of both bounds. At the defaults of
    1024 a pattern such as ``"*a" * 512`` against a non-matching candidate
    of 1024 characters fills about a million table cells; raising both
    bounds to 4096 costs sixteen times that.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    max_pattern_length: PositiveInt | None = DEFAULT_MAX_LENGTH
    max_candidate_length: PositiveInt | None = DEFAULT_MAX_LENGTH

    @classmethod
    def from_config(cls, config: Config) -> MatchLimits:
        """Build limits from the ``glob.limits`` section of a Config.

        Raises:
            ConfigError: If the section is not a mapping or holds invalid values.
        """
        section = config.get("glob.limits", {})
        if section is None:
            section = {}
        if not isinstance(section, dict):
            raise ConfigError(
                f"'glob.limits' must be a mapping, got {type(section).__name__}"
            )
        try:
            return cls.model_validate(section)
        except ValidationError as e:
            raise ConfigError(f"Invalid 'glob.limits': {e}", cause=e) from e

    @classmethod
    def unbounded(cls) -> MatchLimits:
        """Limits that accept inputs of any length."""
        return cls(max_pattern_length=None, max_candidate_length=None)

    def check_pattern(self, pattern: str) -> None:
        """Raise MatchLimitExceededError if ``pattern`` is too long."""
        _check_length("pattern", pattern, self.max_pattern_length)

    def check_candidate(self, candidate: str) -> None:
        """Raise MatchLimitExceededError if ``candidate`` is too long."""
        _check_length("candidate", candidate, self.max_candidate_length)


def _check_length(subject: str, value: str, limit: int | None) -> None:
    if limit is not None and len(value) > limit:
        _logger.warning(
            "Rejecting %s of length %d: limit is %d", subject, len(value), limit
        )
        raise MatchLimitExceededError(subject=subject, length=len(value), limit=limit)


DEFAULT_LIMITS = MatchLimits()
