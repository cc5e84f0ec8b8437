"""hapolicy - Hierarchical resource pattern matching for HAPolicy tokens."""

from __future__ import annotations

# Matching
from hapolicy.glob import (
    GlobPattern,
    compile_pattern,
    matches,
    matches_glob,
    matches_segments,
    split_segments,
)

# Resources
from hapolicy.resource import Resource, matches_resource

# Config
from hapolicy.config import Config, MatchLimits

# Errors
from hapolicy.errors import (
    ConfigError,
    ConfigNotFoundError,
    ErrorCodes,
    InvalidResourceError,
    MatchLimitExceededError,
    PolicyError,
)

__version__ = "0.1.0"

__all__ = [
    # Matching
    "matches",
    "matches_segments",
    "matches_glob",
    "split_segments",
    "compile_pattern",
    "GlobPattern",
    # Resources
    "Resource",
    "matches_resource",
    # Config
    "Config",
    "MatchLimits",
    # Errors
    "ErrorCodes",
    "PolicyError",
    "ConfigError",
    "ConfigNotFoundError",
    "InvalidResourceError",
    "MatchLimitExceededError",
]
