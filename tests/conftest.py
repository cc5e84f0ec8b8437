"""Shared test fixtures for the hapolicy test suite."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pytest

from hapolicy.glob import compile_pattern


@pytest.fixture(autouse=True)
def _clear_pattern_cache() -> Iterator[None]:
    """Start every test with an empty compiled-pattern cache."""
    compile_pattern.cache_clear()
    yield
    compile_pattern.cache_clear()


@pytest.fixture
def config_yaml(tmp_path: Path) -> str:
    """Write a sample config YAML file and return its path."""
    content = """
glob:
  limits:
    max_pattern_length: 64
    max_candidate_length: 128
"""
    yaml_file = tmp_path / "hapolicy.yaml"
    yaml_file.write_text(content)
    return str(yaml_file)
