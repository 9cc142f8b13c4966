"""Shared fixtures for regsubst tests."""

import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from regsubst.matcher import clear_cache  # noqa: E402


@pytest.fixture(autouse=True)
def fresh_matcher_cache():
    clear_cache()
    yield
    clear_cache()


@pytest.fixture
def rules_yaml(tmp_path):
    """A two-rule YAML rule set on disk."""
    path = tmp_path / "rules.yaml"
    path.write_text(
        r"""
regsubst:
  rules:
    - name: digits
      pattern: '[0-9]+'
      replacement: '<\0>'
      flags: G
    - name: animals
      pattern: 'cat|dog'
      flags: G
      replacement:
        cat: feline
        dog: canine
"""
    )
    return path
