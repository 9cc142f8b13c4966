"""YAML/dict config loader for substitution rule sets.

Supports loading from a YAML file or a plain dict (for embedding in a
larger config).  Rules are applied in order, each to the output of the
previous one.

Example YAML:

    regsubst:
      rules:
        - name: third-octet
          pattern: '^(\\d+)\\.(\\d+)\\.(\\d+)\\.(\\d+)$'
          replacement: '\\3'
        - name: animals
          pattern: 'cat|dog'
          flags: G
          replacement:
            cat: feline
            dog: canine
"""

from __future__ import annotations
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from .substitute import Replacement, Substituter
from .types import Target

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Rule:
    """One pattern/replacement/flags triple from a rule set."""
    pattern: str
    replacement: Replacement
    flags: str | None = None
    name: str = ""


@dataclass
class RuleSet:
    """Ordered rules, each compiled once and applied in sequence."""

    rules: list[Rule] = field(default_factory=list)
    _substituters: list[Substituter] = field(init=False, repr=False, default_factory=list)

    def __post_init__(self) -> None:
        self._substituters = [
            Substituter.from_flags(r.pattern, r.replacement, r.flags) for r in self.rules
        ]

    def apply(self, target: Target) -> Target:
        for rule, sub in zip(self.rules, self._substituters):
            logger.debug("Applying rule %s", rule.name or rule.pattern)
            target = sub.apply(target)
        return target


def _parse_rule(index: int, data: Any) -> Rule:
    if not isinstance(data, Mapping):
        raise ValueError(f"rule {index}: expected a mapping, got {type(data).__name__}")
    if "pattern" not in data or "replacement" not in data:
        raise ValueError(f"rule {index}: 'pattern' and 'replacement' are required")

    pattern = data["pattern"]
    replacement = data["replacement"]
    flags = data.get("flags")
    if not isinstance(pattern, str):
        raise ValueError(f"rule {index}: pattern must be a string")
    if isinstance(replacement, Mapping):
        if not all(isinstance(k, str) and isinstance(v, str) for k, v in replacement.items()):
            raise ValueError(f"rule {index}: replacement mapping keys and values must be strings")
        replacement = dict(replacement)
    elif not isinstance(replacement, str):
        raise ValueError(f"rule {index}: replacement must be a string or a mapping")
    if flags is not None and not isinstance(flags, str):
        raise ValueError(f"rule {index}: flags must be a string")

    return Rule(
        pattern=pattern,
        replacement=replacement,
        flags=flags,
        name=str(data.get("name", "")),
    )


def load_config(data: Mapping[str, Any]) -> list[Rule]:
    """Normalize a config dict (from YAML or inline) into rules."""
    if not isinstance(data, Mapping):
        raise ValueError("config must be a mapping")
    # Support nested under "regsubst" key or flat
    if "regsubst" in data:
        data = data["regsubst"] or {}
        if not isinstance(data, Mapping):
            raise ValueError("config must be a mapping")

    raw_rules = data.get("rules") or []
    if not isinstance(raw_rules, list):
        raise ValueError("'rules' must be a list")
    return [_parse_rule(i, r) for i, r in enumerate(raw_rules)]


def load_from_yaml(path: str | Path) -> list[Rule]:
    """Load rules from a YAML file."""
    with open(Path(path).expanduser()) as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"invalid YAML in {path}: {e}") from e
    rules = load_config(data)
    logger.info("Loaded %d rule(s) from %s", len(rules), path)
    return rules


def create_rule_set(config: Mapping[str, Any] | str | Path) -> RuleSet:
    """Build a RuleSet from a config dict or a YAML file path."""
    if isinstance(config, (str, Path)):
        return RuleSet(load_from_yaml(config))
    return RuleSet(load_config(config))
