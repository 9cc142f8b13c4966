"""Substituter — the main API.  Flags, then matcher, then a shape-preserving walk.

Usage:
    from regsubst import substitute, Sensitive

    substitute("192.168.1.5", r"^(\\d+)\\.(\\d+)\\.(\\d+)\\.(\\d+)$", r"\\3")
    # "1"

    substitute(["a1", "b2"], r"[0-9]+", r"<\\0>", "G")
    # ["a<1>", "b<2>"]

    substitute(Sensitive("pw=hunter2"), r"=.*", "=***")
    # Sensitive [value redacted]   (unwraps to "pw=***")

    sub = Substituter.from_flags(r"cat|dog", {"cat": "feline"}, "G")
    sub.apply("catdog")          # "felinedog"
"""

from __future__ import annotations
import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Callable

from .flags import parse_flags
from .matcher import build_matcher
from .template import Template
from .types import ReplaceMode, Sensitive, Target

logger = logging.getLogger(__name__)

Replacement = str | Mapping[str, str]


def _lookup(table: Mapping[str, str]) -> Callable[[re.Match], str]:
    def replace(m: re.Match) -> str:
        text = m.group(0)
        # Matches that aren't keys stay as they were
        return table.get(text, text)
    return replace


def _expander(template: Template) -> Callable[[re.Match], str]:
    if template.is_literal:
        literal = template.parts[0][1] if template.parts else ""
        return lambda m: literal
    return template.expand


@dataclass(frozen=True)
class Substituter:
    """A compiled matcher, a replace mode and a prepared replacement.

    Build one with ``from_flags`` and reuse it across targets; it holds no
    mutable state.
    """

    matcher: re.Pattern
    mode: ReplaceMode
    replace: Callable[[re.Match], str]

    @classmethod
    def from_flags(
        cls,
        pattern: str | re.Pattern,
        replacement: Replacement,
        flags: str | None = None,
    ) -> "Substituter":
        parsed = parse_flags(flags)
        matcher = build_matcher(pattern, parsed.options)

        if isinstance(replacement, str):
            template = Template.parse(replacement)
            template.validate(matcher)
            replace = _expander(template)
        elif isinstance(replacement, Mapping):
            replace = _lookup(replacement)
        else:
            raise TypeError(
                f"replacement must be str or mapping, not {type(replacement).__name__}"
            )
        return cls(matcher=matcher, mode=parsed.mode, replace=replace)

    def apply(self, target: Target) -> Target:
        """Substitute within ``target``, returning a value of the same shape."""
        if isinstance(target, str):
            return self.apply_string(target)
        if isinstance(target, Sensitive):
            logger.debug("Substituting inside a sensitive value")
            return Sensitive(self.apply(target.unwrap()))
        if isinstance(target, (list, tuple)):
            return type(target)(self.apply(item) for item in target)
        raise TypeError(
            f"target must be str, list, tuple or Sensitive, not {type(target).__name__}"
        )

    def apply_string(self, text: str) -> str:
        count = 0 if self.mode is ReplaceMode.ALL else 1
        return self.matcher.sub(self.replace, text, count=count)


def substitute(
    target: Target,
    pattern: str | re.Pattern,
    replacement: Replacement,
    flags: str | None = None,
) -> Target:
    """Replace matches of ``pattern`` in ``target``.

    Args:
        target: A string, a list/tuple of targets, or a Sensitive wrapper
            around either.  The result has the same shape.
        pattern: Regex source, or a precompiled ``re.Pattern``.
        replacement: A backreference template, or a mapping from matched
            text to replacement text.
        flags: Any of G (replace all), E (extended), I (ignore case),
            M (multiline).  E/I/M are not allowed with a precompiled pattern.
    """
    return Substituter.from_flags(pattern, replacement, flags).apply(target)
