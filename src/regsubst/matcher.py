"""Matcher builder — compiles pattern strings, passes precompiled ones through.

Compiled patterns are cached per (source, options) pair.  Cache entries
are immutable ``re.Pattern`` objects, so concurrent readers are safe.
"""

from __future__ import annotations
import functools
import logging
import re

from .errors import InvalidFlag, PatternCompileError
from .types import CompileOption

logger = logging.getLogger(__name__)

_CACHE_SIZE = 256


@functools.lru_cache(maxsize=_CACHE_SIZE)
def _compile(source: str, options: CompileOption) -> re.Pattern:
    logger.debug("Compiling pattern %r with options %s", source, options)
    try:
        return re.compile(source, options.to_re())
    except re.error as e:
        raise PatternCompileError(source, str(e)) from e


def build_matcher(
    pattern: str | re.Pattern,
    options: CompileOption = CompileOption.NONE,
) -> re.Pattern:
    """Return an executable matcher for ``pattern``.

    A precompiled pattern is used as-is with its own flags; E/I/M options
    can't be applied to it after the fact and are rejected.
    """
    if isinstance(pattern, re.Pattern):
        if options:
            raise InvalidFlag(options.letters(), "cannot be applied to a precompiled pattern")
        return pattern
    if isinstance(pattern, str):
        return _compile(pattern, options)
    raise TypeError(f"pattern must be str or re.Pattern, not {type(pattern).__name__}")


def clear_cache() -> None:
    """Drop every cached compiled pattern."""
    _compile.cache_clear()
