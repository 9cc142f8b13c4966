"""``regsubst()`` — the checked entry point used by expression evaluators.

Validates argument types the way the evaluator's call signature would,
then hands off to the substitution engine.  Two call shapes:

    regsubst(target, "pattern", replacement, flags="GEIM", encoding=None)
    regsubst(target, re.compile("pattern"), replacement, flags="G")
"""

from __future__ import annotations
import re
import warnings
from collections.abc import Mapping

from .errors import InvalidFlag
from .substitute import Replacement, substitute
from .types import Sensitive, Target

_STRING_FLAGS = re.compile(r"[GEIM]*")
_REGEXP_FLAGS = re.compile(r"G?")
_ENCODINGS = frozenset("NESU")


def regsubst(
    target: Target,
    pattern: str | re.Pattern,
    replacement: Replacement,
    flags: str | None = None,
    encoding: str | None = None,
) -> Target:
    """Perform regexp replacement on a string or list of strings.

    Args:
        target: String, list of strings, or Sensitive of either.  List
            items may themselves be Sensitive strings.
        pattern: The regular expression.  Anchor it with ^ and $ yourself
            if needed.
        replacement: Template with \\0 (whole match), \\1 ... backreferences,
            or a mapping whose keys are matched text and values their
            replacement.
        flags: G for global replacement; E, I and M for extended,
            ignore-case and multiline regexps (string patterns only).
        encoding: Deprecated and ignored.  String patterns only.

    Returns:
        The substituted value, same shape as ``target``.
    """
    _check_target(target)
    _check_replacement(replacement)

    if isinstance(pattern, re.Pattern):
        if encoding is not None:
            raise TypeError("encoding is not accepted with a precompiled pattern")
        if flags is not None and not _REGEXP_FLAGS.fullmatch(flags):
            raise InvalidFlag(flags, "only G may be used with a precompiled pattern")
    elif isinstance(pattern, str):
        if flags is not None and not _STRING_FLAGS.fullmatch(flags):
            raise InvalidFlag(flags, "flags must be drawn from G, E, I and M")
        if encoding is not None:
            if encoding not in _ENCODINGS:
                raise ValueError(f"encoding must be one of N, E, S, U, not {encoding!r}")
            warnings.warn(
                "regsubst() encoding argument is ignored and will be removed in a future release",
                DeprecationWarning,
                stacklevel=2,
            )
    else:
        raise TypeError(f"pattern must be str or re.Pattern, not {type(pattern).__name__}")

    return substitute(target, pattern, replacement, flags)


def _is_item(value: object) -> bool:
    if isinstance(value, Sensitive):
        value = value.unwrap()
    return isinstance(value, str)


def _check_target(target: object) -> None:
    inner = target.unwrap() if isinstance(target, Sensitive) else target
    if isinstance(inner, str):
        return
    if isinstance(inner, list) and all(_is_item(item) for item in inner):
        return
    raise TypeError(
        "target must be a string, a list of strings, or a Sensitive of either"
    )


def _check_replacement(replacement: object) -> None:
    if isinstance(replacement, str):
        return
    if isinstance(replacement, Mapping) and all(
        isinstance(k, str) and isinstance(v, str) for k, v in replacement.items()
    ):
        return
    raise TypeError("replacement must be a string or a mapping of strings to strings")
