"""Flag interpreter — turns a G/E/I/M flag string into options and a mode."""

from __future__ import annotations

from .errors import InvalidFlag
from .types import FLAG_LETTERS, CompileOption, ParsedFlags, ReplaceMode


def parse_flags(flags: str | None) -> ParsedFlags:
    """Interpret a flag string.

    ``G`` selects global replacement; ``E``, ``I`` and ``M`` add compile
    options.  Order and repetition don't matter.  ``None`` means no flags.
    """
    if not flags:
        return ParsedFlags()

    options = CompileOption.NONE
    mode = ReplaceMode.FIRST
    for f in flags:
        if f == "G":
            mode = ReplaceMode.ALL
        elif f in FLAG_LETTERS:
            options |= FLAG_LETTERS[f]
        else:
            raise InvalidFlag(f)
    return ParsedFlags(options=options, mode=mode)
