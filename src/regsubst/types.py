"""Core types."""

from __future__ import annotations
import enum
import re
from dataclasses import dataclass, field
from typing import Any


class ReplaceMode(enum.Enum):
    """How many matches per string get replaced."""
    FIRST = "first"
    ALL = "all"


class CompileOption(enum.Flag):
    """Compile-time regex options selected by the E, I and M flags."""
    NONE = 0
    EXTENDED = enum.auto()
    IGNORECASE = enum.auto()
    MULTILINE = enum.auto()

    def to_re(self) -> int:
        """Translate to ``re`` module flags.

        ^ and $ always anchor at line breaks; MULTILINE only lets . match newlines.
        """
        value = re.MULTILINE
        if self & CompileOption.EXTENDED:
            value |= re.VERBOSE
        if self & CompileOption.IGNORECASE:
            value |= re.IGNORECASE
        if self & CompileOption.MULTILINE:
            value |= re.DOTALL
        return value

    def letters(self) -> str:
        """The E/I/M flag letters that select these options."""
        return "".join(letter for letter, option in FLAG_LETTERS.items() if self & option)


FLAG_LETTERS: dict[str, CompileOption] = {
    "E": CompileOption.EXTENDED,
    "I": CompileOption.IGNORECASE,
    "M": CompileOption.MULTILINE,
}


@dataclass(frozen=True, slots=True)
class ParsedFlags:
    """Result of interpreting a flag string."""
    options: CompileOption = CompileOption.NONE
    mode: ReplaceMode = ReplaceMode.FIRST


@dataclass(frozen=True, slots=True)
class Sensitive:
    """Wrapper for a value that must never appear in plaintext output.

    ``repr`` and ``str`` hide the value; call ``unwrap()`` to get it back.
    """
    _value: Any = field(repr=False)

    def unwrap(self) -> Any:
        return self._value

    def __repr__(self) -> str:
        return "Sensitive [value redacted]"

    __str__ = __repr__


# str | list/tuple of Target | Sensitive(Target)
Target = str | list | tuple | Sensitive
