"""Replacement templates with backreferences.

Supported markers:

    \\0, \\&      whole match
    \\1 .. \\9    numbered capture group
    \\k<name>    named capture group
    \\`          text before the match
    \\'          text after the match
    \\\\          a literal backslash

Any other backslash sequence is copied through unchanged.  A group that
didn't take part in a match expands to "".
"""

from __future__ import annotations
import re
from dataclasses import dataclass

from .errors import InvalidBackreference

_MARKER = re.compile(r"\\(?:(\d)|(&)|k<(\w+)>|(`)|(')|(\\))")

# Part kinds
_TEXT = "text"
_GROUP = "group"
_PRE = "pre"
_POST = "post"


@dataclass(frozen=True, slots=True)
class Template:
    """A parsed replacement template."""
    source: str
    parts: tuple[tuple[str, str | int], ...]

    @classmethod
    def parse(cls, source: str) -> "Template":
        parts: list[tuple[str, str | int]] = []
        pos = 0
        for m in _MARKER.finditer(source):
            if m.start() > pos:
                parts.append((_TEXT, source[pos:m.start()]))
            digit, amp, name, pre, post, slash = m.groups()
            if digit is not None:
                parts.append((_GROUP, int(digit)))
            elif amp is not None:
                parts.append((_GROUP, 0))
            elif name is not None:
                parts.append((_GROUP, name))
            elif pre is not None:
                parts.append((_PRE, ""))
            elif post is not None:
                parts.append((_POST, ""))
            else:
                parts.append((_TEXT, "\\"))
            pos = m.end()
        if pos < len(source):
            parts.append((_TEXT, source[pos:]))
        return cls(source=source, parts=_merge_text(parts))

    @property
    def is_literal(self) -> bool:
        return all(kind == _TEXT for kind, _ in self.parts)

    def validate(self, matcher: re.Pattern) -> None:
        """Check every group reference against ``matcher``'s groups."""
        for kind, ref in self.parts:
            if kind != _GROUP:
                continue
            if isinstance(ref, int):
                if ref > matcher.groups:
                    raise InvalidBackreference(
                        f"\\{ref}",
                        f"pattern has only {matcher.groups} group(s)",
                    )
            elif ref not in matcher.groupindex:
                raise InvalidBackreference(f"\\k<{ref}>", "no such named group")

    def expand(self, match: re.Match) -> str:
        out: list[str] = []
        for kind, ref in self.parts:
            if kind == _TEXT:
                out.append(ref)
            elif kind == _GROUP:
                out.append(match.group(ref) or "")
            elif kind == _PRE:
                out.append(match.string[:match.start()])
            else:
                out.append(match.string[match.end():])
        return "".join(out)


def _merge_text(parts: list[tuple[str, str | int]]) -> tuple[tuple[str, str | int], ...]:
    """Join adjacent literal parts."""
    merged: list[tuple[str, str | int]] = []
    for kind, value in parts:
        if kind == _TEXT and merged and merged[-1][0] == _TEXT:
            merged[-1] = (_TEXT, merged[-1][1] + value)
        else:
            merged.append((kind, value))
    return tuple(merged)
