"""Errors raised by the substitution engine."""

from __future__ import annotations


class SubstitutionError(Exception):
    """Base class for every error raised by regsubst."""


class PatternCompileError(SubstitutionError):
    """Raised when a pattern string is not a valid regular expression.

    Args:
        pattern: The pattern source that failed to compile.
        reason: The compiler's diagnostic.
    """

    def __init__(self, pattern: str, reason: str) -> None:
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid pattern {pattern!r}: {reason}")


class InvalidFlag(SubstitutionError, ValueError):
    """Raised for a flag outside G/E/I/M, or one that cannot apply."""

    def __init__(self, flag: str, reason: str = "unknown flag") -> None:
        self.flag = flag
        self.reason = reason
        super().__init__(f"Invalid flag {flag!r}: {reason}")


class InvalidBackreference(SubstitutionError):
    """Raised when a template refers to a group the pattern does not define."""

    def __init__(self, reference: str, reason: str) -> None:
        self.reference = reference
        self.reason = reason
        super().__init__(f"Invalid backreference {reference!r}: {reason}")
