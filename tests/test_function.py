"""Tests for the checked regsubst() entry point."""

import re

import pytest

from regsubst import InvalidFlag, Sensitive, regsubst


def test_string_pattern_call():
    assert regsubst("192.168.1.5", r"^(\d+)\.(\d+)\.(\d+)\.(\d+)$", r"\3") == "1"


def test_precompiled_pattern_call():
    assert regsubst(["a1", "b2"], re.compile(r"([0-9]+)"), r"<\1>", "G") == ["a<1>", "b<2>"]


def test_precompiled_pattern_accepts_empty_flags():
    assert regsubst("aa", re.compile("a"), "b", "") == "ba"


def test_precompiled_pattern_only_allows_g():
    with pytest.raises(InvalidFlag):
        regsubst("a", re.compile("a"), "b", "I")


@pytest.mark.parametrize("flags", ["GX", "g", "G\n", "GG "])
def test_string_pattern_flag_charset(flags):
    with pytest.raises(InvalidFlag):
        regsubst("a", "a", "b", flags)


def test_encoding_is_deprecated_and_ignored():
    with pytest.warns(DeprecationWarning, match="encoding"):
        assert regsubst("abc", "b", "x", "G", "U") == "axc"


def test_unknown_encoding():
    with pytest.raises(ValueError):
        regsubst("abc", "b", "x", None, "Q")


def test_encoding_not_allowed_with_precompiled_pattern():
    with pytest.raises(TypeError):
        regsubst("abc", re.compile("b"), "x", "G", "U")


@pytest.mark.parametrize("target", [
    "a",
    ["a", Sensitive("b")],
    Sensitive("a"),
    Sensitive(["a", Sensitive("b")]),
])
def test_accepted_targets(target):
    regsubst(target, "a", "z")


@pytest.mark.parametrize("target", [1, None, [["a"]], ["a", 2], Sensitive(3), ("a",)])
def test_rejected_targets(target):
    with pytest.raises(TypeError):
        regsubst(target, "a", "z")


def test_rejected_replacement():
    with pytest.raises(TypeError):
        regsubst("a", "a", {"a": 1})
    with pytest.raises(TypeError):
        regsubst("a", "a", ["z"])


def test_rejected_pattern():
    with pytest.raises(TypeError):
        regsubst("a", 1, "z")


def test_sensitive_array_keeps_wrapper():
    out = regsubst(Sensitive(["a1", "b2"]), r"\d", "#", "G")
    assert out == Sensitive(["a#", "b#"])
