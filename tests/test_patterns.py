import re

import pytest

import matchup.patterns as patterns
from matchup.errors import InvalidPatternError


@pytest.mark.parametrize(
    "specifier, expected",
    [
        ("file.ext", False),
        ("file.*", True),
        ("fil?.ext", True),
        ("[ab].txt", True),
        ("", False),
    ],
)
def test_has_magic(specifier, expected):
    assert patterns.has_magic(specifier) is expected


@pytest.mark.parametrize(
    "pattern, name",
    [
        ("file.*", "file.ext"),
        ("file.*", "file."),
        ("*", ""),
        ("*", "anything"),
        ("*.py", ".py"),
        ("a*b*c", "abc"),
        ("a*b*c", "aXXbYYc"),
        ("fil?.ext", "file.ext"),
        ("[abc].txt", "b.txt"),
        ("[a-c].txt", "b.txt"),
        ("[!a-c].txt", "d.txt"),
        ("[^a-c].txt", "d.txt"),
        ("[]].txt", "].txt"),
        ("file.(ext)", "file.(ext)"),
        ("a+b.*", "a+b.c"),
    ],
)
def test_pattern_matches(pattern, name):
    assert patterns.fnmatch_segment(name, pattern)


@pytest.mark.parametrize(
    "pattern, name",
    [
        ("file.*", "other.ext"),
        ("file.*", "file"),
        ("fil?.ext", "fil.ext"),
        ("[abc].txt", "d.txt"),
        ("[!a-c].txt", "a.txt"),
        ("*.py", "mod.pyc"),
        ("file.(ext)", "file.ext"),
    ],
)
def test_pattern_rejects(pattern, name):
    assert not patterns.fnmatch_segment(name, pattern)


def test_star_never_crosses_separator():
    # Given a pattern with a star
    # When matching a name containing a separator
    # Then the separator should not be consumed
    assert not patterns.fnmatch_segment("pkg/mod.py", "*.py")
    assert not patterns.fnmatch_segment("pkg/mod.py", "pkg?mod.py")


def test_negated_class_never_matches_separator():
    assert not patterns.fnmatch_segment("a/b", "a[!x]b")


def test_translate_is_anchored_by_fullmatch():
    # Given a translated pattern
    source = patterns.translate("*.toml")

    # Then it should be usable with fullmatch only on whole names
    assert re.fullmatch(source, "pyproject.toml")
    assert re.fullmatch(source, "pyproject.toml.bak") is None


@pytest.mark.parametrize(
    "pattern, reason",
    [
        ("file.[ext", "unterminated"),
        ("[!]", "unterminated"),
        ("[z-a].txt", "reversed range"),
    ],
)
def test_invalid_patterns_raise(pattern, reason):
    with pytest.raises(InvalidPatternError, match=reason) as exc_info:
        patterns.compile_pattern(pattern)

    assert exc_info.value.pattern == pattern


def test_compile_pattern_is_cached():
    assert patterns.compile_pattern("*.cfg") is patterns.compile_pattern("*.cfg")
