"""
Glob patterns for single path segments.

Supports a small grammar:
    *       any run of characters, including none
    ?       exactly one character
    [abc]   one character from the class; ranges like [a-z] are allowed,
            [!abc] or [^abc] negates, and a leading ] is literal

A pattern always describes one directory entry name, so nothing here
ever matches a path separator.

Example:
    compile_pattern("file.*").fullmatch("file.ext")  # match
    compile_pattern("*.py").fullmatch("pkg/mod.py")  # None
"""

import functools
import os
import re

import matchup.errors as errors

MAGIC_CHARS = frozenset("*?[")

SEPARATORS = "".join(sorted({"/", os.sep, os.altsep or "/"}))
_NOT_SEP = f"[^{re.escape(SEPARATORS)}]"


def has_magic(specifier: str) -> bool:
    """Return True if the specifier contains glob metacharacters."""
    return any(char in MAGIC_CHARS for char in specifier)


def _translate_class(pattern: str, start: int) -> tuple[str, int]:
    """
    Translate a bracket class beginning after the '[' at start - 1.

    Returns:
        Tuple of (regex fragment, index just past the closing ']')

    Raises:
        InvalidPatternError: If the class is never closed or is empty
    """
    i = start
    negate = False

    if i < len(pattern) and pattern[i] in "!^":
        negate = True
        i += 1

    body_start = i
    # A ']' directly after the opening (or the negation) is a literal
    if i < len(pattern) and pattern[i] == "]":
        i += 1

    while i < len(pattern) and pattern[i] != "]":
        i += 1

    if i >= len(pattern):
        raise errors.InvalidPatternError(
            pattern,
            f"unterminated character class at position {start - 1}",
            hint="Close the class with ']' or escape '[' as '[[]'.",
        )

    body = pattern[body_start:i]
    if not body:
        raise errors.InvalidPatternError(pattern, "empty character class")

    chunks = []
    j = 0
    while j < len(body):
        if j + 2 < len(body) and body[j + 1] == "-":
            low, high = body[j], body[j + 2]
            if low > high:
                raise errors.InvalidPatternError(
                    pattern, f"reversed range '{low}-{high}' in character class"
                )
            chunks.append(f"{re.escape(low)}-{re.escape(high)}")
            j += 3
        else:
            chunks.append(re.escape(body[j]))
            j += 1

    members = "".join(chunks)
    if negate:
        # Negated classes still never match a separator
        return f"[^{members}{re.escape(SEPARATORS)}]", i + 1

    return f"[{members}]", i + 1


def translate(pattern: str) -> str:
    """
    Translate a glob pattern into regex source for one whole segment.

    Args:
        pattern: Glob pattern, e.g. "file.*"

    Returns:
        Regex source; use with re.fullmatch semantics

    Raises:
        InvalidPatternError: If the pattern is malformed
    """
    parts = []
    i = 0

    while i < len(pattern):
        char = pattern[i]
        if char == "*":
            # Collapse runs of '*'
            while i < len(pattern) and pattern[i] == "*":
                i += 1
            parts.append(f"{_NOT_SEP}*")
            continue
        if char == "?":
            parts.append(_NOT_SEP)
        elif char == "[":
            fragment, i = _translate_class(pattern, i + 1)
            parts.append(fragment)
            continue
        else:
            parts.append(re.escape(char))
        i += 1

    return "(?s:" + "".join(parts) + ")"


@functools.lru_cache(maxsize=256)
def compile_pattern(pattern: str) -> re.Pattern[str]:
    """
    Compile a glob pattern into a regex matching a whole entry name.

    Raises:
        InvalidPatternError: If the pattern is malformed
    """
    source = translate(pattern)
    try:
        return re.compile(source)
    except re.error as e:
        raise errors.InvalidPatternError(
            pattern, "could not be compiled", cause=e
        ) from e


def fnmatch_segment(name: str, pattern: str) -> bool:
    """Return True if a single entry name matches the glob pattern."""
    return compile_pattern(pattern).fullmatch(name) is not None
