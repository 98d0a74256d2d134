# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
r"""Java ``.properties`` parsing utilities.

Implements the subset of ``java.util.Properties.load`` semantics that
registration files such as ``spring.factories`` rely on:

    - ``#`` and ``!`` comment lines, blank lines
    - ``=``, ``:`` or whitespace as key/value separator
    - Backslash line continuation (leading whitespace of the continued line
      is dropped)
    - ``\t``, ``\n``, ``\r``, ``\f`` and ``\uXXXX`` escapes; any other
      escaped character stands for itself
    - Later duplicates override earlier keys

Example:
    >>> parse_properties("a.b=x,\\\n    y\n")
    {'a.b': 'x,y'}
"""

from __future__ import annotations

import re
from pathlib import Path

_COMMENT_CHARS = ("#", "!")
_SEPARATORS = ("=", ":")
_WHITESPACE = " \t\f"
_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}
_LINE_BREAK = re.compile(r"\r\n|\r|\n")
_UNICODE_ESCAPE = re.compile(r"[0-9a-fA-F]{4}")


def _ends_with_continuation(line: str) -> bool:
    """Return True if ``line`` ends with an odd number of backslashes."""
    count = len(line) - len(line.rstrip("\\"))
    return count % 2 == 1


def _logical_lines(text: str) -> list[str]:
    """Join physical lines into logical lines, dropping comments and blanks."""
    logical: list[str] = []
    buffer: str | None = None

    for raw in _LINE_BREAK.split(text):
        if buffer is None:
            line = raw.lstrip(_WHITESPACE)
            if not line or line.startswith(_COMMENT_CHARS):
                continue
        else:
            line = raw.lstrip(_WHITESPACE)

        if _ends_with_continuation(line):
            buffer = (buffer or "") + line[:-1]
            continue

        logical.append((buffer or "") + line)
        buffer = None

    if buffer is not None:
        logical.append(buffer)
    return logical


def _unescape(value: str) -> str:
    result: list[str] = []
    i = 0
    while i < len(value):
        char = value[i]
        if char != "\\" or i + 1 >= len(value):
            result.append(char)
            i += 1
            continue
        nxt = value[i + 1]
        if nxt == "u":
            hex_digits = value[i + 2 : i + 6]
            if not _UNICODE_ESCAPE.fullmatch(hex_digits):
                raise ValueError(f"Malformed \\uXXXX encoding: \\u{hex_digits}")
            result.append(chr(int(hex_digits, 16)))
            i += 6
            continue
        result.append(_ESCAPES.get(nxt, nxt))
        i += 2
    return "".join(result)


def _split_key_value(line: str) -> tuple[str, str]:
    """Split a logical line at the first unescaped separator."""
    i = 0
    while i < len(line):
        char = line[i]
        if char == "\\":
            i += 2
            continue
        if char in _SEPARATORS or char in _WHITESPACE:
            break
        i += 1

    key = line[:i]
    rest = line[i:].lstrip(_WHITESPACE)
    if rest[:1] in _SEPARATORS:
        rest = rest[1:].lstrip(_WHITESPACE)
    return _unescape(key), _unescape(rest)


def parse_properties(text: str) -> dict[str, str]:
    """Parse ``.properties`` text into an ordered key/value mapping.

    Args:
        text: Raw file content.

    Returns:
        Dict of keys to values, in first-seen key order.

    Raises:
        ValueError: If a ``\\uXXXX`` escape is malformed.
    """
    properties: dict[str, str] = {}
    for line in _logical_lines(text):
        key, value = _split_key_value(line)
        properties[key] = value
    return properties


def load_properties(path: Path) -> dict[str, str]:
    """Read and parse a ``.properties`` file.

    Properties files are ISO-8859-1 by definition; non-Latin characters are
    expected as ``\\uXXXX`` escapes.
    """
    return parse_properties(path.read_text(encoding="latin-1"))


__all__: list[str] = ["load_properties", "parse_properties"]
