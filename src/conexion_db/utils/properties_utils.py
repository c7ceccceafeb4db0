"""
Properties file parsing.

Supports the standard properties syntax: ``key=value``, ``key:value`` and
``key value`` entries, ``#`` and ``!`` comment lines, backslash line
continuation and the ``\\t \\n \\r \\f \\uXXXX`` escapes. When a key repeats,
the last occurrence wins.
"""

import re
from typing import Dict, Iterator, List

WHITESPACE = " \t\f"
SEPARATORS = "=:"

LINE_BREAK = re.compile(r"\r\n|\r|\n")

_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}


class PropertiesSyntaxError(ValueError):
    """Malformed escape sequence in a properties file"""


def _ends_with_continuation(line: str) -> bool:
    """A line continues when it ends with an odd number of backslashes."""
    count = len(line) - len(line.rstrip("\\"))
    return count % 2 == 1


def _logical_lines(text: str) -> Iterator[str]:
    """Join natural lines into logical lines, dropping blanks and comments."""
    natural_lines: List[str] = LINE_BREAK.split(text)
    index = 0
    while index < len(natural_lines):
        line = natural_lines[index].lstrip(WHITESPACE)
        index += 1

        if not line or line[0] in "#!":
            continue

        while _ends_with_continuation(line) and index < len(natural_lines):
            line = line[:-1] + natural_lines[index].lstrip(WHITESPACE)
            index += 1

        if _ends_with_continuation(line):
            # Continuation on the last line of the file
            line = line[:-1]

        yield line


def _unescape(raw: str) -> str:
    result = []
    index = 0
    while index < len(raw):
        char = raw[index]
        index += 1
        if char != "\\":
            result.append(char)
            continue

        if index >= len(raw):
            break

        escaped = raw[index]
        index += 1
        if escaped == "u":
            code = raw[index : index + 4]
            if len(code) != 4 or any(c not in "0123456789abcdefABCDEF" for c in code):
                raise PropertiesSyntaxError(f"Malformed \\uxxxx encoding: \\u{code}")
            result.append(chr(int(code, 16)))
            index += 4
        else:
            result.append(_ESCAPES.get(escaped, escaped))

    return "".join(result)


def _split_entry(line: str) -> tuple:
    """Split a logical line into its raw key and raw value."""
    index = 0
    length = len(line)

    while index < length:
        char = line[index]
        if char == "\\":
            index += 2
            continue
        if char in SEPARATORS or char in WHITESPACE:
            break
        index += 1

    key = line[:index]

    # Skip whitespace, at most one separator, then whitespace again
    while index < length and line[index] in WHITESPACE:
        index += 1
    if index < length and line[index] in SEPARATORS:
        index += 1
    while index < length and line[index] in WHITESPACE:
        index += 1

    return key, line[index:]


def parse_properties(text: str) -> Dict[str, str]:
    """
    Parse properties text into a dictionary.

    Args:
        text: Full content of a properties file

    Returns:
        Dict mapping each key to its last assigned value

    Raises:
        PropertiesSyntaxError: If a ``\\u`` escape is malformed
    """
    properties: Dict[str, str] = {}
    for line in _logical_lines(text):
        raw_key, raw_value = _split_entry(line)
        properties[_unescape(raw_key)] = _unescape(raw_value)
    return properties


def load_properties(path: str) -> Dict[str, str]:
    """Read and parse a properties file. OSError propagates to the caller."""
    with open(path, "r", encoding="utf-8") as f:
        return parse_properties(f.read())
