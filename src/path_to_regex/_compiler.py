"""Pattern compiler: route template → RE2 pattern string + parameter keys.

The compiler runs a single left-to-right scan over the percent-encoded
pattern. At each position the token kinds are tried in a fixed order:

| Kind     | Syntax                 | Emitted fragment                 |
|----------|------------------------|----------------------------------|
| OPTIONAL | ``{inner}``            | ``(?:<compiled inner>)?``        |
| REQUIRED | ``:name`` / ``:name(re)`` | ``([^\\<sep>]+?)`` / ``(re)``  |
| WILDCARD | ``*name``              | ``(\\S+?)``                      |
| ESCAPED  | one of ``SPECIAL_CHARS`` | the character, backslash-escaped |

Anything else is LITERAL text and is copied through unchanged. Optional
groups recurse into the same compiler and share one key list, so key index
``i`` always binds to capturing group ``i + 1``.
"""

from __future__ import annotations

import enum
import string
from dataclasses import dataclass
from typing import TYPE_CHECKING

from path_to_regex._codec import percent_decode, percent_encode

if TYPE_CHECKING:
    from collections.abc import Iterator

# Characters with regex meaning that must be matched literally.
SPECIAL_CHARS = frozenset(".^$*+?()|[]{}\\")

# Parameter names are word characters plus '%', so percent-encoded
# non-ASCII names survive the scan intact.
_NAME_CHARS = frozenset(string.ascii_letters + string.digits + "_%")

DEFAULT_SEPARATOR = "/"


class TokenKind(enum.Enum):
    LITERAL = "literal"
    OPTIONAL = "optional"
    REQUIRED = "required"
    WILDCARD = "wildcard"
    ESCAPED = "escaped"


@dataclass(frozen=True, slots=True)
class Token:
    """One lexical unit of an encoded pattern.

    ``value`` holds the literal text, the optional group's inner text, the
    (still encoded) parameter name, or the escaped character, depending on
    ``kind``. ``custom`` is the parenthesized sub-pattern of a REQUIRED
    token, parentheses included.
    """

    kind: TokenKind
    start: int
    end: int
    value: str
    custom: str | None = None


def find_separator(pattern: str) -> str:
    """Return the segment separator governing ``pattern``.

    The first of ``'/'`` or ``'\\'`` wins. A pattern containing neither
    uses ``'/'``.
    """
    slash = pattern.find("/")
    backslash = pattern.find("\\")
    if slash == -1:
        slash = len(pattern)
    if backslash == -1:
        backslash = len(pattern)
    return "/" if slash <= backslash else "\\"


def tokenize(text: str) -> Iterator[Token]:
    """Split an encoded pattern into tokens, left to right, non-overlapping."""
    literal_start = 0
    pos = 0
    n = len(text)
    while pos < n:
        token = _match_token(text, pos)
        if token is None:
            pos += 1
            continue
        if literal_start < pos:
            yield Token(TokenKind.LITERAL, literal_start, pos, text[literal_start:pos])
        yield token
        pos = literal_start = token.end
    if literal_start < n:
        yield Token(TokenKind.LITERAL, literal_start, n, text[literal_start:])


def _match_token(text: str, pos: int) -> Token | None:
    """Classify the token starting at ``pos``, or None for literal text."""
    ch = text[pos]

    if ch == "{":
        close = text.find("}", pos + 1)
        if close != -1:
            return Token(TokenKind.OPTIONAL, pos, close + 1, text[pos + 1 : close])

    if ch == ":":
        name_end = _scan_name(text, pos + 1)
        if name_end > pos + 1:
            end = name_end
            custom = None
            if name_end < len(text) and text[name_end] == "(":
                close = text.find(")", name_end + 1)
                # An empty "()" is not a sub-pattern.
                if close > name_end + 1:
                    custom = text[name_end : close + 1]
                    end = close + 1
            return Token(TokenKind.REQUIRED, pos, end, text[pos + 1 : name_end], custom)

    if ch == "*":
        name_end = _scan_name(text, pos + 1)
        if name_end > pos + 1:
            return Token(TokenKind.WILDCARD, pos, name_end, text[pos + 1 : name_end])

    if ch in SPECIAL_CHARS:
        return Token(TokenKind.ESCAPED, pos, pos + 1, ch)

    return None


def _scan_name(text: str, pos: int) -> int:
    while pos < len(text) and text[pos] in _NAME_CHARS:
        pos += 1
    return pos


def compile_fragment(text: str, keys: list[str], separator: str) -> str:
    """Compile an encoded (sub-)pattern, appending parameter names to ``keys``."""
    parts: list[str] = []
    for token in tokenize(text):
        match token.kind:
            case TokenKind.LITERAL:
                parts.append(token.value)
            case TokenKind.OPTIONAL:
                inner = compile_fragment(token.value, keys, separator)
                if inner:
                    parts.append(f"(?:{inner})?")
            case TokenKind.REQUIRED:
                keys.append(percent_decode(token.value))
                if token.custom is None:
                    parts.append(f"([^\\{separator}]+?)")
                else:
                    parts.append(token.custom)
            case TokenKind.WILDCARD:
                keys.append(percent_decode(token.value))
                parts.append(r"(\S+?)")
            case TokenKind.ESCAPED:
                parts.append("\\" + token.value)
    return "".join(parts)


def make_pattern(pattern: str) -> tuple[str, tuple[str, ...]]:
    """Compile a raw route pattern into an anchored RE2 pattern and its keys.

    The result always ends with an optional separator before the end
    anchor, so a trailing separator in a path is never significant.

    >>> make_pattern("/:foo/:bar")
    ('^/([^\\\\/]+?)/([^\\\\/]+?)\\\\/?$', ('foo', 'bar'))
    """
    keys: list[str] = []
    separator = find_separator(pattern)
    body = compile_fragment(percent_encode(pattern), keys, separator)
    if not body or body[-1] != separator:
        body += "\\" + separator
    return f"^{body}?$", tuple(keys)
