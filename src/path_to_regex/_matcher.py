"""PathMatcher: a compiled route pattern.

The generated pattern is compiled with ``google-re2`` at construction time,
which gives linear-time matching no matter what custom sub-patterns a
pattern splices in. RE2 rejects backreferences and lookaround, so
``:name(re)`` sub-patterns must stay within RE2 syntax.

A PathMatcher is immutable after construction and the compiled RE2 object
is safe for concurrent use, so one matcher can be shared across threads.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

import re2

from path_to_regex._codec import percent_decode, percent_encode
from path_to_regex._compiler import make_pattern

if TYPE_CHECKING:
    from collections.abc import Mapping

    from path_to_regex._types import MatchingData

logger = logging.getLogger(__name__)

MAX_PATTERN_LENGTH = 8192


class MatcherError(Exception):
    """Base class for errors raised while building a matcher."""


class PatternError(MatcherError):
    """The generated pattern is not valid RE2 syntax."""

    def __init__(self, pattern: str, regex: str, reason: str) -> None:
        self.pattern = pattern
        self.regex = regex
        super().__init__(f"invalid path pattern {pattern!r} (compiled to {regex!r}): {reason}")


class PatternTooLongError(MatcherError):
    """A path pattern exceeds the length limit."""

    def __init__(self, length: int, max_: int) -> None:
        self.length = length
        self.max = max_
        super().__init__(f"pattern length {length} exceeds maximum {max_}")


class CaseSensitivity(enum.Enum):
    """Whether letter case is significant when matching paths."""

    CASE_SENSITIVE = "case_sensitive"
    CASE_INSENSITIVE = "case_insensitive"


_EMPTY_PARAMS: Mapping[str, str] = MappingProxyType({})


@dataclass(frozen=True, slots=True)
class MatchResult:
    """Outcome of matching one path.

    ``params`` is only populated when ``matched`` is True. If a parameter
    name repeats in the pattern, the later capture wins.
    """

    matched: bool
    params: Mapping[str, str] = field(default_factory=lambda: _EMPTY_PARAMS)

    def __bool__(self) -> bool:
        return self.matched


@dataclass(frozen=True, slots=True)
class PathMatcher:
    """A route pattern compiled for matching and parameter extraction.

    Use ``compile()`` rather than constructing this directly.

    Attributes:
        source: The pattern text exactly as the caller supplied it.
        regex: The generated, anchored RE2 pattern.
        keys: Parameter names; ``keys[i]`` binds to capturing group ``i + 1``.
        sensitivity: Case sensitivity used for matching.

    Raises:
        PatternError: If ``regex`` does not compile, or its capturing groups
            do not line up one-to-one with ``keys``.
    """

    source: str
    regex: str
    keys: tuple[str, ...]
    sensitivity: CaseSensitivity = CaseSensitivity.CASE_SENSITIVE
    _compiled: re2._Regexp = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        options = re2.Options()
        options.case_sensitive = self.sensitivity is CaseSensitivity.CASE_SENSITIVE
        options.log_errors = False
        try:
            compiled = re2.compile(self.regex, options)
        except re2.error as e:
            logger.debug("failed to compile %r to %r: %s", self.source, self.regex, e)
            raise PatternError(self.source, self.regex, str(e)) from e
        if compiled.groups != len(self.keys):
            reason = f"{compiled.groups} capturing groups for {len(self.keys)} parameters"
            raise PatternError(self.source, self.regex, reason)
        object.__setattr__(self, "_compiled", compiled)

    def match(self, path: str) -> MatchResult:
        """Match a whole path and extract its parameters.

        Never raises; a path that does not fit the pattern gives
        ``MatchResult(matched=False)``. Parameters inside an optional group
        that did not participate come back as empty strings.
        """
        m = self._compiled.fullmatch(percent_encode(path))
        if m is None:
            return MatchResult(matched=False)
        params: dict[str, str] = {}
        for index, key in enumerate(self.keys, start=1):
            params[key] = percent_decode(m.group(index) or "")
        return MatchResult(matched=True, params=MappingProxyType(params))

    def matches(self, value: MatchingData, /) -> bool:
        if not isinstance(value, str):
            return False
        return self._compiled.fullmatch(percent_encode(value)) is not None

    def pattern(self) -> str:
        """Return the original pattern text this matcher was compiled from."""
        return self.source


def compile(  # noqa: A001
    pattern: str,
    sensitivity: CaseSensitivity = CaseSensitivity.CASE_SENSITIVE,
) -> PathMatcher:
    """Compile a route pattern into a PathMatcher.

    Supported syntax: ``:name`` (one segment), ``:name(re)`` (custom RE2
    sub-pattern), ``*name`` (one or more segments) and ``{...}`` (optional
    group). A trailing separator in matched paths is always optional.

    >>> m = compile("/api/v1/download/:file{.:ext}")
    >>> dict(m.match("/api/v1/download/archive.zip").params)
    {'file': 'archive', 'ext': 'zip'}

    Raises:
        PatternTooLongError: If the pattern exceeds MAX_PATTERN_LENGTH.
        PatternError: If a custom sub-pattern is not valid RE2 syntax.
    """
    if len(pattern) > MAX_PATTERN_LENGTH:
        raise PatternTooLongError(len(pattern), MAX_PATTERN_LENGTH)
    regex, keys = make_pattern(pattern)
    logger.debug("compiled %r to %r with keys %r", pattern, regex, keys)
    return PathMatcher(source=pattern, regex=regex, keys=keys, sensitivity=sensitivity)
