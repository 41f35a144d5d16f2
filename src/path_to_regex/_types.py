"""Core protocols and type aliases for path_to_regex.

A compiled PathMatcher also satisfies the InputMatcher protocol, so it can
stand in anywhere a plain string matcher is accepted.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

# The erased data type. Only ``str`` can ever match a path pattern;
# everything else (None included) evaluates to False.
MatchingData = str | int | bool | bytes | None


@runtime_checkable
class InputMatcher(Protocol):
    """Match against a type-erased value."""

    def matches(self, value: MatchingData, /) -> bool: ...
