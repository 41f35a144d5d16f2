"""Config types for building a PathMatcher from JSON/YAML data.

Config-driven construction path:
  dict → parse_matcher_config() → PathMatcherConfig → load_matcher() → PathMatcher

Accepted shape::

    pattern: /users/:id
    case_sensitivity: case_insensitive   # optional, default case_sensitive

``ignore_case: true`` is accepted as a shorthand for
``case_sensitivity: case_insensitive``; the two keys are mutually exclusive.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from path_to_regex._matcher import CaseSensitivity, MatcherError, PathMatcher, compile

_KNOWN_FIELDS = frozenset({"pattern", "case_sensitivity", "ignore_case"})


class ConfigParseError(MatcherError):
    """Error parsing a config dict into config types."""


@dataclass(frozen=True, slots=True)
class PathMatcherConfig:
    """Configuration for a single PathMatcher."""

    pattern: str
    sensitivity: CaseSensitivity = CaseSensitivity.CASE_SENSITIVE


def parse_matcher_config(data: dict[str, Any]) -> PathMatcherConfig:
    """Parse a dict into a PathMatcherConfig.

    Raises:
        ConfigParseError: If the dict is malformed.
    """
    if not isinstance(data, dict):
        msg = f"expected dict, got {type(data).__name__}"
        raise ConfigParseError(msg)

    unknown = sorted(set(data) - _KNOWN_FIELDS)
    if unknown:
        msg = f"unknown fields: {unknown}"
        raise ConfigParseError(msg)

    if "pattern" not in data:
        msg = "missing required field 'pattern'"
        raise ConfigParseError(msg)
    pattern = data["pattern"]
    if not isinstance(pattern, str):
        msg = f"'pattern' must be a string, got {type(pattern).__name__}"
        raise ConfigParseError(msg)

    return PathMatcherConfig(pattern=pattern, sensitivity=_parse_sensitivity(data))


def _parse_sensitivity(data: dict[str, Any]) -> CaseSensitivity:
    has_sensitivity = "case_sensitivity" in data
    has_ignore_case = "ignore_case" in data

    if has_sensitivity and has_ignore_case:
        msg = "at most one of 'case_sensitivity' or 'ignore_case' may be set, got both"
        raise ConfigParseError(msg)

    if has_ignore_case:
        ignore_case = data["ignore_case"]
        if not isinstance(ignore_case, bool):
            msg = f"'ignore_case' must be a bool, got {type(ignore_case).__name__}"
            raise ConfigParseError(msg)
        return CaseSensitivity.CASE_INSENSITIVE if ignore_case else CaseSensitivity.CASE_SENSITIVE

    if not has_sensitivity:
        return CaseSensitivity.CASE_SENSITIVE

    value = data["case_sensitivity"]
    try:
        return CaseSensitivity(value)
    except ValueError:
        expected = sorted(s.value for s in CaseSensitivity)
        msg = f"'case_sensitivity' must be one of {expected}, got {value!r}"
        raise ConfigParseError(msg) from None


def load_matcher(config: PathMatcherConfig) -> PathMatcher:
    """Compile a parsed config into a PathMatcher.

    Raises:
        MatcherError: If the pattern does not compile.
    """
    return compile(config.pattern, config.sensitivity)
