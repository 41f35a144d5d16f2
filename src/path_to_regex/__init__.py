"""path_to_regex — compile route patterns into path matchers.

All public types are exported from this module for flat imports:

    from path_to_regex import compile, CaseSensitivity

    matcher = compile("/users/:id{.:format}")
    result = matcher.match("/users/42.json")
    result.params  # {'id': '42', 'format': 'json'}
"""

import logging

__version__ = "0.1.0"

from path_to_regex._codec import percent_decode, percent_encode
from path_to_regex._compiler import (
    SPECIAL_CHARS,
    Token,
    TokenKind,
    find_separator,
    make_pattern,
    tokenize,
)
from path_to_regex._config import (
    ConfigParseError,
    PathMatcherConfig,
    load_matcher,
    parse_matcher_config,
)
from path_to_regex._matcher import (
    MAX_PATTERN_LENGTH,
    CaseSensitivity,
    MatcherError,
    MatchResult,
    PathMatcher,
    PatternError,
    PatternTooLongError,
    compile,
)
from path_to_regex._types import InputMatcher, MatchingData

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Protocols
    "InputMatcher",
    "MatchingData",
    # Matcher
    "CaseSensitivity",
    "MatchResult",
    "PathMatcher",
    "compile",
    "MAX_PATTERN_LENGTH",
    # Errors
    "MatcherError",
    "PatternError",
    "PatternTooLongError",
    # Compiler
    "SPECIAL_CHARS",
    "Token",
    "TokenKind",
    "find_separator",
    "make_pattern",
    "tokenize",
    # Codec
    "percent_encode",
    "percent_decode",
    # Config
    "PathMatcherConfig",
    "ConfigParseError",
    "parse_matcher_config",
    "load_matcher",
]
