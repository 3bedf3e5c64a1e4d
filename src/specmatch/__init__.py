"""specmatch — composable matchers with readable messages.

All public types are exported from this module for flat imports:

    from specmatch import expect, have, have_key, not_have_pair
"""

__version__ = "0.1.0"

# Any matchers
from specmatch._any_matchers import BeEqualTo, be_equal_to, not_be_equal_to

# Config types — see specmatch._config for details
from specmatch._config import (
    AndConfig,
    ConfigParseError,
    LeafConfig,
    MatcherConfig,
    NotConfig,
    OrConfig,
    SkipConfig,
    XorConfig,
    config_depth,
    parse_matcher_config,
)

# Expectations
from specmatch._expectation import (
    ExampleSkipped,
    Expectable,
    ExpectationFailure,
    Failed,
    Outcome,
    Passed,
    Skipped,
    expect,
    expect_lazy,
    must_satisfy,
    raise_for_outcome,
)

# Map matchers
from specmatch._map_matchers import (
    HaveKey,
    HavePair,
    HaveValue,
    have_key,
    have_pair,
    have_pairs,
    have_value,
    not_have_key,
    not_have_pair,
    not_have_pairs,
    not_have_value,
)

# Matcher core
from specmatch._matcher import (
    And,
    Composed,
    Lazily,
    Matcher,
    MatcherError,
    Not,
    Or,
    OrSkip,
    SkipExample,
    When,
    matcher_depth,
    once,
    operands,
)

# Numeric matchers
from specmatch._numeric_matchers import (
    BeCloseTo,
    BeGreaterThan,
    BeGreaterThanOrEqualTo,
    BeLessThan,
    BeLessThanOrEqualTo,
    be_close_to,
    be_greater_than,
    be_greater_than_or_equal_to,
    be_less_than,
    be_less_than_or_equal_to,
)

# Partial functions
from specmatch._partial import (
    DomainFunction,
    IsDefinedAtAll,
    IsDefinedByAll,
    PartialFunction,
    be_defined_at,
    be_defined_by,
    is_defined_at_all,
    is_defined_by_all,
    partial_function,
)

# Registry — see specmatch._registry for details
from specmatch._registry import (
    MAX_DEPTH,
    MAX_OPERANDS,
    MAX_PATTERN_LENGTH,
    MAX_REGEX_PATTERN_LENGTH,
    InvalidConfigError,
    PatternTooLongError,
    Registry,
    RegistryBuilder,
    TooManyOperandsError,
    UnknownMatcherError,
    register_core_matchers,
)
from specmatch._render import describe, describe_quoted, quote, render
from specmatch._result import MatchResult

# String matchers
from specmatch._string_matchers import (
    BeEqualIgnoringCase,
    BeMatching,
    EndWith,
    Include,
    StartWith,
    be_equal_ignoring_case,
    be_matching,
    end_with,
    include,
    start_with,
)

# Grammar words
from specmatch._words import (
    ArticleMatcher,
    BeVerbMatcher,
    HaveVerbMatcher,
    NotMatcher,
    a,
    an,
    be,
    have,
    not_,
    the,
)

__all__ = [
    # Result
    "MatchResult",
    # Matcher core
    "Matcher",
    "MatcherError",
    "SkipExample",
    "And",
    "Or",
    "Not",
    "When",
    "Composed",
    "Lazily",
    "OrSkip",
    "once",
    "operands",
    "matcher_depth",
    # Rendering
    "render",
    "quote",
    "describe",
    "describe_quoted",
    # Expectations
    "Expectable",
    "Outcome",
    "Passed",
    "Failed",
    "Skipped",
    "ExpectationFailure",
    "ExampleSkipped",
    "expect",
    "expect_lazy",
    "must_satisfy",
    "raise_for_outcome",
    # Map matchers
    "HaveKey",
    "HaveValue",
    "HavePair",
    "have_key",
    "not_have_key",
    "have_value",
    "not_have_value",
    "have_pair",
    "not_have_pair",
    "have_pairs",
    "not_have_pairs",
    # Partial functions
    "PartialFunction",
    "DomainFunction",
    "IsDefinedAtAll",
    "IsDefinedByAll",
    "partial_function",
    "is_defined_at_all",
    "is_defined_by_all",
    "be_defined_at",
    "be_defined_by",
    # Any / string / numeric matchers
    "BeEqualTo",
    "be_equal_to",
    "not_be_equal_to",
    "BeEqualIgnoringCase",
    "StartWith",
    "EndWith",
    "Include",
    "BeMatching",
    "be_equal_ignoring_case",
    "start_with",
    "end_with",
    "include",
    "be_matching",
    "BeLessThan",
    "BeLessThanOrEqualTo",
    "BeCloseTo",
    "BeGreaterThan",
    "BeGreaterThanOrEqualTo",
    "be_less_than",
    "be_less_than_or_equal_to",
    "be_greater_than",
    "be_greater_than_or_equal_to",
    "be_close_to",
    # Grammar words
    "BeVerbMatcher",
    "HaveVerbMatcher",
    "ArticleMatcher",
    "NotMatcher",
    "be",
    "have",
    "the",
    "a",
    "an",
    "not_",
    # Config types
    "LeafConfig",
    "AndConfig",
    "OrConfig",
    "XorConfig",
    "NotConfig",
    "SkipConfig",
    "MatcherConfig",
    "ConfigParseError",
    "config_depth",
    "parse_matcher_config",
    # Registry
    "RegistryBuilder",
    "Registry",
    "register_core_matchers",
    "UnknownMatcherError",
    "InvalidConfigError",
    "TooManyOperandsError",
    "PatternTooLongError",
    "MAX_DEPTH",
    "MAX_OPERANDS",
    "MAX_PATTERN_LENGTH",
    "MAX_REGEX_PATTERN_LENGTH",
]
