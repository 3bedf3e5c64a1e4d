"""Matcher registry for config-driven matcher construction.

The registry maps leaf names to matcher factories so that a parsed config
tree can be compiled without caller-specific code:

- RegistryBuilder → .build() → Registry (immutable)
- Factories are plain callables: (*args, **kwargs) → Matcher
- load_matcher() walks the config tree and builds combinators

Example::

    registry = register_core_matchers(RegistryBuilder()).build()
    config = parse_matcher_config(yaml.safe_load(text))
    matcher = registry.load_matcher(config)
"""

from __future__ import annotations

import logging
import operator
from dataclasses import dataclass, field
from functools import reduce
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from specmatch import _any_matchers, _map_matchers, _numeric_matchers, _partial
from specmatch import _string_matchers
from specmatch._config import (
    AndConfig,
    LeafConfig,
    NotConfig,
    OrConfig,
    SkipConfig,
    XorConfig,
    config_depth,
)
from specmatch._matcher import Matcher, MatcherError

if TYPE_CHECKING:
    from collections.abc import Callable

    from specmatch._config import MatcherConfig

__all__ = [
    "MAX_DEPTH",
    "MAX_OPERANDS",
    "MAX_PATTERN_LENGTH",
    "MAX_REGEX_PATTERN_LENGTH",
    "InvalidConfigError",
    "PatternTooLongError",
    "Registry",
    "RegistryBuilder",
    "TooManyOperandsError",
    "UnknownMatcherError",
    "register_core_matchers",
]

logger = logging.getLogger(__name__)

# ═══════════════════════════════════════════════════════════════════════════════
# Limits
# ═══════════════════════════════════════════════════════════════════════════════

MAX_DEPTH = 32
MAX_OPERANDS = 256
MAX_PATTERN_LENGTH = 8192
MAX_REGEX_PATTERN_LENGTH = 4096

_REGEX_FACTORIES = frozenset({"be_matching"})

# ═══════════════════════════════════════════════════════════════════════════════
# Error types
# ═══════════════════════════════════════════════════════════════════════════════


class UnknownMatcherError(MatcherError):
    """A leaf name was not found in the registry."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.name = name
        self.available = sorted(available)
        if self.available:
            registered = ", ".join(self.available)
            msg = f"unknown matcher: {name!r} (registered: {registered})"
        else:
            msg = f"unknown matcher: {name!r} (no matchers are registered)"
        super().__init__(msg)


class InvalidConfigError(MatcherError):
    """A config payload was malformed or semantically invalid."""

    def __init__(self, source: str) -> None:
        self.source = source
        super().__init__(f"invalid config: {source}")


class TooManyOperandsError(MatcherError):
    """Compound config has too many children (width-based limit)."""

    def __init__(self, count: int, max_: int) -> None:
        self.count = count
        self.max = max_
        super().__init__(f"too many operands in compound: {count} exceeds maximum {max_}")


class PatternTooLongError(MatcherError):
    """A string argument exceeds the length limit."""

    def __init__(self, length: int, max_: int) -> None:
        self.length = length
        self.max = max_
        super().__init__(f"pattern length {length} exceeds maximum {max_}")


# ═══════════════════════════════════════════════════════════════════════════════
# Builder
# ═══════════════════════════════════════════════════════════════════════════════

type MatcherFactory = Callable[..., Matcher[Any]]


class RegistryBuilder:
    """Builder for constructing a Registry.

    Register matcher factories by name, then call build() to produce an
    immutable Registry. No registration is possible after build().
    """

    def __init__(self) -> None:
        self._factories: dict[str, MatcherFactory] = {}

    def matcher(self, name: str, factory: MatcherFactory) -> RegistryBuilder:
        """Register a matcher factory under ``name``."""
        self._factories[name] = factory
        return self

    def build(self) -> Registry:
        """Freeze the registry."""
        return Registry(_factories=MappingProxyType(dict(self._factories)))


def register_core_matchers(builder: RegistryBuilder) -> RegistryBuilder:
    """Register every built-in matcher factory under its function name.

    e.g. ``have_key``, ``not_have_pairs``, ``is_defined_by_all``, ``be_matching``.
    """
    return (
        builder.matcher("be_equal_to", _any_matchers.be_equal_to)
        .matcher("not_be_equal_to", _any_matchers.not_be_equal_to)
        # Map matchers
        .matcher("have_key", _map_matchers.have_key)
        .matcher("not_have_key", _map_matchers.not_have_key)
        .matcher("have_value", _map_matchers.have_value)
        .matcher("not_have_value", _map_matchers.not_have_value)
        .matcher("have_pair", _map_matchers.have_pair)
        .matcher("not_have_pair", _map_matchers.not_have_pair)
        .matcher("have_pairs", _map_matchers.have_pairs)
        .matcher("not_have_pairs", _map_matchers.not_have_pairs)
        # Numeric matchers
        .matcher("be_less_than", _numeric_matchers.be_less_than)
        .matcher("be_less_than_or_equal_to", _numeric_matchers.be_less_than_or_equal_to)
        .matcher("be_greater_than", _numeric_matchers.be_greater_than)
        .matcher("be_greater_than_or_equal_to", _numeric_matchers.be_greater_than_or_equal_to)
        .matcher("be_close_to", _numeric_matchers.be_close_to)
        # Partial functions
        .matcher("is_defined_at_all", _partial.is_defined_at_all)
        .matcher("is_defined_by_all", _partial.is_defined_by_all)
        .matcher("be_defined_at", _partial.be_defined_at)
        .matcher("be_defined_by", _partial.be_defined_by)
        # String matchers
        .matcher("be_equal_ignoring_case", _string_matchers.be_equal_ignoring_case)
        .matcher("start_with", _string_matchers.start_with)
        .matcher("end_with", _string_matchers.end_with)
        .matcher("include", _string_matchers.include)
        .matcher("be_matching", _string_matchers.be_matching)
    )


# ═══════════════════════════════════════════════════════════════════════════════
# Registry
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Registry:
    """Immutable registry of matcher factories.

    Constructed via RegistryBuilder. Use load_matcher() to compile config
    into a runtime matcher expression.
    """

    _factories: MappingProxyType[str, MatcherFactory] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def load_matcher(self, config: MatcherConfig) -> Matcher[Any]:
        """Load a matcher expression from configuration.

        Raises:
            UnknownMatcherError: leaf name not registered
            InvalidConfigError: a factory rejected its arguments
            TooManyOperandsError: too many compound children
            PatternTooLongError: string argument exceeds length limit
            MatcherError: depth exceeded
        """
        depth = config_depth(config)
        if depth > MAX_DEPTH:
            msg = f"matcher depth {depth} exceeds maximum allowed depth {MAX_DEPTH}"
            raise MatcherError(msg)
        matcher = self._load(config)
        logger.debug("loaded matcher config (depth %d): %r", depth, matcher)
        return matcher

    @property
    def matcher_count(self) -> int:
        """Number of registered matcher factories."""
        return len(self._factories)

    def contains_matcher(self, name: str) -> bool:
        return name in self._factories

    def matcher_names(self) -> list[str]:
        """Return all registered matcher names (sorted)."""
        return sorted(self._factories.keys())

    # ── Private loading methods ────────────────────────────────────────────

    def _load(self, config: MatcherConfig) -> Matcher[Any]:
        match config:
            case LeafConfig():
                matcher = self._load_leaf(config)
            case AndConfig(matchers=children):
                matcher = reduce(operator.and_, self._load_children(children))
            case OrConfig(matchers=children):
                matcher = reduce(operator.or_, self._load_children(children))
            case XorConfig(matchers=children):
                matcher = reduce(operator.xor, self._load_children(children))
            case NotConfig(matcher=inner):
                matcher = ~self._load(inner)
            case SkipConfig(matcher=inner):
                matcher = self._load(inner).or_skip()
            case _:  # pragma: no cover
                msg = f"unknown matcher config type: {type(config).__name__}"
                raise InvalidConfigError(msg)
        if config.description is not None:
            matcher = matcher.with_description(config.description)
        return matcher

    def _load_children(self, children: tuple[MatcherConfig, ...]) -> list[Matcher[Any]]:
        if len(children) > MAX_OPERANDS:
            raise TooManyOperandsError(len(children), MAX_OPERANDS)
        return [self._load(c) for c in children]

    def _load_leaf(self, config: LeafConfig) -> Matcher[Any]:
        factory = self._factories.get(config.name)
        if factory is None:
            raise UnknownMatcherError(config.name, list(self._factories.keys()))

        limit = (
            MAX_REGEX_PATTERN_LENGTH if config.name in _REGEX_FACTORIES else MAX_PATTERN_LENGTH
        )
        for arg in (*config.args, *config.kwargs.values()):
            if isinstance(arg, str) and len(arg) > limit:
                raise PatternTooLongError(len(arg), limit)

        try:
            return factory(*config.args, **config.kwargs)
        except Exception as e:
            raise InvalidConfigError(str(e)) from e
