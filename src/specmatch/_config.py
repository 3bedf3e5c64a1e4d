"""Config types for data-driven matcher construction.

Expectations can be declared as plain dicts (typically loaded from YAML or
JSON) and compiled into matcher expressions:

  dict → parse_matcher_config() → MatcherConfig → Registry.load_matcher() → Matcher

Relationship to runtime types:

| Config type      | Runtime type                     |
|------------------|----------------------------------|
| LeafConfig       | registered factory's Matcher     |
| AndConfig        | And (folded left)                |
| OrConfig         | Or (folded left)                 |
| XorConfig        | Matcher.xor (folded left)        |
| NotConfig        | Not                              |
| SkipConfig       | OrSkip                           |

Every node accepts an optional ``description``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

__all__ = [
    "AndConfig",
    "ConfigParseError",
    "LeafConfig",
    "MatcherConfig",
    "NotConfig",
    "OrConfig",
    "SkipConfig",
    "XorConfig",
    "config_depth",
    "parse_matcher_config",
]

# ═══════════════════════════════════════════════════════════════════════════════
# Config types
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class LeafConfig:
    """A matcher built by a registered factory.

    ``args`` and ``kwargs`` are passed to the factory unchanged.
    """

    name: str
    args: tuple[Any, ...] = ()
    kwargs: dict[str, Any] = field(default_factory=dict)
    description: str | None = None


@dataclass(frozen=True, slots=True)
class AndConfig:
    """All child matchers must hold (logical AND)."""

    matchers: tuple[MatcherConfig, ...]
    description: str | None = None


@dataclass(frozen=True, slots=True)
class OrConfig:
    """Any child matcher must hold (logical OR)."""

    matchers: tuple[MatcherConfig, ...]
    description: str | None = None


@dataclass(frozen=True, slots=True)
class XorConfig:
    """Exclusive or, folded left over the children."""

    matchers: tuple[MatcherConfig, ...]
    description: str | None = None


@dataclass(frozen=True, slots=True)
class NotConfig:
    """Inverts the inner matcher (logical NOT)."""

    matcher: MatcherConfig
    description: str | None = None


@dataclass(frozen=True, slots=True)
class SkipConfig:
    """Skips the example when the inner matcher fails."""

    matcher: MatcherConfig
    description: str | None = None


type MatcherConfig = LeafConfig | AndConfig | OrConfig | XorConfig | NotConfig | SkipConfig


def config_depth(config: MatcherConfig) -> int:
    """Calculate the nesting depth of a config tree."""
    match config:
        case LeafConfig():
            return 1
        case AndConfig(matchers=children) | OrConfig(matchers=children) | XorConfig(
            matchers=children
        ):
            return 1 + max((config_depth(c) for c in children), default=0)
        case NotConfig(matcher=inner) | SkipConfig(matcher=inner):
            return 1 + config_depth(inner)
        case _:  # pragma: no cover
            return 0


# ═══════════════════════════════════════════════════════════════════════════════
# Parsing (dict → config types)
# ═══════════════════════════════════════════════════════════════════════════════

_COMPOUND_TYPES = {"and": AndConfig, "or": OrConfig, "xor": XorConfig}
_WRAPPER_TYPES = {"not": NotConfig, "skip": SkipConfig}


class ConfigParseError(Exception):
    """Error parsing a config dict into config types."""


def parse_matcher_config(data: dict[str, Any]) -> MatcherConfig:
    """Parse a dict into a MatcherConfig.

    Uses the 'type' discriminant: matcher, and, or, xor, not, skip.

    Raises:
        ConfigParseError: If the dict is malformed.
    """
    if not isinstance(data, dict):
        msg = f"expected dict, got {type(data).__name__}"
        raise ConfigParseError(msg)

    node_type = data.get("type")
    if node_type is None:
        msg = "matcher config missing required field 'type'"
        raise ConfigParseError(msg)

    description = _parse_description(data)

    if node_type == "matcher":
        return _parse_leaf(data, description)
    if node_type in _COMPOUND_TYPES:
        raw_children = data.get("matchers")
        if not isinstance(raw_children, list) or not raw_children:
            msg = f"{node_type} config requires a non-empty 'matchers' list"
            raise ConfigParseError(msg)
        children = tuple(parse_matcher_config(c) for c in raw_children)
        return _COMPOUND_TYPES[node_type](matchers=children, description=description)
    if node_type in _WRAPPER_TYPES:
        if "matcher" not in data:
            msg = f"{node_type} config missing required field 'matcher'"
            raise ConfigParseError(msg)
        inner = parse_matcher_config(data["matcher"])
        return _WRAPPER_TYPES[node_type](matcher=inner, description=description)

    msg = f"unknown matcher config type: {node_type!r}"
    raise ConfigParseError(msg)


def _parse_description(data: dict[str, Any]) -> str | None:
    description = data.get("description")
    if description is not None and not isinstance(description, str):
        msg = f"description must be a string, got {type(description).__name__}"
        raise ConfigParseError(msg)
    return description


def _parse_leaf(data: dict[str, Any], description: str | None) -> LeafConfig:
    """Parse a leaf config dict: { type: matcher, name: ..., args: [...] }."""
    name = data.get("name")
    if name is None:
        msg = "matcher config missing required field 'name'"
        raise ConfigParseError(msg)
    if not isinstance(name, str):
        msg = f"name must be a string, got {type(name).__name__}"
        raise ConfigParseError(msg)

    args = data.get("args", [])
    if not isinstance(args, list):
        msg = f"args must be a list, got {type(args).__name__}"
        raise ConfigParseError(msg)

    kwargs = data.get("kwargs", {})
    if not isinstance(kwargs, dict):
        msg = f"kwargs must be a dict, got {type(kwargs).__name__}"
        raise ConfigParseError(msg)

    return LeafConfig(name=name, args=tuple(args), kwargs=kwargs, description=description)
