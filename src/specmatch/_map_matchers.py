"""Matchers over mappings: key, value and pair presence.

The subject is rendered as ``Map(k -> v, ...)`` while expected pairs are
rendered as ``(k,v)``:

    >>> have_key("three").evaluate({"one": 1, "two": 2}).ko_message
    "Map(one -> 1, two -> 2) doesn't have the key 'three'"

A subject that is not a mapping fails the match. Negated forms are plain
Not wrappers that reuse the same message pair with the verdict inverted.
"""

from __future__ import annotations

import operator
from collections.abc import Mapping
from dataclasses import dataclass
from functools import reduce
from typing import TYPE_CHECKING, Any

from specmatch._matcher import Matcher, MatcherError, as_pair
from specmatch._render import describe, quote
from specmatch._result import MatchResult

if TYPE_CHECKING:
    from specmatch._matcher import Subject

__all__ = [
    "HaveKey",
    "HavePair",
    "HaveValue",
    "have_key",
    "have_pair",
    "have_pairs",
    "have_value",
    "not_have_key",
    "not_have_pair",
    "not_have_pairs",
    "not_have_value",
]


def _presence(
    mapping: Any, description: str | None, found: bool, what: str
) -> MatchResult:
    subject = describe(mapping, description)
    return MatchResult(
        found,
        f"{subject} has the {what}",
        f"{subject} doesn't have the {what}",
    )


def _has_key(mapping: Any, key: Any) -> bool:
    if not isinstance(mapping, Mapping):
        return False
    try:
        return key in mapping
    except TypeError:
        # unhashable key
        return False


@dataclass(frozen=True, slots=True)
class HaveKey[K](Matcher[Mapping[K, Any]]):
    """The mapping has ``key`` among its keys."""

    key: K
    description: str | None = None

    def apply(self, subject: Subject[Mapping[K, Any]], /) -> MatchResult:
        mapping = subject()
        return _presence(
            mapping, self.description, _has_key(mapping, self.key), f"key {quote(self.key)}"
        )


@dataclass(frozen=True, slots=True)
class HaveValue[V](Matcher[Mapping[Any, V]]):
    """Some key of the mapping is bound to a value equal to ``value``."""

    value: V
    description: str | None = None

    def apply(self, subject: Subject[Mapping[Any, V]], /) -> MatchResult:
        mapping = subject()
        found = isinstance(mapping, Mapping) and any(
            v == self.value for v in mapping.values()
        )
        return _presence(mapping, self.description, found, f"value {quote(self.value)}")


@dataclass(frozen=True, slots=True)
class HavePair[K, V](Matcher[Mapping[K, V]]):
    """The mapping binds ``pair[0]`` to a value equal to ``pair[1]``.

    An absent key and a key bound to another value fail alike.
    ``noun`` is the word used in messages ("pair", or "pairs" when the
    check is one link of a have_pairs chain).

    Raises:
        MatcherError: If ``pair`` is not a two-item tuple or list.
    """

    pair: tuple[K, V]
    noun: str = "pair"
    description: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "pair", as_pair(self.pair))

    def apply(self, subject: Subject[Mapping[K, V]], /) -> MatchResult:
        mapping = subject()
        key, value = self.pair
        found = _has_key(mapping, key) and mapping[key] == value
        return _presence(mapping, self.description, found, f"{self.noun} {quote(self.pair)}")


def have_key[K](key: K) -> Matcher[Mapping[K, Any]]:
    return HaveKey(key)


def not_have_key[K](key: K) -> Matcher[Mapping[K, Any]]:
    return ~HaveKey(key)


def have_value[V](value: V) -> Matcher[Mapping[Any, V]]:
    return HaveValue(value)


def not_have_value[V](value: V) -> Matcher[Mapping[Any, V]]:
    return ~HaveValue(value)


def have_pair[K, V](pair: tuple[K, V]) -> Matcher[Mapping[K, V]]:
    return HavePair(pair)


def not_have_pair[K, V](pair: tuple[K, V]) -> Matcher[Mapping[K, V]]:
    return ~HavePair(pair)


def have_pairs[K, V](*pairs: tuple[K, V]) -> Matcher[Mapping[K, V]]:
    """Every pair is present.

    The checks are chained with ``&``, so the first missing pair ends the
    evaluation and its message surfaces. Messages always say "pairs", even
    for a single pair.

    Raises:
        MatcherError: If no pair is given, or a pair does not have two items.
    """
    if not pairs:
        msg = "have_pairs requires at least one pair"
        raise MatcherError(msg)
    checks: list[Matcher[Mapping[K, V]]] = [HavePair(pair, noun="pairs") for pair in pairs]
    return reduce(operator.and_, checks)


def not_have_pairs[K, V](*pairs: tuple[K, V]) -> Matcher[Mapping[K, V]]:
    return ~have_pairs(*pairs)
