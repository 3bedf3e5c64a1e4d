"""Grammar words for fluent expectations.

    expect(ages).must(have.the.key("alice"))
    expect(ages).must(not_.have.value(3))
    expect(half).must(be.defined_at(2, 4, 6))

``be``, ``have`` and the articles are matchers that always succeed with
empty messages. Their grammar methods return the real matcher, so a word
never shows up in a verdict or a message. ``not_`` fails with empty
messages when applied on its own; its ``have`` and ``be`` words return
negated matchers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from specmatch._any_matchers import be_equal_to
from specmatch._map_matchers import have_key, have_pair, have_pairs, have_value
from specmatch._matcher import Matcher
from specmatch._numeric_matchers import (
    be_close_to,
    be_greater_than,
    be_greater_than_or_equal_to,
    be_less_than,
    be_less_than_or_equal_to,
)
from specmatch._partial import is_defined_at_all, is_defined_by_all
from specmatch._result import MatchResult
from specmatch._string_matchers import be_equal_ignoring_case, be_matching

if TYPE_CHECKING:
    from specmatch._matcher import Subject

__all__ = [
    "ArticleMatcher",
    "BeVerbMatcher",
    "HaveVerbMatcher",
    "NotMatcher",
    "a",
    "an",
    "be",
    "have",
    "not_",
    "the",
]

_INERT = MatchResult(True, "", "")


@dataclass(frozen=True, slots=True)
class _WordMatcher(Matcher[Any]):
    negated: bool = False
    description: str | None = None

    def apply(self, subject: Subject[Any], /) -> MatchResult:
        return _INERT

    def _word(self, matcher: Matcher[Any]) -> Matcher[Any]:
        return ~matcher if self.negated else matcher

    @property
    def the(self) -> ArticleMatcher:
        return ArticleMatcher(verb=self)

    @property
    def a(self) -> ArticleMatcher:
        return ArticleMatcher(verb=self)

    @property
    def an(self) -> ArticleMatcher:
        return ArticleMatcher(verb=self)


@dataclass(frozen=True, slots=True)
class HaveVerbMatcher(_WordMatcher):
    def key(self, key: Any) -> Matcher[Any]:
        return self._word(have_key(key))

    def value(self, value: Any) -> Matcher[Any]:
        return self._word(have_value(value))

    def pair(self, pair: tuple[Any, Any]) -> Matcher[Any]:
        return self._word(have_pair(pair))

    def pairs(self, *pairs: tuple[Any, Any]) -> Matcher[Any]:
        return self._word(have_pairs(*pairs))


@dataclass(frozen=True, slots=True)
class BeVerbMatcher(_WordMatcher):
    def defined_at(self, *values: Any) -> Matcher[Any]:
        return self._word(is_defined_at_all(*values))

    def defined_by(self, *pairs: tuple[Any, Any]) -> Matcher[Any]:
        return self._word(is_defined_by_all(*pairs))

    def equal_to(self, expected: Any) -> Matcher[Any]:
        return self._word(be_equal_to(expected))

    def equal_ignoring_case(self, expected: str) -> Matcher[Any]:
        return self._word(be_equal_ignoring_case(expected))

    def less_than(self, bound: float) -> Matcher[Any]:
        return self._word(be_less_than(bound))

    def less_than_or_equal_to(self, bound: float) -> Matcher[Any]:
        return self._word(be_less_than_or_equal_to(bound))

    def greater_than(self, bound: float) -> Matcher[Any]:
        return self._word(be_greater_than(bound))

    def greater_than_or_equal_to(self, bound: float) -> Matcher[Any]:
        return self._word(be_greater_than_or_equal_to(bound))

    def close_to(self, target: float, delta: float) -> Matcher[Any]:
        return self._word(be_close_to(target, delta))

    def matching(self, pattern: str) -> Matcher[Any]:
        return self._word(be_matching(pattern))


@dataclass(frozen=True, slots=True)
class ArticleMatcher(_WordMatcher):
    """``the``, ``a``, ``an``: forwards grammar methods to its verb."""

    verb: _WordMatcher | None = None

    def __getattr__(self, name: str) -> Any:
        verb = object.__getattribute__(self, "verb")
        if verb is None:
            msg = f"{type(self).__name__!r} has no verb to provide {name!r}"
            raise AttributeError(msg)
        return getattr(verb, name)


@dataclass(frozen=True, slots=True)
class NotMatcher(_WordMatcher):
    def apply(self, subject: Subject[Any], /) -> MatchResult:
        return MatchResult(False, "", "")

    @property
    def have(self) -> HaveVerbMatcher:
        return HaveVerbMatcher(negated=not self.negated)

    @property
    def be(self) -> BeVerbMatcher:
        return BeVerbMatcher(negated=not self.negated)


be = BeVerbMatcher()
have = HaveVerbMatcher()
the = ArticleMatcher()
a = ArticleMatcher()
an = ArticleMatcher()
not_ = NotMatcher()
