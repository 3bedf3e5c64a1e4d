"""Matchers applicable to values of any type."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from specmatch._matcher import Matcher
from specmatch._render import describe_quoted, quote
from specmatch._result import MatchResult

if TYPE_CHECKING:
    from specmatch._matcher import Subject

__all__ = ["BeEqualTo", "be_equal_to", "not_be_equal_to"]


@dataclass(frozen=True, slots=True)
class BeEqualTo[T](Matcher[T]):
    """Equality with ``==``."""

    expected: T
    description: str | None = None

    def apply(self, subject: Subject[T], /) -> MatchResult:
        actual = subject()
        text = describe_quoted(actual, self.description)
        return MatchResult(
            actual == self.expected,
            f"{text} is equal to {quote(self.expected)}",
            f"{text} is not equal to {quote(self.expected)}",
        )


def be_equal_to[T](expected: T) -> Matcher[T]:
    return BeEqualTo(expected)


def not_be_equal_to[T](expected: T) -> Matcher[T]:
    return ~BeEqualTo(expected)
