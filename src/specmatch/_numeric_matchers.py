"""Numeric comparison matchers.

A subject that is not a number (booleans included) fails the match.
Greater-than matchers word their messages as the negation of the
less-than ones: ``be_greater_than(n)`` fails with the ok_message of
``be_less_than_or_equal_to(n)``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from specmatch._matcher import Matcher, MatcherError
from specmatch._render import describe_quoted, quote
from specmatch._result import MatchResult

if TYPE_CHECKING:
    from specmatch._matcher import Subject

__all__ = [
    "BeCloseTo",
    "BeGreaterThan",
    "BeGreaterThanOrEqualTo",
    "BeLessThan",
    "BeLessThanOrEqualTo",
    "be_close_to",
    "be_greater_than",
    "be_greater_than_or_equal_to",
    "be_less_than",
    "be_less_than_or_equal_to",
]

type Number = int | float


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass(frozen=True, slots=True)
class BeLessThan(Matcher[Number]):
    bound: Number
    description: str | None = None

    def apply(self, subject: Subject[Number], /) -> MatchResult:
        actual = subject()
        text = describe_quoted(actual, self.description)
        return MatchResult(
            _is_number(actual) and actual < self.bound,
            f"{text} is less than {quote(self.bound)}",
            f"{text} is not less than {quote(self.bound)}",
        )


@dataclass(frozen=True, slots=True)
class BeLessThanOrEqualTo(Matcher[Number]):
    bound: Number
    description: str | None = None

    def apply(self, subject: Subject[Number], /) -> MatchResult:
        actual = subject()
        text = describe_quoted(actual, self.description)
        return MatchResult(
            _is_number(actual) and actual <= self.bound,
            f"{text} is less than or equal to {quote(self.bound)}",
            f"{text} is greater than {quote(self.bound)}",
        )


@dataclass(frozen=True, slots=True)
class BeGreaterThan(Matcher[Number]):
    bound: Number
    description: str | None = None

    def apply(self, subject: Subject[Number], /) -> MatchResult:
        actual = subject()
        text = describe_quoted(actual, self.description)
        return MatchResult(
            _is_number(actual) and actual > self.bound,
            f"{text} is greater than {quote(self.bound)}",
            f"{text} is less than or equal to {quote(self.bound)}",
        )


@dataclass(frozen=True, slots=True)
class BeGreaterThanOrEqualTo(Matcher[Number]):
    bound: Number
    description: str | None = None

    def apply(self, subject: Subject[Number], /) -> MatchResult:
        actual = subject()
        text = describe_quoted(actual, self.description)
        return MatchResult(
            _is_number(actual) and actual >= self.bound,
            f"{text} is not less than {quote(self.bound)}",
            f"{text} is less than {quote(self.bound)}",
        )


@dataclass(frozen=True, slots=True)
class BeCloseTo(Matcher[Number]):
    """|actual - target| <= delta.

    Raises:
        MatcherError: If delta is negative.
    """

    target: Number
    delta: Number
    description: str | None = None

    def __post_init__(self) -> None:
        if self.delta < 0:
            msg = f"delta must be non-negative, got {self.delta}"
            raise MatcherError(msg)

    def apply(self, subject: Subject[Number], /) -> MatchResult:
        actual = subject()
        text = describe_quoted(actual, self.description)
        expected = f"{quote(self.target)} +/- {quote(self.delta)}"
        return MatchResult(
            _is_number(actual) and abs(actual - self.target) <= self.delta,
            f"{text} is close to {expected}",
            f"{text} is not close to {expected}",
        )


def be_less_than(bound: Number) -> Matcher[Number]:
    return BeLessThan(bound)


def be_less_than_or_equal_to(bound: Number) -> Matcher[Number]:
    return BeLessThanOrEqualTo(bound)


def be_greater_than(bound: Number) -> Matcher[Number]:
    return BeGreaterThan(bound)


def be_greater_than_or_equal_to(bound: Number) -> Matcher[Number]:
    return BeGreaterThanOrEqualTo(bound)


def be_close_to(target: Number, delta: Number) -> Matcher[Number]:
    return BeCloseTo(target, delta)
