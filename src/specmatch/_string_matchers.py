"""String matchers.

Each matcher is a frozen dataclass, immutable after construction. A
subject that is not a string fails the match (it is still rendered in the
message).

Regex uses ``google-re2`` for guaranteed linear-time matching. RE2 does not
support backreferences or lookahead/lookbehind because they require
backtracking; patterns using them are rejected at construction time.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import re2

from specmatch._matcher import Matcher, MatcherError
from specmatch._render import describe_quoted, quote
from specmatch._result import MatchResult

if TYPE_CHECKING:
    from specmatch._matcher import Subject

__all__ = [
    "BeEqualIgnoringCase",
    "BeMatching",
    "EndWith",
    "Include",
    "StartWith",
    "be_equal_ignoring_case",
    "be_matching",
    "end_with",
    "include",
    "start_with",
]


def _fold(value: str, ignore_case: bool) -> str:
    return value.casefold() if ignore_case else value


def _verdict(
    actual: Any, description: str | None, success: bool, ok: str, ko: str
) -> MatchResult:
    text = describe_quoted(actual, description)
    return MatchResult(success, f"{text} {ok}", f"{text} {ko}")


@dataclass(frozen=True, slots=True)
class BeEqualIgnoringCase(Matcher[str]):
    """Case-insensitive string equality.

    The expected value is casefolded at construction time.
    """

    expected: str
    description: str | None = None
    _cmp_expected: str = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_cmp_expected", self.expected.casefold())

    def apply(self, subject: Subject[str], /) -> MatchResult:
        actual = subject()
        success = isinstance(actual, str) and actual.casefold() == self._cmp_expected
        return _verdict(
            actual,
            self.description,
            success,
            f"is equal ignoring case to {quote(self.expected)}",
            f"is not equal ignoring case to {quote(self.expected)}",
        )


@dataclass(frozen=True, slots=True)
class StartWith(Matcher[str]):
    """String prefix match (startswith).

    When ignore_case is True, comparison is case-insensitive.
    The prefix is casefolded at construction time.
    """

    prefix: str
    ignore_case: bool = False
    description: str | None = None
    _cmp_prefix: str = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_cmp_prefix", _fold(self.prefix, self.ignore_case))

    def apply(self, subject: Subject[str], /) -> MatchResult:
        actual = subject()
        success = isinstance(actual, str) and _fold(actual, self.ignore_case).startswith(
            self._cmp_prefix
        )
        return _verdict(
            actual,
            self.description,
            success,
            f"starts with {quote(self.prefix)}",
            f"doesn't start with {quote(self.prefix)}",
        )


@dataclass(frozen=True, slots=True)
class EndWith(Matcher[str]):
    """String suffix match (endswith).

    When ignore_case is True, comparison is case-insensitive.
    """

    suffix: str
    ignore_case: bool = False
    description: str | None = None
    _cmp_suffix: str = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_cmp_suffix", _fold(self.suffix, self.ignore_case))

    def apply(self, subject: Subject[str], /) -> MatchResult:
        actual = subject()
        success = isinstance(actual, str) and _fold(actual, self.ignore_case).endswith(
            self._cmp_suffix
        )
        return _verdict(
            actual,
            self.description,
            success,
            f"ends with {quote(self.suffix)}",
            f"doesn't end with {quote(self.suffix)}",
        )


@dataclass(frozen=True, slots=True)
class Include(Matcher[str]):
    """Substring search match.

    When ignore_case is True, comparison is case-insensitive.
    The substring is casefolded once, at construction time.
    """

    substring: str
    ignore_case: bool = False
    description: str | None = None
    _cmp_substring: str = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "_cmp_substring", _fold(self.substring, self.ignore_case)
        )

    def apply(self, subject: Subject[str], /) -> MatchResult:
        actual = subject()
        success = isinstance(actual, str) and self._cmp_substring in _fold(
            actual, self.ignore_case
        )
        return _verdict(
            actual,
            self.description,
            success,
            f"includes {quote(self.substring)}",
            f"doesn't include {quote(self.substring)}",
        )


@dataclass(frozen=True, slots=True)
class BeMatching(Matcher[str]):
    """Regular expression match.

    The pattern is compiled at construction time via ``google-re2``. Uses
    search (not fullmatch) to match anywhere in the string.

    Raises:
        MatcherError: If the pattern is not valid RE2 syntax.
    """

    pattern: str
    description: str | None = None
    _compiled: re2.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        try:
            compiled = re2.compile(self.pattern)
        except re2.error as e:
            msg = f'invalid regex pattern "{self.pattern}": {e}'
            raise MatcherError(msg) from e
        object.__setattr__(self, "_compiled", compiled)

    def apply(self, subject: Subject[str], /) -> MatchResult:
        actual = subject()
        success = isinstance(actual, str) and self._compiled.search(actual) is not None
        return _verdict(
            actual,
            self.description,
            success,
            f"matches {quote(self.pattern)}",
            f"doesn't match {quote(self.pattern)}",
        )


def be_equal_ignoring_case(expected: str) -> Matcher[str]:
    return BeEqualIgnoringCase(expected)


def start_with(prefix: str, *, ignore_case: bool = False) -> Matcher[str]:
    return StartWith(prefix, ignore_case)


def end_with(suffix: str, *, ignore_case: bool = False) -> Matcher[str]:
    return EndWith(suffix, ignore_case)


def include(substring: str, *, ignore_case: bool = False) -> Matcher[str]:
    return Include(substring, ignore_case)


def be_matching(pattern: str) -> Matcher[str]:
    return BeMatching(pattern)
