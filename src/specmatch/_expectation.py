"""Expectations — the "must satisfy" entry point used by example runners.

    outcome = expect({"one": 1}).aka("the map").must(have_key("two"))

must() returns a tagged Outcome instead of raising: Passed, Failed or
Skipped. Runners branch on the variant with match/case; callers that
prefer exceptions use raise_for_outcome().
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from specmatch._matcher import SkipExample, once

if TYPE_CHECKING:
    from collections.abc import Callable

    from specmatch._matcher import Matcher

__all__ = [
    "ExampleSkipped",
    "Expectable",
    "ExpectationFailure",
    "Failed",
    "Outcome",
    "Passed",
    "Skipped",
    "expect",
    "expect_lazy",
    "must_satisfy",
    "raise_for_outcome",
]

logger = logging.getLogger(__name__)


class ExpectationFailure(AssertionError):
    """A matcher did not hold."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ExampleSkipped(Exception):  # noqa: N818
    """An or_skip() matcher did not hold; the example is not applicable."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"skipped because {reason}")


@dataclass(frozen=True, slots=True)
class Passed:
    """The matcher held. ``message`` is its ok_message."""

    message: str


@dataclass(frozen=True, slots=True)
class Failed:
    """The matcher did not hold. ``message`` is its ko_message."""

    message: str


@dataclass(frozen=True, slots=True)
class Skipped:
    """An or_skip() matcher did not hold. ``reason`` is its ko_message."""

    reason: str


# Exactly one variant per evaluation; pattern-matchable.
type Outcome = Passed | Failed | Skipped


def raise_for_outcome(outcome: Outcome) -> None:
    """Raise ExpectationFailure or ExampleSkipped unless the outcome passed."""
    match outcome:
        case Passed():
            return
        case Failed(message=message):
            raise ExpectationFailure(message)
        case Skipped(reason=reason):
            raise ExampleSkipped(reason)


@dataclass(frozen=True, slots=True)
class Expectable[T]:
    """A deferred subject, optionally labelled, waiting for a matcher.

    Each must() call wraps the subject thunk with once(), so the
    subject is computed at most once per evaluation.
    """

    subject: Callable[[], T]
    description: str | None = None

    def aka(self, description: str) -> Expectable[T]:
        """Label the subject ("also known as") for every message."""
        return Expectable(self.subject, description)

    def must(self, matcher: Matcher[T]) -> Outcome:
        if self.description is not None:
            matcher = matcher.with_description(self.description)
        try:
            result = matcher.apply(once(self.subject))
        except SkipExample as skip:
            logger.debug("expectation skipped: %s", skip.reason)
            return Skipped(skip.reason)
        if result.success:
            logger.debug("expectation passed: %s", result.ok_message)
            return Passed(result.ok_message)
        logger.debug("expectation failed: %s", result.ko_message)
        return Failed(result.ko_message)

    def must_not(self, matcher: Matcher[T]) -> Outcome:
        return self.must(~matcher)


def expect[T](value: T) -> Expectable[T]:
    return Expectable(lambda: value)


def expect_lazy[T](subject: Callable[[], T]) -> Expectable[T]:
    """Expect on a subject computed only when (and if) a matcher needs it."""
    return Expectable(subject)


def must_satisfy[T](
    value: T, matcher: Matcher[T], *, description: str | None = None
) -> Outcome:
    """Functional spelling of ``expect(value).aka(description).must(matcher)``."""
    return Expectable(lambda: value, description).must(matcher)
