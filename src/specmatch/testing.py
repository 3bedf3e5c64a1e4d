"""Test utilities for specmatch.

Stub matchers and subjects that record how often they are used. They exist
to check the evaluation guarantees of the combinators (short-circuiting,
single evaluation of the subject) without depending on a real matcher
family.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from specmatch._matcher import Matcher
from specmatch._result import MatchResult

if TYPE_CHECKING:
    from specmatch._matcher import Subject
    from specmatch._registry import RegistryBuilder


@dataclass(slots=True)
class Calls:
    """Mutable call counter shared by a stub and its described copies."""

    count: int = 0


@dataclass(frozen=True, slots=True)
class CountingMatcher(Matcher[Any]):
    """Returns a fixed verdict and counts how often it is applied.

    The subject is forced on every application. When a description is set
    it prefixes both messages.

    >>> stub = CountingMatcher(False, ko_message="nope")
    >>> stub.evaluate(1).ko_message
    'nope'
    >>> stub.calls.count
    1
    """

    verdict: bool
    ok_message: str = "ok"
    ko_message: str = "ko"
    calls: Calls = field(default_factory=Calls, compare=False)
    description: str | None = None

    def apply(self, subject: Subject[Any], /) -> MatchResult:
        self.calls.count += 1
        subject()
        prefix = f"{self.description} " if self.description else ""
        return MatchResult(
            self.verdict, f"{prefix}{self.ok_message}", f"{prefix}{self.ko_message}"
        )


@dataclass(slots=True)
class SubjectProbe[T]:
    """A subject thunk that counts how often it is forced."""

    value: T
    calls: int = 0

    def __call__(self) -> T:
        self.calls += 1
        return self.value


def register(builder: RegistryBuilder) -> RegistryBuilder:
    """Register the stub matcher.

    Name: ``constant``. Args: verdict, then optional ok and ko messages.
    """
    return builder.matcher("constant", _constant_factory)


def _constant_factory(
    verdict: Any, ok_message: str = "ok", ko_message: str = "ko"
) -> CountingMatcher:
    if not isinstance(verdict, bool):
        msg = "constant requires a boolean verdict"
        raise ValueError(msg)
    return CountingMatcher(verdict, ok_message, ko_message)
