"""Partial functions and the matchers checking their domain.

Python has no built-in partial function type, so a partial function is
anything satisfying the PartialFunction protocol: callable, plus an
``is_defined_at`` domain predicate. partial_function() pairs two plain
callables into one.

is_defined_by_all never calls the function outside its domain. A subject
that does not satisfy the protocol fails both matchers.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from specmatch._matcher import Matcher, as_pair
from specmatch._render import render
from specmatch._result import MatchResult

if TYPE_CHECKING:
    from collections.abc import Iterable

    from specmatch._matcher import Subject

__all__ = [
    "DomainFunction",
    "IsDefinedAtAll",
    "IsDefinedByAll",
    "PartialFunction",
    "be_defined_at",
    "be_defined_by",
    "is_defined_at_all",
    "is_defined_by_all",
    "partial_function",
]


@runtime_checkable
class PartialFunction[A, B](Protocol):
    """A function defined only on part of its input type."""

    def is_defined_at(self, value: A, /) -> bool: ...

    def __call__(self, value: A, /) -> B: ...


@dataclass(frozen=True, slots=True)
class DomainFunction[A, B]:
    """A function paired with its domain predicate.

    >>> half = partial_function(lambda i: i // 2, lambda i: i % 2 == 0)
    >>> half.is_defined_at(3)
    False
    >>> half(4)
    2
    """

    function: Callable[[A], B]
    domain: Callable[[A], bool]

    def is_defined_at(self, value: A, /) -> bool:
        return bool(self.domain(value))

    def __call__(self, value: A, /) -> B:
        if not self.is_defined_at(value):
            msg = f"function is not defined at {value!r}"
            raise ValueError(msg)
        return self.function(value)


def partial_function[A, B](
    function: Callable[[A], B], domain: Callable[[A], bool]
) -> DomainFunction[A, B]:
    return DomainFunction(function, domain)


def _listing(values: Iterable[Any]) -> str:
    return "'" + ", ".join(render(v) for v in values) + "'"


def _plural(values: tuple[Any, ...]) -> str:
    return "values" if len(values) > 1 else "value"


@dataclass(frozen=True, slots=True)
class IsDefinedAtAll[A](Matcher[PartialFunction[A, Any]]):
    """The function's domain contains every sample value."""

    values: tuple[A, ...]
    description: str | None = None

    def apply(self, subject: Subject[PartialFunction[A, Any]], /) -> MatchResult:
        function = subject()
        if isinstance(function, PartialFunction):
            undefined = tuple(v for v in self.values if not function.is_defined_at(v))
        else:
            undefined = self.values
        name = self.description or "the function"
        if undefined:
            ko = f"{name} is not defined for the {_plural(undefined)} {_listing(undefined)}"
        else:
            ko = f"{name} is not defined for all the values {_listing(self.values)}"
        return MatchResult(
            not undefined,
            f"{name} is defined for all the values {_listing(self.values)}",
            ko,
        )


@dataclass(frozen=True, slots=True)
class IsDefinedByAll[A, B](Matcher[PartialFunction[A, B]]):
    """For every (input, output) pair, the function is defined at the input
    and returns the output.

    Raises:
        MatcherError: If a pair is not a two-item tuple or list.
    """

    pairs: tuple[tuple[A, B], ...]
    description: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "pairs", tuple(as_pair(pair) for pair in self.pairs))

    def apply(self, subject: Subject[PartialFunction[A, B]], /) -> MatchResult:
        function = subject()
        if isinstance(function, PartialFunction):
            failing = tuple(
                (x, y)
                for x, y in self.pairs
                if not (function.is_defined_at(x) and function(x) == y)
            )
        else:
            failing = self.pairs
        name = self.description or "the function"
        if failing:
            ko = f"{name} is not defined by the {_plural(failing)} {_listing(failing)}"
        else:
            ko = f"{name} is not defined by all the values {_listing(self.pairs)}"
        return MatchResult(
            not failing,
            f"{name} is defined by all the values {_listing(self.pairs)}",
            ko,
        )


def is_defined_at_all[A](*values: A) -> Matcher[PartialFunction[A, Any]]:
    return IsDefinedAtAll(tuple(values))


def is_defined_by_all[A, B](*pairs: tuple[A, B]) -> Matcher[PartialFunction[A, B]]:
    return IsDefinedByAll(pairs)


be_defined_at = is_defined_at_all
be_defined_by = is_defined_by_all
