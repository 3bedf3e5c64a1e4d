"""Matcher — the abstract evaluation contract and its logical combinators.

A matcher is applied to a *subject thunk*: a zero-argument callable that
produces the value under test. Combinators pass the thunk along so that an
operand skipped by short-circuiting never forces the subject, and wrap it
with once() so that the subject is computed at most one time however many
operands look at it.

Combinators carry their own description. Before an operand is applied it
receives the combinator's description, so a label attached to a whole
expression reaches every message produced inside it.

Message composition:

| Combinator | success                 | ok_message           | ko_message           |
|------------|-------------------------|----------------------|----------------------|
| m1 & m2    | r1 fails                | r1.ok                | r1.ko                |
|            | r1 holds                | r1.ok and r2.ok      | r1.ok but r2.ko      |
| m1 | m2    | r1 holds                | r1.ok                | r1.ko                |
|            | r1 fails, r2 holds      | r2.ok but r1.ko      | r1.ko and r2.ko      |
|            | both fail               | r1.ok and r2.ok      | r1.ko and r2.ko      |
| ~m         | not r                   | r.ko                 | r.ok                 |
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import Any, Self

from specmatch._result import MatchResult

__all__ = [
    "And",
    "Composed",
    "Lazily",
    "Matcher",
    "MatcherError",
    "Not",
    "Or",
    "OrSkip",
    "SkipExample",
    "When",
    "as_pair",
    "matcher_depth",
    "once",
    "operands",
]


class MatcherError(Exception):
    """Errors raised while constructing matchers."""


class SkipExample(Exception):  # noqa: N818
    """Control signal raised by OrSkip when its matcher fails.

    Not a failure: Expectable.must() catches it and reports the example
    as skipped, with the failed matcher's ko_message as the reason.
    """

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason)


type Subject[T] = Callable[[], T]
type Condition = bool | Callable[[], bool]


def once[T](subject: Subject[T]) -> Subject[T]:
    """Wrap a subject thunk so it is computed at most once."""
    cache: list[T] = []

    def thunk() -> T:
        if not cache:
            cache.append(subject())
        return cache[0]

    return thunk


def as_pair(pair: Any) -> tuple[Any, Any]:
    """Convert a two-item tuple or list to a tuple.

    Raises:
        MatcherError: If ``pair`` is not a tuple or list of exactly two items.
    """
    if not isinstance(pair, (tuple, list)) or len(pair) != 2:
        msg = f"expected a pair of two items, got {pair!r}"
        raise MatcherError(msg)
    return tuple(pair)


class Matcher[T](ABC):
    """Base class of every matcher.

    Subclasses are frozen dataclasses declaring a ``description`` field
    (``str | None``, default None) and implementing apply().
    """

    __slots__ = ()

    description: str | None

    @abstractmethod
    def apply(self, subject: Subject[T], /) -> MatchResult:
        """Evaluate the matcher against a deferred subject.

        Implementations call ``subject`` at most once.
        """

    def evaluate(self, value: T, /) -> MatchResult:
        """Evaluate the matcher against an already computed value."""
        return self.apply(lambda: value)

    def with_description(self, description: str | None) -> Self:
        """Return a copy of this matcher labelled with ``description``."""
        return replace(self, description=description)  # type: ignore[type-var]

    # ── Logical combinators ────────────────────────────────────────────────

    def and_(self, other: Matcher[T]) -> Matcher[T]:
        return And(self, other)

    def or_(self, other: Matcher[T]) -> Matcher[T]:
        return Or(self, other)

    def not_(self) -> Matcher[T]:
        return Not(self)

    def xor(self, other: Matcher[T]) -> Matcher[T]:
        """Holds when exactly one of the two matchers holds."""
        return (self & ~other) | (~self & other)

    def __and__(self, other: Matcher[T]) -> Matcher[T]:
        return self.and_(other)

    def __or__(self, other: Matcher[T]) -> Matcher[T]:
        return self.or_(other)

    def __xor__(self, other: Matcher[T]) -> Matcher[T]:
        return self.xor(other)

    def __invert__(self) -> Matcher[T]:
        return self.not_()

    # ── Conditional and adapting combinators ───────────────────────────────

    def when(self, condition: Condition) -> Matcher[T]:
        """Only hold this matcher to its verdict while ``condition`` is true."""
        return When(self, condition)

    def unless(self, condition: Condition) -> Matcher[T]:
        """Only hold this matcher to its verdict while ``condition`` is false."""
        return When(self, condition, active_when=False)

    def compose[A](self, function: Callable[[A], T]) -> Matcher[A]:
        """Return a matcher applying ``function`` to the subject first."""
        return Composed(self, function)

    compose_with_function = compose

    def lazily(self) -> Matcher[Callable[[], T]]:
        """Return a matcher over functions producing the expected value."""
        return Lazily(self)

    def or_skip(self) -> Matcher[T]:
        """Skip the current example instead of failing it."""
        return OrSkip(self)

    or_skip_example = or_skip


def _described[T](matcher: Matcher[T], description: str | None) -> Matcher[T]:
    if description is None:
        return matcher
    return matcher.with_description(description)


def _read(condition: Condition) -> bool:
    return bool(condition()) if callable(condition) else condition


@dataclass(frozen=True, slots=True)
class And[T](Matcher[T]):
    """Logical AND. ``right`` is not applied when ``left`` fails."""

    left: Matcher[T]
    right: Matcher[T]
    description: str | None = None

    def apply(self, subject: Subject[T], /) -> MatchResult:
        value = once(subject)
        r1 = _described(self.left, self.description).apply(value)
        if not r1.success:
            return MatchResult(False, r1.ok_message, r1.ko_message)
        r2 = _described(self.right, self.description).apply(value)
        return MatchResult(
            r2.success,
            f"{r1.ok_message} and {r2.ok_message}",
            f"{r1.ok_message} but {r2.ko_message}",
        )


@dataclass(frozen=True, slots=True)
class Or[T](Matcher[T]):
    """Logical OR. ``right`` is not applied when ``left`` holds."""

    left: Matcher[T]
    right: Matcher[T]
    description: str | None = None

    def apply(self, subject: Subject[T], /) -> MatchResult:
        value = once(subject)
        r1 = _described(self.left, self.description).apply(value)
        if r1.success:
            return MatchResult(True, r1.ok_message, r1.ko_message)
        r2 = _described(self.right, self.description).apply(value)
        if r2.success:
            return MatchResult(
                True,
                f"{r2.ok_message} but {r1.ko_message}",
                f"{r1.ko_message} and {r2.ko_message}",
            )
        return MatchResult(
            False,
            f"{r1.ok_message} and {r2.ok_message}",
            f"{r1.ko_message} and {r2.ko_message}",
        )


@dataclass(frozen=True, slots=True)
class Not[T](Matcher[T]):
    """Logical NOT: inverts the verdict and swaps the messages."""

    matcher: Matcher[T]
    description: str | None = None

    def apply(self, subject: Subject[T], /) -> MatchResult:
        return _described(self.matcher, self.description).apply(subject).negate()


@dataclass(frozen=True, slots=True)
class When[T](Matcher[T]):
    """Conditional matcher.

    The inner matcher is always applied so that its messages survive a
    later negation; its verdict only counts while the condition reads
    ``active_when``. Otherwise the result is a success.
    """

    matcher: Matcher[T]
    condition: Condition
    active_when: bool = True
    description: str | None = None

    def apply(self, subject: Subject[T], /) -> MatchResult:
        result = _described(self.matcher, self.description).apply(subject)
        if _read(self.condition) != self.active_when:
            return MatchResult(True, result.ok_message, result.ko_message)
        return result


@dataclass(frozen=True, slots=True)
class Composed[A, T](Matcher[A]):
    """Applies ``matcher`` to ``function(subject)``."""

    matcher: Matcher[T]
    function: Callable[[A], T]
    description: str | None = None

    def apply(self, subject: Subject[A], /) -> MatchResult:
        value = once(subject)
        inner = _described(self.matcher, self.description)
        return inner.apply(once(lambda: self.function(value())))


@dataclass(frozen=True, slots=True)
class Lazily[T](Matcher[Callable[[], T]]):
    """Applies ``matcher`` to the value returned by the subject function."""

    matcher: Matcher[T]
    description: str | None = None

    def apply(self, subject: Subject[Callable[[], T]], /) -> MatchResult:
        function = once(subject)
        inner = _described(self.matcher, self.description)
        return inner.apply(once(lambda: function()()))


@dataclass(frozen=True, slots=True)
class OrSkip[T](Matcher[T]):
    """Raises SkipExample instead of reporting a failure."""

    matcher: Matcher[T]
    description: str | None = None

    def apply(self, subject: Subject[T], /) -> MatchResult:
        result = _described(self.matcher, self.description).apply(subject)
        if not result.success:
            raise SkipExample(result.ko_message)
        return result


def operands(matcher: Matcher[Any]) -> tuple[Matcher[Any], ...]:
    """Return the direct operands of a combinator (empty for leaf matchers)."""
    match matcher:
        case And(left=left, right=right) | Or(left=left, right=right):
            return (left, right)
        case Not(matcher=inner) | When(matcher=inner) | OrSkip(matcher=inner):
            return (inner,)
        case Composed(matcher=inner) | Lazily(matcher=inner):
            return (inner,)
        case _:
            return ()


def matcher_depth(matcher: Matcher[Any]) -> int:
    """Calculate the nesting depth of a matcher expression."""
    return 1 + max((matcher_depth(op) for op in operands(matcher)), default=0)
