"""MatchResult — the verdict every matcher returns.

Both messages travel with every result so that negation and the logical
combinators can reuse them:
- ok_message describes the match when it holds
- ko_message describes the mismatch when it doesn't
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["MatchResult"]


@dataclass(frozen=True, slots=True)
class MatchResult:
    """Immutable (success, ok_message, ko_message) triple."""

    success: bool
    ok_message: str
    ko_message: str

    def __bool__(self) -> bool:
        return self.success

    def negate(self) -> MatchResult:
        """Invert the verdict and swap the two messages."""
        return MatchResult(not self.success, self.ko_message, self.ok_message)

    @property
    def message(self) -> str:
        """The message matching the verdict."""
        return self.ok_message if self.success else self.ko_message
