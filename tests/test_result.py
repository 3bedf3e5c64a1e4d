"""Tests for MatchResult."""

from specmatch import MatchResult


class TestMatchResult:
    def test_truthiness_follows_success(self) -> None:
        assert MatchResult(True, "ok", "ko")
        assert not MatchResult(False, "ok", "ko")

    def test_negate_swaps_messages(self) -> None:
        assert MatchResult(True, "ok", "ko").negate() == MatchResult(False, "ko", "ok")

    def test_double_negation_is_identity(self) -> None:
        result = MatchResult(False, "has the key", "doesn't have the key")
        assert result.negate().negate() == result

    def test_message_follows_verdict(self) -> None:
        assert MatchResult(True, "ok", "ko").message == "ok"
        assert MatchResult(False, "ok", "ko").message == "ko"
