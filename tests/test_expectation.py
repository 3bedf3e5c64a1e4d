"""Tests for expectations and outcomes."""

from __future__ import annotations

import logging

import pytest

from specmatch import (
    ExampleSkipped,
    ExpectationFailure,
    Failed,
    Passed,
    Skipped,
    expect,
    expect_lazy,
    have,
    have_key,
    have_value,
    must_satisfy,
    raise_for_outcome,
)
from specmatch.testing import SubjectProbe

M = {"one": 1, "two": 2}


class TestMust:
    def test_passed(self) -> None:
        assert expect(M).must(have_key("one")) == Passed(
            "Map(one -> 1, two -> 2) has the key 'one'"
        )

    def test_failed(self) -> None:
        assert expect(M).must(have_key("three")) == Failed(
            "Map(one -> 1, two -> 2) doesn't have the key 'three'"
        )

    def test_aka_labels_messages(self) -> None:
        outcome = expect(M).aka("the map").must(have_key("three"))
        assert outcome == Failed("the map Map(one -> 1, two -> 2) doesn't have the key 'three'")

    def test_aka_reaches_every_operand(self) -> None:
        outcome = expect(M).aka("the map").must(have_key("one") & have_value(3))
        assert outcome == Failed(
            "the map Map(one -> 1, two -> 2) has the key 'one' "
            "but the map Map(one -> 1, two -> 2) doesn't have the value '3'"
        )

    def test_must_not(self) -> None:
        assert expect(M).must_not(have_key("one")) == Failed(
            "Map(one -> 1, two -> 2) has the key 'one'"
        )

    def test_skipped(self) -> None:
        outcome = expect(M).must(have_key("three").or_skip())
        assert outcome == Skipped("Map(one -> 1, two -> 2) doesn't have the key 'three'")

    def test_skip_is_distinct_from_failure(self) -> None:
        outcomes = [
            expect(M).must(have_key("three")),
            expect(M).must(have_key("three").or_skip()),
        ]
        kinds = []
        for outcome in outcomes:
            match outcome:
                case Passed():
                    kinds.append("passed")
                case Failed():
                    kinds.append("failed")
                case Skipped():
                    kinds.append("skipped")
        assert kinds == ["failed", "skipped"]

    def test_must_satisfy(self) -> None:
        outcome = must_satisfy(M, have_key("three"), description="the map")
        assert outcome == expect(M).aka("the map").must(have_key("three"))


class TestLazySubject:
    def test_subject_forced_once(self) -> None:
        probe = SubjectProbe(M)
        expect_lazy(probe).must(have_key("one") ^ have_key("three"))
        assert probe.calls == 1

    def test_subject_not_forced_by_words(self) -> None:
        probe = SubjectProbe(M)
        assert expect_lazy(probe).must(have) == Passed("")
        assert probe.calls == 0

    def test_each_must_forces_again(self) -> None:
        probe = SubjectProbe(M)
        expectable = expect_lazy(probe)
        expectable.must(have_key("one"))
        expectable.must(have_key("two"))
        assert probe.calls == 2


class TestRaiseForOutcome:
    def test_passed_returns(self) -> None:
        assert raise_for_outcome(Passed("ok")) is None

    def test_failed_raises_assertion_error(self) -> None:
        with pytest.raises(AssertionError, match="doesn't have") as exc_info:
            raise_for_outcome(Failed("the map doesn't have the key"))
        assert isinstance(exc_info.value, ExpectationFailure)
        assert exc_info.value.message == "the map doesn't have the key"

    def test_skipped_raises_example_skipped(self) -> None:
        with pytest.raises(ExampleSkipped, match="skipped because no key") as exc_info:
            raise_for_outcome(Skipped("no key"))
        assert exc_info.value.reason == "no key"
        assert not isinstance(exc_info.value, AssertionError)


class TestLogging:
    def test_verdicts_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="specmatch._expectation"):
            expect(M).must(have_key("three"))
            expect(M).must(have_key("three").or_skip())
        assert "expectation failed: Map(one -> 1, two -> 2)" in caplog.text
        assert "expectation skipped:" in caplog.text
