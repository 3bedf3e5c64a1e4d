"""Tests for the ``must`` fixture provided by specmatch.pytest_plugin.

The fixture is discovered through the pytest11 entry point, so specmatch must
be installed (``pip install -e .`` is enough) for these tests to find it.
"""

from __future__ import annotations

from typing import Any

import pytest

from specmatch import ExpectationFailure, have, have_key, have_value

AGES = {"alice": 31, "bob": 27}


class TestMustFixture:
    def test_passing_expectation(self, must: Any) -> None:
        must(AGES, have_key("alice"))
        must(AGES, have.the.value(31), description="the ages")

    def test_failure_raises_assertion_error(self, must: Any) -> None:
        with pytest.raises(AssertionError, match="doesn't have the key 'carol'") as exc_info:
            must(AGES, have_key("carol"))
        assert isinstance(exc_info.value, ExpectationFailure)

    def test_description_in_failure(self, must: Any) -> None:
        with pytest.raises(ExpectationFailure) as exc_info:
            must(AGES, have_value(40), description="the ages")
        assert exc_info.value.message == (
            "the ages Map(alice -> 31, bob -> 27) doesn't have the value '40'"
        )

    def test_or_skip_skips(self, must: Any) -> None:
        with pytest.raises(pytest.skip.Exception, match="skipped because"):
            must(AGES, have_key("carol").or_skip())

    def test_skip_reason_is_ko_message(self, must: Any) -> None:
        with pytest.raises(pytest.skip.Exception) as exc_info:
            must(AGES, have_value(40).or_skip(), description="the ages")
        assert exc_info.value.msg == (
            "skipped because the ages Map(alice -> 31, bob -> 27) doesn't have the value '40'"
        )
