"""Tests for partial functions and their matchers."""

from __future__ import annotations

import pytest

from specmatch import (
    DomainFunction,
    MatcherError,
    PartialFunction,
    be_defined_at,
    be_defined_by,
    is_defined_at_all,
    is_defined_by_all,
    partial_function,
)


def doubled(i: int) -> str:
    return str(i * 2)


def is_even(i: int) -> bool:
    return i % 2 == 0


F = partial_function(doubled, is_even)


class TestPartialFunction:
    def test_domain(self) -> None:
        assert F.is_defined_at(2) is True
        assert F.is_defined_at(3) is False

    def test_call_inside_domain(self) -> None:
        assert F(4) == "8"

    def test_call_outside_domain_raises(self) -> None:
        with pytest.raises(ValueError, match="not defined at 3"):
            F(3)

    def test_satisfies_protocol(self) -> None:
        assert isinstance(F, PartialFunction)
        assert isinstance(F, DomainFunction)

    def test_custom_class_satisfies_protocol(self) -> None:
        class Reciprocal:
            def is_defined_at(self, value: float, /) -> bool:
                return value != 0

            def __call__(self, value: float, /) -> float:
                return 1 / value

        assert isinstance(Reciprocal(), PartialFunction)
        assert is_defined_by_all((2, 0.5), (4, 0.25)).evaluate(Reciprocal()).success is True


class TestIsDefinedAtAll:
    def test_all_defined(self) -> None:
        result = is_defined_at_all(2, 4, 6).evaluate(F)
        assert result.success is True
        assert result.ok_message == "the function is defined for all the values '2, 4, 6'"

    def test_one_undefined(self) -> None:
        result = is_defined_at_all(2, 3).evaluate(F)
        assert result.success is False
        assert result.ko_message == "the function is not defined for the value '3'"

    def test_several_undefined(self) -> None:
        result = is_defined_at_all(2, 3, 5).evaluate(F)
        assert result.ko_message == "the function is not defined for the values '3, 5'"

    def test_label_replaces_the_function(self) -> None:
        result = is_defined_at_all(3).with_description("doubler").evaluate(F)
        assert result.ko_message == "doubler is not defined for the value '3'"

    def test_no_samples_holds(self) -> None:
        assert is_defined_at_all().evaluate(F).success is True

    def test_alias(self) -> None:
        assert be_defined_at(2, 4) == is_defined_at_all(2, 4)


class TestIsDefinedByAll:
    def test_all_pairs_hold(self) -> None:
        assert is_defined_by_all((2, "4"), (4, "8")).evaluate(F).success is True

    def test_wrong_output(self) -> None:
        result = is_defined_by_all((2, "5")).evaluate(F)
        assert result.success is False
        assert result.ko_message == "the function is not defined by the value '(2,5)'"

    def test_input_outside_domain(self) -> None:
        result = is_defined_by_all((2, "4"), (3, "6")).evaluate(F)
        assert result.success is False
        assert result.ko_message == "the function is not defined by the value '(3,6)'"

    def test_never_called_outside_domain(self) -> None:
        calls: list[int] = []

        def recording(i: int) -> str:
            calls.append(i)
            return doubled(i)

        f = partial_function(recording, is_even)
        is_defined_by_all((2, "4"), (3, "6"), (5, "10")).evaluate(f)
        assert calls == [2]

    def test_alias(self) -> None:
        assert be_defined_by((2, "4")) == is_defined_by_all((2, "4"))


class TestInvalidInput:
    def test_plain_callable_fails_domain_matchers(self) -> None:
        result = is_defined_at_all(2, 4).evaluate(doubled)  # type: ignore[arg-type]
        assert result.success is False
        assert result.ko_message == "the function is not defined for the values '2, 4'"
        assert is_defined_by_all((2, "4")).evaluate(None).success is False  # type: ignore[arg-type]

    def test_malformed_pair_rejected(self) -> None:
        with pytest.raises(MatcherError, match="expected a pair of two items"):
            is_defined_by_all((2, "4", 6))  # type: ignore[arg-type]

    def test_list_pairs_accepted(self) -> None:
        assert is_defined_by_all([2, "4"]).evaluate(F).success is True  # type: ignore[arg-type]
