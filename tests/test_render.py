"""Tests for value rendering in messages."""

from __future__ import annotations

from collections import OrderedDict

import pytest

from specmatch import describe, describe_quoted, quote, render


class TestRender:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ({"one": 1, "two": 2}, "Map(one -> 1, two -> 2)"),
            ({}, "Map()"),
            (("one", 3), "(one,3)"),
            ([1, 2], "List(1, 2)"),
            (frozenset({1}), "Set(1)"),
            (True, "true"),
            (None, "null"),
            ("text", "text"),
            (1.5, "1.5"),
        ],
    )
    def test_render(self, value: object, expected: str) -> None:
        assert render(value) == expected

    def test_insertion_order_preserved(self) -> None:
        ordered = OrderedDict([("b", 2), ("a", 1)])
        assert render(ordered) == "Map(b -> 2, a -> 1)"

    def test_nested(self) -> None:
        assert render({"k": ("x", [1])}) == "Map(k -> (x,List(1)))"


class TestDescribe:
    def test_quote(self) -> None:
        assert quote("three") == "'three'"
        assert quote(("one", 3)) == "'(one,3)'"

    def test_describe_without_label(self) -> None:
        assert describe({"a": 1}, None) == "Map(a -> 1)"

    def test_describe_with_label(self) -> None:
        assert describe({"a": 1}, "the map") == "the map Map(a -> 1)"

    def test_describe_quoted(self) -> None:
        assert describe_quoted(4, None) == "'4'"
        assert describe_quoted(4, "the count") == "the count '4'"
