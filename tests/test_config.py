"""Tests for config parsing (specmatch._config).

Validates dict → MatcherConfig conversion and its error paths.
"""

import pytest

from specmatch import (
    AndConfig,
    ConfigParseError,
    LeafConfig,
    NotConfig,
    OrConfig,
    SkipConfig,
    XorConfig,
    config_depth,
    parse_matcher_config,
)


def _leaf(name: str = "have_key", *args: object) -> dict[str, object]:
    return {"type": "matcher", "name": name, "args": list(args)}


class TestParseLeaf:
    def test_minimal(self) -> None:
        config = parse_matcher_config({"type": "matcher", "name": "have_key"})
        assert config == LeafConfig(name="have_key")

    def test_args_become_tuple(self) -> None:
        config = parse_matcher_config(_leaf("have_pair", ["one", 1]))
        assert isinstance(config, LeafConfig)
        assert config.args == (["one", 1],)

    def test_kwargs_and_description(self) -> None:
        config = parse_matcher_config(
            {
                "type": "matcher",
                "name": "start_with",
                "args": ["/API"],
                "kwargs": {"ignore_case": True},
                "description": "the path",
            }
        )
        assert config == LeafConfig(
            name="start_with",
            args=("/API",),
            kwargs={"ignore_case": True},
            description="the path",
        )

    def test_missing_name(self) -> None:
        with pytest.raises(ConfigParseError, match="missing required field 'name'"):
            parse_matcher_config({"type": "matcher"})

    def test_name_not_string(self) -> None:
        with pytest.raises(ConfigParseError, match="name must be a string"):
            parse_matcher_config({"type": "matcher", "name": 42})

    def test_args_not_list(self) -> None:
        with pytest.raises(ConfigParseError, match="args must be a list"):
            parse_matcher_config({"type": "matcher", "name": "have_key", "args": "one"})

    def test_kwargs_not_dict(self) -> None:
        with pytest.raises(ConfigParseError, match="kwargs must be a dict"):
            parse_matcher_config({"type": "matcher", "name": "include", "kwargs": []})


class TestParseCompound:
    @pytest.mark.parametrize(
        ("node_type", "config_type"),
        [("and", AndConfig), ("or", OrConfig), ("xor", XorConfig)],
    )
    def test_compound(self, node_type: str, config_type: type) -> None:
        config = parse_matcher_config(
            {"type": node_type, "matchers": [_leaf("have_key", "a"), _leaf("have_key", "b")]}
        )
        assert isinstance(config, config_type)
        assert len(config.matchers) == 2

    def test_empty_matchers_rejected(self) -> None:
        with pytest.raises(ConfigParseError, match="non-empty 'matchers' list"):
            parse_matcher_config({"type": "and", "matchers": []})

    def test_missing_matchers_rejected(self) -> None:
        with pytest.raises(ConfigParseError, match="non-empty 'matchers' list"):
            parse_matcher_config({"type": "or"})

    @pytest.mark.parametrize(
        ("node_type", "config_type"), [("not", NotConfig), ("skip", SkipConfig)]
    )
    def test_wrapper(self, node_type: str, config_type: type) -> None:
        config = parse_matcher_config(
            {"type": node_type, "matcher": _leaf("have_key", "a"), "description": "m"}
        )
        assert isinstance(config, config_type)
        assert config.matcher == LeafConfig(name="have_key", args=("a",))
        assert config.description == "m"

    def test_wrapper_missing_matcher(self) -> None:
        with pytest.raises(ConfigParseError, match="not config missing required field"):
            parse_matcher_config({"type": "not"})

    def test_nested_error_propagates(self) -> None:
        with pytest.raises(ConfigParseError, match="missing required field 'name'"):
            parse_matcher_config({"type": "and", "matchers": [{"type": "matcher"}]})


class TestParseErrors:
    def test_not_a_dict(self) -> None:
        with pytest.raises(ConfigParseError, match="expected dict, got list"):
            parse_matcher_config([])  # type: ignore[arg-type]

    def test_missing_type(self) -> None:
        with pytest.raises(ConfigParseError, match="missing required field 'type'"):
            parse_matcher_config({"name": "have_key"})

    def test_unknown_type(self) -> None:
        with pytest.raises(ConfigParseError, match="unknown matcher config type: 'nand'"):
            parse_matcher_config({"type": "nand"})

    def test_description_not_string(self) -> None:
        with pytest.raises(ConfigParseError, match="description must be a string"):
            parse_matcher_config({"type": "matcher", "name": "have_key", "description": 1})


class TestConfigDepth:
    def test_leaf(self) -> None:
        assert config_depth(LeafConfig(name="have_key")) == 1

    def test_nested(self) -> None:
        config = parse_matcher_config(
            {
                "type": "and",
                "matchers": [
                    _leaf(),
                    {"type": "not", "matcher": {"type": "skip", "matcher": _leaf()}},
                ],
            }
        )
        assert config_depth(config) == 4
