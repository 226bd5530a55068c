from __future__ import annotations

"""
Unit tests for parser configuration layering.

Verifies:
1. Built-in defaults for the supported stylesheet languages.
2. Removal, registration and field replacement semantics of overrides.
3. Configuration errors raised before any file is processed.
"""

import pytest

from importtracker.core.extraction.steps import CallbackStep, PatternStep
from importtracker.domain.errors import ConfigurationError
from importtracker.domain.parser_config import (
    ParserConfig,
    build_parser_configs,
    get_default_parser_configs,
)


def test_defaults_cover_stylesheet_languages():
    configs = get_default_parser_configs()

    assert set(configs) == {".pcss", ".less", ".scss", ".sass"}
    assert configs[".scss"].prefixes == ["_"]
    assert configs[".scss"].postfixes == [".scss", ".sass"]
    assert configs[".sass"].postfixes == [".scss", ".sass"]
    assert configs[".less"].prefixes == []
    assert configs[".pcss"].postfixes == [".pcss"]
    assert all(c.parser_steps for c in configs.values())


def test_defaults_are_fresh_instances():
    """Mutating one build must not leak into the next."""
    first = get_default_parser_configs()
    first[".scss"].prefixes.append("x")
    assert get_default_parser_configs()[".scss"].prefixes == ["_"]


def test_no_overrides_returns_defaults():
    assert set(build_parser_configs(None)) == set(get_default_parser_configs())
    assert set(build_parser_configs({})) == set(get_default_parser_configs())


@pytest.mark.parametrize("value", [None, False])
def test_falsy_override_removes_extension(value):
    configs = build_parser_configs({".less": value})
    assert ".less" not in configs
    assert ".scss" in configs


def test_removing_unknown_extension_is_harmless():
    configs = build_parser_configs({".styl": None})
    assert ".styl" not in configs


def test_new_extension_requires_steps():
    with pytest.raises(ConfigurationError):
        build_parser_configs({".styl": {"postfixes": [".styl"]}})

    with pytest.raises(ConfigurationError):
        build_parser_configs({".styl": {"parser_steps": []}})


def test_new_extension_registration_coerces_steps():
    configs = build_parser_configs({
        ".styl": {"parser_steps": [r"@require\s+(\S+)", str.split], "prefixes": ["_"]}
    })
    styl = configs[".styl"]

    assert isinstance(styl.parser_steps[0], PatternStep)
    assert isinstance(styl.parser_steps[1], CallbackStep)
    assert styl.prefixes == ["_"]
    assert styl.postfixes == []
    assert styl.base_paths == []


def test_existing_extension_fields_are_replaced_wholesale():
    configs = build_parser_configs({".scss": {"postfixes": [".css"], "basePaths": ["lib"]}})
    scss = configs[".scss"]

    assert scss.postfixes == [".css"]
    assert scss.base_paths == ["lib"]
    # Untouched fields keep their defaults
    assert scss.prefixes == ["_"]
    assert len(scss.parser_steps) == 2


def test_camel_case_parser_steps_alias():
    configs = build_parser_configs({".less": {"parserSteps": [r"@import '([^']+)'"]}})
    assert len(configs[".less"].parser_steps) == 1


def test_extension_keys_are_case_insensitive():
    configs = build_parser_configs({".SCSS": {"prefixes": []}})
    assert configs[".scss"].prefixes == []
    assert ".SCSS" not in configs


def test_parser_config_instance_replaces_entry():
    custom = ParserConfig(parser_steps=[PatternStep(r"(x)")])
    configs = build_parser_configs({".scss": custom, ".x": custom})
    assert configs[".scss"] is custom
    assert configs[".x"] is custom

    with pytest.raises(ConfigurationError):
        build_parser_configs({".y": ParserConfig(parser_steps=[])})


@pytest.mark.parametrize("overrides", [
    {"scss": {"prefixes": []}},
    {".": {"prefixes": []}},
    {".scss": {"unknown_option": 1}},
    {".scss": {"prefixes": "_"}},
    {".scss": {"prefixes": [1, 2]}},
    {".scss": {"parser_steps": [3]}},
    {".scss": {"parser_steps": "(a)"}},
    {".scss": ["not", "a", "mapping"]},
    ["not", "a", "mapping"],
])
def test_invalid_overrides_raise_configuration_error(overrides):
    with pytest.raises(ConfigurationError):
        build_parser_configs(overrides)


def test_configuration_error_is_a_value_error():
    with pytest.raises(ValueError):
        build_parser_configs({".new": {}})
