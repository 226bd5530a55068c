from __future__ import annotations

"""
Unit tests for the text reduction steps.

Verifies:
1. Regex steps emit every non-empty captured group in encounter order.
2. Callback steps drop None entries.
3. Outputs of multiple inputs are concatenated in order.
4. Coercion of configuration values into steps.
"""

import re

import pytest

from importtracker.core.extraction.steps import (
    CallbackStep,
    ExtractionStep,
    PatternStep,
    as_step,
    as_steps,
)
from importtracker.domain.errors import ConfigurationError


def test_pattern_step_collects_all_groups_in_order():
    """Alternative groups that did not participate are skipped."""
    step = PatternStep(r'"([^"]+)"|\'([^\']+)\'')
    assert step.reduce("""a "one" b 'two' c "three" """) == ["one", "two", "three"]


def test_pattern_step_skips_empty_groups():
    step = PatternStep(r"\[(\w*)\]")
    assert step.reduce("[] [x] []") == ["x"]


def test_pattern_step_is_multiline_for_string_patterns():
    step = PatternStep(r"^@import (\S+)$")
    text = "@import a\nbody {}\n@import b"
    assert step.reduce(text) == ["a", "b"]


def test_pattern_step_accepts_compiled_pattern():
    step = PatternStep(re.compile(r"(\d+)"))
    assert step.reduce("1 and 22") == ["1", "22"]


def test_pattern_step_requires_capture_group():
    with pytest.raises(ConfigurationError):
        PatternStep(r"@import")


def test_pattern_step_rejects_invalid_regex():
    with pytest.raises(ConfigurationError):
        PatternStep(r"([unclosed")


def test_apply_concatenates_outputs_of_all_inputs():
    step = PatternStep(r"(\w+)")
    assert step.apply(["a b", "c"]) == ["a", "b", "c"]


def test_callback_step_drops_none_entries():
    step = CallbackStep(lambda text: [text.upper(), None, text])
    assert step.apply(["x", "y"]) == ["X", "x", "Y", "y"]


def test_callback_step_tolerates_none_result():
    step = CallbackStep(lambda text: None)
    assert step.reduce("anything") == []


def test_as_step_coercion():
    """Strings and patterns become regex steps, callables become callbacks."""
    assert isinstance(as_step(r"(a)"), PatternStep)
    assert isinstance(as_step(re.compile(r"(a)")), PatternStep)
    assert isinstance(as_step(str.split), CallbackStep)

    existing = PatternStep(r"(a)")
    assert as_step(existing) is existing


def test_as_step_rejects_unsupported_values():
    with pytest.raises(ConfigurationError):
        as_step(42)


def test_as_steps_requires_a_list():
    with pytest.raises(ConfigurationError):
        as_steps(r"(a)")

    steps = as_steps([r"(a)", str.split])
    assert all(isinstance(s, ExtractionStep) for s in steps)
