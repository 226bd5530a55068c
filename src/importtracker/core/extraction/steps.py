from __future__ import annotations

"""
Text Reduction Steps.

Each step narrows a list of texts down to a list of smaller texts. Chaining
steps reduces the raw file body to the reference strings written inside the
import statements. Two variants exist: a declarative regex capture step and
an arbitrary callback step.
"""

import re
from abc import ABC, abstractmethod
from typing import Any, Callable, Iterable, List, Pattern, Union

from importtracker.domain.errors import ConfigurationError

StepCallback = Callable[[str], Iterable[str]]


# -----------------------------------------------------------------------------
# STEP INTERFACE
# -----------------------------------------------------------------------------


class ExtractionStep(ABC):
    """Capability shared by every text reduction step."""

    def apply(self, texts: Iterable[str]) -> List[str]:
        """
        Run the step over every input text and concatenate the outputs.

        Args:
            texts: Ordered input strings.

        Returns:
            List[str]: Ordered output strings of all inputs.
        """
        results: List[str] = []
        for text in texts:
            results.extend(self.reduce(text))
        return results

    @abstractmethod
    def reduce(self, text: str) -> List[str]:
        """Reduce a single text to its extracted fragments."""


class PatternStep(ExtractionStep):
    """
    Collects the captured groups of every match of a regular expression.

    Every non-empty group of every match is emitted, in the order the
    matches are found. Patterns given as strings are compiled with
    re.MULTILINE so that '^' and '$' anchor at line boundaries.
    """

    def __init__(self, pattern: Union[str, Pattern[str]]) -> None:
        if isinstance(pattern, str):
            try:
                pattern = re.compile(pattern, re.MULTILINE)
            except re.error as e:
                raise ConfigurationError(f"Invalid extraction pattern {pattern!r}: {e}") from e

        if pattern.groups < 1:
            raise ConfigurationError(
                f"Extraction pattern {pattern.pattern!r} must define at least one capture group."
            )
        self.pattern = pattern

    def reduce(self, text: str) -> List[str]:
        captured: List[str] = []
        for match in self.pattern.finditer(text):
            captured.extend(group for group in match.groups() if group)
        return captured

    def __repr__(self) -> str:
        return f"PatternStep({self.pattern.pattern!r})"


class CallbackStep(ExtractionStep):
    """Delegates reduction to a user supplied function."""

    def __init__(self, func: StepCallback) -> None:
        if not callable(func):
            raise ConfigurationError(f"Extraction callback {func!r} is not callable.")
        self.func = func

    def reduce(self, text: str) -> List[str]:
        return [item for item in self.func(text) or () if item is not None]

    def __repr__(self) -> str:
        return f"CallbackStep({getattr(self.func, '__name__', self.func)!r})"

# -----------------------------------------------------------------------------
# COERCION
# -----------------------------------------------------------------------------


def as_step(value: Any) -> ExtractionStep:
    """
    Convert a configuration value into an ExtractionStep.

    Args:
        value: A step instance, a regex (string or compiled) or a callable.

    Returns:
        ExtractionStep: The matching step implementation.

    Raises:
        ConfigurationError: If the value cannot act as a step.
    """
    if isinstance(value, ExtractionStep):
        return value
    if isinstance(value, (str, re.Pattern)):
        return PatternStep(value)
    if callable(value):
        return CallbackStep(value)
    raise ConfigurationError(
        f"Unsupported extraction step of type {type(value).__name__}: "
        "expected a regex pattern or a callable."
    )


def as_steps(values: Iterable[Any]) -> List[ExtractionStep]:
    """Convert an ordered sequence of configuration values into steps."""
    if not isinstance(values, (list, tuple)):
        raise ConfigurationError("Extraction steps must be given as a list.")
    return [as_step(v) for v in values]
