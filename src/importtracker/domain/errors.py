from __future__ import annotations

"""
Domain Exception Hierarchy.

Failures that callers are expected to distinguish. Both concrete errors
derive from ValueError so generic argument validation keeps working.
"""


class ImportTrackerError(Exception):
    """Base class for all errors raised by importtracker."""


class InvalidArgumentError(ImportTrackerError, ValueError):
    """A required argument was missing or malformed."""


class ConfigurationError(ImportTrackerError, ValueError):
    """A parser or runtime configuration could not be applied."""
