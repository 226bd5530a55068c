from __future__ import annotations

"""
Runtime Configuration Domain.

Default CLI session settings and loading of the optional JSON configuration
file that carries parser overrides and logging preferences.
"""

import json
import logging
import os
from typing import Any, Dict

from importtracker.domain.constants import DEFAULT_EXCLUDE_PATTERNS
from importtracker.domain.errors import ConfigurationError

logger = logging.getLogger(__name__)

_KNOWN_SECTIONS = ("parsers", "logging")

# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration of a CLI run.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        "root_path": os.getcwd(),
        "exclude_patterns": list(DEFAULT_EXCLUDE_PATTERNS),
        "relative_output": True,
        "log_level": "INFO",
        "parsers": {},
    }

# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------


def load_config_file(path: str) -> Dict[str, Any]:
    """
    Load a JSON configuration file.

    Expected shape::

        {
            "parsers": {".scss": {"base_paths": ["styles"]}, ".less": null},
            "logging": {"level": "DEBUG"}
        }

    Args:
        path: Path to the JSON file.

    Returns:
        Dict[str, Any]: The parsed document, with missing sections empty.

    Raises:
        ConfigurationError: If the file is unreadable or malformed.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise ConfigurationError(f"Cannot read configuration file '{path}': {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Malformed configuration file '{path}': {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Configuration file '{path}' must contain a JSON object, "
            f"found {type(data).__name__}."
        )

    for key in data:
        if key not in _KNOWN_SECTIONS:
            logger.warning(f"Ignoring unknown configuration section '{key}' in {path}")

    parsers = data.get("parsers") or {}
    logging_section = data.get("logging") or {}
    if not isinstance(parsers, dict) or not isinstance(logging_section, dict):
        raise ConfigurationError(f"Sections of '{path}' must be JSON objects.")

    logger.debug(f"Configuration loaded from {path}")
    return {"parsers": parsers, "logging": logging_section}
