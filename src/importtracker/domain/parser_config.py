from __future__ import annotations

"""
Parser Configuration Domain.

Describes, per file extension, how dependency references are extracted from
a file and which naming variants are tried for each reference. Provides the
built-in stylesheet defaults and the layering of user overrides onto them.
"""

import logging
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Mapping, Optional

from importtracker.core.extraction.steps import ExtractionStep, as_steps
from importtracker.domain.errors import ConfigurationError

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# CONFIGURATION MODEL
# -----------------------------------------------------------------------------


@dataclass
class ParserConfig:
    """
    Extraction rules for a single file extension.

    Attributes:
        parser_steps: Ordered text reduction steps applied to the file body.
        prefixes: Name prefixes tried on the final path segment (e.g. '_').
        postfixes: Suffixes appended to the whole reference (e.g. '.scss').
        base_paths: Alternate directories relative references may live in.
    """
    parser_steps: List[ExtractionStep]
    prefixes: List[str] = field(default_factory=list)
    postfixes: List[str] = field(default_factory=list)
    base_paths: List[str] = field(default_factory=list)


_FIELD_ALIASES: Dict[str, str] = {
    "parser_steps": "parser_steps",
    "parserSteps": "parser_steps",
    "prefixes": "prefixes",
    "postfixes": "postfixes",
    "base_paths": "base_paths",
    "basePaths": "base_paths",
}

# -----------------------------------------------------------------------------
# BUILT-IN LANGUAGE RULES
# -----------------------------------------------------------------------------

# Any quoted or url() reference; one capture group per quoting style.
_REFERENCE = r"""(?:"([^"]+)"|'([^']+)'|url\((?:"([^"]+)"|'([^']+)'|([^)]+))\))"""

# Same alternatives without capture groups, for matching whole statements.
_REFERENCE_NC = r"""(?:"[^"]+"|'[^']+'|url\((?:"[^"]+"|'[^']+'|[^)]+)\))"""

# A statement starts a line or follows ';', a block brace or a comment end.
_STATEMENT_START = r"(?:^|;|\{|\}|\*/)\s*"

_PCSS_IMPORT = r"(?:^|;|\}|\*/)\s*@import\s+" + _REFERENCE

# Less allows media query parentheses before the single path.
_LESS_IMPORT = r"(?:^|;|\}|\*/)\s*@import\s+(?:\([^)]*\)\s*)?" + _REFERENCE + r"(?=;)"

# SCSS allows a comma separated list, so the whole list is captured first.
_SCSS_STATEMENT = (
    _STATEMENT_START
    + r"@(?:import|use|forward)\s+("
    + _REFERENCE_NC
    + r"(?:\s*,\s*"
    + _REFERENCE_NC
    + r")*)(?=[^;]*;)"
)

# Indented syntax: single line statements only, references may be unquoted.
_SASS_STATEMENT = r"^\s*@import\s+(.*)$"
_SASS_REFERENCE = (
    r""""([^"]+)"|'([^']+)'|url\((?:"([^"]+)"|'([^']+)'|([^)]+))\)|([^\s,"']+)"""
)


def get_default_parser_configs() -> Dict[str, ParserConfig]:
    """
    Build fresh instances of the built-in stylesheet configurations.

    Returns:
        Dict[str, ParserConfig]: Mapping of lower-cased extension to rules.
    """
    return {
        ".pcss": ParserConfig(
            parser_steps=as_steps([_PCSS_IMPORT]),
            postfixes=[".pcss"],
        ),
        ".less": ParserConfig(
            parser_steps=as_steps([_LESS_IMPORT]),
            postfixes=[".less"],
        ),
        ".scss": ParserConfig(
            parser_steps=as_steps([_SCSS_STATEMENT, _REFERENCE]),
            prefixes=["_"],
            postfixes=[".scss", ".sass"],
        ),
        ".sass": ParserConfig(
            parser_steps=as_steps([_SASS_STATEMENT, _SASS_REFERENCE]),
            prefixes=["_"],
            postfixes=[".scss", ".sass"],
        ),
    }

# -----------------------------------------------------------------------------
# OVERRIDE LAYERING
# -----------------------------------------------------------------------------


def build_parser_configs(
        overrides: Optional[Mapping[str, Any]] = None,
) -> Dict[str, ParserConfig]:
    """
    Layer user overrides onto the default configurations.

    Per extension: None or False removes support; a new extension must
    provide at least one extraction step; for a known extension every
    supplied field replaces the default field wholesale.

    Args:
        overrides: Mapping of extension to override (dict or ParserConfig).

    Returns:
        Dict[str, ParserConfig]: The effective configuration.

    Raises:
        ConfigurationError: If an override cannot be applied.
    """
    configs = get_default_parser_configs()
    if not overrides:
        return configs

    if not isinstance(overrides, Mapping):
        raise ConfigurationError(
            f"Parser overrides must be a mapping, received {type(overrides).__name__}."
        )

    for raw_ext, override in overrides.items():
        ext = _normalize_extension(raw_ext)

        if override is None or override is False:
            if configs.pop(ext, None) is not None:
                logger.debug(f"Parser support removed for '{ext}'.")
            continue

        existing = configs.get(ext)

        if isinstance(override, ParserConfig):
            if existing is None and not override.parser_steps:
                raise ConfigurationError(_missing_steps_msg(ext))
            configs[ext] = override
            continue

        if not isinstance(override, Mapping):
            raise ConfigurationError(
                f"Override for '{ext}' must be a mapping, received {type(override).__name__}."
            )

        fields = _coerce_fields(ext, override)

        if existing is None:
            if not fields.get("parser_steps"):
                raise ConfigurationError(_missing_steps_msg(ext))
            configs[ext] = ParserConfig(**fields)
            logger.debug(f"Parser support registered for '{ext}'.")
        else:
            configs[ext] = replace(existing, **fields)
            logger.debug(f"Parser fields {sorted(fields)} replaced for '{ext}'.")

    return configs

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------


def _normalize_extension(ext: Any) -> str:
    if not isinstance(ext, str) or not ext.startswith(".") or len(ext) < 2:
        raise ConfigurationError(f"Invalid extension {ext!r}: must start with '.'.")
    return ext.lower()


def _missing_steps_msg(ext: str) -> str:
    return f"A new file type configuration ('{ext}') must specify at least one extraction step."


def _coerce_fields(ext: str, override: Mapping[str, Any]) -> Dict[str, Any]:
    """Translate a raw override mapping into ParserConfig keyword arguments."""
    fields: Dict[str, Any] = {}
    for key, value in override.items():
        name = _FIELD_ALIASES.get(key)
        if name is None:
            raise ConfigurationError(f"Unknown parser option '{key}' for '{ext}'.")

        if name == "parser_steps":
            fields[name] = as_steps(value)
        else:
            fields[name] = _as_str_list(ext, key, value)
    return fields


def _as_str_list(ext: str, key: str, value: Any) -> List[str]:
    if value is None:
        return []
    if not isinstance(value, (list, tuple)) or not all(isinstance(v, str) for v in value):
        raise ConfigurationError(f"Option '{key}' for '{ext}' must be a list of strings.")
    return list(value)
