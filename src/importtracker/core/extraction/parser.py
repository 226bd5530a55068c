from __future__ import annotations

"""
Dependency Extraction Pipeline.

Turns the body of a source file into the ordered set of absolute paths the
file may depend on. References are extracted by the configured reduction
steps, then expanded into every plausible naming variant (partial prefixes,
implicit extensions, alternate base directories). Existence is
not checked here; forward references to files that do not exist yet are
tracked as well.
"""

import logging
import os
import re
from typing import Any, Dict, List, Mapping, Optional, Union

from importtracker.domain.constants import DEFAULT_ENCODING, URL_SCHEMES
from importtracker.domain.parser_config import ParserConfig, build_parser_configs

logger = logging.getLogger(__name__)

# Leading separator or drive letter ('C:'), on any host
_ABSOLUTE_RX = re.compile(r"^(?:[\\/]|[A-Za-z]:)")


class DependencyParser:
    """
    Extracts dependency paths from files using per-extension rules.

    The effective configuration is the built-in defaults with the supplied
    overrides layered on top (see build_parser_configs).
    """

    def __init__(
            self,
            overrides: Optional[Mapping[str, Any]] = None,
            *,
            encoding: str = DEFAULT_ENCODING,
    ) -> None:
        self.config: Dict[str, ParserConfig] = build_parser_configs(overrides)
        self.encoding = encoding

    def get_config(self, extension: str) -> Optional[ParserConfig]:
        """Return the rules for an extension (case-insensitive), if any."""
        return self.config.get(extension.lower())

    def supports(self, file_path: str) -> bool:
        return self.get_config(os.path.splitext(file_path)[1]) is not None

    def extract(
            self,
            file_path: str,
            file_contents: Union[bytes, str],
            extension: Optional[str] = None,
    ) -> Optional[List[str]]:
        """
        Parse a file and return the absolute paths it may depend on.

        Args:
            file_path: Path of the importing file; relative references are
                       resolved against its directory.
            file_contents: File body as bytes or text.
            extension: Configuration key; derived from file_path when None.

        Returns:
            Optional[List[str]]: Ordered, duplicate-free absolute paths, or
                                 None when the file type is not tracked.
        """
        if extension is None:
            extension = os.path.splitext(file_path)[1]

        config = self.get_config(extension)
        if config is None:
            return None

        text = self._decode(file_contents)

        references = self.parse_references(text, config)
        references = [r for r in references if not _is_url(r)]

        candidates = expand_candidates(references, config)

        unique: Dict[str, None] = {}
        for candidate in candidates:
            unique.setdefault(os.path.normpath(candidate), None)

        base_dir = os.path.dirname(file_path)
        resolved = [os.path.abspath(os.path.join(base_dir, p)) for p in unique]

        logger.debug(
            f"Extracted {len(references)} reference(s), "
            f"{len(resolved)} candidate path(s) from {file_path}"
        )
        return resolved

    @staticmethod
    def parse_references(text: str, config: ParserConfig) -> List[str]:
        """
        Reduce a file body to the raw reference strings of its imports.

        Args:
            text: Decoded file body.
            config: Rules providing the ordered reduction steps.

        Returns:
            List[str]: References in encounter order.
        """
        texts: List[str] = [text]
        for step in config.parser_steps:
            texts = step.apply(texts)
        return texts

    def _decode(self, file_contents: Union[bytes, str]) -> str:
        if isinstance(file_contents, str):
            return file_contents
        return bytes(file_contents).decode(self.encoding, errors="replace")

# -----------------------------------------------------------------------------
# CANDIDATE EXPANSION
# -----------------------------------------------------------------------------


def expand_candidates(references: List[str], config: ParserConfig) -> List[str]:
    """
    Generate every naming variant of the extracted references.

    Stages run in sequence and each one works over everything produced so
    far, so prefixed names are also postfixed and every relative variant is
    also tried under each base path. Nothing is removed.

    Args:
        references: Raw references extracted from the file.
        config: Rules providing prefixes, postfixes and base paths.

    Returns:
        List[str]: Original references followed by generated variants.
    """
    candidates = list(references)

    candidates.extend(
        os.path.join(os.path.dirname(c), prefix + os.path.basename(c))
        for c in list(candidates)
        for prefix in config.prefixes
    )

    candidates.extend(
        c + postfix
        for c in list(candidates)
        for postfix in config.postfixes
    )

    candidates.extend(
        os.path.join(base_path, c)
        for c in list(candidates)
        if not is_absolute_reference(c)
        for base_path in config.base_paths
    )

    return candidates


def is_absolute_reference(reference: str) -> bool:
    """True if the reference starts with a separator or a drive prefix."""
    return bool(_ABSOLUTE_RX.match(reference))


def _is_url(reference: str) -> bool:
    return reference.lstrip().lower().startswith(URL_SCHEMES)
