from __future__ import annotations

"""
Project File Discovery.

Walks a project directory and yields the files whose extension has a
parser configuration. Used to run the initial population pass of the
tracker from the CLI.
"""

import logging
import os
import re
from typing import Collection, Iterable, List, Optional

from importtracker.domain.constants import DEFAULT_EXCLUDE_PATTERNS
from importtracker.domain.errors import ConfigurationError

logger = logging.getLogger(__name__)


def compile_patterns(patterns: Iterable[str]) -> List[re.Pattern]:
    """
    Compile raw exclusion regexes.

    Raises:
        ConfigurationError: If a pattern is not a valid regex.
    """
    compiled: List[re.Pattern] = []
    for p in patterns:
        try:
            compiled.append(re.compile(p))
        except re.error as e:
            raise ConfigurationError(f"Invalid exclude pattern {p!r}: {e}") from e
    return compiled


def matches_any(name: str, compiled_patterns: List[re.Pattern]) -> bool:
    return any(rx.search(name) for rx in compiled_patterns)


def yield_project_files(
        root_path: str,
        extensions: Collection[str],
        exclude_patterns: Optional[List[str]] = None,
) -> Iterable[str]:
    """
    Traverse the filesystem and yield files with a tracked extension.

    Excluded directories are pruned before descending. Directory and file
    names are visited in sorted order so the population pass is stable.

    Args:
        root_path: Project root directory.
        extensions: Lower-cased extensions (with dot) to include.
        exclude_patterns: Regexes matched against entry names; defaults to
                          VCS, dependency and dot directories.

    Yields:
        str: Absolute file path.
    """
    root_abs = os.path.abspath(root_path)
    patterns = exclude_patterns if exclude_patterns is not None else DEFAULT_EXCLUDE_PATTERNS
    exclude_rx = compile_patterns(patterns)
    wanted = {e.lower() for e in extensions}

    for root, dirs, files in os.walk(root_abs):
        dirs[:] = sorted(d for d in dirs if not matches_any(d, exclude_rx))

        for file_name in sorted(files):
            if matches_any(file_name, exclude_rx):
                continue

            if os.path.splitext(file_name)[1].lower() not in wanted:
                continue

            yield os.path.join(root, file_name)
