from __future__ import annotations

"""
Domain Constants.

Centralizes the static values shared by the extraction pipeline, the
tracker diagnostics and the CLI.
"""

from typing import List, Tuple

DEFAULT_ENCODING = "utf-8"

# Reference schemes that never point at a file-system dependency
URL_SCHEMES: Tuple[str, ...] = ("http:", "https:", "ftp:", "file:")

# -----------------------------------------------------------------------------
# DIAGNOSTIC RENDERING
# -----------------------------------------------------------------------------

MAP_TITLE = "Tracked dependencies and their dependents"
DEPENDENTS_TITLE = "Dependents ({count})"
ROOT_CONNECTOR = " ─┬─ "
BRANCH_CONNECTOR = "  ├─ "
LAST_CONNECTOR = "  └─ "
NO_DEPENDENTS_LABEL = "File has no dependents."
NOT_TRACKED_LABEL = "Unknown: File is not tracked."

# -----------------------------------------------------------------------------
# DISCOVERY DEFAULTS
# -----------------------------------------------------------------------------

DEFAULT_EXCLUDE_PATTERNS: List[str] = [
    r"^(node_modules|bower_components|__pycache__|\.git|\.hg|\.svn)$",
    r"^\.",
]
