from __future__ import annotations

"""
Pipeline Exchange Models.

Records passed between the host build pipeline and the dependency tracker.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SourceFile:
    """
    A file event flowing through the build pipeline.

    Attributes:
        path: Absolute filesystem path of the file.
        content: Raw file body, or None when no body is available
                 (e.g. a deletion marker).
    """
    path: str
    content: Optional[bytes] = None

    @property
    def extension(self) -> str:
        """Lower-cased extension including the leading dot."""
        return os.path.splitext(self.path)[1].lower()

    def is_null(self) -> bool:
        return self.content is None


@dataclass(frozen=True)
class PipelineOptions:
    """
    Diagnostic switches for the pipeline boundary.

    Attributes:
        log_dependents: Log the recursive dependents of every file that
                        triggers a rebuild of other files.
        log_dependency_map: Log the whole dependency map once the stream ends.
        base_path: Directory used to shorten logged paths. Falls back to the
                   current working directory when None.
    """
    log_dependents: bool = False
    log_dependency_map: bool = False
    base_path: Optional[str] = None
