from __future__ import annotations

"""
Build Pipeline Boundary.

Functions a host build pipeline calls for every file event. Each event is
passed through unchanged and, when the tracker reports dependents, those
are appended so the host rebuilds them as well. The tracker instance is
owned by the caller and reused across calls.
"""

import logging
import os
from typing import Iterable, Iterator, List, Optional

from importtracker.core.tracker.tracker import DependencyTracker
from importtracker.domain.models import PipelineOptions, SourceFile

logger = logging.getLogger(__name__)

_DEFAULT_OPTIONS = PipelineOptions()


def process_file(
        tracker: DependencyTracker,
        source: SourceFile,
        options: Optional[PipelineOptions] = None,
) -> List[SourceFile]:
    """
    Feed a single file event through the tracker.

    Args:
        tracker: Session tracker shared by every call.
        source: The incoming file event.
        options: Diagnostic switches.

    Returns:
        List[SourceFile]: The incoming file followed by its dependents.
    """
    options = options or _DEFAULT_OPTIONS

    dependents = tracker.update(source.path, source.content)

    if dependents is not None and options.log_dependents:
        tracker.log_dependents(
            source.path,
            recursive=True,
            base_path=options.base_path or os.getcwd(),
        )

    out: List[SourceFile] = [source]
    if dependents:
        out.extend(dependents)
    return out


def process_stream(
        tracker: DependencyTracker,
        sources: Iterable[SourceFile],
        options: Optional[PipelineOptions] = None,
) -> Iterator[SourceFile]:
    """
    Apply process_file to every event of a stream, in order.

    The dependency map is logged once the stream is exhausted when
    options.log_dependency_map is set.

    Args:
        tracker: Session tracker shared by every call.
        sources: Incoming file events.
        options: Diagnostic switches.

    Yields:
        SourceFile: Each incoming file, then its dependents.
    """
    options = options or _DEFAULT_OPTIONS

    count = 0
    for source in sources:
        count += 1
        yield from process_file(tracker, source, options)

    logger.debug(f"Stream finished after {count} file event(s).")

    if options.log_dependency_map:
        tracker.log_dependency_map(options.base_path or os.getcwd())
