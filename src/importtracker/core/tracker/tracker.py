from __future__ import annotations

"""
Incremental Dependency Tracker.

Tracks the files flowing through a build pipeline and the import
relationships between them. The first pass over a project is expected to
feed every file once; afterwards, each changed file is answered with the
files that (transitively) import it, so they can be rebuilt too.

A tracker is meant to live for a whole build session. All public methods
are serialized with a re-entrant lock.
"""

import logging
import threading
from typing import Callable, Dict, Iterator, List, Optional, Set, Union

from importtracker.core.analysis.tree_renderer import render_dependency_map, render_dependents
from importtracker.core.extraction.parser import DependencyParser
from importtracker.core.tracker.graph import DependencyMap
from importtracker.domain.errors import InvalidArgumentError
from importtracker.domain.models import SourceFile
from importtracker.infra.fs import file_exists, normalize_path, read_file_bytes

logger = logging.getLogger(__name__)


class DependencyTracker:
    """
    Maintains the reverse dependency graph across file events.

    Every path ever seen, either as a file event or as an import target that
    did not exist yet, stays in the tracked set. A file is answered with its
    dependents only if it was tracked before the current event; a first
    sighting is assumed to be part of the initial population pass.
    """

    def __init__(
            self,
            parser: Optional[DependencyParser] = None,
            *,
            exists: Callable[[str], bool] = file_exists,
            read_file: Callable[[str], bytes] = read_file_bytes,
    ) -> None:
        """
        Args:
            parser: Extraction pipeline; defaults to the built-in rules.
            exists: File existence probe.
            read_file: Loader used to materialize dependents.
        """
        self.parser = parser if parser is not None else DependencyParser()
        self._exists = exists
        self._read_file = read_file
        self._map = DependencyMap()
        self._tracked: Set[str] = set()
        self._lock = threading.RLock()

    # -------------------------------------------------------------------------
    # UPDATE
    # -------------------------------------------------------------------------

    def update(
            self,
            file_path: str,
            content: Optional[Union[bytes, str]],
            extension: Optional[str] = None,
    ) -> Optional[List[SourceFile]]:
        """
        Register a file event and return the files that depend on it.

        Args:
            file_path: Path of the file that passed through the pipeline.
            content: File body, or None when no body is available.
            extension: Parser configuration key; derived from the path if None.

        Returns:
            Optional[List[SourceFile]]: Transitive dependents with their
            current content, or None when nothing should be added.

        Raises:
            InvalidArgumentError: If file_path is missing.
        """
        if not file_path:
            raise InvalidArgumentError("The 'file_path' argument is None or empty.")

        with self._lock:
            file_path = normalize_path(file_path)

            # Extraction runs before any mutation so a failure leaves the graph intact.
            dependency_paths: Optional[List[str]] = None
            if content is not None:
                dependency_paths = self.parser.extract(file_path, content, extension)

            was_tracked = file_path in self._tracked
            self._tracked.add(file_path)

            if content is not None:
                self._map.remove_dependent(file_path)

                if dependency_paths is None:
                    logger.debug(f"Untracked file type: {file_path}")
                    return None

                for dependency_path in dependency_paths:
                    self._add_dependency(dependency_path, file_path)

            if not was_tracked:
                return None

            dependents = self._collect_dependents(file_path, check_exists=True)
            logger.debug(f"{file_path} has {len(dependents)} dependent(s) to rebuild.")

            return [SourceFile(path=p, content=self._read_file(p)) for p in dependents]

    def _add_dependency(self, dependency_path: str, file_path: str) -> None:
        dependency_path = normalize_path(dependency_path)

        # Pre-track missing targets so their later creation is treated as a change.
        if dependency_path not in self._tracked and not self._exists(dependency_path):
            self._tracked.add(dependency_path)

        self._map.add_edge(dependency_path, file_path)

    # -------------------------------------------------------------------------
    # TRAVERSAL
    # -------------------------------------------------------------------------

    def _collect_dependents(self, file_path: str, *, check_exists: bool) -> List[str]:
        """
        Depth-first walk of the 'is imported by' relation.

        Args:
            file_path: Start of the walk; never reported itself.
            check_exists: Skip dependents missing on disk and prune them from
                          the map instead of descending into them.

        Returns:
            List[str]: Distinct dependents in discovery order.
        """
        visited: Set[str] = {file_path}
        missing: Set[str] = set()
        found: List[str] = []
        stack: List[Iterator[str]] = [iter(self._map.dependents_of(file_path))]

        while stack:
            dependent = next(stack[-1], None)
            if dependent is None:
                stack.pop()
                continue

            if dependent in visited or dependent in missing:
                continue

            if check_exists and not self._exists(dependent):
                missing.add(dependent)
                removed = self._map.remove_dependent(dependent)
                logger.debug(f"Pruned deleted dependent {dependent} ({removed} edge(s)).")
                continue

            visited.add(dependent)
            found.append(dependent)
            stack.append(iter(self._map.dependents_of(dependent)))

        return found

    # -------------------------------------------------------------------------
    # QUERIES
    # -------------------------------------------------------------------------

    def is_tracked(self, file_path: str) -> bool:
        with self._lock:
            return normalize_path(file_path) in self._tracked

    def tracked_paths(self) -> List[str]:
        with self._lock:
            return sorted(self._tracked)

    def dependents_of(self, file_path: str, recursive: bool = False) -> List[str]:
        """
        Dependents of a path without touching the file system.

        Args:
            file_path: Path to look up.
            recursive: Follow dependents of dependents.

        Returns:
            List[str]: Dependent paths.
        """
        with self._lock:
            file_path = normalize_path(file_path)
            if recursive:
                return self._collect_dependents(file_path, check_exists=False)
            return self._map.dependents_of(file_path)

    def dependency_map(self) -> Dict[str, List[str]]:
        """Snapshot copy of the dependency map."""
        with self._lock:
            return self._map.to_dict()

    # -------------------------------------------------------------------------
    # DIAGNOSTICS
    # -------------------------------------------------------------------------

    def format_dependency_map(self, base_path: Optional[str] = None) -> str:
        return render_dependency_map(self.dependency_map(), base_path)

    def format_dependents(
            self,
            file_path: str,
            recursive: bool = True,
            base_path: Optional[str] = None,
    ) -> str:
        with self._lock:
            normalized = normalize_path(file_path)
            return render_dependents(
                normalized,
                self.dependents_of(normalized, recursive=recursive),
                normalized in self._tracked,
                base_path,
            )

    def log_dependency_map(self, base_path: Optional[str] = None) -> None:
        logger.info(self.format_dependency_map(base_path))

    def log_dependents(
            self,
            file_path: str,
            recursive: bool = True,
            base_path: Optional[str] = None,
    ) -> None:
        logger.info(self.format_dependents(file_path, recursive, base_path))
