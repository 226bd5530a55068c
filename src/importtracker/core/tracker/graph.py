from __future__ import annotations

"""
Reverse Dependency Map.

Maps each depended-upon path to the ordered set of paths importing it.
Entries whose dependent set becomes empty are removed immediately, so a key
exists only while something depends on it.
"""

from typing import Dict, Iterator, List, Tuple


class DependencyMap:
    """Mutable mapping of dependency path to its dependents."""

    def __init__(self) -> None:
        # dict values act as insertion-ordered sets
        self._edges: Dict[str, Dict[str, None]] = {}

    def add_edge(self, dependency: str, dependent: str) -> None:
        """Record that 'dependent' imports 'dependency'."""
        self._edges.setdefault(dependency, {})[dependent] = None

    def remove_dependent(self, dependent: str) -> int:
        """
        Drop every edge where 'dependent' is the importing side.

        Args:
            dependent: Path whose outgoing import relationships are cleared.

        Returns:
            int: Number of edges removed.
        """
        removed = 0
        for dependency in list(self._edges):
            dependents = self._edges[dependency]
            if dependent in dependents:
                del dependents[dependent]
                removed += 1
            if not dependents:
                del self._edges[dependency]
        return removed

    def dependents_of(self, dependency: str) -> List[str]:
        """Direct dependents of a path, in insertion order."""
        return list(self._edges.get(dependency, ()))

    def dependencies_of(self, dependent: str) -> List[str]:
        """Paths the given file currently imports."""
        return [dep for dep, dependents in self._edges.items() if dependent in dependents]

    def items(self) -> Iterator[Tuple[str, List[str]]]:
        for dependency, dependents in self._edges.items():
            yield dependency, list(dependents)

    def to_dict(self) -> Dict[str, List[str]]:
        return {dependency: list(dependents) for dependency, dependents in self._edges.items()}

    def __contains__(self, dependency: object) -> bool:
        return dependency in self._edges

    def __len__(self) -> int:
        return len(self._edges)

    def __bool__(self) -> bool:
        return bool(self._edges)
