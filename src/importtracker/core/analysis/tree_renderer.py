from __future__ import annotations

"""
Dependency Tree Renderer.

Converts dependency map snapshots into the text trees used for
diagnostics. Paths are shown relative to a base directory when they lie
inside it.
"""

from typing import Dict, List, Optional

from importtracker.domain.constants import (
    BRANCH_CONNECTOR,
    DEPENDENTS_TITLE,
    LAST_CONNECTOR,
    MAP_TITLE,
    NO_DEPENDENTS_LABEL,
    NOT_TRACKED_LABEL,
    ROOT_CONNECTOR,
)
from importtracker.infra.fs import format_for_display

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------


def render_dependency_map(
        dependency_map: Dict[str, List[str]],
        base_path: Optional[str] = None,
) -> str:
    """
    Render every dependency with its direct dependents.

    Files without dependencies only appear as dependents, even though they
    are tracked.

    Args:
        dependency_map: Snapshot of dependency path to dependents.
        base_path: Directory used to shorten paths, or None for absolute.

    Returns:
        str: Multi-line text tree.
    """
    lines: List[str] = [MAP_TITLE]
    for dependency, dependents in dependency_map.items():
        render_branch(dependency, dependents, lines, base_path)
    return "\n".join(lines)


def render_dependents(
        file_path: str,
        dependents: List[str],
        tracked: bool,
        base_path: Optional[str] = None,
) -> str:
    """
    Render the dependents of a single file.

    Args:
        file_path: The file whose dependents are listed.
        dependents: Its (direct or recursive) dependents.
        tracked: Whether the tracker knows the file at all.
        base_path: Directory used to shorten paths, or None for absolute.

    Returns:
        str: Multi-line text tree.
    """
    lines: List[str] = [DEPENDENTS_TITLE.format(count=len(dependents))]
    if tracked:
        render_branch(file_path, dependents, lines, base_path)
    else:
        lines.append(ROOT_CONNECTOR + format_for_display(file_path, base_path))
        lines.append(LAST_CONNECTOR + NOT_TRACKED_LABEL)
    return "\n".join(lines)


def render_branch(
        root: str,
        children: List[str],
        lines: List[str],
        base_path: Optional[str] = None,
) -> None:
    """
    Append one root entry and its children to the line accumulator.

    Uses ┬ for the root and ├ / └ connectors for the children.

    Args:
        root: Path rendered as the branch head.
        children: Paths rendered below it.
        lines: Accumulator list for output strings.
        base_path: Directory used to shorten paths.
    """
    lines.append(ROOT_CONNECTOR + format_for_display(root, base_path))

    if not children:
        lines.append(LAST_CONNECTOR + NO_DEPENDENTS_LABEL)
        return

    total = len(children)
    for i, child in enumerate(children):
        connector = LAST_CONNECTOR if i == total - 1 else BRANCH_CONNECTOR
        lines.append(connector + format_for_display(child, base_path))
