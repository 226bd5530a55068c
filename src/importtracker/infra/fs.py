from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Thin wrappers over 'os' used by the tracker and the CLI: path normalization,
existence checks, raw file reads and display formatting of paths. Kept in
one place so tests can substitute them.
"""

import os
from typing import Optional

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------


def normalize_path(path: str) -> str:
    """
    Normalize a path lexically (separators, '.', '..') without touching disk.

    Args:
        path: Raw path string.

    Returns:
        str: Normalized path. Case is preserved.
    """
    return os.path.normpath(path)


def resolve_path(path: Optional[str], base_dir: str) -> str:
    """
    Resolve a user supplied path into an absolute one.

    Expands '~' and environment variables; relative paths are taken from
    base_dir.

    Args:
        path: Raw input path string.
        base_dir: Directory relative paths are resolved against.

    Returns:
        str: Normalized absolute path.
    """
    p = os.path.expandvars(os.path.expanduser((path or "").strip()))
    return os.path.abspath(os.path.join(base_dir, p))


def format_for_display(absolute_path: str, base_path: Optional[str]) -> str:
    """
    Render a path relative to base_path when it lies inside it.

    Args:
        absolute_path: Path to render.
        base_path: Reference directory, or None to keep paths absolute.

    Returns:
        str: Relative path, or the absolute path when it is outside base_path
             (or on another drive).
    """
    if not base_path:
        return absolute_path

    try:
        relative = os.path.relpath(absolute_path, base_path)
    except ValueError:
        return absolute_path

    if relative == os.pardir or relative.startswith(os.pardir + os.sep):
        return absolute_path
    return relative

# -----------------------------------------------------------------------------
# FILE ACCESS API
# -----------------------------------------------------------------------------


def file_exists(path: str) -> bool:
    return os.path.exists(path)


def read_file_bytes(path: str) -> bytes:
    """
    Load the current content of a file.

    Raises:
        OSError: If the file cannot be read.
    """
    with open(path, "rb") as f:
        return f.read()


def read_file_if_exists(path: str) -> Optional[bytes]:
    """Return the file content, or None if the file is missing."""
    if not os.path.isfile(path):
        return None
    return read_file_bytes(path)
