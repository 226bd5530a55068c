from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

1. Path manipulation so the 'src' directory is importable without install.
2. Shared fixtures building small stylesheet projects on disk.
"""

import os
import sys
from pathlib import Path
from typing import Callable

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def write_file(tmp_path: Path) -> Callable[[str, str], str]:
    """
    Return a helper that writes a text file under tmp_path.

    The helper creates parent directories and returns the absolute path
    of the written file as a string.
    """
    def _write(rel_path: str, content: str = "") -> str:
        target = tmp_path / rel_path
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
        return str(target)

    return _write


@pytest.fixture
def scss_project(write_file: Callable[[str, str], str]) -> dict:
    """
    Create a small SCSS project.

    Structure:
    /styles
      main.scss      -> imports "partials/colors", "layout"
      print.scss     -> imports "partials/colors"
      layout.scss    -> imports "partials/colors"
      /partials
        _colors.scss
    """
    return {
        "main": write_file("styles/main.scss", '@import "partials/colors", "layout";\n'),
        "print": write_file("styles/print.scss", "@import 'partials/colors';\n"),
        "layout": write_file("styles/layout.scss", '@import "partials/colors";\n.a { color: red; }\n'),
        "colors": write_file("styles/partials/_colors.scss", "$red: #f00;\n"),
    }
