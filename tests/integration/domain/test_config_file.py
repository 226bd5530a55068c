from __future__ import annotations

"""
Integration tests for JSON configuration loading.
"""

import json
import os
from pathlib import Path

import pytest

from importtracker.domain.config import get_default_config, load_config_file
from importtracker.domain.errors import ConfigurationError


def test_default_config_shape():
    conf = get_default_config()

    assert conf["root_path"] == os.getcwd()
    assert conf["relative_output"] is True
    assert conf["log_level"] == "INFO"
    assert conf["parsers"] == {}
    assert conf["exclude_patterns"]


def test_load_config_file_fills_missing_sections(tmp_path: Path):
    path = tmp_path / "c.json"
    path.write_text(json.dumps({"parsers": {".less": None}}), encoding="utf-8")

    assert load_config_file(str(path)) == {"parsers": {".less": None}, "logging": {}}


def test_unknown_sections_are_ignored(tmp_path: Path, caplog):
    path = tmp_path / "c.json"
    path.write_text(json.dumps({"colors": True}), encoding="utf-8")

    with caplog.at_level("WARNING", logger="importtracker"):
        assert load_config_file(str(path)) == {"parsers": {}, "logging": {}}
    assert "colors" in caplog.text


@pytest.mark.parametrize("content", [
    "{broken",
    "[1, 2]",
    json.dumps({"parsers": ["x"]}),
    json.dumps({"logging": "DEBUG"}),
])
def test_malformed_files_raise(tmp_path: Path, content: str):
    path = tmp_path / "c.json"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(ConfigurationError):
        load_config_file(str(path))


def test_missing_file_raises(tmp_path: Path):
    with pytest.raises(ConfigurationError):
        load_config_file(str(tmp_path / "absent.json"))
