"""Shared fixtures for glossa tests.

``make_files`` writes a dict of relative paths to text under a base
directory, creating parents as needed:

    def test_something(tmp_path, make_files):
        make_files(tmp_path, {"src/app.py": 'translate(t, "ui.save")'})
"""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

import pytest
import structlog


def _write(base: Path, files: dict[str, str | dict]) -> None:
    for rel, content in files.items():
        path = base / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, dict):
            content = json.dumps(content)
        path.write_text(content, encoding="utf-8")


@pytest.fixture
def make_files() -> Callable[[Path, dict[str, str | dict]], None]:
    return _write


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """A project with ``src/`` code and ``src/app/translations``."""
    _write(
        tmp_path,
        {
            "pyproject.toml": '[project]\nname = "app"\nversion = "0.1.0"\n',
            "src/app/__init__.py": "",
            "src/app/translations/en.json": {"ui.save": "Save"},
        },
    )
    return tmp_path


@pytest.fixture(autouse=True)
def _reset_structlog():
    """CLI runs bind structlog to the runner's streams; undo that afterwards."""
    yield
    structlog.reset_defaults()
