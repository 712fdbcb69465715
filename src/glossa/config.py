"""Configuration for glossa.

Two layers:

* ``GlossaSettings`` - environment settings (``GLOSSA_*`` / ``.env``) that
  control logging.
* ``ProjectConfig`` - where a project keeps its source and translations,
  read from ``[tool.glossa]`` in the project's ``pyproject.toml``.
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from glossa.errors import ConfigError
from glossa.walker import DEFAULT_EXCLUDED_DIRS

PYPROJECT = "pyproject.toml"
TRANSLATIONS_DIRNAME = "translations"


class GlossaSettings(BaseSettings):
    """Environment settings shared by every command."""

    model_config = SettingsConfigDict(
        env_prefix="GLOSSA_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Logging level",
    )
    log_json: bool = Field(
        default=False,
        description="Emit log lines as JSON",
    )
    colors: bool | None = Field(
        default=None,
        description="Force colored log output on or off (auto-detect if unset)",
    )


@dataclass
class ProjectConfig:
    """Resolved locations for one project."""

    root: Path
    source_dir: Path
    translations_dir: Path
    exclude: frozenset[str] = field(default_factory=lambda: DEFAULT_EXCLUDED_DIRS)
    package: str | None = None

    def relative(self, path: Path) -> Path:
        """``path`` relative to the project root when it lies under it."""
        try:
            return path.resolve().relative_to(self.root.resolve())
        except ValueError:
            return path


def read_pyproject(root: Path) -> dict[str, Any]:
    """Parse ``pyproject.toml`` under ``root``; a missing file reads as empty."""
    path = root / PYPROJECT
    if not path.is_file():
        return {}
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"Cannot read {path}: {e}", details={"path": str(path)}) from e


def _package_name(pyproject: dict[str, Any]) -> str | None:
    name = pyproject.get("project", {}).get("name")
    if not isinstance(name, str) or not name:
        return None
    return name.replace("-", "_").replace(".", "_").lower()


def _tool_table(pyproject: dict[str, Any], path: Path) -> dict[str, Any]:
    table = pyproject.get("tool", {}).get("glossa", {})
    if not isinstance(table, dict):
        raise ConfigError(f"[tool.glossa] in {path} must be a table", details={"path": str(path)})
    return table


def _default_source_dir(root: Path) -> Path:
    src = root / "src"
    return src if src.is_dir() else root


def _default_translations_dir(root: Path, package: str | None) -> Path:
    if package:
        for candidate in (
            root / "src" / package / TRANSLATIONS_DIRNAME,
            root / package / TRANSLATIONS_DIRNAME,
        ):
            if candidate.is_dir():
                return candidate
    return root / TRANSLATIONS_DIRNAME


def _path_setting(table: dict[str, Any], name: str) -> str | None:
    value = table.get(name)
    if value is not None and not isinstance(value, str):
        raise ConfigError(
            f"[tool.glossa].{name} must be a path string, got {type(value).__name__}",
            details={name: value},
        )
    return value


def load_project_config(root: Path) -> ProjectConfig:
    """Resolve source and translation locations for the project at ``root``."""
    root = root.resolve()
    pyproject = read_pyproject(root)
    package = _package_name(pyproject)
    table = _tool_table(pyproject, root / PYPROJECT)

    source_dir = _path_setting(table, "source_dir")
    translations_dir = _path_setting(table, "translations_dir")
    extra_exclude = table.get("exclude", [])
    if not isinstance(extra_exclude, list) or not all(isinstance(x, str) for x in extra_exclude):
        raise ConfigError(
            "[tool.glossa].exclude must be a list of directory names",
            details={"exclude": extra_exclude},
        )

    return ProjectConfig(
        root=root,
        source_dir=root / source_dir if source_dir else _default_source_dir(root),
        translations_dir=(
            root / translations_dir
            if translations_dir
            else _default_translations_dir(root, package)
        ),
        exclude=DEFAULT_EXCLUDED_DIRS | frozenset(extra_exclude),
        package=package,
    )
