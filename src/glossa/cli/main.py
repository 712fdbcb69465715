"""Main CLI application.

    glossa scan               - keys used in code but declared in no locale
    glossa scan --dir <path>  - scan a specific directory instead
    glossa unused             - keys declared in locales but never used
"""

from __future__ import annotations

from collections import defaultdict
from pathlib import Path
from typing import Annotated, NoReturn

import typer

from glossa.cli.common import (
    console,
    create_table,
    error,
    format_key,
    format_location,
    hint,
    info,
    print_json,
    success,
    warn,
)
from glossa.config import GlossaSettings, ProjectConfig, load_project_config
from glossa.errors import (
    ConfigError,
    GlossaError,
    LocaleError,
    NoTranslationsError,
    TranslationFormatError,
)
from glossa.logging import configure_logging, get_logger
from glossa.scanner import ScanResult, UnusedResult, run_scan, run_unused

log = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1

app = typer.Typer(
    name="glossa",
    help="Glossa - check translation keys used in Python code against locale files",
    add_completion=False,
    no_args_is_help=True,
)


def exit_with(ok: bool) -> NoReturn:
    """The only place a command decides the process exit status."""
    raise typer.Exit(EXIT_OK if ok else EXIT_FAILED)


def _handle_error(e: GlossaError) -> NoReturn:
    log.debug("command failed", exc_info=e, **e.details)
    error(e.message)
    if isinstance(e, NoTranslationsError):
        hint("Set translations_dir under [tool.glossa] in pyproject.toml")
    elif isinstance(e, LocaleError):
        hint("Name locale files like en.json, en-US.json or pt_BR.po")
    elif isinstance(e, TranslationFormatError):
        hint("Locale files must be flat JSON, nested JSON or gettext PO")
    exit_with(False)


def _project(ctx: typer.Context) -> ProjectConfig:
    return ctx.obj


def _source_root(project: ProjectConfig, directory: Path | None) -> Path:
    """The directory to scan; it must exist even if it holds no sources."""
    source_root = directory if directory is not None else project.source_dir
    if not source_root.exists():
        raise ConfigError(
            f"Source directory does not exist: {source_root}",
            details={"source_root": str(source_root)},
        )
    return source_root


# ============================================================================
# Global callback
# ============================================================================


@app.callback()
def main_callback(
    ctx: typer.Context,
    root: Annotated[
        Path,
        typer.Option(
            "--root",
            "-r",
            help="Project root holding pyproject.toml",
            envvar="GLOSSA_ROOT",
        ),
    ] = Path("."),
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log debug details to stderr"),
    ] = False,
) -> None:
    """Glossa - translation key scanner."""
    settings = GlossaSettings()
    configure_logging(
        level="DEBUG" if verbose else settings.log_level,
        colors=settings.colors,
        json_output=settings.log_json,
    )
    try:
        ctx.obj = load_project_config(root)
    except ConfigError as e:
        _handle_error(e)


# ============================================================================
# Rendering
# ============================================================================


def _scan_payload(result: ScanResult, project: ProjectConfig) -> dict[str, object]:
    return {
        "ok": result.ok,
        "format": str(result.format) if result.format else None,
        "locales": result.locales,
        "files_scanned": result.files_scanned,
        "declared_keys": result.declared_count,
        "used_keys": result.used_count,
        "missing": [
            {"key": r.key, "file": str(project.relative(r.file)), "line": r.line}
            for r in sorted(result.missing, key=lambda r: (r.key, str(r.file), r.line))
        ],
    }


def _render_scan(result: ScanResult, project: ProjectConfig) -> None:
    info(
        f"Scanned {result.files_scanned} files: "
        f"{result.used_count} key usages, {result.declared_count} declared keys"
    )
    if result.ok:
        success("All used translation keys are declared")
        return

    by_key: dict[str, list[str]] = defaultdict(list)
    for record in result.missing:
        by_key[record.key].append(format_location(str(project.relative(record.file)), record.line))

    console.print()
    for key in sorted(by_key):
        for location in sorted(by_key[key]):
            console.print(f"  {format_key(key)}  {location}")
    console.print()
    error(
        f"{len(by_key)} missing translation keys "
        f"({len(result.missing)} usages)"
    )


def _render_unused(result: UnusedResult) -> None:
    info(
        f"Scanned {result.files_scanned} files: "
        f"{result.used_count} key usages, {result.declared_count} declared keys"
    )
    if result.ok:
        success("Every declared translation key is used")
        return

    table = create_table(None, "Key")
    for key in result.unused:
        table.add_row(key)
    console.print(table)
    warn(f"{len(result.unused)} unused translation keys")


# ============================================================================
# Commands
# ============================================================================


@app.command()
def scan(
    ctx: typer.Context,
    directory: Annotated[
        Path | None,
        typer.Option("--dir", "-d", help="Directory to scan instead of the project source root"),
    ] = None,
    json_output: Annotated[
        bool,
        typer.Option("--json", "-j", help="Output as JSON"),
    ] = False,
) -> None:
    """Find translation keys used in code but missing from every locale."""
    project = _project(ctx)
    try:
        source_root = _source_root(project, directory)
        result = run_scan(source_root, project.translations_dir, project.exclude)
    except GlossaError as e:
        _handle_error(e)

    if json_output:
        print_json(_scan_payload(result, project))
    else:
        _render_scan(result, project)
    exit_with(result.ok)


@app.command()
def unused(
    ctx: typer.Context,
    directory: Annotated[
        Path | None,
        typer.Option("--dir", "-d", help="Directory to scan instead of the project source root"),
    ] = None,
    json_output: Annotated[
        bool,
        typer.Option("--json", "-j", help="Output as JSON"),
    ] = False,
) -> None:
    """Find translation keys declared in locale files but never used."""
    project = _project(ctx)
    try:
        source_root = _source_root(project, directory)
        result = run_unused(source_root, project.translations_dir, project.exclude)
    except GlossaError as e:
        _handle_error(e)

    if json_output:
        print_json(
            {
                "ok": result.ok,
                "format": str(result.format) if result.format else None,
                "locales": result.locales,
                "declared_keys": result.declared_count,
                "used_keys": result.used_count,
                "unused": result.unused,
            }
        )
    else:
        _render_unused(result)
    exit_with(result.ok)
