"""Helpers shared by the CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from rich.markup import escape

from changelog_py.config import ParseOptions, load_config
from changelog_py.config.loader import find_project_root
from changelog_py.core import parse
from changelog_py.exceptions import ChangelogPyError

if TYPE_CHECKING:
    from rich.console import Console

    from changelog_py.core import Changelog


def resolve_options(
    path: str | None,
    strict: bool | None,
    ignore_case: bool | None,
    err_console: Console,
) -> tuple[Path, ParseOptions]:
    """Work out which file to read and how strictly to parse it.

    A directory (or no path at all) means the configured changelog of the
    project containing it, resolved against the directory that holds
    pyproject.toml. Command-line flags win over [tool.changelog-py] settings.

    Args:
        path: Changelog file or project directory given on the command line
        strict: Override for enforce_date_is_present
        ignore_case: Override for allow_inconsistent_case
        err_console: Console for error output

    Returns:
        Changelog path and the effective parse options
    """
    target = Path(path) if path else Path.cwd()

    try:
        config = load_config(target)
    except ChangelogPyError as e:
        err_console.print(f"[red]Error loading config:[/] {escape(str(e))}")
        raise SystemExit(1) from e

    if target.is_dir():
        changelog_path = find_project_root(target) / config.path
    else:
        changelog_path = target

    overrides = {}
    if strict is not None:
        overrides["enforce_date_is_present"] = strict
    if ignore_case is not None:
        overrides["allow_inconsistent_case"] = ignore_case

    return changelog_path, config.parse.model_copy(update=overrides)


def load_changelog(path: Path, options: ParseOptions, err_console: Console) -> Changelog:
    """Read and parse a changelog file, exiting with status 1 on failure."""
    try:
        with path.open(encoding="utf-8") as f:
            return parse(f, options)
    except FileNotFoundError as e:
        err_console.print(f"[red]Error:[/] {escape(str(path))} does not exist")
        raise SystemExit(1) from e
    except OSError as e:
        err_console.print(f"[red]Error reading {escape(str(path))}:[/] {escape(str(e))}")
        raise SystemExit(1) from e
    except ChangelogPyError as e:
        err_console.print(f"[red]Invalid changelog {escape(str(path))}:[/] {escape(str(e))}")
        raise SystemExit(1) from e
