"""Command-line interface for changelog-py."""

from __future__ import annotations

import logging
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from changelog_py import __version__
from changelog_py.cli.commands import run_check, run_format, run_show

app = typer.Typer(
    name="changelog-py",
    help="Parse, validate and format Keep a Changelog files.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)

PATH_ARGUMENT = typer.Argument(None, help="Changelog file or project directory")
STRICT_OPTION = typer.Option(
    None,
    "--strict/--no-strict",
    help="Require a date on every release except Unreleased",
)
IGNORE_CASE_OPTION = typer.Option(
    None,
    "--ignore-case/--match-case",
    help="Accept category headers such as '### added'",
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"changelog-py {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Parse, validate and format Keep a Changelog files."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )


@app.command()
def check(
    path: Optional[str] = PATH_ARGUMENT,
    strict: Optional[bool] = STRICT_OPTION,
    ignore_case: Optional[bool] = IGNORE_CASE_OPTION,
) -> None:
    """Parse the changelog and report its structure."""
    run_check(path, strict, ignore_case, console, err_console)


@app.command()
def show(
    path: Optional[str] = PATH_ARGUMENT,
    version: Optional[str] = typer.Option(None, "--release", "-r", help="Print a single release"),
) -> None:
    """List releases, or print one release."""
    run_show(path, version, console, err_console)


@app.command("format")
def format_(
    path: Optional[str] = PATH_ARGUMENT,
    execute: bool = typer.Option(False, "--execute", "-x", help="Write the formatted file"),
    strict: Optional[bool] = STRICT_OPTION,
    ignore_case: Optional[bool] = IGNORE_CASE_OPTION,
) -> None:
    """Rewrite the changelog in canonical form."""
    run_format(path, execute, strict, ignore_case, console, err_console)
