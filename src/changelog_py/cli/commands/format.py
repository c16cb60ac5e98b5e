"""Implementation of the 'format' command.

The format command rewrites a changelog in canonical form.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape
from rich.panel import Panel

from changelog_py.cli.commands.common import load_changelog, resolve_options
from changelog_py.core import render

if TYPE_CHECKING:
    from rich.console import Console


def run_format(
    path: str | None,
    execute: bool,
    strict: bool | None,
    ignore_case: bool | None,
    console: Console,
    err_console: Console,
) -> None:
    """Run the format command.

    Args:
        path: Optional changelog file or project directory
        execute: Whether to actually write the file
        strict: Require a date on every released version
        ignore_case: Accept category headers in any case
        console: Console for standard output
        err_console: Console for error output
    """
    changelog_path, options = resolve_options(path, strict, ignore_case, err_console)
    changelog = load_changelog(changelog_path, options, err_console)

    original = changelog_path.read_text(encoding="utf-8")
    formatted = render(changelog)

    if formatted == original:
        console.print(f"[green]Already formatted:[/] {escape(str(changelog_path))}")
        return

    if not execute:
        console.print(
            Panel(
                f"[bold]Would reformat[/] [cyan]{escape(str(changelog_path))}[/]",
                title="[yellow]Dry Run Preview[/]",
                border_style="yellow",
            )
        )
        console.print("\n[dim]Run with [cyan]--execute[/] to apply these changes.[/]")
        return

    try:
        changelog_path.write_text(formatted, encoding="utf-8")
    except OSError as e:
        err_console.print(
            f"[red]Error writing {escape(str(changelog_path))}:[/] {escape(str(e))}"
        )
        raise SystemExit(1) from e

    console.print(f"  [green]✓[/] Reformatted {escape(str(changelog_path))}")
