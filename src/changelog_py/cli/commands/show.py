"""Implementation of the 'show' command."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape
from rich.table import Table

from changelog_py.cli.commands.common import load_changelog, resolve_options
from changelog_py.core import Category, render_release

if TYPE_CHECKING:
    from rich.console import Console


def run_show(
    path: str | None,
    version: str | None,
    console: Console,
    err_console: Console,
) -> None:
    """Run the show command.

    Without a version, prints a table of all releases. With one, prints
    that release as canonical markdown.

    Args:
        path: Optional changelog file or project directory
        version: Release to print
        console: Console for standard output
        err_console: Console for error output
    """
    changelog_path, options = resolve_options(path, None, None, err_console)
    changelog = load_changelog(changelog_path, options, err_console)

    if version is not None:
        release = changelog.get_release(version)
        if release is None:
            err_console.print(
                f"[red]Error:[/] No release {escape(repr(version))} "
                f"in {escape(str(changelog_path))}"
            )
            raise SystemExit(1)
        console.print(render_release(release), markup=False, highlight=False, end="")
        return

    table = Table(title=escape(changelog.title), title_justify="left")
    table.add_column("Version", style="cyan", no_wrap=True)
    table.add_column("Date", no_wrap=True)
    table.add_column("Yanked")
    table.add_column("Entries", justify="right")

    for release in changelog.releases:
        entries = len(release.other) + sum(len(release.entries(c)) for c in Category)
        table.add_row(
            escape(release.version),
            release.date.isoformat() if release.date else "",
            "yes" if release.yanked else "",
            str(entries),
        )

    console.print(table)
