"""Implementation of the 'check' command.

The check command parses a changelog and reports what it found.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape
from rich.panel import Panel

from changelog_py.cli.commands.common import load_changelog, resolve_options

if TYPE_CHECKING:
    from rich.console import Console


def run_check(
    path: str | None,
    strict: bool | None,
    ignore_case: bool | None,
    console: Console,
    err_console: Console,
) -> None:
    """Run the check command.

    Args:
        path: Optional changelog file or project directory
        strict: Require a date on every released version
        ignore_case: Accept category headers in any case
        console: Console for standard output
        err_console: Console for error output
    """
    changelog_path, options = resolve_options(path, strict, ignore_case, err_console)
    changelog = load_changelog(changelog_path, options, err_console)

    versions = ", ".join(escape(r.version) for r in changelog.releases) or "[dim]none[/]"
    details = [
        f"File: [cyan]{escape(str(changelog_path))}[/]",
        f"Title: [cyan]{escape(changelog.title)}[/]",
        f"Keep a Changelog: [cyan]{escape(changelog.keep_a_changelog_version or '-')}[/]",
        f"Semantic Versioning: [cyan]{escape(changelog.semver_version or '-')}[/]",
        f"Releases ({len(changelog.releases)}): {versions}",
        f"Links: {len(changelog.links)}",
    ]

    console.print(
        Panel(
            "\n".join(details),
            title="[green]Changelog is valid[/]",
            border_style="green",
        )
    )
