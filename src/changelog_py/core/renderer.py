"""Rendering a Changelog back to canonical markdown.

Rendering is a pure projection of the model: spacing, category order and
category capitalization are always normalized, so a changelog that is
already canonical renders to exactly its own text.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from changelog_py.core.models import Category

if TYPE_CHECKING:
    from changelog_py.core.models import Changelog, Link, Release


def render_link(link: Link) -> str:
    return f"[{link.version}]: {link.url}\n"


def render_release(release: Release) -> str:
    """Render one release section.

    Lines that preceded any category header come first, without a
    header, followed by each non-empty category in Category order.
    """
    header = f"## [{release.version}]"
    if release.date is not None:
        header += f" - {release.date.isoformat()}"
    if release.yanked:
        header += " [YANKED]"

    lines = [header]
    lines.extend(release.other)

    for category in Category:
        entries = release.entries(category)
        if not entries:
            continue
        lines.append("")
        lines.append(f"### {category.value}")
        lines.extend(entries)

    return "\n".join(lines) + "\n"


def render(changelog: Changelog) -> str:
    """Render a changelog as markdown.

    Args:
        changelog: The changelog to render

    Returns:
        Markdown text, ending with a newline
    """
    parts: list[str] = [f"{line}\n" for line in changelog.comment_header]
    parts.append(f"# {changelog.title}\n\n")
    parts.extend(f"{line}\n" for line in changelog.description)

    for release in changelog.releases:
        parts.append("\n\n")
        parts.append(render_release(release))

    if changelog.links:
        parts.append("\n\n")
        parts.extend(render_link(link) for link in changelog.links)

    return "".join(parts)
