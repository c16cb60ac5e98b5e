"""Data model for a parsed changelog.

A Changelog owns its releases and links outright; nothing is shared
between documents, and relationships are purely positional.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import date

UNRELEASED = "Unreleased"


class Category(Enum):
    """Change categories, declared in render order."""

    ADDED = "Added"
    CHANGED = "Changed"
    DEPRECATED = "Deprecated"
    FIXED = "Fixed"
    REMOVED = "Removed"
    SECURITY = "Security"

    @property
    def attr(self) -> str:
        """Name of the Release attribute holding this category."""
        return self.name.lower()


@dataclass
class Link:
    """A `[version]: url` comparison reference."""

    version: str
    url: str


@dataclass
class Release:
    """A single `##` release section.

    Attributes:
        title: Raw header text following the `##` prefix
        version: Version token, e.g. "v1.0.2", "1.0.3-pre1" or "Unreleased"
        date: Release date, if present
        yanked: Whether the release was withdrawn
        added: Lines under `### Added`
        changed: Lines under `### Changed`
        deprecated: Lines under `### Deprecated`
        removed: Lines under `### Removed`
        fixed: Lines under `### Fixed`
        security: Lines under `### Security`
        other: Lines before any category header
        body: Every raw line of the release, header included
    """

    version: str
    title: str = ""
    date: date | None = None
    yanked: bool = False
    added: list[str] = field(default_factory=list)
    changed: list[str] = field(default_factory=list)
    deprecated: list[str] = field(default_factory=list)
    removed: list[str] = field(default_factory=list)
    fixed: list[str] = field(default_factory=list)
    security: list[str] = field(default_factory=list)
    other: list[str] = field(default_factory=list)
    body: list[str] = field(default_factory=list)

    @property
    def is_unreleased(self) -> bool:
        return self.version.lower() == UNRELEASED.lower()

    def entries(self, category: Category) -> list[str]:
        """Get the entry list for a category."""
        return getattr(self, category.attr)

    @property
    def is_empty(self) -> bool:
        """True when the release has no entries at all."""
        return not self.other and not any(self.entries(c) for c in Category)


@dataclass
class Changelog:
    """A complete Keep a Changelog document.

    Attributes:
        title: Document title, generally "Changelog"
        comment_header: HTML comment lines preceding the title, verbatim
        keep_a_changelog_version: keepachangelog.com version cited in the
            description ("" if none)
        semver_version: semver.org spec version cited in the description
            ("" if none)
        description: Lines between the title and the first release
        releases: Releases in document order
        links: Comparison links in document order
    """

    title: str
    comment_header: list[str] = field(default_factory=list)
    keep_a_changelog_version: str = ""
    semver_version: str = ""
    description: list[str] = field(default_factory=list)
    releases: list[Release] = field(default_factory=list)
    links: list[Link] = field(default_factory=list)

    def get_release(self, version: str) -> Release | None:
        """Find a release by version, ignoring case."""
        wanted = version.lower()
        for release in self.releases:
            if release.version.lower() == wanted:
                return release
        return None

    @property
    def unreleased(self) -> Release | None:
        return self.get_release(UNRELEASED)

    def get_link(self, version: str) -> Link | None:
        wanted = version.lower()
        for link in self.links:
            if link.version.lower() == wanted:
                return link
        return None
