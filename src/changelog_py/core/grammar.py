"""Line grammar for Keep a Changelog documents.

Every line of a changelog is classified by exactly one matcher in this
module. Matchers return a tagged Line carrying the kind and any captured
fields, so the parser never inspects raw text itself.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

BLANK_RE = re.compile(r"^\s*$")
COMMENT_START_RE = re.compile(r"^\s*<!--")
COMMENT_END_RE = re.compile(r"-->\s*$")
TITLE_RE = re.compile(r"^\s*#(?!#)\s*(.*?)\s*$")
RELEASE_RE = re.compile(
    r"^\s*##(?!#)\s*"
    r"(\[(?P<version>[^\]]*)\]"
    r"(\s*-\s*(?P<date>\d{4}-\d{2}-\d{2}))?"
    r"\s*(?P<yanked>\[\s*YANKED\s*\])?)"
    r"\s*$"
)
RELEASE_NOCASE_RE = re.compile(RELEASE_RE.pattern, re.IGNORECASE)
CATEGORY_RE = re.compile(r"^\s*###\s*(Added|Changed|Deprecated|Fixed|Removed|Security)\s*$")
CATEGORY_NOCASE_RE = re.compile(CATEGORY_RE.pattern, re.IGNORECASE)
LINK_RE = re.compile(r"^\s*\[([^\]]*)\]\s*:\s*(https?://.*?)\s*$")

SEMVER_RE = re.compile(r"https?://semver\.org/spec/(.*?)\.html")
KEEP_A_CHANGELOG_RE = re.compile(r"https?://keepachangelog\.com/[^/]*/([^/]*)/")


class LineKind(Enum):
    """What a single changelog line is."""

    BLANK = "blank"
    COMMENT_START = "comment_start"
    TITLE = "title"
    RELEASE = "release"
    CATEGORY = "category"
    LINK = "link"
    TEXT = "text"


@dataclass(frozen=True)
class Line:
    """A classified line.

    Attributes:
        kind: Classification of the line
        text: The raw line, without its line terminator
        groups: Captured fields, keyed by name (see classify)
    """

    kind: LineKind
    text: str
    groups: dict[str, str | None]

    def __getitem__(self, key: str) -> str | None:
        return self.groups.get(key)


def is_blank(text: str) -> bool:
    return BLANK_RE.match(text) is not None


def opens_comment(text: str) -> bool:
    return COMMENT_START_RE.match(text) is not None


def closes_comment(text: str) -> bool:
    """Check whether a line terminates an HTML comment block.

    Kept apart from classify() because a single line may both open
    and close a comment.
    """
    return COMMENT_END_RE.search(text) is not None


def match_title(text: str) -> Line | None:
    m = TITLE_RE.match(text)
    if not m:
        return None
    return Line(LineKind.TITLE, text, {"title": m.group(1)})


def match_release(text: str, *, ignore_case: bool = False) -> Line | None:
    """Match a `## [version] - YYYY-MM-DD [YANKED]` header.

    Captures:
        title: everything after the `##` prefix
        version: the bracketed version token
        date: the YYYY-MM-DD date token, not yet checked as a calendar date
            (None if absent)
        yanked: the yanked marker (None if absent)
    """
    pattern = RELEASE_NOCASE_RE if ignore_case else RELEASE_RE
    m = pattern.match(text)
    if not m:
        return None
    return Line(
        LineKind.RELEASE,
        text,
        {
            "title": m.group(1),
            "version": m.group("version"),
            "date": m.group("date"),
            "yanked": m.group("yanked"),
        },
    )


def match_category(text: str, *, ignore_case: bool = False) -> Line | None:
    """Match a `### Added` style category header.

    The captured name is always returned in canonical capitalization.
    """
    pattern = CATEGORY_NOCASE_RE if ignore_case else CATEGORY_RE
    m = pattern.match(text)
    if not m:
        return None
    return Line(LineKind.CATEGORY, text, {"category": m.group(1).capitalize()})


def match_link(text: str) -> Line | None:
    m = LINK_RE.match(text)
    if not m:
        return None
    return Line(LineKind.LINK, text, {"version": m.group(1), "url": m.group(2)})


def classify(text: str, *, ignore_case: bool = False) -> Line:
    """Classify a single line.

    Release headers are tried before titles and categories so that the
    `#` prefixes never shadow each other.

    Args:
        text: Line without its terminator
        ignore_case: Match category names and the yanked marker
            case-insensitively

    Returns:
        The tagged line; TEXT when no matcher applies
    """
    if is_blank(text):
        return Line(LineKind.BLANK, text, {})
    if opens_comment(text):
        return Line(LineKind.COMMENT_START, text, {})

    matched = (
        match_release(text, ignore_case=ignore_case)
        or match_category(text, ignore_case=ignore_case)
        or match_title(text)
        or match_link(text)
    )
    if matched is not None:
        return matched
    return Line(LineKind.TEXT, text, {})


def find_semver_version(text: str) -> str:
    """Return the semver spec version referenced in text, or ""."""
    m = SEMVER_RE.search(text)
    return m.group(1) if m else ""


def find_keep_a_changelog_version(text: str) -> str:
    """Return the Keep a Changelog version referenced in text, or ""."""
    m = KEEP_A_CHANGELOG_RE.search(text)
    return m.group(1) if m else ""
