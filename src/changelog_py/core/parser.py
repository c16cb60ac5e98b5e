"""Keep a Changelog parser.

The parser is a four-phase state machine fed one line at a time:

    HEADER       HTML comment lines preceding the title
    DESCRIPTION  the title line and the free text below it
    RELEASES     `##` release sections with their `###` categories
    LINKS        trailing `[version]: url` comparison links

Phases only move forward. When a line ends a phase, the handler names
the phase that should see the same line next, and the line is dispatched
again there; the input is never pushed back.
"""

from __future__ import annotations

import io
import logging
from datetime import date
from enum import Enum
from typing import TYPE_CHECKING

from changelog_py.config.models import ParseOptions
from changelog_py.core import grammar
from changelog_py.core.grammar import Line, LineKind
from changelog_py.core.models import UNRELEASED, Category, Changelog, Link, Release
from changelog_py.exceptions import (
    InvalidDateError,
    MalformedHeaderError,
    MissingDateError,
    MissingTitleError,
    StreamReadError,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator

logger = logging.getLogger(__name__)


class Phase(Enum):
    """Parser phases, in the only order they may be entered."""

    HEADER = 0
    DESCRIPTION = 1
    RELEASES = 2
    LINKS = 3


class ReleaseBuilder:
    """Accumulates the lines of one release until it is sealed."""

    def __init__(self, version: str, title: str, release_date: date | None, yanked: bool) -> None:
        self._release = Release(version=version, title=title, date=release_date, yanked=yanked)
        self._current: list[str] = self._release.other
        self._sealed = False

    def add_body(self, text: str) -> None:
        self._release.body.append(text)

    def switch_category(self, category: Category) -> None:
        self._current = self._release.entries(category)

    def add_entry(self, text: str) -> None:
        self._current.append(text)

    def build(self) -> Release:
        if self._sealed:
            raise RuntimeError(f"Release {self._release.version} has already been sealed")
        self._sealed = True
        return self._release


class ChangelogParser:
    """Incremental parser; feed() lines, then close() for the result.

    Most callers want parse() instead.
    """

    def __init__(self, options: ParseOptions | None = None) -> None:
        self.options = options or ParseOptions()
        self.phase = Phase.HEADER
        self.line_number = 0

        self._in_comment = False
        self._comment_header: list[str] = []
        self._title: str | None = None
        self._description: list[str] = []
        self._keep_a_changelog_version = ""
        self._semver_version = ""
        self._releases: list[Release] = []
        self._links: list[Link] = []
        self._builder: ReleaseBuilder | None = None

        self._handlers: dict[Phase, Callable[[Line], Phase | None]] = {
            Phase.HEADER: self._on_header,
            Phase.DESCRIPTION: self._on_description,
            Phase.RELEASES: self._on_release,
            Phase.LINKS: self._on_link,
        }

    def feed(self, text: str) -> None:
        """Process a single line (without its line terminator)."""
        self.line_number += 1
        line = grammar.classify(text, ignore_case=self.options.allow_inconsistent_case)

        next_phase = self._handlers[self.phase](line)
        while next_phase is not None:
            self._advance(next_phase)
            next_phase = self._handlers[self.phase](line)

    def close(self) -> Changelog:
        """Finish parsing and return the changelog.

        Raises:
            MissingTitleError: If no title was ever found
        """
        if self._title is None:
            raise MissingTitleError("End of input reached before a title was found")

        if self.phase is Phase.DESCRIPTION:
            self._finish_description()
        self._seal_release()

        return Changelog(
            title=self._title,
            comment_header=self._comment_header,
            keep_a_changelog_version=self._keep_a_changelog_version,
            semver_version=self._semver_version,
            description=self._description,
            releases=self._releases,
            links=self._links,
        )

    # Transitions

    def _advance(self, phase: Phase) -> None:
        if phase.value <= self.phase.value:
            raise RuntimeError(f"Cannot move from {self.phase.name} back to {phase.name}")
        logger.debug("Line %d: %s -> %s", self.line_number, self.phase.name, phase.name)
        self.phase = phase

    def _finish_description(self) -> None:
        while self._description and grammar.is_blank(self._description[0]):
            self._description.pop(0)
        while self._description and grammar.is_blank(self._description[-1]):
            self._description.pop()

        joined = " ".join(self._description)
        self._keep_a_changelog_version = grammar.find_keep_a_changelog_version(joined)
        self._semver_version = grammar.find_semver_version(joined)

    def _seal_release(self) -> None:
        if self._builder is None:
            return
        release = self._builder.build()
        self._builder = None
        self._releases.append(release)
        logger.debug("Sealed release %s (%d body lines)", release.version, len(release.body))

    # Phase handlers. Each returns the phase that should reprocess the
    # current line, or None once the line has been consumed.

    def _on_header(self, line: Line) -> Phase | None:
        if line.kind is LineKind.BLANK:
            return None

        if self._in_comment or line.kind is LineKind.COMMENT_START:
            self._comment_header.append(line.text)
            self._in_comment = not grammar.closes_comment(line.text)
            return None

        if line.kind is not LineKind.TITLE:
            raise MalformedHeaderError(
                f"Content outside a comment before the title: {line.text!r}",
                line=self.line_number,
            )

        text = (line["title"] or "").strip()
        if not text:
            raise MissingTitleError("Title is blank", line=self.line_number)
        self._title = text
        self._advance(Phase.DESCRIPTION)
        return None

    def _on_description(self, line: Line) -> Phase | None:
        if line.kind is LineKind.RELEASE:
            self._finish_description()
            return Phase.RELEASES
        if line.kind is LineKind.LINK:
            self._finish_description()
            return Phase.LINKS

        self._description.append(line.text)
        return None

    def _on_release(self, line: Line) -> Phase | None:
        if line.kind is LineKind.BLANK:
            return None

        if line.kind is LineKind.LINK:
            self._seal_release()
            return Phase.LINKS

        if line.kind is LineKind.RELEASE:
            self._seal_release()
            self._builder = self._open_release(line)
            self._builder.add_body(line.text)
            return None

        if self._builder is None:
            raise RuntimeError(f"Line {self.line_number} reached RELEASES with no open release")
        self._builder.add_body(line.text)

        if line.kind is LineKind.CATEGORY:
            self._builder.switch_category(Category(line["category"]))
        else:
            self._builder.add_entry(line.text)
        return None

    def _on_link(self, line: Line) -> Phase | None:
        if line.kind is LineKind.LINK:
            self._links.append(Link(version=line["version"] or "", url=line["url"] or ""))
        return None

    def _open_release(self, line: Line) -> ReleaseBuilder:
        version = line["version"] or ""
        title = line["title"] or ""

        if version.lower() == UNRELEASED.lower():
            return ReleaseBuilder(version, title, None, False)

        release_date = self._parse_date(line["date"], version)
        return ReleaseBuilder(version, title, release_date, line["yanked"] is not None)

    def _parse_date(self, token: str | None, version: str) -> date | None:
        if token is None:
            if self.options.enforce_date_is_present:
                raise MissingDateError(
                    f"Release {version} has no date", line=self.line_number
                )
            return None

        try:
            return date.fromisoformat(token)
        except ValueError as e:
            raise InvalidDateError(
                f"Invalid date for release {version}: {token!r} is not a calendar date",
                line=self.line_number,
            ) from e


def _read_lines(stream: str | Iterable[str]) -> Iterator[str]:
    source = io.StringIO(stream) if isinstance(stream, str) else stream
    lines = iter(source)
    while True:
        try:
            raw = next(lines)
        except StopIteration:
            return
        except (OSError, UnicodeDecodeError) as e:
            raise StreamReadError(f"Failed to read changelog: {e}") from e
        yield raw.rstrip("\r\n")


def parse(stream: str | Iterable[str], options: ParseOptions | None = None) -> Changelog:
    """Parse a Keep a Changelog document.

    Args:
        stream: The document text, an open text file, or any iterable of
            lines. Line terminators are stripped.
        options: Parsing options (defaults to lenient parsing)

    Returns:
        The parsed changelog

    Raises:
        MalformedHeaderError: If non-comment content precedes the title
        MissingTitleError: If there is no title, or it is blank
        InvalidDateError: If a release date is not a valid YYYY-MM-DD date
        MissingDateError: If dates are enforced and a release has none
        StreamReadError: If reading the stream fails
    """
    parser = ChangelogParser(options)
    for text in _read_lines(stream):
        parser.feed(text)
    return parser.close()
