"""Exception hierarchy for changelog-py.

All errors raised by the library derive from ChangelogPyError so callers
can catch a single base class. Parse errors are fatal: a failing parse
never returns a partially built changelog.
"""

from __future__ import annotations


class ChangelogPyError(Exception):
    """Base class for all changelog-py errors."""


# Configuration


class ConfigError(ChangelogPyError):
    """Configuration could not be loaded."""


class ConfigNotFoundError(ConfigError):
    """No pyproject.toml could be located."""


class ConfigValidationError(ConfigError):
    """The [tool.changelog-py] section holds invalid values."""


# Parsing


class ChangelogParseError(ChangelogPyError):
    """A changelog stream could not be parsed.

    Attributes:
        line: 1-based line number where the problem was found, if known
    """

    def __init__(self, message: str, *, line: int | None = None) -> None:
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)


class MalformedHeaderError(ChangelogParseError):
    """Content outside a comment block precedes the title."""


class MissingTitleError(ChangelogParseError):
    """No title was found, or the title text is blank."""


class InvalidDateError(ChangelogParseError):
    """A release date is not a valid YYYY-MM-DD calendar date."""


class MissingDateError(InvalidDateError):
    """A release lacks a date while dates are enforced."""


class StreamReadError(ChangelogParseError):
    """The underlying input stream failed while being read."""
