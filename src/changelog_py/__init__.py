"""changelog-py: parse and render Keep a Changelog documents."""

from __future__ import annotations

from changelog_py.config import ParseOptions
from changelog_py.core import Category, Changelog, Link, Release, parse, render
from changelog_py.exceptions import (
    ChangelogParseError,
    ChangelogPyError,
    InvalidDateError,
    MalformedHeaderError,
    MissingDateError,
    MissingTitleError,
    StreamReadError,
)

__version__ = "0.1.0"

__all__ = [
    "Category",
    "Changelog",
    "ChangelogParseError",
    "ChangelogPyError",
    "InvalidDateError",
    "Link",
    "MalformedHeaderError",
    "MissingDateError",
    "MissingTitleError",
    "ParseOptions",
    "Release",
    "StreamReadError",
    "__version__",
    "parse",
    "render",
]
