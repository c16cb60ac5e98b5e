"""Core parsing and rendering for changelog-py.

This module contains the fundamental building blocks:
- Line grammar for Keep a Changelog documents
- The Changelog / Release / Link data model
- The phase-driven parser
- The canonical markdown renderer
"""

from __future__ import annotations

from changelog_py.core.grammar import Line, LineKind, classify
from changelog_py.core.models import UNRELEASED, Category, Changelog, Link, Release
from changelog_py.core.parser import ChangelogParser, Phase, parse
from changelog_py.core.renderer import render, render_link, render_release

__all__ = [
    "UNRELEASED",
    # Models
    "Category",
    "Changelog",
    # Parser
    "ChangelogParser",
    # Grammar
    "Line",
    "LineKind",
    "Link",
    "Phase",
    "Release",
    "classify",
    "parse",
    # Renderer
    "render",
    "render_link",
    "render_release",
]
