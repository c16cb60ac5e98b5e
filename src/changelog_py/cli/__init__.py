"""Command-line interface for changelog-py."""

from __future__ import annotations

from changelog_py.cli.app import app

__all__ = ["app"]
