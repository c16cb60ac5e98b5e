"""CLI command implementations."""

from __future__ import annotations

from changelog_py.cli.commands.check import run_check
from changelog_py.cli.commands.format import run_format
from changelog_py.cli.commands.show import run_show

__all__ = ["run_check", "run_format", "run_show"]
