"""Configuration models for changelog-py.

Configuration lives in pyproject.toml under [tool.changelog-py]:

    [tool.changelog-py]
    path = "CHANGELOG.md"

    [tool.changelog-py.parse]
    allow_inconsistent_case = false
    enforce_date_is_present = true
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class ParseOptions(BaseModel):
    """Options controlling how strictly a changelog is parsed."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    allow_inconsistent_case: bool = Field(
        default=False,
        description="Match category headers and the [YANKED] marker case-insensitively",
    )
    enforce_date_is_present: bool = Field(
        default=False,
        description="Require a date on every release other than Unreleased",
    )


class ChangelogPyConfig(BaseModel):
    """Root configuration model."""

    model_config = ConfigDict(extra="forbid")

    path: Path = Field(
        default=Path("CHANGELOG.md"),
        description="Changelog location, relative to the project root",
    )
    parse: ParseOptions = Field(default_factory=ParseOptions)
