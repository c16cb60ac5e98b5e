"""Shared fixtures for changelog-py tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path

FULL_CHANGELOG = """\

<!--
SPDX-FileCopyrightText: 2021 Comcast Cable Communications Management, LLC
SPDX-License-Identifier: Apache-2.0
-->
# Changelog
All notable changes to this project will be documented in this file.

The format is based on [Keep a Changelog](https://keepachangelog.com/en/1.0.0/)
and this project adheres to [Semantic Versioning](https://semver.org/spec/v2.0.0.html).

## [Unreleased]

## [v3.4.0]

- Something that doesn't fit below.

### Added
- Added a new string.
- Added a new line.

### Changed
- Allow use of num_algorithms.
- A few lines related to the ### Fixed field

### Fixed
- Fixed [issue 55](https://example.com/issue-55)

### Security

- Fixed a buffer overrun issue-1234

### Changed
- I forgot to include this above

## [v3.0.0] - 2020-12-30

### Deprecated
- The Magic() function has been deprecated.

### Removed
- The ReallyMagic() function has been deprecated.

## [v2.1.0] - 2019-12-30 [YANKED]

## [v2.0.0] [YANKED]

[Unreleased]: https://example.com/compare/v3.4.0...HEAD
[v3.4.0]: https://example.com/compare/v3.0.0...v3.4.0
[v3.0.0]: https://example.com/compare/v0.0.0...v3.4.0
"""

CANONICAL_CHANGELOG = """\
<!--
SPDX-FileCopyrightText: 2021 Comcast Cable Communications Management, LLC
SPDX-License-Identifier: Apache-2.0
-->
# Changelog

All notable changes to this project will be documented in this file.

The format is based on [Keep a Changelog](https://keepachangelog.com/en/1.0.0/)
and this project adheres to [Semantic Versioning](https://semver.org/spec/v2.0.0.html).


## [Unreleased]


## [v3.4.0]
- Something that doesn't fit below.

### Added
- Added a new string.
- Added a new line.

### Changed
- Allow use of num_algorithms.
- A few lines related to the ### Fixed field
- I forgot to include this above

### Fixed
- Fixed [issue 55](https://example.com/issue-55)

### Security
- Fixed a buffer overrun issue-1234


## [v3.0.0] - 2020-12-30

### Deprecated
- The Magic() function has been deprecated.

### Removed
- The ReallyMagic() function has been deprecated.


## [v2.1.0] - 2019-12-30 [YANKED]


## [v2.0.0] [YANKED]


[Unreleased]: https://example.com/compare/v3.4.0...HEAD
[v3.4.0]: https://example.com/compare/v3.0.0...v3.4.0
[v3.0.0]: https://example.com/compare/v0.0.0...v3.4.0
"""

SHORT_CHANGELOG = """\

# Valid but different
All notable changes to this project will be documented in this file.

The format is based on [Keep a Changelog](https://keepachangelog.com/en/1.0.0/)
and this project adheres to [Semantic Versioning](https://semver.org/spec/v2.0.0.html).

## [Unreleased]
- Something new but unreleased
"""


@pytest.fixture
def full_changelog() -> str:
    """A complete changelog in loose (non-canonical) formatting."""
    return FULL_CHANGELOG


@pytest.fixture
def canonical_changelog() -> str:
    """full_changelog as the renderer emits it."""
    return CANONICAL_CHANGELOG


@pytest.fixture
def short_changelog() -> str:
    return SHORT_CHANGELOG


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """A project directory with a pyproject.toml and a CHANGELOG.md."""
    (tmp_path / "pyproject.toml").write_text(
        """\
[project]
name = "test-project"
version = "1.0.0"
"""
    )
    (tmp_path / "CHANGELOG.md").write_text(FULL_CHANGELOG)
    return tmp_path
