"""Allow running as `python -m changelog_py`."""

from changelog_py.cli import app

app()
