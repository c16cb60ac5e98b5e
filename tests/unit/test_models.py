"""Tests for the changelog data model."""

from __future__ import annotations

from changelog_py.core.models import Category, Changelog, Link, Release


class TestCategory:
    """Tests for Category."""

    def test_render_order(self):
        """Iteration order is the render order."""
        assert [c.value for c in Category] == [
            "Added",
            "Changed",
            "Deprecated",
            "Fixed",
            "Removed",
            "Security",
        ]

    def test_attr(self):
        """Each category maps to a Release attribute."""
        release = Release(version="1.0.0")
        for category in Category:
            assert release.entries(category) is getattr(release, category.attr)


class TestRelease:
    """Tests for Release helpers."""

    def test_is_unreleased(self):
        """Unreleased detection ignores case."""
        assert Release(version="unreleased").is_unreleased
        assert not Release(version="1.0.0").is_unreleased

    def test_is_empty(self):
        """Releases with any entry are not empty."""
        assert Release(version="1.0.0").is_empty
        assert not Release(version="1.0.0", other=["x"]).is_empty
        assert not Release(version="1.0.0", security=["- fix"]).is_empty

    def test_lists_are_not_shared(self):
        """Each release owns its own lists."""
        a = Release(version="1")
        b = Release(version="2")
        a.added.append("- x")

        assert b.added == []


class TestChangelog:
    """Tests for Changelog lookups."""

    def test_get_release(self):
        """Releases are found by version, ignoring case."""
        cl = Changelog(
            title="Changelog",
            releases=[Release(version="Unreleased"), Release(version="v1.0.0")],
        )

        assert cl.get_release("V1.0.0") is cl.releases[1]
        assert cl.get_release("v2.0.0") is None
        assert cl.unreleased is cl.releases[0]

    def test_no_unreleased(self):
        """unreleased is None when absent."""
        assert Changelog(title="Changelog").unreleased is None

    def test_get_link(self):
        """Links are found by version."""
        cl = Changelog(title="Changelog", links=[Link("v1.0.0", "https://example.com")])

        assert cl.get_link("v1.0.0").url == "https://example.com"
        assert cl.get_link("v0.1.0") is None
