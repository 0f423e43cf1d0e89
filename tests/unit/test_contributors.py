"""Tests for contributor aggregation."""

import pytest

from core.contributors import aggregate_contributors
from core.models import Contributor


class TestAggregateContributors:
    """Test merging author, contributors and maintainers."""

    def test_author_wins_duplicates(self):
        """Should drop later entries with an already-seen name."""
        manifest = {"author": "Ann", "contributors": [{"name": "Ann"}, {"name": "Bob"}]}

        assert aggregate_contributors(manifest) == [Contributor(name="Ann"), Contributor(name="Bob")]

    def test_order_author_contributors_maintainers(self):
        """Should list author, then contributors, then maintainers."""
        manifest = {
            "author": {"name": "Ann", "email": "ann@example.com"},
            "contributors": ["Cid", {"name": "Bob", "email": "bob@example.com"}],
            "maintainers": [
                {"name": "Bob", "email": "bob@npm.example.com"},
                {"name": "Dee", "email": "dee@example.com"},
            ],
        }

        assert aggregate_contributors(manifest) == [
            Contributor(name="Ann", email="ann@example.com"),
            Contributor(name="Cid"),
            Contributor(name="Bob", email="bob@example.com"),
            Contributor(name="Dee", email="dee@example.com"),
        ]

    def test_empty_manifest(self):
        assert aggregate_contributors({}) == []

    def test_empty_email_is_absent(self):
        assert aggregate_contributors({"author": {"name": "Ann", "email": ""}}) == [Contributor(name="Ann")]

    def test_empty_object_author_kept(self):
        """An empty author object should still produce a nameless entry."""
        manifest = {"author": {}, "contributors": [{"name": "Bob"}]}

        assert aggregate_contributors(manifest) == [Contributor(name=None), Contributor(name="Bob")]

    def test_author_string_not_parsed(self):
        """Should keep a person string verbatim as the name."""
        contributors = aggregate_contributors({"author": "Substack <substack@substack.com>"})

        assert contributors == [Contributor(name="Substack <substack@substack.com>")]

    def test_non_list_fields_ignored(self):
        """Should ignore contributors/maintainers that are not lists."""
        manifest = {"author": "", "contributors": "Ann", "maintainers": {"name": "Bob"}}

        assert aggregate_contributors(manifest) == []

    def test_invalid_entry(self):
        """Should raise for entries that are neither strings nor objects."""
        with pytest.raises(TypeError):
            aggregate_contributors({"contributors": [None]})
