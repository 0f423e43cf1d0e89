"""Tests for document shape detection."""


from core.detect import identify_shape


class TestShapeDetection:
    """Test shape detection from loaded documents."""

    def test_registry_document(self):
        """Should detect registry documents by dist-tags."""
        assert identify_shape({"dist-tags": {"latest": "1.0.0"}, "versions": {}}) == "registry"

    def test_flat_manifest(self):
        """Should treat documents without dist-tags as manifests."""
        assert identify_shape({"name": "foo", "version": "1.0.0"}) == "manifest"
        assert identify_shape({}) == "manifest"

    def test_empty_dist_tags_is_registry(self):
        """An unpublished package has empty dist-tags but is still a registry document."""
        assert identify_shape({"dist-tags": {}, "versions": {}}) == "registry"

    def test_null_dist_tags_is_manifest(self):
        assert identify_shape({"dist-tags": None, "version": "1.0.0"}) == "manifest"

    def test_non_mapping_document(self):
        assert identify_shape([]) == "manifest"
