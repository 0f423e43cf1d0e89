"""Test that project structure is correct and modules can be imported."""

import core.contributors
import core.detect
import core.errors
import core.load
import core.models
import core.normalize
import core.parse_node
import core.resolve_version
from core.models import Contributor, Dependency, NormalizedPackageRecord


def test_core_modules_importable():
    """Ensure core modules can be imported."""
    assert hasattr(core.models, "NormalizedPackageRecord")
    assert hasattr(core.models, "ResolvedManifest")
    assert hasattr(core.parse_node, "parse_package_json")
    assert hasattr(core.detect, "identify_shape")
    assert issubclass(core.errors.InvalidFormat, core.errors.NpmMetaError)
    assert issubclass(core.errors.InvalidPackageMetadata, core.errors.NpmMetaError)


def test_model_creation():
    """Test that basic models can be instantiated."""
    record = NormalizedPackageRecord(
        name="left-pad",
        version="1.3.0",
        registry="http://npmjs.org",
        uses_public_registry=True,
        npm_url="http://npmjs.org/package/left-pad",
        dependencies=[Dependency(name="lodash", semver_range="^4.0.0")],
        contributors=[Contributor(name="Ann")],
    )
    assert record.name == "left-pad"
    assert record.latest_version_published_at == ""
    assert record.source_url is None
    assert len(record.dependencies) == 1
