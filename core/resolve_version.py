"""Selection of the version of record within a package document."""

from .detect import REGISTRY, identify_shape
from .models import ResolvedManifest


def resolve_version(document: dict) -> ResolvedManifest:
    """Pick the sub-manifest and effective version for a document.

    For a registry document the effective version is ``dist-tags.latest`` and
    the manifest is ``versions[latest]``. A flat manifest is its own version of
    record. Every later derivation reads from the returned manifest, so that
    dependencies, source URL and contributors all describe the same version.

    Args:
        document: A loaded package document

    Returns:
        The resolved manifest. Its ``manifest`` is an empty dict when the
        registry document has no entry for the latest version.
    """
    shape = identify_shape(document)

    if shape == REGISTRY:
        dist_tags = document["dist-tags"]
        version = dist_tags.get("latest") if isinstance(dist_tags, dict) else None

        versions = document.get("versions")
        manifest = None
        if isinstance(versions, dict) and isinstance(version, str):
            manifest = versions.get(version)
        if not isinstance(manifest, dict):
            manifest = {}

        return ResolvedManifest(manifest=manifest, version=version, shape=shape)

    return ResolvedManifest(manifest=document, version=document.get("version"), shape=shape)
