"""Document shape detection for npm package metadata."""

from typing import Any

REGISTRY = "registry"
MANIFEST = "manifest"


def identify_shape(document: Any) -> str:
    """Classify a loaded document as a registry document or a flat manifest.

    Any document carrying a non-null ``dist-tags`` field is a registry
    document, including an empty ``{}`` (unpublished packages). A missing or
    null ``dist-tags`` means a flat manifest.

    Args:
        document: A loaded package document

    Returns:
        Detected shape: 'registry' or 'manifest'
    """
    if isinstance(document, dict) and document.get("dist-tags") is not None:
        return REGISTRY
    return MANIFEST
