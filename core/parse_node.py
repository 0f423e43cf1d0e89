"""Normalization of npm package.json and registry documents."""

from .contributors import aggregate_contributors
from .errors import InvalidPackageMetadata
from .load import load_document
from .models import NormalizedPackageRecord
from .normalize import (
    build_npm_url,
    extract_dependencies,
    extract_repo_url,
    registry_origin,
    uses_public_registry,
)
from .resolve_version import resolve_version


class PackageJsonParser:
    """Parser for package.json and full registry documents."""

    def _derive(self, field: str, derivation, *args):
        """Run a single field derivation, reporting failures against the field."""
        try:
            return derivation(*args)
        except Exception as e:
            raise InvalidPackageMetadata(f"Invalid package metadata: {e}", field=field, cause=e) from e

    def _published_at(self, document: dict):
        time = document.get("time")
        if isinstance(time, dict) and "modified" in time:
            return time["modified"]
        return ""

    def parse(self, content: str) -> NormalizedPackageRecord:
        """Parse document text into a NormalizedPackageRecord."""
        document = load_document(content)
        if not isinstance(document, dict):
            raise InvalidPackageMetadata(
                f"Expected a JSON object, got {type(document).__name__}", field="document"
            )

        resolved = resolve_version(document)
        manifest = resolved.manifest

        name = document.get("_id") or document.get("name")
        publish_config = document.get("publishConfig")
        registry = registry_origin(publish_config)

        return NormalizedPackageRecord(
            name=name,
            description=document.get("description"),
            version=resolved.version,
            keywords=document.get("keywords"),
            license=document.get("license"),
            private=document.get("private"),
            publish_config=publish_config,
            author=document.get("author"),
            latest_version_published_at=self._published_at(document),
            registry=registry,
            uses_public_registry=uses_public_registry(registry),
            npm_url=self._derive("npmUrl", build_npm_url, registry, name),
            source_url=self._derive("sourceUrl", extract_repo_url, manifest),
            dependencies=self._derive("dependencies", extract_dependencies, manifest),
            contributors=self._derive("contributors", aggregate_contributors, manifest),
            raw_json=content,
            shape=resolved.shape,
        )


def parse_package_json(content: str) -> NormalizedPackageRecord:
    """Parse package.json or registry document content into a normalized record.

    Args:
        content: The package.json file content, or a registry document

    Returns:
        Normalized record for the latest version

    Raises:
        InvalidFormat: If the content is not valid JSON
        InvalidPackageMetadata: If a field cannot be derived from the document
    """
    parser = PackageJsonParser()
    return parser.parse(content)
