"""Core data models for npmmeta."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Dependency:
    """A single entry of a manifest's dependency mapping."""

    name: str
    semver_range: Any

    def to_dict(self) -> dict:
        return {"name": self.name, "semverRange": self.semver_range}


@dataclass
class Contributor:
    """A person credited on a package (author, contributor or maintainer)."""

    name: Any
    email: Any = None

    def to_dict(self) -> dict:
        data = {"name": self.name}
        if self.email is not None:
            data["email"] = self.email
        return data


@dataclass
class ResolvedManifest:
    """The sub-manifest chosen as the version of record."""

    manifest: dict
    version: Any
    shape: str  # registry, manifest


@dataclass
class NormalizedPackageRecord:
    """Normalized metadata for the latest version of an npm package."""

    name: Any
    version: Any
    registry: str
    uses_public_registry: bool
    npm_url: str
    description: Any = None
    keywords: Any = None
    license: Any = None
    private: Any = None
    publish_config: Any = None
    author: Any = None
    latest_version_published_at: Any = ""
    source_url: str | None = None
    dependencies: list[Dependency] = field(default_factory=list)
    contributors: list[Contributor] = field(default_factory=list)
    raw_json: str | None = None
    shape: str = "manifest"  # registry, manifest

    def to_dict(self, include_raw: bool = False) -> dict:
        """Render the record with camelCase keys, dropping absent values."""
        data = {
            "name": self.name,
            "description": self.description,
            "version": self.version,
            "keywords": self.keywords,
            "private": self.private,
            "latestVersionPublishedAt": self.latest_version_published_at,
            "npmUrl": self.npm_url,
            "sourceUrl": self.source_url,
            "author": self.author,
            "dependencies": [dep.to_dict() for dep in self.dependencies],
            "license": self.license,
            "contributors": [contributor.to_dict() for contributor in self.contributors],
            "publishConfig": self.publish_config,
            "registry": self.registry,
            "usesPublicRegistry": self.uses_public_registry,
        }
        if include_raw:
            data["rawJson"] = self.raw_json
        return {key: value for key, value in data.items() if value is not None}
