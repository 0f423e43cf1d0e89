"""Field derivations for normalized package records."""

import re
from typing import Any

from .models import Dependency

# Canonical origin of the public npm registry
PUBLIC_REGISTRY = "http://npmjs.org"

_GITHUB_PREFIX = re.compile(r"^.*github\.com[:/]")


def registry_origin(publish_config: Any) -> Any:
    """Return ``publishConfig.registry`` if set, else the public registry."""
    if isinstance(publish_config, dict) and publish_config.get("registry"):
        return publish_config["registry"]
    return PUBLIC_REGISTRY


def uses_public_registry(registry: Any) -> bool:
    """Check whether a registry origin is exactly the public registry.

    The comparison is plain string equality, so "http://npmjs.org/" is not
    considered public.
    """
    return registry == PUBLIC_REGISTRY


def build_npm_url(registry: str, name: Any) -> str:
    """Build the registry page URL for a package.

    Args:
        registry: Registry origin, with or without one trailing slash
        name: Package name, used verbatim (scoped names keep their "/")

    Returns:
        URL of the form ``{registry}/package/{name}``
    """
    if registry.endswith("/"):
        registry = registry[:-1]
    return f"{registry}/package/{name if name is not None else ''}"


def extract_dependencies(manifest: dict) -> list[Dependency]:
    """List a manifest's dependencies in declaration order."""
    dependencies = manifest.get("dependencies")
    if not isinstance(dependencies, dict):
        return []
    return [Dependency(name=name, semver_range=semver_range) for name, semver_range in dependencies.items()]


def extract_repo_url(manifest: dict) -> str | None:
    """Derive a canonical source URL from a manifest's ``repository`` field.

    GitHub URLs in any spelling ("git@github.com:owner/repo.git",
    "git://github.com/owner/repo", ...) become "http://github.com/owner/repo/".
    Other URLs only lose a trailing ".git". The result always ends with
    exactly one slash.

    Returns:
        The canonical URL, or None when the manifest has no usable repository

    Raises:
        TypeError: If ``repository.url`` is present but not a string
    """
    repository = manifest.get("repository")

    if isinstance(repository, str):
        repo_url = repository
    elif not isinstance(repository, dict):
        return None
    else:
        repo_url = repository.get("url")
        if repo_url is None:
            return None

    repo_url = _GITHUB_PREFIX.sub("http://github.com/", repo_url, count=1)
    if repo_url.endswith(".git"):
        repo_url = repo_url[: -len(".git")]
    return repo_url.rstrip("/") + "/"
