"""Aggregation of author, contributors and maintainers."""

from typing import Any

from .models import Contributor


def _to_contributor(entry: Any) -> Contributor:
    if isinstance(entry, str):
        return Contributor(name=entry)
    if isinstance(entry, dict):
        return Contributor(name=entry.get("name"), email=entry.get("email") or None)
    raise TypeError(f"Unsupported contributor entry: {entry!r}")


def aggregate_contributors(manifest: dict) -> list[Contributor]:
    """Merge a manifest's people fields into one deduplicated list.

    The author comes first, then ``contributors``, then ``maintainers``.
    Entries are deduplicated by name and the first occurrence wins.

    Args:
        manifest: The resolved manifest

    Returns:
        Contributors in first-seen order

    Raises:
        TypeError: If an entry is neither a string nor a mapping
    """
    entries = []
    # An empty object still counts as an author; only scalar blanks are skipped
    if manifest.get("author") not in (None, "", 0, False):
        entries.append(manifest["author"])
    for key in ("contributors", "maintainers"):
        if isinstance(manifest.get(key), list):
            entries.extend(manifest[key])

    contributors: list[Contributor] = []
    seen = set()
    for entry in entries:
        contributor = _to_contributor(entry)
        if contributor.name in seen:
            continue
        seen.add(contributor.name)
        contributors.append(contributor)

    return contributors
