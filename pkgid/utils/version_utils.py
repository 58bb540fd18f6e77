"""
Version tag utilities for pkgid.

Tags discovered in git repositories are arbitrary names. Only tags that
parse as PEP 440 versions are treated as package versions; among those
the highest wins.
"""

from __future__ import annotations

from typing import Iterable, Optional

from packaging.version import InvalidVersion, Version, parse


def try_parsing_version(tag: str) -> Optional[Version]:
    """Parse a tag name as a PEP 440 version.

    Args:
        tag: Raw tag name, e.g. ``"v1.2.0"`` or ``"0.3"``.

    Returns:
        The parsed version, or ``None`` if the tag is blank or not a version.

    Examples:
        >>> try_parsing_version("v1.2.0")
        <Version('1.2.0')>
        >>> try_parsing_version("nightly") is None
        True
    """
    tag = tag.strip()
    if not tag:
        return None

    try:
        parsed = parse(tag)
    except InvalidVersion:
        return None

    return parsed if isinstance(parsed, Version) else None


def latest_version_tag(tags: Iterable[str]) -> Optional[str]:
    """Return the tag with the highest version, as originally spelled.

    Blank lines and tags that are not versions are ignored. When two tags
    parse to the same version (``v1.0`` and ``1.0``) the first one seen
    is kept.

    Args:
        tags: Candidate tag names, e.g. the lines of ``git tag -l``.

    Returns:
        The winning tag (stripped of surrounding whitespace), or ``None``.
    """
    best_tag: Optional[str] = None
    best_version: Optional[Version] = None

    for tag in tags:
        version = try_parsing_version(tag)
        if version is None:
            continue
        if best_version is None or version > best_version:
            best_tag = tag.strip()
            best_version = version

    return best_tag
