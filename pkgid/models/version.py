"""
Package version model.

A package version is an opaque tag: either given explicitly after ``#``
in an identifier, discovered from a workspace or remote origin, or
absent. Tags are compared as plain strings; no semantic ordering is
applied here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from pkgid.constants import VERSION_SEPARATOR


@dataclass(frozen=True)
class Version:
    """
    Requested version of a package.

    Attributes:
        tag: Opaque version tag, or ``None`` when no version is known.
    """

    tag: Optional[str] = None

    @property
    def is_none(self) -> bool:
        """True for the absent version."""
        return self.tag is None

    def __str__(self) -> str:
        return self.tag if self.tag is not None else ""

    def __repr__(self) -> str:
        return "NoVersion" if self.tag is None else f"Version({self.tag!r})"


#: The absent version. Distinct from ``Version("")``.
NO_VERSION = Version()


def split_version(s: str) -> Optional[Tuple[str, Version]]:
    """
    Split an identifier string into its path part and explicit version.

    The split happens at the first ``#``; everything after it is the tag.

    Args:
        s: Identifier string, e.g. ``"github.com/a/b#0.1"``.

    Returns:
        ``(path_part, Version(tag))``, or ``None`` if ``s`` has no ``#``.

    Examples:
        >>> split_version("github.com/a/b#0.1")
        ('github.com/a/b', Version('0.1'))
        >>> split_version("foo") is None
        True
    """
    path, sep, tag = s.partition(VERSION_SEPARATOR)
    if not sep:
        return None
    return path, Version(tag)
