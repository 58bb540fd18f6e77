"""
Package identifier model.

A package identifier names a package by a relative path, usually the
location of its source on a hosting site (``github.com/owner/project``),
optionally followed by ``#`` and a version tag. :meth:`PkgId.new` turns
such a string into an immutable :class:`PkgId`; the remaining methods
derive the labels the package manager uses for caching and installation.
"""

from __future__ import annotations

import posixpath
from collections import deque
from dataclasses import dataclass, field
from pathlib import PurePosixPath
from typing import Any, Deque, Dict, Iterator, List, Optional, Tuple

from pkgid.conditions import bad_pkg_id
from pkgid.constants import (
    PARENT_DIR,
    PATH_SEPARATOR,
    REASON_ABSOLUTE,
    REASON_PARENT_REFERENCE,
    REASON_ZERO_LENGTH,
)
from pkgid.core.legality import ensure_legal_package_id
from pkgid.core.version_lookup import VersionLookup, get_version_lookup
from pkgid.exceptions import PathDerivationError
from pkgid.models.version import NO_VERSION, Version, split_version
from pkgid.utils.hashing import hash_string
from pkgid.utils.logger import get_logger

logger = get_logger("models.package_id")


@dataclass(frozen=True)
class PkgId:
    """
    Path-fragment identifier of a package such as ``github.com/graydon/test``.

    Two identifiers are equal when their paths and versions are equal;
    ``short_name`` is derived from the path and does not take part.

    Attributes:
        path: Relative path with at least one component. For a remote
            package this is also where its sources live inside a
            workspace.
        short_name: Stem of the last path component, kept so callers do
            not have to derive it repeatedly. It need not be a valid
            identifier in any language.
        version: Requested version; ``NO_VERSION`` if none was given or
            found.
    """

    path: PurePosixPath
    short_name: str = field(compare=False)
    version: Version = NO_VERSION

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def new(cls, s: str, *, lookup: Optional[VersionLookup] = None) -> "PkgId":
        """
        Parse ``s`` into a package identifier.

        The version is the explicit ``#tag`` if present, otherwise the
        first one found by ``lookup`` locally, then remotely.

        Args:
            s: Identifier string, e.g. ``"github.com/a/b#0.1"``.
            lookup: Version source; defaults to the installed default
                lookup (see :mod:`pkgid.core.version_lookup`).

        Returns:
            The parsed identifier, or the value returned by a
            ``bad_pkg_id`` handler for a rejected path.

        Raises:
            IllegalPackageIdError: ``s`` contains an illegal character.
            BadPkgIdError: The path is absolute, empty or climbs above its
                root, and no ``bad_pkg_id`` handler is installed.
            PathDerivationError: No short name can be derived from the path.
        """
        # Not necessarily a legal path either, so this comes first
        ensure_legal_package_id(s)

        given_version: Optional[Version] = None
        split = split_version(s)
        if split is not None:
            s, given_version = split

        path = PurePosixPath(posixpath.normpath(s)) if s else PurePosixPath()
        if path.is_absolute():
            return bad_pkg_id.signal(path, REASON_ABSOLUTE)
        if s.endswith(PATH_SEPARATOR) or path.name in ("", PARENT_DIR):
            return bad_pkg_id.signal(path, REASON_ZERO_LENGTH)
        # normpath leaves ".." only as leading components
        if PARENT_DIR in path.parts:
            return bad_pkg_id.signal(path, REASON_PARENT_REFERENCE)

        short_name = path.stem
        if not short_name:
            raise PathDerivationError(s)

        if given_version is not None:
            version = given_version
        else:
            version = _discover_version(path, lookup or get_version_lookup())

        logger.debug("Parsed %s as path=%s version=%r", s, path, version)
        return cls(path=path, short_name=short_name, version=version)

    # ------------------------------------------------------------------
    # Derived labels
    # ------------------------------------------------------------------

    def hash_tag(self) -> str:
        """
        Return ``"<path>-<digest>-<version>"``, a stable cache key.

        ``digest`` is the hex digest of the path and version strings
        concatenated.
        """
        path = self.path.as_posix()
        version = str(self.version)
        return f"{path}-{hash_string(path + version)}-{version}"

    def short_name_with_version(self) -> str:
        return f"{self.short_name}{self.version}"

    def is_complex(self) -> bool:
        """True if the identifier has more than one path component."""
        return len(self.path.parts) > 1

    def prefixes(self) -> "Prefixes":
        """Iterate over ``(ancestor, descendant)`` splits of the path."""
        return prefixes_iter(self.path)

    def install_tag(self) -> str:
        """Work-cache name for the *installed* outputs of this package."""
        return f"install({self})"

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_json(self) -> Dict[str, Any]:
        """
        Serialize the identifier and its labels to a JSON-compatible dict.

        Returns:
            JSON-safe representation; ``version`` is ``None`` when absent.
        """
        return {
            "id": str(self),
            "path": self.path.as_posix(),
            "short_name": self.short_name,
            "version": self.version.tag,
            "complex": self.is_complex(),
            "hash_tag": self.hash_tag(),
            "install_tag": self.install_tag(),
        }

    def __str__(self) -> str:
        # TODO: switch to the short name once install directories are keyed by it
        return f"{self.path.as_posix()}-{self.version}"


def _discover_version(path: PurePosixPath, lookup: VersionLookup) -> Version:
    """First version found locally, then remotely, else ``NO_VERSION``."""
    version = lookup.local(path)
    if version is not None:
        return version

    version = lookup.remote(path)
    if version is not None:
        return version

    return NO_VERSION


def new_identifier(s: str, *, lookup: Optional[VersionLookup] = None) -> PkgId:
    """Parse ``s`` into a :class:`PkgId`. See :meth:`PkgId.new`."""
    return PkgId.new(s, lookup=lookup)


# ---------------------------------------------------------------------------
# Prefix enumeration
# ---------------------------------------------------------------------------


class Prefixes:
    """
    Single-pass iterator over the ``(ancestor, descendant)`` splits of a path.

    For ``a/b/c`` it yields ``(a/b, c)`` then ``(a, b/c)``; longer
    ancestors come first and both halves are always non-empty. A path
    with a single component yields nothing.
    """

    __slots__ = ("_components", "_remaining")

    def __init__(self, path: PurePosixPath) -> None:
        self._components: List[str] = list(path.parts)
        self._remaining: Deque[str] = deque()

    def __iter__(self) -> Iterator[Tuple[PurePosixPath, PurePosixPath]]:
        return self

    def __next__(self) -> Tuple[PurePosixPath, PurePosixPath]:
        if len(self._components) <= 1:
            raise StopIteration

        self._remaining.appendleft(self._components.pop())
        return PurePosixPath(*self._components), PurePosixPath(*self._remaining)


def prefixes_iter(path: PurePosixPath) -> Prefixes:
    """Return a :class:`Prefixes` iterator over ``path``."""
    return Prefixes(path)
