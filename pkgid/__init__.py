"""
pkgid — package identifier parsing for source-based package managers

A package identifier is a relative path naming where a package's source
lives, such as ``github.com/owner/project``, optionally followed by
``#`` and a version tag::

    >>> from pkgid import PkgId
    >>> pkg = PkgId.new("github.com/owner/project#0.2")
    >>> pkg.short_name, str(pkg.version), pkg.is_complex()
    ('project', '0.2', True)
    >>> pkg.install_tag()
    'install(github.com/owner/project-0.2)'

Identifiers without a version tag are resolved against local git
checkouts and then the remote origin (see :mod:`pkgid.core.version_lookup`).
"""

from __future__ import annotations

from pkgid.__version__ import __version__

# models before anything that pulls in pkgid.core
from pkgid.models import NO_VERSION, PkgId, Prefixes, Version, new_identifier, prefixes_iter
from pkgid.conditions import bad_pkg_id
from pkgid.exceptions import (
    BadPkgIdError,
    ConfigError,
    IllegalPackageIdError,
    PathDerivationError,
    PkgIdError,
)

__author__ = "pkgid Contributors"
__license__ = "Apache-2.0"
__description__ = "Package identifier parsing and normalization for source-based package managers."

__all__ = [
    "__version__",
    "NO_VERSION",
    "PkgId",
    "Prefixes",
    "Version",
    "bad_pkg_id",
    "new_identifier",
    "prefixes_iter",
    # Errors
    "BadPkgIdError",
    "ConfigError",
    "IllegalPackageIdError",
    "PathDerivationError",
    "PkgIdError",
]
