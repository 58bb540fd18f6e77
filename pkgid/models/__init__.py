"""
Data models for pkgid.

This package exposes the identifier and version models. Only symbols
listed in ``__all__`` are considered part of the public API.
"""

from __future__ import annotations

# version must load first; the core modules imported by package_id need it
from pkgid.models.version import NO_VERSION, Version, split_version
from pkgid.models.package_id import PkgId, Prefixes, new_identifier, prefixes_iter

__all__ = [
    "NO_VERSION",
    "PkgId",
    "Prefixes",
    "Version",
    "new_identifier",
    "prefixes_iter",
    "split_version",
]
