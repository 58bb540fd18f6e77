"""
Core parsing services for pkgid.

- :mod:`pkgid.core.legality` — character classes, URL heuristic, legality gate
- :mod:`pkgid.core.version_lookup` — local and remote version discovery
"""

from __future__ import annotations

from pkgid.core.legality import drop_url_scheme, ensure_legal_package_id, is_url_part
from pkgid.core.version_lookup import (
    GitVersionLookup,
    VersionLookup,
    get_version_lookup,
    set_version_lookup,
    try_getting_local_version,
    try_getting_version,
)

__all__ = [
    "GitVersionLookup",
    "VersionLookup",
    "drop_url_scheme",
    "ensure_legal_package_id",
    "get_version_lookup",
    "is_url_part",
    "set_version_lookup",
    "try_getting_local_version",
    "try_getting_version",
]
