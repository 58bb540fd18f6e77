"""CLI subcommands for pkgid."""

from __future__ import annotations

import dataclasses

from pkgid.config import PkgIdConfig
from pkgid.context import PkgIdContext
from pkgid.core.version_lookup import GitVersionLookup


def build_lookup(ctx: PkgIdContext, *, offline: bool = False) -> GitVersionLookup:
    """Return the version lookup for a command, honoring ``--offline``."""
    config = ctx.config or PkgIdConfig()
    if offline:
        config = dataclasses.replace(config, probe_local=False, probe_remote=False)
    return GitVersionLookup(config)
