"""Prefixes command implementation for pkgid.

Lists every ``(ancestor, descendant)`` split of an identifier's path,
longest ancestor first. The package manager searches workspaces for each
ancestor in this order.

Typical usage::

    $ pkgid prefixes github.com/owner/project
"""

from __future__ import annotations

import sys

import click

from pkgid.commands import build_lookup
from pkgid.context import PkgIdContext, pass_context
from pkgid.exceptions import PkgIdError
from pkgid.models import PkgId
from pkgid.utils import print_error, print_pairs, print_warning


@click.command()
@click.argument("identifier")
@pass_context
def prefixes(ctx: PkgIdContext, identifier: str) -> None:
    """List ancestor/descendant splits of IDENTIFIER's path."""
    try:
        pkg = PkgId.new(identifier, lookup=build_lookup(ctx, offline=True))
    except PkgIdError as exc:
        print_error(str(exc))
        sys.exit(1)

    pairs = [(a.as_posix(), d.as_posix()) for a, d in pkg.prefixes()]
    if not pairs:
        print_warning(f"{pkg.path.as_posix()} has a single component; no prefixes")
        return

    print_pairs(pairs, title=f"Prefixes of {pkg.path.as_posix()}")
