"""Show command implementation for pkgid.

Parses one or more package identifiers and reports the normalized triple
together with every derived label.

Typical usage::

    $ pkgid show github.com/owner/project
    $ pkgid show foo#1.2.3 github.com/a/b --format json
    $ pkgid show github.com/a/b --offline
"""

from __future__ import annotations

import sys
import json
from typing import Any, Dict, List, Tuple

import click

from pkgid.commands import build_lookup
from pkgid.context import PkgIdContext, pass_context
from pkgid.exceptions import PkgIdError
from pkgid.models import PkgId
from pkgid.utils import get_logger, print_error, print_table

logger = get_logger("commands.show")


@click.command()
@click.argument("identifiers", nargs=-1, required=True)
@click.option(
    "--format",
    "-f",
    type=click.Choice(["table", "json"], case_sensitive=False),
    default="table",
    help="Output format.",
)
@click.option(
    "--offline",
    is_flag=True,
    help="Do not probe local workspaces or remote origins for versions.",
)
@pass_context
def show(
    ctx: PkgIdContext,
    identifiers: Tuple[str, ...],
    format: str,
    offline: bool,
) -> None:
    """Parse package identifiers and show their components.

    Each identifier is reported with its path, short name, resolved
    version, complexity, hash tag and install tag. Identifiers that fail
    to parse are reported as errors.

    Exits:
        0 if every identifier parsed, 1 otherwise.
    """
    lookup = build_lookup(ctx, offline=offline)

    parsed: List[PkgId] = []
    failed = False
    for identifier in identifiers:
        try:
            parsed.append(PkgId.new(identifier, lookup=lookup))
        except PkgIdError as exc:
            logger.debug("Failed to parse %s", identifier, exc_info=True)
            print_error(str(exc))
            failed = True

    if format == "json":
        click.echo(json.dumps([pkg.to_json() for pkg in parsed], indent=2))
    else:
        _print_pkgid_table(parsed)

    if failed:
        sys.exit(1)


def _print_pkgid_table(parsed: List[PkgId]) -> None:
    rows: List[Dict[str, Any]] = []
    for pkg in parsed:
        data = pkg.to_json()
        rows.append(
            {
                "Path": data["path"],
                "Short name": data["short_name"],
                "Version": data["version"] if data["version"] is not None else "-",
                "Complex": "yes" if data["complex"] else "no",
                "Hash tag": data["hash_tag"],
                "Install tag": data["install_tag"],
            }
        )

    print_table(
        rows,
        title="Package identifiers",
        column_styles={"Path": {"style": "cyan", "no_wrap": True}},
    )
