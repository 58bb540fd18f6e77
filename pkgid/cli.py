"""
Command-line interface for pkgid.

This module provides the main CLI entry point and handles global options,
configuration loading, and command registration.
"""

from __future__ import annotations

import os
import sys
import logging
from pathlib import Path
from typing import Optional

import click

from pkgid.config import load_config
from pkgid.constants import CONFIG_ENV
from pkgid.__version__ import __version__
from pkgid.context import PkgIdContext
from pkgid.exceptions import ConfigError, PkgIdError
from pkgid.utils.console import print_error, print_warning, reconfigure_console
from pkgid.utils.logger import get_logger, setup_logging

logger = get_logger("cli")


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file.",
    envvar=CONFIG_ENV,
)
@click.option(
    "--verbose",
    "-v",
    count=True,
    help="Increase verbosity (can be repeated: -v, -vv).",
)
@click.option(
    "--color/--no-color",
    default=True,
    help="Enable or disable colored output.",
    envvar="PKGID_COLOR",
)
@click.version_option(
    version=__version__,
    prog_name="pkgid",
    message="%(prog)s %(version)s",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[Path],
    verbose: int,
    color: bool,
) -> None:
    """pkgid — inspect package identifiers.

    \b
    Available commands:
      pkgid show ID...        Parse identifiers and show their labels
      pkgid prefixes ID       List ancestor/descendant path splits

    \b
    Examples:
      pkgid show github.com/owner/project
      pkgid show foo#1.2.3 --format json
      pkgid -v prefixes github.com/owner/project
    """
    _configure_logging(verbose)

    if color:
        os.environ.pop("NO_COLOR", None)
    else:
        os.environ["NO_COLOR"] = "1"
    reconfigure_console()

    try:
        loaded_config = load_config(config)
    except ConfigError as exc:
        print_error(str(exc))
        raise SystemExit(1) from exc

    pkgid_ctx = PkgIdContext()
    pkgid_ctx.config_path = config or loaded_config.source_path
    pkgid_ctx.color = color
    pkgid_ctx.verbose = verbose
    pkgid_ctx.config = loaded_config
    ctx.obj = pkgid_ctx

    logger.debug("pkgid v%s", __version__)
    logger.debug("Config path: %s", pkgid_ctx.config_path)
    logger.debug("Loaded configuration: %s", loaded_config.to_log_dict())
    logger.debug("Verbosity: %s | Color: %s", verbose, color)


def _configure_logging(verbose: int) -> None:
    """Configure logging level based on verbosity flags."""
    if verbose <= 0:
        level = logging.WARNING
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG

    setup_logging(level=level, verbose=verbose >= 2)
    logger.debug("Logging initialized at %s level", logging.getLevelName(level))


from pkgid.commands.show import show  # noqa: E402
from pkgid.commands.prefixes import prefixes  # noqa: E402

cli.add_command(show)
cli.add_command(prefixes)


def main() -> int:
    """Main entry point for the pkgid CLI.

    Returns:
        Exit code:
            0   Success
            1   Unhandled or application error
            2   Usage error (Click)
            130 Interrupted by user (Ctrl+C)
    """
    try:
        cli(standalone_mode=False)
        return 0

    except click.exceptions.Abort:
        print_warning("\nOperation cancelled by user")
        return 130

    except click.ClickException as exc:
        exc.show()
        return exc.exit_code

    except PkgIdError as exc:
        print_error(str(exc))
        logger.debug(
            "PkgIdError details: %s",
            exc.details or "<none>",
            exc_info=True,
        )
        return 1

    except KeyboardInterrupt:
        print_warning("\nOperation cancelled by user")
        return 130

    except Exception as exc:
        print_error(f"Unexpected error: {exc}")
        logger.exception("Unhandled exception in CLI")
        return 1


if __name__ == "__main__":
    sys.exit(main())
