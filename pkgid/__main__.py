"""
Executable module for pkgid.

Running:
    python -m pkgid

is equivalent to:
    pkgid
"""

from __future__ import annotations

import sys


def _print_startup_error(exc: ImportError) -> None:
    """Explain on stderr why the CLI could not be loaded."""
    sys.stderr.write("pkgid CLI could not be started.\n")
    sys.stderr.write(f"Python version : {sys.version}\n")
    try:
        from pkgid.__version__ import __version__

        sys.stderr.write(f"pkgid version  : {__version__}\n")
    except ImportError:
        sys.stderr.write("pkgid version  : <unknown>\n")
    sys.stderr.write("\n")
    sys.stderr.write(f"ImportError: {exc}\n")


def main() -> int:
    """
    Main entrypoint when executing ``python -m pkgid``.

    Returns:
        Exit code returned by the CLI, or 1 if it cannot be imported.
    """
    try:
        # click is only needed for CLI use
        from pkgid.cli import main as cli_main
    except ImportError as exc:
        _print_startup_error(exc)
        return 1

    return cli_main()


if __name__ == "__main__":
    sys.exit(main())
