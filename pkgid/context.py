"""
Shared context object for pkgid CLI commands.

An instance is created once per CLI invocation by the ``pkgid`` group and
handed to subcommands through Click's context mechanism.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from pkgid.config import PkgIdConfig


class PkgIdContext:
    """Global context object for pkgid CLI commands.

    Attributes:
        config_path: Path to the pkgid configuration file, if any.
        verbose: Verbosity level (0=WARNING, 1=INFO, 2+=DEBUG).
        color: Whether colored terminal output is enabled.
        config: Loaded configuration, or ``None`` before the group ran.
    """

    __slots__ = ("config_path", "verbose", "color", "config")

    def __init__(self) -> None:
        self.config_path: Optional[Path] = None
        self.verbose: int = 0
        self.color: bool = True
        self.config: Optional[PkgIdConfig] = None


#: Click decorator for injecting :class:`PkgIdContext` into commands.
pass_context = click.make_pass_decorator(PkgIdContext, ensure=True)
