"""Version discovery for package identifiers without an explicit version.

When an identifier carries no ``#tag``, its version is looked up in two
places, in order:

1. **Local** — a git checkout of the package in one of the search roots
   (``<root>/<path>/.git``). Roots come from ``PKGID_PATH``, then the
   configured ``search_path``, then the current directory.
2. **Remote** — the origin inferred from the path itself, e.g.
   ``https://github.com/owner/project``, queried with ``git ls-remote``.

In both places the highest tag that parses as a version wins. Failing to
find a version is not an error: every git failure is logged and reported
as "no version".

The identifier constructor talks to a :class:`VersionLookup`. The default
instance is a :class:`GitVersionLookup` built from the loaded
configuration; tests and embedders can replace it with
:func:`set_version_lookup`.
"""

from __future__ import annotations

import os
import subprocess
import threading
from pathlib import Path, PurePosixPath
from typing import List, Optional, Protocol, Sequence

from pkgid.config import PkgIdConfig, load_config
from pkgid.constants import GIT_EXECUTABLE, SEARCH_PATH_ENV, TAG_REF_PREFIX
from pkgid.models.version import Version
from pkgid.utils.logger import get_logger
from pkgid.utils.version_utils import latest_version_tag

logger = get_logger("core.version_lookup")


class VersionLookup(Protocol):
    """Source of versions for identifiers that did not specify one."""

    def local(self, path: PurePosixPath) -> Optional[Version]:
        """Return the version of a locally checked-out package, if any."""
        ...

    def remote(self, path: PurePosixPath) -> Optional[Version]:
        """Return the version advertised by the package's origin, if any."""
        ...


class GitVersionLookup:
    """Discover versions from git tags.

    Args:
        config: Probe settings; defaults to :class:`PkgIdConfig` defaults.
        git: Git executable to run.
    """

    def __init__(
        self,
        config: Optional[PkgIdConfig] = None,
        *,
        git: str = GIT_EXECUTABLE,
    ) -> None:
        self.config = config or PkgIdConfig()
        self.git = git

    # ------------------------------------------------------------------
    # Search roots
    # ------------------------------------------------------------------

    def search_roots(self) -> List[Path]:
        """Return the package search roots, in probing order, without duplicates."""
        roots: List[Path] = []

        env_value = os.environ.get(SEARCH_PATH_ENV, "")
        for entry in env_value.split(os.pathsep):
            if entry:
                roots.append(Path(entry).expanduser())

        roots.extend(self.config.search_path)
        roots.append(Path.cwd())

        unique: List[Path] = []
        for root in roots:
            if root not in unique:
                unique.append(root)
        return unique

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def local(self, path: PurePosixPath) -> Optional[Version]:
        if not self.config.probe_local:
            return None

        for root in self.search_roots():
            git_dir = root.joinpath(*path.parts) / ".git"
            if not git_dir.is_dir():
                continue

            output = self._run_git(["--git-dir", str(git_dir), "tag", "-l"])
            if output is None:
                continue

            tag = latest_version_tag(output.splitlines())
            if tag is not None:
                logger.debug("Found local version %s for %s in %s", tag, path, root)
                return Version(tag)

        return None

    def remote(self, path: PurePosixPath) -> Optional[Version]:
        if not self.config.probe_remote or not _is_url_like(path):
            return None

        url = f"{self.config.remote_scheme}://{path.as_posix()}"
        output = self._run_git(
            ["ls-remote", "--tags", "--refs", url],
            timeout=self.config.git_timeout,
        )
        if output is None:
            return None

        tag = latest_version_tag(_tag_names(output.splitlines()))
        if tag is None:
            return None

        logger.debug("Found remote version %s for %s", tag, url)
        return Version(tag)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _run_git(
        self,
        args: Sequence[str],
        *,
        timeout: Optional[int] = None,
    ) -> Optional[str]:
        """Run git and return its stdout, or ``None`` if it failed."""
        cmd = [self.git, *args]
        env = dict(os.environ, GIT_TERMINAL_PROMPT="0")

        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                check=False,
                timeout=timeout,
                env=env,
            )
        except FileNotFoundError:
            logger.debug("Git executable not found: %s", self.git)
            return None
        except subprocess.TimeoutExpired:
            logger.debug("Timed out after %ss: %s", timeout, " ".join(cmd))
            return None

        if result.returncode != 0:
            logger.debug(
                "%s exited with %d: %s",
                " ".join(cmd),
                result.returncode,
                result.stderr.strip(),
            )
            return None

        return result.stdout


def _is_url_like(path: PurePosixPath) -> bool:
    """A path names a remote origin only if it has a host and something more."""
    return len(path.parts) > 1


def _tag_names(lines: Sequence[str]) -> List[str]:
    """Extract tag names from ``git ls-remote --tags`` output lines."""
    names: List[str] = []
    for line in lines:
        _, _, ref = line.partition("\t")
        if ref.startswith(TAG_REF_PREFIX):
            names.append(ref[len(TAG_REF_PREFIX):].strip())
    return names


# ---------------------------------------------------------------------------
# Default lookup
# ---------------------------------------------------------------------------

_default_lookup: Optional[VersionLookup] = None
_lookup_lock = threading.Lock()


def get_version_lookup() -> VersionLookup:
    """Return the default lookup, building it from the loaded config on first use."""
    global _default_lookup

    if _default_lookup is None:
        with _lookup_lock:
            if _default_lookup is None:
                _default_lookup = GitVersionLookup(load_config())
    return _default_lookup


def set_version_lookup(lookup: Optional[VersionLookup]) -> Optional[VersionLookup]:
    """Install ``lookup`` as the default; ``None`` resets to lazy construction.

    Returns:
        The previously installed lookup.
    """
    global _default_lookup

    with _lookup_lock:
        previous = _default_lookup
        _default_lookup = lookup
    return previous


def try_getting_local_version(path: PurePosixPath) -> Optional[Version]:
    """Probe the local search roots for a version of ``path``."""
    return get_version_lookup().local(path)


def try_getting_version(path: PurePosixPath) -> Optional[Version]:
    """Probe the remote origin inferred from ``path`` for a version."""
    return get_version_lookup().remote(path)
