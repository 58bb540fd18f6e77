from __future__ import annotations

import logging
from pathlib import PurePosixPath
from typing import Generator, List, Optional, Tuple

import pytest

from pkgid.core.version_lookup import set_version_lookup
from pkgid.messages import error_sink
from pkgid.models.version import Version
from pkgid.utils.console import reconfigure_console
import pkgid.utils.logger as logger_module


class FakeLookup:
    """In-memory version lookup recording every probe."""

    def __init__(
        self,
        local: Optional[Version] = None,
        remote: Optional[Version] = None,
    ) -> None:
        self.local_version = local
        self.remote_version = remote
        self.calls: List[Tuple[str, PurePosixPath]] = []

    def local(self, path: PurePosixPath) -> Optional[Version]:
        self.calls.append(("local", path))
        return self.local_version

    def remote(self, path: PurePosixPath) -> Optional[Version]:
        self.calls.append(("remote", path))
        return self.remote_version


@pytest.fixture
def fake_lookup() -> FakeLookup:
    """Lookup that finds no version anywhere."""
    return FakeLookup()


@pytest.fixture(autouse=True)
def default_lookup() -> Generator[FakeLookup, None, None]:
    """Keep tests away from git by installing a fake default lookup."""
    lookup = FakeLookup()
    previous = set_version_lookup(lookup)
    yield lookup
    set_version_lookup(previous)


@pytest.fixture
def collected_errors() -> Generator[List[str], None, None]:
    """Collect diagnostics emitted through the error sink."""
    collected: List[str] = []
    with error_sink(collected.append):
        yield collected


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Isolate env vars, the shared console and the pkgid logger per test."""
    monkeypatch.setenv("NO_COLOR", "1")
    monkeypatch.delenv("PKGID_PATH", raising=False)
    monkeypatch.delenv("PKGID_CONFIG", raising=False)
    reconfigure_console()

    yield

    root_logger = logging.getLogger("pkgid")
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)
    root_logger.propagate = True
    logger_module._logging_configured = False
    reconfigure_console()
