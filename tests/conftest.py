"""
Shared pytest fixtures and helpers for dockhand tests.

Completion code only talks to a ``NameDirectory``; the fakes here stand in
for the engine API so no test needs a running daemon.
"""

from typing import List, Optional

import pytest

from dockhand.utils.cache import StaticCache
from dockhand.utils.errors import LookupFailedError

# =============================================================================
# Fakes
# =============================================================================


class FakeDirectory:
    """In-memory directory that records every prefix it is asked for."""

    def __init__(self, names: Optional[List[str]] = None):
        self.names = list(names or [])
        self.queries: List[str] = []

    def lookup(self, prefix: str) -> List[str]:
        self.queries.append(prefix)
        return [n for n in self.names if n.startswith(prefix)]


class FailingDirectory:
    """Directory whose engine is unreachable."""

    def __init__(self):
        self.queries: List[str] = []

    def lookup(self, prefix: str) -> List[str]:
        self.queries.append(prefix)
        raise LookupFailedError("containers", "connection refused")


class FakeApp:
    """Stand-in for DockhandApp exposing only the registry."""

    def __init__(self, registry):
        self.registry = registry


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def cache() -> StaticCache:
    """A fresh write-once cache per test."""
    return StaticCache()


@pytest.fixture
def containers() -> FakeDirectory:
    return FakeDirectory(["web", "db", "worker"])


@pytest.fixture
def networks() -> FakeDirectory:
    return FakeDirectory(["bridge", "host", "none", "backend"])


@pytest.fixture
def failing_directory() -> FailingDirectory:
    return FailingDirectory()


@pytest.fixture
def isolated_home(tmp_path, monkeypatch):
    """Point HOME at a temp dir and clear dockhand environment overrides."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    for var in (
        "DOCKHAND_HOST",
        "DOCKHAND_API_VERSION",
        "DOCKHAND_TIMEOUT",
        "DOCKER_COMPLETION_SHOW_CONTAINER_IDS",
    ):
        monkeypatch.delenv(var, raising=False)
    return home
