"""Engine API access used by dynamic completions."""

from dockhand.client.directory import ContainerDirectory, NameDirectory, NetworkDirectory
from dockhand.client.engine import EngineClient

__all__ = ["EngineClient", "NameDirectory", "ContainerDirectory", "NetworkDirectory"]
