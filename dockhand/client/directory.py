"""Name directories backed by the engine API.

A directory answers ``lookup(prefix)`` with the names that start with
``prefix`` and raises ``LookupFailedError`` when the engine cannot be
reached. Completion code only depends on the ``NameDirectory`` protocol, so
tests substitute an in-memory fake.
"""

from typing import List, Protocol

from dockhand.client.engine import EngineClient

SHORT_ID_LENGTH = 12


class NameDirectory(Protocol):
    def lookup(self, prefix: str) -> List[str]: ...


class ContainerDirectory:
    """Container names, optionally followed by their short IDs"""

    def __init__(self, client: EngineClient, show_all: bool = True, show_ids: bool = False):
        self.client = client
        self.show_all = show_all
        self.show_ids = show_ids

    def lookup(self, prefix: str) -> List[str]:
        containers = self.client.list_containers(show_all=self.show_all)

        names = []
        ids = []
        for container in containers:
            for name in container.get("Names") or []:
                names.append(name.lstrip("/"))
            if self.show_ids and container.get("Id"):
                ids.append(container["Id"][:SHORT_ID_LENGTH])

        return [n for n in names + ids if n.startswith(prefix)]


class NetworkDirectory:
    def __init__(self, client: EngineClient):
        self.client = client

    def lookup(self, prefix: str) -> List[str]:
        networks = self.client.list_networks()
        names = [n.get("Name") for n in networks]
        return [name for name in names if name and name.startswith(prefix)]
