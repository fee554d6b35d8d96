from typing import Any, Dict, List, Optional

import requests

from dockhand.config.models import ApiConfig
from dockhand.utils.errors import LookupFailedError
from dockhand.utils.logging import get_logger

logger = get_logger(__name__)


class EngineClient:
    """Minimal read-only client for a Docker Engine compatible HTTP API"""

    def __init__(self, config: ApiConfig, session: Optional[requests.Session] = None):
        self.config = config
        self.base_url = config.base_url.rstrip("/")
        if config.api_version:
            self.base_url = f"{self.base_url}/v{config.api_version.lstrip('v')}"
        self.timeout = config.timeout
        self.session = session or requests.Session()

    def _get(self, resource: str, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        url = f"{self.base_url}{path}"
        logger.debug(f"GET {url} params={params}")
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
        except requests.exceptions.Timeout as e:
            raise LookupFailedError(resource, f"timed out after {self.timeout}s") from e
        except requests.exceptions.RequestException as e:
            raise LookupFailedError(resource, str(e)) from e

        if response.status_code != 200:
            raise LookupFailedError(
                resource,
                f"HTTP {response.status_code} from {url}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise LookupFailedError(resource, f"invalid JSON from {url}") from e

    def _list(
        self, resource: str, path: str, params: Optional[Dict[str, Any]] = None
    ) -> List[Dict[str, Any]]:
        data = self._get(resource, path, params)
        if not isinstance(data, list) or not all(isinstance(entry, dict) for entry in data):
            raise LookupFailedError(resource, "unexpected response payload")
        return data

    def list_containers(self, show_all: bool = True) -> List[Dict[str, Any]]:
        """List containers; stopped ones are included when show_all is set"""
        return self._list("containers", "/containers/json", {"all": int(show_all)})

    def list_networks(self) -> List[Dict[str, Any]]:
        return self._list("networks", "/networks")

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "EngineClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
