import os
from pathlib import Path
from typing import Dict, Optional

import yaml
from dotenv import load_dotenv
from pydantic import ValidationError

from dockhand.config.models import DockhandConfig
from dockhand.utils.errors import ConfigError
from dockhand.utils.logging import get_logger

logger = get_logger(__name__)

TRUTHY = {"1", "yes", "true", "on"}


def normalize_host(host: str) -> str:
    """Map a DOCKER_HOST style address onto an HTTP base URL"""
    host = host.strip().rstrip("/")
    if host.startswith("tcp://"):
        return "http://" + host[len("tcp://"):]
    if "://" not in host:
        return "http://" + host
    return host


class ConfigManager:
    """Manages configuration from YAML and environment variables"""

    def __init__(self, config_path: Optional[str] = None):
        self.config_dir = Path.home() / ".dockhand"
        self.config_dir.mkdir(exist_ok=True)

        load_dotenv()

        if config_path:
            self.config_path = Path(config_path)
        else:
            self.config_path = self.config_dir / "config.yaml"

        if not self.config_path.exists():
            self._create_default_config()

        self._config_data = self._load_config_file()
        self._apply_env_overrides(self._config_data)
        try:
            self.config = DockhandConfig(**self._config_data)
        except ValidationError as e:
            raise ConfigError(
                f"Invalid configuration in {self.config_path}",
                hint=str(e),
            ) from e
        logger.debug(f"Config loaded from {self.config_path}")

    def _create_default_config(self):
        """Create default configuration file"""
        default_config = DockhandConfig().model_dump()

        with open(self.config_path, "w") as f:
            yaml.dump(default_config, f, default_flow_style=False)
        logger.info(f"Created default config at {self.config_path}")

    def _load_config_file(self) -> Dict:
        """Load configuration from YAML file"""
        try:
            with open(self.config_path) as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Could not parse {self.config_path}", hint=str(e)) from e
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(f"{self.config_path} must contain a mapping")
        return data

    def _apply_env_overrides(self, data: Dict) -> None:
        """Environment variables win over the YAML file"""
        api = data["api"] = data.get("api") or {}
        completion = data["completion"] = data.get("completion") or {}

        host = os.environ.get("DOCKHAND_HOST")
        if host:
            api["base_url"] = normalize_host(host)
        api_version = os.environ.get("DOCKHAND_API_VERSION")
        if api_version:
            api["api_version"] = api_version
        timeout = os.environ.get("DOCKHAND_TIMEOUT")
        if timeout:
            try:
                api["timeout"] = float(timeout)
            except ValueError as e:
                raise ConfigError(f"DOCKHAND_TIMEOUT must be a number, got {timeout!r}") from e
        show_ids = os.environ.get("DOCKER_COMPLETION_SHOW_CONTAINER_IDS")
        if show_ids is not None:
            completion["show_container_ids"] = show_ids.strip().lower() in TRUTHY
