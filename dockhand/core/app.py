from typing import Optional

from dockhand.client.engine import EngineClient
from dockhand.completion.container import build_registry
from dockhand.config.config_manager import ConfigManager
from dockhand.utils.cache import StaticCache
from dockhand.utils.logging import get_logger

logger = get_logger(__name__)


class DockhandApp:
    """
    Holds the components a CLI invocation needs: config, engine client,
    the process-lifetime static cache and the completion registry.
    """

    def __init__(self, config_path: Optional[str] = None, cache: Optional[StaticCache] = None):
        self.config_manager = ConfigManager(config_path) if config_path else ConfigManager()
        self.client = EngineClient(self.config_manager.config.api)
        self.cache = cache or StaticCache()
        self.registry = build_registry(
            self.client, self.cache, self.config_manager.config.completion
        )
        logger.debug("DockhandApp initialized")
