from typing import Optional

from dockhand.completion.registry import CompletionRegistry
from dockhand.core.app import DockhandApp
from dockhand.utils.logging import get_logger

logger = get_logger(__name__)

_app: Optional[DockhandApp] = None


def get_app() -> DockhandApp:
    """Return the process-wide app, creating it on first use"""
    global _app
    if _app is None:
        _app = DockhandApp()
    return _app


def get_registry() -> CompletionRegistry:
    return get_app().registry
