from typing import List

from dockhand.client.directory import NameDirectory
from dockhand.utils.logging import get_logger

logger = get_logger(__name__)


class DynamicSource:
    """Live name lookup that degrades to no candidates on failure.

    Completion is best-effort: no error from the directory may reach the
    shell, so it is logged at debug level and an empty list is returned.
    """

    def __init__(self, directory: NameDirectory, label: str = "names"):
        self.directory = directory
        self.label = label

    def list(self, partial: str) -> List[str]:
        try:
            names = self.directory.lookup(partial)
        except Exception as e:
            logger.debug(
                f"Lookup of {self.label} failed, offering no candidates: {e}", exc_info=True
            )
            return []

        if not names:
            return []
        return [n for n in names if n.startswith(partial)]
