import threading
from collections import Counter
from typing import Callable, Dict, List

from dockhand.utils.logging import get_logger

logger = get_logger(__name__)

class StaticCache:
    """Write-once, in-memory cache for expensive candidate lists.

    Each key is computed at most once for the lifetime of the instance. The
    first caller for a key runs the factory while holding that key's lock;
    concurrent callers wait on the same lock and then read the stored list.
    Entries are never invalidated.
    """

    def __init__(self):
        self._values: Dict[str, List[str]] = {}
        self._locks: Dict[str, threading.Lock] = {}
        self._registry_lock = threading.Lock()
        self.computations: Counter = Counter()

    def _lock_for(self, key: str) -> threading.Lock:
        with self._registry_lock:
            lock = self._locks.get(key)
            if lock is None:
                lock = self._locks[key] = threading.Lock()
            return lock

    def get_or_compute(self, key: str, factory: Callable[[], List[str]]) -> List[str]:
        """Return the list stored under key, computing it on first use.

        If the factory raises, nothing is stored and the exception propagates;
        the next caller retries.
        """
        value = self._values.get(key)
        if value is not None:
            logger.debug(f"Cache hit: {key}")
            return value

        with self._lock_for(key):
            value = self._values.get(key)
            if value is not None:
                logger.debug(f"Cache hit after wait: {key}")
                return value

            logger.debug(f"Cache miss: {key} (computing)")
            self.computations[key] += 1
            value = list(factory())
            self._values[key] = value
            return value

    def __contains__(self, key: object) -> bool:
        return key in self._values
