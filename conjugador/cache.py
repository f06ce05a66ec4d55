"""
Load-once caches for the static conjugation tables.

Each table is read from disk the first time it is needed and then shared
by every caller for the lifetime of the process. Tests (or a caller that
changed settings.DATA_DIR) can drop every table with Cache.reset_all().
"""

import logging
import threading
import time
from typing import Callable, Dict, Optional, TypeVar, Generic

T = TypeVar('T')

logger = logging.getLogger(__name__)


class Cache(Generic[T]):
    """
    A named, thread-safe holder for one lazily loaded table.
    """

    _registry: Dict[str, 'Cache'] = {}
    _registry_lock = threading.Lock()

    def __init__(self, name: str, loader: Callable[[], T]):
        """
        Register a new cache.

        Args:
            name: Unique cache identifier. A later cache with the same
                name replaces the earlier one in the registry.
            loader: Function that builds the table.
        """
        self.name = name
        self.loader = loader
        self._value: Optional[T] = None
        self._loaded = False
        self._lock = threading.Lock()

        with Cache._registry_lock:
            Cache._registry[name] = self

    @property
    def is_initialized(self) -> bool:
        return self._loaded

    def _load(self) -> T:
        t0 = time.perf_counter()
        self._value = self.loader()
        self._loaded = True
        logger.debug(f"Cache '{self.name}' loaded in {(time.perf_counter() - t0) * 1000:.1f}ms")
        return self._value

    def ensure(self) -> T:
        """
        Get the table, loading it on first use.
        """
        if self._loaded:
            return self._value

        with self._lock:
            if self._loaded:
                return self._value
            return self._load()

    def reset(self) -> T:
        """Reload the table now and return the new value."""
        with self._lock:
            return self._load()

    def invalidate(self):
        """Forget the table; the next ensure() reloads it."""
        with self._lock:
            self._loaded = False
            self._value = None

    @classmethod
    def get(cls, name: str) -> Optional['Cache']:
        return cls._registry.get(name)

    @classmethod
    def reset_all(cls):
        """Invalidate every registered cache."""
        with cls._registry_lock:
            caches = list(cls._registry.values())
        for cache in caches:
            cache.invalidate()


def defcache(name: str):
    """
    Turn a zero-argument loader into a named Cache.

    Usage:
        @defcache("endings")
        def endings_table():
            return load_endings()

        endings = endings_table.ensure()
    """
    def decorator(func: Callable[[], T]) -> Cache[T]:
        return Cache(name, func)
    return decorator
