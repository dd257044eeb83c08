"""
Memoization of sizing results.

Results are keyed by ``(profile.fingerprint, config)``; both are immutable
and hashable, and ``simulate`` is deterministic, so a cached result is
always identical to a fresh one.
"""

import logging
import threading
from collections import OrderedDict
from typing import Callable, Optional, Tuple

from h2_sizing.config.dispatch_config import DispatchConfig
from h2_sizing.data.profile import HourlyProfile
from h2_sizing.economics.models import SizingResult

logger = logging.getLogger(__name__)

CacheKey = Tuple[str, DispatchConfig]


class SimulationCache:
    """
    Thread-safe LRU cache of SizingResults.

    Example:
        >>> cache = SimulationCache(max_size=256)
        >>> result = cache.get_or_compute(profile, config, simulate)
    """

    def __init__(self, max_size: int = 128):
        self._cache: 'OrderedDict[CacheKey, SizingResult]' = OrderedDict()
        self._max_size = max_size
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    @staticmethod
    def key(profile: HourlyProfile, config: DispatchConfig) -> CacheKey:
        return (profile.fingerprint, config)

    def get(self, profile: HourlyProfile, config: DispatchConfig) -> Optional[SizingResult]:
        key = self.key(profile, config)
        with self._lock:
            result = self._cache.get(key)
            if result is None:
                self.misses += 1
                return None
            self._cache.move_to_end(key)
            self.hits += 1
            return result

    def put(self, profile: HourlyProfile, config: DispatchConfig, result: SizingResult) -> None:
        key = self.key(profile, config)
        with self._lock:
            self._cache[key] = result
            self._cache.move_to_end(key)
            while len(self._cache) > self._max_size:
                self._cache.popitem(last=False)

    def get_or_compute(
        self,
        profile: HourlyProfile,
        config: DispatchConfig,
        compute: Callable[[HourlyProfile, DispatchConfig], SizingResult],
    ) -> SizingResult:
        """Return the cached result or compute, store and return it."""
        result = self.get(profile, config)
        if result is not None:
            return result
        # Computed outside the lock; concurrent misses on one key just repeat work
        result = compute(profile, config)
        self.put(profile, config, result)
        return result

    def clear(self) -> None:
        with self._lock:
            self._cache.clear()
            self.hits = 0
            self.misses = 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._cache)
