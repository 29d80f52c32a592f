"""Single-flight memoizing cache for asynchronous lookups."""

from __future__ import annotations

import asyncio
import logging
from collections import OrderedDict
from dataclasses import dataclass
from typing import Awaitable, Callable, Dict, Generic, Hashable, Optional, TypeVar

LOGGER = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


@dataclass(slots=True)
class CacheStats:
    hits: int = 0
    misses: int = 0
    coalesced: int = 0
    failures: int = 0


class SingleFlightCache(Generic[K, V]):
    """Memoize ``loader`` per key, sharing in-flight loads between callers.

    Each key moves from absent to in-flight on the first :meth:`get` and to
    settled once the loader returns. Any value the loader returns, ``None``
    included, is kept. When the loader raises, the key goes back to absent so
    a later call can retry, and the error reaches every caller waiting on it.

    ``max_entries`` bounds the number of settled keys, dropping the least
    recently used first. ``None`` keeps everything for the lifetime of the
    cache. In-flight keys are never evicted.
    """

    def __init__(
        self,
        loader: Callable[[K], Awaitable[V]],
        *,
        max_entries: Optional[int] = None,
    ) -> None:
        if max_entries is not None and max_entries < 1:
            raise ValueError("max_entries must be >= 1")
        self._loader = loader
        self.max_entries = max_entries
        self._pending: Dict[K, asyncio.Task[V]] = {}
        self._settled: "OrderedDict[K, V]" = OrderedDict()
        self.stats = CacheStats()

    def __contains__(self, key: object) -> bool:
        return key in self._settled or key in self._pending

    def __len__(self) -> int:
        return len(self._settled) + len(self._pending)

    def is_pending(self, key: K) -> bool:
        return key in self._pending

    async def get(self, key: K) -> V:
        # No await between the lookups and the install below, so the
        # check-then-install is atomic on the event loop.
        if key in self._settled:
            self.stats.hits += 1
            self._settled.move_to_end(key)
            return self._settled[key]

        task = self._pending.get(key)
        if task is None:
            self.stats.misses += 1
            task = asyncio.ensure_future(self._run(key))
            task.add_done_callback(_consume_exception)
            self._pending[key] = task
        else:
            self.stats.coalesced += 1
            LOGGER.debug("Joining in-flight load for %r", key)

        # Callers that get cancelled must not cancel the shared load.
        return await asyncio.shield(task)

    async def _run(self, key: K) -> V:
        try:
            value = await self._loader(key)
        except BaseException:
            self.stats.failures += 1
            self._pending.pop(key, None)
            LOGGER.debug("Load for %r failed, key is retryable", key)
            raise

        self._pending.pop(key, None)
        self._settled[key] = value
        self._evict()
        return value

    def _evict(self) -> None:
        if self.max_entries is None:
            return
        while len(self._settled) > self.max_entries:
            key, _ = self._settled.popitem(last=False)
            LOGGER.debug("Evicted %r from cache", key)

    def forget(self, key: K) -> bool:
        """Drop a settled entry. In-flight loads are left alone."""
        return self._settled.pop(key, _MISSING) is not _MISSING

    def clear(self) -> None:
        """Drop every settled entry."""
        self._settled.clear()


_MISSING = object()


def _consume_exception(task: asyncio.Future) -> None:
    # Every waiter may have been cancelled; mark the error as retrieved.
    if not task.cancelled():
        task.exception()
