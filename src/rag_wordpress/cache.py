"""In-memory response cache with a fixed time-to-live."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass

from rag_wordpress.types import Response

DEFAULT_TTL_SECONDS = 30 * 60


@dataclass(frozen=True)
class CacheEntry:
    response: Response
    created_at: float


class QueryCache:
    """Responses keyed by the exact question string.

    Keys are not normalized: ``"fire "`` and ``"fire"`` are different entries.
    Stale entries are dropped on the lookup that finds them.
    """

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._ttl = ttl_seconds
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, query: str) -> Response | None:
        entry = self._entries.get(query)
        if entry is None:
            return None
        if self._clock() - entry.created_at >= self._ttl:
            del self._entries[query]
            return None
        return entry.response

    def put(self, query: str, response: Response) -> None:
        self._entries[query] = CacheEntry(response=response, created_at=self._clock())

    def clear(self) -> None:
        self._entries.clear()
