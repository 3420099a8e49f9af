"""Per-repository status cache with bounded staleness.

Entries are keyed by repository root and replaced wholesale on every miss.
Expiry is checked lazily on read; invalidation always drops every root.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from .git_status import StatusMap, try_fetch_git_status
from .repo import find_git_root

logger = logging.getLogger(__name__)

DEFAULT_CACHE_TIMEOUT_MS = 2000


def monotonic_ms() -> float:
    return time.monotonic() * 1000.0


@dataclass(frozen=True)
class CacheEntry:
    """Status snapshot for one root plus the clock reading it was taken at."""

    status: StatusMap
    fetched_at: float


class StatusCache:
    """Serve git status per root, refetching once an entry is ``ttl_ms`` old.

    ``fetch`` returns ``None`` for a failed git call; such results are handed
    back as an empty map without being stored, so the next read retries.
    """

    def __init__(
        self,
        ttl_ms: float = DEFAULT_CACHE_TIMEOUT_MS,
        clock: Callable[[], float] = monotonic_ms,
        fetch: Callable[[Path], StatusMap | None] = try_fetch_git_status,
    ) -> None:
        self.ttl_ms = ttl_ms
        self._clock = clock
        self._fetch = fetch
        self._entries: dict[Path, CacheEntry] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, root: object) -> bool:
        return root in self._entries

    def get_status(self, root: Path, now: float | None = None) -> StatusMap:
        if now is None:
            now = self._clock()

        cached = self._entries.get(root)
        if cached is not None and (now - cached.fetched_at) < self.ttl_ms:
            return cached.status

        status = self._fetch(root)
        if status is None:
            return {}
        self._entries[root] = CacheEntry(status=status, fetched_at=now)
        logger.debug("cached %d status entries for %s", len(status), root)
        return status

    def get_status_for_path(self, path: Path | str, now: float | None = None) -> StatusMap:
        """Status map for the repository enclosing ``path``; empty outside git."""
        root = find_git_root(path)
        if root is None:
            return {}
        return self.get_status(root, now)

    def invalidate_all(self) -> None:
        self._entries.clear()
