"""Cached blocklist resolver decorator."""

import asyncio
from datetime import UTC, datetime, timedelta

from .base import BaseBlocklistResolver


class CachedBlocklistResolver(BaseBlocklistResolver):
    """
    Decorator that keeps the last successfully fetched list for a TTL.

    Failed fetches are never cached, so the next call retries the source.
    Concurrent refreshes are serialized so only one request is in flight.
    """

    def __init__(
        self,
        resolver: BaseBlocklistResolver,
        cache_ttl_seconds: int = 3600,
    ) -> None:
        """
        Initialize cached resolver.

        Args:
            resolver: The underlying resolver to wrap
            cache_ttl_seconds: How long a fetched list stays fresh
        """
        self._resolver = resolver
        self._ttl = timedelta(seconds=cache_ttl_seconds)
        self._cached: tuple[frozenset[str], datetime] | None = None
        self._lock = asyncio.Lock()

    @property
    def source_name(self) -> str:  # type: ignore[override]
        """Return combined source name."""
        return f"cached:{self._resolver.source_name}"

    async def fetch(self) -> frozenset[str] | None:
        """Return the cached list if fresh, otherwise refresh it."""
        cached = self._get_cached()
        if cached is not None:
            return cached

        async with self._lock:
            # Another caller may have refreshed while we waited
            cached = self._get_cached()
            if cached is not None:
                return cached

            domains = await self._resolver.fetch()
            if domains is not None:
                self._cached = (domains, datetime.now(UTC))
            return domains

    def _get_cached(self) -> frozenset[str] | None:
        """Get cached list if not expired."""
        if self._cached:
            domains, cached_at = self._cached
            if datetime.now(UTC) - cached_at < self._ttl:
                return domains
            self._cached = None
        return None

    def clear_cache(self) -> None:
        """Drop the cached list."""
        self._cached = None

    def is_cached(self) -> bool:
        """Whether a fresh list is currently held."""
        return self._get_cached() is not None
