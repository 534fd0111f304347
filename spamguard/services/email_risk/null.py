"""Null resolver - used when remote blocklist lookups are disabled."""

from .base import BaseBlocklistResolver


class NullBlocklistResolver(BaseBlocklistResolver):
    """
    Resolver that never has a list.

    Scoring proceeds exactly as if the remote list were unavailable.
    """

    source_name = "null"

    async def fetch(self) -> frozenset[str] | None:
        """Always report the list as unavailable."""
        return None
