"""Abstract base class for remote blocklist sources."""

from abc import ABC, abstractmethod


class BaseBlocklistResolver(ABC):
    """Abstract base class for disposable-domain list sources."""

    source_name: str = "unknown"

    @abstractmethod
    async def fetch(self) -> frozenset[str] | None:
        """
        Fetch the expanded disposable-domain list.

        Returns:
            Lowercase domains, or None when the list is unavailable.
            Implementations must not raise.
        """
        pass
