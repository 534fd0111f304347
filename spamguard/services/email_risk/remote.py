"""Remote disposable-domain blocklist."""

import aiohttp

from spamguard.core.logging import get_logger

from .base import BaseBlocklistResolver
from .blocklist import parse_blocklist

logger = get_logger(__name__)


class RemoteBlocklistResolver(BaseBlocklistResolver):
    """
    Fetches the community-maintained disposable-domain list over HTTP.

    One attempt per call, bounded by the timeout. Every failure degrades to
    None so callers treat it as an empty list.
    """

    source_name = "remote"

    def __init__(self, url: str, timeout_seconds: float = 5.0) -> None:
        """
        Initialize remote resolver.

        Args:
            url: Plaintext newline-delimited domain list
            timeout_seconds: Upper bound on the whole request
        """
        self.url = url
        self.timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    async def fetch(self) -> frozenset[str] | None:
        """Fetch and parse the remote list, or None on any failure."""
        try:
            async with aiohttp.ClientSession(timeout=self.timeout) as session:
                async with session.get(
                    self.url,
                    headers={"User-Agent": "SpamGuard/1.0"},
                ) as response:
                    if response.status != 200:
                        logger.bind(url=self.url, status=response.status).warning(
                            "remote_blocklist_http_error"
                        )
                        return None

                    text = await response.text()

            domains = parse_blocklist(text)
            logger.bind(count=len(domains)).debug("remote_blocklist_fetched")
            return domains

        except TimeoutError:
            logger.bind(url=self.url).warning("remote_blocklist_timeout")
            return None
        except aiohttp.ClientError as e:
            logger.bind(url=self.url, error=str(e)).warning("remote_blocklist_client_error")
            return None
        except Exception as e:
            logger.bind(url=self.url, error=str(e)).error("remote_blocklist_unexpected_error")
            return None
