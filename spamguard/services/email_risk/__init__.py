"""Email risk scoring with pluggable disposable-domain sources."""

from spamguard.config import get_settings

from .base import BaseBlocklistResolver
from .blocklist import PRIORITY_DISPOSABLE_DOMAINS, is_priority_disposable, parse_blocklist
from .cached import CachedBlocklistResolver
from .metrics import digit_ratio, entropy, vowel_ratio
from .models import EmailAddress, LexicalMetrics, RecommendedAction, Verdict
from .null import NullBlocklistResolver
from .remote import RemoteBlocklistResolver
from .scorer import RiskScorer

__all__ = [
    "PRIORITY_DISPOSABLE_DOMAINS",
    "BaseBlocklistResolver",
    "CachedBlocklistResolver",
    "EmailAddress",
    "LexicalMetrics",
    "NullBlocklistResolver",
    "RecommendedAction",
    "RemoteBlocklistResolver",
    "RiskScorer",
    "Verdict",
    "digit_ratio",
    "entropy",
    "get_blocklist_resolver",
    "get_risk_scorer",
    "is_priority_disposable",
    "parse_blocklist",
    "reset_email_risk",
    "vowel_ratio",
]

_resolver_instance: BaseBlocklistResolver | None = None
_scorer_instance: RiskScorer | None = None


def get_blocklist_resolver() -> BaseBlocklistResolver:
    """
    Get the configured blocklist resolver instance.

    Falls back to NullBlocklistResolver if remote lookups are disabled.
    Wraps the remote resolver in a cache only when a TTL is configured.
    """
    global _resolver_instance
    if _resolver_instance is not None:
        return _resolver_instance

    settings = get_settings()

    if not settings.remote_blocklist_enabled:
        _resolver_instance = NullBlocklistResolver()
    else:
        remote = RemoteBlocklistResolver(
            url=settings.remote_blocklist_url,
            timeout_seconds=settings.remote_blocklist_timeout,
        )
        if settings.remote_blocklist_cache_ttl_seconds > 0:
            _resolver_instance = CachedBlocklistResolver(
                remote,
                cache_ttl_seconds=settings.remote_blocklist_cache_ttl_seconds,
            )
        else:
            _resolver_instance = remote

    return _resolver_instance


def get_risk_scorer() -> RiskScorer:
    """Get the shared scorer, built on the configured resolver."""
    global _scorer_instance
    if _scorer_instance is None:
        _scorer_instance = RiskScorer(get_blocklist_resolver())
    return _scorer_instance


def reset_email_risk() -> None:
    """Reset the resolver and scorer instances. Useful for testing."""
    global _resolver_instance, _scorer_instance
    _resolver_instance = None
    _scorer_instance = None
