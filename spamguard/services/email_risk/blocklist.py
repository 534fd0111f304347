"""Curated disposable-domain blocklist and list parsing.

The curated set covers the most common throwaway providers so they can be
blocked without touching the network.
"""

# Priority blocklist, checked before any remote lookup
PRIORITY_DISPOSABLE_DOMAINS = frozenset(
    {
        "tempmail.com",
        "mailinator.com",
        "guerrillamail.com",
        "yopmail.com",
        "10minutemail.com",
        "throwaway.email",
        "maildrop.cc",
        "temp-mail.org",
        "getnada.com",
        "fakeinbox.com",
        "trashmail.com",
        "mohmal.com",
        "sharklasers.com",
        "guerrillamail.biz",
        "spam4.me",
        "mailnesia.com",
        "tempr.email",
        "dispostable.com",
        "getairmail.com",
        "temp-mail.io",
    }
)


def is_priority_disposable(domain: str) -> bool:
    """Check a domain against the curated blocklist (case-insensitive)."""
    return domain.lower() in PRIORITY_DISPOSABLE_DOMAINS


def parse_blocklist(text: str) -> frozenset[str]:
    """Parse a newline-delimited domain list, skipping blanks and # comments."""
    domains = set()
    for line in text.splitlines():
        line = line.strip()
        if line and not line.startswith("#"):
            domains.add(line.lower())
    return frozenset(domains)
