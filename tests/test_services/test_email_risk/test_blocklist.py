"""Tests for the curated blocklist and list parsing."""

import pytest

from spamguard.services.email_risk.blocklist import (
    PRIORITY_DISPOSABLE_DOMAINS,
    is_priority_disposable,
    parse_blocklist,
)


class TestPriorityBlocklist:
    """Tests for the curated disposable-domain set."""

    def test_priority_domains_loaded(self):
        """Should hold the twenty curated domains."""
        assert len(PRIORITY_DISPOSABLE_DOMAINS) == 20
        assert "mailinator.com" in PRIORITY_DISPOSABLE_DOMAINS
        assert "10minutemail.com" in PRIORITY_DISPOSABLE_DOMAINS
        assert "temp-mail.io" in PRIORITY_DISPOSABLE_DOMAINS

    def test_priority_domains_are_lowercase(self):
        assert all(domain == domain.lower() for domain in PRIORITY_DISPOSABLE_DOMAINS)

    def test_priority_domains_immutable(self):
        assert isinstance(PRIORITY_DISPOSABLE_DOMAINS, frozenset)

    @pytest.mark.parametrize("domain", ["mailinator.com", "MAILINATOR.COM", "YopMail.com"])
    def test_matches_case_insensitively(self, domain):
        assert is_priority_disposable(domain) is True

    @pytest.mark.parametrize("domain", ["gmail.com", "mailinator.co", "sub.mailinator.com", ""])
    def test_exact_match_only(self, domain):
        """Subdomains and look-alikes are not matched."""
        assert is_priority_disposable(domain) is False


class TestParseBlocklist:
    """Tests for newline-delimited list parsing."""

    def test_skips_comments_and_blank_lines(self):
        text = "# disposable domains\n\nburnermail.io\n  \n#33mail.com\n33mail.com\n"

        assert parse_blocklist(text) == frozenset({"burnermail.io", "33mail.com"})

    def test_trims_whitespace(self):
        assert parse_blocklist("  burnermail.io  \n\t33mail.com\t") == frozenset(
            {"burnermail.io", "33mail.com"}
        )

    def test_handles_crlf(self):
        assert parse_blocklist("burnermail.io\r\n33mail.com\r\n") == frozenset(
            {"burnermail.io", "33mail.com"}
        )

    def test_lowercases_domains(self):
        assert parse_blocklist("BurnerMail.IO") == frozenset({"burnermail.io"})

    def test_indented_comment_is_skipped(self):
        """Lines are trimmed before the comment check."""
        assert parse_blocklist("   # note") == frozenset()

    def test_empty_text(self):
        assert parse_blocklist("") == frozenset()
