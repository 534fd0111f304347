"""Tests for the command line interface."""

import json
from unittest.mock import AsyncMock, patch

from typer.testing import CliRunner

from spamguard.cli import app

runner = CliRunner()


class TestCheckCommand:
    """Tests for `spamguard check`."""

    def test_clean_address(self):
        result = runner.invoke(app, ["check", "john@gmail.com", "--offline"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["recommended_action"] == "allow"
        assert data["details"]["flags"] == ["No suspicious patterns detected"]

    def test_normalizes_input(self):
        result = runner.invoke(app, ["check", "  John@Gmail.com ", "--offline"])

        assert json.loads(result.stdout)["email"] == "john@gmail.com"

    def test_blocked_address_exits_nonzero(self):
        result = runner.invoke(app, ["check", "temp@mailinator.com", "--offline"])

        assert result.exit_code == 1
        assert json.loads(result.stdout)["is_disposable"] is True


class TestBlocklistCommand:
    """Tests for `spamguard blocklist`."""

    def test_reports_domain_count(self):
        with patch(
            "spamguard.services.email_risk.RemoteBlocklistResolver.fetch",
            new_callable=AsyncMock,
            return_value=frozenset({"burnermail.io", "33mail.com"}),
        ):
            result = runner.invoke(app, ["blocklist"])

        assert result.exit_code == 0
        assert "2 disposable domains available" in result.stdout

    def test_unavailable_list_exits_nonzero(self):
        with patch(
            "spamguard.services.email_risk.RemoteBlocklistResolver.fetch",
            new_callable=AsyncMock,
            return_value=None,
        ):
            result = runner.invoke(app, ["blocklist"])

        assert result.exit_code == 1
