"""
SpamGuard CLI - score addresses and run the API from the command line.

Usage:
    spamguard --help                  Show all commands
    spamguard check user@example.com  Score one address
    spamguard check ... --offline     Score without the remote blocklist
    spamguard blocklist               Check the remote blocklist is reachable
    spamguard serve                   Start the API server
"""

import asyncio
import json

import typer

app = typer.Typer(
    name="spamguard",
    help="SpamGuard CLI - disposable email detection",
    no_args_is_help=True,
)


def _print_error(message: str) -> None:
    """Print an error message to stderr."""
    typer.echo(f"❌ {message}", err=True)


@app.command()
def check(
    email: str = typer.Argument(..., help="Email address to score"),
    offline: bool = typer.Option(False, "--offline", help="Skip the remote blocklist"),
):
    """Score an email address and print the JSON result."""
    from spamguard.services.email_risk import (
        NullBlocklistResolver,
        RecommendedAction,
        RiskScorer,
        get_blocklist_resolver,
    )

    resolver = NullBlocklistResolver() if offline else get_blocklist_resolver()
    scorer = RiskScorer(resolver)

    verdict = asyncio.run(scorer.score(email.lower().strip()))
    typer.echo(json.dumps(verdict.to_response().model_dump(), indent=2))

    if verdict.recommended_action == RecommendedAction.BLOCK:
        raise typer.Exit(1)


@app.command()
def blocklist():
    """Fetch the remote blocklist once and report its size."""
    from spamguard.config import get_settings
    from spamguard.services.email_risk import RemoteBlocklistResolver

    settings = get_settings()
    resolver = RemoteBlocklistResolver(
        url=settings.remote_blocklist_url,
        timeout_seconds=settings.remote_blocklist_timeout,
    )

    domains = asyncio.run(resolver.fetch())
    if domains is None:
        _print_error(f"Remote blocklist unavailable: {settings.remote_blocklist_url}")
        raise typer.Exit(1)

    typer.echo(f"✅ {len(domains)} disposable domains available")


@app.command()
def serve(
    reload: bool = typer.Option(False, "--reload", "-r", help="Enable hot reload"),
    port: int = typer.Option(8000, "--port", "-p", help="Port to run on"),
):
    """Start the API server."""
    import subprocess

    cmd = ["uvicorn", "spamguard.main:app", "--host", "0.0.0.0", "--port", str(port)]
    if reload:
        cmd.append("--reload")

    subprocess.run(cmd, check=False)


if __name__ == "__main__":
    app()
