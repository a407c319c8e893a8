"""Command line client for fetching Gemini URLs."""

import logging
import sys
import uuid

import click
import structlog
from pydantic import ValidationError

from gemfetch import __version__
from gemfetch.fetch.client import GeminiFetcher
from gemfetch.fetch.config import FetchConfig, TransportConfig
from gemfetch.fetch.models import FetchError
from gemfetch.fetch.transport import TlsTransport
from gemfetch.observability.logging import (
    bind_run_context,
    clear_run_context,
    configure_logging,
)
from gemfetch.protocol.status import StatusCategory
from gemfetch.settings import get_settings


logger = structlog.get_logger()


def _describe_settings_error(error: ValidationError) -> str:
    """Summarize invalid GEMFETCH_* values on a single line."""
    problems = []
    for err in error.errors():
        name = "_".join(str(part) for part in err["loc"]).upper()
        problems.append(f"GEMFETCH_{name}: {err['msg']}")
    return "invalid settings (" + "; ".join(problems) + ")"


@click.command()
@click.version_option(version=__version__)
@click.argument("url")
@click.option(
    "--max-redirects",
    type=click.IntRange(0, 100),
    default=None,
    help="Maximum number of redirects to follow (default: 10).",
)
@click.option(
    "--validate-certificate/--no-validate-certificate",
    default=None,
    help="Validate the server certificate (default: off, Gemini uses TOFU).",
)
@click.option(
    "--timeout",
    "timeout_seconds",
    type=click.FloatRange(1.0, 300.0),
    default=None,
    help="Connect and read timeout in seconds (default: 30).",
)
@click.option(
    "--json-logs/--no-json-logs",
    default=False,
    help="Use JSON format for logs (default: false).",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose logging.",
)
def cli(  # noqa: PLR0913
    url: str,
    max_redirects: int | None,
    validate_certificate: bool | None,
    timeout_seconds: float | None,
    json_logs: bool,
    verbose: bool,
) -> None:
    """Fetch URL and print the response body.

    Non-success responses are reported as "<status> - <meta>" on stderr
    with exit code 1. Unset options fall back to GEMFETCH_* environment
    variables.
    """
    try:
        settings = get_settings()
    except ValidationError as e:
        click.echo(f"Error: {_describe_settings_error(e)}", err=True)
        sys.exit(1)

    configure_logging(
        level=logging.DEBUG if verbose else logging.WARNING,
        json_format=json_logs,
    )
    run_id = uuid.uuid4().hex[:12]
    bind_run_context(run_id)

    transport_config = TransportConfig(
        verify_certificates=(
            settings.validate_certificate
            if validate_certificate is None
            else validate_certificate
        ),
        timeout_seconds=timeout_seconds or settings.timeout_seconds,
    )
    fetch_config = FetchConfig(
        max_redirects=(
            settings.max_redirects if max_redirects is None else max_redirects
        ),
    )

    log = logger.bind(component="cli", command="fetch")
    log.debug(
        "fetch_started",
        max_redirects=fetch_config.max_redirects,
        verify_certificates=transport_config.verify_certificates,
        timeout_seconds=transport_config.timeout_seconds,
    )

    fetcher = GeminiFetcher(TlsTransport(transport_config), fetch_config)
    try:
        response = fetcher.fetch(url)
    except FetchError as e:
        click.echo(f"Error: {e.phase.value.lower()} failed: {e.message}", err=True)
        sys.exit(1)
    finally:
        clear_run_context()

    if response.category is StatusCategory.SUCCESS:
        click.echo(response.body)
        return

    click.echo(f"{response.header.status} - {response.header.meta}", err=True)
    sys.exit(1)


if __name__ == "__main__":
    cli()
