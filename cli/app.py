from __future__ import annotations

import logging
from typing import Optional

import typer
import uvicorn

from cli.config import load_listen_address
from logging_config import configure_logging
from services.catalog import build_default_catalog
from services.collector import render_scrape
from services.device_client import DeviceClient, InvalidHostError, validate_host

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Prometheus exporter for Awair air-quality monitors.",
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Logging level (defaults to LOG_LEVEL env or INFO).",
    ),
) -> None:
    """Entry point for the CLI."""
    configure_logging(log_level.upper() if log_level else None)


@app.command("serve")
def serve_command(
    listen_address: Optional[str] = typer.Option(
        None,
        "--listen-address",
        help="The address to listen on for HTTP requests (defaults to AWAIR_LISTEN_ADDRESS env or :8123).",
    ),
) -> None:
    """Serve /metrics and /awair until terminated."""
    try:
        address = load_listen_address(listen_address)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--listen-address") from exc

    logger.info(
        "Listening for http connections on %s",
        address,
        extra={"listen_address": str(address)},
    )
    # uvicorn logs the cause and exits non-zero when the socket cannot be bound.
    uvicorn.run("app.main:app", host=address.host, port=address.port, log_config=None)


@app.command("probe")
def probe_command(
    host: str = typer.Argument(..., help="Hostname or IP address of the device."),
) -> None:
    """Scrape a device once and print the exposition text."""
    try:
        validate_host(host)
    except InvalidHostError as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    client = DeviceClient()
    try:
        body, sample = render_scrape(client=client, catalog=build_default_catalog(), host=host)
    finally:
        client.close()
    typer.echo(body.decode("utf-8"), nl=False)

    if sample is None or sample.errors:
        typer.secho(f"Scrape of {host} failed; see log for details.", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
