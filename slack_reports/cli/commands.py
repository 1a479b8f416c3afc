"""CLI commands for sending and previewing Slack reports."""

import click

from ..api import SlackClient
from ..config import SlackConfig
from ..exceptions import DeliveryError, InvalidConfigError, MessageBuildError
from ..monitoring import capture_exception, init_sentry
from ..templates import REPORT_TYPES
from .samples import SAMPLES


def _load_client() -> SlackClient:
    """Build a client from the environment, exiting on bad configuration."""
    try:
        config = SlackConfig.from_env()
    except InvalidConfigError as e:
        click.echo(click.style(f"Configuration error: {e}", fg="red"))
        click.echo("Set SLACK_BOT_TOKEN and SLACK_CHANNEL_ID (or add them to .env).")
        raise SystemExit(1)

    init_sentry(config)
    return SlackClient(config)


def _deliver(client: SlackClient, send, label: str) -> None:
    try:
        response = send()
    except DeliveryError as e:
        capture_exception(e, tags={"command": label})
        click.echo(click.style(f"Send failed: {e}", fg="red"))
        if e.__cause__ is not None:
            click.echo(f"  caused by: {e.__cause__}")
        raise SystemExit(1)
    except MessageBuildError as e:
        click.echo(click.style(f"Could not build {label}: {e}", fg="red"))
        raise SystemExit(1)

    click.echo(click.style(
        f"Sent {label} to {response.channel or client.config.default_channel_id} (ts={response.ts})",
        fg="green",
    ))


@click.command()
@click.argument("text")
@click.option("--channel", default=None, help="Target channel ID (default: SLACK_CHANNEL_ID)")
def send(text, channel):
    """Send a simple text message."""
    client = _load_client()
    _deliver(client, lambda: client.send_simple_message(text, channel), "message")


@click.command()
@click.argument("name", type=click.Choice(sorted(SAMPLES)))
@click.option("--channel", default=None, help="Target channel ID (default: SLACK_CHANNEL_ID)")
@click.option("--dry-run", is_flag=True, help="Print the JSON payload instead of sending")
def report(name, channel, dry_run):
    """Build a sample report and send it (or print it with --dry-run)."""
    try:
        message = SAMPLES[name]()
    except MessageBuildError as e:
        click.echo(click.style(f"Could not build {name} report: {e}", fg="red"))
        raise SystemExit(1)

    if dry_run:
        preview = message.with_channel(channel) if channel else message
        click.echo(preview.to_json(indent=2))
        return

    client = _load_client()
    _deliver(client, lambda: client.send_message(message, channel), f"{name} report")


@click.command(name="list")
def list_reports():
    """List available report types."""
    click.echo(f"{'Report type':<25} Description")
    click.echo("-" * 80)
    for name, description in REPORT_TYPES.items():
        click.echo(f"{name:<25} {description}")
