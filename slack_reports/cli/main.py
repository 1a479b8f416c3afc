"""
Slack Reports CLI

Command-line interface for sending notifications and previewing report templates.

Usage:
    slack-reports [OPTIONS] COMMAND [ARGS]...

Commands:
    send      Send a simple text message
    report    Build a sample report and send or preview it
    list      List available report types
"""

import logging
import sys

import click
from dotenv import load_dotenv

from .commands import list_reports, report, send


def setup_logging(verbose: bool, quiet: bool = False):
    """Configure logging to output to stdout."""
    if quiet:
        level = logging.WARNING
    else:
        level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(message)s',  # Simple format for CLI
        handlers=[logging.StreamHandler(sys.stdout)]
    )


@click.group()
@click.option('-v', '--verbose', is_flag=True, help='Verbose output (show DEBUG logs)')
@click.option('-q', '--quiet', is_flag=True, help='Quiet mode (only show warnings/errors)')
@click.pass_context
def cli(ctx, verbose, quiet):
    """Slack Reports - Block Kit notifications for operational data."""
    load_dotenv()
    setup_logging(verbose, quiet)

    ctx.ensure_object(dict)
    ctx.obj['verbose'] = verbose


cli.add_command(send)
cli.add_command(report)
cli.add_command(list_reports)


if __name__ == '__main__':
    cli()
