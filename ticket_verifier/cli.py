"""
Command-line interface for the PR ticket verifier.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler

from . import __version__
from .action import TicketVerificationAction
from .config import load_settings
from .exceptions import ConfigurationError
from .models import PullRequestContext
from .status import RunStatus, WorkflowCommandFormatter

# Create console for output
console = Console()

logger = logging.getLogger("ticket_verifier")


def configure_logging(debug: bool = False) -> None:
    """
    Send log output to the Actions runner as workflow commands, or to the
    console through rich when running anywhere else.
    """
    if os.environ.get("GITHUB_ACTIONS") == "true":
        handler: logging.Handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(WorkflowCommandFormatter("%(message)s"))
        # The runner hides ::debug:: lines unless step debugging is enabled
        log_level = logging.DEBUG
    else:
        handler = RichHandler(console=console, show_path=False, markup=False)
        handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
        log_level = logging.DEBUG if debug else logging.INFO

    logger.handlers = [handler]
    logger.setLevel(log_level)


@click.group()
@click.version_option(version=__version__)
def cli():
    """PR Ticket Verifier - require a valid tracker ticket link in pull request descriptions."""
    pass


@cli.command()
@click.option(
    "--base-url",
    envvar="BASE_URL",
    help="Tracker base URL that ticket links start with (can also be set via BASE_URL env var)",
)
@click.option(
    "--api-url",
    envvar="API_URL",
    help="Tracker API root; '/api' is appended (can also be set via API_URL env var)",
)
@click.option(
    "--api-key",
    envvar="API_KEY",
    help="Tracker API key sent as X-API-KEY (can also be set via API_KEY env var)",
)
@click.option(
    "--message",
    envvar="INPUT_MESSAGE",
    help="Comment posted on the pull request when verification fails",
)
@click.option(
    "--github-token",
    envvar="GITHUB_TOKEN",
    help="GitHub token used to post comments (can also be set via GITHUB_TOKEN env var)",
)
@click.option(
    "--event-path",
    envvar="GITHUB_EVENT_PATH",
    type=click.Path(path_type=Path),
    help="Path to the GitHub event payload (defaults to GITHUB_EVENT_PATH)",
)
@click.option(
    "--repository",
    envvar="GITHUB_REPOSITORY",
    help="Repository in owner/repo form (defaults to GITHUB_REPOSITORY)",
)
@click.option(
    "--debug/--no-debug",
    envvar="RUNNER_DEBUG",
    default=False,
    help="Enable debug mode for more verbose output",
)
def verify(
    base_url: Optional[str],
    api_url: Optional[str],
    api_key: Optional[str],
    message: Optional[str],
    github_token: Optional[str],
    event_path: Optional[Path],
    repository: Optional[str],
    debug: bool,
):
    """Check the pull request description for a valid ticket link."""
    configure_logging(debug)
    status = RunStatus()

    try:
        settings = load_settings(
            base_url=base_url,
            api_url=api_url,
            api_key=api_key,
            input_message=message,
            github_token=github_token,
        )
        context = PullRequestContext.from_event(event_path, repository)
    except ConfigurationError as e:
        status.set_failed(str(e))
        sys.exit(status.exit_code)

    logger.debug(f"Pull request: {context.owner}/{context.repo}#{context.number}")

    action = TicketVerificationAction.from_settings(settings, context, status)
    try:
        action.run()
    finally:
        action.close()

    sys.exit(status.exit_code)


def main():
    """Entry point for the CLI."""
    try:
        cli()
    except Exception as e:
        logger.exception("Unhandled exception")
        console.print(f"[red]Unhandled error: {str(e)}[/red]")
        sys.exit(1)
