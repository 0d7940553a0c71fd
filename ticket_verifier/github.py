"""
GitHub notifier for reporting verification failures on a pull request.
"""

import logging

import requests

from . import __version__
from .config import DEFAULT_GITHUB_API_URL
from .models import PullRequestContext
from .status import RunStatus

logger = logging.getLogger("ticket_verifier")


class GitHubNotifier:
    """Reports the run outcome to the CI run status and the pull request."""

    def __init__(
        self,
        token: str,
        context: PullRequestContext,
        status: RunStatus,
        api_url: str = DEFAULT_GITHUB_API_URL,
    ):
        """
        Initialize the notifier.

        Args:
            token: GitHub token with permission to comment on pull requests
            context: Pull request the run belongs to
            status: Run status that failures are recorded on
            api_url: GitHub REST API root
        """
        self.context = context
        self.status = status
        self.api_url = api_url.rstrip("/")

        self.session = requests.Session()
        self.session.headers.update({
            "Authorization": f"Bearer {token}",
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
            "User-Agent": f"pr-ticket-verifier/{__version__}"
        })

    def report_failure(self, message: str) -> None:
        """Mark the run as failed with the given message."""
        self.status.set_failed(message)

    def post_comment(self, body: str) -> bool:
        """
        Post a comment on the current pull request.

        Errors are logged and swallowed so they never replace the original failure.

        Returns:
            True if the comment was created
        """
        context = self.context
        if not (context.owner and context.repo and context.number):
            logger.error("Failed to add comment: no pull request in the event context")
            return False

        url = f"{self.api_url}/repos/{context.owner}/{context.repo}/issues/{context.number}/comments"
        try:
            response = self.session.post(url, json={"body": body})
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            logger.error(f"Failed to add comment: {e}")
            return False

        logger.debug("Comment added successfully")
        return True

    def close(self) -> None:
        self.session.close()
