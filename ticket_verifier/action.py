"""
Ticket verification flow: match the link, look up the ticket, report the outcome.
"""

import logging

from .api import TrackerClient
from .config import Settings
from .github import GitHubNotifier
from .matcher import TicketMatcher
from .models import PullRequestContext, TicketReference, TicketUnreachable
from .status import RunStatus

logger = logging.getLogger("ticket_verifier")

NO_TICKET_MESSAGE = "No ticket link found in the pull request description."


class TicketVerificationAction:
    """Runs one ticket verification for one pull request."""

    def __init__(
        self,
        settings: Settings,
        context: PullRequestContext,
        matcher: TicketMatcher,
        client: TrackerClient,
        notifier: GitHubNotifier,
        status: RunStatus,
    ):
        self.settings = settings
        self.context = context
        self.matcher = matcher
        self.client = client
        self.notifier = notifier
        self.status = status

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        context: PullRequestContext,
        status: RunStatus,
    ) -> "TicketVerificationAction":
        """Wire up the matcher, tracker client and notifier from settings."""
        return cls(
            settings=settings,
            context=context,
            matcher=TicketMatcher(settings.base_url),
            client=TrackerClient(settings.api_base, settings.api_key),
            notifier=GitHubNotifier(
                settings.github_token,
                context,
                status,
                api_url=settings.github_api_url,
            ),
            status=status,
        )

    def run(self) -> bool:
        """
        Verify the ticket linked from the pull request body.

        Never raises; unexpected errors fail the run.

        Returns:
            True if a valid ticket link was found
        """
        try:
            ticket = self.matcher.extract_ticket_info(self.context.body or "")
            if ticket is None:
                self.handle_missing_ticket(NO_TICKET_MESSAGE)
                return False

            return self.verify_ticket(ticket)
        except Exception as e:
            self.status.set_failed(f"Unhandled error: {e}")
            logger.debug("Unhandled error details", exc_info=True)
            return False

    def verify_ticket(self, ticket: TicketReference) -> bool:
        project_id, ticket_id = ticket.project_id, ticket.ticket_id
        self.status.info(f"Verifying ticket - Project ID: {project_id}, Ticket ID: {ticket_id}")

        result = self.client.verify(project_id, ticket_id)
        if result.is_valid:
            self.status.info("✅ Ticket verification successful!")
            return True

        if isinstance(result, TicketUnreachable):
            error_message = f"Transport error: {result.error_detail}"
        else:
            error_message = f"Invalid ticket: status {result.status_code}"

        self.handle_missing_ticket(
            f"{error_message} for Project ID: {project_id}, Ticket ID: {ticket_id}"
        )
        return False

    def handle_missing_ticket(self, reason: str) -> None:
        self.status.error(f"❌ Ticket verification failed: {reason}")
        self.notifier.report_failure(reason)
        self.notifier.post_comment(self.settings.failure_message)

    def close(self) -> None:
        self.client.close()
        self.notifier.close()
