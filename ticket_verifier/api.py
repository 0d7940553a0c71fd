"""
Tracker API client for checking that a ticket exists.
"""

import logging
from typing import Dict, Optional

import requests

from . import __version__
from .models import TicketInvalid, TicketUnreachable, TicketValid, VerificationResult

logger = logging.getLogger("ticket_verifier")


class TrackerClient:
    """Client for the tracker's ticket lookup endpoint."""

    def __init__(self, api_base: str, api_key: Optional[str] = None):
        """
        Initialize the tracker client.

        Args:
            api_base: Tracker API root, e.g. https://tracker.example.com/api
            api_key: Optional key sent in the X-API-KEY header
        """
        self.api_base = api_base.rstrip("/")
        self.api_key = api_key

        self.session = requests.Session()
        self.session.headers.update({
            "User-Agent": f"pr-ticket-verifier/{__version__}"
        })

    def _headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["X-API-KEY"] = self.api_key
        return headers

    def ticket_url(self, project_id: str, ticket_id: str) -> str:
        return f"{self.api_base}/projects/{project_id}/tickets/{ticket_id}"

    def verify(self, project_id: str, ticket_id: str) -> VerificationResult:
        """
        Look up a ticket and classify the outcome.

        Any 2xx response means the ticket exists; any other status means it does
        not. Transport failures are returned as TicketUnreachable rather than raised.

        Args:
            project_id: Project identifier, exactly as found in the link
            ticket_id: Ticket identifier, exactly as found in the link

        Returns:
            TicketValid, TicketInvalid or TicketUnreachable
        """
        url = self.ticket_url(project_id, ticket_id)
        logger.debug(f"Fetching ticket from: {url}")

        try:
            response = self.session.get(url, headers=self._headers())
            logger.debug(f"Response: {response.ok} - {response.status_code}")
            logger.debug(f"Response body: {response.text}")
        except (requests.exceptions.RequestException, ValueError) as e:
            # ValueError includes UnicodeError from headers http.client cannot encode
            detail = str(e) or type(e).__name__
            logger.debug(f"API error: {detail}")
            return TicketUnreachable(error_detail=detail)

        if 200 <= response.status_code < 300:
            return TicketValid()
        return TicketInvalid(status_code=response.status_code)

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.session.close()
