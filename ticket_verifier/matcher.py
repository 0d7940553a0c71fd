"""
Extraction of tracker ticket links from free text.
"""

import re
from typing import Optional, Pattern

from .models import TicketReference


def build_pattern(base_url: str) -> Pattern[str]:
    """Compile the ticket link pattern for a tracker base URL, matched literally."""
    escaped_url = re.escape(base_url)
    return re.compile(rf"{escaped_url}/projects/([0-9]+)/tickets/([0-9]+)", re.IGNORECASE)


def _match(pattern: Pattern[str], text: Optional[str]) -> Optional[TicketReference]:
    if not text:
        return None

    match = pattern.search(text)
    if not match or match.group(1) is None or match.group(2) is None:
        return None

    return TicketReference(project_id=match.group(1), ticket_id=match.group(2))


def extract(base_url: str, text: Optional[str]) -> Optional[TicketReference]:
    """
    Find the first ticket link in text.

    Args:
        base_url: Tracker base URL that links start with
        text: Text to search, typically a pull request body

    Returns:
        TicketReference with the digits exactly as written, or None if no link is present
    """
    return _match(build_pattern(base_url), text)


class TicketMatcher:
    """Ticket link matcher bound to a single tracker base URL."""

    def __init__(self, base_url: str):
        self.base_url = base_url
        self.pattern = build_pattern(base_url)

    def extract_ticket_info(self, text: Optional[str]) -> Optional[TicketReference]:
        return _match(self.pattern, text)
