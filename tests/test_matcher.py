"""
Tests for ticket link extraction.
"""

import pytest

from ticket_verifier.matcher import TicketMatcher, extract
from ticket_verifier.models import TicketReference

BASE_URL = "https://tracker.example.com"


def test_extract_ticket_link():
    """Test extracting project and ticket ids from a link."""
    ticket = extract(BASE_URL, "Fixes https://tracker.example.com/projects/42/tickets/7")
    assert ticket == TicketReference(project_id="42", ticket_id="7")


@pytest.mark.parametrize("text", ["", None, "see JIRA-123", "https://tracker.example.com/projects/42"])
def test_extract_without_link(text):
    """Test that text without a ticket link yields no reference."""
    assert extract(BASE_URL, text) is None


def test_extract_is_case_insensitive():
    """Test that scheme and host are matched case-insensitively."""
    ticket = extract(BASE_URL, "HTTPS://Tracker.Example.COM/Projects/1/Tickets/2")
    assert ticket.project_id == "1"
    assert ticket.ticket_id == "2"


def test_extract_preserves_leading_zeros():
    """Test that identifiers are kept as written."""
    ticket = extract(BASE_URL, "https://tracker.example.com/projects/0042/tickets/007")
    assert ticket.project_id == "0042"
    assert ticket.ticket_id == "007"


def test_base_url_dots_are_literal():
    """Test that dots in the base URL do not match arbitrary characters."""
    assert extract(BASE_URL, "https://trackerXexampleYcom/projects/1/tickets/2") is None


def test_base_url_with_metacharacters():
    """Test base URLs containing regex syntax match themselves literally."""
    base_url = "https://tracker.example.com/c++/(team)?"
    text = "Ref: https://tracker.example.com/c++/(team)?/projects/3/tickets/9 done"
    assert extract(base_url, text) == TicketReference(project_id="3", ticket_id="9")
    assert extract(base_url, "https://tracker.example.com/ccc/team/projects/3/tickets/9") is None


def test_extract_first_link_wins():
    """Test that the first link in the text is used."""
    text = (
        "https://tracker.example.com/projects/1/tickets/10 and "
        "https://tracker.example.com/projects/2/tickets/20"
    )
    assert extract(BASE_URL, text).ticket_id == "10"


def test_link_embedded_in_markdown():
    """Test extracting a link wrapped in markdown syntax."""
    text = "## Ticket\n[PROJ](https://tracker.example.com/projects/5/tickets/55)\n"
    assert extract(BASE_URL, text) == TicketReference(project_id="5", ticket_id="55")


def test_matcher_reuses_pattern():
    """Test the bound matcher gives the same results as extract."""
    matcher = TicketMatcher(BASE_URL)
    assert matcher.extract_ticket_info("https://tracker.example.com/projects/8/tickets/80").ticket_id == "80"
    assert matcher.extract_ticket_info("nothing here") is None


def test_non_ascii_digits_are_not_ids():
    """Test that only ASCII digits are accepted as identifiers."""
    assert extract(BASE_URL, "https://tracker.example.com/projects/٤٢/tickets/٧") is None
    assert extract(BASE_URL, "https://tracker.example.com/projects/４２/tickets/7") is None
