"""
Exceptions raised by the ticket verifier.
"""


class TicketVerifierError(Exception):
    """Base exception for ticket verifier errors."""


class ConfigurationError(TicketVerifierError):
    """Required configuration is missing or invalid."""
