"""
Models for ticket references, verification outcomes and pull request context.
"""

from .ticket import TicketReference
from .verification import (
    TicketInvalid,
    TicketUnreachable,
    TicketValid,
    VerificationResult,
)
from .context import PullRequestContext

__all__ = [
    'TicketReference',
    'TicketValid',
    'TicketInvalid',
    'TicketUnreachable',
    'VerificationResult',
    'PullRequestContext'
]
