"""
Models for the outcome of a ticket lookup.
"""

from typing import Literal, Union

from pydantic import BaseModel


class TicketValid(BaseModel):
    """The tracker answered with a 2xx status."""
    kind: Literal["valid"] = "valid"

    model_config = {
        "frozen": True
    }

    @property
    def is_valid(self) -> bool:
        return True


class TicketInvalid(BaseModel):
    """The tracker answered with a non-2xx status."""
    kind: Literal["invalid"] = "invalid"
    status_code: int

    model_config = {
        "frozen": True
    }

    @property
    def is_valid(self) -> bool:
        return False


class TicketUnreachable(BaseModel):
    """The request failed before any HTTP status was received."""
    kind: Literal["unreachable"] = "unreachable"
    error_detail: str

    model_config = {
        "frozen": True
    }

    @property
    def is_valid(self) -> bool:
        return False


VerificationResult = Union[TicketValid, TicketInvalid, TicketUnreachable]
