"""
Model for a ticket reference extracted from a tracker link.
"""

from pydantic import BaseModel, Field


class TicketReference(BaseModel):
    """Project and ticket identifiers, kept as the digit strings found in the link."""
    project_id: str = Field(..., pattern=r"^[0-9]+$")
    ticket_id: str = Field(..., pattern=r"^[0-9]+$")

    model_config = {
        "frozen": True
    }
