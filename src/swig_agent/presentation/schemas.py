"""
Runtime-facing message and reply schemas.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

TERMINAL_ACTION = "REPLY"


class Message(BaseModel):
    """Inbound message handed over by the agent runtime."""

    text: Optional[str] = Field(default="", description="Raw user text")
    source: Optional[str] = Field(default=None, description="Conversation source tag")


class ResponseContent(BaseModel):
    """Reply payload: summary text, short thought, actions, source."""

    text: str = Field(..., description="Human-readable summary")
    thought: str = Field(..., description="Short machine-usable explanation")
    actions: List[str] = Field(..., description="[operation name, 'REPLY']")
    source: Optional[str] = Field(default=None, description="Echoed message source")


class ResponseSlot(BaseModel):
    """Pre-allocated response whose content the formatter overwrites."""

    content: Optional[ResponseContent] = None
