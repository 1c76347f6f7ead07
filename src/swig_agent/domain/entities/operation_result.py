"""
OperationResult entity - successful outcome of one operation.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class OperationResult:
    """Summary text and thought for the reply, plus the signature if any."""

    summary: str
    thought: str
    signature: Optional[str] = None
    details: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        """Convert result to dictionary representation."""
        return {
            "summary": self.summary,
            "thought": self.thought,
            "signature": self.signature,
            "details": self.details,
        }
