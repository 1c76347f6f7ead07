"""
Blockchain-related exceptions.
"""

from typing import Optional

from swig_agent.domain.exceptions.base import SwigAgentError


class ChainError(SwigAgentError):
    """Base exception for RPC, submission and confirmation failures."""


class RPCError(ChainError):
    """Read-only RPC call failed."""


class SubmissionError(ChainError):
    """Transaction was rejected before it reached the network."""


class ConfirmationError(ChainError):
    """Transaction was sent but not observed as confirmed."""

    def __init__(
        self,
        message: str,
        signature: Optional[str] = None,
        details: Optional[dict] = None,
    ):
        details = dict(details or {})
        if signature:
            details["signature"] = signature
        super().__init__(message, details)
        self.signature = signature
