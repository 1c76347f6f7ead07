"""
Domain exceptions.
"""

from swig_agent.domain.exceptions.authorization import (
    AddressNotAuthorityError,
    AuthorizationError,
    LastAuthorityError,
    NotAnAuthorityError,
    RoleNotFoundError,
    SelfRemovalError,
)
from swig_agent.domain.exceptions.base import (
    ConfigurationError,
    FeatureDisabledError,
    InvalidMintError,
    ParseError,
    SwigAgentError,
    WalletNotFoundError,
)
from swig_agent.domain.exceptions.chain import (
    ChainError,
    ConfirmationError,
    RPCError,
    SubmissionError,
)

__all__ = [
    "SwigAgentError",
    "ConfigurationError",
    "ParseError",
    "FeatureDisabledError",
    "WalletNotFoundError",
    "InvalidMintError",
    "AuthorizationError",
    "NotAnAuthorityError",
    "RoleNotFoundError",
    "AddressNotAuthorityError",
    "LastAuthorityError",
    "SelfRemovalError",
    "ChainError",
    "RPCError",
    "SubmissionError",
    "ConfirmationError",
]
