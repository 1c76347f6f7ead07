"""
Base exceptions for Swig agent operations.
"""

from typing import Optional


class SwigAgentError(Exception):
    """Base exception for all Swig agent errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ConfigurationError(SwigAgentError):
    """Signing key or other required setting is absent or unparseable."""


class ParseError(SwigAgentError):
    """A required entity is missing from, or malformed in, the message."""


class FeatureDisabledError(SwigAgentError):
    """Operation category is turned off in configuration."""

    def __init__(self, message: str, thought: str, setting: str):
        super().__init__(message, details={"setting": setting})
        self.thought = thought
        self.setting = setting


class WalletNotFoundError(SwigAgentError):
    """No Swig wallet exists at the derived address."""

    def __init__(self, address: str):
        super().__init__(
            f"No Swig wallet found at address: {address}. "
            "Create one first with 'create swig'.",
            details={"address": address},
        )
        self.address = address


class InvalidMintError(SwigAgentError):
    """Token mint does not exist or is not a mint account."""

    def __init__(self, mint: str):
        super().__init__(
            f"Invalid or non-existent token mint: {mint}",
            details={"mint": mint},
        )
        self.mint = mint
