"""
WalletAddress value object - a base58 account address as typed in chat.
"""

import re
from dataclasses import dataclass

# Base58 without 0, O, I and l
ADDRESS_PATTERN = re.compile(r"^[1-9A-HJ-NP-Za-km-z]{32,44}$")
MIN_ADDRESS_LENGTH = 32
MAX_ADDRESS_LENGTH = 44


@dataclass(frozen=True)
class WalletAddress:
    """
    Shape-checked Solana address.

    Only the text form is checked here; on-curve and program ownership
    checks belong to the chain layer.
    """

    address: str

    def __post_init__(self):
        if not self.address:
            raise ValueError("Address is empty")
        size = len(self.address)
        if not MIN_ADDRESS_LENGTH <= size <= MAX_ADDRESS_LENGTH:
            raise ValueError(f"Invalid wallet address length: {size}")
        if not ADDRESS_PATTERN.match(self.address):
            raise ValueError(f"Not a base58 address: {self.address}")

    @classmethod
    def is_valid(cls, value: str) -> bool:
        return bool(value) and bool(ADDRESS_PATTERN.match(value))

    def truncated(self) -> str:
        """First six and last four characters, for replies and logs."""
        return f"{self.address[:6]}...{self.address[-4:]}"

    def __str__(self) -> str:
        return self.address
