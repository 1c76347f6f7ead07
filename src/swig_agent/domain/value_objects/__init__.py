"""Domain value objects."""

from swig_agent.domain.value_objects.token_amount import SOL_DECIMALS, TokenAmount
from swig_agent.domain.value_objects.wallet_address import (
    ADDRESS_PATTERN,
    WalletAddress,
)

__all__ = [
    "WalletAddress",
    "TokenAmount",
    "SOL_DECIMALS",
    "ADDRESS_PATTERN",
]
