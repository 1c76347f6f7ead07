"""
TokenAccount entity - associated token account of a (mint, owner) pair.
"""

from dataclasses import dataclass
from typing import Optional

from solders.pubkey import Pubkey

from swig_agent.domain.value_objects.token_amount import TokenAmount


@dataclass(frozen=True)
class TokenAccount:
    """
    Associated token account, which may or may not exist on-chain.

    An absent account always reports a zero balance.
    """

    address: Pubkey
    mint: Pubkey
    owner: Pubkey
    exists: bool
    amount: int = 0
    decimals: Optional[int] = None

    def __post_init__(self):
        """Validate account data."""
        if self.amount < 0:
            raise ValueError("Token amount cannot be negative")
        if not self.exists and self.amount:
            raise ValueError("Absent token account cannot hold a balance")

    @property
    def ui_amount(self) -> TokenAmount:
        """Human-readable balance at the mint's precision."""
        return TokenAmount.from_base_units(self.amount, self.decimals or 0)

    def to_dict(self) -> dict:
        """Convert account to dictionary representation."""
        return {
            "address": str(self.address),
            "mint": str(self.mint),
            "owner": str(self.owner),
            "exists": self.exists,
            "amount": self.amount,
            "decimals": self.decimals,
        }
