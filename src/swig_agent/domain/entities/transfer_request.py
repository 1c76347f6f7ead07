"""
TransferRequest entity - value movement derived from one message.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Optional

from solders.pubkey import Pubkey


class DestinationKind(str, Enum):
    """Where a transfer lands."""

    SWIG = "swig"
    ADDRESS = "address"
    ROLE = "role"


@dataclass(frozen=True)
class Destination:
    """
    Transfer destination descriptor.

    ROLE destinations name a role id or an authority address; ADDRESS
    destinations name any account.
    """

    kind: DestinationKind
    address: Optional[Pubkey] = None
    role_id: Optional[int] = None

    def __post_init__(self):
        """Validate destination shape."""
        if self.kind == DestinationKind.ADDRESS and self.address is None:
            raise ValueError("Address destination requires an address")
        if (
            self.kind == DestinationKind.ROLE
            and self.address is None
            and self.role_id is None
        ):
            raise ValueError("Role destination requires a role id or address")

    @classmethod
    def swig(cls) -> "Destination":
        return cls(kind=DestinationKind.SWIG)

    @classmethod
    def to_address(cls, address: Pubkey) -> "Destination":
        return cls(kind=DestinationKind.ADDRESS, address=address)

    @classmethod
    def to_role(
        cls, role_id: Optional[int] = None, address: Optional[Pubkey] = None
    ) -> "Destination":
        return cls(kind=DestinationKind.ROLE, role_id=role_id, address=address)


@dataclass(frozen=True)
class TransferRequest:
    """
    TransferRequest entity.

    Business rules:
    - Amount must be positive
    - Transfers into the wallet are paid from the caller's own key
    - Transfers out of the wallet debit the wallet and need a role
    """

    operation: str
    amount: Decimal
    destination: Destination
    mint: Optional[Pubkey] = None
    source_is_wallet: bool = field(default=True)

    def __post_init__(self):
        """Validate request after initialization."""
        if not isinstance(self.amount, Decimal):
            raise ValueError("Transfer amount must be a Decimal")
        if not self.amount.is_finite() or self.amount <= 0:
            raise ValueError("Transfer amount must be positive")
        if self.source_is_wallet and self.destination.kind == DestinationKind.SWIG:
            raise ValueError("Wallet cannot transfer to itself")
        if not self.source_is_wallet and self.destination.kind != DestinationKind.SWIG:
            raise ValueError("Caller-funded transfers must target the wallet")

    @property
    def is_token(self) -> bool:
        return self.mint is not None

    def to_dict(self) -> dict:
        """Convert request to dictionary representation."""
        return {
            "operation": self.operation,
            "amount": str(self.amount),
            "mint": str(self.mint) if self.mint else None,
            "source_is_wallet": self.source_is_wallet,
            "destination": {
                "kind": self.destination.kind.value,
                "address": (
                    str(self.destination.address)
                    if self.destination.address
                    else None
                ),
                "role_id": self.destination.role_id,
            },
        }
