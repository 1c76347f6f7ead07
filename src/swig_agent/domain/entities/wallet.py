"""
Wallet and Role entities - Swig wallet state as read from chain.
"""

from dataclasses import dataclass, field
from typing import Any, FrozenSet, List, Optional, Tuple

from solders.pubkey import Pubkey

ALL_ACTIONS: FrozenSet[str] = frozenset({"all"})


@dataclass(frozen=True)
class Role:
    """
    Binding of one Ed25519 authority to a numeric role id.

    ``handle`` carries the SDK's own role object so that instruction
    builders can receive it back unchanged.
    """

    id: int
    authority: Pubkey
    actions: FrozenSet[str] = ALL_ACTIONS
    handle: Any = field(default=None, compare=False, repr=False)

    def __post_init__(self):
        """Validate role data."""
        if self.id < 0:
            raise ValueError("Role id cannot be negative")

    def to_dict(self) -> dict:
        """Convert role to dictionary representation."""
        return {
            "id": self.id,
            "authority": str(self.authority),
            "actions": sorted(self.actions),
        }


@dataclass(frozen=True)
class Wallet:
    """
    Swig wallet entity.

    Business rules:
    - Address is derived from the owner's key, never a keypair
    - Role ids are unique within a wallet
    - A live wallet keeps at least one role
    """

    address: Pubkey
    roles: Tuple[Role, ...] = ()

    def __post_init__(self):
        """Validate role list."""
        object.__setattr__(self, "roles", tuple(self.roles))
        ids = [role.id for role in self.roles]
        if len(ids) != len(set(ids)):
            raise ValueError("Role ids must be unique within a wallet")

    @property
    def role_count(self) -> int:
        return len(self.roles)

    def roles_for(self, authority: Pubkey) -> List[Role]:
        """All roles bound to the given authority key, in wallet order."""
        return [role for role in self.roles if role.authority == authority]

    def find_role(self, role_id: int) -> Optional[Role]:
        """Role with the given id, if present."""
        for role in self.roles:
            if role.id == role_id:
                return role
        return None

    def has_authority(self, authority: Pubkey) -> bool:
        return any(role.authority == authority for role in self.roles)

    def to_dict(self) -> dict:
        """Convert wallet to dictionary representation."""
        return {
            "address": str(self.address),
            "roles": [role.to_dict() for role in self.roles],
        }
