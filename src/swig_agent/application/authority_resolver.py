"""
Authority Resolver - maps keys and textual targets onto wallet roles.

All checks run against a freshly fetched role list and finish before any
instruction is built.
"""

from dataclasses import dataclass
from typing import List, Optional

from solders.pubkey import Pubkey

from swig_agent.domain.entities import Role, Wallet
from swig_agent.domain.exceptions import (
    AddressNotAuthorityError,
    LastAuthorityError,
    NotAnAuthorityError,
    ParseError,
    RoleNotFoundError,
    SelfRemovalError,
)
from swig_agent.domain.services import IChainStateGateway
from swig_agent.infrastructure.monitoring import SystemReporter

DEFAULT_PURPOSE = "an authority to initiate transfers"


@dataclass(frozen=True)
class AuthorityContext:
    """Wallet state and the caller's place in it."""

    wallet: Wallet
    caller: Pubkey
    caller_roles: tuple

    @property
    def caller_role(self) -> Role:
        """Role the caller acts through (the first one bound to its key)."""
        return self.caller_roles[0]


class AuthorityResolver:
    """
    Resolve callers and targets against a wallet's role list.

    Business rules:
    - Caller must hold at least one role to mutate or debit the wallet
    - Role-id targets must exist; address targets must be bound to a role
    - Removal never empties the wallet and never targets the caller
    """

    def __init__(
        self,
        gateway: IChainStateGateway,
        reporter: Optional[SystemReporter] = None,
    ):
        self.gateway = gateway
        self.reporter = reporter or SystemReporter(
            name="authority_resolver", level=20, verbose=1
        )

    async def resolve_caller(
        self,
        wallet_address: Pubkey,
        caller: Pubkey,
        purpose: str = DEFAULT_PURPOSE,
    ) -> AuthorityContext:
        """
        Fetch the wallet and find the caller's roles.

        Args:
            wallet_address: Wallet to act on
            caller: Caller public key
            purpose: Phrase completing "You need to be ..."

        Returns:
            AuthorityContext with at least one caller role

        Raises:
            WalletNotFoundError: If the wallet does not exist
            NotAnAuthorityError: If the caller holds no role
        """
        wallet = await self.gateway.get_wallet(wallet_address)
        return self.context_for(wallet, caller, purpose)

    def context_for(
        self, wallet: Wallet, caller: Pubkey, purpose: str = DEFAULT_PURPOSE
    ) -> AuthorityContext:
        roles = wallet.roles_for(caller)
        if not roles:
            self.reporter.warning(
                f"{caller} holds no role on {wallet.address}",
                context="AuthorityResolver",
            )
            raise NotAnAuthorityError(str(caller), purpose)

        self.reporter.debug(
            f"Caller {caller} acts as role {roles[0].id}",
            context="AuthorityResolver",
        )
        return AuthorityContext(wallet=wallet, caller=caller, caller_roles=tuple(roles))

    @staticmethod
    def resolve_target(
        ctx: AuthorityContext,
        role_id: Optional[int] = None,
        address: Optional[Pubkey] = None,
        removal: bool = False,
    ) -> Role:
        """
        Resolve a target authority by role id (preferred) or address.

        Raises:
            RoleNotFoundError: If the role id is absent
            AddressNotAuthorityError: If no role is bound to the address
            ParseError: If neither a role id nor an address was given
        """
        if role_id is not None:
            role = ctx.wallet.find_role(role_id)
            if role is None:
                raise RoleNotFoundError(role_id)
            return role

        if address is not None:
            matches: List[Role] = ctx.wallet.roles_for(address)
            if not matches:
                raise AddressNotAuthorityError(str(address), removal=removal)
            return matches[0]

        raise ParseError(
            "Please specify either a role ID (e.g., 'role 1') or an authority "
            "address that exists on this Swig wallet."
        )

    @classmethod
    def resolve_removal(
        cls,
        ctx: AuthorityContext,
        role_id: Optional[int] = None,
        address: Optional[Pubkey] = None,
    ) -> Role:
        """
        Resolve the role to remove and check removal is allowed.

        Raises:
            RoleNotFoundError / AddressNotAuthorityError: Unknown target
            LastAuthorityError: If the wallet has a single role
            SelfRemovalError: If the target is the caller's own key
        """
        target = cls.resolve_target(ctx, role_id=role_id, address=address, removal=True)

        if ctx.wallet.role_count <= 1:
            raise LastAuthorityError()

        if target.authority == ctx.caller:
            raise SelfRemovalError()

        return target
