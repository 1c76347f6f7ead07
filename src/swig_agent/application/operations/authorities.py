"""
Role management: list, add and remove authorities.
"""

from dataclasses import dataclass
from typing import Optional

from solders.pubkey import Pubkey

from swig_agent.application.intents import IntentRule
from swig_agent.application.operations.base import (
    ActionExample,
    Operation,
    OperationCategory,
    OperationContext,
    OperationPlan,
    optional_address,
    require_address,
)
from swig_agent.application.parsing import ExtractedEntities
from swig_agent.domain.entities import OperationResult
from swig_agent.domain.exceptions import ParseError
from swig_agent.infrastructure.monitoring import ReplyEmoji


class GetSwigAuthorities(Operation):
    """List every role with its authority, marking the caller's own."""

    name = "GET_SWIG_AUTHORITIES"
    description = "Get all authorities (signers) on the Swig wallet"
    similes = (
        "GET_AUTHORITIES",
        "LIST_SWIG_AUTHORITIES",
        "SHOW_SWIG_AUTHORITIES",
        "CHECK_SWIG_AUTHORITIES",
        "SWIG_AUTHORITIES",
    )
    category = OperationCategory.READ
    intent = IntentRule(
        all_of=("authorities", "swig", "query"),
        phrases=(
            "swig authorities",
            "authorities on swig",
            "swig signers",
            "signers on swig",
            "who can sign",
            "list authorities",
            "show authorities",
            "get authorities",
        ),
    )
    examples = (
        ActionExample(
            "Who are the authorities on my swig wallet?",
            "I'll check the authorities on your Swig wallet.",
        ),
        ActionExample(
            "List swig signers", "Getting the list of signers for your Swig wallet..."
        ),
    )
    failure_prefix = "get Swig wallet authorities"
    failure_thought = (
        "Failed to retrieve the authorities from the Swig wallet. This could "
        "be due to the wallet not existing, network issues, or configuration "
        "problems."
    )

    async def prepare(self, ctx: OperationContext, request) -> OperationPlan:
        wallet = await ctx.gateway.get_wallet(ctx.wallet_address)

        entries = []
        for index, role in enumerate(wallet.roles, start=1):
            marker = f" {ReplyEmoji.YOUR_WALLET}" if role.authority == ctx.caller else ""
            entries.append(
                f"{index}. Role ID: {role.id}\n   Address: {role.authority}{marker}"
            )
        listing = "\n\n".join(entries)

        def describe(signature: Optional[str]) -> OperationResult:
            return OperationResult(
                summary=(
                    f"{ReplyEmoji.AUTHORITIES} Swig Wallet Authorities\n\n"
                    f"Swig Address: {wallet.address}\n"
                    f"Total Authorities: {wallet.role_count}\n\n"
                    f"{listing}"
                ),
                thought="Successfully retrieved all authorities from the Swig wallet.",
                details=wallet.to_dict(),
            )

        return OperationPlan(describe=describe)


@dataclass(frozen=True)
class AddAuthorityRequest:
    new_authority: Pubkey


class AddSwigAuthority(Operation):
    """Grant a new Ed25519 authority all actions on the wallet."""

    name = "ADD_SWIG_AUTHORITY"
    description = "Add an Ed25519 authority to an existing Swig wallet"
    similes = ("ADD_AUTHORITY_TO_SWIG", "ADD_SWIG_SIGNER", "GRANT_SWIG_ACCESS")
    category = OperationCategory.AUTHORITY
    intent = IntentRule(
        phrases=("add authority", "add signer", "grant access", "add to swig")
    )
    examples = (
        ActionExample(
            "Add authority 2dr69TRDpT6LNec6XSuLSAyyxcjGiivn7T7MgL1udtms "
            "to my swig wallet",
            "I'll add that public key as a new authority to your Swig wallet.",
        ),
        ActionExample(
            "Grant access to my team member's wallet "
            "9WzDXwBbmkg8ZTbNMqUxvQRAyrZzDsGYdLVL9zYtAWWM",
            "Adding your team member as an authority to the Swig wallet...",
        ),
    )
    failure_prefix = "add authority to Swig wallet"
    failure_thought = (
        "Failed to add the new authority to the Swig wallet. This could be due "
        "to insufficient permissions, network issues, or invalid parameters."
    )
    authority_purpose = "an existing authority to add new ones"

    def parse(self, entities: ExtractedEntities) -> AddAuthorityRequest:
        return AddAuthorityRequest(
            new_authority=require_address(
                entities.first_address,
                "Please provide a valid public key for the new authority "
                "(e.g., 'add authority 2dr69TRDpT6LNec6XSuLSAyyxcjGiivn7T7MgL1udtms')",
                "authority",
            )
        )

    async def prepare(
        self, ctx: OperationContext, request: AddAuthorityRequest
    ) -> OperationPlan:
        authority = await ctx.resolver.resolve_caller(
            ctx.wallet_address, ctx.caller, self.authority_purpose
        )
        transaction = ctx.composer.add_authority(authority, request.new_authority)

        def describe(signature: Optional[str]) -> OperationResult:
            return OperationResult(
                summary=(
                    f"{ReplyEmoji.SUCCESS} Successfully added authority to Swig wallet!\n\n"
                    f"New Authority: {request.new_authority}\n"
                    f"Swig Address: {ctx.wallet_address}\n"
                    f"Transaction: {signature}"
                ),
                thought="Successfully added a new authority to the Swig wallet.",
                signature=signature,
                details={"new_authority": str(request.new_authority)},
            )

        return OperationPlan(describe=describe, transaction=transaction)


@dataclass(frozen=True)
class RemoveAuthorityRequest:
    role_id: Optional[int] = None
    address: Optional[Pubkey] = None


class RemoveSwigAuthority(Operation):
    """
    Remove a role by id or by authority address.

    The last role can never be removed, and a caller cannot remove its
    own authority.
    """

    name = "REMOVE_SWIG_AUTHORITY"
    description = "Remove an Ed25519 authority from an existing Swig wallet"
    similes = (
        "REMOVE_AUTHORITY_FROM_SWIG",
        "REMOVE_SWIG_SIGNER",
        "REVOKE_SWIG_ACCESS",
    )
    category = OperationCategory.AUTHORITY
    intent = IntentRule(
        phrases=(
            "remove authority",
            "remove signer",
            "revoke access",
            "remove from swig",
            "remove role",
            "revoke role",
        )
    )
    examples = (
        ActionExample(
            "Remove authority 2dr69TRDpT6LNec6XSuLSAyyxcjGiivn7T7MgL1udtms "
            "from my swig wallet",
            "I'll remove that public key as an authority from your Swig wallet.",
        ),
        ActionExample(
            "Revoke access for role 2", "Removing role 2 from the Swig wallet..."
        ),
    )
    failure_prefix = "remove authority from Swig wallet"
    failure_thought = (
        "Failed to remove the authority from the Swig wallet. This could be due "
        "to insufficient permissions, network issues, or invalid parameters."
    )
    authority_purpose = "an existing authority to remove other authorities"

    def parse(self, entities: ExtractedEntities) -> RemoveAuthorityRequest:
        if entities.role_id is not None:
            return RemoveAuthorityRequest(role_id=entities.role_id)
        if entities.first_address:
            return RemoveAuthorityRequest(
                address=optional_address(entities.first_address, "authority")
            )
        raise ParseError(
            "Please provide either a valid public key or role ID to remove "
            "(e.g., 'remove authority 2dr69TRDpT6LNec6XSuLSAyyxcjGiivn7T7MgL1udtms' "
            "or 'remove role 1')"
        )

    async def prepare(
        self, ctx: OperationContext, request: RemoveAuthorityRequest
    ) -> OperationPlan:
        authority = await ctx.resolver.resolve_caller(
            ctx.wallet_address, ctx.caller, self.authority_purpose
        )
        target = ctx.resolver.resolve_removal(
            authority, role_id=request.role_id, address=request.address
        )
        transaction = ctx.composer.remove_authority(authority, target)

        def describe(signature: Optional[str]) -> OperationResult:
            return OperationResult(
                summary=(
                    f"{ReplyEmoji.SUCCESS} Successfully removed authority from Swig wallet!\n\n"
                    f"Removed Authority: {target.authority}\n"
                    f"Role ID: {target.id}\n"
                    f"Swig Address: {ctx.wallet_address}\n"
                    f"Transaction: {signature}"
                ),
                thought="Successfully removed an authority from the Swig wallet.",
                signature=signature,
                details={"removed": target.to_dict()},
            )

        return OperationPlan(describe=describe, transaction=transaction)
