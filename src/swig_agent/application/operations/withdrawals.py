"""
Transfers out of the wallet.

The wallet is the source, so every transfer is wrapped through the
caller's role. Authority-targeted variants only pay existing authorities.
"""

from typing import Optional

from solders.pubkey import Pubkey

from swig_agent.application.intents import IntentRule
from swig_agent.application.operations.base import (
    ActionExample,
    Operation,
    OperationCategory,
    OperationContext,
    OperationPlan,
    display_amount,
    optional_address,
    require_address,
    require_amount,
    short_mint,
)
from swig_agent.application.parsing import ExtractedEntities
from swig_agent.domain.entities import Destination, OperationResult, TransferRequest
from swig_agent.domain.exceptions import ParseError
from swig_agent.infrastructure.monitoring import ReplyEmoji


def _authority_address(
    entities: ExtractedEntities, exclude: Optional[str] = None
) -> Optional[str]:
    """
    Address naming the target authority.

    "to <addr>" / "to authority <addr>" wins; otherwise the first address
    that is not ``exclude`` (the mint).
    """
    tagged = entities.address_after(["to"], ["authority"])
    if tagged and tagged != exclude:
        return tagged
    for address in entities.addresses:
        if address != exclude:
            return address
    return None


class SwigTransferToAddress(Operation):
    """Send SOL from the wallet to any address."""

    name = "SWIG_TRANSFER_TO_ADDRESS"
    description = "Transfer SOL from the Swig wallet to any address"
    similes = (
        "SWIG_SEND_TO_ADDRESS",
        "TRANSFER_FROM_SWIG",
        "SEND_FROM_SWIG",
        "SWIG_TRANSFER_SOL",
    )
    category = OperationCategory.TRANSFER
    intent = IntentRule(
        all_of=("swig", "transfer", "amount"),
        any_of=("from", "address"),
        phrases=(
            "transfer from swig",
            "send from swig",
            "transfer using swig",
            "send using swig",
            "swig transfer to",
            "swig send to",
            "transfer.*from.*swig",
            "send.*from.*swig",
            "use swig to transfer",
            "use swig to send",
        ),
    )
    examples = (
        ActionExample(
            "Transfer 1.5 SOL from swig to "
            "2dr69TRDpT6LNec6XSuLSAyyxcjGiivn7T7MgL1udtms",
            "I'll transfer 1.5 SOL from your Swig wallet to that address.",
        ),
        ActionExample(
            "Send 0.1 SOL using swig to 9WzDXwBbmkg8ZTbNMqUxvQRAyrZzDsGYdLVL9zYtAWWM",
            "Using your Swig wallet to send 0.1 SOL...",
        ),
    )
    failure_prefix = "transfer from Swig wallet"
    failure_thought = (
        "The transfer from Swig wallet failed. This could be due to "
        "insufficient funds, insufficient authority permissions, network "
        "issues, or invalid parameters."
    )

    def parse(self, entities: ExtractedEntities) -> TransferRequest:
        amount = require_amount(
            entities,
            "Please specify an amount to transfer "
            "(e.g., 'transfer 1.5 SOL from swig to...')",
        )
        recipient = require_address(
            entities.address_after(["to"]) or entities.first_address,
            "Please specify a recipient address (e.g., 'transfer 1.5 SOL from "
            "swig to 2dr69TRDpT6LNec6XSuLSAyyxcjGiivn7T7MgL1udtms')",
            "recipient",
        )
        return TransferRequest(
            operation=self.name,
            amount=amount,
            destination=Destination.to_address(recipient),
        )

    async def prepare(
        self, ctx: OperationContext, request: TransferRequest
    ) -> OperationPlan:
        authority = await ctx.resolver.resolve_caller(ctx.wallet_address, ctx.caller)
        recipient = request.destination.address
        instruction = ctx.composer.native_transfer(
            ctx.wallet_address, recipient, request.amount
        )
        transaction = ctx.composer.compose(
            ctx.caller, [instruction], authority=authority
        )
        amount = display_amount(request.amount)

        def describe(signature: Optional[str]) -> OperationResult:
            return OperationResult(
                summary=(
                    f"{ReplyEmoji.SUCCESS} Successfully transferred {amount} SOL "
                    "from Swig wallet!\n\n"
                    f"From: {ctx.wallet_address}\n"
                    f"To: {recipient}\n"
                    f"Amount: {amount} SOL\n"
                    f"Transaction: {signature}"
                ),
                thought=(
                    f"Successfully transferred {amount} SOL from the Swig wallet "
                    f"to {recipient}."
                ),
                signature=signature,
                details=request.to_dict(),
            )

        return OperationPlan(describe=describe, transaction=transaction)


class SwigTransferToAuthority(Operation):
    """Send SOL from the wallet to one of its own authorities."""

    name = "SWIG_TRANSFER_TO_AUTHORITY"
    description = (
        "Transfer SOL from the Swig wallet to another authority on the same Swig"
    )
    similes = (
        "SWIG_SEND_TO_AUTHORITY",
        "TRANSFER_TO_SWIG_AUTHORITY",
        "SEND_TO_SWIG_AUTHORITY",
    )
    category = OperationCategory.TRANSFER
    intent = IntentRule(
        all_of=("swig", "transfer", "authority", "amount"),
        phrases=(
            "transfer from swig to authority",
            "send from swig to authority",
            "transfer to swig authority",
            "send to swig authority",
            "transfer.*swig.*authority",
            "send.*swig.*authority",
            "swig transfer to authority",
            "swig send to authority",
            "use swig to transfer to authority",
        ),
    )
    examples = (
        ActionExample(
            "Transfer 0.5 SOL from swig to authority "
            "2dr69TRDpT6LNec6XSuLSAyyxcjGiivn7T7MgL1udtms",
            "I'll transfer 0.5 SOL from your Swig wallet to that authority.",
        ),
        ActionExample(
            "Send 1.0 SOL from swig to role 1",
            "Transferring 1.0 SOL from Swig to role 1...",
        ),
    )
    failure_prefix = "transfer from Swig wallet to authority"
    failure_thought = (
        "The transfer from Swig wallet to authority failed. This could be due "
        "to insufficient funds, invalid authority, insufficient permissions, "
        "or network issues."
    )

    def parse(self, entities: ExtractedEntities) -> TransferRequest:
        amount = require_amount(
            entities,
            "Please specify an amount to transfer (e.g., 'transfer 1.5 SOL from "
            "swig to authority 2dr69...' or 'transfer 1.5 SOL from swig to role 1')",
        )
        address = optional_address(_authority_address(entities), "authority")
        if entities.role_id is None and address is None:
            raise ParseError(
                "Please specify either a role ID (e.g., 'role 1') or an authority "
                "address that exists on this Swig wallet."
            )
        return TransferRequest(
            operation=self.name,
            amount=amount,
            destination=Destination.to_role(role_id=entities.role_id, address=address),
        )

    async def prepare(
        self, ctx: OperationContext, request: TransferRequest
    ) -> OperationPlan:
        authority = await ctx.resolver.resolve_caller(ctx.wallet_address, ctx.caller)
        target = ctx.resolver.resolve_target(
            authority,
            role_id=request.destination.role_id,
            address=request.destination.address,
        )
        recipient: Pubkey = target.authority
        instruction = ctx.composer.native_transfer(
            ctx.wallet_address, recipient, request.amount
        )
        transaction = ctx.composer.compose(
            ctx.caller, [instruction], authority=authority
        )
        amount = display_amount(request.amount)

        def describe(signature: Optional[str]) -> OperationResult:
            return OperationResult(
                summary=(
                    f"{ReplyEmoji.SUCCESS} Successfully transferred {amount} SOL "
                    "from Swig wallet to authority!\n\n"
                    f"From: {ctx.wallet_address}\n"
                    f"To Authority: {recipient}\n"
                    f"Amount: {amount} SOL\n"
                    f"Transaction: {signature}"
                ),
                thought=(
                    f"Successfully transferred {amount} SOL from the Swig wallet "
                    f"to authority {recipient}."
                ),
                signature=signature,
                details={**request.to_dict(), "role_id": target.id},
            )

        return OperationPlan(describe=describe, transaction=transaction)


class SwigTransferTokenToAddress(Operation):
    """Send an SPL token from the wallet's token account to any address."""

    name = "SWIG_TRANSFER_TOKEN_TO_ADDRESS"
    description = "Transfer SPL tokens from the Swig wallet to any address"
    similes = (
        "SWIG_SEND_TOKEN_TO_ADDRESS",
        "TRANSFER_TOKEN_FROM_SWIG",
        "SEND_TOKEN_FROM_SWIG",
        "SWIG_TRANSFER_SPL",
    )
    category = OperationCategory.TRANSFER
    intent = IntentRule(
        all_of=("swig", "transfer", "token", "amount"),
        any_of=("from", "address"),
        phrases=(
            "transfer token from swig",
            "send token from swig",
            "transfer spl from swig",
            "send spl from swig",
            "transfer.*token.*from.*swig",
            "send.*token.*from.*swig",
            "swig transfer token to",
            "swig send token to",
            "use swig to transfer token",
            "use swig to send token",
        ),
    )
    examples = (
        ActionExample(
            "Transfer 100 tokens mint 4zMMC9srt5Ri5X14GAgXhaHii3GnPAEERYPJgZJDncDU "
            "from swig to 2dr69TRDpT6LNec6XSuLSAyyxcjGiivn7T7MgL1udtms",
            "I'll transfer 100 SPL tokens from your Swig wallet to that address.",
        ),
        ActionExample(
            "Send 50 spl tokens EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v "
            "from swig to 9WzDXwBbmkg8ZTbNMqUxvQRAyrZzDsGYdLVL9zYtAWWM",
            "Using your Swig wallet to send 50 SPL tokens...",
        ),
    )
    failure_prefix = "transfer token from Swig wallet"
    failure_thought = (
        "The token transfer from Swig wallet failed. This could be due to "
        "insufficient token balance, insufficient authority permissions, "
        "network issues, or invalid parameters."
    )

    usage = (
        "(e.g., 'transfer 100 tokens mint 4zMMC9... from swig to 2dr69...')"
    )

    def parse(self, entities: ExtractedEntities) -> TransferRequest:
        amount = require_amount(
            entities, f"Please specify an amount to transfer {self.usage}"
        )
        if len(entities.addresses) < 2:
            raise ParseError(
                f"Please specify both mint address and recipient address {self.usage}"
            )

        mint = entities.mint
        recipient = entities.address_after(["to"])
        if recipient == mint:
            recipient = None

        # Untagged addresses fill the gaps in order: mint, then recipient
        untagged = [a for a in entities.addresses if a not in (mint, recipient)]
        if mint is None and untagged:
            mint = untagged.pop(0)
        if recipient is None and untagged:
            recipient = untagged.pop(0)

        return TransferRequest(
            operation=self.name,
            amount=amount,
            mint=require_address(mint, f"Please specify the token mint {self.usage}", "mint"),
            destination=Destination.to_address(
                require_address(
                    recipient, f"Please specify a recipient {self.usage}", "recipient"
                )
            ),
        )

    async def prepare(
        self, ctx: OperationContext, request: TransferRequest
    ) -> OperationPlan:
        authority = await ctx.resolver.resolve_caller(ctx.wallet_address, ctx.caller)
        recipient = request.destination.address
        plan = await ctx.composer.token_transfer(
            request.mint,
            ctx.wallet_address,
            recipient,
            request.amount,
            payer=ctx.caller,
        )
        transaction = ctx.composer.compose(
            ctx.caller, [plan.transfer], plan.setup, authority=authority
        )
        amount = display_amount(request.amount)
        symbol = short_mint(request.mint)

        def describe(signature: Optional[str]) -> OperationResult:
            return OperationResult(
                summary=(
                    f"{ReplyEmoji.SUCCESS} Successfully transferred {amount} {symbol} "
                    "tokens from Swig wallet!\n\n"
                    f"From: {ctx.wallet_address}\n"
                    f"To: {recipient}\n"
                    f"Token Mint: {request.mint}\n"
                    f"Amount: {amount} tokens\n"
                    f"Transaction: {signature}"
                ),
                thought=(
                    f"Successfully transferred {amount} SPL tokens from the Swig "
                    f"wallet to {recipient}."
                ),
                signature=signature,
                details={
                    **request.to_dict(),
                    "base_units": plan.base_units,
                    "created_token_account": plan.creates_destination,
                },
            )

        return OperationPlan(describe=describe, transaction=transaction)


class SwigTransferTokenToAuthority(Operation):
    """Send an SPL token from the wallet to one of its own authorities."""

    name = "SWIG_TRANSFER_TOKEN_TO_AUTHORITY"
    description = (
        "Transfer SPL tokens from the Swig wallet to another authority on the "
        "same Swig"
    )
    similes = (
        "SWIG_SEND_TOKEN_TO_AUTHORITY",
        "TRANSFER_TOKEN_FROM_SWIG_TO_AUTHORITY",
        "SEND_TOKEN_FROM_SWIG_TO_AUTHORITY",
        "SWIG_TRANSFER_SPL_TO_AUTHORITY",
    )
    category = OperationCategory.TRANSFER
    intent = IntentRule(
        all_of=("swig", "transfer", "token", "authority", "amount"),
        phrases=(
            "transfer token from swig to authority",
            "send token from swig to authority",
            "transfer spl from swig to authority",
            "send spl from swig to authority",
            "transfer token to swig authority",
            "send token to swig authority",
            "transfer.*token.*from.*swig.*to.*authority",
            "send.*token.*from.*swig.*to.*authority",
            "swig transfer token to authority",
            "swig send token to authority",
            "use swig to transfer token to authority",
        ),
    )
    examples = (
        ActionExample(
            "Transfer 100 tokens mint 4zMMC9srt5Ri5X14GAgXhaHii3GnPAEERYPJgZJDncDU "
            "from swig to authority 2dr69TRDpT6LNec6XSuLSAyyxcjGiivn7T7MgL1udtms",
            "I'll transfer 100 SPL tokens from your Swig wallet to that authority.",
        ),
        ActionExample(
            "Send 50 spl tokens EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v "
            "from swig to role 1",
            "Transferring 50 SPL tokens from Swig to role 1...",
        ),
    )
    failure_prefix = "transfer token from Swig wallet to authority"
    failure_thought = (
        "The token transfer from Swig wallet to authority failed. This could be "
        "due to insufficient token balance, invalid authority, insufficient "
        "permissions, or network issues."
    )

    def parse(self, entities: ExtractedEntities) -> TransferRequest:
        amount = require_amount(
            entities,
            "Please specify an amount to transfer (e.g., 'transfer 100 tokens mint "
            "4zMMC9... from swig to authority 2dr69...' or 'transfer 100 tokens "
            "mint 4zMMC9... from swig to role 1')",
        )
        mint = require_address(
            entities.mint,
            "Please specify the token mint address "
            "(e.g., 'mint 4zMMC9srt5Ri5X14GAgXhaHii3GnPAEERYPJgZJDncDU')",
            "mint",
        )
        address = None
        if entities.role_id is None:
            address = require_address(
                _authority_address(entities, exclude=entities.mint),
                "Please specify either a role ID (e.g., 'role 1') or an authority "
                "address (e.g., 'to authority 2dr69...')",
                "authority",
            )
        return TransferRequest(
            operation=self.name,
            amount=amount,
            mint=mint,
            destination=Destination.to_role(role_id=entities.role_id, address=address),
        )

    async def prepare(
        self, ctx: OperationContext, request: TransferRequest
    ) -> OperationPlan:
        authority = await ctx.resolver.resolve_caller(ctx.wallet_address, ctx.caller)
        target = ctx.resolver.resolve_target(
            authority,
            role_id=request.destination.role_id,
            address=request.destination.address,
        )
        recipient = target.authority
        plan = await ctx.composer.token_transfer(
            request.mint,
            ctx.wallet_address,
            recipient,
            request.amount,
            payer=ctx.caller,
        )
        transaction = ctx.composer.compose(
            ctx.caller, [plan.transfer], plan.setup, authority=authority
        )
        amount = display_amount(request.amount)
        symbol = short_mint(request.mint)

        def describe(signature: Optional[str]) -> OperationResult:
            return OperationResult(
                summary=(
                    f"{ReplyEmoji.SUCCESS} Successfully transferred {amount} {symbol} "
                    "tokens from Swig wallet to authority!\n\n"
                    f"From: {ctx.wallet_address}\n"
                    f"To Authority: {recipient}\n"
                    f"Token Mint: {request.mint}\n"
                    f"Amount: {amount} tokens\n"
                    f"Transaction: {signature}"
                ),
                thought=(
                    f"Successfully transferred {amount} SPL tokens from the Swig "
                    f"wallet to authority {recipient}."
                ),
                signature=signature,
                details={
                    **request.to_dict(),
                    "role_id": target.id,
                    "base_units": plan.base_units,
                    "created_token_account": plan.creates_destination,
                },
            )

        return OperationPlan(describe=describe, transaction=transaction)
