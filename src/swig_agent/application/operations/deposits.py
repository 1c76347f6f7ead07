"""
Caller-funded transfers into the wallet.

The caller's own key is the source, so no role is needed and nothing is
wrapped through the Swig program.
"""

from typing import Optional

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
from swig_agent.infrastructure.monitoring import ReplyEmoji


class TransferToSwig(Operation):
    """Move SOL (or a named token) from the caller into the wallet."""

    name = "TRANSFER_TO_SWIG"
    description = "Transfer SOL or SPL tokens from agent wallet to the Swig wallet"
    similes = (
        "SEND_TO_SWIG",
        "FUND_SWIG",
        "DEPOSIT_TO_SWIG",
        "TRANSFER_FUNDS_TO_SWIG",
    )
    category = OperationCategory.TRANSFER
    intent = IntentRule(
        all_of=("fund", "swig", "amount"),
        phrases=(
            "transfer to swig",
            "transfer.*swig",
            "send to swig",
            "send.*swig",
            "fund swig",
            "deposit to swig",
            "deposit.*swig",
            "send funds to swig",
            "to.*swig.*wallet",
            "to my swig",
            "to the swig",
        ),
    )
    examples = (
        ActionExample(
            "Transfer 1.5 SOL to my swig wallet",
            "I'll transfer 1.5 SOL to your Swig wallet.",
        ),
        ActionExample(
            "Fund the swig with 0.1 SOL", "Transferring 0.1 SOL to your Swig wallet..."
        ),
    )
    failure_prefix = "transfer to Swig wallet"
    failure_thought = (
        "The transfer to Swig wallet failed. This could be due to insufficient "
        "funds, network issues, or invalid parameters."
    )

    def parse(self, entities: ExtractedEntities) -> TransferRequest:
        amount = require_amount(
            entities,
            "Please specify an amount to transfer (e.g., 'transfer 1.5 SOL to swig')",
        )
        return TransferRequest(
            operation=self.name,
            amount=amount,
            destination=Destination.swig(),
            mint=optional_address(entities.mint, "mint"),
            source_is_wallet=False,
        )

    async def prepare(
        self, ctx: OperationContext, request: TransferRequest
    ) -> OperationPlan:
        amount = display_amount(request.amount)

        if request.mint is None:
            body = [
                ctx.composer.native_transfer(
                    ctx.caller, ctx.wallet_address, request.amount
                )
            ]
            setup = []
            description = f"{amount} SOL"
        else:
            plan = await ctx.composer.token_transfer(
                request.mint,
                ctx.caller,
                ctx.wallet_address,
                request.amount,
                payer=ctx.caller,
            )
            body = [plan.transfer]
            setup = plan.setup
            description = f"{amount} tokens ({short_mint(request.mint)})"

        transaction = ctx.composer.compose(ctx.caller, body, setup)

        def describe(signature: Optional[str]) -> OperationResult:
            return OperationResult(
                summary=(
                    f"{ReplyEmoji.SUCCESS} Successfully transferred {description} "
                    "to Swig wallet!\n\n"
                    f"Swig Address: {ctx.wallet_address}\n"
                    f"Transaction: {signature}"
                ),
                thought=(
                    f"Successfully transferred {description} from the agent "
                    "wallet to the Swig wallet."
                ),
                signature=signature,
                details=request.to_dict(),
            )

        return OperationPlan(describe=describe, transaction=transaction)


class TransferTokenToSwig(Operation):
    """Move an SPL token from the caller into the wallet's token account."""

    name = "TRANSFER_TOKEN_TO_SWIG"
    description = "Transfer SPL tokens from agent wallet to the Swig wallet"
    similes = (
        "SEND_TOKEN_TO_SWIG",
        "FUND_SWIG_TOKEN",
        "DEPOSIT_TOKEN_TO_SWIG",
        "TRANSFER_SPL_TO_SWIG",
    )
    category = OperationCategory.TRANSFER
    intent = IntentRule(
        all_of=("fund", "swig", "token", "amount"),
        phrases=(
            "transfer token to swig",
            "send token to swig",
            "transfer spl to swig",
            "send spl to swig",
            "fund swig with token",
            "deposit token to swig",
            "transfer.*token.*swig",
            "send.*token.*swig",
            "to.*swig.*token",
        ),
    )
    examples = (
        ActionExample(
            "Transfer 100 tokens mint 4zMMC9srt5Ri5X14GAgXhaHii3GnPAEERYPJgZJDncDU "
            "to swig",
            "I'll transfer 100 SPL tokens to your Swig wallet.",
        ),
        ActionExample(
            "Send 50 spl tokens EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v "
            "to my swig",
            "Transferring 50 SPL tokens to your Swig wallet...",
        ),
    )
    failure_prefix = "transfer token to Swig wallet"
    failure_thought = (
        "The token transfer to Swig wallet failed. This could be due to "
        "insufficient token balance, network issues, or invalid parameters."
    )

    def parse(self, entities: ExtractedEntities) -> TransferRequest:
        amount = require_amount(
            entities,
            "Please specify an amount to transfer (e.g., 'transfer 100 tokens mint "
            "4zMMC9srt5Ri5X14GAgXhaHii3GnPAEERYPJgZJDncDU to swig')",
        )
        # The wallet is the destination, so the only address named is the mint
        mint = require_address(
            entities.mint or entities.first_address,
            "Please specify the token mint address (e.g., 'transfer 100 tokens mint "
            "4zMMC9srt5Ri5X14GAgXhaHii3GnPAEERYPJgZJDncDU to swig')",
            "mint",
        )
        return TransferRequest(
            operation=self.name,
            amount=amount,
            destination=Destination.swig(),
            mint=mint,
            source_is_wallet=False,
        )

    async def prepare(
        self, ctx: OperationContext, request: TransferRequest
    ) -> OperationPlan:
        plan = await ctx.composer.token_transfer(
            request.mint,
            ctx.caller,
            ctx.wallet_address,
            request.amount,
            payer=ctx.caller,
        )
        transaction = ctx.composer.compose(ctx.caller, [plan.transfer], plan.setup)
        amount = display_amount(request.amount)
        symbol = short_mint(request.mint)

        def describe(signature: Optional[str]) -> OperationResult:
            return OperationResult(
                summary=(
                    f"{ReplyEmoji.SUCCESS} Successfully transferred {amount} {symbol} "
                    "tokens to Swig wallet!\n\n"
                    f"Swig Address: {ctx.wallet_address}\n"
                    f"Token Mint: {request.mint}\n"
                    f"Amount: {amount} tokens\n"
                    f"Transaction: {signature}"
                ),
                thought=f"Successfully transferred {amount} SPL tokens to the Swig wallet.",
                signature=signature,
                details={
                    **request.to_dict(),
                    "base_units": plan.base_units,
                    "created_token_account": plan.creates_destination,
                },
            )

        return OperationPlan(describe=describe, transaction=transaction)
