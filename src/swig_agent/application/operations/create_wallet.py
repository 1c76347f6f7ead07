"""
CREATE_SWIG - create the caller's Swig wallet.
"""

from typing import Any, Optional

from swig_agent.application.intents import IntentRule
from swig_agent.application.operations.base import (
    ActionExample,
    Operation,
    OperationCategory,
    OperationContext,
    OperationPlan,
)
from swig_agent.domain.entities import OperationResult
from swig_agent.infrastructure.monitoring import ReplyEmoji


class CreateSwig(Operation):
    """
    Create a wallet with one Ed25519 role (the caller, all actions).

    Idempotent: an existing wallet is reported and nothing is written.
    """

    name = "CREATE_SWIG"
    description = (
        "Create a new Swig wallet on Solana with an Ed25519 authority type "
        "and 'all' actions enabled"
    )
    similes = (
        "CREATE_SWIG_WALLET",
        "MAKE_SWIG",
        "INITIALIZE_SWIG",
        "SETUP_SWIG",
        "NEW_SWIG_WALLET",
    )
    category = OperationCategory.ADMIN
    intent = IntentRule(
        all_of=("create", "swig"),
        unless=("fund", "amount"),
        phrases=(
            "create swig",
            "make swig",
            "new swig",
            "setup swig",
            "initialize swig",
            "start swig",
            "build swig",
        ),
    )
    examples = (
        ActionExample(
            "Can you create a new swig wallet for me?",
            "I'll create a new Swig wallet for you.",
        ),
        ActionExample(
            "I need to set up a swig wallet",
            "Creating a new Swig wallet with your authority...",
        ),
    )
    failure_prefix = "create Swig wallet"
    failure_thought = (
        "The Swig wallet creation failed due to an error. This could be due "
        "to network issues, insufficient funds, or configuration problems."
    )

    async def prepare(self, ctx: OperationContext, request: Any) -> OperationPlan:
        address = str(ctx.wallet_address)

        existing = await ctx.gateway.fetch_wallet(ctx.wallet_address)
        if existing is not None:
            ctx.reporter.info(
                f"Wallet already exists at {address}", context=self.name
            )

            def already_exists(signature: Optional[str]) -> OperationResult:
                return OperationResult(
                    summary=f"Swig wallet already exists at address: {address}",
                    thought=(
                        "A Swig wallet already exists for this authority. "
                        "No need to create a new one."
                    ),
                    details={"swig_address": address, "created": False},
                )

            return OperationPlan(describe=already_exists)

        transaction = ctx.composer.create_wallet(ctx.wallet_address, ctx.caller)

        def created(signature: Optional[str]) -> OperationResult:
            return OperationResult(
                summary=(
                    f"{ReplyEmoji.SUCCESS} Swig wallet created successfully!\n\n"
                    f"Swig Address: {address}\n"
                    f"Transaction: {signature}"
                ),
                thought=(
                    "Successfully created a new Swig wallet and confirmed the "
                    "transaction on-chain."
                ),
                signature=signature,
                details={"swig_address": address, "created": True},
            )

        return OperationPlan(describe=created, transaction=transaction)
