"""
Read-only balance queries: GET_SWIG_BALANCE and GET_SWIG_TOKEN_BALANCE.

Neither requires the wallet to exist; an empty derived address simply
reports zero.
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
    short_mint,
)
from swig_agent.application.parsing import ExtractedEntities
from swig_agent.domain.entities import OperationResult
from swig_agent.domain.value_objects import SOL_DECIMALS, TokenAmount
from swig_agent.infrastructure.monitoring import ReplyEmoji


@dataclass(frozen=True)
class BalanceQuery:
    mint: Optional[Pubkey] = None


class GetSwigBalance(Operation):
    """SOL balance of the wallet, or a token balance when a mint is named."""

    name = "GET_SWIG_BALANCE"
    description = "Get the balance of SOL or SPL tokens in the Swig wallet"
    similes = (
        "CHECK_SWIG_BALANCE",
        "SWIG_BALANCE",
        "SHOW_SWIG_BALANCE",
        "WALLET_BALANCE",
    )
    category = OperationCategory.READ
    intent = IntentRule(
        phrases=(
            "swig balance",
            "check swig",
            "balance of swig",
            "how much in swig",
            "swig wallet balance",
        )
    )
    examples = (
        ActionExample(
            "What's the balance of my swig wallet?",
            "I'll check your Swig wallet balance.",
        ),
        ActionExample("Check swig balance", "Checking your Swig wallet balance..."),
    )
    failure_prefix = "get Swig wallet balance"
    failure_thought = (
        "Failed to retrieve the Swig wallet balance. This could be due to "
        "network issues or wallet configuration problems."
    )

    def parse(self, entities: ExtractedEntities) -> BalanceQuery:
        return BalanceQuery(mint=optional_address(entities.mint, "mint"))

    async def prepare(self, ctx: OperationContext, request: BalanceQuery) -> OperationPlan:
        address = str(ctx.wallet_address)

        if request.mint is None:
            lamports = await ctx.gateway.get_native_balance(ctx.wallet_address)
            sol = TokenAmount.from_base_units(lamports, SOL_DECIMALS)
            balance_text = f"SOL Balance: {sol.fixed()} SOL"
            details = {"lamports": lamports}
        else:
            account = await ctx.gateway.get_token_account(
                request.mint, ctx.wallet_address
            )
            if account.exists:
                balance_text = (
                    f"Token Balance: {account.ui_amount.display()} tokens\n"
                    f"Mint: {request.mint}"
                )
            else:
                balance_text = (
                    "Token Balance: 0 tokens (account not found)\n"
                    f"Mint: {request.mint}"
                )
            details = account.to_dict()

        def describe(signature: Optional[str]) -> OperationResult:
            return OperationResult(
                summary=(
                    f"{ReplyEmoji.BALANCE} Swig Wallet Balance\n\n"
                    f"Swig Address: {address}\n"
                    f"{balance_text}"
                ),
                thought="Successfully retrieved the Swig wallet balance information.",
                details=details,
            )

        return OperationPlan(describe=describe)


@dataclass(frozen=True)
class TokenBalanceQuery:
    mint: Pubkey


class GetSwigTokenBalance(Operation):
    """Balance of one SPL token, with raw amount and decimals."""

    name = "GET_SWIG_TOKEN_BALANCE"
    description = "Get the balance of a specific SPL token in the Swig wallet"
    similes = (
        "SWIG_TOKEN_BALANCE",
        "CHECK_SWIG_TOKEN_BALANCE",
        "SWIG_SPL_BALANCE",
        "GET_SWIG_SPL_BALANCE",
        "SHOW_SWIG_TOKEN_BALANCE",
    )
    category = OperationCategory.READ
    intent = IntentRule(
        all_of=("swig", "balance"),
        any_of=("token", "address"),
        phrases=(
            "swig token balance",
            "swig spl balance",
            "token balance in swig",
            "spl balance in swig",
            "check swig token balance",
            "get swig token balance",
            "show swig token balance",
            "what is my swig token balance",
            "how much token in swig",
            "swig balance for token",
            "balance.*swig.*token",
            "token.*balance.*swig",
            "swig.*token.*balance",
        ),
    )
    examples = (
        ActionExample(
            "Get swig token balance for 4zMMC9srt5Ri5X14GAgXhaHii3GnPAEERYPJgZJDncDU",
            "I'll check the token balance in your Swig wallet.",
        ),
        ActionExample(
            "What is my swig balance of token "
            "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v",
            "Checking your Swig SPL token balance...",
        ),
        ActionExample(
            "Check swig token balance",
            "Please specify the token mint address to check the balance.",
        ),
    )
    failure_prefix = "get Swig token balance"
    failure_thought = (
        "The token balance query failed. This could be due to invalid mint "
        "address, network issues, or wallet configuration problems."
    )

    def parse(self, entities: ExtractedEntities) -> TokenBalanceQuery:
        # Keyword-tagged mint first, then the first address in the message
        mint = (
            entities.mint
            or entities.address_after(["for"], ["token"])
            or entities.address_after(["of"], ["token"])
            or entities.first_address
        )
        return TokenBalanceQuery(
            mint=require_address(
                mint,
                "Please specify a token mint address (e.g., 'get swig token "
                "balance for 4zMMC9srt5Ri5X14GAgXhaHii3GnPAEERYPJgZJDncDU')",
                "mint",
            )
        )

    async def prepare(
        self, ctx: OperationContext, request: TokenBalanceQuery
    ) -> OperationPlan:
        account = await ctx.gateway.get_token_account(request.mint, ctx.wallet_address)
        balance = account.ui_amount
        symbol = short_mint(request.mint)
        status = (
            "Token account exists"
            if account.exists
            else "No token account (balance is 0)"
        )

        def describe(signature: Optional[str]) -> OperationResult:
            return OperationResult(
                summary=(
                    f"{ReplyEmoji.TOKEN_BALANCE} Swig Token Balance\n\n"
                    f"Wallet: {ctx.wallet_address}\n"
                    f"Token Mint: {request.mint}\n"
                    f"Token Symbol: {symbol}\n"
                    f"Balance: {balance.value.normalize():,f} tokens\n"
                    f"Raw Balance: {account.amount:,} ({account.decimals} decimals)\n\n"
                    f"{status}"
                ),
                thought=(
                    f"Retrieved token balance for {symbol} in Swig wallet: "
                    f"{balance.display()} tokens."
                ),
                details=account.to_dict(),
            )

        return OperationPlan(describe=describe)
