"""
Transaction Composer - ordered instruction lists for every operation.

Policy:
- Transfers into the wallet are signed directly by the caller.
- Anything debiting the wallet (or changing its roles) goes through
  the Swig program, wrapped or built for the caller's role.
- A missing destination token account is created first, paid by the
  caller and outside the role wrapper, so the wallet never pays rent.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional, Sequence

from solders.instruction import Instruction
from solders.pubkey import Pubkey
from solders.system_program import TransferParams, transfer
from spl.token import instructions as spl_token
from spl.token.constants import TOKEN_PROGRAM_ID

from swig_agent.application.authority_resolver import AuthorityContext
from swig_agent.domain.entities import ALL_ACTIONS, PendingTransaction, Role
from swig_agent.domain.exceptions import ParseError
from swig_agent.domain.services import IChainStateGateway, ISwigProgram
from swig_agent.domain.value_objects import SOL_DECIMALS, TokenAmount
from swig_agent.infrastructure.monitoring import SystemReporter


def to_base_units(amount: Decimal, decimals: int) -> int:
    """
    Scale a human amount exactly into base units.

    Raises:
        ParseError: If the amount is finer than the asset's precision
    """
    try:
        return TokenAmount(amount, decimals).base_units
    except ValueError as e:
        raise ParseError(
            str(e), details={"amount": str(amount), "decimals": decimals}
        ) from e


@dataclass
class TokenTransferPlan:
    """Token transfer instruction plus the setup it depends on."""

    transfer: Instruction
    decimals: int
    base_units: int
    source_account: Pubkey
    destination_account: Pubkey
    setup: List[Instruction] = field(default_factory=list)

    @property
    def creates_destination(self) -> bool:
        return bool(self.setup)


class TransactionComposer:
    """
    Build PendingTransactions from resolved requests.

    Only read-only existence and mint lookups touch the network here.
    """

    def __init__(
        self,
        gateway: IChainStateGateway,
        swig_program: ISwigProgram,
        reporter: Optional[SystemReporter] = None,
    ):
        self.gateway = gateway
        self.swig_program = swig_program
        self.reporter = reporter or SystemReporter(
            name="transaction_composer", level=20, verbose=1
        )

    # ================================================================
    # Instruction builders
    # ================================================================

    @staticmethod
    def native_transfer(
        source: Pubkey, destination: Pubkey, amount: Decimal
    ) -> Instruction:
        """System transfer of ``amount`` SOL."""
        lamports = to_base_units(amount, SOL_DECIMALS)
        return transfer(
            TransferParams(from_pubkey=source, to_pubkey=destination, lamports=lamports)
        )

    async def token_transfer(
        self,
        mint: Pubkey,
        source_owner: Pubkey,
        destination_owner: Pubkey,
        amount: Decimal,
        payer: Pubkey,
    ) -> TokenTransferPlan:
        """
        SPL transfer between the associated accounts of two owners.

        Args:
            mint: Token mint
            source_owner: Owner (signer) of the source account
            destination_owner: Owner of the destination account
            amount: Human amount
            payer: Rent payer if the destination account must be created

        Raises:
            InvalidMintError: If the mint does not exist
            ParseError: If the amount is finer than the mint's decimals
        """
        decimals = await self.gateway.get_mint_decimals(mint)
        base_units = to_base_units(amount, decimals)

        source_account = self.gateway.associated_token_address(mint, source_owner)
        destination_account = self.gateway.associated_token_address(
            mint, destination_owner
        )

        setup: List[Instruction] = []
        if not await self.gateway.account_exists(destination_account):
            self.reporter.debug(
                f"Destination token account {destination_account} absent, "
                "adding create instruction",
                context="TransactionComposer",
            )
            setup.append(
                spl_token.create_associated_token_account(
                    payer, destination_owner, mint
                )
            )

        instruction = spl_token.transfer(
            spl_token.TransferParams(
                program_id=TOKEN_PROGRAM_ID,
                source=source_account,
                dest=destination_account,
                owner=source_owner,
                amount=base_units,
            )
        )
        return TokenTransferPlan(
            transfer=instruction,
            decimals=decimals,
            base_units=base_units,
            source_account=source_account,
            destination_account=destination_account,
            setup=setup,
        )

    # ================================================================
    # Envelopes
    # ================================================================

    def compose(
        self,
        payer: Pubkey,
        body: Sequence[Instruction],
        setup: Sequence[Instruction] = (),
        authority: Optional[AuthorityContext] = None,
    ) -> PendingTransaction:
        """
        Assemble [setup..., body] or [setup..., sign(body)].

        When ``authority`` is given the body debits the wallet and is
        wrapped through the caller's role.
        """
        instructions = list(setup)
        if authority is not None:
            instructions.append(
                self.swig_program.sign_instruction(
                    authority.wallet, authority.caller_role, payer, list(body)
                )
            )
        else:
            instructions.extend(body)
        return PendingTransaction(instructions=instructions, fee_payer=payer)

    def create_wallet(self, wallet_address: Pubkey, owner: Pubkey) -> PendingTransaction:
        """Create a wallet whose first role is ``owner`` with all actions."""
        instruction = self.swig_program.create_wallet_instruction(
            wallet_address=wallet_address,
            wallet_id=bytes(owner),
            authority=owner,
            payer=owner,
            actions=ALL_ACTIONS,
        )
        return PendingTransaction(instructions=[instruction], fee_payer=owner)

    def add_authority(
        self, authority: AuthorityContext, new_authority: Pubkey
    ) -> PendingTransaction:
        instruction = self.swig_program.add_authority_instruction(
            authority.wallet,
            authority.caller_role,
            authority.caller,
            new_authority,
            ALL_ACTIONS,
        )
        return PendingTransaction(instructions=[instruction], fee_payer=authority.caller)

    def remove_authority(
        self, authority: AuthorityContext, target: Role
    ) -> PendingTransaction:
        instruction = self.swig_program.remove_authority_instruction(
            authority.wallet,
            authority.caller_role,
            authority.caller,
            target,
        )
        return PendingTransaction(instructions=[instruction], fee_payer=authority.caller)
