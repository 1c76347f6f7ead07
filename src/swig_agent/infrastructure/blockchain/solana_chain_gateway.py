"""
Solana Chain State Gateway.

Reads wallet, balance, mint and token-account state through the async
Solana RPC client. Nothing is cached; every call hits the RPC node.
"""

from typing import Optional

from solana.exceptions import SolanaRpcException
from solana.rpc.async_api import AsyncClient
from solana.rpc.core import RPCException
from solders.account import Account
from solders.pubkey import Pubkey
from spl.token.constants import TOKEN_PROGRAM_ID

from swig_agent.domain.entities import TokenAccount, Wallet
from swig_agent.domain.exceptions import (
    InvalidMintError,
    RPCError,
    WalletNotFoundError,
)
from swig_agent.domain.services import IChainStateGateway, ISwigProgram
from swig_agent.infrastructure.blockchain.solana_utils import (
    derive_associated_token_address,
    derive_swig_pda,
)
from swig_agent.infrastructure.monitoring import SystemReporter

# SPL Mint layout: decimals byte follows authority option (36) + supply (8)
MINT_ACCOUNT_SIZE = 82
MINT_DECIMALS_OFFSET = 44

# SPL Token account layout: mint (32) + owner (32) + amount (u64)
TOKEN_ACCOUNT_SIZE = 165
TOKEN_AMOUNT_OFFSET = 64


class SolanaChainGateway(IChainStateGateway):
    """
    Chain state gateway over ``solana.rpc.async_api.AsyncClient``.

    Wallet account data is decoded by the injected Swig program binding.
    """

    def __init__(
        self,
        client: AsyncClient,
        swig_program: ISwigProgram,
        commitment: str = "confirmed",
        reporter: Optional[SystemReporter] = None,
    ):
        """
        Initialize gateway.

        Args:
            client: Async Solana RPC client
            swig_program: Swig SDK binding
            commitment: Commitment level for reads
            reporter: Optional SystemReporter for logging
        """
        self.client = client
        self.swig_program = swig_program
        self.commitment = commitment
        self.reporter = reporter or SystemReporter(
            name="chain_gateway", level=20, verbose=1
        )

    def wallet_address_for(self, owner: Pubkey) -> Pubkey:
        address, _ = derive_swig_pda(bytes(owner), self.swig_program.program_id)
        return address

    def associated_token_address(self, mint: Pubkey, owner: Pubkey) -> Pubkey:
        return derive_associated_token_address(mint, owner)

    async def _get_account(self, address: Pubkey) -> Optional[Account]:
        try:
            response = await self.client.get_account_info(
                address, commitment=self.commitment
            )
        except (RPCException, SolanaRpcException) as e:
            self.reporter.error(
                f"get_account_info failed for {address}: {e}",
                context="ChainGateway",
            )
            raise RPCError(
                f"Failed to read account {address}: {e}",
                details={"address": str(address)},
            ) from e
        return response.value

    async def fetch_wallet(self, address: Pubkey) -> Optional[Wallet]:
        account = await self._get_account(address)
        if account is None:
            self.reporter.debug(f"No wallet at {address}", context="ChainGateway")
            return None
        wallet = self.swig_program.decode_wallet(address, bytes(account.data))
        self.reporter.debug(
            f"Wallet {address} has {wallet.role_count} role(s)",
            context="ChainGateway",
        )
        return wallet

    async def get_wallet(self, address: Pubkey) -> Wallet:
        wallet = await self.fetch_wallet(address)
        if wallet is None:
            raise WalletNotFoundError(str(address))
        return wallet

    async def get_native_balance(self, address: Pubkey) -> int:
        try:
            response = await self.client.get_balance(
                address, commitment=self.commitment
            )
        except (RPCException, SolanaRpcException) as e:
            raise RPCError(
                f"Failed to read balance of {address}: {e}",
                details={"address": str(address)},
            ) from e
        return response.value

    async def get_mint_decimals(self, mint: Pubkey) -> int:
        """
        Read decimals straight from the mint account.

        Raises:
            InvalidMintError: If the account is absent, not owned by the
                token program, or too short to be a mint
        """
        account = await self._get_account(mint)
        if account is None or account.owner != TOKEN_PROGRAM_ID:
            raise InvalidMintError(str(mint))

        data = bytes(account.data)
        if len(data) < MINT_ACCOUNT_SIZE:
            raise InvalidMintError(str(mint))
        return data[MINT_DECIMALS_OFFSET]

    async def account_exists(self, address: Pubkey) -> bool:
        return await self._get_account(address) is not None

    async def get_token_account(self, mint: Pubkey, owner: Pubkey) -> TokenAccount:
        address = self.associated_token_address(mint, owner)
        decimals = await self.get_mint_decimals(mint)
        account = await self._get_account(address)

        if account is None:
            return TokenAccount(
                address=address,
                mint=mint,
                owner=owner,
                exists=False,
                decimals=decimals,
            )

        data = bytes(account.data)
        if len(data) < TOKEN_ACCOUNT_SIZE:
            raise RPCError(
                f"Account {address} is not a token account",
                details={"address": str(address)},
            )
        amount = int.from_bytes(
            data[TOKEN_AMOUNT_OFFSET : TOKEN_AMOUNT_OFFSET + 8], "little"
        )
        return TokenAccount(
            address=address,
            mint=mint,
            owner=owner,
            exists=True,
            amount=amount,
            decimals=decimals,
        )

    async def close(self) -> None:
        await self.client.close()
