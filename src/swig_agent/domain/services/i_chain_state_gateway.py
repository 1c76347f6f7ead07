"""
Chain State Gateway interface.

Defines contract for reading wallet, balance and token-account state.
Every call re-reads chain state; nothing is cached across operations.
"""

from abc import ABC, abstractmethod
from typing import Optional

from solders.pubkey import Pubkey

from swig_agent.domain.entities.token_account import TokenAccount
from swig_agent.domain.entities.wallet import Wallet


class IChainStateGateway(ABC):
    """Interface for read-only chain queries."""

    @abstractmethod
    def wallet_address_for(self, owner: Pubkey) -> Pubkey:
        """Derived Swig wallet address of an owner key."""

    @abstractmethod
    def associated_token_address(self, mint: Pubkey, owner: Pubkey) -> Pubkey:
        """Associated token account address of (mint, owner)."""

    @abstractmethod
    async def fetch_wallet(self, address: Pubkey) -> Optional[Wallet]:
        """
        Fetch a wallet and its roles.

        Returns:
            Wallet, or None if no wallet account exists

        Raises:
            RPCError: If query fails
        """

    @abstractmethod
    async def get_wallet(self, address: Pubkey) -> Wallet:
        """
        Fetch a wallet that must exist.

        Raises:
            WalletNotFoundError: If no wallet account exists
            RPCError: If query fails
        """

    @abstractmethod
    async def get_native_balance(self, address: Pubkey) -> int:
        """
        Get native balance in lamports.

        Raises:
            RPCError: If query fails
        """

    @abstractmethod
    async def get_mint_decimals(self, mint: Pubkey) -> int:
        """
        Get decimals of a token mint.

        Raises:
            InvalidMintError: If the mint does not exist
        """

    @abstractmethod
    async def account_exists(self, address: Pubkey) -> bool:
        """
        Check if an account exists on chain.

        Raises:
            RPCError: If query fails
        """

    @abstractmethod
    async def get_token_account(self, mint: Pubkey, owner: Pubkey) -> TokenAccount:
        """
        Get the associated token account of (mint, owner).

        An absent account is returned with exists=False and amount 0.

        Raises:
            RPCError: If query fails
        """

    @abstractmethod
    async def close(self) -> None:
        """Close any open connections."""
