"""
Swig Program interface.

Defines the contract of the Swig SDK binding: account decoding and
instruction builders. No network I/O happens behind this interface.
"""

from abc import ABC, abstractmethod
from typing import FrozenSet, List

from solders.instruction import Instruction
from solders.pubkey import Pubkey

from swig_agent.domain.entities.wallet import Role, Wallet


class ISwigProgram(ABC):
    """
    Interface for the Swig on-chain program's client-side builders.

    Clean Architecture: Domain layer defines interface, the host
    supplies the concrete SDK binding (see SWIG_PROGRAM_ADAPTER).
    """

    @property
    @abstractmethod
    def program_id(self) -> Pubkey:
        """Swig program id."""

    @abstractmethod
    def decode_wallet(self, address: Pubkey, data: bytes) -> Wallet:
        """
        Decode raw account data into a Wallet with its roles.

        Args:
            address: Wallet account address
            data: Raw account data

        Returns:
            Wallet entity, roles in on-chain order
        """

    @abstractmethod
    def create_wallet_instruction(
        self,
        wallet_address: Pubkey,
        wallet_id: bytes,
        authority: Pubkey,
        payer: Pubkey,
        actions: FrozenSet[str],
    ) -> Instruction:
        """
        Build the instruction creating a wallet with one Ed25519 role.

        Args:
            wallet_address: Derived wallet address
            wallet_id: Seed id of the wallet (the owner's key bytes)
            authority: Key bound to the first role
            payer: Rent payer
            actions: Permission set of the first role
        """

    @abstractmethod
    def sign_instruction(
        self,
        wallet: Wallet,
        role: Role,
        payer: Pubkey,
        instructions: List[Instruction],
    ) -> Instruction:
        """
        Wrap instructions so the program executes them as the wallet.

        Args:
            wallet: Wallet being debited
            role: Caller's resolved role
            payer: Fee payer and role authority signer
            instructions: Inner instructions, executed in order

        Returns:
            Single role-authorized wrapper instruction
        """

    @abstractmethod
    def add_authority_instruction(
        self,
        wallet: Wallet,
        role: Role,
        payer: Pubkey,
        new_authority: Pubkey,
        actions: FrozenSet[str],
    ) -> Instruction:
        """
        Build the instruction adding an Ed25519 role to the wallet.

        Args:
            wallet: Target wallet
            role: Caller's resolved role
            payer: Fee payer and role authority signer
            new_authority: Key bound to the new role
            actions: Permission set of the new role
        """

    @abstractmethod
    def remove_authority_instruction(
        self,
        wallet: Wallet,
        role: Role,
        payer: Pubkey,
        target: Role,
    ) -> Instruction:
        """
        Build the instruction removing a role from the wallet.

        Args:
            wallet: Target wallet
            role: Caller's resolved role
            payer: Fee payer and role authority signer
            target: Role to remove
        """
