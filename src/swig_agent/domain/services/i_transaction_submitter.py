"""
Transaction Submitter interface.
"""

from abc import ABC, abstractmethod

from solders.keypair import Keypair

from swig_agent.domain.entities.pending_transaction import PendingTransaction


class ITransactionSubmitter(ABC):
    """
    Interface for signing, sending and confirming transactions.

    Implementations never retry: each call fetches one fresh blockhash,
    sends once and waits once.
    """

    @abstractmethod
    async def submit(self, pending: PendingTransaction, signer: Keypair) -> str:
        """
        Sign, send and confirm a transaction.

        Args:
            pending: Instruction envelope; fee payer must be the signer
            signer: Caller keypair

        Returns:
            Transaction signature (base58)

        Raises:
            SubmissionError: If the transaction is rejected
            ConfirmationError: If confirmation fails or times out
        """
