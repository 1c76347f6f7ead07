"""
Solana Transaction Submitter.

Fetches a fresh blockhash, signs with the caller key, sends once and
waits for confirmation at the configured commitment. No retries.
"""

from typing import Optional

from solana.exceptions import SolanaRpcException
from solana.rpc.async_api import AsyncClient
from solana.rpc.core import (
    RPCException,
    TransactionExpiredBlockheightExceededError,
    UnconfirmedTxError,
)
from solana.rpc.types import TxOpts
from solders.keypair import Keypair
from solders.message import Message
from solders.transaction import Transaction

from swig_agent.domain.entities import PendingTransaction
from swig_agent.domain.exceptions import ConfirmationError, SubmissionError
from swig_agent.domain.services import ITransactionSubmitter
from swig_agent.infrastructure.monitoring import SystemReporter


class SolanaTransactionSubmitter(ITransactionSubmitter):
    """Submit transactions through ``AsyncClient``."""

    def __init__(
        self,
        client: AsyncClient,
        commitment: str = "confirmed",
        reporter: Optional[SystemReporter] = None,
    ):
        """
        Initialize submitter.

        Args:
            client: Async Solana RPC client
            commitment: Commitment for preflight and confirmation
            reporter: Optional SystemReporter for logging
        """
        self.client = client
        self.commitment = commitment
        self.reporter = reporter or SystemReporter(
            name="submitter", level=20, verbose=1
        )

    async def submit(self, pending: PendingTransaction, signer: Keypair) -> str:
        if pending.fee_payer != signer.pubkey():
            raise SubmissionError(
                "Fee payer must be the signing key",
                details={"fee_payer": str(pending.fee_payer)},
            )

        try:
            latest = await self.client.get_latest_blockhash(self.commitment)
        except (RPCException, SolanaRpcException) as e:
            raise SubmissionError(f"Failed to fetch recent blockhash: {e}") from e

        blockhash = latest.value.blockhash
        last_valid_block_height = latest.value.last_valid_block_height
        pending.recent_blockhash = blockhash

        message = Message.new_with_blockhash(
            pending.instructions, pending.fee_payer, blockhash
        )
        transaction = Transaction([signer], message, blockhash)

        self.reporter.debug(
            f"Sending {len(pending.instructions)} instruction(s), "
            f"blockhash {blockhash}",
            context="Submitter",
        )

        try:
            response = await self.client.send_raw_transaction(
                bytes(transaction),
                opts=TxOpts(
                    skip_preflight=False,
                    preflight_commitment=self.commitment,
                ),
            )
        except (RPCException, SolanaRpcException) as e:
            self.reporter.error(f"Send failed: {e}", context="Submitter")
            raise SubmissionError(f"Transaction rejected: {e}") from e

        signature = response.value
        self.reporter.info(f"Sent {signature}", context="Submitter", verbose_level=2)

        try:
            confirmation = await self.client.confirm_transaction(
                signature,
                self.commitment,
                last_valid_block_height=last_valid_block_height,
            )
        except (
            UnconfirmedTxError,
            TransactionExpiredBlockheightExceededError,
            RPCException,
            SolanaRpcException,
        ) as e:
            self.reporter.error(
                f"Confirmation failed for {signature}: {e}", context="Submitter"
            )
            raise ConfirmationError(
                f"Transaction {signature} was not confirmed: {e}",
                signature=str(signature),
            ) from e

        statuses = confirmation.value
        status = statuses[0] if statuses else None
        if status is not None and status.err is not None:
            raise ConfirmationError(
                f"Transaction {signature} failed: {status.err}",
                signature=str(signature),
            )

        self.reporter.info(
            f"Confirmed {signature} ({self.commitment})",
            context="Submitter",
            verbose_level=2,
        )
        return str(signature)
