"""
Operation Pipeline - one engine for every operation strategy.

Stages: feature gate -> signer -> wallet address -> extract -> parse ->
resolve/compose (operation.prepare) -> submit and confirm -> format.
Any failure jumps straight to the failure payload. Nothing is retried.
"""

from typing import Optional

from solders.keypair import Keypair

from swig_agent.application.authority_resolver import AuthorityResolver
from swig_agent.application.operations.base import Operation, OperationContext
from swig_agent.application.parsing import EntityExtractor
from swig_agent.application.selection import ensure_enabled
from swig_agent.application.transaction_composer import TransactionComposer
from swig_agent.config.settings import Settings
from swig_agent.domain.entities import OperationResult
from swig_agent.domain.exceptions import SwigAgentError
from swig_agent.domain.services import IChainStateGateway, ITransactionSubmitter
from swig_agent.infrastructure.blockchain.solana_utils import load_keypair
from swig_agent.infrastructure.monitoring import LogEmoji, SystemReporter
from swig_agent.presentation.formatter import ResponseFormatter
from swig_agent.presentation.schemas import Message, ResponseContent


class OperationPipeline:
    """
    Execute an operation strategy against live chain state.

    Invocations share no mutable state: every run loads the signer and
    re-reads the wallet.
    """

    def __init__(
        self,
        settings: Settings,
        gateway: IChainStateGateway,
        submitter: ITransactionSubmitter,
        composer: TransactionComposer,
        resolver: AuthorityResolver,
        extractor: Optional[EntityExtractor] = None,
        formatter: Optional[ResponseFormatter] = None,
        reporter: Optional[SystemReporter] = None,
    ):
        self.settings = settings
        self.gateway = gateway
        self.submitter = submitter
        self.composer = composer
        self.resolver = resolver
        self.extractor = extractor or EntityExtractor()
        self.reporter = reporter or SystemReporter(
            name="operation_pipeline", level=20, verbose=1
        )
        self.formatter = formatter or ResponseFormatter(reporter=self.reporter)

    async def run(self, operation: Operation, message: Message) -> ResponseContent:
        """
        Run one operation for one message.

        Args:
            operation: Strategy to execute
            message: Inbound runtime message

        Returns:
            Success or failure payload. Never raises.
        """
        self.reporter.info(
            f"{LogEmoji.START} {operation.name} started",
            context="OperationPipeline",
            verbose_level=2,
        )

        try:
            result = await self._execute(operation, message)
        except SwigAgentError as e:
            self.reporter.error(
                f"{LogEmoji.REFUSED} {operation.name} failed: "
                f"{type(e).__name__}: {e.message}",
                context="OperationPipeline",
            )
            return self.formatter.failure(operation, e, message.source)
        except Exception as e:
            self.reporter.critical(
                f"{LogEmoji.ERROR} {operation.name} crashed: {type(e).__name__}: {e}",
                context="OperationPipeline",
            )
            return self.formatter.failure(operation, e, message.source)

        self.reporter.info(
            f"{LogEmoji.CONFIRMED} {operation.name} completed"
            + (f" ({result.signature})" if result.signature else ""),
            context="OperationPipeline",
        )
        return self.formatter.success(operation, result, message.source)

    async def _execute(self, operation: Operation, message: Message) -> OperationResult:
        # 1. Feature gate
        ensure_enabled(operation, self.settings)

        # 2. Signer
        signer: Keypair = load_keypair(self.settings.SOLANA_PRIVATE_KEY)
        caller = signer.pubkey()

        # 3. Wallet address
        wallet_address = self.gateway.wallet_address_for(caller)
        self._stage(f"caller={caller} wallet={wallet_address}")

        # 4. Extract and parse (no chain I/O before this succeeds)
        entities = self.extractor.extract(message.text)
        request = operation.parse(entities)
        self._stage(f"parsed request for {operation.name}")

        # 5. Resolve and compose
        ctx = OperationContext(
            caller=caller,
            wallet_address=wallet_address,
            gateway=self.gateway,
            resolver=self.resolver,
            composer=self.composer,
            reporter=self.reporter,
        )
        plan = await operation.prepare(ctx, request)

        # 6. Submit and confirm
        signature: Optional[str] = None
        if plan.requires_submission:
            self._stage(
                f"{LogEmoji.SUBMIT} submitting "
                f"{len(plan.transaction.instructions)} instruction(s)"
            )
            signature = await self.submitter.submit(plan.transaction, signer)

        # 7. Describe
        return plan.describe(signature)

    def _stage(self, msg: str) -> None:
        self.reporter.info(
            f"{LogEmoji.STAGE} {msg}", context="OperationPipeline", verbose_level=2
        )
