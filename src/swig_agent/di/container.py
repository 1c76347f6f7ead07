"""
Dependency Injection container for the Swig agent.

Manages lifecycle and dependencies of all application components.
"""

import importlib
from typing import Optional

from solana.rpc.async_api import AsyncClient

from swig_agent.application.authority_resolver import AuthorityResolver
from swig_agent.application.parsing import EntityExtractor
from swig_agent.application.pipeline import OperationPipeline
from swig_agent.application.transaction_composer import TransactionComposer
from swig_agent.config.settings import Settings
from swig_agent.domain.exceptions import ConfigurationError
from swig_agent.domain.services import (
    IChainStateGateway,
    ISwigProgram,
    ITransactionSubmitter,
)
from swig_agent.infrastructure.blockchain import (
    SolanaChainGateway,
    SolanaTransactionSubmitter,
)
from swig_agent.infrastructure.monitoring import SystemReporter
from swig_agent.presentation.formatter import ResponseFormatter
from swig_agent.presentation.plugin import SwigPlugin


def load_swig_program(
    adapter_path: Optional[str], settings: Settings, client: AsyncClient
) -> ISwigProgram:
    """
    Import the host's Swig SDK binding.

    Args:
        adapter_path: "package.module:factory"; the factory is called
            with (settings, client)
        settings: Application settings
        client: Shared RPC client

    Raises:
        ConfigurationError: If the path is missing, unimportable, or the
            factory does not return an ISwigProgram
    """
    if not adapter_path or ":" not in adapter_path:
        raise ConfigurationError(
            "SWIG_PROGRAM_ADAPTER must name the Swig SDK binding as "
            "'module:factory'",
            details={"SWIG_PROGRAM_ADAPTER": adapter_path},
        )

    module_name, factory_name = adapter_path.split(":", 1)
    try:
        module = importlib.import_module(module_name)
        factory = getattr(module, factory_name)
    except (ImportError, AttributeError) as e:
        raise ConfigurationError(
            f"Cannot load Swig program adapter {adapter_path}: {e}",
            details={"SWIG_PROGRAM_ADAPTER": adapter_path},
        ) from e

    program = factory(settings, client)
    if not isinstance(program, ISwigProgram):
        raise ConfigurationError(
            f"{adapter_path} returned {type(program).__name__}, "
            "expected an ISwigProgram",
            details={"SWIG_PROGRAM_ADAPTER": adapter_path},
        )
    return program


class DIContainer:
    """
    Dependency Injection container.

    Creates shared collaborators lazily. Each collaborator may be
    supplied up front (tests pass fakes for the chain and the SDK).
    """

    def __init__(
        self,
        settings: Settings,
        swig_program: Optional[ISwigProgram] = None,
        gateway: Optional[IChainStateGateway] = None,
        submitter: Optional[ITransactionSubmitter] = None,
        reporter: Optional[SystemReporter] = None,
    ):
        """
        Initialize container with settings.

        Args:
            settings: Application settings
            swig_program: Swig SDK binding (default: SWIG_PROGRAM_ADAPTER)
            gateway: Chain reads (default: SolanaChainGateway)
            submitter: Transaction submission (default: Solana RPC)
            reporter: Shared logger (default: from settings)
        """
        self.settings = settings

        self._reporter = reporter
        self._client: Optional[AsyncClient] = None
        self._swig_program = swig_program
        self._gateway = gateway
        self._submitter = submitter
        self._resolver: Optional[AuthorityResolver] = None
        self._composer: Optional[TransactionComposer] = None
        self._pipeline: Optional[OperationPipeline] = None
        self._plugin: Optional[SwigPlugin] = None

    @property
    def reporter(self) -> SystemReporter:
        if self._reporter is None:
            self._reporter = SystemReporter.from_settings(self.settings)
        return self._reporter

    @property
    def client(self) -> AsyncClient:
        """Shared async RPC client."""
        if self._client is None:
            self._client = AsyncClient(
                self.settings.SOLANA_RPC_URL,
                commitment=self.settings.SOLANA_COMMITMENT,
            )
        return self._client

    @property
    def swig_program(self) -> ISwigProgram:
        if self._swig_program is None:
            self._swig_program = load_swig_program(
                self.settings.SWIG_PROGRAM_ADAPTER, self.settings, self.client
            )
        return self._swig_program

    @property
    def gateway(self) -> IChainStateGateway:
        if self._gateway is None:
            self._gateway = SolanaChainGateway(
                client=self.client,
                swig_program=self.swig_program,
                commitment=self.settings.SOLANA_COMMITMENT,
                reporter=self.reporter,
            )
        return self._gateway

    @property
    def submitter(self) -> ITransactionSubmitter:
        if self._submitter is None:
            self._submitter = SolanaTransactionSubmitter(
                client=self.client,
                commitment=self.settings.SOLANA_COMMITMENT,
                reporter=self.reporter,
            )
        return self._submitter

    @property
    def resolver(self) -> AuthorityResolver:
        if self._resolver is None:
            self._resolver = AuthorityResolver(self.gateway, reporter=self.reporter)
        return self._resolver

    @property
    def composer(self) -> TransactionComposer:
        if self._composer is None:
            self._composer = TransactionComposer(
                self.gateway, self.swig_program, reporter=self.reporter
            )
        return self._composer

    @property
    def pipeline(self) -> OperationPipeline:
        """
        Get OperationPipeline singleton.

        Returns:
            OperationPipeline wired to the chain collaborators
        """
        if self._pipeline is None:
            self._pipeline = OperationPipeline(
                settings=self.settings,
                gateway=self.gateway,
                submitter=self.submitter,
                composer=self.composer,
                resolver=self.resolver,
                extractor=EntityExtractor(),
                formatter=ResponseFormatter(reporter=self.reporter),
                reporter=self.reporter,
            )
        return self._pipeline

    @property
    def plugin(self) -> SwigPlugin:
        """Runtime adapter exposing the enabled operations."""
        if self._plugin is None:
            self._plugin = SwigPlugin(self.settings, self.pipeline)
        return self._plugin

    async def shutdown(self) -> None:
        """Close the gateway and the RPC client."""
        if self._gateway is not None:
            await self._gateway.close()
        # The Solana gateway closes the shared client itself
        shared = getattr(self._gateway, "client", None) is self._client
        if self._client is not None and not shared:
            await self._client.close()
        self._client = None
