"""
Unit tests for DIContainer and the Swig program loader.

Usage:
    pytest tests/unit/di/test_container.py
"""

from unittest.mock import AsyncMock

import pytest

from swig_agent.di import DIContainer, load_swig_program
from swig_agent.domain.exceptions import ConfigurationError
from swig_agent.infrastructure.blockchain import SolanaChainGateway
from tests.helpers.fake_chain import FakeSwigProgram

ADAPTERS = "tests.helpers.fake_chain"


class TestLoadSwigProgram:
    """Unit tests for load_swig_program."""

    def test_loads_factory(self, settings):
        """Test the factory is called and its program returned."""
        program = load_swig_program(f"{ADAPTERS}:fake_program_factory", settings, None)
        assert isinstance(program, FakeSwigProgram)

    @pytest.mark.parametrize(
        "path",
        [
            None,
            "",
            "tests.helpers.fake_chain",
            "swig_agent_missing_module:factory",
            f"{ADAPTERS}:no_such_factory",
            f"{ADAPTERS}:not_a_program_factory",
        ],
    )
    def test_rejects_bad_adapter(self, settings, path):
        """Test unusable adapter paths raise ConfigurationError."""
        with pytest.raises(ConfigurationError) as exc:
            load_swig_program(path, settings, None)
        assert exc.value.details["SWIG_PROGRAM_ADAPTER"] == path


class TestDIContainer:
    """Unit tests for DIContainer."""

    # ================================================================
    # Wiring tests
    # ================================================================

    def test_collaborators_are_singletons(self, container):
        """Test lazy properties build each collaborator once."""
        assert container.pipeline is container.pipeline
        assert container.plugin is container.plugin
        assert container.pipeline.gateway is container.gateway
        assert container.composer.swig_program is container.swig_program

    def test_default_gateway_shares_client(self, settings, reporter):
        """Test the Solana gateway and submitter share one RPC client."""
        container = DIContainer(settings, swig_program=FakeSwigProgram(), reporter=reporter)

        assert isinstance(container.gateway, SolanaChainGateway)
        assert container.gateway.client is container.submitter.client

    def test_missing_adapter_fails_on_use(self, settings, reporter):
        """Test the SDK binding is only required when first needed."""
        container = DIContainer(settings, reporter=reporter)

        with pytest.raises(ConfigurationError):
            container.swig_program

    # ================================================================
    # Shutdown tests
    # ================================================================

    async def test_shutdown_closes_injected_gateway(self, container, gateway):
        """Test shutdown closes the gateway."""
        await container.shutdown()
        assert gateway.closed

    async def test_shutdown_closes_shared_client_once(self, settings, reporter):
        """Test the shared client is closed through the gateway only."""
        container = DIContainer(settings, swig_program=FakeSwigProgram(), reporter=reporter)
        client = AsyncMock()
        container._client = client
        container.gateway

        await container.shutdown()

        client.close.assert_awaited_once()
        assert container._client is None

    async def test_shutdown_without_collaborators(self, settings, reporter):
        """Test shutdown before any use is a no-op."""
        await DIContainer(settings, reporter=reporter).shutdown()
