"""
Test fixtures and configuration.
"""

import base58
import pytest
from solders.keypair import Keypair

from swig_agent.config.settings import Settings
from swig_agent.di.container import DIContainer
from swig_agent.domain.entities import ALL_ACTIONS, Role, Wallet
from swig_agent.infrastructure.monitoring import SystemReporter
from tests.helpers.fake_chain import (
    FakeChainGateway,
    FakeChainSubmitter,
    FakeSwigProgram,
    InMemoryChain,
)

LAMPORTS_PER_SOL = 1_000_000_000


def make_settings(keypair: Keypair = None, **overrides) -> Settings:
    """Settings built from explicit values only."""
    values = {
        "SOLANA_PRIVATE_KEY": (
            base58.b58encode(bytes(keypair)).decode() if keypair else None
        ),
        "SWIG_TRANSFERS_ENABLED": True,
        "SWIG_AUTHORITY_MANAGEMENT_ENABLED": True,
        "LOG_LEVEL": "DEBUG",
        "VERBOSE": 0,
    }
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def reporter() -> SystemReporter:
    return SystemReporter(name="swig_agent_test", level="DEBUG", verbose=0)


@pytest.fixture
def caller() -> Keypair:
    return Keypair()


@pytest.fixture
def settings(caller: Keypair) -> Settings:
    return make_settings(caller)


@pytest.fixture
def chain() -> InMemoryChain:
    return InMemoryChain()


@pytest.fixture
def program() -> FakeSwigProgram:
    return FakeSwigProgram()


@pytest.fixture
def gateway(chain: InMemoryChain, program: FakeSwigProgram) -> FakeChainGateway:
    return FakeChainGateway(chain, program)


@pytest.fixture
def submitter(chain: InMemoryChain, program: FakeSwigProgram) -> FakeChainSubmitter:
    return FakeChainSubmitter(chain, program)


@pytest.fixture
def wallet_address(gateway: FakeChainGateway, caller: Keypair):
    return gateway.wallet_address_for(caller.pubkey())


@pytest.fixture
def existing_wallet(chain: InMemoryChain, wallet_address, caller: Keypair) -> Wallet:
    """Wallet owned by the caller (role 0) holding 10 SOL."""
    wallet = Wallet(wallet_address, (Role(0, caller.pubkey(), ALL_ACTIONS),))
    chain.wallets[wallet_address] = wallet
    chain.lamports[wallet_address] = 10 * LAMPORTS_PER_SOL
    chain.lamports[caller.pubkey()] = 5 * LAMPORTS_PER_SOL
    return wallet


@pytest.fixture
def container(settings, program, gateway, submitter, reporter) -> DIContainer:
    return DIContainer(
        settings,
        swig_program=program,
        gateway=gateway,
        submitter=submitter,
        reporter=reporter,
    )
