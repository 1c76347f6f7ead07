"""
Unit tests for TransactionComposer.

Tests instruction ordering, role wrapping and conditional account
creation.

Usage:
    pytest tests/unit/application/test_transaction_composer.py
"""

from decimal import Decimal

import pytest
from solders.pubkey import Pubkey
from solders.system_program import ID as SYSTEM_PROGRAM_ID
from solders.system_program import decode_transfer
from spl.token.constants import ASSOCIATED_TOKEN_PROGRAM_ID, TOKEN_PROGRAM_ID

from swig_agent.application.authority_resolver import AuthorityContext
from swig_agent.application.transaction_composer import (
    TransactionComposer,
    to_base_units,
)
from swig_agent.domain.entities import ALL_ACTIONS, Role, Wallet
from swig_agent.domain.exceptions import InvalidMintError, ParseError


@pytest.fixture
def composer(gateway, program, reporter) -> TransactionComposer:
    return TransactionComposer(gateway, program, reporter=reporter)


@pytest.fixture
def authority() -> AuthorityContext:
    caller = Pubkey.new_unique()
    role = Role(0, caller, ALL_ACTIONS)
    wallet = Wallet(Pubkey.new_unique(), (role,))
    return AuthorityContext(wallet=wallet, caller=caller, caller_roles=(role,))


class TestTransactionComposer:
    """Unit tests for TransactionComposer."""

    # ================================================================
    # Native transfer tests
    # ================================================================

    def test_native_transfer_lamports(self, composer):
        """Test SOL amounts become exact lamports."""
        source, dest = Pubkey.new_unique(), Pubkey.new_unique()
        ix = composer.native_transfer(source, dest, Decimal("1.5"))

        params = decode_transfer(ix)
        assert ix.program_id == SYSTEM_PROGRAM_ID
        assert params["lamports"] == 1_500_000_000
        assert params["from_pubkey"] == source
        assert params["to_pubkey"] == dest

    def test_native_transfer_rejects_sub_lamport(self, composer):
        """Test amounts finer than a lamport are parse errors."""
        with pytest.raises(ParseError):
            composer.native_transfer(
                Pubkey.new_unique(), Pubkey.new_unique(), Decimal("0.0000000001")
            )

    def test_native_transfer_rejects_u64_overflow(self, composer):
        """Test SOL amounts beyond u64 lamports are parse errors."""
        with pytest.raises(ParseError, match="too large to transfer") as exc:
            composer.native_transfer(
                Pubkey.new_unique(), Pubkey.new_unique(), Decimal("99999999999")
            )
        assert exc.value.details == {"amount": "99999999999", "decimals": 9}

    def test_to_base_units_details(self):
        """Test the parse error carries amount and decimals."""
        with pytest.raises(ParseError) as exc:
            to_base_units(Decimal("1.123"), 2)
        assert exc.value.details == {"amount": "1.123", "decimals": 2}

    # ================================================================
    # Envelope tests
    # ================================================================

    def test_unwrapped_compose(self, composer):
        """Test caller-funded bodies are not wrapped."""
        payer = Pubkey.new_unique()
        ix = composer.native_transfer(payer, Pubkey.new_unique(), Decimal("1"))

        pending = composer.compose(payer, [ix])

        assert pending.instructions == [ix]
        assert pending.fee_payer == payer

    def test_wrapped_compose(self, composer, program, authority):
        """Test wallet debits go through the role's sign instruction."""
        ix = composer.native_transfer(
            authority.wallet.address, Pubkey.new_unique(), Decimal("1")
        )

        pending = composer.compose(authority.caller, [ix], authority=authority)

        assert pending.program_ids == [program.program_id]
        payload = program.payload(pending.instructions[0])
        assert payload["op"] == "sign"
        assert payload["role_id"] == 0
        assert program.bundles[payload["bundle"]] == [ix]

    def test_setup_stays_outside_wrap(self, composer, program, authority):
        """Test setup instructions precede the wrapper, unwrapped."""
        setup = composer.native_transfer(
            authority.caller, Pubkey.new_unique(), Decimal("0.1")
        )
        body = composer.native_transfer(
            authority.wallet.address, Pubkey.new_unique(), Decimal("1")
        )

        pending = composer.compose(authority.caller, [body], [setup], authority)

        assert pending.instructions[0] == setup
        assert pending.program_ids[1] == program.program_id

    # ================================================================
    # Token transfer tests
    # ================================================================

    async def test_token_transfer_creates_missing_account(self, composer, chain):
        """Test a missing destination account is created first."""
        mint = chain.add_mint(decimals=6)
        owner, dest_owner = Pubkey.new_unique(), Pubkey.new_unique()
        chain.fund_token(mint, owner, 10_000_000)

        plan = await composer.token_transfer(
            mint, owner, dest_owner, Decimal("2.5"), payer=owner
        )

        assert plan.base_units == 2_500_000
        assert plan.decimals == 6
        assert plan.creates_destination
        assert plan.setup[0].program_id == ASSOCIATED_TOKEN_PROGRAM_ID
        assert plan.setup[0].accounts[0].pubkey == owner
        assert plan.transfer.program_id == TOKEN_PROGRAM_ID

    async def test_token_transfer_existing_account(self, composer, chain):
        """Test no setup when the destination account exists."""
        mint = chain.add_mint(decimals=0)
        owner, dest_owner = Pubkey.new_unique(), Pubkey.new_unique()
        chain.fund_token(mint, owner, 5)
        chain.fund_token(mint, dest_owner, 0)

        plan = await composer.token_transfer(
            mint, owner, dest_owner, Decimal("3"), payer=owner
        )

        assert plan.setup == []
        assert not plan.creates_destination
        assert int.from_bytes(bytes(plan.transfer.data)[1:9], "little") == 3

    async def test_token_transfer_invalid_mint(self, composer):
        """Test unknown mints are rejected before any instruction."""
        with pytest.raises(InvalidMintError):
            await composer.token_transfer(
                Pubkey.new_unique(),
                Pubkey.new_unique(),
                Pubkey.new_unique(),
                Decimal("1"),
                payer=Pubkey.new_unique(),
            )

    async def test_token_transfer_excess_precision(self, composer, chain):
        """Test amounts finer than the mint decimals are parse errors."""
        mint = chain.add_mint(decimals=2)
        with pytest.raises(ParseError):
            await composer.token_transfer(
                mint,
                Pubkey.new_unique(),
                Pubkey.new_unique(),
                Decimal("0.001"),
                payer=Pubkey.new_unique(),
            )

    async def test_token_transfer_rejects_u64_overflow(self, composer, chain):
        """Test token amounts beyond u64 base units are parse errors."""
        mint = chain.add_mint(decimals=6)
        with pytest.raises(ParseError, match="too large to transfer"):
            await composer.token_transfer(
                mint,
                Pubkey.new_unique(),
                Pubkey.new_unique(),
                Decimal("20000000000000"),
                payer=Pubkey.new_unique(),
            )

    # ================================================================
    # Administrative instruction tests
    # ================================================================

    def test_create_wallet(self, composer, program):
        """Test the first role is the owner with all actions."""
        owner = Pubkey.new_unique()
        pending = composer.create_wallet(Pubkey.new_unique(), owner)

        payload = program.payload(pending.instructions[0])
        assert payload == {"op": "create", "authority": str(owner), "actions": ["all"]}
        assert pending.fee_payer == owner

    def test_add_and_remove_authority(self, composer, program, authority):
        """Test role changes are built for the caller's role."""
        new_key = Pubkey.new_unique()
        added = composer.add_authority(authority, new_key)
        removed = composer.remove_authority(authority, Role(3, new_key))

        assert program.payload(added.instructions[0])["authority"] == str(new_key)
        assert program.payload(removed.instructions[0])["target"] == 3
        assert added.fee_payer == authority.caller
