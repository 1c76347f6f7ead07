"""
Unit tests for Solana utilities.

Usage:
    pytest tests/unit/infrastructure/test_solana_utils.py
"""

import json

import base58
import pytest
from solders.keypair import Keypair
from solders.pubkey import Pubkey
from spl.token.instructions import get_associated_token_address

from swig_agent.config.settings import SWIG_PROGRAM_ID
from swig_agent.domain.exceptions import ConfigurationError, ParseError
from swig_agent.domain.value_objects import WalletAddress
from swig_agent.infrastructure.blockchain import (
    derive_associated_token_address,
    derive_swig_pda,
    load_keypair,
    to_pubkey,
)


class TestKeyLoading:
    """Unit tests for load_keypair."""

    def test_base58_key(self):
        """Test a base58-encoded 64-byte secret."""
        keypair = Keypair()
        secret = base58.b58encode(bytes(keypair)).decode()

        assert load_keypair(secret).pubkey() == keypair.pubkey()

    def test_json_array_key(self):
        """Test a JSON byte array secret (solana-keygen format)."""
        keypair = Keypair()
        secret = json.dumps(list(bytes(keypair)))

        assert load_keypair(secret).pubkey() == keypair.pubkey()

    @pytest.mark.parametrize("secret", [None, "", "   "])
    def test_missing_key(self, secret):
        """Test absent key material."""
        with pytest.raises(ConfigurationError, match="SOLANA_PRIVATE_KEY"):
            load_keypair(secret)

    @pytest.mark.parametrize("secret", ["0OIl-not-base58", "[1, 2, 3]", "3yZe7d"])
    def test_malformed_key_not_echoed(self, secret):
        """Test unparseable keys fail without echoing the material."""
        with pytest.raises(ConfigurationError) as exc:
            load_keypair(secret)
        assert secret not in exc.value.message
        assert secret not in str(exc.value.details)


class TestDerivation:
    """Unit tests for address derivation."""

    def test_swig_pda_deterministic(self):
        """Test one owner key maps to one wallet address."""
        owner = Keypair().pubkey()
        program_id = Pubkey.from_string(SWIG_PROGRAM_ID)

        first, bump = derive_swig_pda(bytes(owner), program_id)
        second, _ = derive_swig_pda(bytes(owner), program_id)

        assert first == second
        assert 0 <= bump <= 255
        assert not first.is_on_curve()

    def test_distinct_owners_distinct_wallets(self):
        """Test different owners get different wallets."""
        program_id = Pubkey.from_string(SWIG_PROGRAM_ID)
        a, _ = derive_swig_pda(bytes(Keypair().pubkey()), program_id)
        b, _ = derive_swig_pda(bytes(Keypair().pubkey()), program_id)
        assert a != b

    def test_associated_token_address_argument_order(self):
        """Test (mint, owner) maps onto spl's (owner, mint)."""
        mint, owner = Pubkey.new_unique(), Pubkey.new_unique()
        assert derive_associated_token_address(mint, owner) == (
            get_associated_token_address(owner, mint)
        )


class TestAddressParsing:
    """Unit tests for to_pubkey and WalletAddress."""

    def test_valid_address(self):
        """Test a valid address parses."""
        key = Keypair().pubkey()
        assert to_pubkey(str(key)) == key

    @pytest.mark.parametrize("value", ["short", "0" * 40, "x" * 50])
    def test_invalid_address(self, value):
        """Test malformed addresses are parse errors naming the label."""
        with pytest.raises(ParseError, match="Invalid mint"):
            to_pubkey(value, "mint")

    def test_wallet_address_truncated(self):
        """Test display truncation."""
        address = WalletAddress("2dr69TRDpT6LNec6XSuLSAyyxcjGiivn7T7MgL1udtms")
        assert address.truncated() == "2dr69T...dtms"

    def test_wallet_address_rejects_bad_length(self):
        """Test length validation."""
        with pytest.raises(ValueError, match="length"):
            WalletAddress("abc")
