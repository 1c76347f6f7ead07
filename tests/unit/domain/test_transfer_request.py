"""
Unit tests for TransferRequest entity.

Usage:
    pytest tests/unit/domain/test_transfer_request.py
"""

from decimal import Decimal

import pytest
from solders.pubkey import Pubkey

from swig_agent.domain.entities import Destination, DestinationKind, TransferRequest


class TestTransferRequest:
    """Unit tests for TransferRequest."""

    # ================================================================
    # Creation tests
    # ================================================================

    def test_outbound_to_address(self):
        """Test a wallet-funded transfer to an address."""
        recipient = Pubkey.new_unique()
        request = TransferRequest(
            operation="SWIG_TRANSFER_TO_ADDRESS",
            amount=Decimal("1.5"),
            destination=Destination.to_address(recipient),
        )

        assert request.source_is_wallet
        assert not request.is_token
        assert request.to_dict()["destination"] == {
            "kind": "address",
            "address": str(recipient),
            "role_id": None,
        }

    def test_inbound_to_swig(self):
        """Test a caller-funded transfer into the wallet."""
        request = TransferRequest(
            operation="TRANSFER_TO_SWIG",
            amount=Decimal("2"),
            destination=Destination.swig(),
            source_is_wallet=False,
        )
        assert request.destination.kind == DestinationKind.SWIG

    # ================================================================
    # Validation tests
    # ================================================================

    @pytest.mark.parametrize("amount", [Decimal("0"), Decimal("-1"), Decimal("NaN")])
    def test_non_positive_amount_rejected(self, amount):
        """Test amount must be positive and finite."""
        with pytest.raises(ValueError, match="positive"):
            TransferRequest(
                operation="X",
                amount=amount,
                destination=Destination.to_address(Pubkey.new_unique()),
            )

    def test_wallet_cannot_pay_itself(self):
        """Test a wallet-funded transfer cannot target the wallet."""
        with pytest.raises(ValueError, match="itself"):
            TransferRequest(
                operation="X", amount=Decimal("1"), destination=Destination.swig()
            )

    def test_caller_funded_must_target_wallet(self):
        """Test a caller-funded transfer must target the wallet."""
        with pytest.raises(ValueError, match="target the wallet"):
            TransferRequest(
                operation="X",
                amount=Decimal("1"),
                destination=Destination.to_address(Pubkey.new_unique()),
                source_is_wallet=False,
            )

    def test_role_destination_needs_target(self):
        """Test a role destination needs a role id or address."""
        with pytest.raises(ValueError):
            Destination.to_role()
