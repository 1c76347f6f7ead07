"""
Unit tests for EntityExtractor.

Tests amount, address, role id and mint extraction from raw text.

Usage:
    pytest tests/unit/application/test_entity_extractor.py
"""

from decimal import Decimal

import pytest

from swig_agent.application.parsing import EntityExtractor

RECIPIENT = "2dr69TRDpT6LNec6XSuLSAyyxcjGiivn7T7MgL1udtms"
MINT = "4zMMC9srt5Ri5X14GAgXhaHii3GnPAEERYPJgZJDncDU"


class TestEntityExtractor:
    """Unit tests for EntityExtractor."""

    def setup_method(self):
        self.extractor = EntityExtractor()

    # ================================================================
    # Amount tests
    # ================================================================

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("transfer 1.5 SOL to swig", Decimal("1.5")),
            ("send 100 tokens", Decimal("100")),
            ("fund swig with 0.000000001 SOL", Decimal("0.000000001")),
            ("transfer 2 then 3", Decimal("2")),
            ("transfer 0.5sol to swig", Decimal("0.5")),
            (f"send 2SOL from swig to {RECIPIENT}", Decimal("2")),
        ],
    )
    def test_amount_found(self, text, expected):
        """Test the first standalone number is recovered exactly."""
        assert self.extractor.extract(text).amount == expected

    def test_amount_absent(self):
        """Test absence is reported as None."""
        assert self.extractor.extract("swig balance").amount is None

    def test_digits_inside_address_are_not_amounts(self):
        """Test digits embedded in an address are ignored."""
        entities = self.extractor.extract(f"add authority {RECIPIENT}")
        assert entities.amount is None

    def test_amount_before_address(self):
        """Test the amount wins over later address digits."""
        entities = self.extractor.extract(
            f"transfer 1.5 SOL from swig to {RECIPIENT}"
        )
        assert entities.amount == Decimal("1.5")

    # ================================================================
    # Address tests
    # ================================================================

    def test_addresses_left_to_right(self):
        """Test every address is returned in order."""
        entities = self.extractor.extract(
            f"transfer 100 tokens {MINT} from swig to {RECIPIENT}"
        )
        assert entities.addresses == (MINT, RECIPIENT)
        assert entities.first_address == MINT

    def test_plain_words_are_not_addresses(self):
        """Test ordinary words are too short to be addresses."""
        assert self.extractor.extract("create swig please").addresses == ()

    def test_invalid_alphabet_rejected(self):
        """Test tokens with 0, O, I or l are not addresses."""
        assert self.extractor.extract("0" * 40).addresses == ()
        assert self.extractor.extract("l" * 40).addresses == ()

    def test_extract_never_raises_on_empty(self):
        """Test None and empty text yield empty entities."""
        entities = self.extractor.extract(None)
        assert entities.amount is None
        assert entities.addresses == ()
        assert entities.role_id is None
        assert entities.mint is None

    # ================================================================
    # Keyword tests
    # ================================================================

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("remove role 1", 1),
            ("send 1 SOL from swig to role id 3", 3),
            ("transfer to Role 12", 12),
            ("transfer to authority", None),
        ],
    )
    def test_role_id(self, text, expected):
        """Test the number after "role" or "role id"."""
        assert self.extractor.extract(text).role_id == expected

    def test_mint_keyword(self):
        """Test the address after "mint" is the mint."""
        entities = self.extractor.extract(
            f"transfer 100 tokens to {RECIPIENT} mint {MINT}"
        )
        assert entities.mint == MINT

    def test_address_after_with_qualifier(self):
        """Test "to authority <addr>" and "to <addr>" both resolve."""
        tagged = self.extractor.extract(f"send 1 SOL to authority {RECIPIENT}")
        plain = self.extractor.extract(f"send 1 SOL to {RECIPIENT}")

        assert tagged.address_after(["to"], ["authority"]) == RECIPIENT
        assert plain.address_after(["to"], ["authority"]) == RECIPIENT
        assert tagged.address_after(["to"]) is None

    def test_address_after_colon_separator(self):
        """Test a custom separator allows "token: <mint>"."""
        entities = self.extractor.extract(f"swig balance token: {MINT}")
        assert entities.address_after(["mint", "token"], separator=r"[\s:]+") == MINT

    @pytest.mark.parametrize(
        "text",
        [
            f"swig balance mint {MINT}",
            f"swig balance mint: {MINT}",
            f"swig balance token {MINT}",
            f"swig balance token: {MINT}",
        ],
    )
    def test_mint_tag_forms(self, text):
        """Test "mint" and "token", with or without a colon, tag the mint."""
        assert self.extractor.extract(text).mint == MINT

    def test_plural_tokens_does_not_tag_mint(self):
        """Test "tokens <addr>" leaves the mint to positional parsing."""
        entities = self.extractor.extract(f"send 50 tokens {MINT} to swig")
        assert entities.mint is None
        assert entities.addresses == (MINT,)
