"""
Unit tests for the intent rules and IntentClassifier.

Usage:
    pytest tests/unit/application/test_intent_classifier.py
"""

import pytest

from swig_agent.application.intents import IntentClassifier, IntentRule
from swig_agent.application.intents.classifier import MessageSignals
from swig_agent.application.operations import default_operations

RECIPIENT = "2dr69TRDpT6LNec6XSuLSAyyxcjGiivn7T7MgL1udtms"
MINT = "4zMMC9srt5Ri5X14GAgXhaHii3GnPAEERYPJgZJDncDU"


@pytest.fixture
def classifier(reporter) -> IntentClassifier:
    return IntentClassifier.for_operations(default_operations(), reporter=reporter)


class TestIntentRule:
    """Unit tests for IntentRule."""

    # ================================================================
    # Lexical tests
    # ================================================================

    def test_all_of_requires_every_signal(self):
        """Test all_of signals must all be present."""
        rule = IntentRule(all_of=("swig", "transfer"))
        assert rule.matches("transfer from swig")
        assert not rule.matches("swig only")

    def test_any_of_requires_one(self):
        """Test any_of needs at least one signal."""
        rule = IntentRule(all_of=("swig",), any_of=("from", "address"))
        assert rule.matches("out of swig")
        assert not rule.matches("into swig")

    def test_unless_blocks_when_all_present(self):
        """Test unless excludes only when every listed signal is present."""
        rule = IntentRule(all_of=("create", "swig"), unless=("fund", "amount"))
        assert rule.matches("create swig")
        assert rule.matches("create swig and fund it")
        assert not rule.matches("create a swig then fund it with 2 SOL")

    def test_unknown_signal_rejected(self):
        """Test misspelled signal names fail at definition time."""
        with pytest.raises(ValueError, match="Unknown intent signal"):
            IntentRule(all_of=("swgi",))

    # ================================================================
    # Phrase tests
    # ================================================================

    def test_literal_phrase_case_folded(self):
        """Test literal phrases match case-insensitively."""
        rule = IntentRule(phrases=("swig balance",))
        assert rule.matches("What is my SWIG Balance?")

    def test_wildcard_phrase(self):
        """Test phrases containing .* are regexes."""
        rule = IntentRule(phrases=("transfer.*from.*swig",))
        assert rule.matches("Transfer 2 SOL out from my swig")
        assert not rule.matches("transfer to swig")

    def test_address_signal_uses_original_case(self):
        """Test the address signal sees case-sensitive base58."""
        signals = MessageSignals(f"balance of {RECIPIENT}")
        assert signals.has("address")
        # Lowercased, "L" becomes the excluded "l"
        assert MessageSignals("L" * 40).has("address")
        assert not MessageSignals("l" * 40).has("address")

    def test_empty_text_matches_nothing(self):
        """Test None text is handled."""
        assert not IntentRule(all_of=("swig",), phrases=("swig",)).matches(None)


class TestIntentClassifier:
    """Unit tests for IntentClassifier over the full catalogue."""

    # ================================================================
    # Scenario tests
    # ================================================================

    def test_create_swig(self, classifier):
        """Test "create swig" selects CREATE_SWIG."""
        assert "CREATE_SWIG" in classifier.classify("create swig")

    def test_address_transfer_without_authority_word(self, classifier):
        """Test a plain recipient routes to the address transfer."""
        matched = classifier.classify(f"transfer 1.5 SOL from swig to {RECIPIENT}")

        assert "SWIG_TRANSFER_TO_ADDRESS" in matched
        assert "SWIG_TRANSFER_TO_AUTHORITY" not in matched

    def test_authority_transfer(self, classifier):
        """Test "to authority <addr>" selects the authority transfer."""
        matched = classifier.classify(
            f"transfer 1.5 SOL from swig to authority {RECIPIENT}"
        )
        assert "SWIG_TRANSFER_TO_AUTHORITY" in matched

    def test_token_transfer_to_address(self, classifier):
        """Test token transfers out of the wallet."""
        matched = classifier.classify(
            f"transfer 100 tokens mint {MINT} from swig to {RECIPIENT}"
        )
        assert "SWIG_TRANSFER_TOKEN_TO_ADDRESS" in matched

    def test_deposit(self, classifier):
        """Test "transfer 1 SOL to swig" selects TRANSFER_TO_SWIG."""
        assert "TRANSFER_TO_SWIG" in classifier.classify("transfer 1 SOL to swig")

    def test_balance_queries(self, classifier):
        """Test SOL and token balance queries are distinguished."""
        assert classifier.classify("swig balance") == ["GET_SWIG_BALANCE"]
        matched = classifier.classify(f"get swig token balance for {MINT}")
        assert "GET_SWIG_TOKEN_BALANCE" in matched
        assert "GET_SWIG_BALANCE" not in matched

    def test_authority_management(self, classifier):
        """Test add, remove and list authority phrases."""
        assert "ADD_SWIG_AUTHORITY" in classifier.classify(f"add authority {RECIPIENT}")
        assert "REMOVE_SWIG_AUTHORITY" in classifier.classify("remove authority role 1")
        assert "GET_SWIG_AUTHORITIES" in classifier.classify("list authorities")

    def test_remove_by_role_phrasing(self, classifier):
        """Test the role-id phrasing suggested in the removal guidance matches."""
        assert classifier.classify("remove role 1") == ["REMOVE_SWIG_AUTHORITY"]
        assert "REMOVE_SWIG_AUTHORITY" in classifier.classify("revoke role 2 on swig")

    def test_unrelated_text(self, classifier):
        """Test unrelated chatter matches nothing."""
        assert classifier.classify("hello, how are you?") == []
