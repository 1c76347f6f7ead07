"""
Unit tests for ResponseFormatter.

Usage:
    pytest tests/unit/presentation/test_formatter.py
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from swig_agent.application.operations import CreateSwig, GetSwigBalance, TransferToSwig
from swig_agent.application.selection import ensure_enabled
from swig_agent.domain.entities import OperationResult
from swig_agent.domain.exceptions import FeatureDisabledError, RPCError
from swig_agent.presentation.formatter import ResponseFormatter
from swig_agent.presentation.schemas import ResponseContent, ResponseSlot
from tests.conftest import make_settings


@pytest.fixture
def formatter(reporter) -> ResponseFormatter:
    return ResponseFormatter(reporter=reporter)


class TestResponseFormatter:
    """Unit tests for ResponseFormatter."""

    # ================================================================
    # Payload tests
    # ================================================================

    def test_success_payload(self, formatter):
        """Test success carries the summary, thought and terminal action."""
        result = OperationResult(summary="done", thought="it worked")

        content = formatter.success(CreateSwig(), result, source="discord")

        assert content.text == "done"
        assert content.thought == "it worked"
        assert content.actions == ["CREATE_SWIG", "REPLY"]
        assert content.source == "discord"

    def test_failure_from_agent_error(self, formatter):
        """Test agent errors use their message after the failure prefix."""
        content = formatter.failure(GetSwigBalance(), RPCError("node down"))

        assert content.text == "❌ Failed to get Swig wallet balance: node down"
        assert content.thought == GetSwigBalance.failure_thought

    def test_failure_from_unexpected_error(self, formatter):
        """Test an empty exception message reads as Unknown error."""
        content = formatter.failure(CreateSwig(), RuntimeError())

        assert content.text == "❌ Failed to create Swig wallet: Unknown error"

    def test_failure_feature_disabled(self, formatter):
        """Test disabled features keep their own text and thought."""
        settings = make_settings(SWIG_TRANSFERS_ENABLED=False)

        with pytest.raises(FeatureDisabledError) as exc:
            ensure_enabled(TransferToSwig(), settings)
        content = formatter.failure(TransferToSwig(), exc.value)

        assert "SWIG_TRANSFERS_ENABLED=true" in content.text
        assert content.thought == exc.value.thought
        assert content.actions == ["TRANSFER_TO_SWIG", "REPLY"]

    def test_failure_never_raises(self, formatter):
        """Test a broken operation object still yields a payload."""
        content = formatter.failure(object(), RPCError("x"))

        assert content.text.startswith("❌")
        assert content.actions[-1] == "REPLY"

    # ================================================================
    # Delivery tests
    # ================================================================

    async def test_deliver_to_dict_slot(self, formatter):
        """Test a dict response slot receives the dumped payload."""
        content = ResponseContent(text="hi", thought="t", actions=["X", "REPLY"])
        responses = [{"content": {"text": "old"}}]

        await formatter.deliver(content, responses=responses)

        assert responses[0]["content"]["text"] == "hi"
        assert responses[0]["content"]["actions"] == ["X", "REPLY"]

    async def test_deliver_to_typed_slot(self, formatter):
        """Test a ResponseSlot receives the payload object."""
        content = ResponseContent(text="hi", thought="t", actions=["X", "REPLY"])
        slot = ResponseSlot()

        returned = await formatter.deliver(content, responses=[slot])

        assert slot.content is content
        assert returned is content

    async def test_deliver_to_callback(self, formatter):
        """Test the callback receives the payload."""
        content = ResponseContent(text="hi", thought="t", actions=["X", "REPLY"])
        callback = AsyncMock()

        await formatter.deliver(content, callback=callback)

        callback.assert_awaited_once_with(content)

    async def test_callback_errors_are_swallowed(self, formatter):
        """Test a failing callback does not stop delivery."""
        content = ResponseContent(text="hi", thought="t", actions=["X", "REPLY"])
        callback = AsyncMock(side_effect=RuntimeError("socket closed"))
        slot = MagicMock()

        returned = await formatter.deliver(content, callback=callback, responses=[slot])

        assert returned is content
        assert slot.content["text"] == "hi"

    async def test_deliver_without_targets(self, formatter):
        """Test delivery with no slot or callback is a no-op."""
        content = ResponseContent(text="hi", thought="t", actions=["X", "REPLY"])
        assert await formatter.deliver(content, responses=[]) is content
