"""
Response Formatter - turns outcomes into reply payloads.

The formatter is the last stage and never raises.
"""

from typing import Any, Awaitable, Callable, List, Optional

from swig_agent.domain.entities import OperationResult
from swig_agent.domain.exceptions import FeatureDisabledError, SwigAgentError
from swig_agent.infrastructure.monitoring import ReplyEmoji, SystemReporter
from swig_agent.presentation.schemas import (
    TERMINAL_ACTION,
    ResponseContent,
    ResponseSlot,
)

ReplyCallback = Callable[[ResponseContent], Awaitable[Any]]


class ResponseFormatter:
    """Build success/failure payloads and deliver them to the host."""

    def __init__(self, reporter: Optional[SystemReporter] = None):
        self.reporter = reporter or SystemReporter(
            name="response_formatter", level=20, verbose=1
        )

    @staticmethod
    def _actions(operation) -> List[str]:
        return [operation.name, TERMINAL_ACTION]

    def success(
        self, operation, result: OperationResult, source: Optional[str] = None
    ) -> ResponseContent:
        return ResponseContent(
            text=result.summary,
            thought=result.thought,
            actions=self._actions(operation),
            source=source,
        )

    def failure(
        self, operation, error: BaseException, source: Optional[str] = None
    ) -> ResponseContent:
        """
        Failure payload for any error.

        Disabled features keep their own text and thought; everything else
        reads "❌ Failed to <action>: <cause>" with the operation's thought.
        """
        try:
            if isinstance(error, FeatureDisabledError):
                return ResponseContent(
                    text=error.message,
                    thought=error.thought,
                    actions=self._actions(operation),
                    source=source,
                )

            if isinstance(error, SwigAgentError):
                cause = error.message
            else:
                cause = str(error) or "Unknown error"

            return ResponseContent(
                text=f"{ReplyEmoji.FAILURE} Failed to {operation.failure_prefix}: {cause}",
                thought=operation.failure_thought,
                actions=self._actions(operation),
                source=source,
            )
        except Exception as e:
            self.reporter.critical(
                f"Could not format failure: {e}", context="ResponseFormatter"
            )
            return ResponseContent(
                text=f"{ReplyEmoji.FAILURE} Operation failed: Unknown error",
                thought="The operation failed.",
                actions=[str(getattr(operation, "name", "UNKNOWN")), TERMINAL_ACTION],
                source=source,
            )

    async def deliver(
        self,
        content: ResponseContent,
        callback: Optional[ReplyCallback] = None,
        responses: Optional[List[Any]] = None,
    ) -> ResponseContent:
        """
        Mirror a payload to the host's response slot and callback.

        ``responses[0].content`` is overwritten when a slot is supplied.
        Callback errors are logged, never raised.
        """
        if responses:
            slot = responses[0]
            if isinstance(slot, dict):
                slot["content"] = content.model_dump()
            elif isinstance(slot, ResponseSlot):
                slot.content = content
            else:
                try:
                    slot.content = content.model_dump()
                except AttributeError as e:
                    self.reporter.warning(
                        f"Response slot not writable: {e}",
                        context="ResponseFormatter",
                    )

        if callback is not None:
            try:
                await callback(content)
            except Exception as e:
                self.reporter.error(
                    f"Reply callback failed: {e}", context="ResponseFormatter"
                )

        return content
