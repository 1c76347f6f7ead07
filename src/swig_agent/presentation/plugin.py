"""
Agent runtime adapter.

Exposes each enabled operation as an action with the shape agent
runtimes expect: name, similes, description, examples, ``validate(message)``
and ``handler(message, callback, responses)``.
"""

from typing import Any, Dict, List, Optional, Tuple, Union

from swig_agent.application.operations import Operation
from swig_agent.application.pipeline import OperationPipeline
from swig_agent.application.selection import select_operations
from swig_agent.config.settings import Settings
from swig_agent.presentation.formatter import ReplyCallback
from swig_agent.presentation.schemas import Message, ResponseContent

MessageLike = Union[Message, Dict[str, Any]]


def as_message(message: MessageLike) -> Message:
    """Accept a Message or a raw runtime dict (``content.text`` or ``text``)."""
    if isinstance(message, Message):
        return message
    content = message.get("content") if isinstance(message, dict) else None
    if isinstance(content, dict):
        return Message(text=content.get("text") or "", source=content.get("source"))
    return Message.model_validate(message)


class SwigAction:
    """One operation bound to the shared pipeline."""

    def __init__(self, operation: Operation, pipeline: OperationPipeline):
        self.operation = operation
        self.pipeline = pipeline

    @property
    def name(self) -> str:
        return self.operation.name

    @property
    def similes(self) -> Tuple[str, ...]:
        return self.operation.similes

    @property
    def description(self) -> str:
        return self.operation.description

    @property
    def examples(self) -> List[List[dict]]:
        """Sample conversations in the runtime message shape."""
        return [example.to_messages(self.name) for example in self.operation.examples]

    async def validate(self, message: MessageLike) -> bool:
        """Whether the message expresses this action's intent."""
        return self.operation.matches(as_message(message).text)

    async def handler(
        self,
        message: MessageLike,
        callback: Optional[ReplyCallback] = None,
        responses: Optional[List[Any]] = None,
    ) -> ResponseContent:
        """
        Execute the action and report the reply.

        The payload is returned, and also sent to ``callback`` and written
        to ``responses[0]`` when the host supplies them.
        """
        content = await self.pipeline.run(self.operation, as_message(message))
        return await self.pipeline.formatter.deliver(content, callback, responses)

    def __repr__(self) -> str:
        return f"<SwigAction {self.name}>"


class SwigPlugin:
    """
    Enabled Swig actions for one runtime start.

    The action tuple is computed once from the settings and never mutated.
    """

    name = "swig"
    description = (
        "Swig smart wallet actions: create wallets, query balances, manage "
        "authorities and move SOL or SPL tokens"
    )

    def __init__(
        self,
        settings: Settings,
        pipeline: OperationPipeline,
        operations: Optional[Tuple[Operation, ...]] = None,
    ):
        selected = select_operations(settings, operations)
        self.actions: Tuple[SwigAction, ...] = tuple(
            SwigAction(operation, pipeline) for operation in selected
        )

    @property
    def action_names(self) -> List[str]:
        return [action.name for action in self.actions]

    def get_action(self, name: str) -> Optional[SwigAction]:
        """Action by canonical name or simile."""
        for action in self.actions:
            if action.name == name or name in action.similes:
                return action
        return None

    async def matching_actions(self, message: MessageLike) -> List[SwigAction]:
        """Every action whose intent matches, in catalogue order."""
        return [action for action in self.actions if await action.validate(message)]
