"""
Operation strategy base.

Each operation supplies its intent rule, turns extracted entities into a
typed request, and prepares an OperationPlan: an optional transaction
plus a ``describe`` callback that renders the outcome once the
signature (if any) is known. The OperationPipeline runs them all the
same way.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any, Callable, List, Optional, Tuple

from solders.pubkey import Pubkey

from swig_agent.application.authority_resolver import (
    DEFAULT_PURPOSE,
    AuthorityResolver,
)
from swig_agent.application.intents import IntentRule
from swig_agent.application.parsing import ExtractedEntities
from swig_agent.application.transaction_composer import TransactionComposer
from swig_agent.domain.entities import OperationResult, PendingTransaction
from swig_agent.domain.exceptions import ParseError
from swig_agent.domain.services import IChainStateGateway
from swig_agent.domain.value_objects import TokenAmount
from swig_agent.infrastructure.blockchain.solana_utils import to_pubkey
from swig_agent.infrastructure.monitoring import SystemReporter


class OperationCategory(str, Enum):
    """Feature-gating category of an operation."""

    ADMIN = "admin"
    READ = "read"
    TRANSFER = "transfer"
    AUTHORITY = "authority"


@dataclass(frozen=True)
class ActionExample:
    """One sample exchange shown to the host runtime."""

    user: str
    reply: str

    def to_messages(self, action: str) -> List[dict]:
        """Runtime conversation shape: a user turn, then the agent turn."""
        return [
            {"name": "{{user1}}", "content": {"text": self.user}},
            {
                "name": "{{agent}}",
                "content": {"text": self.reply, "actions": [action]},
            },
        ]


@dataclass
class OperationContext:
    """Collaborators and per-call facts shared by every stage."""

    caller: Pubkey
    wallet_address: Pubkey
    gateway: IChainStateGateway
    resolver: AuthorityResolver
    composer: TransactionComposer
    reporter: SystemReporter


@dataclass
class OperationPlan:
    """Prepared transaction (None for read-only outcomes) and its renderer."""

    describe: Callable[[Optional[str]], OperationResult]
    transaction: Optional[PendingTransaction] = None
    details: dict = field(default_factory=dict)

    @property
    def requires_submission(self) -> bool:
        return self.transaction is not None


class Operation(ABC):
    """
    Strategy for one agent action.

    Subclasses set the class attributes and implement ``prepare``;
    ``parse`` defaults to "no entities needed".
    """

    name: str = ""
    description: str = ""
    similes: Tuple[str, ...] = ()
    examples: Tuple[ActionExample, ...] = ()
    category: OperationCategory = OperationCategory.READ
    intent: IntentRule = IntentRule()
    failure_prefix: str = ""
    failure_thought: str = ""
    authority_purpose: str = DEFAULT_PURPOSE

    def matches(self, text: Optional[str]) -> bool:
        """Intent predicate for the raw message text."""
        return self.intent.matches(text)

    def parse(self, entities: ExtractedEntities) -> Any:
        """
        Turn extracted entities into a typed request.

        Raises:
            ParseError: If a required entity is missing or malformed
        """
        return None

    @abstractmethod
    async def prepare(self, ctx: OperationContext, request: Any) -> OperationPlan:
        """
        Resolve authorities and compose the transaction.

        Raises:
            SwigAgentError: Any resolution or composition failure
        """

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"


# ====================================================================
# Parsing helpers shared by operations
# ====================================================================


def require_amount(entities: ExtractedEntities, guidance: str) -> Decimal:
    """Positive amount or ParseError with the given usage guidance."""
    if entities.amount is None:
        raise ParseError(guidance)
    if entities.amount <= 0:
        raise ParseError(
            f"Amount must be greater than zero, got {entities.amount}",
            details={"amount": str(entities.amount)},
        )
    return entities.amount


def require_address(value: Optional[str], guidance: str, label: str = "address") -> Pubkey:
    """Pubkey for a found address string or ParseError with guidance."""
    if not value:
        raise ParseError(guidance)
    return to_pubkey(value, label)


def optional_address(value: Optional[str], label: str = "address") -> Optional[Pubkey]:
    return to_pubkey(value, label) if value else None


def short_mint(mint: Pubkey) -> str:
    """Display symbol for a mint without metadata: first 8 chars."""
    return f"{str(mint)[:8]}..."


def display_amount(amount: Decimal) -> str:
    """Plain decimal text for a user-supplied amount ("1.50" -> "1.5")."""
    return TokenAmount(amount).display()
