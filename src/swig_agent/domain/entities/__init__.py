"""Domain entities."""

from swig_agent.domain.entities.operation_result import OperationResult
from swig_agent.domain.entities.pending_transaction import PendingTransaction
from swig_agent.domain.entities.token_account import TokenAccount
from swig_agent.domain.entities.transfer_request import (
    Destination,
    DestinationKind,
    TransferRequest,
)
from swig_agent.domain.entities.wallet import ALL_ACTIONS, Role, Wallet

__all__ = [
    "Wallet",
    "Role",
    "ALL_ACTIONS",
    "TokenAccount",
    "TransferRequest",
    "Destination",
    "DestinationKind",
    "PendingTransaction",
    "OperationResult",
]
