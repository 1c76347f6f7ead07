"""Operation strategies."""

from swig_agent.application.operations.authorities import (
    AddSwigAuthority,
    GetSwigAuthorities,
    RemoveSwigAuthority,
)
from swig_agent.application.operations.balances import (
    GetSwigBalance,
    GetSwigTokenBalance,
)
from swig_agent.application.operations.base import (
    ActionExample,
    Operation,
    OperationCategory,
    OperationContext,
    OperationPlan,
)
from swig_agent.application.operations.catalogue import (
    OPERATION_TYPES,
    default_operations,
)
from swig_agent.application.operations.create_wallet import CreateSwig
from swig_agent.application.operations.deposits import (
    TransferTokenToSwig,
    TransferToSwig,
)
from swig_agent.application.operations.withdrawals import (
    SwigTransferTokenToAddress,
    SwigTransferTokenToAuthority,
    SwigTransferToAddress,
    SwigTransferToAuthority,
)

__all__ = [
    "ActionExample",
    "Operation",
    "OperationCategory",
    "OperationContext",
    "OperationPlan",
    "OPERATION_TYPES",
    "default_operations",
    "CreateSwig",
    "GetSwigBalance",
    "GetSwigTokenBalance",
    "GetSwigAuthorities",
    "AddSwigAuthority",
    "RemoveSwigAuthority",
    "TransferToSwig",
    "TransferTokenToSwig",
    "SwigTransferToAddress",
    "SwigTransferToAuthority",
    "SwigTransferTokenToAddress",
    "SwigTransferTokenToAuthority",
]
