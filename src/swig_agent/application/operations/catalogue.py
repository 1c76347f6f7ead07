"""
Operation catalogue.

Order matters only for hosts that pick the first match: more specific
operations come before the broader ones they overlap with.
"""

from typing import Tuple

from swig_agent.application.operations.authorities import (
    AddSwigAuthority,
    GetSwigAuthorities,
    RemoveSwigAuthority,
)
from swig_agent.application.operations.balances import (
    GetSwigBalance,
    GetSwigTokenBalance,
)
from swig_agent.application.operations.base import Operation
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

OPERATION_TYPES = (
    CreateSwig,
    SwigTransferTokenToAuthority,
    SwigTransferTokenToAddress,
    SwigTransferToAuthority,
    SwigTransferToAddress,
    TransferTokenToSwig,
    TransferToSwig,
    AddSwigAuthority,
    RemoveSwigAuthority,
    GetSwigAuthorities,
    GetSwigTokenBalance,
    GetSwigBalance,
)


def default_operations() -> Tuple[Operation, ...]:
    """Fresh instances of every supported operation."""
    return tuple(operation_type() for operation_type in OPERATION_TYPES)
