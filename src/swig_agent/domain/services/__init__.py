"""
Domain services package.
"""

from swig_agent.domain.services.i_chain_state_gateway import IChainStateGateway
from swig_agent.domain.services.i_swig_program import ISwigProgram
from swig_agent.domain.services.i_transaction_submitter import (
    ITransactionSubmitter,
)

__all__ = [
    "ISwigProgram",
    "IChainStateGateway",
    "ITransactionSubmitter",
]
