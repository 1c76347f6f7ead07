"""Blockchain infrastructure."""

from swig_agent.infrastructure.blockchain.solana_chain_gateway import (
    SolanaChainGateway,
)
from swig_agent.infrastructure.blockchain.solana_transaction_submitter import (
    SolanaTransactionSubmitter,
)
from swig_agent.infrastructure.blockchain.solana_utils import (
    derive_associated_token_address,
    derive_swig_pda,
    load_keypair,
    to_pubkey,
)

__all__ = [
    "SolanaChainGateway",
    "SolanaTransactionSubmitter",
    "derive_swig_pda",
    "derive_associated_token_address",
    "load_keypair",
    "to_pubkey",
]
