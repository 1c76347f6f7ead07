"""
Solana blockchain utilities.

Helper functions for address derivation and key loading.
"""

import json
from typing import Optional, Tuple

import base58
from solders.keypair import Keypair
from solders.pubkey import Pubkey
from spl.token.instructions import get_associated_token_address

from swig_agent.domain.exceptions import ConfigurationError, ParseError
from swig_agent.domain.value_objects import WalletAddress

SWIG_SEED = b"swig"

WALLET_NOT_CONFIGURED = (
    "Solana wallet not configured. "
    "Please set SOLANA_PRIVATE_KEY in runtime settings."
)


def derive_swig_pda(wallet_id: bytes, program_id: Pubkey) -> Tuple[Pubkey, int]:
    """
    Derive the Swig wallet PDA for a wallet id.

    The agent always uses the owner's public key bytes as wallet id, so
    each key owns exactly one wallet.

    Args:
        wallet_id: 32-byte wallet id
        program_id: Swig program id

    Returns:
        Tuple of (wallet_address, bump_seed)
    """
    return Pubkey.find_program_address([SWIG_SEED, bytes(wallet_id)], program_id)


def derive_associated_token_address(mint: Pubkey, owner: Pubkey) -> Pubkey:
    """Associated token account of (mint, owner); owner may be a PDA."""
    return get_associated_token_address(owner, mint)


def to_pubkey(value: str, label: str = "address") -> Pubkey:
    """
    Parse a user-supplied base58 address.

    Raises:
        ParseError: If the string is not a valid address
    """
    if not WalletAddress.is_valid(value):
        raise ParseError(f"Invalid {label}: {value}", details={label: value})
    try:
        return Pubkey.from_string(value)
    except ValueError as e:
        raise ParseError(f"Invalid {label}: {value}", details={label: value}) from e


def load_keypair(secret: Optional[str]) -> Keypair:
    """
    Load the caller keypair from SOLANA_PRIVATE_KEY material.

    Accepts a JSON byte array ("[12, 34, ...]") or a base58 string.

    Raises:
        ConfigurationError: If the key is absent or unparseable
    """
    if not secret or not secret.strip():
        raise ConfigurationError(WALLET_NOT_CONFIGURED)

    secret = secret.strip()
    try:
        if secret.startswith("[") and secret.endswith("]"):
            return Keypair.from_bytes(bytes(json.loads(secret)))
        return Keypair.from_bytes(base58.b58decode(secret))
    except (ValueError, TypeError) as e:
        # Never echo the key material
        raise ConfigurationError(
            WALLET_NOT_CONFIGURED,
            details={"reason": type(e).__name__},
        ) from e
