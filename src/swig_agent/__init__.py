"""
Swig Agent - conversational operations for Swig smart wallets on Solana.
"""

__version__ = "0.1.0"
