"""
PendingTransaction entity - instruction envelope awaiting submission.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from solders.hash import Hash
from solders.instruction import Instruction
from solders.pubkey import Pubkey


@dataclass
class PendingTransaction:
    """
    Ordered instruction list plus fee payer and freshness token.

    Business rules:
    - At least one instruction
    - Blockhash is filled in by the submitter immediately before signing
    - Never persisted; lives for one operation only
    """

    instructions: List[Instruction]
    fee_payer: Pubkey
    recent_blockhash: Optional[Hash] = field(default=None)

    def __post_init__(self):
        """Validate envelope."""
        self.instructions = list(self.instructions)
        if not self.instructions:
            raise ValueError("Transaction requires at least one instruction")

    @property
    def program_ids(self) -> List[Pubkey]:
        """Program ids of the instructions, in order."""
        return [ix.program_id for ix in self.instructions]
