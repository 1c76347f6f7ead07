"""
Entity Extractor - pulls amounts, addresses, role ids and mints out of text.

Extraction is best effort and never raises: anything not found is
reported as None (or an empty tuple) and the calling operation decides
whether it was required.
"""

import re
from dataclasses import dataclass, replace
from decimal import Decimal, InvalidOperation
from typing import Iterable, Optional, Tuple

ADDRESS_CHARS = r"[1-9A-HJ-NP-Za-km-z]{32,44}"

AMOUNT_RE = re.compile(r"(?<![\w.])(\d+(?:\.\d+)?)")
BASE58_RUN_RE = re.compile(r"[1-9A-HJ-NP-Za-km-z]{32,}")
ADDRESS_RE = re.compile(rf"\b{ADDRESS_CHARS}\b")
ROLE_RE = re.compile(r"\brole\s*(?:id\s*)?(\d+)\b", re.IGNORECASE)

# "mint <addr>", "token <addr>" and "mint: <addr>" all name the mint
MINT_KEYWORDS = ("mint", "token")
MINT_SEPARATOR = r"[\s:]+"


def _alternation(words: Iterable[str]) -> str:
    return "|".join(re.escape(word) for word in words)


@dataclass(frozen=True)
class ExtractedEntities:
    """Entities found in one message."""

    text: str
    amount: Optional[Decimal] = None
    addresses: Tuple[str, ...] = ()
    role_id: Optional[int] = None
    mint: Optional[str] = None

    @property
    def first_address(self) -> Optional[str]:
        return self.addresses[0] if self.addresses else None

    def address_after(
        self,
        keywords: Iterable[str],
        qualifiers: Iterable[str] = (),
        separator: str = r"\s+",
    ) -> Optional[str]:
        """
        First address directly following one of ``keywords``.

        An optional qualifier word may sit between keyword and address,
        e.g. ``address_after(["to"], ["authority"])`` matches both
        "to <addr>" and "to authority <addr>".
        """
        qualifier_group = ""
        qualifiers = list(qualifiers)
        if qualifiers:
            qualifier_group = rf"(?:(?:{_alternation(qualifiers)}){separator})?"
        pattern = re.compile(
            rf"\b(?:{_alternation(keywords)}){separator}{qualifier_group}"
            rf"({ADDRESS_CHARS})\b",
            re.IGNORECASE,
        )
        match = pattern.search(self.text)
        return match.group(1) if match else None


class EntityExtractor:
    """Stateless extractor; safe to share between concurrent operations."""

    def extract(self, text: Optional[str]) -> ExtractedEntities:
        """
        Extract all entities from raw message text.

        Args:
            text: Message text in its original case (addresses are case
                sensitive)

        Returns:
            ExtractedEntities with absent values left as None
        """
        text = text or ""
        entities = ExtractedEntities(
            text=text,
            amount=self.extract_amount(text),
            addresses=self.extract_addresses(text),
            role_id=self.extract_role_id(text),
        )
        return replace(
            entities,
            mint=entities.address_after(MINT_KEYWORDS, separator=MINT_SEPARATOR),
        )

    @staticmethod
    def extract_amount(text: str) -> Optional[Decimal]:
        """
        First integer or decimal number outside an address.

        A unit may be glued on ("0.5sol", "2SOL"); digits that open a
        base58 run of address length are part of that address.
        """
        address_spans = [run.span() for run in BASE58_RUN_RE.finditer(text)]
        for match in AMOUNT_RE.finditer(text):
            start, end = match.span(1)
            if any(left <= start and end <= right for left, right in address_spans):
                continue
            try:
                return Decimal(match.group(1))
            except InvalidOperation:
                return None
        return None

    @staticmethod
    def extract_addresses(text: str) -> Tuple[str, ...]:
        """All base58-shaped tokens, left to right."""
        return tuple(ADDRESS_RE.findall(text))

    @staticmethod
    def extract_role_id(text: str) -> Optional[int]:
        """Number following "role" or "role id"."""
        match = ROLE_RE.search(text)
        return int(match.group(1)) if match else None
