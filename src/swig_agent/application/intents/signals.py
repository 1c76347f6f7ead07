"""
Lexical signals shared by the intent rules.

Every signal except ``address`` is tested against the lowercased text.
``address`` is tested against the original text because base58 is case
sensitive ("L" is valid, "l" is not).
"""

import re

from swig_agent.application.parsing.entity_extractor import ADDRESS_CHARS

SIGNALS = {
    "swig": re.compile(r"\bswig\b"),
    "create": re.compile(r"\b(create|make|new|setup|initialize|start|build)\b"),
    "fund": re.compile(r"\b(transfer|send|fund|deposit)\b"),
    "transfer": re.compile(r"\b(transfer|send|pay)\b"),
    "amount": re.compile(r"\d+(?:\.\d+)?"),
    "from": re.compile(r"\b(from|out|using)\b"),
    "authority": re.compile(r"\b(authority|signer|role)\b"),
    "authorities": re.compile(r"\b(authorities|authority|signers|signer)\b"),
    "query": re.compile(r"\b(list|show|get|check|who|what)\b"),
    "token": re.compile(r"\b(token|spl|mint)\b"),
    "balance": re.compile(r"\b(balance|amount|how much)\b"),
    "address": re.compile(rf"\b{ADDRESS_CHARS}\b"),
}

CASE_SENSITIVE_SIGNALS = frozenset({"address"})
