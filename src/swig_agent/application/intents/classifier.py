"""
Intent Classifier - independent yes/no decision per operation.

Each operation owns an ``IntentRule`` with two signal families:

- a lexical rule over named signals (``all_of`` AND at least one of
  ``any_of``, unless every signal in ``unless`` is present)
- trigger phrases: plain substrings, or regexes when they contain ".*"

A rule matches when either family matches. Several operations may
match one message; ranking them is left to the host runtime.
"""

import re
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from swig_agent.application.intents.signals import CASE_SENSITIVE_SIGNALS, SIGNALS
from swig_agent.infrastructure.monitoring import SystemReporter


class MessageSignals:
    """Lazily evaluated signal set for one message."""

    def __init__(self, text: Optional[str]):
        self.original = text or ""
        self.folded = self.original.lower()
        self._cache: Dict[str, bool] = {}

    def has(self, name: str) -> bool:
        if name not in self._cache:
            source = self.original if name in CASE_SENSITIVE_SIGNALS else self.folded
            self._cache[name] = bool(SIGNALS[name].search(source))
        return self._cache[name]

    def present(self) -> List[str]:
        """Names of all signals found in the message."""
        return [name for name in SIGNALS if self.has(name)]


@dataclass(frozen=True)
class IntentRule:
    """Lexical rule plus trigger phrases for one operation."""

    all_of: Tuple[str, ...] = ()
    any_of: Tuple[str, ...] = ()
    unless: Tuple[str, ...] = ()
    phrases: Tuple[str, ...] = ()

    def __post_init__(self):
        """Reject unknown signal names early."""
        for name in self.all_of + self.any_of + self.unless:
            if name not in SIGNALS:
                raise ValueError(f"Unknown intent signal: {name}")
        object.__setattr__(
            self, "_patterns", tuple(self._compile(p) for p in self.phrases)
        )

    @staticmethod
    def _compile(phrase: str):
        if ".*" in phrase:
            return re.compile(phrase)
        return None

    def lexical_match(self, signals: MessageSignals) -> bool:
        if not self.all_of:
            return False
        if not all(signals.has(name) for name in self.all_of):
            return False
        if self.any_of and not any(signals.has(name) for name in self.any_of):
            return False
        if self.unless and all(signals.has(name) for name in self.unless):
            return False
        return True

    def phrase_match(self, signals: MessageSignals) -> bool:
        text = signals.folded
        for phrase, pattern in zip(self.phrases, self._patterns):
            if pattern is not None:
                if pattern.search(text):
                    return True
            elif phrase in text:
                return True
        return False

    def matches(self, text: Optional[str]) -> bool:
        signals = text if isinstance(text, MessageSignals) else MessageSignals(text)
        return self.lexical_match(signals) or self.phrase_match(signals)


class IntentClassifier:
    """
    Evaluate every operation's rule against a message.

    Args:
        rules: (operation name, rule) pairs in catalogue order
        reporter: Optional SystemReporter for logging
    """

    def __init__(
        self,
        rules: Iterable[Tuple[str, IntentRule]],
        reporter: Optional[SystemReporter] = None,
    ):
        self.rules: Sequence[Tuple[str, IntentRule]] = tuple(rules)
        self.reporter = reporter or SystemReporter(
            name="intent_classifier", level=20, verbose=1
        )

    @classmethod
    def for_operations(cls, operations, reporter: Optional[SystemReporter] = None):
        """Build a classifier from operation strategies."""
        return cls(((op.name, op.intent) for op in operations), reporter=reporter)

    def classify(self, text: Optional[str]) -> List[str]:
        """
        Names of all operations whose rule matches, in catalogue order.

        Args:
            text: Raw message text

        Returns:
            Matching operation names (possibly empty, possibly several)
        """
        signals = MessageSignals(text)
        matched = [name for name, rule in self.rules if rule.matches(signals)]
        self.reporter.debug(
            f"signals={signals.present()} matched={matched}",
            context="IntentClassifier",
        )
        return matched
