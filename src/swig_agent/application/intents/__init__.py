"""Intent classification."""

from swig_agent.application.intents.classifier import (
    IntentClassifier,
    IntentRule,
    MessageSignals,
)
from swig_agent.application.intents.signals import SIGNALS

__all__ = ["IntentClassifier", "IntentRule", "MessageSignals", "SIGNALS"]
