"""Monitoring infrastructure."""

from swig_agent.infrastructure.monitoring.emojis import LogEmoji, ReplyEmoji
from swig_agent.infrastructure.monitoring.system_reporter import SystemReporter

__all__ = ["SystemReporter", "ReplyEmoji", "LogEmoji"]
