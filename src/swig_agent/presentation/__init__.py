"""Presentation layer: runtime adapter, reply formatting and CLI."""
