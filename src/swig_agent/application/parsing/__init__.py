"""Message parsing."""

from swig_agent.application.parsing.entity_extractor import (
    ADDRESS_CHARS,
    EntityExtractor,
    ExtractedEntities,
)

__all__ = ["EntityExtractor", "ExtractedEntities", "ADDRESS_CHARS"]
