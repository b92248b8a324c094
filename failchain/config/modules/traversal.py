# failchain/config/modules/traversal.py
"""
Traversal Configuration

Controls how a cause chain is walked.
"""

from dataclasses import dataclass
from .base import SectionConfig


@dataclass(frozen=True)
class TraversalConfig(SectionConfig):
    """
    Traversal configuration.

    follow_context: If True, an implicit __context__ link counts as the cause
        when no explicit __cause__ is set (and the context is not suppressed)
    """

    follow_context: bool = True

    @classmethod
    def default(cls) -> "TraversalConfig":
        return cls()

    @classmethod
    def explicit_only(cls) -> "TraversalConfig":
        """Only follow ``raise ... from ...`` links"""
        return cls(follow_context=False)
