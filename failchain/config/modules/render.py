# failchain/config/modules/render.py
"""
Render Configuration

Controls the text produced by stringify_exception.
"""

from dataclasses import dataclass

from .base import SectionConfig


@dataclass(frozen=True)
class RenderConfig(SectionConfig):
    """
    Render configuration.

    include_suppressed: If True, suppressed companions of the rendered failure
        are appended under a "Suppressed: " header
    """

    include_suppressed: bool = True

    @classmethod
    def default(cls) -> "RenderConfig":
        return cls()
